import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from machine.context import GameContext
from machine.models import GameConfig, Mode

from .session import GameSession
from .terminal import TerminalKeys, TerminalRenderer


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Console slot machine with basic and poker modes")
    parser.add_argument("--mode", choices=[mode.value for mode in Mode], help="Skip the mode menu")
    parser.add_argument("--seed", type=int, default=None, help="Seed the shuffles for a reproducible game")
    parser.add_argument("--points", type=int, default=100, help="Starting points")
    parser.add_argument("--frame-ms", type=int, default=100, help="Redraw interval in milliseconds")
    parser.add_argument("--no-color", action="store_true", help="Disable red hearts/diamonds")
    parser.add_argument("--log-level", default="INFO", help="Logging level used with --log-file")
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file (without it only warnings reach stderr, to keep the screen clean)",
    )
    return parser.parse_args(argv)


def configure_logging(args: argparse.Namespace) -> None:
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level.upper(), logging.INFO),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args)

    config = GameConfig(starting_points=args.points, frame_interval=args.frame_ms / 1000, seed=args.seed)
    renderer = TerminalRenderer(color=not args.no_color)
    mode = Mode(args.mode) if args.mode else None

    with TerminalKeys() as keys:
        ctx = GameContext.create(config, keys, renderer)
        session = GameSession(ctx, mode)
        renderer.begin()
        try:
            asyncio.run(session.run())
        except KeyboardInterrupt:
            renderer.append_text(["", "Session closed"])
        finally:
            renderer.end()


if __name__ == "__main__":
    main(sys.argv[1:])
