from __future__ import annotations

import os
import sys
import time
from typing import Callable, List, Optional, Sequence, Set, TextIO

from machine.cards import Card

CSI = "\033["
RED = CSI + "31m"
RESET = CSI + "0m"

FACE_DOWN_ROW = [
    " ____    ____    ____    ____    ____ ",
    "| ?  |  | ?  |  | ?  |  | ?  |  | ?  |",
    "|  ? |  |  ? |  |  ? |  |  ? |  |  ? |",
    "|____|  |____|  |____|  |____|  |____|",
]


class TerminalRenderer:
    """Redraws whole frames from the top-left corner using ANSI escapes."""

    def __init__(self, stream: Optional[TextIO] = None, *, color: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.color = color
        self._hidden_cursor = False

    def begin(self) -> None:
        self.stream.write(CSI + "?25l" + CSI + "H" + CSI + "2J")
        self._hidden_cursor = True
        self.stream.flush()

    def end(self) -> None:
        if self._hidden_cursor:
            self.stream.write(CSI + "?25h")
            self._hidden_cursor = False
        self.stream.write(RESET + "\n")
        self.stream.flush()

    def show_hand(self, points: int, cards: Sequence[Optional[Card]], footer: Sequence[str] = ()) -> None:
        lines = [f"Points: {points}", ""]
        lines += FACE_DOWN_ROW
        lines += self.hand_rows(cards)
        lines += FACE_DOWN_ROW
        self.show_text(lines + ["", *footer])

    def show_reels(self, points: int, grid: Sequence[Sequence[str]], footer: Sequence[str] = ()) -> None:
        lines = [f"Points: {points}", ""]
        for row in grid:
            lines += ["   ".join(row), ""]
        self.show_text(lines + list(footer))

    def show_text(self, lines: Sequence[str]) -> None:
        self.stream.write(CSI + "H" + CSI + "J")
        self.append_text(lines)

    def append_text(self, lines: Sequence[str]) -> None:
        for line in lines:
            self.stream.write(line + "\n")
        self.stream.flush()

    def hand_rows(self, cards: Sequence[Optional[Card]]) -> List[str]:
        tops = []
        bottoms = []
        for card in cards:
            rank, suit = (card.rank, card.glyph) if card else ("?", "?")
            if card and self.color and card.suit in "DH":
                rank, suit = RED + rank + RESET, RED + suit + RESET
            tops.append(f"| {rank}  |")
            bottoms.append(f"|  {suit} |")
        return [
            "  ".join(" ____ " for _ in cards),
            "  ".join(tops),
            "  ".join(bottoms),
            "  ".join("|____|" for _ in cards),
        ]


def normalize_key(char: str) -> str:
    if char == "\r":
        return "\n"
    return char.lower()


class TerminalKeys:
    """Non-blocking keyboard source built on the terminal's auto-repeat.

    Terminals report no key-up events, so the most recently typed key stays
    active until no byte for it has arrived for longer than ``repeat_delay``
    (the pause before auto-repeat starts). Typing a different key releases
    it, since a terminal only repeats the last key pressed.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        repeat_delay: float = 0.6,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.stream = stream or sys.stdin
        self.repeat_delay = repeat_delay
        self.clock = clock
        self._active: Set[str] = set()
        self._held: Optional[str] = None
        self._held_at = 0.0
        self._saved_mode = None

    def __enter__(self) -> "TerminalKeys":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def start(self) -> None:
        if sys.platform == "win32" or not self.stream.isatty():
            return
        import termios
        import tty

        fd = self.stream.fileno()
        self._saved_mode = termios.tcgetattr(fd)
        tty.setcbreak(fd)

    def close(self) -> None:
        if self._saved_mode is None:
            return
        import termios

        termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_mode)
        self._saved_mode = None

    def poll(self) -> None:
        now = self.clock()
        keys = [normalize_key(char) for char in self._read_pending()]
        if keys:
            self._held = keys[-1]
            self._held_at = now
        elif self._held is not None and now - self._held_at > self.repeat_delay:
            self._held = None
        self._active = set(keys)
        if self._held is not None:
            self._active.add(self._held)

    def is_active(self, key: str) -> bool:
        return key in self._active

    def _read_pending(self) -> str:
        if sys.platform == "win32":
            import msvcrt

            chars = []
            while msvcrt.kbhit():
                chars.append(msvcrt.getwch())
            return "".join(chars)

        import select

        fd = self.stream.fileno()
        chunks = []
        while select.select([fd], [], [], 0)[0]:
            data = os.read(fd, 64)
            if not data:
                break
            chunks.append(data.decode(errors="ignore"))
        return "".join(chunks)
