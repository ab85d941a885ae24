from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from .cards import Card
from .ledger import PointsLedger
from .models import GameConfig
from .signals import ADVANCE_KEY, EdgeDetector, KeySource, first_active


class Renderer(Protocol):
    def show_hand(self, points: int, cards: Sequence[Optional[Card]], footer: Sequence[str] = ()) -> None: ...

    def show_reels(self, points: int, grid: Sequence[Sequence[str]], footer: Sequence[str] = ()) -> None: ...

    def show_text(self, lines: Sequence[str]) -> None: ...

    def append_text(self, lines: Sequence[str]) -> None: ...


@dataclass
class GameContext:
    """State shared by every round of one game session."""

    config: GameConfig
    keys: KeySource
    renderer: Renderer
    ledger: PointsLedger
    rng: random.Random
    advance: EdgeDetector = field(init=False)

    def __post_init__(self) -> None:
        self.advance = EdgeDetector(self.keys, ADVANCE_KEY)

    @classmethod
    def create(cls, config: GameConfig, keys: KeySource, renderer: Renderer) -> "GameContext":
        config.validate()
        return cls(
            config=config,
            keys=keys,
            renderer=renderer,
            ledger=PointsLedger.from_config(config),
            rng=random.Random(config.seed),
        )

    async def frame(self) -> None:
        await asyncio.sleep(self.config.frame_interval)

    async def wait_for_key(self, keys: str) -> str:
        """Poll until one of ``keys`` is held and return it."""
        while True:
            self.keys.poll()
            key = first_active(self.keys, keys)
            if key is not None:
                return key
            await self.frame()
