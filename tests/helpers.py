from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence

from machine.cards import Card, Deck, parse_cards
from machine.context import GameContext
from machine.models import GameConfig


class FixedOrderRandom(random.Random):
    """Random whose shuffle leaves the sequence alone, so deck order is scripted."""

    def shuffle(self, x, *args, **kwargs) -> None:  # type: ignore[override]
        return None


class ScriptedKeys:
    """Key source replaying one set of held keys per poll."""

    def __init__(self, frames: Iterable[Iterable[str]]) -> None:
        self.frames: List[set[str]] = [set(frame) for frame in frames]
        self.polls = 0
        self._active: set[str] = set()

    def poll(self) -> None:
        if self.polls >= len(self.frames):
            raise RuntimeError("Key script exhausted")
        self._active = self.frames[self.polls]
        self.polls += 1

    def is_active(self, key: str) -> bool:
        return key in self._active


class RecordingRenderer:
    def __init__(self) -> None:
        self.hands: List[List[Optional[Card]]] = []
        self.reels: List[List[List[str]]] = []
        self.texts: List[str] = []
        self.footers: List[str] = []

    def show_hand(self, points: int, cards: Sequence[Optional[Card]], footer: Sequence[str] = ()) -> None:
        self.hands.append(list(cards))
        self.footers.extend(footer)

    def show_reels(self, points: int, grid: Sequence[Sequence[str]], footer: Sequence[str] = ()) -> None:
        self.reels.append([list(row) for row in grid])
        self.footers.extend(footer)

    def show_text(self, lines: Sequence[str]) -> None:
        self.texts.extend(lines)

    def append_text(self, lines: Sequence[str]) -> None:
        self.texts.extend(lines)


def hand(*labels: str) -> List[Card]:
    return parse_cards(labels)


def press(*keys: str) -> List[set[str]]:
    """Script frames where each key is tapped once and then released."""
    frames: List[set[str]] = []
    for key in keys:
        frames += [{key}, set()]
    return frames


def create_context(
    frames: Iterable[Iterable[str]],
    *,
    points: int = 100,
    seed: Optional[int] = 42,
    fixed_order: bool = False,
) -> GameContext:
    config = GameConfig(starting_points=points, frame_interval=0, seed=seed)
    ctx = GameContext.create(config, ScriptedKeys(frames), RecordingRenderer())
    if fixed_order:
        ctx.rng = FixedOrderRandom(seed)
    return ctx


def fixed_deck(labels: Sequence[str]) -> Deck:
    return Deck.from_cards(parse_cards(labels), FixedOrderRandom())
