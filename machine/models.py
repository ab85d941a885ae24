from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence

from .cards import Card, Deck

HAND_SIZE = 5


class Mode(str, Enum):
    BASIC = "basic"
    POKER = "poker"


class HandCategory(str, Enum):
    ROYAL_FLUSH = "Royal Flush"
    STRAIGHT_FLUSH = "Straight Flush"
    FOUR_OF_A_KIND = "Four of a Kind"
    FULL_HOUSE = "Full House"
    FLUSH = "Flush"
    STRAIGHT = "Straight"
    THREE_OF_A_KIND = "Three of a Kind"
    TWO_PAIR = "Two Pair"
    PAIR = "Pair"
    HIGH_CARD = "High Card"


PAYOUTS = {
    HandCategory.ROYAL_FLUSH: 10_000,
    HandCategory.STRAIGHT_FLUSH: 1_000,
    HandCategory.FOUR_OF_A_KIND: 250,
    HandCategory.FULL_HOUSE: 200,
    HandCategory.FLUSH: 150,
    HandCategory.STRAIGHT: 100,
    HandCategory.THREE_OF_A_KIND: 50,
    HandCategory.TWO_PAIR: 25,
    HandCategory.PAIR: 10,
    HandCategory.HIGH_CARD: 0,
}


@dataclass
class GameConfig:
    starting_points: int = 100
    min_cost: int = 20
    cost_percent: int = 10
    frame_interval: float = 0.1
    redraw_budget: int = 5
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.starting_points < 0:
            raise ValueError("starting_points must be non-negative")
        if self.min_cost < 0 or self.cost_percent < 0:
            raise ValueError("Cost settings must be non-negative")
        if self.frame_interval < 0:
            raise ValueError("frame_interval must be non-negative")
        if self.redraw_budget < 0:
            raise ValueError("redraw_budget must be non-negative")


@dataclass(frozen=True)
class HandResult:
    category: HandCategory
    score: int


class Hand:
    """Five card slots, empty (None) until dealt."""

    def __init__(self) -> None:
        self.slots: List[Optional[Card]] = [None] * HAND_SIZE

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> "Hand":
        hand = cls()
        for index, card in enumerate(cards):
            hand.place(index, card)
        return hand

    def place(self, index: int, card: Card) -> None:
        if self.slots[index] is not None:
            raise ValueError(f"Slot {index + 1} already holds {self.slots[index]}")
        self.slots[index] = card

    def replace(self, index: int, card: Card) -> Card:
        previous = self.slots[index]
        if previous is None:
            raise ValueError(f"Slot {index + 1} has not been dealt")
        self.slots[index] = card
        return previous

    def is_complete(self) -> bool:
        return all(card is not None for card in self.slots)

    def cards(self) -> List[Card]:
        if not self.is_complete():
            raise ValueError("Hand is not fully dealt")
        return [card for card in self.slots if card is not None]

    def ordinals(self) -> List[int]:
        return sorted(card.ordinal for card in self.cards())

    def __iter__(self) -> Iterator[Optional[Card]]:
        return iter(self.slots)

    def __str__(self) -> str:
        return " ".join(str(card) if card else "??" for card in self.slots)


@dataclass
class PokerRound:
    # Everything a single poker round owns; discarded when the round ends.
    deck: Deck
    hand: Hand = field(default_factory=Hand)
    cards_to_deal: int = HAND_SIZE
    redraws_remaining: int = 5

    @classmethod
    def start(cls, rng: random.Random, redraw_budget: int = 5) -> "PokerRound":
        deck = Deck(rng)
        deck.initialize()
        return cls(deck=deck, redraws_remaining=redraw_budget)

    def next_slot(self) -> int:
        return HAND_SIZE - self.cards_to_deal
