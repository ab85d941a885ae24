from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

RANKS = "23456789TJQKA"
SUITS = "DCHS"
SUIT_GLYPHS = {"D": "♦", "C": "♣", "H": "♥", "S": "♠"}


class EmptyDeckError(RuntimeError):
    """Raised when a card is drawn from an exhausted deck."""


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def ordinal(self) -> int:
        return RANKS.index(self.rank)

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit}"

    @property
    def glyph(self) -> str:
        return SUIT_GLYPHS[self.suit]

    def __str__(self) -> str:
        return f"{self.rank}{self.glyph}"


class Deck:
    """Ordered card sequence; index 0 is the top of the deck."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()
        self._cards: List[Card] = []

    @classmethod
    def from_cards(cls, cards: Sequence[Card], rng: Optional[random.Random] = None) -> "Deck":
        deck = cls(rng)
        deck._cards = list(cards)
        return deck

    def initialize(self) -> None:
        self._cards = [Card(rank, suit) for suit in SUITS for rank in RANKS]
        self.rng.shuffle(self._cards)

    def reshuffle(self) -> None:
        self.rng.shuffle(self._cards)

    def peek(self, count: int = 1) -> List[Card]:
        if count > len(self._cards):
            raise EmptyDeckError(f"Cannot preview {count} cards from a deck of {len(self._cards)}")
        return self._cards[:count]

    def draw_top(self) -> Card:
        if not self._cards:
            raise EmptyDeckError("Cannot draw from an empty deck")
        return self._cards.pop(0)

    def return_to_bottom(self, card: Card) -> None:
        self._cards.append(card)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards


def build_deck(seed: Optional[int] = None) -> Deck:
    deck = Deck(random.Random(seed))
    deck.initialize()
    return deck


def parse_label(label: str) -> Card:
    if len(label) != 2:
        raise ValueError(f"Invalid card label: {label}")
    return Card(label[0].upper(), label[1].upper())


def parse_cards(labels: Sequence[str]) -> List[Card]:
    return [parse_label(label) for label in labels]


def cards_to_labels(cards: Sequence[Card]) -> List[str]:
    return [card.label for card in cards]
