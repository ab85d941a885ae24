from __future__ import annotations

from typing import Iterable, List, Sequence, Union

from .cards import Card
from .models import HAND_SIZE, PAYOUTS, Hand, HandCategory, HandResult

ROYAL_ORDINALS = [8, 9, 10, 11, 12]


def evaluate_hand(hand: Union[Hand, Sequence[Card]]) -> HandResult:
    """Classify a completed five-card hand and return its category and payout."""
    cards = hand.cards() if isinstance(hand, Hand) else list(hand)
    if len(cards) != HAND_SIZE or len(set(cards)) != HAND_SIZE:
        raise ValueError(f"Expected {HAND_SIZE} distinct cards, got {cards}")
    if not isinstance(hand, Hand):
        hand = Hand.from_cards(cards)

    ords = hand.ordinals()
    is_flush = check_flush(cards)
    is_straight = check_straight(ords)
    pairs = count_pairs(ords)
    n_of_a_kind = check_n_of_a_kind(ords)

    if is_flush and is_straight and ords == ROYAL_ORDINALS:
        category = HandCategory.ROYAL_FLUSH
    elif is_flush and is_straight:
        category = HandCategory.STRAIGHT_FLUSH
    elif n_of_a_kind == 4:
        category = HandCategory.FOUR_OF_A_KIND
    elif pairs == 2 and n_of_a_kind == 3:
        # The triple also counts as one of the two pairs.
        category = HandCategory.FULL_HOUSE
    elif is_flush:
        category = HandCategory.FLUSH
    elif is_straight:
        category = HandCategory.STRAIGHT
    elif n_of_a_kind == 3:
        category = HandCategory.THREE_OF_A_KIND
    elif pairs == 2:
        category = HandCategory.TWO_PAIR
    elif pairs == 1:
        category = HandCategory.PAIR
    else:
        category = HandCategory.HIGH_CARD
    return HandResult(category, PAYOUTS[category])


def check_flush(cards: Iterable[Card]) -> bool:
    return len({card.suit for card in cards}) == 1


def check_straight(ords: List[int]) -> bool:
    # Ace only ranks high: A-2-3-4-5 is not a straight.
    return all(ords[i] == ords[i - 1] + 1 for i in range(1, len(ords)))


def count_pairs(ords: List[int]) -> int:
    """Count runs of equal ordinals, so a triple or quad counts once."""
    pairs = 0
    for i in range(1, len(ords)):
        if ords[i] == ords[i - 1] and (i == 1 or ords[i] != ords[i - 2]):
            pairs += 1
    return pairs


def check_n_of_a_kind(ords: List[int]) -> int:
    """Return 4 or 3 for the largest group of equal ordinals, else 0."""
    n = 0
    for i in range(2, len(ords)):
        if ords[i] == ords[i - 1] == ords[i - 2]:
            n = max(n, 3)
            if i >= 3 and ords[i] == ords[i - 3]:
                n = 4
    return n
