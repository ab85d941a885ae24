#!/usr/bin/env python3
"""Estimate how often each poker category appears in a freshly dealt hand.

Hands are dealt straight off a shuffled deck with no redraws, so the output
is the baseline return of a poker round before the player does anything.

Example:
    python scripts/hand_frequency.py --hands 100000 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
from collections import Counter
from typing import Dict, Optional

from machine.cards import Deck
from machine.evaluator import evaluate_hand
from machine.models import PAYOUTS, HandCategory

LOGGER = logging.getLogger("hand_frequency")


def simulate(hands: int, seed: Optional[int] = None) -> Dict[HandCategory, int]:
    rng = random.Random(seed)
    deck = Deck(rng)
    counts: Counter = Counter()
    for _ in range(hands):
        deck.initialize()
        cards = [deck.draw_top() for _ in range(5)]
        counts[evaluate_hand(cards).category] += 1
    return {category: counts.get(category, 0) for category in HandCategory}


def main() -> None:
    parser = argparse.ArgumentParser(description="Poker hand frequency simulation")
    parser.add_argument("--hands", type=int, default=50_000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--cost", type=int, default=20, help="Cost per round used for the return estimate")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    counts = simulate(args.hands, args.seed)
    total_payout = 0
    for category, count in counts.items():
        total_payout += PAYOUTS[category] * count
        LOGGER.info("%-16s %8d  %7.3f%%", category.value, count, 100 * count / args.hands)
    LOGGER.info("Average payout %.2f points against a cost of %s", total_payout / args.hands, args.cost)


if __name__ == "__main__":
    main()
