"""Slot machine engine: cards, hand evaluation and the polling round loops."""

from .basic import Reels, ReelsResult, play_basic_round, score_reels
from .cards import RANKS, SUITS, Card, Deck, EmptyDeckError, build_deck, parse_cards
from .context import GameContext, Renderer
from .evaluator import evaluate_hand
from .ledger import PointsLedger
from .models import PAYOUTS, GameConfig, Hand, HandCategory, HandResult, Mode, PokerRound
from .poker import DealingController, RedrawController, play_poker_round
from .signals import EdgeDetector, KeySource

__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "Deck",
    "EmptyDeckError",
    "build_deck",
    "parse_cards",
    "evaluate_hand",
    "GameConfig",
    "GameContext",
    "Renderer",
    "Hand",
    "HandCategory",
    "HandResult",
    "Mode",
    "PAYOUTS",
    "PokerRound",
    "PointsLedger",
    "DealingController",
    "RedrawController",
    "play_poker_round",
    "Reels",
    "ReelsResult",
    "play_basic_round",
    "score_reels",
    "EdgeDetector",
    "KeySource",
]
