"""Basic mode: five spinning symbol columns stopped one at a time."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Sequence

from .context import GameContext

LOGGER = logging.getLogger("slot_machine.basic")

SYMBOLS = "ABCXYZ$%@#!~"
N_ROWS = 5
N_COLS = 5


@dataclass(frozen=True)
class ReelsResult:
    score: int
    jackpots: int


class Reels:
    """A grid of symbols whose rightmost columns can be rotated downwards."""

    def __init__(self, rng: random.Random, rows: int = N_ROWS, cols: int = N_COLS) -> None:
        self.rng = rng
        self.rows = rows
        self.cols = cols
        self.grid: List[List[str]] = [[self._symbol() for _ in range(cols)] for _ in range(rows)]

    def _symbol(self) -> str:
        return self.rng.choice(SYMBOLS)

    def rotate(self, moving: int) -> None:
        """Shift each of the rightmost ``moving`` columns down one row."""
        for col in range(self.cols - moving, self.cols):
            for row in range(self.rows - 1, 0, -1):
                self.grid[row][col] = self.grid[row - 1][col]
            self.grid[0][col] = self._symbol()


def longest_match(row: Sequence[str]) -> int:
    """Number of adjacent equal pairs in the longest matching run of ``row``."""
    best = current = 0
    for prev, symbol in zip(row, row[1:]):
        current = current + 1 if symbol == prev else 0
        best = max(best, current)
    return best


def score_reels(grid: Sequence[Sequence[str]]) -> ReelsResult:
    score = 0
    jackpots = 0
    for row in grid:
        matched = longest_match(row)
        if matched > 0:
            score += 10 ** matched
        if matched == len(row) - 1:
            jackpots += 1
    return ReelsResult(score, jackpots)


async def play_basic_round(ctx: GameContext) -> ReelsResult:
    reels = Reels(ctx.rng)
    moving = reels.cols
    ctx.advance.prime()
    while moving > 0:
        reels.rotate(moving)
        ctx.renderer.show_reels(ctx.ledger.points, reels.grid)
        # A column stops on the symbols the player was looking at.
        ctx.keys.poll()
        if ctx.advance.just_activated():
            moving -= 1
            LOGGER.debug("Stopped column %s", reels.cols - moving)
        await ctx.frame()

    result = score_reels(reels.grid)
    LOGGER.info("Basic round scored %s (%s jackpots)", result.score, result.jackpots)
    ctx.ledger.award(result.score)
    footer = f"Score: {result.score}"
    if result.jackpots:
        footer += f" - You hit the jackpot! (x{result.jackpots})"
    ctx.renderer.show_reels(ctx.ledger.points, reels.grid, [footer])
    return result
