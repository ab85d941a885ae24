from __future__ import annotations

import logging
from typing import List, Optional

from machine.basic import play_basic_round
from machine.context import GameContext
from machine.models import Mode
from machine.poker import play_poker_round
from machine.signals import ENTER_KEY

LOGGER = logging.getLogger("slot_machine.session")

RULES = {
    Mode.BASIC: [
        "Press Space to stop each of the columns from moving, starting with the leftmost column.",
        "The aim is to end up with rows of matching characters once all the columns are stopped.",
        "Points are granted for the longest sequence of matching characters in each row.",
        "",
        "Payouts - 10 points for 2 matching characters, 100 for 3, 1,000 for 4 and 10,000 for 5.",
    ],
    Mode.POKER: [
        "Press Space to deal each of your 5 cards, starting with the leftmost card.",
        "After all 5 cards are dealt, you may select any card to re-deal.",
        "You may do this up to 5 times, or not at all.",
        "The aim is to end up with the highest scoring poker hand possible.",
        "",
        "Payouts - Pair: 10 points, Two Pair: 25 points, Three of a Kind: 50 points,",
        "Straight: 100 points, Flush: 150 points, Full House: 200 points,",
        "Four of a Kind: 250 points, Straight Flush: 1,000 points,",
        "Royal Flush: 10,000 points.",
    ],
}

OUT_OF_POINTS = "You have run out of points! Game over."
QUIT_MESSAGE = "You quit the game."


class GameSession:
    """Menu, start screen and round loop for one game."""

    def __init__(self, ctx: GameContext, mode: Optional[Mode] = None) -> None:
        self.ctx = ctx
        self.mode = mode
        self.rounds_played = 0

    async def run(self) -> str:
        ctx = self.ctx
        if self.mode is None:
            self.mode = await self.choose_mode()
        while True:
            if not ctx.ledger.can_afford():
                return self.finish(OUT_OF_POINTS)
            ctx.renderer.show_text(self.start_screen())
            key = await ctx.wait_for_key(ENTER_KEY + "q")
            if key == "q":
                return self.finish(QUIT_MESSAGE)
            await self.play_round()
            ctx.renderer.append_text(["", "Press C to continue."])
            await ctx.wait_for_key("c")

    async def choose_mode(self) -> Mode:
        self.ctx.renderer.show_text(["Select mode to play. Press B for basic mode or P for poker mode."])
        key = await self.ctx.wait_for_key("bp")
        return Mode.BASIC if key == "b" else Mode.POKER

    def start_screen(self) -> List[str]:
        assert self.mode is not None
        ledger = self.ctx.ledger
        return [
            f"Points: {ledger.points}",
            "",
            f"Mode: {self.mode.value}",
            "",
            *RULES[self.mode],
            "",
            f"Cost of playing is {ledger.min_cost} or {ledger.cost_percent}% of current points, whichever is higher.",
            f"Playing currently costs {ledger.cost} points.",
            "",
            "Press Enter to play, or Q to quit.",
        ]

    async def play_round(self) -> int:
        assert self.mode is not None
        cost = self.ctx.ledger.charge()
        self.rounds_played += 1
        LOGGER.info("Round %s (%s) started, cost %s", self.rounds_played, self.mode.value, cost)
        if self.mode is Mode.BASIC:
            score = (await play_basic_round(self.ctx)).score
        else:
            score = (await play_poker_round(self.ctx)).score
        LOGGER.info("Round %s finished, points now %s", self.rounds_played, self.ctx.ledger.points)
        return score

    def finish(self, message: str) -> str:
        ledger = self.ctx.ledger
        LOGGER.info("%s Final points %s, maximum %s", message, ledger.points, ledger.max_points)
        self.ctx.renderer.show_text(
            [message, "", f"Final points: {ledger.points}    Maximum points: {ledger.max_points}", ""]
        )
        return message
