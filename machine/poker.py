from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .cards import Card
from .context import GameContext
from .evaluator import evaluate_hand
from .models import HAND_SIZE, HandResult, PokerRound
from .signals import SELECTION_KEYS

LOGGER = logging.getLogger("slot_machine.poker")

# Each controller is a polling loop: render, sample keys, then sleep one frame.
# Cards only leave the deck on an advance/confirm edge, so deck and hand
# together always hold the full 52 cards.


class DealingController:
    """Reveals the five hand slots left to right, one per advance press."""

    def __init__(self, ctx: GameContext, round_: PokerRound) -> None:
        self.ctx = ctx
        self.round = round_

    async def run(self) -> None:
        round_ = self.round
        self.ctx.advance.prime()
        while round_.cards_to_deal > 0:
            round_.deck.reshuffle()
            preview = round_.deck.peek(round_.cards_to_deal)
            self._render(preview)
            self.ctx.keys.poll()
            if self.ctx.advance.just_activated():
                self._deal_next()
            await self.ctx.frame()
        self._render([])

    def _deal_next(self) -> None:
        round_ = self.round
        slot = round_.next_slot()
        card = round_.deck.draw_top()
        round_.hand.place(slot, card)
        round_.cards_to_deal -= 1
        LOGGER.debug("Dealt %s into slot %s", card, slot + 1)

    def _render(self, preview: Sequence[Card]) -> None:
        dealt = self.round.next_slot()
        shown: List[Optional[Card]] = list(self.round.hand.slots[:dealt]) + list(preview)
        shown += [None] * (HAND_SIZE - len(shown))
        self.ctx.renderer.show_hand(self.ctx.ledger.points, shown)


class RedrawController:
    """Lets the player swap out cards until the redraw budget is spent."""

    def __init__(self, ctx: GameContext, round_: PokerRound) -> None:
        self.ctx = ctx
        self.round = round_

    async def run(self) -> None:
        round_ = self.round
        while round_.redraws_remaining > 0:
            choice = await self.select()
            if choice == 0:
                LOGGER.debug("Redraws finished with %s remaining", round_.redraws_remaining)
                round_.redraws_remaining = 0
            else:
                await self.redraw(choice - 1)

    async def select(self) -> int:
        footer = [
            "Enter card no. (1-5) to re-deal, and press Space to deal a new card.",
            f"You have {self.round.redraws_remaining} re-deals remaining. Enter 0 to finish.",
        ]
        self.ctx.renderer.show_hand(self.ctx.ledger.points, self.round.hand.slots, footer)
        key = await self.ctx.wait_for_key(SELECTION_KEYS)
        return int(key)

    async def redraw(self, index: int) -> None:
        round_ = self.round
        deck = round_.deck
        self.ctx.advance.prime()
        while True:
            deck.reshuffle()
            candidate = deck.peek()[0]
            shown = list(round_.hand.slots)
            shown[index] = candidate
            self.ctx.renderer.show_hand(self.ctx.ledger.points, shown)
            self.ctx.keys.poll()
            if self.ctx.advance.just_activated():
                break
            await self.ctx.frame()

        # The held card goes back only after the replacement is committed, so
        # it can never be drawn as its own replacement.
        card = deck.draw_top()
        discard = round_.hand.replace(index, card)
        deck.return_to_bottom(discard)
        round_.redraws_remaining -= 1
        LOGGER.debug("Slot %s: %s -> %s (%s redraws left)", index + 1, discard, card, round_.redraws_remaining)
        await self.ctx.frame()


async def play_poker_round(ctx: GameContext) -> HandResult:
    round_ = PokerRound.start(ctx.rng, ctx.config.redraw_budget)
    await DealingController(ctx, round_).run()
    await RedrawController(ctx, round_).run()
    result = evaluate_hand(round_.hand)
    LOGGER.info("Poker hand %s scored %s (%s)", round_.hand, result.score, result.category.value)
    ctx.ledger.award(result.score)
    ctx.renderer.show_hand(
        ctx.ledger.points,
        round_.hand.slots,
        [f"Score: {result.score} ({result.category.value})"],
    )
    return result
