from __future__ import annotations

import logging
from dataclasses import dataclass

from .models import GameConfig

LOGGER = logging.getLogger("slot_machine.ledger")


@dataclass
class PointsLedger:
    points: int = 100
    max_points: int = 100
    min_cost: int = 20
    cost_percent: int = 10

    @classmethod
    def from_config(cls, config: GameConfig) -> "PointsLedger":
        return cls(
            points=config.starting_points,
            max_points=config.starting_points,
            min_cost=config.min_cost,
            cost_percent=config.cost_percent,
        )

    @property
    def cost(self) -> int:
        # The larger of the flat minimum and a percentage of current points.
        return max(self.min_cost, self.points * self.cost_percent // 100)

    def can_afford(self) -> bool:
        return self.points >= self.cost

    def charge(self) -> int:
        cost = self.cost
        self.points -= cost
        LOGGER.debug("Charged %s points, %s remaining", cost, self.points)
        return cost

    def award(self, score: int) -> None:
        self.points += score
        if self.points > self.max_points:
            self.max_points = self.points
        LOGGER.debug("Awarded %s points, total %s (max %s)", score, self.points, self.max_points)
