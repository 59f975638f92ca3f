"""Stochastic food placement."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ai_snake.grid import Coordinate

if TYPE_CHECKING:
    import numpy as np

    from ai_snake.difficulty import DifficultySettings
    from ai_snake.grid import Grid

logger = logging.getLogger(__name__)

FOOD_LABELS: tuple[str, ...] = ("🧠", "🤖", "📊", "💻", "🔬", "📈", "🗃️", "📡")


@dataclass(frozen=True)
class Food:
    """A food item: where it sits and the label drawn on it."""

    position: Coordinate
    label: str

    def to_dict(self) -> dict:
        return {"position": list(self.position), "label": self.label}


class FoodSpawner:
    """Places food on the grid, gated by the tier's spawn probability.

    Randomness comes from the grid's generator so a single seed makes a
    whole game reproducible.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.attempts = 0

    @property
    def rng(self) -> np.random.Generator:
        return self.grid.rng

    def initial_food(self) -> Food:
        """Return the fixed placement used when a game starts."""
        third = self.grid.size // 3
        return Food(Coordinate(third, third), FOOD_LABELS[0])

    def maybe_spawn(
        self,
        current_food: Food,
        settings: DifficultySettings,
        occupied: Iterable[tuple[int, int]] | None = None,
    ) -> Food:
        """Roll for a new food item, returning *current_food* on a miss.

        Without *occupied* the new item may land anywhere, snake included.
        With it, the item goes to a uniformly chosen free cell.
        """
        self.attempts += 1
        if self.rng.random() > settings.spawn_probability:
            return current_food

        if occupied is None:
            position = self.grid.random_coordinate()
        else:
            free = self.grid.free_cells(occupied)
            if not free:
                logger.warning("No free cells available for food spawning.")
                return current_food
            position = free[int(self.rng.integers(len(free)))]

        label = FOOD_LABELS[int(self.rng.integers(len(FOOD_LABELS)))]
        food = Food(position, label)
        logger.debug("Spawned food %s at %s.", label, position)
        return food
