"""Toroidal grid coordinates and wraparound stepping."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from ai_snake.snake import Direction

GRID_SIZE = 15


class Coordinate(NamedTuple):
    """An immutable ``(x, y)`` cell position."""

    x: int
    y: int


class CellType(enum.IntEnum):
    """Integer codes used by occupancy arrays."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3


class Grid:
    """Square grid whose edges wrap around.

    Coordinates use ``(x, y)`` ordering; occupancy arrays are indexed
    ``[y, x]`` to keep rows as the first NumPy axis.
    """

    def __init__(
        self,
        size: int = GRID_SIZE,
        rng: np.random.Generator | None = None,
    ) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def wrap(self, x: int, y: int) -> Coordinate:
        """Wrap coordinates around the grid edges."""
        return Coordinate(x % self.size, y % self.size)

    def step(self, coord: Coordinate, direction: Direction) -> Coordinate:
        """Return the cell one step from *coord* in *direction*."""
        dx, dy = direction.value
        return self.wrap(coord[0] + dx, coord[1] + dy)

    def random_coordinate(self) -> Coordinate:
        """Draw a uniformly random cell, x first then y."""
        x = int(self.rng.integers(self.size))
        y = int(self.rng.integers(self.size))
        return Coordinate(x, y)

    def free_cells(self, occupied: Iterable[tuple[int, int]]) -> list[Coordinate]:
        """Return every cell not listed in *occupied*."""
        mask = np.ones((self.size, self.size), dtype=bool)
        for x, y in occupied:
            mask[y, x] = False
        ys, xs = np.nonzero(mask)
        return [
            Coordinate(x, y)
            for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
        ]
