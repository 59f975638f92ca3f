"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

from ai_snake.grid import Coordinate


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, segments: Iterable[tuple[int, int]]) -> None:
        self.body: deque[Coordinate] = deque(
            Coordinate(x, y) for x, y in segments
        )
        if not self.body:
            raise ValueError("Snake must have at least 1 segment.")

    @property
    def head(self) -> Coordinate:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def occupies(self, coord: tuple[int, int]) -> bool:
        """Check whether any segment sits on *coord*."""
        return coord in self.body

    def advance(self, new_head: Coordinate, grow: bool = False) -> Coordinate | None:
        """Push *new_head* onto the front of the body.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def segments(self) -> tuple[Coordinate, ...]:
        """Return an immutable copy of the body."""
        return tuple(self.body)
