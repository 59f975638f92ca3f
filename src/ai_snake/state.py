"""Read-only game state snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from ai_snake.difficulty import Difficulty
from ai_snake.food import Food
from ai_snake.grid import Coordinate
from ai_snake.snake import Direction


@dataclass(frozen=True)
class GameState:
    """Immutable view of a game handed to renderers and listeners."""

    snake: tuple[Coordinate, ...]
    direction: Direction
    food: Food
    score: int
    difficulty: Difficulty
    is_over: bool
    tick: int = 0

    @property
    def head(self) -> Coordinate:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def to_dict(self) -> dict:
        """Return a JSON-serializable dictionary."""
        return {
            "tick": self.tick,
            "score": self.score,
            "is_over": self.is_over,
            "difficulty": self.difficulty.value,
            "direction": list(self.direction.value),
            "snake": [list(seg) for seg in self.snake],
            "food": self.food.to_dict(),
        }
