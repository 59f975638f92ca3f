"""Text rendering of game snapshots."""

from __future__ import annotations

import numpy as np

from ai_snake.grid import CellType
from ai_snake.state import GameState

SNAKE_HEAD = "🐍"
SNAKE_BODY = "🟩"
EMPTY_CELL = "⬛"


def occupancy(state: GameState, size: int) -> np.ndarray:
    """Project a snapshot onto a ``(size, size)`` array of :class:`CellType`.

    Snake cells win over food when they overlap.
    """
    cells = np.full((size, size), CellType.EMPTY, dtype=np.int8)
    fx, fy = state.food.position
    cells[fy, fx] = CellType.FOOD
    for x, y in state.snake[1:]:
        cells[y, x] = CellType.SNAKE
    hx, hy = state.head
    cells[hy, hx] = CellType.HEAD
    return cells


def render_text(state: GameState, size: int) -> str:
    """Render the board followed by score and difficulty lines."""
    glyphs = {
        CellType.EMPTY: EMPTY_CELL,
        CellType.SNAKE: SNAKE_BODY,
        CellType.HEAD: SNAKE_HEAD,
        CellType.FOOD: state.food.label,
    }
    cells = occupancy(state, size)
    lines = ["".join(glyphs[CellType(c)] for c in row) for row in cells.tolist()]
    lines.append(f"Score: {state.score}")
    lines.append(f"Difficulty: {state.difficulty.display_name}")
    if state.is_over:
        lines.append("Game Over!")
    return "\n".join(lines)
