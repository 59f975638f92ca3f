"""Key-to-direction input adapter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ai_snake.snake import Direction

if TYPE_CHECKING:
    from ai_snake.engine import GameEngine

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Return the direction bound to *key*, or ``None``."""
    return KEY_BINDINGS.get(key)


class InputAdapter:
    """Translates key presses into engine direction changes."""

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine

    def handle_key(self, key: str) -> bool:
        """Forward a bound key to the engine. Returns True if it was bound."""
        direction = direction_for_key(key)
        if direction is None:
            logger.debug("Ignoring unbound key %r.", key)
            return False
        self.engine.set_direction(direction)
        return True
