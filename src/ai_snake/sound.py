"""Sound effects triggered by game events."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from ai_snake.events import GameEvent

if TYPE_CHECKING:
    from ai_snake.engine import GameEngine
    from ai_snake.state import GameState

logger = logging.getLogger(__name__)

SOUND_FILES: dict[GameEvent, str] = {
    GameEvent.ATE: "sounds/eat-sound.mp3",
    GameEvent.TURNED: "sounds/turn-sound.mp3",
    GameEvent.GAME_OVER: "sounds/game-over-sound.mp3",
}


class SoundTrigger:
    """Event listener that hands the matching sound file to a player.

    Playback failures are logged and dropped so audio problems never
    interrupt the game.
    """

    def __init__(
        self,
        player: Callable[[str], None],
        sounds: Mapping[GameEvent, str] | None = None,
    ) -> None:
        self.player = player
        self.sounds = dict(sounds if sounds is not None else SOUND_FILES)

    def __call__(self, event: GameEvent, state: GameState) -> None:
        path = self.sounds.get(event)
        if path is None:
            return
        try:
            self.player(path)
        except Exception as exc:
            logger.warning("Error playing sound %s: %s", path, exc)

    def attach(self, engine: GameEngine) -> Callable[[], None]:
        """Subscribe to *engine*; returns the unsubscribe callable."""
        return engine.subscribe(self, self.sounds.keys())
