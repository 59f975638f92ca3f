"""Named game events and synchronous listener dispatch."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ai_snake.state import GameState

logger = logging.getLogger(__name__)


class GameEvent(str, enum.Enum):
    """State transitions collaborators can react to."""

    TURNED = "turned"
    ATE = "ate"
    GAME_OVER = "game_over"


Listener = Callable[[GameEvent, "GameState"], None]


class EventBus:
    """Fan events out to subscribed listeners.

    A listener that raises is logged and skipped; the remaining listeners
    still run and the error never reaches the emitter.
    """

    def __init__(self) -> None:
        self._listeners: list[tuple[Listener, frozenset[GameEvent] | None]] = []

    def subscribe(
        self,
        listener: Listener,
        events: Iterable[GameEvent] | None = None,
    ) -> Callable[[], None]:
        """Register *listener*, optionally for a subset of events.

        Returns a callable that removes the subscription.
        """
        entry = (listener, frozenset(events) if events is not None else None)
        self._listeners.append(entry)

        def unsubscribe() -> None:
            if entry in self._listeners:
                self._listeners.remove(entry)

        return unsubscribe

    def emit(self, event: GameEvent, state: GameState) -> None:
        """Call every listener interested in *event*."""
        for listener, wanted in list(self._listeners):
            if wanted is not None and event not in wanted:
                continue
            try:
                listener(event, state)
            except Exception:
                logger.exception("Listener %r failed on %s event.", listener, event.value)

    def __len__(self) -> int:
        return len(self._listeners)
