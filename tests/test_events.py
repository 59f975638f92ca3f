"""Tests for the EventBus module."""

import logging

from ai_snake.engine import GameEngine
from ai_snake.events import EventBus, GameEvent


def _state():
    return GameEngine(seed=0).get_state()


class TestEventBus:
    def test_emit_reaches_listener(self):
        bus = EventBus()
        seen = []
        bus.subscribe(lambda event, state: seen.append((event, state.score)))
        bus.emit(GameEvent.ATE, _state())
        assert seen == [(GameEvent.ATE, 0)]

    def test_filtered_subscription(self):
        bus = EventBus()
        seen = []
        bus.subscribe(lambda event, state: seen.append(event), [GameEvent.GAME_OVER])
        bus.emit(GameEvent.TURNED, _state())
        bus.emit(GameEvent.GAME_OVER, _state())
        assert seen == [GameEvent.GAME_OVER]

    def test_no_listeners_is_fine(self):
        EventBus().emit(GameEvent.TURNED, _state())

    def test_unsubscribe_twice(self):
        bus = EventBus()
        unsubscribe = bus.subscribe(lambda event, state: None)
        assert len(bus) == 1
        unsubscribe()
        unsubscribe()
        assert len(bus) == 0

    def test_listener_error_is_logged_and_skipped(self, caplog):
        bus = EventBus()
        seen = []

        def broken(event, state):
            raise OSError("no audio device")

        bus.subscribe(broken)
        bus.subscribe(lambda event, state: seen.append(event))
        with caplog.at_level(logging.ERROR, logger="ai_snake.events"):
            bus.emit(GameEvent.ATE, _state())
        assert seen == [GameEvent.ATE]
        assert "failed on ate event" in caplog.text

    def test_event_values(self):
        assert [e.value for e in GameEvent] == ["turned", "ate", "game_over"]
