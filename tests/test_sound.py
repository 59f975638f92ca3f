"""Tests for the sound trigger."""

import logging

from ai_snake.engine import GameEngine
from ai_snake.events import GameEvent
from ai_snake.food import FOOD_LABELS, Food
from ai_snake.grid import Coordinate
from ai_snake.snake import Direction, Snake
from ai_snake.sound import SOUND_FILES, SoundTrigger


class TestSoundTrigger:
    def test_plays_mapped_files(self):
        engine = GameEngine(seed=0)
        played = []
        SoundTrigger(played.append).attach(engine)
        engine.set_direction(Direction.UP)
        engine.set_direction(Direction.RIGHT)
        engine.food = Food(Coordinate(8, 7), FOOD_LABELS[0])
        engine.tick()
        assert played == [
            SOUND_FILES[GameEvent.TURNED],
            SOUND_FILES[GameEvent.TURNED],
            SOUND_FILES[GameEvent.ATE],
        ]

    def test_game_over_sound(self):
        engine = GameEngine(seed=0)
        engine.snake = Snake([(7, 7), (8, 7)])
        played = []
        SoundTrigger(played.append).attach(engine)
        engine.tick()
        assert played == ["sounds/game-over-sound.mp3"]

    def test_player_failure_is_swallowed(self, caplog):
        engine = GameEngine(seed=0)

        def broken_player(path):
            raise OSError("device busy")

        SoundTrigger(broken_player).attach(engine)
        with caplog.at_level(logging.WARNING, logger="ai_snake.sound"):
            engine.set_direction(Direction.DOWN)
        assert engine.direction == Direction.DOWN
        assert "Error playing sound" in caplog.text
        assert "device busy" in caplog.text

    def test_custom_mapping_limits_subscription(self):
        engine = GameEngine(seed=0)
        played = []
        SoundTrigger(played.append, {GameEvent.ATE: "chomp.wav"}).attach(engine)
        engine.set_direction(Direction.DOWN)
        assert played == []

    def test_detach(self):
        engine = GameEngine(seed=0)
        played = []
        detach = SoundTrigger(played.append).attach(engine)
        detach()
        engine.set_direction(Direction.DOWN)
        assert played == []
