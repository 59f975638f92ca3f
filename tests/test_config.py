"""Tests for game configuration."""

import pytest

from ai_snake.config import GameConfig, GameRules


class TestGameRules:
    def test_permissive_defaults(self):
        rules = GameRules()
        assert rules.allow_reversal
        assert rules.allow_food_on_snake


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.grid_size == 15
        assert config.difficulty == "medium"
        assert config.seed is None
        assert config.rules == GameRules()

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(ValueError, match="Unknown difficulty"):
            GameConfig(difficulty="brutal")

    def test_save_and_load(self, tmp_path):
        config = GameConfig(
            grid_size=10, difficulty="hard", seed=9,
            rules=GameRules(allow_reversal=False),
        )
        path = tmp_path / "nested" / "game.json"
        config.save(path)
        assert path.exists()
        assert GameConfig.load(path) == config

    def test_from_dict_without_rules(self):
        config = GameConfig.from_dict({"grid_size": 12})
        assert config.grid_size == 12
        assert config.rules == GameRules()

    def test_null_rules_use_defaults(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text('{"grid_size": 8, "rules": null}')
        config = GameConfig.load(path)
        assert config.grid_size == 8
        assert config.rules == GameRules()
