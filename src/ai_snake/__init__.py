"""AI Snake — single-player snake engine on a wrapping grid."""

from ai_snake.config import GameConfig, GameRules
from ai_snake.difficulty import Difficulty, DifficultySettings
from ai_snake.engine import GameEngine
from ai_snake.events import GameEvent
from ai_snake.food import Food, FoodSpawner
from ai_snake.grid import Coordinate, Grid
from ai_snake.snake import Direction, Snake
from ai_snake.sound import SoundTrigger
from ai_snake.state import GameState

__all__ = [
    "Coordinate",
    "Difficulty",
    "DifficultySettings",
    "Direction",
    "Food",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameEvent",
    "GameRules",
    "GameState",
    "Grid",
    "Snake",
    "SoundTrigger",
]
