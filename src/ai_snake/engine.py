"""Tick-based game engine composing grid, snake, and food logic."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import numpy as np

from ai_snake.config import GameConfig, GameRules
from ai_snake.difficulty import (
    DEFAULT_DIFFICULTY,
    Difficulty,
    DifficultySettings,
    get_settings,
    parse_difficulty,
)
from ai_snake.events import EventBus, GameEvent, Listener
from ai_snake.food import Food, FoodSpawner
from ai_snake.grid import GRID_SIZE, Coordinate, Grid
from ai_snake.snake import Direction, Snake
from ai_snake.state import GameState

logger = logging.getLogger(__name__)

INITIAL_DIRECTION = Direction.RIGHT


class GameEngine:
    """Single-player snake engine on a wrapping grid.

    The engine owns all mutable game state. Collaborators read it through
    :meth:`get_state` snapshots and drive it through :meth:`set_direction`,
    :meth:`tick`, :meth:`reset` and :meth:`set_difficulty`. Events are
    emitted synchronously from inside those calls.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        difficulty: Difficulty | str = DEFAULT_DIFFICULTY,
        rules: GameRules | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if rng is None:
            rng = np.random.default_rng(seed)
        self.grid = Grid(size=grid_size, rng=rng)
        self.food_spawner = FoodSpawner(self.grid)
        self.rules = rules if rules is not None else GameRules()
        self.events = EventBus()

        self.difficulty = parse_difficulty(difficulty)
        self.settings: DifficultySettings = get_settings(self.difficulty)

        self.reset()

    @classmethod
    def from_config(
        cls,
        config: GameConfig,
        rng: np.random.Generator | None = None,
    ) -> GameEngine:
        return cls(
            grid_size=config.grid_size,
            difficulty=config.difficulty,
            rules=config.rules,
            seed=config.seed,
            rng=rng,
        )

    @property
    def tick_interval_ms(self) -> int:
        """Interval at which the scheduler should call :meth:`tick`."""
        return self.settings.tick_interval_ms

    def subscribe(
        self,
        listener: Listener,
        events: Iterable[GameEvent] | None = None,
    ) -> Callable[[], None]:
        """Register an event listener; returns an unsubscribe callable."""
        return self.events.subscribe(listener, events)

    def reset(self) -> GameState:
        """Start a new run on the current difficulty."""
        center = self.grid.size // 2
        self.snake = Snake([Coordinate(center, center)])
        self.direction = INITIAL_DIRECTION
        self._moved_direction = INITIAL_DIRECTION
        self.food: Food = self.food_spawner.initial_food()
        self.score = 0
        self.ticks = 0
        self.game_over = False
        logger.info("Game reset on %s difficulty.", self.difficulty.value)
        return self.get_state()

    def set_difficulty(self, difficulty: Difficulty | str) -> GameState:
        """Switch tier and restart the run."""
        self.difficulty = parse_difficulty(difficulty)
        self.settings = get_settings(self.difficulty)
        logger.info(
            "Difficulty set to %s (tick=%dms, spawn=%.2f).",
            self.difficulty.value,
            self.settings.tick_interval_ms,
            self.settings.spawn_probability,
        )
        return self.reset()

    def set_direction(self, direction: Direction) -> None:
        """Steer the snake for the next tick.

        Setting the current direction again does nothing. Reversals are
        accepted unless ``rules.allow_reversal`` is off.
        """
        if direction == self.direction:
            return
        if not self.rules.allow_reversal and direction == self._moved_direction.opposite:
            return
        self.direction = direction
        self.events.emit(GameEvent.TURNED, self.get_state())

    def tick(self) -> GameState:
        """Advance the game by one step and return the new state."""
        if self.game_over:
            return self.get_state()

        new_head = self.grid.step(self.snake.head, self.direction)
        self._moved_direction = self.direction

        # The tail still counts: moving into it ends the game.
        if self.snake.occupies(new_head):
            self._end_game()
            return self.get_state()

        ate = new_head == self.food.position
        self.snake.advance(new_head, grow=ate)
        if ate:
            self.score += 1
            logger.debug("Food eaten at %s, score %d.", new_head, self.score)
            self.events.emit(GameEvent.ATE, self.get_state())
            self.food = self._spawn_food()

        self.food = self._spawn_food()
        self.ticks += 1
        return self.get_state()

    def get_state(self) -> GameState:
        """Return an immutable snapshot of the game."""
        return GameState(
            snake=self.snake.segments(),
            direction=self.direction,
            food=self.food,
            score=self.score,
            difficulty=self.difficulty,
            is_over=self.game_over,
            tick=self.ticks,
        )

    def _spawn_food(self) -> Food:
        occupied = None if self.rules.allow_food_on_snake else self.snake.body
        return self.food_spawner.maybe_spawn(self.food, self.settings, occupied)

    def _end_game(self) -> None:
        self.game_over = True
        logger.info("Snake died at tick %d with score %d.", self.ticks, self.score)
        self.events.emit(GameEvent.GAME_OVER, self.get_state())
