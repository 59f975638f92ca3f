"""Asyncio tick loop driving a game engine at its difficulty's cadence."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ai_snake.engine import GameEngine
    from ai_snake.state import GameState

logger = logging.getLogger(__name__)


class TickScheduler:
    """Calls :meth:`GameEngine.tick` on a timer.

    The interval is re-read from the engine before every sleep, so a
    difficulty change applies from the next tick on.
    """

    def __init__(
        self,
        engine: GameEngine,
        on_tick: Callable[[GameState], None] | None = None,
        *,
        stop_on_game_over: bool = True,
        max_ticks: int | None = None,
    ) -> None:
        if max_ticks is not None and max_ticks < 0:
            raise ValueError("max_ticks must be >= 0.")
        self.engine = engine
        self.on_tick = on_tick
        self.stop_on_game_over = stop_on_game_over
        self.max_ticks = max_ticks
        self.ticks_run = 0
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def _should_continue(self) -> bool:
        if self.max_ticks is not None and self.ticks_run >= self.max_ticks:
            return False
        return not (self.stop_on_game_over and self.engine.game_over)

    async def run(self) -> GameState:
        """Tick until game over or the tick budget is spent."""
        logger.info("Tick loop started (%d ms).", self.engine.tick_interval_ms)
        try:
            while self._should_continue():
                await asyncio.sleep(self.engine.tick_interval_ms / 1000.0)
                state = self.engine.tick()
                self.ticks_run += 1
                if self.on_tick is not None:
                    self.on_tick(state)
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled after %d ticks.", self.ticks_run)
            raise
        except Exception:
            logger.exception("Tick loop error after %d ticks.", self.ticks_run)
        logger.info("Tick loop stopped after %d ticks.", self.ticks_run)
        return self.engine.get_state()

    def start(self) -> asyncio.Task:
        """Run the loop as a background task."""
        if self.running:
            raise RuntimeError("Tick loop is already running.")
        self._task = asyncio.create_task(self.run())
        return self._task

    async def stop(self) -> None:
        """Cancel the background task and wait for it to finish."""
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
        await asyncio.gather(self._task, return_exceptions=True)
        self._task = None
