"""Game configuration and rule policy flags."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from ai_snake.difficulty import DEFAULT_DIFFICULTY, parse_difficulty
from ai_snake.grid import GRID_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRules:
    """Policy flags; the defaults are the permissive classic rules."""

    allow_reversal: bool = True
    allow_food_on_snake: bool = True


@dataclass(frozen=True)
class GameConfig:
    """Settings for building a :class:`~ai_snake.engine.GameEngine`.

    The difficulty table itself is fixed; only the starting tier is chosen
    here.
    """

    grid_size: int = GRID_SIZE
    difficulty: str = DEFAULT_DIFFICULTY.value
    seed: int | None = None
    rules: GameRules = field(default_factory=GameRules)

    def __post_init__(self) -> None:
        # Rejects unknown tier names early.
        parse_difficulty(self.difficulty)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        raw = dict(raw)
        rules_data = raw.pop("rules", None) or {}
        return cls(rules=GameRules(**rules_data), **raw)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
