"""Difficulty tiers controlling tick cadence and food spawn rate."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


class Difficulty(str, enum.Enum):
    """Player-selectable difficulty tiers."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def display_name(self) -> str:
        """Display name, e.g. ``"Medium"``."""
        return self.value.capitalize()


@dataclass(frozen=True)
class DifficultySettings:
    """Tick interval and per-attempt food spawn probability of a tier."""

    tick_interval_ms: int
    spawn_probability: float

    def __post_init__(self) -> None:
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")
        if not 0.0 <= self.spawn_probability <= 1.0:
            raise ValueError("spawn_probability must be within [0, 1].")


DEFAULT_DIFFICULTY = Difficulty.MEDIUM

DIFFICULTY_SETTINGS: Mapping[Difficulty, DifficultySettings] = MappingProxyType({
    Difficulty.EASY: DifficultySettings(tick_interval_ms=200, spawn_probability=0.1),
    Difficulty.MEDIUM: DifficultySettings(tick_interval_ms=150, spawn_probability=0.07),
    Difficulty.HARD: DifficultySettings(tick_interval_ms=100, spawn_probability=0.05),
})

ALL_DIFFICULTIES: list[Difficulty] = list(Difficulty)


def parse_difficulty(difficulty: Difficulty | str) -> Difficulty:
    """Coerce a tier name (case-insensitive) or member to a :class:`Difficulty`."""
    if isinstance(difficulty, Difficulty):
        return difficulty
    try:
        return Difficulty(difficulty.lower())
    except ValueError:
        raise ValueError(f"Unknown difficulty {difficulty!r}.") from None


def get_settings(difficulty: Difficulty | str) -> DifficultySettings:
    """Look up the settings for a tier."""
    return DIFFICULTY_SETTINGS[parse_difficulty(difficulty)]
