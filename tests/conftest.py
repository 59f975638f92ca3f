"""Shared fixtures for the AI Snake tests."""

import pytest


class StubRng:
    """Stand-in for ``numpy.random.Generator`` with fixed draws.

    ``random()`` always returns *roll*; ``integers(high)`` returns
    ``value % high``.
    """

    def __init__(self, roll: float = 0.0, value: int = 2) -> None:
        self.roll = roll
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.roll

    def integers(self, high: int) -> int:
        self.calls += 1
        return self.value % high


@pytest.fixture()
def stub_rng():
    """Factory for :class:`StubRng` instances."""
    return StubRng
