"""Root conftest: shared test configuration and deterministic clocks."""

import itertools
import os

import pytest

from pulse_ledger.core.domain_types import Timestamp

# Keep tests independent of a developer's .env / shell
os.environ.setdefault("HOST", "127.0.0.1")
os.environ.setdefault("PORT", "8080")
os.environ.setdefault("LOG_FORMAT", "text")


class StepClock:
    """Deterministic clock: each call returns the next second of a fixed day."""

    def __init__(self, start: int = 0):
        self._ticks = itertools.count(start)
        self.calls = 0

    def __call__(self) -> Timestamp:
        self.calls += 1
        return Timestamp(f"2024-01-01 00:00:{next(self._ticks):02d}.000000 UTC")


class FixedClock:
    """Always returns the same timestamp."""

    def __init__(self, value: str = "2024-01-01 00:00:00.000000 UTC"):
        self.value = Timestamp(value)

    def __call__(self) -> Timestamp:
        return self.value


@pytest.fixture
def step_clock():
    return StepClock()


@pytest.fixture
def fixed_clock():
    return FixedClock()
