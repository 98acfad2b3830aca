"""Shared pytest fixtures for test infrastructure."""

from datetime import datetime

import pytest

from barista.context import ContextManager


class FakeClock:
    """Manually advanced clock for staleness tests."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Provide a manually advanced clock.

    Returns:
        FakeClock: Clock starting at an arbitrary fixed instant.
    """
    return FakeClock()


@pytest.fixture
def context_manager(clock: FakeClock) -> ContextManager:
    """Provide a context manager driven by the fake clock.

    Args:
        clock: Fake clock fixture.

    Returns:
        ContextManager: Manager with default timeout and page size.
    """
    return ContextManager(session_id="test-session", clock=clock)


@pytest.fixture
def now() -> datetime:
    """Wednesday 2024-05-15 14:30:00, a fixed reference time for date ranges."""
    return datetime(2024, 5, 15, 14, 30, 0)
