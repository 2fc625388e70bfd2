"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

import progress_monitor.progress_tracker as progress_tracker_module

_CLOCK_EPOCH = 1_700_000_000.0


class FakeClock:
    """Manually advanced stand-in for the ``time`` module."""

    def __init__(self, now: float = _CLOCK_EPOCH):
        self.now = now

    def time(self) -> float:
        """Return the current fake timestamp."""
        return self.now

    def advance(self, seconds: float) -> float:
        """Move the clock forward and return the new timestamp."""
        self.now += seconds
        return self.now


@pytest.fixture
def fake_clock(monkeypatch) -> FakeClock:
    """Provide a fake clock patched into the progress tracker module."""
    clock = FakeClock()
    monkeypatch.setattr(progress_tracker_module, "time", clock)
    return clock


@pytest.fixture
def fruit_config() -> dict:
    """Plan and metrics for peeling 10 oranges and cracking 32 nuts."""
    return {"plan": {"oranges": 10, "nuts": 32}, "metrics": {"oranges": 10, "nuts": 1}}
