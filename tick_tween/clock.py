"""Millisecond clocks sampled by tweens at start() and on every tick."""
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Monotonic timestamp source in milliseconds."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """Wall clock backed by time.monotonic()."""

    def now(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Clock that only moves when told to. Used for simulation and tests."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("clock cannot move backwards")
        self._now += ms
        return self._now

    def set(self, ms: float) -> None:
        if ms < self._now:
            raise ValueError("clock cannot move backwards")
        self._now = ms
