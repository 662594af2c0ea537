"""A small stopwatch for measuring elapsed time."""

from __future__ import annotations

import time
from enum import Enum


class Units(Enum):
    """Units in which a measurement is reported."""

    MICRO = 1_000
    MILLI = 1_000_000


class Timer:
    """Measures time since it was created or last measured."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def start(self) -> None:
        """Restart the timer."""
        self._start = time.perf_counter_ns()

    def measure(self, units: Units = Units.MICRO) -> int:
        """Return the elapsed whole units and restart the timer."""
        elapsed = time.perf_counter_ns() - self._start
        self._start = time.perf_counter_ns()
        return elapsed // units.value