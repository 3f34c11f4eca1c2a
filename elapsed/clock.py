"""Clock abstraction for injectable monotonic nanosecond time source."""
from __future__ import annotations

import threading
import time
from typing import Iterable, Iterator, Protocol


class ClockExhaustedError(RuntimeError):
    """Raised when a SequenceClock has no values left."""


class Clock(Protocol):
    def now(self) -> int: ...


class MonotonicClock:
    """Default implementation: process monotonic clock, nanosecond resolution."""

    def now(self) -> int:
        return time.monotonic_ns()


class SequenceClock:
    """Deterministic clock replaying a fixed sequence of readings.

    Usage:
        clock = SequenceClock([0, 1_500])
        Timer(clock).time_pretty(print, lambda: None)  # prints "1.500 us"
    """

    def __init__(self, values: Iterable[int]):
        self._values: Iterator[int] = iter(values)
        self._lock = threading.Lock()
        self.reads = 0

    def now(self) -> int:
        with self._lock:
            try:
                value = next(self._values)
            except StopIteration:
                raise ClockExhaustedError(f"clock sequence exhausted after {self.reads} reads") from None
            self.reads += 1
            return value


# Singleton instance used library-wide
DEFAULT_CLOCK = MonotonicClock()

__all__ = ["Clock", "ClockExhaustedError", "DEFAULT_CLOCK", "MonotonicClock", "SequenceClock"]
