"""Elapsed-time measurement and human-readable duration formatting.

Usage:
    from elapsed import time_pretty_format

    rows = time_pretty_format("Loaded rows in %s", print, load_rows)
"""
from .clock import Clock, ClockExhaustedError, DEFAULT_CLOCK, MonotonicClock, SequenceClock
from .duration import pretty
from .timer import (
    Timer,
    timed,
    time,
    time_future,
    time_future_pretty,
    time_future_pretty_format,
    time_pretty,
    time_pretty_format,
    default_timer,
)

__all__ = [
    "Clock",
    "ClockExhaustedError",
    "DEFAULT_CLOCK",
    "MonotonicClock",
    "SequenceClock",
    "Timer",
    "pretty",
    "timed",
    "time",
    "time_future",
    "time_future_pretty",
    "time_future_pretty_format",
    "time_pretty",
    "time_pretty_format",
    "default_timer",
]
