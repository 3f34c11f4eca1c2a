"""Duration formatting (nanoseconds -> human-readable string)."""
from __future__ import annotations

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR

_FACTORS = (MILLIS_PER_DAY, MILLIS_PER_HOUR, MILLIS_PER_MINUTE, MILLIS_PER_SECOND)


def _split_millis(ms: int) -> list[int]:
    """Decompose milliseconds into [days, hours, minutes, seconds]."""
    bits: list[int] = []
    for millis_per in _FACTORS:
        bits.append(ms // millis_per)
        ms %= millis_per
    return bits


def pretty(duration: int) -> str:
    """
    Turn a nanosecond duration into a human-readable string.

    Args:
        duration: Elapsed nanoseconds

    Returns:
        A string such as "372 ns", "1.500 ms", "37 s" or "45 days 08:55:01"

    Example:
        pretty(1_500_000) -> "1.500 ms"
        pretty(90_000_000_000) -> "00:01:30"

    Negative durations never raise but the output is not meaningful.
    """
    ns = int(duration)
    us = ns // 1000
    ms = ns // 1_000_000
    s = ns // 1_000_000_000

    # Tiers overlap on exact multiples; order matters
    if us == 0 and ms == 0 and s == 0:
        return f"{ns} ns"
    if ms == 0 and s == 0:
        if ns == us * 1000:
            return f"{us} us"
        return f"{ns / 1000:.3f} us"
    if s == 0:
        if us == ms * 1000:
            return f"{ms} ms"
        return f"{us / 1000:.3f} ms"
    if s < 60:
        if ms == s * 1000:
            return f"{s} s"
        return f"{ms / 1000:.3f} s"

    parts = _split_millis(ms)
    if len(parts) == 4:
        days, hours, minutes, seconds = parts
        if days == 0:
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{days} days {hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{ms} ms"


__all__ = ["pretty", "MILLIS_PER_DAY", "MILLIS_PER_HOUR", "MILLIS_PER_MINUTE", "MILLIS_PER_SECOND"]
