"""Reporter factories bridging timing results into the structured logger."""
from __future__ import annotations

from typing import Any, Dict, Optional

from elapsed.config import TIMING_SETTINGS
from elapsed.duration import pretty
from elapsed.timer import NanosReporter, StringReporter
from elapsed.utils import get_logger, log_performance
from elapsed.utils.logger import StructuredLogger


def log_reporter(logger: StructuredLogger | None = None, level: Optional[str] = None, **fields: Any) -> StringReporter:
    """
    Build a reporter that logs the message it receives.

    Args:
        logger: Target structured logger (defaults to the "elapsed.timing" logger)
        level: Log level name; defaults to TIMING_SETTINGS["reporter_log_level"]
        **fields: Extra structured fields attached to every record

    Example:
        time_pretty_format("Rebuild took %s", log_reporter(level="debug", job="rebuild"), rebuild)
    """
    target = logger or get_logger("timing")
    level_name = str(level or TIMING_SETTINGS["reporter_log_level"])

    def report(message: str) -> None:
        target.log(level_name, message, **fields)

    return report


def performance_reporter(operation: str, additional_data: Optional[Dict[str, Any]] = None) -> NanosReporter:
    """Build a nanosecond reporter that records the duration via log_performance."""

    def report(elapsed_ns: int) -> None:
        data = {"duration_pretty": pretty(elapsed_ns)}
        if additional_data:
            data.update(additional_data)
        log_performance(operation, round(elapsed_ns / 1_000_000, 3), data)

    return report


__all__ = ["log_reporter", "performance_reporter"]
