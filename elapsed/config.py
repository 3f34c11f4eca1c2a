"""Library configuration & tunable defaults.

Values that callers may want to adjust (log level, log file, reporter level,
timing header behaviour) are centralized here as module constants
with environment overrides. Tests monkeypatch the dict values directly.
"""
from __future__ import annotations

import os

LOG_LEVEL: str = os.getenv("ELAPSED_LOG_LEVEL", "INFO")

_log_file_env = os.getenv("ELAPSED_LOG_FILE")
LOG_FILE: str | None = _log_file_env if _log_file_env and _log_file_env.strip() else None

# ------------------------------- Timing ----------------------------------- #
TIMING_SETTINGS: dict[str, str | bool] = {
	# Level used by log_reporter when none is given
	"reporter_log_level": os.getenv("ELAPSED_REPORTER_LOG_LEVEL", "info"),
	# HTTP middleware
	"header_name": os.getenv("ELAPSED_HEADER_NAME", "X-Process-Time"),
	"emit_header": os.getenv("ELAPSED_EMIT_HEADER", "true").lower() in {"1", "true", "yes"},
}

__all__ = [
	"LOG_LEVEL",
	"LOG_FILE",
	"TIMING_SETTINGS",
]
