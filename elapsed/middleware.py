"""
FastAPI request timing middleware.
Times each request with Timer.time_future, adds a processing-time header
and logs the completion with a pretty duration.
"""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request

from elapsed.config import TIMING_SETTINGS
from elapsed.duration import pretty
from elapsed.timer import Timer, default_timer
from elapsed.utils import get_logger

logger = get_logger(__name__)


def add_timing_middleware(app: FastAPI, timer: Optional[Timer] = None, header: Optional[str] = None) -> None:
    """
    Register the request timing middleware on ``app``.

    Args:
        app: FastAPI application
        timer: Timer to measure with (defaults to the library-wide timer)
        header: Response header for elapsed milliseconds; defaults to
            TIMING_SETTINGS["header_name"]
    """
    active_timer = timer or default_timer
    header_name = header or str(TIMING_SETTINGS["header_name"])

    @app.middleware("http")
    async def timing_middleware(request: Request, call_next):
        timing: Dict[str, Any] = {}

        def report(elapsed_ns: int) -> None:
            timing["elapsed_ns"] = elapsed_ns
            status_code = 500
            error = None
            if task.cancelled():
                error = "cancelled"
            elif task.exception() is not None:
                error = str(task.exception())
            else:
                status_code = task.result().status_code
            logger.info(
                "Request completed",
                method=request.method,
                path=request.url.path,
                status_code=status_code,
                process_time=pretty(elapsed_ns),
                process_time_ms=round(elapsed_ns / 1_000_000, 2),
                error=error,
            )

        task = active_timer.time_future(report, lambda: call_next(request))
        response = await task

        # done-callbacks run before the awaiting coroutine resumes
        if TIMING_SETTINGS["emit_header"] and "elapsed_ns" in timing:
            response.headers[header_name] = str(round(timing["elapsed_ns"] / 1_000_000, 2))
        return response


__all__ = ["add_timing_middleware"]
