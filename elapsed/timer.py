"""Timing & reporting helpers for blocks of code and asynchronous completions.

Most callers want ``time_pretty_format``: it hands a ready-to-log message to
the reporter, e.g.

    time_pretty_format("Fetching report took %s", logger.debug, fetch_report)

Reporting semantics differ between the two families:
 - Synchronous variants report only after the body returns. A body that
   raises propagates its error and the reporter is never called.
 - Future variants attach the reporter as a done-callback, so it runs once on
   every completion: success, failure or cancellation. The future itself is
   returned untouched.
"""
from __future__ import annotations

import asyncio
import concurrent.futures
import functools
import inspect
from typing import Any, Callable, TypeVar, Union

from elapsed.clock import DEFAULT_CLOCK, Clock
from elapsed.duration import pretty
from elapsed.utils import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

NanosReporter = Callable[[int], None]
StringReporter = Callable[[str], None]
AnyFuture = Union["asyncio.Future[Any]", "concurrent.futures.Future[Any]"]


class Timer:
    def __init__(self, clock: Clock | None = None) -> None:
        self.clock: Clock = clock if clock is not None else DEFAULT_CLOCK

    # ------------------------------- synchronous ------------------------------- #
    def time(self, report: NanosReporter, body: Callable[[], T]) -> T:
        """Time ``body`` and pass the elapsed nanoseconds to ``report``."""
        start = self.clock.now()
        result = body()
        report(self.clock.now() - start)
        return result

    def time_pretty(self, report: StringReporter, body: Callable[[], T]) -> T:
        """Like ``time`` but ``report`` receives ``pretty(elapsed)``, e.g. "372 ns"."""
        return self.time(lambda elapsed: report(pretty(elapsed)), body)

    def time_pretty_format(self, template: str, report: StringReporter, body: Callable[[], T]) -> T:
        """Like ``time_pretty`` but the pretty string is substituted into ``template``.

        ``template`` is printf-style with a single ``%s``; a malformed template
        raises from the ``%`` operator once the body has finished.
        """
        return self.time_pretty(lambda text: report(template % text), body)

    # --------------------------------- futures --------------------------------- #
    def time_future(self, report: NanosReporter, future_producer: Callable[[], Any]) -> AnyFuture:
        """Time the completion of the future produced by ``future_producer``.

        The clock is read before the producer runs, so construction time is
        included. Coroutines and other awaitables are scheduled on the current
        event loop via ``asyncio.ensure_future``; ``concurrent.futures.Future``
        instances are observed as they are.
        """
        start = self.clock.now()
        future = future_producer()
        if not isinstance(future, (asyncio.Future, concurrent.futures.Future)):
            future = asyncio.ensure_future(future)

        def _on_done(_: Any) -> None:
            elapsed = self.clock.now() - start
            try:
                report(elapsed)
            except Exception as e:
                # Reporter errors never reach the future's consumers
                logger.error(
                    "Timing reporter failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    elapsed_ns=elapsed,
                    exc_info=True,
                )

        future.add_done_callback(_on_done)
        return future

    def time_future_pretty(self, report: StringReporter, future_producer: Callable[[], Any]) -> AnyFuture:
        return self.time_future(lambda elapsed: report(pretty(elapsed)), future_producer)

    def time_future_pretty_format(
        self, template: str, report: StringReporter, future_producer: Callable[[], Any]
    ) -> AnyFuture:
        return self.time_future_pretty(lambda text: report(template % text), future_producer)

    # -------------------------------- decorator -------------------------------- #
    def timed(self, report: NanosReporter) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Decorator timing every call of the wrapped function.

        Plain functions go through ``time`` (no report on error). ``async def``
        functions go through ``time_future`` and report on every completion;
        timing starts when the returned coroutine begins running.
        """
        def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
            if inspect.iscoroutinefunction(func):
                @functools.wraps(func)
                async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                    return await self.time_future(report, lambda: func(*args, **kwargs))
                return async_wrapper

            @functools.wraps(func)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                return self.time(report, lambda: func(*args, **kwargs))
            return wrapper

        return decorator


# Singleton instance used application-wide
default_timer = Timer()

time = default_timer.time
time_pretty = default_timer.time_pretty
time_pretty_format = default_timer.time_pretty_format
time_future = default_timer.time_future
time_future_pretty = default_timer.time_future_pretty
time_future_pretty_format = default_timer.time_future_pretty_format
timed = default_timer.timed

__all__ = [
    "Timer",
    "default_timer",
    "time",
    "time_pretty",
    "time_pretty_format",
    "time_future",
    "time_future_pretty",
    "time_future_pretty_format",
    "timed",
    "NanosReporter",
    "StringReporter",
]
