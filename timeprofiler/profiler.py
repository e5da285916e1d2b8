"""Chainable monotonic-clock profiler.

A ``TimeProfiler`` measures exactly one interval. Every step returns the
profiler itself so a measurement reads as a single chain::

    TimeProfiler("sort").measure(lambda: data.sort()).report()

Marks are integer nanoseconds from ``time.perf_counter_ns`` unless another
clock is injected. Output lines go to stdout, a given stream, or a
``logging.Logger``.
"""

from __future__ import annotations

import functools
import logging
import sys
import time
from typing import Any, Callable, Optional, TextIO, TypeVar

from timeprofiler.config import ProfilerConfig
from timeprofiler.errors import UnmeasuredReadError

LOGGER = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class TimeProfiler:
    """Record start/stop marks around a block of work and report the runtime."""

    def __init__(
        self,
        label: str = "",
        *,
        stream: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Callable[[], int]] = None,
        logged: bool = False,
    ) -> None:
        self._label = label
        self._stream = stream
        self._logger = logger
        self._clock = clock or time.perf_counter_ns
        self._logged = logged
        self.start_mark: Optional[int] = None
        self.stop_mark: Optional[int] = None

    @classmethod
    def from_config(cls, config: ProfilerConfig, **kwargs: Any) -> "TimeProfiler":
        """Build a profiler from ``config``; explicit ``kwargs`` override it."""
        kwargs.setdefault("logged", config.logged)
        return cls(config.label, **kwargs)

    @property
    def label(self) -> str:
        return self._label

    @property
    def elapsed(self) -> int:
        """Nanoseconds between the start and stop marks."""
        if self.start_mark is None:
            raise UnmeasuredReadError("Time profiler was not started")
        if self.stop_mark is None:
            raise UnmeasuredReadError("Time profiler has not been stopped")
        return self.stop_mark - self.start_mark

    @property
    def elapsed_seconds(self) -> float:
        return self.elapsed / 1e9

    def start(self, logged: Optional[bool] = None) -> "TimeProfiler":
        """Record the start mark."""
        if self._resolve(logged):
            self._emit(f"Started {self._label}")
        self.start_mark = self._clock()
        LOGGER.debug("start mark %s for %r", self.start_mark, self._label)
        return self

    def stop(self, logged: Optional[bool] = None) -> "TimeProfiler":
        """Record the stop mark."""
        if self._resolve(logged):
            self._emit(f"Stopped {self._label}")
        self.stop_mark = self._clock()
        LOGGER.debug("stop mark %s for %r", self.stop_mark, self._label)
        return self

    def execute(
        self, block: Callable[[], Any], logged: Optional[bool] = None
    ) -> "TimeProfiler":
        """Run ``block`` once on the calling thread. Timing is left to the caller."""
        if self._resolve(logged):
            self._emit(f"Running {self._label}")
        block()
        return self

    def report(self, message: Optional[str] = None) -> "TimeProfiler":
        """Print the runtime; raises UnmeasuredReadError if a mark is missing."""
        runtime = self.elapsed
        if message is None:
            message = f"Measured {self._label}"
        self._emit(f"{message} - Total runtime: {runtime}")
        return self

    def measure(
        self, block: Callable[[], Any], logged: Optional[bool] = None
    ) -> "TimeProfiler":
        """Start, execute ``block``, and stop, in that order."""
        return self.start(logged).execute(block, logged).stop(logged)

    def __enter__(self) -> "TimeProfiler":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401
        self.stop()

    def __repr__(self) -> str:
        return (
            f"TimeProfiler(label={self._label!r}, start_mark={self.start_mark}, "
            f"stop_mark={self.stop_mark})"
        )

    def _resolve(self, logged: Optional[bool]) -> bool:
        return self._logged if logged is None else logged

    def _emit(self, line: str) -> None:
        if self._logger is not None:
            self._logger.info(line, extra={"label": self._label})
            return
        # Look up stdout per call so redirected/captured output is honored.
        print(line, file=self._stream if self._stream is not None else sys.stdout)


def profiled(
    label: Optional[str] = None,
    logged: bool = False,
    message: Optional[str] = None,
    **profiler_kwargs: Any,
) -> Callable[[F], F]:
    """Decorator that measures and reports every call of the wrapped function.

    Usage:
        @profiled("load", logged=True)
        def load(path):
            ...

    The wrapped function's return value is passed through unchanged.
    """

    def decorator(func: F) -> F:
        name = label if label is not None else func.__qualname__

        @functools.wraps(func)
        def _wrapper(*args, **kwargs):
            result = None

            def _call() -> None:
                nonlocal result
                result = func(*args, **kwargs)

            TimeProfiler(name, **profiler_kwargs).measure(_call, logged).report(message)
            return result

        return _wrapper  # type: ignore[return-value]

    return decorator
