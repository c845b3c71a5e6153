"""
Simple timing helpers for the Advent of Code 2022 solvers.

These utilities measure wall-clock time for:

- Individual code blocks (context manager).
- Functions (decorator).

Durations go to the DEBUG log stream, so they only show up when running
with ``--log-level DEBUG`` (or ``AOC2022_LOG_LEVEL=DEBUG``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import functools
import logging
import time


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Context-manager timer
# ---------------------------------------------------------------------------

@dataclass
class Timer:
    """
    Context manager for measuring wall-clock time of a code block.

    Usage
    -----
        from aoc2022.utils.timing import Timer

        with Timer("day5a"):
            day05.run_a(path)

    Attributes
    ----------
    name:
        Optional label included in the log record when exiting the context.
    start:
        Start time (perf_counter units).
    end:
        End time (perf_counter units).
    elapsed:
        Duration in seconds (float). Available after the context exits,
        also when the block raised.
    """

    name: Optional[str] = None
    start: float = 0.0
    end: float = 0.0
    elapsed: float = 0.0

    def __enter__(self) -> "Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.end = time.perf_counter()
        self.elapsed = self.end - self.start
        label = self.name or "block"
        status = "failed after" if exc_type is not None else "took"
        logger.debug("%s %s %.4f s", label, status, self.elapsed)


# ---------------------------------------------------------------------------
# Decorator for timing functions
# ---------------------------------------------------------------------------

def timeit(name: Optional[str] = None) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator to time a function call and log its duration.

    Usage
    -----
        @timeit("parse stacks")
        def parse(...):
            ...
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        label = name or func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with Timer(label):
                return func(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "Timer",
    "timeit",
]
