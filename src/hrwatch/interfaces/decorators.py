"""
Function and block timing driven by an IntervalTracker.

Usage:
    tracker = IntervalTracker(values_max=50)

    @track(tracker)                   # every call is one start/end cycle
    def handle(request): ...

    with track_block(tracker, "db"):  # "db" is passed on to end()
        rows = db.query(...)
"""

import functools
import inspect
from contextlib import contextmanager
from typing import Callable

from ..core.tracker import IntervalTracker


def _make_wrapper(fn: Callable, tracker: IntervalTracker) -> Callable:
    """Wrap a callable so each invocation is one tracker cycle."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        tracker.start()
        try:
            return fn(*args, **kwargs)
        finally:
            tracker.end(*args)

    return wrapper


def _make_async_wrapper(fn: Callable, tracker: IntervalTracker) -> Callable:
    """Wrap an async callable so each awaited invocation is one tracker cycle."""

    @functools.wraps(fn)
    async def wrapper(*args, **kwargs):
        tracker.start()
        try:
            return await fn(*args, **kwargs)
        finally:
            tracker.end(*args)

    return wrapper


def track(tracker: IntervalTracker) -> Callable:
    """
    Decorator that times every call of a function with the given tracker.

    Positional call arguments are forwarded to tracker.end(), so an
    on_profiler_end callback receives them as its third argument. The
    measurement is recorded even when the function raises.

    Args:
        tracker: Tracker that owns the mark and history for this function

    Example:
        @track(IntervalTracker(values_max=10, units="nanoseconds"))
        def parse(raw): ...
    """

    def decorator(fn: Callable) -> Callable:
        if inspect.iscoroutinefunction(fn):
            return _make_async_wrapper(fn, tracker)
        return _make_wrapper(fn, tracker)

    return decorator


@contextmanager
def track_block(tracker: IntervalTracker, *args):
    """
    Context manager for timing an inline block of code.

    Args:
        tracker: Tracker to start on entry and end on exit
        *args: Forwarded to tracker.end()

    Example:
        with track_block(tracker, "parse json"):
            data = json.loads(raw)
    """
    tracker.start()
    try:
        yield tracker
    finally:
        tracker.end(*args)
