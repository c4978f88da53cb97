"""
Monotonic clock sources.

The tracker only depends on the Clock protocol, so tests and callers can
inject their own source instead of reading real time.
"""

import time
from typing import Protocol

from .duration import Duration


class Clock(Protocol):
    """Monotonic clock returning the current reading as a Duration."""

    def now(self) -> Duration:
        """Return the current reading; never goes backwards."""


class PerfCounterClock:
    """
    Default clock backed by time.perf_counter_ns.

    perf_counter_ns is the highest-resolution monotonic clock the host
    exposes and is unaffected by wall-clock adjustments.
    """

    def now(self) -> Duration:
        return Duration.from_ns(time.perf_counter_ns())
