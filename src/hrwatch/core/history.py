"""
Bounded rolling window of recent measurements.

Keeps the last N Durations in insertion order and derives min, max and
average from them. Memory stays bounded by the configured capacity no
matter how many measurements pass through.
"""

import threading
from typing import Iterator, NamedTuple, Optional

from .duration import ZERO, Duration


class DurationStats(NamedTuple):
    """Minimum, maximum and average over a History window."""

    min: Duration
    max: Duration
    avg: Duration


EMPTY_STATS = DurationStats(ZERO, ZERO, ZERO)


def _check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    return capacity


class History:
    """
    Lock-protected FIFO buffer of Durations with a fixed capacity.

    Appending past capacity evicts from the front (oldest first). A
    capacity of 0 keeps nothing.
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty window.

        Args:
            capacity: Maximum number of retained Durations

        Raises:
            TypeError: If capacity is not an int
            ValueError: If capacity is negative
        """
        self._capacity = _check_capacity(capacity)
        self._values: list[Duration] = []
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, duration: Duration) -> None:
        """Add a Duration at the tail, evicting the oldest entries to fit."""
        with self._lock:
            self._values.append(Duration(*duration))
            self._evict()

    def resize(self, capacity: int) -> None:
        """Change the capacity, dropping the oldest entries that no longer fit."""
        with self._lock:
            self._capacity = _check_capacity(capacity)
            self._evict()

    def _evict(self) -> None:
        overflow = len(self._values) - self._capacity
        if overflow > 0:
            del self._values[:overflow]

    def all(self) -> list[Duration]:
        """Return a snapshot of the window, oldest first."""
        with self._lock:
            return list(self._values)

    @property
    def last(self) -> Optional[Duration]:
        """Return the most recent Duration, or None when empty."""
        with self._lock:
            return self._values[-1] if self._values else None

    def clear(self) -> None:
        """Remove every retained Duration."""
        with self._lock:
            self._values.clear()

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Duration]:
        return iter(self.all())

    def average(self) -> Duration:
        """
        Return the mean Duration of the window.

        Sums exact integer nanoseconds and floor-divides by the count, so
        the result never picks up float rounding. Empty windows return ZERO.
        """
        values = self.all()
        if not values:
            return ZERO
        total = sum(d.total_ns for d in values)
        return Duration.from_ns(total // len(values))

    def statistics(self) -> DurationStats:
        """
        Return min, max and average of the window in one pass.

        Empty windows return ZERO for all three.
        """
        values = self.all()
        if not values:
            return EMPTY_STATS

        lowest = highest = values[0]
        total = 0
        for duration in values:
            ns = duration.total_ns
            if ns < lowest.total_ns:
                lowest = duration
            if ns > highest.total_ns:
                highest = duration
            total += ns

        return DurationStats(
            min=lowest,
            max=highest,
            avg=Duration.from_ns(total // len(values)),
        )
