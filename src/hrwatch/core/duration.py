"""
Two-component duration value used by every other hrwatch module.

A Duration is a (seconds, nanoseconds) pair. Keeping whole seconds apart
from the sub-second remainder avoids float precision loss on long or very
precise measurements. All arithmetic renormalizes the pair so that the
nanosecond component stays in [0, NS_PER_SEC).
"""

from typing import NamedTuple

NS_PER_SEC = 1_000_000_000
NS_PER_MSEC = 1_000_000


class Duration(NamedTuple):
    """
    Elapsed time as whole seconds plus remainder nanoseconds.

    Compares, hashes and unpacks like the raw (seconds, nanoseconds) pair.
    """

    seconds: int
    nanoseconds: int

    @classmethod
    def from_ns(cls, total_ns: int) -> "Duration":
        """
        Build a Duration from an integer nanosecond count.

        Args:
            total_ns: Non-negative number of nanoseconds

        Raises:
            ValueError: If total_ns is negative
        """
        if total_ns < 0:
            raise ValueError(f"duration cannot be negative: {total_ns} ns")
        seconds, nanoseconds = divmod(int(total_ns), NS_PER_SEC)
        return cls(seconds, nanoseconds)

    @classmethod
    def between(cls, start: "Duration", end: "Duration") -> "Duration":
        """
        Return the interval from start to end.

        Borrows a second when end's nanosecond part is smaller than start's.

        Raises:
            ValueError: If end is earlier than start
        """
        seconds = end[0] - start[0]
        nanoseconds = end[1] - start[1]
        if nanoseconds < 0:
            seconds -= 1
            nanoseconds += NS_PER_SEC
        if seconds < 0:
            raise ValueError(f"end {tuple(end)} precedes start {tuple(start)}")
        return cls(seconds, nanoseconds)

    @property
    def total_ns(self) -> int:
        """Return the exact total length in nanoseconds."""
        return self.seconds * NS_PER_SEC + self.nanoseconds

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_ns(self.total_ns + other.total_ns)

    def __sub__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.between(other, self)


ZERO = Duration(0, 0)
