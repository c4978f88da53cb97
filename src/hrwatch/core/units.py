"""
Output representations for a raw Duration.

TimeUnit selects what IntervalTracker.end() returns. Unrecognized unit
names never fail: they resolve to TimeUnit.ALL and produce a bundle of
every representation.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Union

from .duration import NS_PER_MSEC, NS_PER_SEC, Duration


class TimeUnit(str, Enum):
    """Output format selector for a measured Duration."""

    HRTIME = "hrtime"
    NANOSECONDS = "nanoseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    STRING = "string"
    ALL = "all"

    @classmethod
    def _missing_(cls, value):
        return cls.ALL


@dataclass(frozen=True)
class DurationBundle:
    """Every representation of one Duration, computed together."""

    hrtime: Duration
    nanoseconds: int
    milliseconds: float
    seconds: float
    string: str

    def as_dict(self) -> dict:
        """Return the bundle as a plain dict, hrtime as a (sec, ns) tuple."""
        data = asdict(self)
        data["hrtime"] = tuple(self.hrtime)
        return data


Converted = Union[Duration, int, float, str, DurationBundle]


def to_string(duration: Duration) -> str:
    """
    Render a Duration as a short human-readable label.

    Durations over 1000 seconds render as thousands of seconds with three
    decimals, e.g. (1500, 0) -> "1.500 sec". Anything shorter renders as
    the raw pair joined by a dot with an "msec" label, e.g.
    (5, 250) -> "5.250 msec". Both labels are kept as-is for output
    compatibility with existing consumers, even though neither matches the
    magnitude it prints.
    """
    seconds, nanoseconds = duration
    if seconds > 1000:
        return f"{seconds / 1000:.3f} sec"
    return f"{seconds}.{nanoseconds} msec"


def convert(duration: Duration, unit: Union[TimeUnit, str] = TimeUnit.HRTIME) -> Converted:
    """
    Convert a raw Duration into the representation selected by unit.

    Args:
        duration: Raw (seconds, nanoseconds) pair
        unit: TimeUnit or its string value; unknown strings select ALL

    Returns:
        The Duration itself, an int of nanoseconds, a float of milliseconds
        or seconds, a string label, or a DurationBundle.
    """
    duration = Duration(*duration)
    unit = TimeUnit(unit)
    total_ns = duration.total_ns

    if unit is TimeUnit.HRTIME:
        return duration
    if unit is TimeUnit.NANOSECONDS:
        return total_ns
    if unit is TimeUnit.MILLISECONDS:
        return total_ns / NS_PER_MSEC
    if unit is TimeUnit.SECONDS:
        return total_ns / NS_PER_SEC
    if unit is TimeUnit.STRING:
        return to_string(duration)
    return DurationBundle(
        hrtime=duration,
        nanoseconds=total_ns,
        milliseconds=total_ns / NS_PER_MSEC,
        seconds=total_ns / NS_PER_SEC,
        string=to_string(duration),
    )
