"""
hrwatch - high-resolution interval tracker with rolling statistics.

Provides:
  - IntervalTracker : start()/end() timer with a bounded history
  - TrackerOptions  : immutable tracker configuration
  - Duration        : (seconds, nanoseconds) elapsed-time pair
  - TimeUnit        : output format selector for end()
  - convert()       : turn a Duration into any TimeUnit representation
  - @track          : time every call of a function with a tracker
  - track_block()   : context manager for code blocks
  - echo            : on_profiler_end callback printing each measurement
  - print_stats()   : print min/max/avg for a tracker to stdout

All measurements use time.perf_counter_ns for nanosecond precision.
"""

from .core.clock import Clock, PerfCounterClock
from .core.duration import ZERO, Duration
from .core.history import DurationStats, History
from .core.tracker import IntervalTracker, TrackerOptions
from .core.units import DurationBundle, TimeUnit, convert, to_string

from .interfaces.decorators import track, track_block

from .output.formatter import echo, format_duration, print_stats

__all__ = [
    "IntervalTracker",
    "TrackerOptions",
    "Duration",
    "ZERO",
    "DurationStats",
    "History",
    "TimeUnit",
    "DurationBundle",
    "convert",
    "to_string",
    "Clock",
    "PerfCounterClock",
    "track",
    "track_block",
    "echo",
    "format_duration",
    "print_stats",
]
