"""
IntervalTracker: start/end interval timer with rolling statistics.

Usage:
    tracker = IntervalTracker(values_max=100, units="milliseconds")
    tracker.start()
    do_work()
    elapsed_ms = tracker.end()
    print(tracker.stat())

One tracker models one sequential timer. It holds a single active mark,
so overlapping start/end pairs from concurrent callers overwrite each
other's mark; give every concurrent operation its own tracker.
"""

from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Union

from .clock import Clock, PerfCounterClock
from .duration import ZERO, Duration
from .history import DurationStats, History
from .units import Converted, TimeUnit, convert

OnProfilerEnd = Callable[[Converted, "IntervalTracker", tuple], Any]


@dataclass(frozen=True)
class TrackerOptions:
    """
    Immutable tracker configuration.

    Attributes:
        values_max: History capacity. 0 disables history and starts the
            timer as soon as the tracker is built.
        units: Representation returned by end(); unknown names mean ALL.
        on_profiler_end: Called as (duration, tracker, args) after each end()
    """

    values_max: int = 0
    units: Union[TimeUnit, str] = TimeUnit.MILLISECONDS
    on_profiler_end: Optional[OnProfilerEnd] = None

    def __post_init__(self):
        if isinstance(self.values_max, bool) or not isinstance(self.values_max, int):
            raise TypeError(
                f"values_max must be an int, got {type(self.values_max).__name__}"
            )
        if self.values_max < 0:
            raise ValueError(f"values_max must be non-negative, got {self.values_max}")
        if self.on_profiler_end is not None and not callable(self.on_profiler_end):
            raise TypeError("on_profiler_end must be callable or None")
        object.__setattr__(self, "units", TimeUnit(self.units))

    @property
    def history_enabled(self) -> bool:
        return self.values_max > 0


class IntervalTracker:
    """
    Measures start-to-end intervals and keeps a bounded history of them.

    Also usable as a context manager: entering calls start(), leaving
    calls end() even when the block raises.
    """

    def __init__(
        self,
        options: Optional[TrackerOptions] = None,
        *,
        clock: Optional[Clock] = None,
        **overrides,
    ):
        """
        Build a tracker from options and/or keyword overrides.

        Args:
            options: Base configuration; defaults to TrackerOptions()
            clock: Monotonic clock source; defaults to PerfCounterClock
            **overrides: values_max, units or on_profiler_end, applied on
                top of options

        Example:
            IntervalTracker(values_max=10, units="string")
        """
        base = options or TrackerOptions()
        self.options = replace(base, **overrides) if overrides else base
        self._clock = clock or PerfCounterClock()
        self._history = History(self.options.values_max)
        self._mark: Optional[Duration] = None
        self._last: Optional[Duration] = None
        self._init_state()

    def _init_state(self) -> None:
        """Start the timer right away when history is disabled."""
        if not self.options.history_enabled:
            self.start()

    def start(self) -> "IntervalTracker":
        """Set the active mark to now, replacing any earlier mark."""
        self._mark = self._clock.now()
        return self

    def end(self, *args) -> Converted:
        """
        Measure the time since the active mark.

        The raw Duration is recorded into history (when enabled), converted
        to options.units and passed to on_profiler_end along with this
        tracker and args. The mark is left in place, so a further end()
        measures from the same start.

        If start() was never called the mark is the clock's zero point and
        the result is the raw clock reading. Exceptions raised by
        on_profiler_end propagate to the caller; the measurement has
        already been recorded by then.

        Args:
            *args: Forwarded to on_profiler_end as a tuple

        Returns:
            The elapsed time in the configured unit
        """
        elapsed = Duration.between(self._mark or ZERO, self._clock.now())
        self._last = elapsed
        if self.options.history_enabled:
            self._history.append(elapsed)

        duration = convert(elapsed, self.options.units)

        callback = self.options.on_profiler_end
        if callback is not None:
            callback(duration, self, args)

        return duration

    def avg(self) -> Duration:
        """Return the mean of the retained measurements, ZERO when empty."""
        return self._history.average()

    def stat(self) -> DurationStats:
        """Return min, max and avg of the retained measurements."""
        return self._history.statistics()

    def reset(self) -> None:
        """Drop history and the active mark, then re-initialize."""
        self._history.clear()
        self._mark = None
        self._last = None
        self._init_state()

    @property
    def history(self) -> list[Duration]:
        """Return the retained raw measurements, oldest first."""
        return self._history.all()

    @property
    def last(self) -> Optional[Duration]:
        """Return the most recent raw measurement, or None before any end()."""
        return self._last

    @property
    def running(self) -> bool:
        """Return True once an active mark has been set."""
        return self._mark is not None

    def __enter__(self) -> "IntervalTracker":
        return self.start()

    def __exit__(self, *_) -> None:
        self.end()

    def __repr__(self) -> str:
        return (
            f"IntervalTracker(values_max={self.options.values_max}, "
            f"units={self.options.units.value!r}, retained={len(self._history)})"
        )
