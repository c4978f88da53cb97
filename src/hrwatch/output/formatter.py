"""
Minimalist console renderer for tracker results.

All formatting decisions are centralized here; the core modules never
print. Color output uses ANSI codes via colorama for Windows
compatibility. Console width is detected dynamically from the terminal.
"""

import shutil

import colorama

from ..core.duration import Duration
from ..core.history import DurationStats
from ..core.tracker import IntervalTracker

colorama.just_fix_windows_console()


class _Color:
    """ANSI color constants."""

    RESET   = colorama.Style.RESET_ALL
    DIM     = colorama.Style.DIM
    BOLD    = colorama.Style.BRIGHT
    CYAN    = colorama.Fore.CYAN
    GREEN   = colorama.Fore.GREEN
    YELLOW  = colorama.Fore.YELLOW
    RED     = colorama.Fore.RED
    WHITE   = colorama.Fore.WHITE
    MAGENTA = colorama.Fore.MAGENTA


def _console_width() -> int:
    """Return current terminal width, with a sensible fallback."""
    return shutil.get_terminal_size(fallback=(80, 24)).columns


def _separator(char: str = "-") -> str:
    """Return a separator line sized to the current terminal width."""
    return char * _console_width()


_THRESHOLD_FAST_NS   = 1_000_000        # under 1 ms   -> green
_THRESHOLD_MEDIUM_NS = 10_000_000       # under 10 ms  -> yellow
                                        # 10 ms and above -> red


def _color_for_duration(ns: int) -> str:
    """Return the appropriate color code based on how slow the measurement is."""
    if ns < _THRESHOLD_FAST_NS:
        return _Color.GREEN
    if ns < _THRESHOLD_MEDIUM_NS:
        return _Color.YELLOW
    return _Color.RED


def format_duration(duration: Duration) -> str:
    """Return a human-readable string in the unit that keeps the value readable."""
    ns = Duration(*duration).total_ns
    if ns < 1_000:
        return f"{ns} ns"
    if ns < 1_000_000:
        return f"{ns / 1_000:.3f} us"
    if ns < 1_000_000_000:
        return f"{ns / 1_000_000:.3f} ms"
    return f"{ns / 1_000_000_000:.6f} s"


def _colored_duration(duration: Duration) -> str:
    """Return a color-coded human-readable duration string."""
    color = _color_for_duration(Duration(*duration).total_ns)
    return f"{color}{format_duration(duration)}{_Color.RESET}"


def format_stats(stats: DurationStats, label: str = "", count: int = 0) -> str:
    """Render min/max/avg for a tracker window as an indented block."""
    lines = [
        f"  {_Color.CYAN}{_Color.BOLD}{label or 'tracker'}{_Color.RESET}",
        f"    calls : {_Color.WHITE}{count}{_Color.RESET}",
        f"    min   : {_Color.GREEN}{format_duration(stats.min)}{_Color.RESET}",
        f"    max   : {_colored_duration(stats.max)}",
        f"    avg   : {_colored_duration(stats.avg)}",
    ]
    return "\n".join(lines)


def print_stats(tracker: IntervalTracker, label: str = "") -> None:
    """Print the statistics block for a tracker's retained measurements."""
    retained = len(tracker.history)
    if not retained:
        print(f"  {_Color.DIM}[hrwatch] No measurements recorded.{_Color.RESET}")
        return

    thick = _separator("=")
    print(f"{_Color.MAGENTA}{thick}{_Color.RESET}")
    print(format_stats(tracker.stat(), label, retained))
    print(f"{_Color.MAGENTA}{thick}{_Color.RESET}")


def echo(duration, tracker: IntervalTracker, args: tuple) -> None:
    """
    on_profiler_end callback that prints each measurement as one line.

    Example:
        IntervalTracker(values_max=10, on_profiler_end=echo)
    """
    label = ", ".join(str(arg) for arg in args) or "interval"
    name_str = f"{_Color.CYAN}{label:<40}{_Color.RESET}"
    print(f"  {name_str} {_colored_duration(tracker.last)}")
