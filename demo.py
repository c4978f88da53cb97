"""
hrwatch demo script.

Run this directly to see all interfaces in action:
    python demo.py
"""

import asyncio
import time

from hrwatch import (
    IntervalTracker,
    echo,
    print_stats,
    track,
    track_block,
)


# --- 1. Plain start/end --------------------------------------------------------

def manual_cycles():
    """Time a few sleeps by hand and keep the last five."""
    tracker = IntervalTracker(values_max=5, units="string")
    for delay in (0.001, 0.003, 0.002):
        tracker.start()
        time.sleep(delay)
        print(f"  slept {delay}s -> {tracker.end()}")
    print_stats(tracker, label="manual sleeps")


# --- 2. Decorator ----------------------------------------------------------------

sum_tracker = IntervalTracker(values_max=10, on_profiler_end=echo)


@track(sum_tracker)
def heavy_sum(limit):
    """Sum a large range."""
    return sum(range(limit))


# --- 3. Async decorator ----------------------------------------------------------

fetch_tracker = IntervalTracker(values_max=10, on_profiler_end=echo)


@track(fetch_tracker)
async def fake_fetch(url):
    """Simulate an async HTTP request."""
    await asyncio.sleep(0.005)
    return f"response from {url}"


# --- run everything --------------------------------------------------------------

def main():
    """Execute all demos."""
    print("\n--- start/end ---")
    manual_cycles()

    print("\n--- decorator ---")
    heavy_sum(1_000_000)
    heavy_sum(5_000_000)
    print_stats(sum_tracker, label="heavy_sum")

    print("\n--- async ---")
    asyncio.run(fake_fetch("https://api.example.com/data"))

    print("\n--- track_block ---")
    block_tracker = IntervalTracker(values_max=3, on_profiler_end=echo)
    with track_block(block_tracker, "json serialization simulation"):
        time.sleep(0.002)

    print("\n--- history disabled (auto-started) ---")
    since_start = IntervalTracker(units="all")
    time.sleep(0.001)
    print(f"  {since_start.end().as_dict()}")


if __name__ == "__main__":
    main()
