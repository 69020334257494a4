"""Monotonic clock primitive used for every timed run."""

import time


def now_ns() -> int:
    """Current reading of the monotonic performance counter, in nanoseconds."""
    return time.perf_counter_ns()
