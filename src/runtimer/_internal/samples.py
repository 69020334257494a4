"""Internal duration sample collection."""

from typing import Any, Callable

from . import clock
from ..errors import InvalidRunsError


def check_runs(runs: int) -> int:
    """Validate a run count. Returns it unchanged."""
    # bool is an int subclass, True would silently mean one run
    if isinstance(runs, bool) or not isinstance(runs, int):
        raise InvalidRunsError(f"runs must be an integer, got {runs!r}")
    if runs < 1:
        raise InvalidRunsError(f"runs must be at least 1, got {runs}")
    return runs


class DurationSamples:
    """Per-run durations of a single session, in nanoseconds."""

    def __init__(self):
        self._samples: list[int] = []

    def record(self, ns: int):
        self._samples.append(ns)

    def time_call(self, fn: Callable[..., Any], *args):
        """Call fn(*args) and record how long the call alone took."""
        start = clock.now_ns()
        fn(*args)
        self.record(clock.now_ns() - start)

    @property
    def count(self) -> int:
        return len(self._samples)

    def total_ns(self) -> int:
        return sum(self._samples)

    def mean_ns(self) -> float:
        if not self._samples:
            raise InvalidRunsError("no samples recorded")
        return self.total_ns() / len(self._samples)

    def min_ns(self) -> int:
        if not self._samples:
            raise InvalidRunsError("no samples recorded")
        return min(self._samples)

    def max_ns(self) -> int:
        if not self._samples:
            raise InvalidRunsError("no samples recorded")
        return max(self._samples)

    def __str__(self) -> str:
        if not self._samples:
            return "n=0"
        return f"n={self.count} total={self.total_ns()}ns min={self.min_ns()}ns max={self.max_ns()}ns"
