"""
Timing summary of a measurement session.

All durations are integer nanoseconds read from a monotonic clock, except
``mean`` which keeps the fractional part of ``total_time / runs``.
Use format_duration() for display.
"""

from dataclasses import asdict, dataclass
from typing import Iterable, Union

from ._internal.samples import DurationSamples, check_runs


# Label used when a session is built without one.
DEFAULT_LABEL = "Timer"

NS_PER_SECOND = 10**9

# Largest unit first; a duration is shown in the first unit it fills.
_UNITS = (
    ("s", 10**9),
    ("ms", 10**6),
    ("µs", 10**3),
)


def format_duration(ns: Union[int, float]) -> str:
    """
    Format a nanosecond duration as a human-readable string.

    The value is exact in the chosen unit; trailing zeros and the decimal
    point are trimmed if not needed.

    Args:
        ns: Duration in nanoseconds. Floats are rounded to the nearest ns.

    Returns:
        String such as "1.5ms", "2s", "750ns"
    """
    ns = int(round(ns))
    if ns < 0:
        raise ValueError("Duration cannot be negative")

    for unit, scale in _UNITS:
        if ns >= scale:
            whole, frac = divmod(ns, scale)
            width = len(str(scale)) - 1
            s = f"{whole}.{frac:0{width}d}"
            s = s.rstrip("0")
            s = s.rstrip(".")
            return f"{s}{unit}"
    return f"{ns}ns"


@dataclass(frozen=True)
class TimingStats:
    """
    Summary of one measurement session.

    Attributes:
        label: Session name
        runs: Number of timed runs (at least 1)
        total_time: Sum of all run durations (ns)
        mean: total_time / runs (ns, float)
        max: Longest run (ns)
        min: Shortest run (ns)
    """

    label: str
    runs: int
    total_time: int
    mean: float
    max: int
    min: int

    def __post_init__(self):
        check_runs(self.runs)

    @classmethod
    def from_samples(cls, label: str, samples: Iterable[int]) -> "TimingStats":
        """
        Reduce per-run durations into a TimingStats.

        Raises:
            InvalidRunsError: if samples is empty
        """
        if not isinstance(samples, DurationSamples):
            collected = DurationSamples()
            for ns in samples:
                collected.record(ns)
            samples = collected

        return cls(
            label=label,
            runs=samples.count,
            total_time=samples.total_ns(),
            mean=samples.mean_ns(),
            max=samples.max_ns(),
            min=samples.min_ns(),
        )

    @property
    def total_seconds(self) -> float:
        return self.total_time / NS_PER_SECOND

    @property
    def mean_seconds(self) -> float:
        return self.mean / NS_PER_SECOND

    @property
    def max_seconds(self) -> float:
        return self.max / NS_PER_SECOND

    @property
    def min_seconds(self) -> float:
        return self.min / NS_PER_SECOND

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    def __str__(self) -> str:
        lines = [f"{self.label} ({self.runs} runs)\n"]
        for name, value in (
            ("total", self.total_time),
            ("mean", self.mean),
            ("max", self.max),
            ("min", self.min),
        ):
            lines.append(f"\t{name:>15}: {format_duration(value):>20}\n")
        return "".join(lines)
