"""
runtimer

Run a callable a fixed number of times and summarize how long it took.

Direct example:
    >>> from runtimer import measure
    >>> stats = measure("sum", 1000, lambda: sum(range(10_000)))
    >>> print(stats.mean, stats.min, stats.max)

Builder example:
    >>> from runtimer import new
    >>> stats = new().with_label("sum").runs(1000).with_work(lambda: sum(range(10_000))).execute()
    Finished sum...
    >>> print(stats)

Iterable example:
    >>> from runtimer import time_iterable
    >>> stats = time_iterable(rows, "parse rows", parse_row)
"""

from .builder import (
    DEFAULT_RUNS,
    ArgsTimer,
    ArgsTimerBuilder,
    Timer,
    TimerBuilder,
    new,
)
from .errors import InvalidRunsError, RuntimerError
from .functions import measure, measure_with_args
from .iter_ext import time_iterable
from .stats import DEFAULT_LABEL, TimingStats, format_duration

__version__ = "0.1.0"

__all__ = [
    # Direct calls
    "measure",
    "measure_with_args",
    # Builder
    "new",
    "TimerBuilder",
    "ArgsTimerBuilder",
    "Timer",
    "ArgsTimer",
    "DEFAULT_LABEL",
    "DEFAULT_RUNS",
    # Iterables
    "time_iterable",
    # Results
    "TimingStats",
    "format_duration",
    # Exceptions
    "RuntimerError",
    "InvalidRunsError",
    # Version
    "__version__",
]
