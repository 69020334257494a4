"""
Direct-call measurement functions.

Example:
    >>> from runtimer import measure, measure_with_args
    >>> stats = measure("sort", 100, lambda: sorted(data))
    >>> stats = measure_with_args("sort", 100, make_data, sorted)
    >>> print(stats)
"""

import logging
from typing import Any, Callable, TypeVar

from ._internal.samples import DurationSamples, check_runs
from .stats import TimingStats, format_duration

logger = logging.getLogger(__name__)

Args = TypeVar("Args")


def measure(label: str, runs: int, work: Callable[[], Any]) -> TimingStats:
    """
    Time a zero-argument callable over several runs.

    Only the call itself is timed. Return values are discarded. Exceptions
    raised by work propagate and abort the session.

    Args:
        label: Session name
        runs: Number of runs (at least 1)
        work: Callable to benchmark

    Raises:
        InvalidRunsError: if runs is not an integer >= 1
    """
    check_runs(runs)

    samples = DurationSamples()
    for _ in range(runs):
        samples.time_call(work)

    return _finish(label, samples)


def measure_with_args(
    label: str,
    runs: int,
    arg_generator: Callable[[], Args],
    work: Callable[[Args], Any],
) -> TimingStats:
    """
    Time a one-argument callable, generating a fresh argument for each run.

    arg_generator() is called before each run and is not part of the timed
    interval; only work(arg) is.

    Args:
        label: Session name
        runs: Number of runs (at least 1)
        arg_generator: Produces the argument for one run
        work: Callable to benchmark, called with the generated argument

    Raises:
        InvalidRunsError: if runs is not an integer >= 1
    """
    check_runs(runs)

    samples = DurationSamples()
    for _ in range(runs):
        arg = arg_generator()
        samples.time_call(work, arg)

    return _finish(label, samples)


def _finish(label: str, samples: DurationSamples) -> TimingStats:
    stats = TimingStats.from_samples(label, samples)
    logger.debug(
        "%s: %d runs in %s (%s)",
        label,
        stats.runs,
        format_duration(stats.total_time),
        samples,
    )
    return stats
