"""
Fluent builder for measurement sessions.

Each step returns a new frozen object, so partial configurations can be
reused. A session can only be executed once work has been supplied: the
builder classes have no execute() and the configured classes have no
with_work().

Example:
    >>> from runtimer import new
    >>> stats = (
    ...     new()
    ...     .with_label("sort 10k")
    ...     .runs(50)
    ...     .with_argument_generator(lambda: random.sample(range(10_000), 10_000))
    ...     .with_work(sorted)
    ...     .execute()
    ... )
    Finished sort 10k...
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Optional, TypeVar

from .functions import measure, measure_with_args
from .stats import DEFAULT_LABEL, TimingStats

Args = TypeVar("Args")

DEFAULT_RUNS = 1

# Environment variable that silences the completion notice
QUIET_ENV = "RUNTIMER_QUIET"
_TRUTHY = {"1", "true", "yes", "on"}


def _quiet_from_env() -> bool:
    return os.getenv(QUIET_ENV, "").strip().lower() in _TRUTHY


def _notify(label: str, quiet: Optional[bool], logger: Optional[logging.Logger]):
    """Announce a finished session on stdout, or on logger if given."""
    if quiet is None:
        quiet = _quiet_from_env()
    if quiet:
        return
    if logger is not None:
        logger.info("Finished %s...", label)
    else:
        print(f"Finished {label}...")


@dataclass(frozen=True)
class TimerBuilder:
    """
    Bare builder state: optional label and run count, no work yet.

    Use new() rather than constructing directly.
    """

    label: Optional[str] = None
    run_count: Optional[int] = None

    def with_label(self, label: str) -> "TimerBuilder":
        """Set the session label. Last call wins."""
        return replace(self, label=label)

    def runs(self, count: int) -> "TimerBuilder":
        """Set the number of runs. Validated on execute()."""
        return replace(self, run_count=count)

    def with_argument_generator(
        self, generator: Callable[[], Args]
    ) -> "ArgsTimerBuilder[Args]":
        """Generate a fresh, untimed argument for each run."""
        return ArgsTimerBuilder(
            label=self.label,
            run_count=self.run_count,
            arg_generator=generator,
        )

    def with_work(self, work: Callable[[], Any]) -> "Timer":
        """Supply the zero-argument callable to benchmark."""
        return Timer(label=self.label, run_count=self.run_count, work=work)


@dataclass(frozen=True)
class ArgsTimerBuilder(Generic[Args]):
    """Builder state with an argument generator, waiting for work."""

    label: Optional[str]
    run_count: Optional[int]
    arg_generator: Callable[[], Args]

    def with_work(self, work: Callable[[Args], Any]) -> "ArgsTimer[Args]":
        """Supply the callable to benchmark; it receives each generated argument."""
        return ArgsTimer(
            label=self.label,
            run_count=self.run_count,
            arg_generator=self.arg_generator,
            work=work,
        )


class _Executable:
    """Shared execute() for the configured states."""

    label: Optional[str]
    run_count: Optional[int]

    def _measure(self, label: str, runs: int) -> TimingStats:
        raise NotImplementedError

    def execute(
        self,
        quiet: Optional[bool] = None,
        logger: Optional[logging.Logger] = None,
    ) -> TimingStats:
        """
        Run the session and return its stats.

        Prints "Finished <label>..." once all runs complete.

        Args:
            quiet: Suppress the notice. Defaults to the RUNTIMER_QUIET env var.
            logger: Send the notice to logger.info instead of stdout.

        Raises:
            InvalidRunsError: if the configured run count is not an integer >= 1
        """
        label = self.label if self.label is not None else DEFAULT_LABEL
        runs = self.run_count if self.run_count is not None else DEFAULT_RUNS

        stats = self._measure(label, runs)
        _notify(label, quiet, logger)
        return stats

    def execute_and_print(self, quiet: Optional[bool] = None) -> TimingStats:
        """Run the session and print the rendered stats."""
        stats = self.execute(quiet=quiet)
        print(stats)
        return stats


@dataclass(frozen=True)
class Timer(_Executable):
    """Configured session with zero-argument work."""

    label: Optional[str]
    run_count: Optional[int]
    work: Callable[[], Any]

    def _measure(self, label: str, runs: int) -> TimingStats:
        return measure(label, runs, self.work)


@dataclass(frozen=True)
class ArgsTimer(_Executable, Generic[Args]):
    """Configured session with generated arguments."""

    label: Optional[str]
    run_count: Optional[int]
    arg_generator: Callable[[], Args]
    work: Callable[[Args], Any]

    def _measure(self, label: str, runs: int) -> TimingStats:
        return measure_with_args(label, runs, self.arg_generator, self.work)


def new() -> TimerBuilder:
    """Start a new session builder."""
    return TimerBuilder()
