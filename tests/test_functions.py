"""Tests for measure and measure_with_args."""

import time

import pytest

from runtimer import InvalidRunsError, RuntimerError, measure, measure_with_args

MS = 1_000_000


def test_measure_sleeping_work():
    """Durations are never shorter than the work itself."""
    wait_ms = 2
    runs = 5

    stats = measure("Test NoArgs Timer", runs, lambda: time.sleep(wait_ms / 1000))

    assert stats.label == "Test NoArgs Timer"
    assert stats.runs == runs
    # Can be longer due to scheduling, never shorter
    assert stats.total_time >= wait_ms * MS * runs
    assert stats.max >= wait_ms * MS
    assert stats.min >= wait_ms * MS
    assert stats.mean >= wait_ms * MS


def test_measure_with_args_sleeping_work():
    """Generated argument is passed to work on every run."""
    wait_ms = 2
    runs = 5

    stats = measure_with_args(
        "Test Args Timer",
        runs,
        lambda: wait_ms,
        lambda ms: time.sleep(ms / 1000),
    )

    assert stats.label == "Test Args Timer"
    assert stats.runs == runs
    assert stats.total_time >= wait_ms * MS * runs
    assert stats.max >= wait_ms * MS
    assert stats.min >= wait_ms * MS
    assert stats.mean >= wait_ms * MS


def test_noop_scenario():
    """No-op work gives near-zero durations."""
    stats = measure("A", 5, lambda: None)

    assert stats.label == "A"
    assert stats.runs == 5
    assert stats.total_time < 50 * MS
    assert stats.min <= stats.mean <= stats.max


def test_exact_reduction(fake_clock):
    """Total, mean, max and min follow from the per-run samples."""
    fake_clock(10, 30, 5)

    stats = measure("exact", 3, lambda: None)

    assert stats.total_time == 45
    assert stats.mean == 15.0
    assert stats.max == 30
    assert stats.min == 5


def test_mean_keeps_fraction(fake_clock):
    """Mean uses real division, not integer truncation."""
    fake_clock(1, 2)

    stats = measure("frac", 2, lambda: None)

    assert stats.total_time == 3
    assert stats.mean == pytest.approx(1.5)


def test_work_called_exactly_runs_times():
    calls = []

    measure("count", 7, lambda: calls.append(1))

    assert len(calls) == 7


def test_generator_called_once_per_run():
    """Each run gets its own freshly generated argument."""
    counter = iter(range(100))
    seen = []

    measure_with_args("fresh", 4, lambda: next(counter), seen.append)

    assert seen == [0, 1, 2, 3]


def test_argument_generation_not_timed():
    """A slow generator does not show up in the timings."""
    slow_ms = 20

    def slow_generator():
        time.sleep(slow_ms / 1000)
        return None

    stats = measure_with_args("slow args", 3, slow_generator, lambda _: None)

    assert stats.max < slow_ms * MS
    assert stats.total_time < slow_ms * MS


@pytest.mark.parametrize("runs", [0, -1])
def test_non_positive_runs_rejected(runs):
    """Zero or negative runs raise before work is called."""
    calls = []

    with pytest.raises(InvalidRunsError):
        measure("bad", runs, lambda: calls.append(1))
    with pytest.raises(InvalidRunsError):
        measure_with_args("bad", runs, lambda: 1, calls.append)

    assert calls == []


@pytest.mark.parametrize("runs", [1.0, "3", True, None])
def test_non_integer_runs_rejected(runs):
    with pytest.raises(InvalidRunsError):
        measure("bad", runs, lambda: None)


def test_invalid_runs_error_hierarchy():
    """InvalidRunsError can be caught as ValueError or RuntimerError."""
    with pytest.raises(ValueError):
        measure("bad", 0, lambda: None)
    with pytest.raises(RuntimerError):
        measure("bad", 0, lambda: None)


def test_work_exception_propagates():
    """A failing run aborts the session and the error reaches the caller."""
    calls = []

    def work():
        calls.append(1)
        if len(calls) == 2:
            raise KeyError("boom")

    with pytest.raises(KeyError):
        measure("failing", 5, work)

    assert len(calls) == 2


def test_generator_exception_propagates():
    def generator():
        raise RuntimeError("no input")

    with pytest.raises(RuntimeError, match="no input"):
        measure_with_args("failing", 3, generator, lambda _: None)


def test_session_debug_log(caplog):
    """A finished session is logged at debug level."""
    with caplog.at_level("DEBUG", logger="runtimer.functions"):
        measure("logged", 2, lambda: None)

    assert any("logged: 2 runs" in m for m in caplog.messages)
