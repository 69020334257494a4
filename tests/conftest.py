"""Shared fixtures."""

import pytest

from runtimer._internal import clock


@pytest.fixture
def fake_clock(monkeypatch):
    """
    Replace the monotonic clock with a scripted one.

    Call the fixture with run durations (ns); each run then reads
    start/end values that differ by exactly that amount.
    """

    def install(*durations):
        readings = []
        now = 1_000
        for d in durations:
            readings.append(now)
            now += d
            readings.append(now)
            now += 7  # gap between runs is never timed
        it = iter(readings)
        monkeypatch.setattr(clock, "now_ns", lambda: next(it))

    return install


@pytest.fixture(autouse=True)
def _no_quiet_env(monkeypatch):
    monkeypatch.delenv("RUNTIMER_QUIET", raising=False)
