"""Time a full pass over an iterable as a single run."""

from typing import Any, Callable, Iterable, TypeVar

from .functions import measure
from .stats import TimingStats

T = TypeVar("T")


def time_iterable(
    items: Iterable[T], label: str, per_item: Callable[[T], Any]
) -> TimingStats:
    """
    Drain items, calling per_item on each, and time the whole pass.

    Producing the items is part of the timed interval, so lazy iterators
    are measured together with per_item. Iterators are consumed.

    Returns:
        TimingStats with runs == 1
    """

    def drain():
        for item in items:
            per_item(item)

    return measure(label, 1, drain)
