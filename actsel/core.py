from collections.abc import Callable, Sequence
from typing import TypeVar

from actsel.errors import ExhaustiveLimitError
from actsel.interval import Interval
from actsel.util import EXHAUSTIVE_LIMIT

Ivl = TypeVar("Ivl", bound=Interval)

Selector = Callable[[Sequence[Ivl]], list[Ivl]]


def overlaps(a: Interval, b: Interval) -> bool:
    """Return True if two intervals share at least one instant.

    Intervals are half-open, so touching intervals (``a.end == b.start``)
    do not overlap. Symmetric: ``overlaps(a, b) == overlaps(b, a)``.
    """
    return a.start < b.end and b.start < a.end


def is_compatible(selection: Sequence[Interval]) -> bool:
    """Return True if no two members of ``selection`` overlap."""
    for i, first in enumerate(selection):
        for second in selection[i + 1 :]:
            if overlaps(first, second):
                return False
    return True


def exhaustive_select(tasks: Sequence[Ivl]) -> list[Ivl]:
    """Return a largest pairwise non-overlapping subset by trying every subset.

    Algorithm: Iterates integer masks ``0 .. 2^n - 1``; bit ``j`` set means
    ``tasks[j]`` is in the subset. A compatible subset replaces the best one
    only when strictly larger, so among equally large answers the first in
    mask order wins. Members keep their input order.

    Cost is O(2^n · n^2) time. There is no guard here: bound the input with
    check_exhaustive_size() before calling it on untrusted sizes.

    Inputs are not validated. On objects with ``end < start`` the pairwise
    test and greedy_select()'s cursor rule can disagree, so the two
    selectors may return different counts.
    """
    if not tasks:
        return []

    n = len(tasks)
    best: list[Ivl] = []

    for mask in range(1 << n):
        # Cannot beat the current best, skip the pairwise test
        if mask.bit_count() <= len(best):
            continue
        subset = [tasks[j] for j in range(n) if mask >> j & 1]
        if is_compatible(subset):
            best = subset

    return best


def greedy_select(tasks: Sequence[Ivl]) -> list[Ivl]:
    """Return a largest pairwise non-overlapping subset by earliest end time.

    Algorithm: Stable-sort by ``end`` and keep every interval that starts at
    or after the end of the last kept one. Equal end times keep their input
    order. The input sequence is not modified.
    Reversed intervals (``end < start``) are not rejected and can lead to
    a smaller selection than exhaustive_select() finds.

    Cost is O(n log n) time and O(n) extra space.
    """
    if not tasks:
        return []

    ordered = sorted(tasks, key=lambda task: task.end)

    selected = [ordered[0]]
    cursor = ordered[0].end

    for task in ordered[1:]:
        if task.start >= cursor:
            selected.append(task)
            cursor = task.end

    return selected


def check_exhaustive_size(size: int, limit: int = EXHAUSTIVE_LIMIT) -> None:
    """Raise ExhaustiveLimitError if ``size`` intervals exceed ``limit``."""
    if size > limit:
        raise ExhaustiveLimitError(size, limit)
