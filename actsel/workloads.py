"""Synthetic interval workloads for benchmarking the selectors.

Each workload produces a fresh list of intervals from a ``random.Random``
instance, so a fixed seed always reproduces the same input. The structured
edge cases ignore the generator but accept it to share one interface.
"""

import random
from collections.abc import Iterable

from typing_extensions import override

from actsel.interval import Interval, intervals
from actsel.util import DEFAULT_MAX_DURATION, DEFAULT_MAX_TIME, EDGE_CASE_SIZE

# Sample input used to validate both selectors against each other
SAMPLE_TASKS: tuple[Interval, ...] = tuple(
    intervals((1, 3), (2, 5), (4, 6), (6, 7), (5, 9), (8, 10))
)


class Workload:
    """Base class for interval generators."""

    name: str = "workload"

    def generate(self, rng: random.Random) -> list[Interval]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class RandomWorkload(Workload):
    """Intervals with uniform integer starts and short uniform durations."""

    name = "random"

    def __init__(
        self,
        count: int,
        max_time: int = DEFAULT_MAX_TIME,
        max_duration: int = DEFAULT_MAX_DURATION,
    ):
        """
        Args:
            count: Number of intervals to generate
            max_time: Starts are drawn from ``[0, max_time)``
            max_duration: Durations are drawn from ``[1, max_duration]``
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if max_time < 1:
            raise ValueError(f"max_time must be >= 1, got {max_time}")
        if max_duration < 1:
            raise ValueError(f"max_duration must be >= 1, got {max_duration}")
        self.count: int = count
        self.max_time: int = max_time
        self.max_duration: int = max_duration

    @override
    def generate(self, rng: random.Random) -> list[Interval]:
        tasks: list[Interval] = []
        for _ in range(self.count):
            start = rng.randrange(self.max_time)
            duration = rng.randint(1, self.max_duration)
            tasks.append(Interval(start=start, end=start + duration))
        return tasks


class _Structured(Workload):
    """Base class for deterministic edge cases built from an index."""

    def __init__(self, size: int = EDGE_CASE_SIZE):
        if size < 1:
            raise ValueError(f"{type(self).__name__} size must be >= 1, got {size}")
        self.size: int = size

    def _interval(self, i: int) -> Interval:
        """Return the interval at position ``i``."""
        raise NotImplementedError

    @override
    def generate(self, rng: random.Random) -> list[Interval]:
        return [self._interval(i) for i in range(self.size)]


class AllOverlapping(_Structured):
    """Every interval covers the same range; at most one can be selected."""

    name = "all_overlapping"

    @override
    def _interval(self, i: int) -> Interval:
        return Interval(start=0, end=self.size)


class AllDisjoint(_Structured):
    """Evenly spaced intervals with gaps; all of them can be selected."""

    name = "all_disjoint"

    @override
    def _interval(self, i: int) -> Interval:
        return Interval(start=i * 10, end=i * 10 + 5)


class SharedStart(_Structured):
    """Nested intervals all starting at zero."""

    name = "shared_start"

    @override
    def _interval(self, i: int) -> Interval:
        return Interval(start=0, end=i + 1)


class SharedEnd(_Structured):
    """Nested intervals all ending at ``size``."""

    name = "shared_end"

    @override
    def _interval(self, i: int) -> Interval:
        return Interval(start=i, end=self.size)


def edge_cases(size: int = EDGE_CASE_SIZE) -> dict[str, Workload]:
    """Return the structured stress cases keyed by name."""
    workloads: Iterable[Workload] = (
        AllOverlapping(size),
        AllDisjoint(size),
        SharedStart(size),
        SharedEnd(size),
    )
    return {workload.name: workload for workload in workloads}


def random_tasks(
    count: int,
    seed: int | None = None,
    max_time: int = DEFAULT_MAX_TIME,
    max_duration: int = DEFAULT_MAX_DURATION,
) -> list[Interval]:
    """Generate ``count`` random intervals; ``seed=None`` uses fresh entropy."""
    return RandomWorkload(count, max_time, max_duration).generate(random.Random(seed))
