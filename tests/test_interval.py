from dataclasses import FrozenInstanceError

import pytest

from actsel import Interval, intervals


def test_interval_value_semantics() -> None:
    assert Interval(start=1, end=3) == Interval(start=1, end=3)
    assert len({Interval(start=1, end=3), Interval(start=1, end=3)}) == 1
    assert Interval(start=1, end=3) != Interval(start=1, end=4)


def test_interval_is_frozen() -> None:
    interval = Interval(start=1, end=3)
    with pytest.raises(FrozenInstanceError):
        interval.start = 2  # type: ignore[misc]


def test_interval_rejects_reversed_bounds() -> None:
    with pytest.raises(ValueError, match="must be <= end"):
        Interval(start=5, end=1)


def test_zero_length_interval_is_allowed() -> None:
    interval = Interval(start=3, end=3)
    assert interval.duration == 0


def test_duration_and_str() -> None:
    interval = Interval(start=2, end=7)
    assert interval.duration == 5
    assert str(interval) == "Interval(2→7, 5)"


def test_float_bounds() -> None:
    interval = Interval(start=0.5, end=1.25)
    assert interval.duration == 0.75


def test_from_pair() -> None:
    assert Interval.from_pair((4, 6)) == Interval(start=4, end=6)
    assert Interval.from_pair([4, 6]) == Interval(start=4, end=6)


def test_from_pair_requires_two_values() -> None:
    with pytest.raises(ValueError, match="pair"):
        Interval.from_pair((1, 2, 3))


def test_intervals_accepts_pairs_and_intervals() -> None:
    existing = Interval(start=6, end=7)
    result = intervals((1, 3), [4, 6], existing)

    assert result == [
        Interval(start=1, end=3),
        Interval(start=4, end=6),
        Interval(start=6, end=7),
    ]
    assert result[2] is existing


def test_intervals_empty() -> None:
    assert intervals() == []


@pytest.mark.parametrize(
    "start, end",
    [
        (float("nan"), float("nan")),
        (float("nan"), 1),
        (0, float("nan")),
        (0, float("inf")),
        (float("-inf"), 0),
    ],
)
def test_interval_rejects_non_finite_bounds(start, end) -> None:
    with pytest.raises(ValueError, match="finite"):
        Interval(start=start, end=end)
