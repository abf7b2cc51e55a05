import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeVar

Number = int | float


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: Number
    end: Number

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            raise ValueError(
                f"Interval bounds must be finite, "
                f"got start={self.start}, end={self.end}"
            )
        if self.start > self.end:
            raise ValueError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    @property
    def duration(self) -> Number:
        return self.end - self.start

    @classmethod
    def from_pair(cls, pair: Sequence[Number]) -> "Interval":
        """Build an interval from a ``(start, end)`` pair."""
        if len(pair) != 2:
            raise ValueError(f"Expected a (start, end) pair, got {pair!r}")
        start, end = pair
        return cls(start=start, end=end)

    def __str__(self) -> str:
        """Human-friendly string showing range and duration."""
        return f"Interval({self.start}→{self.end}, {self.duration})"


IvlOut = TypeVar("IvlOut", bound="Interval", covariant=True)
IvlIn = TypeVar("IvlIn", bound="Interval", contravariant=True)


def intervals(*items: "Interval | Sequence[Number]") -> list[Interval]:
    """Build a list of intervals from pairs, passing Interval objects through.

    Example:
        >>> intervals((1, 3), (4, 6), Interval(start=6, end=7))
    """
    return [
        item if isinstance(item, Interval) else Interval.from_pair(item)
        for item in items
    ]
