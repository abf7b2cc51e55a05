from .core import (
    Selector,
    check_exhaustive_size,
    exhaustive_select,
    greedy_select,
    is_compatible,
    overlaps,
)
from .errors import ExhaustiveLimitError, SelectionError
from .interval import Interval, intervals
from .workloads import (
    SAMPLE_TASKS,
    AllDisjoint,
    AllOverlapping,
    RandomWorkload,
    SharedEnd,
    SharedStart,
    Workload,
    edge_cases,
    random_tasks,
)

__all__ = [
    "Interval",
    "intervals",
    "Selector",
    "overlaps",
    "is_compatible",
    "exhaustive_select",
    "greedy_select",
    "check_exhaustive_size",
    "SelectionError",
    "ExhaustiveLimitError",
    "Workload",
    "RandomWorkload",
    "AllOverlapping",
    "AllDisjoint",
    "SharedStart",
    "SharedEnd",
    "edge_cases",
    "random_tasks",
    "SAMPLE_TASKS",
]
