"""Timing harness that runs the selectors side by side.

Both selectors are called once per measurement; the exhaustive oracle is only
invoked on inputs within the configured limit and skipped otherwise.
"""

from __future__ import annotations

import random
import time
import tracemalloc
from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from actsel.config import BenchSettings
from actsel.core import Selector, exhaustive_select, greedy_select
from actsel.interval import Interval
from actsel.workloads import SAMPLE_TASKS, RandomWorkload, edge_cases

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Measurement:
    """One timed selector call.

    Attributes:
        label: Name of the selector that ran
        result: The returned selection
        elapsed_ms: Wall-clock time of the call in milliseconds
    """

    label: str
    result: list[Interval]
    elapsed_ms: float

    @property
    def count(self) -> int:
        return len(self.result)


@dataclass(frozen=True)
class Comparison:
    """Greedy and (optionally) exhaustive results over the same input."""

    size: int
    greedy: Measurement
    exhaustive: Measurement | None

    @property
    def agree(self) -> bool | None:
        """True if both selectors found the same count, None if the oracle was skipped."""
        if self.exhaustive is None:
            return None
        return self.exhaustive.count == self.greedy.count


@dataclass(frozen=True)
class EdgeCaseResult:
    name: str
    size: int
    greedy: Measurement


@dataclass(frozen=True)
class BenchmarkReport:
    sample_tasks: list[Interval]
    sample: Comparison
    performance: list[Comparison] = field(default_factory=list)
    edge_cases: list[EdgeCaseResult] = field(default_factory=list)
    memory_probe_size: int = 0
    greedy_peak_bytes: int | None = None
    exhaustive_limit: int = 0


def _label(selector: Selector) -> str:
    return getattr(selector, "__name__", type(selector).__name__)


def measure(
    selector: Selector, tasks: Sequence[Interval], label: str | None = None
) -> Measurement:
    """Call ``selector(tasks)`` once and record the elapsed time."""
    label = label or _label(selector)
    started = time.perf_counter_ns()
    result = selector(tasks)
    elapsed_ms = (time.perf_counter_ns() - started) / 1_000_000

    logger.info(
        "selection.measured",
        selector=label,
        size=len(tasks),
        count=len(result),
        elapsed_ms=round(elapsed_ms, 3),
    )
    return Measurement(label=label, result=result, elapsed_ms=elapsed_ms)


def peak_memory(selector: Selector, tasks: Sequence[Interval]) -> int:
    """Return the peak number of bytes allocated during one selector call."""
    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()
    try:
        tracemalloc.reset_peak()
        baseline, _ = tracemalloc.get_traced_memory()
        selector(tasks)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        if not already_tracing:
            tracemalloc.stop()
    return max(peak - baseline, 0)


def compare(tasks: Sequence[Interval], exhaustive_limit: int) -> Comparison:
    """Run greedy always and exhaustive only when ``len(tasks) <= exhaustive_limit``."""
    exhaustive: Measurement | None = None
    if len(tasks) <= exhaustive_limit:
        exhaustive = measure(exhaustive_select, tasks, "exhaustive")
    else:
        logger.info(
            "selection.skipped",
            selector="exhaustive",
            size=len(tasks),
            limit=exhaustive_limit,
        )

    greedy = measure(greedy_select, tasks, "greedy")
    comparison = Comparison(size=len(tasks), greedy=greedy, exhaustive=exhaustive)

    if comparison.agree is False:
        logger.warning(
            "selection.mismatch",
            size=len(tasks),
            greedy=greedy.count,
            exhaustive=exhaustive.count if exhaustive else None,
        )
    return comparison


def run_benchmark(settings: BenchSettings) -> BenchmarkReport:
    """Run the full suite: sample check, sized random runs, edge cases, memory."""
    rng = random.Random(settings.seed)
    log = logger.bind(seed=settings.seed)
    log.info("benchmark.started", sizes=settings.sizes)

    sample_tasks = list(SAMPLE_TASKS)
    sample = compare(sample_tasks, exhaustive_limit=len(sample_tasks))

    performance = []
    for size in settings.sizes:
        workload = RandomWorkload(size, settings.max_time, settings.max_duration)
        performance.append(compare(workload.generate(rng), settings.exhaustive_limit))

    stress = []
    for name, workload in edge_cases(settings.edge_case_size).items():
        tasks = workload.generate(rng)
        stress.append(
            EdgeCaseResult(
                name=name, size=len(tasks), greedy=measure(greedy_select, tasks, "greedy")
            )
        )

    probe = RandomWorkload(
        settings.memory_probe_size, settings.max_time, settings.max_duration
    ).generate(rng)
    greedy_peak = peak_memory(greedy_select, probe)

    log.info("benchmark.finished", greedy_peak_bytes=greedy_peak)
    return BenchmarkReport(
        sample_tasks=sample_tasks,
        sample=sample,
        performance=performance,
        edge_cases=stress,
        memory_probe_size=len(probe),
        greedy_peak_bytes=greedy_peak,
        exhaustive_limit=settings.exhaustive_limit,
    )
