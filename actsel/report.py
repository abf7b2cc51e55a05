"""Plain-text rendering of benchmark results for the console."""

from __future__ import annotations

from collections.abc import Iterable

from actsel.bench import BenchmarkReport, Comparison, Measurement
from actsel.interval import Interval

WIDTH = 80
RULE = "=" * WIDTH
THIN = "-" * WIDTH
SHORT = "-" * 40


def format_intervals(tasks: Iterable[Interval]) -> str:
    """Render intervals compactly, e.g. ``[(1, 3), (4, 6)]``."""
    return "[" + ", ".join(f"({t.start}, {t.end})" for t in tasks) + "]"


def _timing(label: str, measurement: Measurement) -> list[str]:
    return [
        f"  {label}: {measurement.elapsed_ms:.3f} ms",
        f"    Result: {measurement.count} tasks selected",
    ]


def _sample_section(report: BenchmarkReport) -> list[str]:
    sample = report.sample
    lines = [
        "STEP 1: VALIDATE CORRECTNESS WITH SAMPLE INPUT",
        THIN,
        f"Input tasks: {format_intervals(report.sample_tasks)}",
        "",
    ]
    if sample.exhaustive is not None:
        lines += [
            "Exhaustive Result:",
            f"  Selected tasks: {format_intervals(sample.exhaustive.result)}",
            f"  Count: {sample.exhaustive.count}",
            "",
        ]
    lines += [
        "Greedy Result:",
        f"  Selected tasks: {format_intervals(sample.greedy.result)}",
        f"  Count: {sample.greedy.count}",
        "",
        f"Both algorithms return the same count: {'YES' if sample.agree else 'NO'}",
        "",
    ]
    return lines


def _performance_section(comparisons: list[Comparison], limit: int) -> list[str]:
    lines = [RULE, "STEP 2: PERFORMANCE TESTING WITH LARGE INPUTS", THIN, ""]
    for comparison in comparisons:
        lines += [f"Testing with {comparison.size} tasks:", SHORT]
        if comparison.exhaustive is not None:
            lines += _timing("Exhaustive", comparison.exhaustive)
        else:
            lines.append(
                f"  Exhaustive: SKIPPED ({comparison.size} > limit of {limit}, "
                f"O(2^n) complexity)"
            )
        lines += _timing("Greedy    ", comparison.greedy)
        if comparison.agree is False:
            lines.append("    WARNING: counts differ")
        lines.append("")
    return lines


def _edge_case_section(report: BenchmarkReport) -> list[str]:
    lines = [RULE, "EDGE CASE STRESS TESTING", THIN, ""]
    for case in report.edge_cases:
        lines += [
            f"Edge Case: {case.name}",
            SHORT,
            f"  Greedy: {case.greedy.elapsed_ms:.3f} ms",
            f"    Tasks selected: {case.greedy.count} out of {case.size}",
            "",
        ]
    return lines


def _memory_section(report: BenchmarkReport) -> list[str]:
    lines = [
        RULE,
        "MEMORY USAGE ANALYSIS",
        THIN,
        "",
        "Exhaustive Memory Characteristics:",
        "  - Generates 2^n subsets in the worst case",
        f"  - For {report.memory_probe_size} tasks: "
        f"2^{report.memory_probe_size} subsets (infeasible)",
        "  - Practical limit: ~20-25 tasks",
        "  - Space Complexity: O(n * 2^n) for storing subsets",
        "",
        "Greedy Memory Characteristics:",
        "  - Creates one sorted copy of input: O(n)",
        "  - Stores only selected tasks: O(n) worst case",
        "  - Space Complexity: O(n)",
    ]
    if report.greedy_peak_bytes is not None:
        lines.append(
            f"  - Measured peak for {report.memory_probe_size} tasks: "
            f"{report.greedy_peak_bytes / 1024:.1f} KiB"
        )
    lines.append("")
    return lines


SUMMARY = [
    RULE,
    "FINAL ANALYSIS AND RECOMMENDATION",
    RULE,
    "",
    "TIME COMPLEXITY COMPARISON:",
    "  Exhaustive: O(2^n * n^2) - Exponential",
    "  Greedy:     O(n log n) - Log-linear (dominated by sorting)",
    "",
    "SPACE COMPLEXITY COMPARISON:",
    "  Exhaustive: O(n * 2^n) - Exponential space for subsets",
    "  Greedy:     O(n) - Linear space for sorting",
    "",
    "SCALABILITY:",
    "  Exhaustive: Fails beyond ~20-25 tasks",
    "  Greedy:     Easily handles 10,000+ tasks",
    "",
    "CORRECTNESS:",
    "  Both algorithms produce optimal selections for this problem.",
    "  Earliest-end-time greedy is proven optimal for activity selection.",
    "",
    "RECOMMENDATION: GREEDY ALGORITHM",
    "",
    "WHEN TO USE EXHAUSTIVE SEARCH:",
    "- Verifying the greedy selector on small inputs",
    "- Problem variants where greedy is not proven optimal",
    "- Very small datasets where performance does not matter",
    RULE,
]


def render(report: BenchmarkReport) -> str:
    """Render every section of a benchmark report as one string."""
    lines = [RULE, "ACTIVITY SELECTION - ALGORITHM COMPARISON", RULE, ""]
    lines += _sample_section(report)
    lines += _performance_section(report.performance, report.exhaustive_limit)
    lines += _edge_case_section(report)
    lines += _memory_section(report)
    lines += SUMMARY
    return "\n".join(lines)
