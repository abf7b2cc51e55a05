"""Command-line entry point for the selector benchmark."""

from __future__ import annotations

import argparse
import sys

import structlog
from pydantic import ValidationError

from actsel.bench import compare, run_benchmark
from actsel.config import BenchSettings, get_settings
from actsel.core import check_exhaustive_size
from actsel.errors import SelectionError
from actsel.interval import Interval
from actsel.logging import configure_logging
from actsel.report import format_intervals, render

logger = structlog.get_logger(__name__)


def parse_tasks(text: str) -> list[Interval]:
    """Parse ``"1:3,2:5"`` into intervals."""
    tasks = []
    for chunk in text.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        start, sep, end = chunk.partition(":")
        if not sep:
            raise ValueError(f"Task {chunk!r} must look like START:END")
        tasks.append(Interval(start=_number(start), end=_number(end)))
    return tasks


def _number(text: str) -> int | float:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="actsel",
        description="Compare exhaustive and greedy activity selection",
    )
    parser.add_argument("--sizes", nargs="+", type=int, help="Random input sizes to benchmark")
    parser.add_argument("--seed", type=int, help="Seed for reproducible random inputs")
    parser.add_argument(
        "--exhaustive-limit",
        type=int,
        help="Largest input handed to exhaustive search",
    )
    parser.add_argument(
        "--tasks",
        help="Select from an explicit list instead, e.g. '1:3,2:5,4:6'",
    )
    parser.add_argument("--log-level", help="Logging level (default: WARNING)")
    parser.add_argument("--log-json", action="store_true", help="Emit logs as JSON")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> BenchSettings:
    """Overlay command-line values on environment-derived settings."""
    overrides = {
        "sizes": args.sizes,
        "seed": args.seed,
        "exhaustive_limit": args.exhaustive_limit,
        "log_level": args.log_level,
    }
    base = get_settings().model_dump()
    base.update({key: value for key, value in overrides.items() if value is not None})
    return BenchSettings.model_validate(base)


def _select_explicit(text: str, settings: BenchSettings) -> str:
    tasks = parse_tasks(text)
    check_exhaustive_size(len(tasks), settings.exhaustive_limit)
    comparison = compare(tasks, settings.exhaustive_limit)
    if comparison.exhaustive is None:
        raise SelectionError(
            f"Exhaustive search was skipped for {len(tasks)} tasks "
            f"(limit {settings.exhaustive_limit})"
        )
    return "\n".join(
        [
            f"Input tasks: {format_intervals(tasks)}",
            f"Exhaustive ({comparison.exhaustive.count}): "
            f"{format_intervals(comparison.exhaustive.result)}",
            f"Greedy ({comparison.greedy.count}): "
            f"{format_intervals(comparison.greedy.result)}",
        ]
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ValidationError as exc:
        print(f"Invalid configuration:\n{exc}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, json=args.log_json)

    try:
        if args.tasks is not None:
            output = _select_explicit(args.tasks, settings)
        else:
            output = render(run_benchmark(settings))
    except (SelectionError, ValueError) as exc:
        logger.error("cli.rejected", error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
