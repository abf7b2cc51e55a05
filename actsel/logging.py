"""Structured logging setup utilities."""

from __future__ import annotations

import logging
import sys
from typing import Iterable

import structlog


def configure_logging(
    level: str = "WARNING",
    handlers: Iterable[logging.Handler] | None = None,
    json: bool = False,
) -> None:
    """Configure stdlib logging and structlog; output goes to stderr by default."""

    if handlers is None:
        handlers = [logging.StreamHandler(sys.stderr)]

    logging.basicConfig(
        level=level,
        handlers=list(handlers),
        format="%(message)s",
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
