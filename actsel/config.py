"""Benchmark configuration using Pydantic settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from actsel.util import (
    DEFAULT_MAX_DURATION,
    DEFAULT_MAX_TIME,
    DEFAULT_SIZES,
    EDGE_CASE_SIZE,
    EXHAUSTIVE_HARD_LIMIT,
    EXHAUSTIVE_LIMIT,
    MEMORY_PROBE_SIZE,
)


class BenchSettings(BaseSettings):
    """Input sizes, seed and generator bounds for a benchmark run."""

    sizes: list[int] = Field(default_factory=lambda: list(DEFAULT_SIZES))
    seed: int | None = None
    exhaustive_limit: int = Field(
        default=EXHAUSTIVE_LIMIT, ge=0, le=EXHAUSTIVE_HARD_LIMIT
    )
    max_time: int = Field(default=DEFAULT_MAX_TIME, gt=0)
    max_duration: int = Field(default=DEFAULT_MAX_DURATION, ge=1)
    edge_case_size: int = Field(default=EDGE_CASE_SIZE, ge=1)
    memory_probe_size: int = Field(default=MEMORY_PROBE_SIZE, ge=0)
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="ACTSEL_",
        case_sensitive=False,
    )

    @field_validator("sizes")
    @classmethod
    def validate_sizes(cls, sizes: list[int]) -> list[int]:
        if any(size < 0 for size in sizes):
            raise ValueError("sizes must all be >= 0")
        return sizes

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, level: str) -> str:
        normalized = level.upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {level!r}")
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> BenchSettings:
    return BenchSettings()
