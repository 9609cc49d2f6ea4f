"""Typed settings models.

Settings are validated by pydantic and are immutable once built. The defaults
reproduce the historical behaviour: naive cyclic matching and an "unbounded"
stream length of 9,999,999.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

DEFAULT_UNBOUNDED_LENGTH = 9_999_999

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class EqualityAlgorithm(str, Enum):
    """Substring search used by cyclic equality."""

    NAIVE = "naive"  # shift and compare, O(n^2)
    KMP = "kmp"  # Knuth-Morris-Pratt, O(n)


class LoggingSettings(BaseModel):
    """Logger name, level and optional JSON log directory."""

    level: str = Field("WARNING")
    logger_name: str = Field("rotlist", min_length=1)
    log_dir: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


class RotatingListSettings(BaseModel):
    """Top-level settings for rotating lists and their streams.

    ``unbounded_length`` is what a stream reports when asked for its total
    length; ``equality_algorithm`` picks the matcher used by ``equals``.
    """

    unbounded_length: PositiveInt = Field(
        DEFAULT_UNBOUNDED_LENGTH, description="Length reported by infinite streams"
    )
    equality_algorithm: EqualityAlgorithm = EqualityAlgorithm.NAIVE
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(frozen=True)


__all__ = [
    "DEFAULT_UNBOUNDED_LENGTH",
    "EqualityAlgorithm",
    "LoggingSettings",
    "RotatingListSettings",
]
