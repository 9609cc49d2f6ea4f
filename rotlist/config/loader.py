"""YAML loader and process-wide active settings.

``load_settings`` consumes one YAML file and validates it via models.py.
The active settings are read by operations that need configuration at call
time; ``use_settings`` swaps them and hands back the previous value so
callers can restore it.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import yaml
from pydantic import ValidationError

from rotlist.core.errors import ConfigurationError

from .models import RotatingListSettings

logger = logging.getLogger("rotlist.config")

_active_settings = RotatingListSettings()


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to read {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_settings(path: Path | str) -> RotatingListSettings:
    """Load a settings file (``unbounded_length``, ``equality_algorithm``, ``logging``).

    Unknown keys are ignored; a blank file yields the defaults.
    """

    path = Path(path)
    data = _read_yaml(path)
    try:
        settings = RotatingListSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc
    logger.debug("Settings loaded", extra={"settings_path": str(path)})
    return settings


def get_settings() -> RotatingListSettings:
    """Return the active settings."""

    return _active_settings


def use_settings(settings: RotatingListSettings) -> RotatingListSettings:
    """Install ``settings`` as active and return the ones they replace."""

    global _active_settings
    if not isinstance(settings, RotatingListSettings):
        raise ConfigurationError(f"expected RotatingListSettings, got {type(settings).__name__}")
    previous = _active_settings
    _active_settings = settings
    return previous


__all__ = ["get_settings", "load_settings", "use_settings"]
