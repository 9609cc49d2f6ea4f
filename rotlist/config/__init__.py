"""Settings subsystem: pydantic models and the YAML loader."""
from .loader import get_settings, load_settings, use_settings
from .models import EqualityAlgorithm, LoggingSettings, RotatingListSettings

__all__ = [
    "EqualityAlgorithm",
    "LoggingSettings",
    "RotatingListSettings",
    "get_settings",
    "load_settings",
    "use_settings",
]
