from __future__ import annotations

import pytest
from pydantic import ValidationError

from rotlist.config.models import EqualityAlgorithm, LoggingSettings, RotatingListSettings


def test_settings_should_apply_defaults() -> None:
    settings = RotatingListSettings()
    assert settings.unbounded_length == 9_999_999
    assert settings.equality_algorithm is EqualityAlgorithm.NAIVE
    assert settings.logging.level == "WARNING"
    assert settings.logging.logger_name == "rotlist"
    assert settings.logging.log_dir is None


def test_settings_should_validate_bounds() -> None:
    with pytest.raises(ValidationError):
        RotatingListSettings(unbounded_length=0)
    with pytest.raises(ValidationError):
        RotatingListSettings(equality_algorithm="bogus")


def test_logging_settings_should_normalize_level() -> None:
    assert LoggingSettings(level="debug").level == "DEBUG"
    with pytest.raises(ValidationError):
        LoggingSettings(level="loud")


def test_settings_should_be_frozen() -> None:
    settings = RotatingListSettings()
    with pytest.raises(ValidationError):
        settings.unbounded_length = 10  # type: ignore[misc]
