"""Centralized logging configuration.

Library modules only create named loggers under ``rotlist.*``; applications
(or the demo CLI) call :func:`configure_logging` to attach handlers.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from rotlist.config.models import LoggingSettings

# Attributes every LogRecord carries; only caller-supplied ``extra`` survives.
_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Serialize LogRecord fields as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key.startswith("_") or key in _RESERVED_ATTRS or key in payload:
                continue
            try:
                json.dumps({key: value})
            except TypeError:
                continue
            payload[key] = value
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(
    *,
    level: str = "WARNING",
    logger_name: str = "rotlist",
    log_dir: Optional[Path] = None,
) -> Logger:
    """Configure the package logger with JSON stream (and optional file) handlers."""

    logger = logging.getLogger(logger_name)
    logger.setLevel(level.upper())
    logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(JsonFormatter())
    logger.addHandler(stream_handler)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "rotlist.jsonl"
        file_handler = TimedRotatingFileHandler(
            log_file,
            when="midnight",
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(JsonFormatter())
        logger.addHandler(file_handler)
        logger.debug("JSON file logging configured", extra={"log_file": str(log_file)})

    logger.propagate = False
    return logger


def configure_from_settings(settings: LoggingSettings) -> Logger:
    """Apply :class:`LoggingSettings` via :func:`configure_logging`."""

    log_dir = Path(settings.log_dir) if settings.log_dir else None
    return configure_logging(level=settings.level, logger_name=settings.logger_name, log_dir=log_dir)


__all__ = ["JsonFormatter", "configure_from_settings", "configure_logging"]
