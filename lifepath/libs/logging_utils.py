"""Logging configuration helpers for LifePath."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any, Dict

_DEV_ENVIRONMENTS = {"local", "dev", "development", "test"}

_COLOR_CODES = {
    "red": "\033[31m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
}

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


def _environment() -> str:
    return os.getenv("LIFEPATH_ENVIRONMENT", "development").lower()


def color_enabled() -> bool:
    flag = os.getenv("LIFEPATH_LOG_COLOR", "")
    if not flag:
        return _environment() in _DEV_ENVIRONMENTS
    return flag == "1"


def colorize(text: str, color: str = "red") -> str:
    if not color_enabled():
        return text
    prefix = _COLOR_CODES.get(color, "")
    suffix = "\033[0m" if prefix else ""
    return f"{prefix}{text}{suffix}"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class ColorTextFormatter(logging.Formatter):
    """Human-friendly console output with warnings and errors highlighted."""

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if record.levelno >= logging.ERROR:
            return colorize(formatted, "red")
        if record.levelno >= logging.WARNING:
            return colorize(formatted, "yellow")
        return formatted


def configure_logging() -> None:
    """Configure root logging from LIFEPATH_LOG_LEVEL / LIFEPATH_LOG_FORMAT."""

    default_level = "DEBUG" if _environment() in _DEV_ENVIRONMENTS else "INFO"
    log_level = os.getenv("LIFEPATH_LOG_LEVEL", default_level).upper()
    log_format = os.getenv("LIFEPATH_LOG_FORMAT", "json").lower()

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": JsonFormatter},
                "text": {
                    "()": ColorTextFormatter,
                    "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json" if log_format == "json" else "text",
                    "level": log_level,
                }
            },
            "root": {
                "handlers": ["console"],
                "level": log_level,
            },
        }
    )


__all__ = ["ColorTextFormatter", "JsonFormatter", "colorize", "configure_logging"]
