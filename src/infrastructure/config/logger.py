"""Logging configuration for the application."""

import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

APP_LOGGER_NAME = "talent_registry"

# Identifiers services attach through ``extra=``; both formatters print them
CONTEXT_FIELDS = (
    "job_offer_id",
    "application_id",
    "profession_id",
    "professional_id",
    "curriculum_id",
    "reason",
)


def _record_time(record: logging.LogRecord) -> datetime:
    return datetime.fromtimestamp(record.created, tz=timezone.utc)


def _context(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: getattr(record, key)
        for key in CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with marketplace identifiers as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": _record_time(record).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        entry.update(_context(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # UUIDs and datetimes in the context are written as strings
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line development output, coloured by level on a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:8s}"
        if self.use_color:
            color = self.LEVEL_COLORS.get(record.levelno, "")
            level = f"{color}{level}{self.RESET}"

        line = (
            f"[{_record_time(record):%Y-%m-%d %H:%M:%S}] {level} "
            f"{record.name}: {record.getMessage()}"
        )
        context = _context(record)
        if context:
            line += " | " + " ".join(f"{key}={value}" for key, value in context.items())

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


def setup_logger(
    name: str = APP_LOGGER_NAME,
    level: str = "INFO",
    log_format: str = "text",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Install a single stream handler on the application logger.

    Calling it again replaces the previous handler, so the lifespan hook
    can run once per application instance.

    Args:
        name: Root of the application logger namespace
        level: Level name such as ``INFO`` or ``DEBUG``
        log_format: ``json`` for production, anything else for text
        stream: Where records are written, standard output by default

    Returns:
        The configured logger

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    stream = stream or sys.stdout

    if log_format.lower() == "json":
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = TextFormatter(use_color=stream.isatty())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger inside the application namespace.

    Names outside the namespace are nested under it so that the handler
    installed by ``setup_logger`` receives their records.
    """
    if name != APP_LOGGER_NAME and not name.startswith(f"{APP_LOGGER_NAME}."):
        name = f"{APP_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
