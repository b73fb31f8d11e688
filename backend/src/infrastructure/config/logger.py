"""Logging setup: one configured root logger for the service, JSON or coloured text."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER_NAME = "vendor_onboarding"

# Keys the use cases pass through ``extra=``
CONTEXT_FIELDS = ("application_id", "application_code", "status", "action")


def _context(record: logging.LogRecord) -> dict[str, str]:
    return {
        key: str(getattr(record, key))
        for key in CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line, with the workflow context flattened in."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        payload.update(_context(record))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Readable, coloured lines for local development."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        line = f"{color}[{timestamp}] {record.levelname:8s}{self.RESET} {record.name}: {record.getMessage()}"
        context = _context(record)
        if context:
            line += " [" + " ".join(f"{key}={value}" for key, value in context.items()) + "]"

        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)

        return line


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str = "INFO",
    log_format: str = "text"
) -> logging.Logger:
    """
    Configure the service's root logger.

    Safe to call more than once; the previous handler is replaced. Loggers
    from :func:`get_logger` are children of this one and inherit its handler.

    Args:
        name: Logger name
        level: Level name, any case
        log_format: ``json`` or ``text``

    Returns:
        The configured logger
    """
    numeric_level = logging.getLevelName(level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter() if log_format.lower() == "json" else TextFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Logger nested under the service's root logger, usually called with ``__name__``."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
