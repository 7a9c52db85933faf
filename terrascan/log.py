"""Logger set-up for the package: console or JSON records on standard error."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

DPANIC = 45
PANIC = logging.CRITICAL
FATAL = 55

logging.addLevelName(DPANIC, "DPANIC")
logging.addLevelName(FATAL, "FATAL")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "dpanic": DPANIC,
    "panic": PANIC,
    "fatal": FATAL,
}

_LEVEL_NAMES = {value: name for name, value in _LEVELS.items()}

_LEVEL_COLORS = {
    logging.DEBUG: 35,
    logging.INFO: 34,
    logging.WARNING: 33,
    logging.ERROR: 31,
    DPANIC: 31,
    PANIC: 31,
    FATAL: 31,
}

_PACKAGE_LOGGER = "terrascan"

_default_logger: logging.Logger | None = None


def get_logger_level(level: str) -> int:
    """Map a level name (debug, info, warn, ...) to a logging level; info if unknown."""
    return _LEVELS.get(level, logging.INFO)


def _level_name(levelno: int) -> str:
    return _LEVEL_NAMES.get(levelno, logging.getLevelName(levelno).lower())


def _timestamp(record: logging.LogRecord) -> str:
    moment = datetime.fromtimestamp(record.created).astimezone()
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}" + moment.strftime("%z")


def _caller(record: logging.LogRecord) -> str:
    return f"{Path(record.pathname).parent.name}/{record.filename}:{record.lineno}"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": _level_name(record.levelno),
            "time": _timestamp(record),
            "file": _caller(record),
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry)


class _ConsoleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        name = _level_name(record.levelno)
        color = _LEVEL_COLORS.get(record.levelno)
        level = f"\x1b[{color}m{name}\x1b[0m" if color else name
        line = "\t".join((_timestamp(record), level, _caller(record), record.getMessage()))
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def get_logger(log_level: str, encoding: str) -> logging.Logger:
    """Create a logger writing to standard error at ``log_level``.

    ``encoding`` "json" gives one JSON object per record; anything else
    gives tab-separated console lines with a coloured level.
    """
    logger = logging.Logger(_PACKAGE_LOGGER, get_logger_level(log_level))
    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter() if encoding == "json" else _ConsoleFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def init(encoding: str, level: str) -> None:
    """Configure the package logger and make it the default logger."""
    global _default_logger

    configured = get_logger(level, encoding)
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    for handler in configured.handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(configured.level)
    package_logger.propagate = False
    _default_logger = package_logger


def get_default_logger() -> logging.Logger | None:
    """Return the logger set up by :func:`init`, or ``None`` before it is called."""
    return _default_logger