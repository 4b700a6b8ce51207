"""Core application logger and assertion helper."""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "NVIZ"
DEFAULT_LOG_PATH = "NVIZ.log"

_TIME_FORMAT = "%H:%M:%S"


class _LowerLevelFormatter(logging.Formatter):
    """Formatter that writes the level name in lower case."""

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        record.levelname = original.lower()
        try:
            return super().format(record)
        finally:
            record.levelname = original


def init(log_path: str | os.PathLike[str] = DEFAULT_LOG_PATH) -> logging.Logger:
    """Configure the core logger to write to the console and to a fresh log file."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(
        logging.Formatter("[%(asctime)s] %(name)s: %(message)s", _TIME_FORMAT)
    )

    log_file = logging.FileHandler(os.fspath(log_path), mode="w", encoding="utf-8")
    log_file.setFormatter(
        _LowerLevelFormatter("[%(asctime)s] [%(levelname)s] %(name)s: %(message)s", _TIME_FORMAT)
    )

    logger.addHandler(console)
    logger.addHandler(log_file)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger


def get_core_logger() -> logging.Logger:
    """Return the application's core logger."""
    return logging.getLogger(LOGGER_NAME)


def check(condition: object, message: str | None = None) -> None:
    """Log an error and raise AssertionError when ``condition`` is false."""
    if condition:
        return
    text = f"Assertion failed: {message}" if message is not None else "Assertion failed"
    get_core_logger().error(text)
    raise AssertionError(text)