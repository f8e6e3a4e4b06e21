"""Diagnostics channel for filebundler.

Every module logs under the ``filebundler`` hierarchy. Trace messages are
emitted at DEBUG and only when a bundler's config has ``debug=True``; that
flag raises the package logger to DEBUG through :func:`enable_debug`, so a
library caller sees traces without configuring logging first.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "filebundler"
_CONSOLE_FORMAT = "[filebundler] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None, *, debug: bool = False) -> logging.Logger:
    """Return ``filebundler.<name>``; ``debug`` switches traces on for the package."""
    if debug:
        enable_debug()
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def enable_debug() -> logging.Logger:
    """Lower the package logger to DEBUG and make sure traces reach a sink.

    A console handler is attached only when neither the package logger nor
    the root logger has one, so application logging setups stay in charge.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.getEffectiveLevel() > logging.DEBUG:
        logger.setLevel(logging.DEBUG)
    if not logger.handlers and not logging.getLogger().handlers:
        logger.addHandler(_console_handler(logging.DEBUG))
    return logger


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install the CLI's handlers: console output plus an optional log file."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler(level))
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
    return logger


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    return handler


__all__ = ["configure_logging", "enable_debug", "get_logger"]
