"""Package logging.

All b64engine loggers are children of the ``b64engine`` logger, which carries
only a ``NullHandler`` so the library stays silent until a caller opts in.
``configure_logging`` attaches a stdout handler with a timestamped format.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "b64engine"

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%H:%M:%S"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class _ConsoleHandler(logging.StreamHandler):
    """Stdout handler installed by configure_logging."""


def get_logger(name: str | None = None) -> logging.Logger:
    """Gets the package logger, or a child of it for a module name."""
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Sends package log records to stdout.

    Safe to call more than once; the console handler is only added the first time.

    Args:
        level: Minimum level to emit

    Returns:
        The package logger
    """
    logger = get_logger()
    logger.setLevel(level)

    for handler in logger.handlers:
        if isinstance(handler, _ConsoleHandler):
            handler.setLevel(level)
            return logger

    handler = _ConsoleHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    return logger
