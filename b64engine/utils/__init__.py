"""Logging helpers.

Re-exports the package logger accessor and the opt-in console setup.
"""

from b64engine.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
