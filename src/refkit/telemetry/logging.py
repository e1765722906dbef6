"""Rich-backed logging configuration for the ``refkit`` logger tree."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

LOGGER_NAME = "refkit"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single RichHandler to the ``refkit`` logger and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    return logger
