"""Logging setup for the command-line surface."""

from .logging import configure_logging

__all__ = ["configure_logging"]
