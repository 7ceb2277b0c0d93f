"""Structured logging: JSON formatter and setup."""

from moodwave.logging.formatter import JSONLogFormatter
from moodwave.logging.setup import configure_logging

__all__ = ["JSONLogFormatter", "configure_logging"]
