"""
Shared utility functions.

This package contains utility code used across multiple
pipeline stages.
"""

from .logging import LOGGER_NAME, JsonlFormatter, log_event, setup_logging

__all__ = [
    "LOGGER_NAME",
    "setup_logging",
    "log_event",
    "JsonlFormatter",
]
