"""
Shared utility functions.

This package contains utility code used across the scan and render stages.
"""

from .logging import log_event, setup_logging

__all__ = [
    "setup_logging",
    "log_event",
]
