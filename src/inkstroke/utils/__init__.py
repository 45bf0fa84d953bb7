"""Utility functions for inkstroke.

This module provides utility functions including:

- Logging setup and configuration
- Drawing-session statistics
"""

from inkstroke.utils.logging import (
    SessionLogger,
    SessionStats,
    configure_logging,
)

__all__ = [
    "SessionLogger",
    "SessionStats",
    "configure_logging",
]
