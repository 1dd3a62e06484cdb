"""Utility functions for bezsect.

This module provides utility functions including:

- Logging setup and configuration
- Batch statistics tracking
"""

from bezsect.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
