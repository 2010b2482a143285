"""Utility functions for rasterpath.

This module provides:

- Logging setup and configuration
- Batch progress and statistics tracking
"""

from rasterpath.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
