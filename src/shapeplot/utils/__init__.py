"""Utility functions for shapeplot.

This module provides utility functions including:

- Logging setup and configuration
- Plot statistics tracking
"""

from shapeplot.utils.logging import (
    PlotLogger,
    PlotStats,
    configure_logging,
)

__all__ = [
    "PlotLogger",
    "PlotStats",
    "configure_logging",
]
