"""Configuration management for shapeplot.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Font shorthand defaults
- GeometryConfig: Curve approximation settings
- LoggingConfig: Logging settings
- ShapeplotSettings: Main application settings
"""

from shapeplot.config.settings import (
    FontConfig,
    GeometryConfig,
    LoggingConfig,
    ShapeplotSettings,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "GeometryConfig",
    "LoggingConfig",
    "ShapeplotSettings",
    "get_default_settings",
]
