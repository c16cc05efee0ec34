"""Configuration settings for Shapeplot."""

import math
from pathlib import Path

from pydantic import BaseModel, Field


class FontConfig(BaseModel):
    """Defaults used by the font shorthand codec.

    The five default fields make up the font a surface is reset to when its
    current font string cannot be split into five parts.
    """

    default_style: str = Field(default="normal", description="Default font style")
    default_variant: str = Field(default="normal", description="Default font variant")
    default_weight: str = Field(default="normal", description="Default font weight")
    default_size: str = Field(default="10px", description="Default font size")
    default_family: str = Field(default="sans-serif", description="Default font family")
    size_unit: str = Field(
        default="px",
        min_length=1,
        description="Length unit appended to numeric font sizes",
    )

    def default_parts(self) -> tuple[str, str, str, str, str]:
        """Get the default font fields in shorthand order."""
        return (
            self.default_style,
            self.default_variant,
            self.default_weight,
            self.default_size,
            self.default_family,
        )


class GeometryConfig(BaseModel):
    """Configuration for curve approximation in pen-backed sinks."""

    max_arc_segment: float = Field(
        default=math.pi / 2,
        gt=0.0,
        le=math.pi / 2,
        description="Largest arc sweep (radians) approximated by a single cubic Bezier",
    )
    collinear_epsilon: float = Field(
        default=1e-8,
        gt=0.0,
        le=1e-2,
        description="Cross product below which tangent-arc lines are treated as collinear",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ShapeplotSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ShapeplotSettings:
    """Get default application settings."""
    return ShapeplotSettings()
