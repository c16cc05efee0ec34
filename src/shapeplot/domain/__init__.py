"""Domain models for shapeplot.

This module contains the value types shared by the generators, the font codec
and the sinks. All models are designed to be:

- Immutable (frozen dataclasses)
- Independent of any concrete drawing surface

Key classes:
- Point: A 2D point in logical coordinates
- WindingDirection: Emission direction of closed shapes
- PathCommand: Elementary commands (moveTo, lineTo, arcTo, ...)
- ShapeSpec: Parameter bundles per shape kind
- FontParts: The five fields of a font shorthand string
"""

from shapeplot.domain.commands import (
    Arc,
    ArcTo,
    BeginPath,
    ClosePath,
    Ellipse,
    LineTo,
    MoveTo,
    PathCommand,
    Restore,
    Rotate,
    Save,
    Scale,
    Translate,
)
from shapeplot.domain.font import FONT_FIELDS, FontParts
from shapeplot.domain.point import ORIGIN, Point, WindingDirection
from shapeplot.domain.shapes import (
    BurstSpec,
    CircleSpec,
    EllipseSpec,
    PathSpec,
    PolygonSpec,
    RoundedRectSpec,
    ShapeSpec,
    StarSpec,
)

__all__: list[str] = [
    # Enums
    "WindingDirection",
    # Core types
    "ORIGIN",
    "Point",
    "FONT_FIELDS",
    "FontParts",
    # Commands
    "PathCommand",
    "BeginPath",
    "ClosePath",
    "MoveTo",
    "LineTo",
    "ArcTo",
    "Arc",
    "Ellipse",
    "Save",
    "Restore",
    "Translate",
    "Rotate",
    "Scale",
    # Shapes
    "ShapeSpec",
    "PolygonSpec",
    "StarSpec",
    "BurstSpec",
    "RoundedRectSpec",
    "EllipseSpec",
    "CircleSpec",
    "PathSpec",
]
