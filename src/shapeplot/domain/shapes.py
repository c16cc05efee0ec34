"""Shape parameter bundles.

Each ShapeSpec subclass carries the semantic parameters of one shape kind.
``ShapeSpec.commands`` hands them to ``shapeplot.core.generator.generate``,
which turns them into path commands.
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from shapeplot.domain.commands import PathCommand
from shapeplot.domain.point import Point, WindingDirection


class ShapeSpec:
    """Base class for shape parameter bundles."""

    __slots__ = ()

    kind: ClassVar[str] = ""

    def commands(self, *, native_ellipse: bool = False) -> Iterator[PathCommand]:
        """Generate the path commands for this shape.

        Args:
            native_ellipse: Whether the target sink has a native ellipse primitive

        Yields:
            Path commands, in emission order
        """
        from shapeplot.core.generator import generate

        yield from generate(self, native_ellipse=native_ellipse)


@dataclass(frozen=True, slots=True)
class PolygonSpec(ShapeSpec):
    """Regular polygon inscribed in a circle of ``radius``."""

    kind: ClassVar[str] = "polygon"

    center: Point
    radius: float
    sides: float
    winding: WindingDirection = WindingDirection.CLOCKWISE


@dataclass(frozen=True, slots=True)
class StarSpec(ShapeSpec):
    """Regular star whose inner radius is derived from the outer one."""

    kind: ClassVar[str] = "star"

    center: Point
    radius: float
    sides: float
    winding: WindingDirection = WindingDirection.CLOCKWISE


@dataclass(frozen=True, slots=True)
class BurstSpec(ShapeSpec):
    """Star-like shape with independent outer and inner radii."""

    kind: ClassVar[str] = "burst"

    center: Point
    outer_radius: float
    inner_radius: float
    sides: float
    winding: WindingDirection = WindingDirection.CLOCKWISE


@dataclass(frozen=True, slots=True)
class RoundedRectSpec(ShapeSpec):
    """Axis-aligned rectangle with four equal rounded corners."""

    kind: ClassVar[str] = "rounded_rect"

    origin: Point
    width: float
    height: float
    radius: float


@dataclass(frozen=True, slots=True)
class EllipseSpec(ShapeSpec):
    """Rotated elliptical arc."""

    kind: ClassVar[str] = "ellipse"

    center: Point
    radius_x: float
    radius_y: float
    rotation: float = 0.0
    start_angle: float = 0.0
    end_angle: float = 2 * math.pi
    winding: WindingDirection = WindingDirection.CLOCKWISE


@dataclass(frozen=True, slots=True)
class CircleSpec(ShapeSpec):
    """Full circle."""

    kind: ClassVar[str] = "circle"

    center: Point
    radius: float
    winding: WindingDirection = WindingDirection.CLOCKWISE


@dataclass(frozen=True, slots=True)
class PathSpec(ShapeSpec):
    """Polyline through ``points``, optionally closed."""

    kind: ClassVar[str] = "path"

    points: tuple[Point, ...]
    closed: bool = False
