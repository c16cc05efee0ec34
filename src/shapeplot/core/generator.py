"""Parametric path generators.

This module turns semantic shape parameters into ordered path commands:
- Regular polygons, stars and bursts (vertex sequences)
- Rounded rectangles (lines joined by tangent arcs)
- Ellipses, natively or through a save/transform/arc/restore decomposition
- Circles, lines and point paths

Every generator is lazy: commands are yielded one at a time, in emission order,
and nothing is buffered. Degenerate side counts (fewer than 3 after rounding)
yield no commands at all rather than raising.
"""

import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from numbers import Real
from typing import Any

from shapeplot.domain import (
    ORIGIN,
    Arc,
    ArcTo,
    BeginPath,
    BurstSpec,
    CircleSpec,
    ClosePath,
    Ellipse,
    EllipseSpec,
    LineTo,
    MoveTo,
    PathCommand,
    PathSpec,
    Point,
    PolygonSpec,
    Restore,
    Rotate,
    RoundedRectSpec,
    Save,
    Scale,
    ShapeSpec,
    StarSpec,
    Translate,
    WindingDirection,
)
from shapeplot.exceptions import InvalidArgumentCountError

MIN_SIDES = 3


def normalize_sides(sides: float) -> int | None:
    """Round a requested side count and reject degenerate values.

    Rounds half up (towards positive infinity), matching canvas scripting
    conventions rather than Python's round-half-to-even.

    Args:
        sides: Requested number of sides, possibly fractional

    Returns:
        Rounded side count, or None when it is not finite or below 3
    """
    if not math.isfinite(sides):
        return None

    rounded = math.floor(sides + 0.5)
    if not rounded or rounded < MIN_SIDES:
        return None

    return rounded


def _radial_vertices(
    center: Point,
    radii: tuple[float, float],
    sides: int,
    winding: WindingDirection,
) -> Iterator[PathCommand]:
    """Emit a closed path whose vertices alternate between two radii.

    ``sides`` is the total number of vertices. Index ``i`` runs from 0 in the
    winding direction while ``|i| < sides``; even indices use ``radii[0]``.
    """
    direction = winding.sign
    step = math.pi * 2 / sides

    def before_end(i: int) -> bool:
        return i > -sides if winding.is_counter_clockwise else i < sides

    yield BeginPath()
    yield MoveTo(center.offset(radii[0], 0.0))

    i = 0
    while before_end(i):
        radius = radii[1] if i % 2 else radii[0]
        yield LineTo(center.polar(radius, step * i))
        i += direction

    yield ClosePath()


def polygon(
    center: Point,
    radius: float,
    sides: float,
    winding: WindingDirection = WindingDirection.CLOCKWISE,
) -> Iterator[PathCommand]:
    """Generate a regular polygon.

    The first vertex sits at angle 0, i.e. ``(center.x + radius, center.y)``.

    Args:
        center: Polygon centre
        radius: Circumradius
        sides: Number of sides (rounded; below 3 yields nothing)
        winding: Direction of vertex emission

    Yields:
        beginPath, moveTo, one lineTo per side, closePath

    Examples:
        >>> [c.op for c in polygon(Point(0, 0), 10, 3)]
        ['beginPath', 'moveTo', 'lineTo', 'lineTo', 'lineTo', 'closePath']
    """
    count = normalize_sides(sides)
    if count is None:
        return

    yield from _radial_vertices(center, (radius, radius), count, winding)


def star_inner_radius(radius: float, sides: int) -> float:
    """Inner radius at which the edges of a regular star cross.

    Args:
        radius: Outer radius
        sides: Number of star points (not the doubled vertex count)

    Returns:
        Derived inner radius
    """
    offset = math.pi * 2 / (sides * 2)
    return math.cos(offset * 2) * radius / math.cos(offset)


def star(
    center: Point,
    radius: float,
    sides: float,
    winding: WindingDirection = WindingDirection.CLOCKWISE,
) -> Iterator[PathCommand]:
    """Generate a regular star with a derived inner radius.

    Three- and four-pointed stars are drawn as the base polygon since the
    crossing formula degenerates there.

    Args:
        center: Star centre
        radius: Outer radius
        sides: Number of points (rounded; below 3 yields nothing)
        winding: Direction of vertex emission

    Yields:
        beginPath, moveTo, ``2 * sides`` lineTo commands, closePath
    """
    count = normalize_sides(sides)
    if count is None:
        return

    if count in (3, 4):
        yield from polygon(center, radius, count, winding)
        return

    inner = star_inner_radius(radius, count)
    yield from _radial_vertices(center, (radius, inner), count * 2, winding)


def burst(
    center: Point,
    outer_radius: float,
    inner_radius: float,
    sides: float,
    winding: WindingDirection = WindingDirection.CLOCKWISE,
) -> Iterator[PathCommand]:
    """Generate a burst: a star with independent outer and inner radii.

    Any pair of radii is accepted, including ``inner_radius > outer_radius``.

    Args:
        center: Burst centre
        outer_radius: Radius of even vertices (starting at angle 0)
        inner_radius: Radius of odd vertices
        sides: Number of points (rounded; below 3 yields nothing)
        winding: Direction of vertex emission

    Yields:
        beginPath, moveTo, ``2 * sides`` lineTo commands, closePath
    """
    count = normalize_sides(sides)
    if count is None:
        return

    yield from _radial_vertices(center, (outer_radius, inner_radius), count * 2, winding)


def clamp_corner_radius(width: float, height: float, radius: float) -> float:
    """Clamp a corner radius so the four corner arcs never overlap.

    Returns:
        ``min(width / 2, height / 2, radius)``, floored at 0
    """
    return max(0.0, min(width / 2, height / 2, radius))


def rounded_rect(
    origin: Point,
    width: float,
    height: float,
    radius: float,
) -> Iterator[PathCommand]:
    """Generate a rectangle with rounded corners.

    Starts on the top edge, ``radius`` to the right of the top-left corner,
    and proceeds clockwise. Corners are tangent arcs (arcTo), so sinks that
    only support tangent-arc primitives can draw it.

    Args:
        origin: Top-left corner
        width: Rectangle width
        height: Rectangle height
        radius: Requested corner radius (clamped)

    Yields:
        beginPath, moveTo, four (lineTo, arcTo) pairs, closePath
    """
    r = clamp_corner_radius(width, height, radius)
    x, y = origin.x, origin.y
    right = x + width
    bottom = y + height

    yield BeginPath()
    yield MoveTo(Point(x + r, y))
    yield LineTo(Point(right - r, y))
    yield ArcTo(Point(right, y), Point(right, y + r), r)
    yield LineTo(Point(right, bottom - r))
    yield ArcTo(Point(right, bottom), Point(right - r, bottom), r)
    yield LineTo(Point(x + r, bottom))
    yield ArcTo(Point(x, bottom), Point(x, bottom - r), r)
    yield LineTo(Point(x, y + r))
    yield ArcTo(Point(x, y), Point(x + r, y), r)
    yield ClosePath()


def ellipse(
    center: Point,
    radius_x: float,
    radius_y: float,
    rotation: float,
    start_angle: float,
    end_angle: float,
    winding: WindingDirection = WindingDirection.CLOCKWISE,
    *,
    native: bool = False,
) -> Iterator[PathCommand]:
    """Generate an elliptical arc.

    With ``native`` the parameters are forwarded unchanged as one ellipse
    command. Otherwise the ellipse is drawn as a circular arc of radius
    ``radius_x`` under a rotated, non-uniformly scaled frame, and the
    transform is restored right after the arc so the scale never leaks into
    line width or later drawing.

    Args:
        center: Ellipse centre
        radius_x: Radius along the rotated x axis
        radius_y: Radius along the rotated y axis
        rotation: Rotation of the ellipse in radians
        start_angle: Start angle in radians
        end_angle: End angle in radians
        winding: Sweep direction
        native: Whether the target sink has a native ellipse primitive

    Yields:
        One ellipse command, or save, translate, rotate, scale, arc, restore
        (nothing when falling back with a zero ``radius_x``)
    """
    counter_clockwise = winding.is_counter_clockwise

    if native:
        yield Ellipse(
            center,
            radius_x,
            radius_y,
            rotation,
            start_angle,
            end_angle,
            counter_clockwise,
        )
        return

    # The y scale is radius_y / radius_x, so a zero x radius draws nothing
    if not radius_x:
        return

    yield Save()
    yield Translate(center)
    yield Rotate(rotation)
    yield Scale(1.0, radius_y / radius_x)
    yield Arc(ORIGIN, radius_x, start_angle, end_angle, counter_clockwise)
    yield Restore()


def circle(
    center: Point,
    radius: float,
    winding: WindingDirection = WindingDirection.CLOCKWISE,
) -> Iterator[PathCommand]:
    """Generate a closed full circle."""
    yield BeginPath()
    yield Arc(center, radius, 0.0, math.pi * 2, winding.is_counter_clockwise)
    yield ClosePath()


def line(start: Point, end: Point) -> Iterator[PathCommand]:
    """Generate a single straight segment (no beginPath)."""
    yield MoveTo(start)
    yield LineTo(end)


def length(start: Point, distance: float, angle: float) -> Iterator[PathCommand]:
    """Generate a segment of ``distance`` from ``start`` in direction ``angle``."""
    yield from line(start, start.polar(distance, angle))


def coerce_points(points: Iterable[Any]) -> list[Point]:
    """Normalize the accepted point collection formats to a list of Points.

    Accepted formats:
    - Point instances
    - ``(x, y)`` pairs
    - ``{"x": x, "y": y}`` mappings
    - A flat sequence of numbers ``[x0, y0, x1, y1, ...]``

    Raises:
        InvalidArgumentCountError: If a flat sequence has an odd length
        TypeError: If an item is none of the accepted formats
    """
    items = list(points)

    if items and all(isinstance(item, Real) for item in items):
        if len(items) % 2:
            raise InvalidArgumentCountError(
                "path",
                f"a flat coordinate list needs an even number of values, got {len(items)}",
            )
        return [Point(items[i], items[i + 1]) for i in range(0, len(items), 2)]

    result: list[Point] = []
    for item in items:
        if isinstance(item, Point):
            result.append(item)
        elif isinstance(item, Mapping):
            result.append(Point(item["x"], item["y"]))
        elif isinstance(item, Sequence) and not isinstance(item, str) and len(item) == 2:
            result.append(Point(item[0], item[1]))
        else:
            raise TypeError(f"Cannot interpret {item!r} as a point")

    return result


def path(points: Iterable[Any]) -> Iterator[PathCommand]:
    """Generate an open polyline: moveTo the first point, lineTo the rest."""
    for i, point in enumerate(coerce_points(points)):
        yield MoveTo(point) if i == 0 else LineTo(point)


def closed_path(points: Iterable[Any]) -> Iterator[PathCommand]:
    """Generate a closed polyline wrapped in beginPath/closePath."""
    yield BeginPath()
    yield from path(points)
    yield ClosePath()


def generate(spec: ShapeSpec, *, native_ellipse: bool = False) -> Iterator[PathCommand]:
    """Generate the commands for any ShapeSpec.

    Args:
        spec: Shape parameter bundle
        native_ellipse: Whether the target sink has a native ellipse primitive

    Yields:
        Path commands for the shape

    Raises:
        TypeError: If ``spec`` is not a known shape kind
    """
    if isinstance(spec, PolygonSpec):
        yield from polygon(spec.center, spec.radius, spec.sides, spec.winding)
    elif isinstance(spec, StarSpec):
        yield from star(spec.center, spec.radius, spec.sides, spec.winding)
    elif isinstance(spec, BurstSpec):
        yield from burst(
            spec.center, spec.outer_radius, spec.inner_radius, spec.sides, spec.winding
        )
    elif isinstance(spec, RoundedRectSpec):
        yield from rounded_rect(spec.origin, spec.width, spec.height, spec.radius)
    elif isinstance(spec, EllipseSpec):
        yield from ellipse(
            spec.center,
            spec.radius_x,
            spec.radius_y,
            spec.rotation,
            spec.start_angle,
            spec.end_angle,
            spec.winding,
            native=native_ellipse,
        )
    elif isinstance(spec, CircleSpec):
        yield from circle(spec.center, spec.radius, spec.winding)
    elif isinstance(spec, PathSpec):
        yield from closed_path(spec.points) if spec.closed else path(spec.points)
    else:
        raise TypeError(f"Unsupported shape spec: {type(spec).__name__}")
