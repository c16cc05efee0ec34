"""Angle and distance helpers.

This module provides the trigonometric utilities used by the path generators:
- Signed angle of the ray between two points
- Signed turning angle at a vertex defined by three points
- Degree/radian and percent/fraction conversion
- Euclidean distance

All functions are pure and stateless.
"""

import math
from typing import overload

from shapeplot.domain import Point
from shapeplot.exceptions import InvalidArgumentCountError


def angle_between(p1: Point, p2: Point) -> float:
    """Calculate the signed angle of the ray from ``p1`` to ``p2``.

    Args:
        p1: Start of the ray
        p2: Point the ray passes through

    Returns:
        Angle in radians in the range (-pi, pi]

    Examples:
        >>> angle_between(Point(0.0, 0.0), Point(0.0, 1.0))
        1.5707963267948966
    """
    return math.atan2(p2.y - p1.y, p2.x - p1.x)


def angle_at_vertex(p1: Point, p2: Point, p3: Point) -> float:
    """Calculate the signed interior angle at ``p2`` of the path p1 -> p2 -> p3.

    The difference between the outgoing and incoming ray angles is folded so
    that a straight continuation gives +/-pi and a right-angle turn gives
    +/-pi/2.

    Args:
        p1: Previous vertex
        p2: Vertex where the angle is measured
        p3: Next vertex

    Returns:
        Angle in radians

    Examples:
        >>> angle_at_vertex(Point(0.0, 0.0), Point(1.0, 0.0), Point(2.0, 0.0))
        3.141592653589793
        >>> angle_at_vertex(Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0))
        1.5707963267948966
    """
    a = angle_between(p1, p2)
    b = angle_between(p2, p3)
    c = b - a

    if c >= 0:
        return math.pi - c

    return -math.pi - c


@overload
def get_angle(x1: float, y1: float, x2: float, y2: float) -> float: ...


@overload
def get_angle(
    x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> float: ...


def get_angle(*coordinates: float) -> float:
    """Numeric entry point for the two- and three-point angle calculations.

    Four values are treated as two points (see ``angle_between``), six values
    as three points (see ``angle_at_vertex``).

    Raises:
        InvalidArgumentCountError: If neither 4 nor 6 values are supplied
    """
    count = len(coordinates)

    if count == 4:
        x1, y1, x2, y2 = coordinates
        return angle_between(Point(x1, y1), Point(x2, y2))

    if count == 6:
        x1, y1, x2, y2, x3, y3 = coordinates
        return angle_at_vertex(Point(x1, y1), Point(x2, y2), Point(x3, y3))

    raise InvalidArgumentCountError(
        "get_angle",
        f"expected 4 or 6 coordinates (2 or 3 points), got {count}",
    )


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


def radians_from_degrees(degrees: float) -> float:
    return degrees * math.pi / 180


def degrees_from_radians(radians: float) -> float:
    return radians * 180 / math.pi


def percent_from_fraction(fraction: float) -> float:
    return fraction * 100


def fraction_from_percent(percent: float) -> float:
    return percent / 100
