"""Internal circular arc approximation with cubic Bezier curves.

This is an internal module containing helper functions for pen-backed sinks.
Not intended for public use.
"""

import math
from dataclasses import dataclass

from shapeplot.domain import Point

TAU = math.pi * 2

CubicSegment = tuple[Point, Point, Point, Point]


def normalize_sweep(start_angle: float, end_angle: float, counter_clockwise: bool) -> float:
    """Signed sweep of a canvas-style arc.

    A sweep of a full turn or more is clamped to exactly one turn; smaller
    spans are reduced modulo one turn in the requested direction.

    Args:
        start_angle: Start angle in radians
        end_angle: End angle in radians
        counter_clockwise: Sweep towards decreasing angles

    Returns:
        Sweep in radians, negative for counter-clockwise arcs
    """
    if not counter_clockwise and end_angle - start_angle >= TAU:
        return TAU
    if counter_clockwise and start_angle - end_angle >= TAU:
        return -TAU

    if counter_clockwise:
        return -((start_angle - end_angle) % TAU)
    return (end_angle - start_angle) % TAU


def arc_segments(
    center: Point,
    radius: float,
    start_angle: float,
    sweep: float,
    max_segment: float,
) -> list[CubicSegment]:
    """Approximate a circular arc with cubic Bezier segments.

    The arc is split into equal pieces no larger than ``max_segment`` and each
    piece uses the standard ``4/3 * tan(theta / 4)`` handle length.

    Args:
        center: Arc centre
        radius: Arc radius
        start_angle: Start angle in radians
        sweep: Signed sweep in radians
        max_segment: Largest sweep per segment in radians

    Returns:
        List of (p0, p1, p2, p3) control point tuples, empty for a zero sweep
    """
    if sweep == 0:
        return []

    count = max(1, math.ceil(abs(sweep) / max_segment - 1e-9))
    delta = sweep / count
    k = 4 / 3 * math.tan(delta / 4) * radius

    segments: list[CubicSegment] = []
    for i in range(count):
        a0 = start_angle + delta * i
        a1 = start_angle + sweep if i == count - 1 else a0 + delta

        p0 = center.polar(radius, a0)
        p3 = center.polar(radius, a1)
        p1 = Point(p0.x - k * math.sin(a0), p0.y + k * math.cos(a0))
        p2 = Point(p3.x + k * math.sin(a1), p3.y - k * math.cos(a1))

        segments.append((p0, p1, p2, p3))

    return segments


@dataclass(frozen=True, slots=True)
class TangentArc:
    """Circle arc tangent to the two lines meeting at a corner."""

    start: Point
    end: Point
    center: Point
    start_angle: float
    end_angle: float
    counter_clockwise: bool


def tangent_arc(
    current: Point,
    corner: Point,
    target: Point,
    radius: float,
    epsilon: float,
) -> TangentArc | None:
    """Construct the arc of an arcTo command.

    The arc is tangent to the line ``current -> corner`` and to the line
    ``corner -> target``.

    Args:
        current: Current point of the path
        corner: Corner point (x1, y1)
        target: Point defining the second tangent line (x2, y2)
        radius: Arc radius
        epsilon: Cross product threshold for collinearity

    Returns:
        TangentArc, or None if the lines are degenerate or collinear (the
        caller then draws a straight line to the corner)
    """
    u1x, u1y = current.x - corner.x, current.y - corner.y
    u2x, u2y = target.x - corner.x, target.y - corner.y

    u1_len = math.hypot(u1x, u1y)
    u2_len = math.hypot(u2x, u2y)
    if u1_len < 1e-10 or u2_len < 1e-10 or radius == 0:
        return None

    u1x, u1y = u1x / u1_len, u1y / u1_len
    u2x, u2y = u2x / u2_len, u2y / u2_len

    cross = u1x * u2y - u1y * u2x
    if abs(cross) < epsilon:
        return None

    dot = max(-1.0, min(1.0, u1x * u2x + u1y * u2y))
    half_angle = math.acos(dot) / 2

    tangent_dist = radius / math.tan(half_angle)
    start = Point(corner.x + u1x * tangent_dist, corner.y + u1y * tangent_dist)
    end = Point(corner.x + u2x * tangent_dist, corner.y + u2y * tangent_dist)

    bx, by = u1x + u2x, u1y + u2y
    b_len = math.hypot(bx, by)
    center_dist = radius / math.sin(half_angle)
    center = Point(corner.x + bx / b_len * center_dist, corner.y + by / b_len * center_dist)

    return TangentArc(
        start=start,
        end=end,
        center=center,
        start_angle=math.atan2(start.y - center.y, start.x - center.x),
        end_angle=math.atan2(end.y - center.y, end.x - center.x),
        counter_clockwise=cross > 0,
    )
