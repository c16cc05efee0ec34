"""Core geometric types for path generation.

This module defines the fundamental geometric types used throughout shapeplot:
- Point: An immutable 2D point in logical (device-independent) coordinates
- WindingDirection: Enum for the direction closed shapes are emitted in
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class WindingDirection(Enum):
    """Direction in which the vertices of a closed shape are emitted.

    Canvas convention: the y axis points down, so increasing angles
    sweep clockwise on screen.
    """

    CLOCKWISE = 1
    COUNTER_CLOCKWISE = -1

    @property
    def sign(self) -> int:
        """Sign of the angular step (+1 clockwise, -1 counter-clockwise)."""
        return self.value

    @property
    def is_counter_clockwise(self) -> bool:
        """True for the counter-clockwise (canvas "anticlockwise") direction."""
        return self is WindingDirection.COUNTER_CLOCKWISE

    @classmethod
    def from_flag(cls, counter_clockwise: bool | None) -> "WindingDirection":
        """Build a winding from a canvas-style ``anticlockwise`` flag.

        Args:
            counter_clockwise: Truthy for counter-clockwise, falsy or None otherwise

        Returns:
            Matching WindingDirection
        """
        return cls.COUNTER_CLOCKWISE if counter_clockwise else cls.CLOCKWISE


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D logical space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def offset(self, dx: float, dy: float) -> "Point":
        """Return a new point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)

    def polar(self, radius: float, angle: float) -> "Point":
        """Return the point at ``radius`` and ``angle`` (radians) around this one."""
        return Point(self.x + radius * math.cos(angle), self.y + radius * math.sin(angle))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


ORIGIN = Point(0.0, 0.0)
