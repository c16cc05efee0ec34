"""Elementary path commands.

Generators produce these lazily and the caller applies each one to a PathSink
as soon as it is produced. Commands are never stored by the core.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from shapeplot.domain.point import Point

if TYPE_CHECKING:
    from shapeplot.io.sink import PathSink


class PathCommand:
    """Base class for all path commands."""

    __slots__ = ()

    op: ClassVar[str] = ""

    def apply(self, sink: "PathSink") -> None:
        """Forward this command to a sink."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with an ``op`` field and the command arguments
        """
        return {"op": self.op}


@dataclass(frozen=True, slots=True)
class BeginPath(PathCommand):
    op: ClassVar[str] = "beginPath"

    def apply(self, sink: "PathSink") -> None:
        sink.begin_path()


@dataclass(frozen=True, slots=True)
class ClosePath(PathCommand):
    op: ClassVar[str] = "closePath"

    def apply(self, sink: "PathSink") -> None:
        sink.close_path()


@dataclass(frozen=True, slots=True)
class MoveTo(PathCommand):
    op: ClassVar[str] = "moveTo"

    point: Point

    def apply(self, sink: "PathSink") -> None:
        sink.move_to(self.point)

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "point": self.point.to_dict()}


@dataclass(frozen=True, slots=True)
class LineTo(PathCommand):
    op: ClassVar[str] = "lineTo"

    point: Point

    def apply(self, sink: "PathSink") -> None:
        sink.line_to(self.point)

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "point": self.point.to_dict()}


@dataclass(frozen=True, slots=True)
class ArcTo(PathCommand):
    """Tangent arc through the corner ``p1`` towards ``p2``."""

    op: ClassVar[str] = "arcTo"

    p1: Point
    p2: Point
    radius: float

    def apply(self, sink: "PathSink") -> None:
        sink.arc_to(self.p1, self.p2, self.radius)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "p1": self.p1.to_dict(),
            "p2": self.p2.to_dict(),
            "radius": self.radius,
        }


@dataclass(frozen=True, slots=True)
class Arc(PathCommand):
    """Circular arc around ``center``; angles in radians."""

    op: ClassVar[str] = "arc"

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    counter_clockwise: bool = False

    def apply(self, sink: "PathSink") -> None:
        sink.arc(
            self.center,
            self.radius,
            self.start_angle,
            self.end_angle,
            self.counter_clockwise,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "center": self.center.to_dict(),
            "radius": self.radius,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "counter_clockwise": self.counter_clockwise,
        }


@dataclass(frozen=True, slots=True)
class Ellipse(PathCommand):
    """Native elliptical arc, only sent to sinks that declare support for it."""

    op: ClassVar[str] = "ellipse"

    center: Point
    radius_x: float
    radius_y: float
    rotation: float
    start_angle: float
    end_angle: float
    counter_clockwise: bool = False

    def apply(self, sink: "PathSink") -> None:
        sink.ellipse(
            self.center,
            self.radius_x,
            self.radius_y,
            self.rotation,
            self.start_angle,
            self.end_angle,
            self.counter_clockwise,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "center": self.center.to_dict(),
            "radius_x": self.radius_x,
            "radius_y": self.radius_y,
            "rotation": self.rotation,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "counter_clockwise": self.counter_clockwise,
        }


@dataclass(frozen=True, slots=True)
class Save(PathCommand):
    op: ClassVar[str] = "save"

    def apply(self, sink: "PathSink") -> None:
        sink.save()


@dataclass(frozen=True, slots=True)
class Restore(PathCommand):
    op: ClassVar[str] = "restore"

    def apply(self, sink: "PathSink") -> None:
        sink.restore()


@dataclass(frozen=True, slots=True)
class Translate(PathCommand):
    op: ClassVar[str] = "translate"

    offset: Point

    def apply(self, sink: "PathSink") -> None:
        sink.translate(self.offset)

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "offset": self.offset.to_dict()}


@dataclass(frozen=True, slots=True)
class Rotate(PathCommand):
    op: ClassVar[str] = "rotate"

    angle: float

    def apply(self, sink: "PathSink") -> None:
        sink.rotate(self.angle)

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "angle": self.angle}


@dataclass(frozen=True, slots=True)
class Scale(PathCommand):
    op: ClassVar[str] = "scale"

    sx: float
    sy: float

    def apply(self, sink: "PathSink") -> None:
        sink.scale(self.sx, self.sy)

    def to_dict(self) -> dict[str, Any]:
        return {"op": self.op, "sx": self.sx, "sy": self.sy}
