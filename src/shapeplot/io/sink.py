"""Drawing surface interface.

The generators never paint anything. They emit commands into a PathSink, the
narrow capability set shapeplot needs from a host drawing surface. Optional
primitives are advertised through ``capabilities`` instead of being probed
for at runtime.
"""

from enum import Flag, auto
from typing import Protocol, runtime_checkable

from shapeplot.domain import (
    Arc,
    ArcTo,
    BeginPath,
    ClosePath,
    Ellipse,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    Restore,
    Rotate,
    Save,
    Scale,
    Translate,
    WindingDirection,
)

CONTEXT_TYPE = "2d"
NATIVE_DEFAULT_FONT = "10px sans-serif"


class SinkCapability(Flag):
    """Optional primitives a sink may implement natively."""

    NONE = 0
    NATIVE_ELLIPSE = auto()


@runtime_checkable
class PathSink(Protocol):
    """Commands a drawing surface must accept from the generators."""

    capabilities: SinkCapability
    font: str

    def begin_path(self) -> None: ...

    def close_path(self) -> None: ...

    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def arc_to(self, p1: Point, p2: Point, radius: float) -> None: ...

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None: ...

    def ellipse(
        self,
        center: Point,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, offset: Point) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...


@runtime_checkable
class DrawingSurface(Protocol):
    """Something that can hand out a drawing context by type name."""

    def get_context(self, context_type: str) -> PathSink | None: ...


class BaseSink:
    """Shared state for concrete sinks.

    A sink is its own drawing surface for the ``"2d"`` context type.

    Attributes:
        capabilities: Natively supported optional primitives
        font: Current font shorthand string
    """

    def __init__(
        self,
        capabilities: SinkCapability = SinkCapability.NONE,
        font: str = NATIVE_DEFAULT_FONT,
    ) -> None:
        self.capabilities = capabilities
        self.font = font

    def supports(self, capability: SinkCapability) -> bool:
        """Check whether a capability is declared."""
        return capability in self.capabilities

    def get_context(self, context_type: str) -> "BaseSink | None":
        """Return this sink for the 2d context type, None otherwise."""
        return self if context_type == CONTEXT_TYPE else None

    def draw_ellipse_fallback(
        self,
        center: Point,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        """Draw an ellipse as a circular arc under a scaled, rotated transform.

        Applies save, translate, rotate, scale, arc and restore to this sink,
        so the transform is unchanged afterwards.
        """
        from shapeplot.core.generator import ellipse

        for command in ellipse(
            center,
            radius_x,
            radius_y,
            rotation,
            start_angle,
            end_angle,
            WindingDirection.from_flag(counter_clockwise),
        ):
            command.apply(self)


class RecordingSink(BaseSink):
    """Sink that records every command it receives, in order.

    Example:
        sink = RecordingSink()
        for command in polygon(Point(0, 0), 10, 6):
            command.apply(sink)
        sink.vertices()  # moveTo point followed by six lineTo points
    """

    def __init__(
        self,
        capabilities: SinkCapability = SinkCapability.NONE,
        font: str = NATIVE_DEFAULT_FONT,
    ) -> None:
        super().__init__(capabilities, font)
        self.commands: list[PathCommand] = []

    def clear(self) -> None:
        """Forget all recorded commands."""
        self.commands.clear()

    def vertices(self) -> list[Point]:
        """Points of all recorded moveTo and lineTo commands."""
        return [c.point for c in self.commands if isinstance(c, (MoveTo, LineTo))]

    def ops(self) -> list[str]:
        """Names of all recorded commands."""
        return [c.op for c in self.commands]

    def begin_path(self) -> None:
        self.commands.append(BeginPath())

    def close_path(self) -> None:
        self.commands.append(ClosePath())

    def move_to(self, point: Point) -> None:
        self.commands.append(MoveTo(point))

    def line_to(self, point: Point) -> None:
        self.commands.append(LineTo(point))

    def arc_to(self, p1: Point, p2: Point, radius: float) -> None:
        self.commands.append(ArcTo(p1, p2, radius))

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        self.commands.append(Arc(center, radius, start_angle, end_angle, counter_clockwise))

    def ellipse(
        self,
        center: Point,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        if not self.supports(SinkCapability.NATIVE_ELLIPSE):
            self.draw_ellipse_fallback(
                center, radius_x, radius_y, rotation, start_angle, end_angle, counter_clockwise
            )
            return
        self.commands.append(
            Ellipse(
                center,
                radius_x,
                radius_y,
                rotation,
                start_angle,
                end_angle,
                counter_clockwise,
            )
        )

    def save(self) -> None:
        self.commands.append(Save())

    def restore(self) -> None:
        self.commands.append(Restore())

    def translate(self, offset: Point) -> None:
        self.commands.append(Translate(offset))

    def rotate(self, angle: float) -> None:
        self.commands.append(Rotate(angle))

    def scale(self, sx: float, sy: float) -> None:
        self.commands.append(Scale(sx, sy))
