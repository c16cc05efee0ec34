"""Fluent plotting facade bound to a drawing surface.

Plotter acquires a PathSink from a drawing surface, streams generator output
into it one command at a time, and exposes the font shorthand accessors on
top of the sink's current font. Every plotting method returns the plotter so
calls can be chained.
"""

from collections.abc import Callable, Iterable
from typing import Any

import structlog

from shapeplot.config import ShapeplotSettings, get_default_settings
from shapeplot.core import generator, helpers
from shapeplot.core.font import FontCodec
from shapeplot.domain import (
    Arc,
    ArcTo,
    BeginPath,
    ClosePath,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    Restore,
    Rotate,
    Save,
    Scale,
    ShapeSpec,
    Translate,
    WindingDirection,
)
from shapeplot.exceptions import InvalidCallbackError, MissingDrawingContextError
from shapeplot.io.sink import CONTEXT_TYPE, DrawingSurface, PathSink, SinkCapability
from shapeplot.utils.logging import PlotLogger, PlotStats

CLOCKWISE = WindingDirection.CLOCKWISE


class Plotter:
    """Records shapes into a drawing surface's path.

    Example:
        sink = RecordingSink()
        plotter = Plotter(sink)
        plotter.plot_poly(Point(0, 0), 10, 6).plot_circle(Point(30, 0), 5)
        sink.ops()
    """

    def __init__(
        self,
        surface: DrawingSurface,
        settings: ShapeplotSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Bind a plotter to a surface.

        The surface's current font is canonicalized to the five-part form so
        the font field setters work from the start.

        Args:
            surface: Surface providing a ``"2d"`` drawing context
            settings: Shapeplot settings (defaults if None)
            logger: structlog logger (the ``shapeplot`` logger if None)

        Raises:
            MissingDrawingContextError: If the surface has no 2d context
        """
        self.settings = settings or get_default_settings()

        sink = surface.get_context(CONTEXT_TYPE)
        if sink is None:
            raise MissingDrawingContextError(CONTEXT_TYPE)

        self._sink: PathSink = sink
        self._log = PlotLogger(logger)
        self.codec = FontCodec(self.settings.font)
        self._sink.font = self.codec.format(self._sink.font)

    @property
    def sink(self) -> PathSink:
        """The drawing context commands are sent to."""
        return self._sink

    @property
    def native_ellipse(self) -> bool:
        """Whether the sink declares a native ellipse primitive."""
        return SinkCapability.NATIVE_ELLIPSE in self._sink.capabilities

    @property
    def stats(self) -> PlotStats:
        """Counters of plotted and skipped shapes."""
        return self._log.stats

    def emit(self, commands: Iterable[PathCommand]) -> int:
        """Apply commands to the sink in order.

        Returns:
            Number of commands applied
        """
        count = 0
        for command in commands:
            command.apply(self._sink)
            count += 1
        return count

    def _forward(self, command: PathCommand) -> "Plotter":
        command.apply(self._sink)
        self._log.log_commands(1)
        return self

    def _plot(self, shape: str, commands: Iterable[PathCommand], reason: str = "") -> "Plotter":
        count = self.emit(commands)
        if count:
            self._log.log_shape(shape, count)
        else:
            self._log.log_shape_skipped(shape, reason or "no commands generated")
        return self

    # Primitive commands

    def begin_path(self) -> "Plotter":
        return self._forward(BeginPath())

    def close_path(self) -> "Plotter":
        return self._forward(ClosePath())

    def move_to(self, point: Point) -> "Plotter":
        return self._forward(MoveTo(point))

    def line_to(self, point: Point) -> "Plotter":
        return self._forward(LineTo(point))

    def arc_to(self, p1: Point, p2: Point, radius: float) -> "Plotter":
        return self._forward(ArcTo(p1, p2, radius))

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> "Plotter":
        return self._forward(Arc(center, radius, start_angle, end_angle, counter_clockwise))

    def save(self) -> "Plotter":
        return self._forward(Save())

    def restore(self) -> "Plotter":
        return self._forward(Restore())

    def translate(self, offset: Point) -> "Plotter":
        return self._forward(Translate(offset))

    def rotate(self, angle: float) -> "Plotter":
        return self._forward(Rotate(angle))

    def scale(self, sx: float, sy: float) -> "Plotter":
        return self._forward(Scale(sx, sy))

    # Shapes

    def plot(self, spec: ShapeSpec) -> "Plotter":
        """Plot any shape described by a ShapeSpec."""
        return self._plot(
            spec.kind,
            generator.generate(spec, native_ellipse=self.native_ellipse),
            "degenerate shape",
        )

    def plot_poly(
        self,
        center: Point,
        radius: float,
        sides: float,
        winding: WindingDirection = CLOCKWISE,
    ) -> "Plotter":
        return self._plot(
            "polygon",
            generator.polygon(center, radius, sides, winding),
            f"sides={sides!r} rounds below 3",
        )

    def plot_star(
        self,
        center: Point,
        radius: float,
        sides: float,
        winding: WindingDirection = CLOCKWISE,
    ) -> "Plotter":
        return self._plot(
            "star",
            generator.star(center, radius, sides, winding),
            f"sides={sides!r} rounds below 3",
        )

    def plot_burst(
        self,
        center: Point,
        outer_radius: float,
        inner_radius: float,
        sides: float,
        winding: WindingDirection = CLOCKWISE,
    ) -> "Plotter":
        return self._plot(
            "burst",
            generator.burst(center, outer_radius, inner_radius, sides, winding),
            f"sides={sides!r} rounds below 3",
        )

    def plot_rounded_rect(
        self, origin: Point, width: float, height: float, radius: float
    ) -> "Plotter":
        return self._plot("rounded_rect", generator.rounded_rect(origin, width, height, radius))

    def plot_ellipse(
        self,
        center: Point,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        winding: WindingDirection = CLOCKWISE,
    ) -> "Plotter":
        """Plot an elliptical arc, natively if the sink supports it."""
        return self._plot(
            "ellipse",
            generator.ellipse(
                center,
                radius_x,
                radius_y,
                rotation,
                start_angle,
                end_angle,
                winding,
                native=self.native_ellipse,
            ),
        )

    def plot_circle(
        self, center: Point, radius: float, winding: WindingDirection = CLOCKWISE
    ) -> "Plotter":
        return self._plot("circle", generator.circle(center, radius, winding))

    def plot_path(self, points: Iterable[Any]) -> "Plotter":
        return self._plot("path", generator.path(points), "no points")

    def plot_closed_path(self, points: Iterable[Any]) -> "Plotter":
        return self._plot("closed_path", generator.closed_path(points))

    def plot_line(self, start: Point, end: Point) -> "Plotter":
        return self._plot("line", generator.line(start, end))

    def plot_length(self, start: Point, length: float, angle: float) -> "Plotter":
        return self._plot("length", generator.length(start, length, angle))

    # Font

    def set_font(self, font: str) -> "Plotter":
        """Set the sink font; an empty string restores the default font."""
        self._sink.font = self.codec.format(font)
        return self

    def get_font(self) -> str:
        return self.codec.format(self._sink.font)

    def _set_font_field(self, mutate: Callable[[str, Any], str], value: Any) -> "Plotter":
        current = self._sink.font
        if not self.codec.is_well_formed(current):
            self._log.log_font_reset(current, self.codec.default_font)
        self._sink.font = mutate(current, value)
        return self

    def set_font_style(self, style: str | None) -> "Plotter":
        return self._set_font_field(self.codec.with_style, style)

    def set_font_variant(self, variant: str | None) -> "Plotter":
        return self._set_font_field(self.codec.with_variant, variant)

    def set_font_weight(self, weight: str | int | None) -> "Plotter":
        return self._set_font_field(self.codec.with_weight, weight)

    def set_font_size(self, size: str | float | None) -> "Plotter":
        """Set the font size; numbers get the configured unit (px by default)."""
        return self._set_font_field(self.codec.with_size, size)

    def set_font_family(self, family: str | None) -> "Plotter":
        return self._set_font_field(self.codec.with_family, family)

    def get_font_style(self) -> str | None:
        return self.codec.style_of(self._sink.font)

    def get_font_variant(self) -> str | None:
        return self.codec.variant_of(self._sink.font)

    def get_font_weight(self) -> str | None:
        return self.codec.weight_of(self._sink.font)

    def get_font_size(self) -> float | None:
        return self.codec.size_of(self._sink.font)

    def get_font_family(self) -> str | None:
        return self.codec.family_of(self._sink.font)

    # Control flow

    def repeat(self, *args: Any) -> "Plotter":
        """Run an action over a numeric range, see ``helpers.repeat``."""
        helpers.repeat(*args)
        return self

    def for_each(self, collection: Any, action: Callable[[Any, Any], Any]) -> "Plotter":
        """Run an action over a collection, see ``helpers.for_each``."""
        helpers.for_each(collection, action)
        return self

    def tap(self, callback: Callable[["Plotter"], Any]) -> "Plotter":
        """Call ``callback(plotter)`` inside a chain.

        Raises:
            InvalidCallbackError: If ``callback`` is not callable
        """
        if not callable(callback):
            raise InvalidCallbackError("tap", callback)
        callback(self)
        return self
