"""PathSink backed by a fontTools pen.

PenSink executes path commands against any fontTools pen (SVGPathPen,
RecordingPen, TTGlyphPen, ...). It keeps a canvas-like transform stack and
current point, converts arcs and tangent arcs to cubic Beziers, and sends
device-space coordinates to the pen.
"""

from fontTools.misc.transform import Transform
from fontTools.pens.basePen import AbstractPen
from fontTools.pens.svgPathPen import SVGPathPen

from shapeplot.config import GeometryConfig
from shapeplot.core._bezier import arc_segments, normalize_sweep, tangent_arc
from shapeplot.domain import PathCommand, Point
from shapeplot.io.sink import NATIVE_DEFAULT_FONT, BaseSink, SinkCapability

_SAME_POINT = 1e-9


def _same(a: Point, b: Point) -> bool:
    return abs(a.x - b.x) <= _SAME_POINT and abs(a.y - b.y) <= _SAME_POINT


class PenSink(BaseSink):
    """Drives a fontTools pen from path commands.

    The sink has no native ellipse primitive, so ellipses reach it as a
    circular arc under a scaled transform. Because arcs are converted to
    Bezier control points before the transform is applied, the result is
    an exact affine image of the arc approximation.

    Example:
        pen = SVGPathPen(None)
        sink = PenSink(pen)
        Plotter(sink).plot_poly(Point(0, 0), 10, 6)
        sink.flush()
        pen.getCommands()
    """

    def __init__(
        self,
        pen: AbstractPen,
        geometry: GeometryConfig | None = None,
        font: str = NATIVE_DEFAULT_FONT,
    ) -> None:
        """Initialize the sink.

        Args:
            pen: fontTools pen receiving device-space segments
            geometry: Curve approximation settings (defaults if None)
            font: Initial font string
        """
        super().__init__(SinkCapability.NONE, font)
        self.pen = pen
        self.geometry = geometry or GeometryConfig()
        self._transform = Transform()
        self._stack: list[Transform] = []
        self._current: Point | None = None
        self._subpath_start: Point | None = None
        self._contour_open = False

    @property
    def transform(self) -> Transform:
        """Current user-to-device transform."""
        return self._transform

    @property
    def current_point(self) -> Point | None:
        """Current point in device space, None before the first move."""
        return self._current

    def _to_device(self, point: Point) -> Point:
        x, y = self._transform.transformPoint(point.to_tuple())
        return Point(x, y)

    def _to_user(self, point: Point) -> Point:
        x, y = self._transform.inverse().transformPoint(point.to_tuple())
        return Point(x, y)

    def _end_contour(self) -> None:
        if self._contour_open:
            self.pen.endPath()
            self._contour_open = False

    def _ensure_contour(self) -> None:
        # After closePath the next segment starts a new contour at the old start
        if not self._contour_open and self._current is not None:
            self.pen.moveTo(self._current.to_tuple())
            self._contour_open = True
            self._subpath_start = self._current

    def flush(self) -> None:
        """End any open contour so the pen receives a complete outline."""
        self._end_contour()

    def begin_path(self) -> None:
        self._end_contour()
        self._current = None
        self._subpath_start = None

    def close_path(self) -> None:
        if self._contour_open:
            self.pen.closePath()
            self._contour_open = False
            self._current = self._subpath_start

    def move_to(self, point: Point) -> None:
        self._end_contour()
        device = self._to_device(point)
        self.pen.moveTo(device.to_tuple())
        self._contour_open = True
        self._current = device
        self._subpath_start = device

    def line_to(self, point: Point) -> None:
        if self._current is None:
            self.move_to(point)
            return

        device = self._to_device(point)
        self._ensure_contour()
        self.pen.lineTo(device.to_tuple())
        self._current = device

    def _connect(self, point: Point) -> None:
        # Implicit connecting line; skipped when it would have zero length
        if self._current is None:
            self.move_to(point)
            return

        device = self._to_device(point)
        self._ensure_contour()
        if not _same(self._current, device):
            self.pen.lineTo(device.to_tuple())
            self._current = device

    def arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool = False,
    ) -> None:
        """Append a circular arc, connected to the current point by a line.

        Raises:
            ValueError: If ``radius`` is negative
        """
        if radius < 0:
            raise ValueError(f"Arc radius must not be negative, got {radius}")

        sweep = normalize_sweep(start_angle, end_angle, counter_clockwise)
        self._connect(center.polar(radius, start_angle))

        for _, c1, c2, end in arc_segments(
            center, radius, start_angle, sweep, self.geometry.max_arc_segment
        ):
            device_end = self._to_device(end)
            self.pen.curveTo(
                self._to_device(c1).to_tuple(),
                self._to_device(c2).to_tuple(),
                device_end.to_tuple(),
            )
            self._current = device_end

    def arc_to(self, p1: Point, p2: Point, radius: float) -> None:
        """Append a tangent arc through the corner ``p1`` towards ``p2``.

        Degenerate corners (coincident points, zero radius, collinear lines)
        produce a straight line to ``p1``.

        Raises:
            ValueError: If ``radius`` is negative
        """
        if radius < 0:
            raise ValueError(f"Arc radius must not be negative, got {radius}")

        if self._current is None:
            self.move_to(p1)
            return

        arc = tangent_arc(
            self._to_user(self._current),
            p1,
            p2,
            radius,
            self.geometry.collinear_epsilon,
        )
        if arc is None:
            self.line_to(p1)
            return

        self._connect(arc.start)
        self.arc(arc.center, radius, arc.start_angle, arc.end_angle, arc.counter_clockwise)

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
        """Append an elliptical arc through the transform decomposition."""
        self.draw_ellipse_fallback(
            center, radius_x, radius_y, rotation, start_angle, end_angle, counter_clockwise
        )

    def save(self) -> None:
        self._stack.append(self._transform)

    def restore(self) -> None:
        # Unbalanced restores are ignored, as on a canvas
        if self._stack:
            self._transform = self._stack.pop()

    def translate(self, offset: Point) -> None:
        self._transform = self._transform.translate(offset.x, offset.y)

    def rotate(self, angle: float) -> None:
        self._transform = self._transform.rotate(angle)

    def scale(self, sx: float, sy: float) -> None:
        self._transform = self._transform.scale(sx, sy)


def format_number(value: float) -> str:
    """Compact SVG number: rounded to 6 decimals, no trailing zeros."""
    text = f"{round(value, 6):.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def svg_path_data(commands: list[PathCommand], geometry: GeometryConfig | None = None) -> str:
    """Render path commands to SVG path data.

    Args:
        commands: Commands to execute, in order
        geometry: Curve approximation settings

    Returns:
        SVG ``d`` attribute string
    """
    pen = SVGPathPen(None, ntos=format_number)
    sink = PenSink(pen, geometry)
    for command in commands:
        command.apply(sink)
    sink.flush()
    return pen.getCommands()
