"""Unit tests for the recording and pen-backed sinks."""

import math

import pytest
from fontTools.pens.recordingPen import RecordingPen

from shapeplot.config import GeometryConfig
from shapeplot.core.generator import ellipse, polygon, rounded_rect
from shapeplot.domain import ORIGIN, Ellipse, LineTo, MoveTo, Point, WindingDirection
from shapeplot.io import (
    CONTEXT_TYPE,
    DrawingSurface,
    PathSink,
    PenSink,
    RecordingSink,
    SinkCapability,
    svg_path_data,
)
from shapeplot.io.pen import format_number


@pytest.fixture
def pen() -> RecordingPen:
    """Create a recording pen."""
    return RecordingPen()


@pytest.fixture
def sink(pen: RecordingPen) -> PenSink:
    """Create a pen sink over the recording pen."""
    return PenSink(pen)


def ops(pen: RecordingPen) -> list[str]:
    """Names of the pen calls."""
    return [op for op, _ in pen.value]


def approx_point(point: tuple[float, float], x: float, y: float) -> None:
    """Assert a pen point is close to (x, y)."""
    assert point[0] == pytest.approx(x, abs=1e-9)
    assert point[1] == pytest.approx(y, abs=1e-9)


class TestRecordingSink:
    """Tests for RecordingSink."""

    def test_records_in_order(self) -> None:
        """Test commands are recorded in emission order."""
        recorder = RecordingSink()
        for command in polygon(ORIGIN, 10, 3):
            command.apply(recorder)
        assert recorder.ops() == ["beginPath", "moveTo", "lineTo", "lineTo", "lineTo", "closePath"]
        assert len(recorder.vertices()) == 4

    def test_clear(self) -> None:
        """Test clearing forgets recorded commands."""
        recorder = RecordingSink()
        recorder.move_to(ORIGIN)
        recorder.clear()
        assert recorder.commands == []

    def test_ellipse_without_capability_is_decomposed(self) -> None:
        """Test an ellipse is recorded as its transform decomposition unless native."""
        recorder = RecordingSink()
        recorder.ellipse(ORIGIN, 1, 2, 0, 0, 1, True)
        assert recorder.commands == list(
            ellipse(ORIGIN, 1, 2, 0, 0, 1, WindingDirection.COUNTER_CLOCKWISE)
        )

    def test_ellipse_native(self) -> None:
        """Test the native ellipse is recorded as one command when declared."""
        recorder = RecordingSink(SinkCapability.NATIVE_ELLIPSE)
        recorder.ellipse(ORIGIN, 1, 2, 0, 0, 1, True)
        assert recorder.commands == [Ellipse(ORIGIN, 1, 2, 0, 0, 1, True)]

    def test_supports(self) -> None:
        """Test capability checks."""
        assert not RecordingSink().supports(SinkCapability.NATIVE_ELLIPSE)
        assert RecordingSink(SinkCapability.NATIVE_ELLIPSE).supports(SinkCapability.NATIVE_ELLIPSE)

    def test_context(self) -> None:
        """Test a sink is its own 2d drawing context."""
        recorder = RecordingSink()
        assert recorder.get_context(CONTEXT_TYPE) is recorder
        assert recorder.get_context("webgl") is None

    def test_protocols(self) -> None:
        """Test sinks satisfy the runtime-checkable protocols."""
        recorder = RecordingSink()
        assert isinstance(recorder, PathSink)
        assert isinstance(recorder, DrawingSurface)
        assert isinstance(PenSink(RecordingPen()), PathSink)

    def test_default_font(self) -> None:
        """Test sinks start with the native default font."""
        assert RecordingSink().font == "10px sans-serif"


class TestPenSinkLines:
    """Tests for PenSink straight segments and contours."""

    def test_polygon(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test a polygon becomes one closed contour."""
        for command in polygon(ORIGIN, 10, 4):
            command.apply(sink)
        sink.flush()

        assert ops(pen) == ["moveTo", "lineTo", "lineTo", "lineTo", "lineTo", "closePath"]
        approx_point(pen.value[0][1][0], 10, 0)
        approx_point(pen.value[2][1][0], 0, 10)

    def test_line_without_current_point_moves(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test lineTo with no current point acts as moveTo."""
        sink.line_to(Point(3, 4))
        assert pen.value == [("moveTo", ((3, 4),))]
        assert sink.current_point == Point(3, 4)

    def test_close_returns_to_start(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test a segment after closePath starts at the old subpath start."""
        sink.move_to(Point(1, 1))
        sink.line_to(Point(5, 1))
        sink.close_path()
        sink.line_to(Point(5, 5))
        sink.flush()

        assert ops(pen) == ["moveTo", "lineTo", "closePath", "moveTo", "lineTo", "endPath"]
        assert pen.value[3] == ("moveTo", ((1, 1),))

    def test_open_contour_ended_by_move(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test moveTo ends an open contour."""
        sink.move_to(ORIGIN)
        sink.line_to(Point(1, 0))
        sink.move_to(Point(5, 5))
        assert ops(pen) == ["moveTo", "lineTo", "endPath", "moveTo"]

    def test_begin_path_resets_current_point(self, sink: PenSink) -> None:
        """Test beginPath forgets the current point."""
        sink.move_to(Point(2, 2))
        sink.begin_path()
        assert sink.current_point is None


class TestPenSinkArcs:
    """Tests for PenSink arc conversion."""

    def test_full_circle(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test a full circle is four cubic segments ending at the start."""
        sink.arc(Point(5, 5), 10, 0, 2 * math.pi)

        assert ops(pen) == ["moveTo"] + ["curveTo"] * 4
        approx_point(pen.value[0][1][0], 15, 5)
        approx_point(pen.value[1][1][2], 5, 15)
        approx_point(pen.value[-1][1][2], 15, 5)

    def test_arc_end_angle(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test an arc ends exactly at the requested end angle."""
        sink.arc(ORIGIN, 2, 0.3, 2.5)
        end = pen.value[-1][1][2]
        approx_point(end, 2 * math.cos(2.5), 2 * math.sin(2.5))

    def test_counter_clockwise_sweep(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test a counter-clockwise half circle passes through -pi/2."""
        sink.arc(ORIGIN, 1, 0, math.pi, True)
        assert ops(pen) == ["moveTo", "curveTo", "curveTo"]
        approx_point(pen.value[1][1][2], 0, -1)
        approx_point(pen.value[2][1][2], -1, 0)

    def test_segment_limit(self, pen: RecordingPen) -> None:
        """Test the configured maximum sweep per cubic."""
        sink = PenSink(pen, GeometryConfig(max_arc_segment=math.pi / 4))
        sink.arc(ORIGIN, 1, 0, math.pi)
        assert ops(pen).count("curveTo") == 4

    def test_arc_connects_with_line(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test an arc is joined to the current point by a straight line."""
        sink.move_to(ORIGIN)
        sink.arc(Point(10, 0), 1, math.pi, 1.5 * math.pi)
        assert ops(pen)[:2] == ["moveTo", "lineTo"]
        approx_point(pen.value[1][1][0], 9, 0)

    def test_negative_radius(self, sink: PenSink) -> None:
        """Test a negative radius raises ValueError."""
        with pytest.raises(ValueError, match="negative"):
            sink.arc(ORIGIN, -1, 0, 1)
        with pytest.raises(ValueError, match="negative"):
            sink.arc_to(ORIGIN, Point(1, 1), -1)

    def test_arc_to_corner(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test a tangent arc rounds a right-angle corner."""
        sink.move_to(ORIGIN)
        sink.arc_to(Point(10, 0), Point(10, 10), 5)

        assert ops(pen) == ["moveTo", "lineTo", "curveTo"]
        approx_point(pen.value[1][1][0], 5, 0)
        approx_point(pen.value[2][1][2], 10, 5)
        assert sink.current_point.x == pytest.approx(10)
        assert sink.current_point.y == pytest.approx(5)

    def test_arc_to_collinear(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test collinear tangent lines draw a straight line to the corner."""
        sink.move_to(ORIGIN)
        sink.arc_to(Point(5, 0), Point(10, 0), 2)
        assert pen.value[-1] == ("lineTo", ((5, 0),))

    def test_arc_to_zero_radius(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test a zero radius draws a straight line to the corner."""
        sink.move_to(ORIGIN)
        sink.arc_to(Point(5, 0), Point(5, 5), 0)
        assert pen.value[-1] == ("lineTo", ((5, 0),))

    def test_arc_to_without_current_point(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test arcTo with no current point moves to the corner."""
        sink.arc_to(Point(5, 0), Point(5, 5), 2)
        assert pen.value == [("moveTo", ((5, 0),))]

    def test_rounded_rect_skips_zero_length_joins(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test corner arcs start where the straight edges end."""
        for command in rounded_rect(ORIGIN, 100, 50, 10):
            command.apply(sink)
        sink.flush()

        assert ops(pen) == (
            ["moveTo"] + ["lineTo", "curveTo"] * 3 + ["lineTo", "curveTo", "closePath"]
        )
        approx_point(pen.value[-2][1][2], 10, 0)


class TestPenSinkTransforms:
    """Tests for PenSink transform handling."""

    def test_translate(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test coordinates are mapped through the transform."""
        sink.translate(Point(10, 20))
        sink.move_to(Point(1, 1))
        assert pen.value == [("moveTo", ((11, 21),))]

    def test_save_restore(self, sink: PenSink) -> None:
        """Test restore brings back the saved transform."""
        sink.save()
        sink.scale(2, 3)
        sink.rotate(1.0)
        sink.restore()
        assert tuple(sink.transform) == (1, 0, 0, 1, 0, 0)

    def test_unbalanced_restore_ignored(self, sink: PenSink) -> None:
        """Test restore without save is a no-op."""
        sink.translate(Point(1, 1))
        sink.restore()
        assert tuple(sink.transform) == (1, 0, 0, 1, 1, 1)

    def test_ellipse_fallback_extremes(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test the save/scale/arc/restore fallback traces the ellipse."""
        for command in ellipse(Point(20, 30), 10, 5, 0, 0, 2 * math.pi):
            command.apply(sink)

        ends = [args[2] for op, args in pen.value if op == "curveTo"]
        approx_point(pen.value[0][1][0], 30, 30)
        approx_point(ends[0], 20, 35)
        approx_point(ends[1], 10, 30)
        approx_point(ends[2], 20, 25)
        approx_point(ends[3], 30, 30)
        assert tuple(sink.transform) == (1, 0, 0, 1, 0, 0)

    def test_rotated_ellipse(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test the ellipse rotation is applied before the scale."""
        for command in ellipse(ORIGIN, 10, 5, math.pi / 2, 0, 2 * math.pi):
            command.apply(sink)
        approx_point(pen.value[0][1][0], 0, 10)

    def test_direct_ellipse_call(self, pen: RecordingPen, sink: PenSink) -> None:
        """Test calling ellipse directly draws the same outline as the decomposition."""
        assert not sink.supports(SinkCapability.NATIVE_ELLIPSE)
        sink.ellipse(Point(20, 30), 10, 5, 0, 0, 2 * math.pi)

        expected = RecordingPen()
        expected_sink = PenSink(expected)
        for command in ellipse(Point(20, 30), 10, 5, 0, 0, 2 * math.pi):
            command.apply(expected_sink)

        assert pen.value == expected.value
        approx_point(pen.value[0][1][0], 30, 30)
        assert tuple(sink.transform) == (1, 0, 0, 1, 0, 0)


class TestSvgOutput:
    """Tests for SVG path data rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1.0, "1"), (100, "100"), (0.5, "0.5"), (8.660254037844386, "8.660254"), (-1e-9, "0")],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        """Test compact number formatting."""
        assert format_number(value) == expected

    def test_svg_path_data(self) -> None:
        """Test commands render to SVG path data."""
        data = svg_path_data([MoveTo(ORIGIN), LineTo(Point(10, 0)), LineTo(Point(10, 10))])
        assert data.startswith("M0 0")
        assert "10" in data

    def test_svg_closed_polygon(self) -> None:
        """Test a closed polygon ends with Z."""
        data = svg_path_data(list(polygon(ORIGIN, 10, 6)))
        assert data.startswith("M10 0")
        assert data.rstrip().endswith("Z")
