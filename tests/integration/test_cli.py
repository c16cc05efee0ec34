"""Integration tests for the command-line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from shapeplot import __version__
from shapeplot.cli.app import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


class TestGlobalOptions:
    """Tests for the app callback options."""

    def test_version(self, runner: CliRunner) -> None:
        """Test --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_invalid_log_level(self, runner: CliRunner) -> None:
        """Test an unknown log level is rejected."""
        result = runner.invoke(app, ["--log-level", "LOUD", "circle", "0", "0", "1"])
        assert result.exit_code == 1

    def test_log_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test --log-file writes plotting events to the file."""
        log_file = tmp_path / "shapeplot.log"
        result = runner.invoke(app, ["--log-file", str(log_file), "poly", "0", "0", "10", "6"])
        assert result.exit_code == 0
        assert log_file.exists()
        assert "Shape plotted" in log_file.read_text(encoding="utf-8")

    def test_stats(self, runner: CliRunner) -> None:
        """Test --stats reports plotted and skipped shapes."""
        result = runner.invoke(app, ["--stats", "poly", "0", "0", "10", "2"])
        assert result.exit_code == 0
        assert "0 shapes" in result.output
        assert "1 skipped" in result.output


class TestShapeCommands:
    """Tests for the shape commands."""

    def test_poly(self, runner: CliRunner) -> None:
        """Test poly prints closed SVG path data."""
        result = runner.invoke(app, ["poly", "0", "0", "10", "6"])
        assert result.exit_code == 0
        data = result.stdout.strip()
        assert data.startswith("M10 0")
        assert "8.660254" in data
        assert data.endswith("Z")

    def test_poly_degenerate_is_empty(self, runner: CliRunner) -> None:
        """Test a sub-minimum side count prints nothing and succeeds."""
        result = runner.invoke(app, ["poly", "0", "0", "10", "2"])
        assert result.exit_code == 0
        assert result.stdout.strip() == ""

    def test_poly_commands_table(self, runner: CliRunner) -> None:
        """Test --commands prints the command sequence."""
        result = runner.invoke(app, ["poly", "0", "0", "10", "3", "--commands"])
        assert result.exit_code == 0
        assert "beginPath" in result.stdout
        assert result.stdout.count("lineTo") == 3
        assert "closePath" in result.stdout

    def test_star_ccw(self, runner: CliRunner) -> None:
        """Test star accepts a winding flag."""
        result = runner.invoke(app, ["star", "0", "0", "10", "5", "--ccw", "-c"])
        assert result.exit_code == 0
        assert result.stdout.count("lineTo") == 10

    def test_burst(self, runner: CliRunner) -> None:
        """Test burst prints path data."""
        result = runner.invoke(app, ["burst", "0", "0", "10", "4", "6"])
        assert result.exit_code == 0
        assert result.stdout.startswith("M10 0")

    def test_rounded_rect(self, runner: CliRunner) -> None:
        """Test rounded-rect clamps the radius and draws curves."""
        result = runner.invoke(app, ["rounded-rect", "0", "0", "100", "50", "999"])
        assert result.exit_code == 0
        data = result.stdout.strip()
        assert data.startswith("M25 0")
        assert data.count("C") == 4

    def test_ellipse(self, runner: CliRunner) -> None:
        """Test ellipse draws through the transform fallback."""
        result = runner.invoke(app, ["ellipse", "0", "0", "10", "5"])
        assert result.exit_code == 0
        assert result.stdout.startswith("M10 0")
        assert "C" in result.stdout

    def test_ellipse_commands(self, runner: CliRunner) -> None:
        """Test the ellipse command sequence restores the transform."""
        result = runner.invoke(app, ["ellipse", "0", "0", "10", "5", "--commands"])
        assert result.exit_code == 0
        for op in ("save", "translate", "rotate", "scale", "arc", "restore"):
            assert op in result.stdout

    def test_circle(self, runner: CliRunner) -> None:
        """Test circle draws four cubic segments."""
        result = runner.invoke(app, ["circle", "5", "5", "10"])
        assert result.exit_code == 0
        assert result.stdout.startswith("M15 5")
        assert result.stdout.count("C") == 4

    def test_negative_radius(self, runner: CliRunner) -> None:
        """Test a negative arc radius fails with an error message."""
        result = runner.invoke(app, ["circle", "--", "0", "0", "-5"])
        assert result.exit_code == 1
        assert "negative" in result.output

    def test_path(self, runner: CliRunner) -> None:
        """Test path through x,y points."""
        result = runner.invoke(app, ["path", "0,0", "10,0", "10,10", "--closed"])
        assert result.exit_code == 0
        data = result.stdout.strip()
        assert data.startswith("M0 0")
        assert data.endswith("Z")

    def test_path_bad_point(self, runner: CliRunner) -> None:
        """Test a malformed point is a usage error."""
        result = runner.invoke(app, ["path", "0,0", "oops"])
        assert result.exit_code == 2


class TestFontCommand:
    """Tests for the font command."""

    def test_canonicalize(self, runner: CliRunner) -> None:
        """Test the native default font is canonicalized."""
        result = runner.invoke(app, ["font", "10px sans-serif"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "normal normal normal 10px sans-serif"
        assert "family" in result.stdout

    def test_mutators(self, runner: CliRunner) -> None:
        """Test field options replace fields in order."""
        result = runner.invoke(
            app,
            ["font", "italic small-caps bold 12px serif", "--size", "20", "--weight", "300"],
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "italic small-caps 300 20px serif"


class TestAngleCommand:
    """Tests for the angle command."""

    def test_ray(self, runner: CliRunner) -> None:
        """Test four numbers give a ray angle."""
        result = runner.invoke(app, ["angle", "0", "0", "0", "1", "--degrees"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "90"

    def test_vertex(self, runner: CliRunner) -> None:
        """Test six numbers give a vertex angle."""
        result = runner.invoke(app, ["angle", "0", "0", "1", "0", "2", "0"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "3.141593"

    def test_wrong_count(self, runner: CliRunner) -> None:
        """Test other counts fail with an error message."""
        result = runner.invoke(app, ["angle", "1", "2", "3"])
        assert result.exit_code == 1
        assert "get_angle" in result.output
