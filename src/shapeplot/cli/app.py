"""CLI application entry point for shapeplot.

This module provides the main CLI interface using Typer. Every shape command
prints SVG path data on stdout, or a table of path commands with --commands.
Negative numbers must follow a ``--`` separator, e.g. ``shapeplot poly -- -5 0 10 6``.
"""

import math
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from fontTools.pens.svgPathPen import SVGPathPen

from shapeplot import __version__
from shapeplot.cli.output import (
    console,
    print_commands,
    print_error,
    print_font,
    print_path_data,
    print_stats,
)
from shapeplot.config import LoggingConfig, ShapeplotSettings
from shapeplot.core import FontCodec, Plotter, get_angle
from shapeplot.core.angles import degrees_from_radians
from shapeplot.domain import Point, WindingDirection
from shapeplot.exceptions import ShapeplotError
from shapeplot.io import PenSink, RecordingSink
from shapeplot.io.pen import format_number
from shapeplot.utils import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Create the Typer app
app = typer.Typer(
    name="shapeplot",
    help="Generate path data for polygons, stars, bursts, rounded rectangles and ellipses.",
    add_completion=False,
    no_args_is_help=True,
)

CommandsOption = Annotated[
    bool,
    typer.Option(
        "--commands",
        "-c",
        help="Print the path command sequence instead of SVG path data",
    ),
]
WindingOption = Annotated[
    bool,
    typer.Option(
        "--ccw/--cw",
        help="Emit vertices counter-clockwise",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Shapeplot[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    stats: Annotated[
        bool,
        typer.Option(
            "--stats",
            help="Print plotting statistics to stderr",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate path data for procedural shapes."""
    if log_level.upper() not in LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details=f"Valid values: {', '.join(LOG_LEVELS)}",
        )
        raise typer.Exit(code=1)

    settings = ShapeplotSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level.upper()),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )
    ctx.obj = settings
    ctx.meta["stats"] = stats


def _render(ctx: typer.Context, plot: Callable[[Plotter], Plotter], show_commands: bool) -> None:
    """Run a plotting function against a sink and print the result.

    Args:
        ctx: Typer context holding the settings
        plot: Function drawing onto the plotter
        show_commands: Print recorded commands instead of SVG path data
    """
    settings: ShapeplotSettings = ctx.obj or ShapeplotSettings()
    try:
        if show_commands:
            recorder = RecordingSink()
            plotter = plot(Plotter(recorder, settings))
            print_commands(recorder.commands)
        else:
            pen = SVGPathPen(None, ntos=format_number)
            sink = PenSink(pen, settings.geometry)
            plotter = plot(Plotter(sink, settings))
            sink.flush()
            print_path_data(pen.getCommands())
    except (ShapeplotError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if ctx.meta.get("stats"):
        print_stats(plotter.stats)


def _winding(ccw: bool) -> WindingDirection:
    return WindingDirection.from_flag(ccw)


@app.command()
def poly(
    ctx: typer.Context,
    x: Annotated[float, typer.Argument(help="Centre x")],
    y: Annotated[float, typer.Argument(help="Centre y")],
    radius: Annotated[float, typer.Argument(help="Circumradius")],
    sides: Annotated[float, typer.Argument(help="Number of sides (rounded)")],
    ccw: WindingOption = False,
    commands: CommandsOption = False,
) -> None:
    """Regular polygon."""
    _render(
        ctx,
        lambda p: p.plot_poly(Point(x, y), radius, sides, _winding(ccw)),
        commands,
    )


@app.command()
def star(
    ctx: typer.Context,
    x: Annotated[float, typer.Argument(help="Centre x")],
    y: Annotated[float, typer.Argument(help="Centre y")],
    radius: Annotated[float, typer.Argument(help="Outer radius")],
    sides: Annotated[float, typer.Argument(help="Number of points (rounded)")],
    ccw: WindingOption = False,
    commands: CommandsOption = False,
) -> None:
    """Regular star with a derived inner radius."""
    _render(
        ctx,
        lambda p: p.plot_star(Point(x, y), radius, sides, _winding(ccw)),
        commands,
    )


@app.command()
def burst(
    ctx: typer.Context,
    x: Annotated[float, typer.Argument(help="Centre x")],
    y: Annotated[float, typer.Argument(help="Centre y")],
    outer_radius: Annotated[float, typer.Argument(help="Outer radius")],
    inner_radius: Annotated[float, typer.Argument(help="Inner radius")],
    sides: Annotated[float, typer.Argument(help="Number of points (rounded)")],
    ccw: WindingOption = False,
    commands: CommandsOption = False,
) -> None:
    """Star-like burst with independent radii."""
    _render(
        ctx,
        lambda p: p.plot_burst(Point(x, y), outer_radius, inner_radius, sides, _winding(ccw)),
        commands,
    )


@app.command("rounded-rect")
def rounded_rect(
    ctx: typer.Context,
    x: Annotated[float, typer.Argument(help="Left edge")],
    y: Annotated[float, typer.Argument(help="Top edge")],
    width: Annotated[float, typer.Argument(help="Width")],
    height: Annotated[float, typer.Argument(help="Height")],
    radius: Annotated[float, typer.Argument(help="Corner radius (clamped to half the short side)")],
    commands: CommandsOption = False,
) -> None:
    """Rectangle with rounded corners."""
    _render(
        ctx,
        lambda p: p.plot_rounded_rect(Point(x, y), width, height, radius),
        commands,
    )


@app.command()
def ellipse(
    ctx: typer.Context,
    x: Annotated[float, typer.Argument(help="Centre x")],
    y: Annotated[float, typer.Argument(help="Centre y")],
    radius_x: Annotated[float, typer.Argument(help="Radius along the rotated x axis")],
    radius_y: Annotated[float, typer.Argument(help="Radius along the rotated y axis")],
    rotation: Annotated[float, typer.Option("--rotation", "-r", help="Rotation in radians")] = 0.0,
    start: Annotated[float, typer.Option("--start", help="Start angle in radians")] = 0.0,
    end: Annotated[float, typer.Option("--end", help="End angle in radians")] = 2 * math.pi,
    ccw: WindingOption = False,
    commands: CommandsOption = False,
) -> None:
    """Elliptical arc (drawn through a scaled transform)."""
    _render(
        ctx,
        lambda p: p.begin_path().plot_ellipse(
            Point(x, y), radius_x, radius_y, rotation, start, end, _winding(ccw)
        ),
        commands,
    )


@app.command()
def circle(
    ctx: typer.Context,
    x: Annotated[float, typer.Argument(help="Centre x")],
    y: Annotated[float, typer.Argument(help="Centre y")],
    radius: Annotated[float, typer.Argument(help="Radius")],
    ccw: WindingOption = False,
    commands: CommandsOption = False,
) -> None:
    """Full circle."""
    _render(ctx, lambda p: p.plot_circle(Point(x, y), radius, _winding(ccw)), commands)


def _parse_point(text: str) -> Point:
    try:
        x_text, y_text = text.split(",")
        return Point(float(x_text), float(y_text))
    except ValueError:
        raise typer.BadParameter(f"Expected a point as 'x,y', got {text!r}") from None


@app.command()
def path(
    ctx: typer.Context,
    points: Annotated[list[str], typer.Argument(help="Points as x,y pairs")],
    closed: Annotated[bool, typer.Option("--closed", help="Close the path")] = False,
    commands: CommandsOption = False,
) -> None:
    """Polyline through a list of points."""
    parsed = [_parse_point(text) for text in points]
    if closed:
        _render(ctx, lambda p: p.plot_closed_path(parsed), commands)
    else:
        _render(ctx, lambda p: p.plot_path(parsed), commands)


def _size_value(size: str) -> str | float:
    try:
        return float(size)
    except ValueError:
        return size


@app.command()
def font(
    value: Annotated[str, typer.Argument(help="Font shorthand, e.g. 'bold 12px serif'")],
    style: Annotated[str | None, typer.Option("--style", help="Replace the style")] = None,
    variant: Annotated[str | None, typer.Option("--variant", help="Replace the variant")] = None,
    weight: Annotated[str | None, typer.Option("--weight", help="Replace the weight")] = None,
    size: Annotated[str | None, typer.Option("--size", help="Replace the size")] = None,
    family: Annotated[str | None, typer.Option("--family", help="Replace the family")] = None,
) -> None:
    """Canonicalize a font shorthand string and show its parts."""
    codec = FontCodec()
    canonical = codec.format(value)

    if style is not None:
        canonical = codec.with_style(canonical, style)
    if variant is not None:
        canonical = codec.with_variant(canonical, variant)
    if weight is not None:
        canonical = codec.with_weight(canonical, weight)
    if size is not None:
        canonical = codec.with_size(canonical, _size_value(size))
    if family is not None:
        canonical = codec.with_family(canonical, family)

    print_font(canonical, codec.parse(canonical))


@app.command()
def angle(
    coordinates: Annotated[
        list[float],
        typer.Argument(help="x1 y1 x2 y2 for a ray, or x1 y1 x2 y2 x3 y3 for a vertex"),
    ],
    degrees: Annotated[bool, typer.Option("--degrees", "-d", help="Print degrees")] = False,
) -> None:
    """Angle of a ray (4 numbers) or at a vertex (6 numbers)."""
    try:
        result = get_angle(*coordinates)
    except ShapeplotError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if degrees:
        result = degrees_from_radians(result)
    console.print(format_number(result), highlight=False)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
