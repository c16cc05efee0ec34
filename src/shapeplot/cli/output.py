"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from shapeplot.domain import FONT_FIELDS, FontParts, PathCommand
from shapeplot.utils import PlotStats

console = Console()
err_console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _format_value(value: object) -> str:
    if isinstance(value, dict) and set(value) == {"x", "y"}:
        return f"({value['x']:g}, {value['y']:g})"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def print_path_data(data: str) -> None:
    """Print SVG path data without markup or highlighting.

    Args:
        data: SVG path ``d`` attribute
    """
    console.print(Text(data), soft_wrap=True, highlight=False)


def print_commands(commands: list[PathCommand]) -> None:
    """Print path commands as a table.

    Args:
        commands: Commands in emission order
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Command")
    table.add_column("Arguments")

    for idx, command in enumerate(commands):
        data = command.to_dict()
        op = data.pop("op")
        args = f" {SYM_DOT} ".join(f"{key}={_format_value(value)}" for key, value in data.items())
        table.add_row(str(idx), op, args)

    console.print(table)


def print_font(canonical: str, parts: FontParts | None) -> None:
    """Print a canonical font string and its fields.

    Args:
        canonical: Canonical font shorthand
        parts: Parsed fields, None if the string is malformed
    """
    console.print(Text(canonical), highlight=False)
    if parts is None:
        err_console.print(f"[yellow]{SYM_DOT} Fewer than 5 parts, not a complete font[/yellow]")
        return

    table = Table(show_header=False, box=None, padding=(0, 2))
    for name, value in zip(FONT_FIELDS, parts, strict=True):
        table.add_row(f"  {name}", Text(value))
    console.print(table)


def print_stats(stats: PlotStats) -> None:
    """Print plot statistics to stderr.

    Args:
        stats: Statistics collected by the plotter
    """
    err_console.print(
        f"[green]{SYM_OK}[/green] {stats.shapes_plotted} shapes {SYM_DOT} "
        f"{stats.shapes_skipped} skipped {SYM_DOT} {stats.commands_emitted} commands"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        err_console.print(f"  {details}")
