"""Command-line interface for shapeplot.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG path data for every shape kind
- Command-sequence tables for inspection
- Font shorthand canonicalization
- Angle calculations
"""

from shapeplot.cli.app import cli, main

__all__ = ["cli", "main"]
