"""Core algorithms for shapeplot.

This module contains the core algorithms for:

- Angle math (ray angles, vertex turning angles, unit conversion)
- Path generation (polygons, stars, bursts, rounded rectangles, ellipses)
- Font shorthand parsing and formatting
- Iteration helpers (repeat, for_each, constrain, map_range)

The generators and angle helpers are:
- Stateless
- Pure (they only yield commands, the Plotter applies them)

Key functions:
- angle_between: Signed angle of the ray between two points
- angle_at_vertex: Signed turning angle at the middle of three points
- polygon / star / burst / rounded_rect / ellipse: Shape generators

Key classes:
- FontCodec: Parses and formats font shorthand strings
- Plotter: Fluent facade streaming shapes into a drawing surface
"""

from shapeplot.core.angles import (
    angle_at_vertex,
    angle_between,
    degrees_from_radians,
    distance,
    fraction_from_percent,
    get_angle,
    percent_from_fraction,
    radians_from_degrees,
)
from shapeplot.core.font import FontCodec
from shapeplot.core.generator import (
    burst,
    circle,
    closed_path,
    ellipse,
    generate,
    normalize_sides,
    path,
    polygon,
    rounded_rect,
    star,
)
from shapeplot.core.helpers import constrain, for_each, map_range, repeat
from shapeplot.core.plotter import Plotter

__all__ = [
    # Classes
    "FontCodec",
    "Plotter",
    # Angle functions
    "angle_at_vertex",
    "angle_between",
    "degrees_from_radians",
    "distance",
    "fraction_from_percent",
    "get_angle",
    "percent_from_fraction",
    "radians_from_degrees",
    # Generators
    "burst",
    "circle",
    "closed_path",
    "ellipse",
    "generate",
    "normalize_sides",
    "path",
    "polygon",
    "rounded_rect",
    "star",
    # Helpers
    "constrain",
    "for_each",
    "map_range",
    "repeat",
]
