"""Shapeplot - Procedural path generation for 2D drawing surfaces.

Shapeplot turns high-level shape descriptions (regular polygons, stars,
bursts, rounded rectangles, ellipses, circles and point paths) into ordered
sequences of elementary path commands, and streams them to any drawing
surface that implements the small PathSink interface. It also ships a codec
for the five-field CSS font shorthand.

Example:
    $ shapeplot poly 0 0 10 6

This prints the SVG path data of a hexagon of radius 10 centred on the origin.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
