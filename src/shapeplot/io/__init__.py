"""Drawing surface layer for shapeplot.

This module defines the PathSink interface the generators emit into, and
provides two implementations:
- RecordingSink: keeps every command, for inspection and testing
- PenSink: executes commands against a fontTools pen (e.g. SVGPathPen)
"""

from shapeplot.io.pen import PenSink, svg_path_data
from shapeplot.io.sink import (
    CONTEXT_TYPE,
    BaseSink,
    DrawingSurface,
    PathSink,
    RecordingSink,
    SinkCapability,
)

__all__ = [
    "CONTEXT_TYPE",
    "BaseSink",
    "DrawingSurface",
    "PathSink",
    "PenSink",
    "RecordingSink",
    "SinkCapability",
    "svg_path_data",
]
