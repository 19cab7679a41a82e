"""SVG path-data parsing core: path strings → canonical geometric primitives."""

from pathdata.engine.parser import parse_path
from pathdata.errors import PathDataError, PathError, PathInvariantError
from pathdata.svg.primitives import Close, Curve, Line, Move, Point, Primitive

__version__ = "0.1.0"

__all__ = [
    "parse_path",
    "PathError",
    "PathDataError",
    "PathInvariantError",
    "Point",
    "Move",
    "Line",
    "Curve",
    "Close",
    "Primitive",
]
