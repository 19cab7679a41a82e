"""Hand-off of primitives to a drawing surface.

A drawing surface only needs the four calls of ``PathSink``; ``replay`` feeds
it a primitive sequence in order. ``PathDataWriter`` is a sink that writes
normalized absolute path data (M/L/C/Z only).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from pathdata.svg.primitives import Close, Curve, Line, Move, Point, Primitive


class PathSink(Protocol):
    def move_to(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def curve_to(self, point: Point, control1: Point, control2: Point) -> None: ...

    def close_path(self) -> None: ...


def replay(primitives: Iterable[Primitive], sink: PathSink) -> None:
    """Call the sink once per primitive, in order."""
    for primitive in primitives:
        if isinstance(primitive, Move):
            sink.move_to(primitive.to)
        elif isinstance(primitive, Line):
            sink.line_to(primitive.to)
        elif isinstance(primitive, Curve):
            sink.curve_to(primitive.to, primitive.control1, primitive.control2)
        elif isinstance(primitive, Close):
            sink.close_path()
        else:
            raise TypeError(f"Not a path primitive: {primitive!r}")


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


class PathDataWriter:
    """Collects primitives as absolute path data, e.g. ``M0 0L10 0C...Z``."""

    def __init__(self, precision: int = 6) -> None:
        self.precision = precision
        self._parts: list[str] = []

    def _point(self, point: Point) -> str:
        return f"{_fmt(point.x, self.precision)} {_fmt(point.y, self.precision)}"

    def move_to(self, point: Point) -> None:
        self._parts.append(f"M{self._point(point)}")

    def line_to(self, point: Point) -> None:
        self._parts.append(f"L{self._point(point)}")

    def curve_to(self, point: Point, control1: Point, control2: Point) -> None:
        self._parts.append(f"C{self._point(control1)} {self._point(control2)} {self._point(point)}")

    def close_path(self) -> None:
        self._parts.append("Z")

    def getvalue(self) -> str:
        return "".join(self._parts)


def to_path_data(primitives: Iterable[Primitive], precision: int = 6) -> str:
    writer = PathDataWriter(precision)
    replay(primitives, writer)
    return writer.getvalue()
