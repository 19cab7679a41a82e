"""Canonical path primitives — the output alphabet of the path-data core.

Every path command reduces to one of four primitives. Arcs expand to several
``Curve`` values; quadratic and shorthand curves are elevated to cubics.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Union


class Point(NamedTuple):
    x: float
    y: float

    def translate(self, origin: Point | None) -> Point:
        """Resolve a relative point against ``origin`` (absent origin = (0, 0))."""
        if origin is None:
            return self
        return Point(self.x + origin.x, self.y + origin.y)

    def reflect(self, center: Point) -> Point:
        """Reflect this point through ``center``."""
        return Point(2 * center.x - self.x, 2 * center.y - self.y)


@dataclass(frozen=True)
class Move:
    to: Point


@dataclass(frozen=True)
class Line:
    to: Point


@dataclass(frozen=True)
class Curve:
    to: Point
    control1: Point
    control2: Point


@dataclass(frozen=True)
class Close:
    to: Point


Primitive = Union[Move, Line, Curve, Close]


def primitive_name(primitive: Primitive) -> str:
    """Lower-case tag used for serialization ("move", "line", "curve", "close")."""
    return type(primitive).__name__.lower()
