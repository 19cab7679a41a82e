"""ParserState — the accumulator threaded through the command fold.

One state value lives for the duration of a single path string. It is never
mutated; every step returns a new state.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from pathdata.svg.commands import CommandKind
from pathdata.svg.primitives import Move, Point, Primitive

_CUBIC_KINDS = frozenset({CommandKind.CUBIC, CommandKind.SMOOTH_CUBIC})
_QUADRATIC_KINDS = frozenset({CommandKind.QUADRATIC, CommandKind.SMOOTH_QUADRATIC})


@dataclass(frozen=True)
class ParserState:
    # Destination of the most recently emitted primitive
    last_point: Point | None = None
    # Destination of the most recent Move (target of Close)
    subpath_initial_point: Point | None = None
    # Second control point of the last C/S curve
    previous_cubic_control: Point | None = None
    # Quadratic control point of the last Q/T curve
    previous_quadratic_control: Point | None = None

    @property
    def current(self) -> Point:
        """``last_point``, or the origin before anything was emitted."""
        return self.last_point if self.last_point is not None else Point(0.0, 0.0)

    def push(self, primitive: Primitive) -> ParserState:
        """State after emitting ``primitive``: only its destination is used."""
        if isinstance(primitive, Move):
            return replace(self, last_point=primitive.to, subpath_initial_point=primitive.to)
        return replace(self, last_point=primitive.to)

    def with_cubic_control(self, control: Point) -> ParserState:
        return replace(self, previous_cubic_control=control)

    def with_quadratic_control(self, control: Point) -> ParserState:
        return replace(self, previous_quadratic_control=control)

    def finish(self, kind: CommandKind) -> ParserState:
        """Clear control points that do not carry past a command of ``kind``."""
        state = self
        if kind not in _CUBIC_KINDS and state.previous_cubic_control is not None:
            state = replace(state, previous_cubic_control=None)
        if kind not in _QUADRATIC_KINDS and state.previous_quadratic_control is not None:
            state = replace(state, previous_quadratic_control=None)
        return state
