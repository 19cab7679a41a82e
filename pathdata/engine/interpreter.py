"""Command interpreter — a pure fold over path command tokens.

    state, primitives = step(state, command)

Each token is visited once, left to right. Lower-case commands translate every
coordinate pair by ``last_point``; A radii, rotation and flags are never
translated. Q/T/S/H/V are expanded into the canonical primitives here, A is
delegated to ``pathdata.engine.arc``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable

from pathdata.engine.arc import endpoint_to_center
from pathdata.engine.config import DEFAULT_CONFIG, ParserConfig
from pathdata.engine.state import ParserState
from pathdata.svg.commands import CommandKind, PathCommand
from pathdata.svg.primitives import Close, Curve, Line, Move, Point, Primitive

logger = logging.getLogger(__name__)

Values = tuple[float, ...]
Handler = Callable[[ParserState, Values, bool], tuple[ParserState, list[Primitive]]]


def interpret(commands: Iterable[PathCommand], config: ParserConfig = DEFAULT_CONFIG) -> list[Primitive]:
    """Fold ``commands`` into primitives starting from an empty state."""
    state = ParserState()
    primitives: list[Primitive] = []
    for command in commands:
        state, emitted = step(state, command, config)
        primitives.extend(emitted)
    return primitives


def step(
    state: ParserState,
    command: PathCommand,
    config: ParserConfig = DEFAULT_CONFIG,
) -> tuple[ParserState, list[Primitive]]:
    """Apply one command token. Returns the new state and the primitives it emits."""
    emitted: list[Primitive] = []

    if command.kind is CommandKind.ARC:
        state, emitted = _arc(state, command, config)
    else:
        for index, values in enumerate(command.groups()):
            kind = command.kind
            # Extra pairs after a moveto are implicit linetos of the same case
            if kind is CommandKind.MOVE and index > 0:
                kind = CommandKind.LINE
            state, primitives = _HANDLERS[kind](state, values, command.relative)
            emitted.extend(primitives)

    return state.finish(command.kind), emitted


def _resolve(state: ParserState, x: float, y: float, relative: bool) -> Point:
    point = Point(x, y)
    return point.translate(state.last_point) if relative else point


def _emit(state: ParserState, primitive: Primitive) -> tuple[ParserState, list[Primitive]]:
    return state.push(primitive), [primitive]


def _move(state: ParserState, values: Values, relative: bool):
    x, y = values
    return _emit(state, Move(_resolve(state, x, y, relative)))


def _close(state: ParserState, values: Values, relative: bool):
    if state.subpath_initial_point is None:
        return state, []
    return _emit(state, Close(state.subpath_initial_point))


def _line(state: ParserState, values: Values, relative: bool):
    x, y = values
    return _emit(state, Line(_resolve(state, x, y, relative)))


def _horizontal(state: ParserState, values: Values, relative: bool):
    (x,) = values
    current = state.current
    if relative:
        x += current.x
    return _emit(state, Line(Point(x, current.y)))


def _vertical(state: ParserState, values: Values, relative: bool):
    (y,) = values
    current = state.current
    if relative:
        y += current.y
    return _emit(state, Line(Point(current.x, y)))


def _cubic(state: ParserState, values: Values, relative: bool):
    x1, y1, x2, y2, x, y = values
    control1 = _resolve(state, x1, y1, relative)
    control2 = _resolve(state, x2, y2, relative)
    state, emitted = _emit(state, Curve(_resolve(state, x, y, relative), control1, control2))
    return state.with_cubic_control(control2), emitted


def _smooth_cubic(state: ParserState, values: Values, relative: bool):
    x2, y2, x, y = values
    current = state.current
    control2 = _resolve(state, x2, y2, relative)
    to = _resolve(state, x, y, relative)
    if state.previous_cubic_control is not None:
        control1 = state.previous_cubic_control.reflect(current)
    else:
        control1 = current
    state, emitted = _emit(state, Curve(to, control1, control2))
    return state.with_cubic_control(control2), emitted


def _quadratic(state: ParserState, values: Values, relative: bool):
    x1, y1, x, y = values
    control = _resolve(state, x1, y1, relative)
    return _quadratic_to(state, control, _resolve(state, x, y, relative))


def _smooth_quadratic(state: ParserState, values: Values, relative: bool):
    x, y = values
    current = state.current
    if state.previous_quadratic_control is not None:
        control = state.previous_quadratic_control.reflect(current)
    else:
        control = current
    return _quadratic_to(state, control, _resolve(state, x, y, relative))


def _quadratic_to(state: ParserState, control: Point, to: Point):
    """Elevate the quadratic (current, control, to) to an exactly equivalent cubic."""
    current = state.current
    cx1 = current.x + (control.x - current.x) * 2 / 3.0
    cy1 = current.y + (control.y - current.y) * 2 / 3.0
    cx2 = cx1 + (to.x - current.x) / 3.0
    cy2 = cy1 + (to.y - current.y) / 3.0
    state, emitted = _emit(state, Curve(to, Point(cx1, cy1), Point(cx2, cy2)))
    return state.with_quadratic_control(control), emitted


def _arc(state: ParserState, command: PathCommand, config: ParserConfig) -> tuple[ParserState, list[Primitive]]:
    emitted: list[Primitive] = []
    if state.last_point is None:
        logger.debug("Arc with no current point ignored")
        return state, emitted

    delta = config.float_error_delta
    for rx, ry, rotation, large_arc, sweep, x, y in command.groups():
        start = state.last_point
        end = _resolve(state, x, y, command.relative)

        # Degenerate groups end the whole A token; later operand groups are dropped
        if abs(start.x - end.x) < delta and abs(start.y - end.y) < delta:
            break
        if abs(rx) < delta or abs(ry) < delta:
            state, primitives = _emit(state, Line(end))
            emitted.extend(primitives)
            break

        arc = endpoint_to_center(start, end, rx, ry, rotation, large_arc != 0, sweep != 0)
        for curve in arc.to_curves(config):
            state, primitives = _emit(state, curve)
            emitted.extend(primitives)

    return state, emitted


_HANDLERS: dict[CommandKind, Handler] = {
    CommandKind.MOVE: _move,
    CommandKind.CLOSE: _close,
    CommandKind.LINE: _line,
    CommandKind.HORIZONTAL: _horizontal,
    CommandKind.VERTICAL: _vertical,
    CommandKind.CUBIC: _cubic,
    CommandKind.SMOOTH_CUBIC: _smooth_cubic,
    CommandKind.QUADRATIC: _quadratic,
    CommandKind.SMOOTH_QUADRATIC: _smooth_quadratic,
}
