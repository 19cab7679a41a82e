"""Path-data lexer — raw ``d`` text → ordered command tokens.

Numbers need no separator beyond the number pattern itself, so ``M1-2.5.5``
lexes as ``M 1 -2.5 .5``. Nothing here interprets coordinates.
"""

from __future__ import annotations

import logging
import math
import re

from pathdata.errors import PathDataError, PathInvariantError
from pathdata.svg.commands import COMMAND_LETTERS, CommandKind, PathCommand

logger = logging.getLogger(__name__)

_NUMBER = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:(?<=[0-9])[eE][+-]?[0-9]+)?"
_INSIDE_SPACE = r"[ \t\r\n,]*"
_OUTSIDE_SPACE = r"[ \t\r\n]*"
_INSIDE = rf"{_INSIDE_SPACE}({_NUMBER})"

_VALUE_RE = re.compile(_INSIDE)
_COMMAND_RE = re.compile(
    rf"{_OUTSIDE_SPACE}([{COMMAND_LETTERS}{COMMAND_LETTERS.lower()}])((?:{_INSIDE})*){_INSIDE_SPACE}"
)


def tokenize(data: str) -> list[PathCommand]:
    """Lex path data into commands. Raises ``PathDataError`` on anything it cannot consume."""
    data = data.rstrip(" \t\r\n")
    commands: list[PathCommand] = []
    pos = 0

    while pos < len(data):
        match = _COMMAND_RE.match(data, pos)
        if match is None:
            raise PathDataError("Invalid/unsupported syntax for SVG path data", pos, data[pos:])

        kind, relative = CommandKind.from_letter(match.group(1))
        operands = _decode_values(match.group(2), match.start(2))
        _check_operand_count(kind, operands, match.start(1), match.group(0).strip())

        commands.append(PathCommand(kind=kind, relative=relative, operands=operands))
        pos = match.end()

    logger.debug("Lexed %d path commands from %d chars", len(commands), len(data))
    return commands


def _decode_values(raw: str, offset: int = 0) -> tuple[float, ...]:
    values: list[float] = []
    pos = 0
    while pos < len(raw):
        match = _VALUE_RE.match(raw, pos)
        if match is None or match.end() == pos:
            raise PathInvariantError(f"lexer accepted operand data it cannot decode: {raw[pos:]!r}")
        value = float(match.group(1))
        if not math.isfinite(value):
            raise PathDataError("Number out of range", offset + match.start(1), match.group(1))
        values.append(value)
        pos = match.end()
    return tuple(values)


def _check_operand_count(kind: CommandKind, operands: tuple[float, ...], offset: int, text: str) -> None:
    arity = kind.arity
    if arity == 0:
        if operands:
            raise PathDataError(f"{kind.value} takes no operands", offset, text)
        return
    if not operands or len(operands) % arity:
        raise PathDataError(
            f"{kind.value} expects a multiple of {arity} operands, got {len(operands)}",
            offset,
            text,
        )
