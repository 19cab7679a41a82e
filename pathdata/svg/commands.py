"""Path command tokens.

A token is decoded once from its letter: the kind (upper-case letter) and
whether the operands are relative (lower-case letter).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pathdata.errors import PathInvariantError


class CommandKind(enum.Enum):
    MOVE = "M"
    CLOSE = "Z"
    LINE = "L"
    HORIZONTAL = "H"
    VERTICAL = "V"
    CUBIC = "C"
    SMOOTH_CUBIC = "S"
    QUADRATIC = "Q"
    SMOOTH_QUADRATIC = "T"
    ARC = "A"

    @property
    def arity(self) -> int:
        """Operands consumed per repetition of the command."""
        return _ARITY[self]

    @classmethod
    def from_letter(cls, letter: str) -> tuple[CommandKind, bool]:
        """Decode a command letter into (kind, is_relative)."""
        return cls(letter.upper()), letter.islower()


_ARITY = {
    CommandKind.MOVE: 2,
    CommandKind.CLOSE: 0,
    CommandKind.LINE: 2,
    CommandKind.HORIZONTAL: 1,
    CommandKind.VERTICAL: 1,
    CommandKind.CUBIC: 6,
    CommandKind.SMOOTH_CUBIC: 4,
    CommandKind.QUADRATIC: 4,
    CommandKind.SMOOTH_QUADRATIC: 2,
    CommandKind.ARC: 7,
}

COMMAND_LETTERS = "".join(kind.value for kind in CommandKind)


@dataclass(frozen=True)
class PathCommand:
    kind: CommandKind
    relative: bool
    operands: tuple[float, ...] = ()

    @property
    def letter(self) -> str:
        return self.kind.value.lower() if self.relative else self.kind.value

    def groups(self) -> list[tuple[float, ...]]:
        """Split operands into per-repetition groups (a single empty group for Z)."""
        arity = self.kind.arity
        if arity == 0:
            return [()]
        if len(self.operands) % arity:
            raise PathInvariantError(
                f"{self.letter} token carries {len(self.operands)} operands, not a multiple of {arity}"
            )
        return [self.operands[i : i + arity] for i in range(0, len(self.operands), arity)]
