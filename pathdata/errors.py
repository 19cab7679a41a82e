"""Error types for path-data parsing.

``PathDataError`` is recoverable: the input could not be parsed and the caller
should skip that one path. ``PathInvariantError`` means the lexer and the
interpreter disagree about a token, which is a bug, not bad input.
"""

from __future__ import annotations

# Longest fragment quoted in error messages.
_FRAGMENT_LIMIT = 40


class PathError(Exception):
    """Base class for every error raised by the path-data core."""


class PathDataError(PathError, ValueError):
    """Path data could not be parsed at ``offset``."""

    def __init__(self, message: str, offset: int = 0, fragment: str = "") -> None:
        self.offset = offset
        self.fragment = fragment
        shown = fragment if len(fragment) <= _FRAGMENT_LIMIT else fragment[:_FRAGMENT_LIMIT] + "..."
        super().__init__(f"{message} at offset {offset}: {shown!r}")
        self.reason = message


class PathInvariantError(PathError, RuntimeError):
    """Internal contract violation between lexer and interpreter."""
