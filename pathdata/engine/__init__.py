"""Path command interpreter and arc geometry."""

from pathdata.engine.config import ParserConfig
from pathdata.engine.interpreter import interpret, step
from pathdata.engine.parser import parse_path
from pathdata.engine.state import ParserState

__all__ = [
    "ParserConfig",
    "ParserState",
    "interpret",
    "step",
    "parse_path",
]
