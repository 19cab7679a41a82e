"""Path-data facade — ``d`` string → canonical primitives.

No state survives between calls; parsing the same string twice gives
identical output.
"""

from __future__ import annotations

import logging

from pathdata.engine.config import DEFAULT_CONFIG, ParserConfig
from pathdata.engine.interpreter import interpret
from pathdata.svg.lexer import tokenize
from pathdata.svg.primitives import Primitive

logger = logging.getLogger(__name__)


def parse_path(data: str, config: ParserConfig | None = None) -> list[Primitive]:
    """Parse path data into Move/Line/Curve/Close primitives.

    Raises ``PathDataError`` for malformed input (skip the element and carry on)
    and ``PathInvariantError`` for internal contract violations.
    """
    commands = tokenize(data)
    primitives = interpret(commands, config or DEFAULT_CONFIG)
    logger.debug("Parsed path: %d commands → %d primitives", len(commands), len(primitives))
    return primitives
