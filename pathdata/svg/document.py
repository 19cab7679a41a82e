"""SVG document scan — every ``<path d="...">`` through the path-data core.

Parsing is element-scoped: a path whose data cannot be parsed is logged and
skipped, the rest of the document is still returned.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from pathdata.engine.config import ParserConfig
from pathdata.engine.parser import parse_path
from pathdata.errors import PathDataError
from pathdata.svg.primitives import Primitive

logger = logging.getLogger(__name__)

_PATH_TAG_RE = re.compile(r"<path\b[^>]*>", re.IGNORECASE)
_ATTR_RE = re.compile(r'(\w[\w:-]*)\s*=\s*(?:"([^"]*)"|\'([^\']*)\')')


@dataclass
class PathElement:
    """One parsed ``<path>`` element."""

    id: str
    d: str
    primitives: list[Primitive] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    # (start, end) offsets of the tag in the source document
    source_span: tuple[int, int] = (0, 0)


@dataclass
class PathDocument:
    elements: list[PathElement] = field(default_factory=list)
    # element id -> parse failure message
    errors: dict[str, str] = field(default_factory=dict)


def parse_svg_paths(svg_text: str, config: ParserConfig | None = None) -> PathDocument:
    """Parse the ``d`` attribute of every path element in ``svg_text``."""
    doc = PathDocument()

    for index, match in enumerate(_PATH_TAG_RE.finditer(svg_text)):
        attrs = _extract_attrs(match.group(0))
        element_id = attrs.get("id") or f"E{index + 1}"
        d = attrs.get("d")
        if d is None:
            logger.debug("Path %s has no d attribute, skipping", element_id)
            continue

        try:
            primitives = parse_path(d, config)
        except PathDataError as e:
            logger.warning("Skipping path %s: %s", element_id, e)
            doc.errors[element_id] = str(e)
            continue

        doc.elements.append(
            PathElement(
                id=element_id,
                d=d,
                primitives=primitives,
                attributes=attrs,
                source_span=(match.start(), match.end()),
            )
        )

    logger.info("Parsed SVG paths: %d ok, %d skipped", len(doc.elements), len(doc.errors))
    return doc


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from an SVG tag string (either quote style)."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1)] = value
    return attrs
