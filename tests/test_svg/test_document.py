"""Tests for element-scoped parsing of SVG documents."""

import logging

from pathdata.svg.document import parse_svg_paths
from pathdata.svg.primitives import Move, Point


def test_parse_home(home_svg):
    doc = parse_svg_paths(home_svg)
    assert [el.id for el in doc.elements] == ["E1", "E2"]
    assert doc.errors == {}
    assert doc.elements[0].primitives[0] == Move(Point(15.0, 21.0))
    start, end = doc.elements[0].source_span
    assert home_svg[start:end].startswith("<path")


def test_malformed_path_is_skipped(broken_svg, caplog):
    with caplog.at_level(logging.WARNING, logger="pathdata.svg.document"):
        doc = parse_svg_paths(broken_svg)

    assert [el.id for el in doc.elements] == ["good", "E3"]
    assert list(doc.errors) == ["bad"]
    assert "offset 0" in doc.errors["bad"]
    assert "Skipping path bad" in caplog.text


def test_single_quoted_attributes(broken_svg):
    doc = parse_svg_paths(broken_svg)
    third = doc.elements[1]
    assert third.d == "M0 0 L10 10"
    assert third.attributes == {"d": "M0 0 L10 10"}


def test_no_paths():
    doc = parse_svg_paths("<svg><circle r='1'/></svg>")
    assert doc.elements == []
    assert doc.errors == {}
