"""Tests for primitive hand-off to drawing surfaces."""

import pytest

from pathdata import parse_path
from pathdata.svg.primitives import Close, Curve, Line, Move, Point
from pathdata.svg.sink import PathDataWriter, replay, to_path_data
from tests.conftest import ABSOLUTE_PATH, SETTINGS_PATH, assert_same_geometry


class RecordingSink:
    def __init__(self):
        self.calls = []

    def move_to(self, point):
        self.calls.append(("move_to", point))

    def line_to(self, point):
        self.calls.append(("line_to", point))

    def curve_to(self, point, control1, control2):
        self.calls.append(("curve_to", point, control1, control2))

    def close_path(self):
        self.calls.append(("close_path",))


def test_replay_calls_sink_in_order():
    sink = RecordingSink()
    replay(parse_path("M0,0 L1,0 C1,1 2,1 2,0 Z"), sink)
    assert sink.calls == [
        ("move_to", Point(0.0, 0.0)),
        ("line_to", Point(1.0, 0.0)),
        ("curve_to", Point(2.0, 0.0), Point(1.0, 1.0), Point(2.0, 1.0)),
        ("close_path",),
    ]


def test_replay_rejects_non_primitives():
    with pytest.raises(TypeError):
        replay([Move(Point(0, 0)), "L1 1"], RecordingSink())


def test_writer_output():
    primitives = [
        Move(Point(0.0, 0.0)),
        Line(Point(10.5, -0.0)),
        Curve(Point(3.0, 4.0), Point(1.0, 2.0), Point(2.25, 3.0)),
        Close(Point(0.0, 0.0)),
    ]
    assert to_path_data(primitives) == "M0 0L10.5 0C1 2 2.25 3 3 4Z"


def test_writer_precision():
    writer = PathDataWriter(precision=2)
    writer.move_to(Point(1.23456, 100.0))
    assert writer.getvalue() == "M1.23 100"

    writer = PathDataWriter(precision=0)
    writer.line_to(Point(100.0, 20.4))
    assert writer.getvalue() == "L100 20"


@pytest.mark.parametrize("data", [ABSOLUTE_PATH, SETTINGS_PATH])
def test_normalized_path_data_reparses_to_same_geometry(data):
    primitives = parse_path(data)
    reparsed = parse_path(to_path_data(primitives, precision=12))
    assert_same_geometry(reparsed, primitives, tol=1e-9)
