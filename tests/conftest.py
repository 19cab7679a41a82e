"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathdata.svg.primitives import Close, Curve, Line, Move


# Path data taken from real icon sets (lucide)

HOME_DOOR_PATH = "M15 21v-8a1 1 0 0 0-1-1h-4a1 1 0 0 0-1 1v8"

HOME_OUTLINE_PATH = (
    "M3 10a2 2 0 0 1 .709-1.528l7-5.999a2 2 0 0 1 2.582 0l7 5.999A2 2 0 0 1 21 10v9"
    "a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2z"
)

SMILE_PATH = "M8 14s1.5 2 4 2 4-2 4-2"

SETTINGS_PATH = (
    "M12.22 2h-.44a2 2 0 0 0-2 2v.18a2 2 0 0 1-1 1.73l-.43.25a2 2 0 0 1-2 0l-.15-.08"
    "a2 2 0 0 0-2.73.73l-.22.38a2 2 0 0 0 .73 2.73l.15.1a2 2 0 0 1 1 1.72v.51"
    "a2 2 0 0 1-1 1.74l-.15.09a2 2 0 0 0-.73 2.73l.22.38a2 2 0 0 0 2.73.73l.15-.08"
    "a2 2 0 0 1 2 0l.43.25a2 2 0 0 1 1 1.73V20a2 2 0 0 0 2 2h.44a2 2 0 0 0 2-2v-.18"
    "a2 2 0 0 1 1-1.73l.43-.25a2 2 0 0 1 2 0l.15.08a2 2 0 0 0 2.73-.73l.22-.39"
    "a2 2 0 0 0-.73-2.73l-.15-.08a2 2 0 0 1-1-1.74v-.5a2 2 0 0 1 1-1.74l.15-.09"
    "a2 2 0 0 0 .73-2.73l-.22-.38a2 2 0 0 0-2.73-.73l-.15.08a2 2 0 0 1-2 0l-.43-.25"
    "a2 2 0 0 1-1-1.73V4a2 2 0 0 0-2-2z"
)

# Same geometry written absolute and relative
ABSOLUTE_PATH = "M10,10 L20,10 C25,10 30,15 30,20 S25,30 20,30 Q15,30 15,25 T15,15 H10 V20 Z"
RELATIVE_PATH = "m10,10 l10,0 c5,0 10,5 10,10 s-5,10 -10,10 q-5,0 -5,-5 t0,-10 h-5 v5 z"

HOME_SVG = f'''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <path d="{HOME_DOOR_PATH}"/>
  <path d="{HOME_OUTLINE_PATH}"/>
</svg>'''

BROKEN_SVG = f'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path id="good" d="{SMILE_PATH}"/>
  <path id="bad" d="M1,2,3"/>
  <path d='M0 0 L10 10'/>
  <path fill="red"/>
</svg>'''


def flatten(primitives) -> list:
    """Primitives as (type name, *coordinates) rows for approximate comparison."""
    rows = []
    for p in primitives:
        if isinstance(p, Curve):
            rows.append((type(p).__name__, *p.to, *p.control1, *p.control2))
        elif isinstance(p, (Move, Line, Close)):
            rows.append((type(p).__name__, *p.to))
        else:
            raise TypeError(p)
    return rows


def assert_same_geometry(actual, expected, tol: float = 1e-9) -> None:
    a_rows, e_rows = flatten(actual), flatten(expected)
    assert [r[0] for r in a_rows] == [r[0] for r in e_rows]
    for a, e in zip(a_rows, e_rows):
        assert a[1:] == pytest.approx(e[1:], abs=tol)


@pytest.fixture
def home_svg() -> str:
    return HOME_SVG


@pytest.fixture
def broken_svg() -> str:
    return BROKEN_SVG
