"""Parser configuration — numeric tolerances and arc approximation limits."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """Tolerances used while interpreting path commands."""

    # Coincident arc endpoints / zero radii / rounding in the center solve
    float_error_delta: float = 1e-10

    # Largest angular span approximated by one cubic (quarter turn)
    max_arc_segment_angle: float = math.pi / 2

    # Upper bound on sub-arcs produced by one arc group
    max_arc_segments: int = 1024

    @classmethod
    def from_degrees(cls, max_arc_segment_degrees: float) -> ParserConfig:
        return cls(max_arc_segment_angle=math.radians(max_arc_segment_degrees))


DEFAULT_CONFIG = ParserConfig()
