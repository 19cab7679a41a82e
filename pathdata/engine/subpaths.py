"""Sub-path extraction.

Split a primitive sequence into sub-paths and record the structural metadata a
downstream consumer typically wants first: closed or open, bounding box and
winding direction (shoelace over sampled points).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from pathdata.svg.primitives import Close, Curve, Line, Move, Point, Primitive
from pathdata.utils.geometry import bbox, sample_primitives, signed_area, winding_direction


@dataclass
class SubPath:
    primitives: list[Primitive] = field(default_factory=list)
    closed: bool = False
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    signed_area: float = 0.0
    winding: str = "degenerate"
    # Start of a sub-path reopened after Close (None when it begins with a Move)
    start: Point | None = None

    @property
    def composition(self) -> str:
        has_lines = any(isinstance(p, Line) for p in self.primitives)
        has_curves = any(isinstance(p, Curve) for p in self.primitives)
        if has_curves:
            return "mixed" if has_lines else "curves"
        if has_lines:
            return "lines"
        return "points"


def split_subpaths(primitives: Sequence[Primitive], samples_per_curve: int = 16) -> list[SubPath]:
    """Group primitives into sub-paths.

    A sub-path starts at every Move, and at the first drawing primitive after a
    Close (it then starts from the close point). Leading primitives with no
    Move form their own group.
    """
    groups: list[tuple[Point | None, list[Primitive]]] = []
    reopen_at: Point | None = None
    for primitive in primitives:
        if isinstance(primitive, Move) or not groups:
            groups.append((None, []))
        elif reopen_at is not None and not isinstance(primitive, Close):
            groups.append((reopen_at, []))
        reopen_at = primitive.to if isinstance(primitive, Close) else None
        groups[-1][1].append(primitive)

    subpaths: list[SubPath] = []
    for start, group in groups:
        points = sample_primitives(group, samples_per_curve, start=start)
        closed = any(isinstance(p, Close) for p in group)
        area = signed_area(points) if closed else 0.0
        wd = winding_direction(points) if closed else 0
        subpaths.append(
            SubPath(
                primitives=group,
                closed=closed,
                bbox=bbox(points),
                signed_area=area,
                winding="CCW" if wd > 0 else ("CW" if wd < 0 else "degenerate"),
                start=start,
            )
        )
    return subpaths
