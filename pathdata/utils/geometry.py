"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from pathdata.svg.primitives import Curve, Point, Primitive


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula for signed area of a closed ring. Positive = CCW, Negative = CW."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def winding_direction(points: NDArray[np.float64], eps: float = 1e-10) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > eps:
        return 1
    elif sa < -eps:
        return -1
    return 0


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def cubic_points(p0: Point, curve: Curve, samples: int) -> NDArray[np.float64]:
    """Evaluate a cubic at ``samples`` evenly spaced t in (0, 1] (start point excluded)."""
    t = np.linspace(0.0, 1.0, samples + 1)[1:, None]
    ctrl = np.array([p0, curve.control1, curve.control2, curve.to], dtype=np.float64)
    mt = 1.0 - t
    return (
        mt**3 * ctrl[0]
        + 3 * mt**2 * t * ctrl[1]
        + 3 * mt * t**2 * ctrl[2]
        + t**3 * ctrl[3]
    )


def sample_primitives(
    primitives: Sequence[Primitive],
    samples_per_curve: int = 16,
    start: Point | None = None,
) -> NDArray[np.float64]:
    """Flatten primitives into an Nx2 array of points (curves sampled, lines as endpoints)."""
    chunks: list[NDArray[np.float64]] = []
    current = start
    if start is not None:
        chunks.append(np.array([start], dtype=np.float64))
    for primitive in primitives:
        if isinstance(primitive, Curve) and current is not None:
            chunks.append(cubic_points(current, primitive, samples_per_curve))
        else:
            chunks.append(np.array([primitive.to], dtype=np.float64))
        current = primitive.to
    if not chunks:
        return np.empty((0, 2))
    return np.vstack(chunks)
