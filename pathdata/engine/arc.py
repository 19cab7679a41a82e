"""Elliptical arc → cubic Bézier approximation.

Endpoint parameterization (as written in path data) is converted to center
parameterization following SVG 1.1 implementation notes F.6.5/F.6.6, then the
angular span is cut into sub-arcs of at most ``max_arc_segment_angle`` and each
sub-arc becomes one cubic using Maisonobe's tangent-length factor
(L. Maisonobe, "Drawing an elliptical arc using polylines, quadratic or cubic
Bézier curves", 2003).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pathdata.engine.config import DEFAULT_CONFIG, ParserConfig
from pathdata.svg.primitives import Curve, Point


@dataclass(frozen=True)
class CenterArc:
    """An arc of the ellipse centered on ``center``, rotated by ``phi`` radians."""

    center: Point
    rx: float
    ry: float
    phi: float
    theta1: float
    delta: float
    # Exact endpoints; the first and last sub-arc are pinned to them
    start: Point | None = None
    end: Point | None = None

    @property
    def theta2(self) -> float:
        return self.theta1 + self.delta

    def point(self, eta: float) -> Point:
        cos_phi, sin_phi = math.cos(self.phi), math.sin(self.phi)
        x = self.rx * math.cos(eta)
        y = self.ry * math.sin(eta)
        return Point(
            self.center.x + cos_phi * x - sin_phi * y,
            self.center.y + sin_phi * x + cos_phi * y,
        )

    def derivative(self, eta: float) -> Point:
        cos_phi, sin_phi = math.cos(self.phi), math.sin(self.phi)
        dx = -self.rx * math.sin(eta)
        dy = self.ry * math.cos(eta)
        return Point(cos_phi * dx - sin_phi * dy, sin_phi * dx + cos_phi * dy)

    def segment_count(self, config: ParserConfig = DEFAULT_CONFIG) -> int:
        limit = config.max_arc_segment_angle + config.float_error_delta
        count = 1
        while abs(self.delta) / count > limit and count < config.max_arc_segments:
            count *= 2
        return count

    def to_curves(self, config: ParserConfig = DEFAULT_CONFIG) -> list[Curve]:
        """Cubic approximation, one curve per sub-arc, from theta1 towards theta2."""
        count = self.segment_count(config)
        step = self.delta / count
        alpha = math.sin(step) * (math.sqrt(4 + 3 * math.tan(step / 2) ** 2) - 1) / 3

        curves: list[Curve] = []
        for i in range(count):
            eta_a = self.theta1 + i * step
            eta_b = self.theta1 + (i + 1) * step
            p1 = self.start if i == 0 and self.start is not None else self.point(eta_a)
            p2 = self.end if i == count - 1 and self.end is not None else self.point(eta_b)
            d1 = self.derivative(eta_a)
            d2 = self.derivative(eta_b)
            curves.append(
                Curve(
                    to=p2,
                    control1=Point(p1.x + alpha * d1.x, p1.y + alpha * d1.y),
                    control2=Point(p2.x - alpha * d2.x, p2.y - alpha * d2.y),
                )
            )
        return curves


def endpoint_to_center(
    start: Point,
    end: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
) -> CenterArc:
    """Solve the center parameterization of a non-degenerate arc.

    The caller has already excluded coincident endpoints and zero radii.
    """
    rx = abs(rx)
    ry = abs(ry)
    phi = math.radians(rotation % 360)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    x1, y1 = start
    x2, y2 = end

    # F.6.5.1
    half_dx = (x1 - x2) / 2.0
    half_dy = (y1 - y2) / 2.0
    xp1 = cos_phi * half_dx + sin_phi * half_dy
    yp1 = -sin_phi * half_dx + cos_phi * half_dy

    # Solved on the unit circle (xp1/rx, yp1/ry) so huge radii cannot overflow
    xh = xp1 / rx
    yh = yp1 / ry
    norm = math.hypot(xh, yh)

    # F.6.6.2: out-of-range radii are scaled up uniformly
    if norm > 1:
        rx *= norm
        ry *= norm
        xh /= norm
        yh /= norm
        norm = math.hypot(xh, yh)

    # F.6.5.2
    square = (1 - norm) * (1 + norm)
    if square < 0:
        # rounding: exact value is 1 - hat >= 0 once radii are corrected
        square = 0.0
    base = math.sqrt(square)
    if large_arc == sweep:
        base = -base
    ux_dir = xh / norm
    uy_dir = yh / norm
    cpx = base * rx * uy_dir
    cpy = -base * ry * ux_dir

    # F.6.5.3
    cx = cos_phi * cpx - sin_phi * cpy + (x1 + x2) / 2
    cy = sin_phi * cpx + cos_phi * cpy + (y1 + y2) / 2

    # F.6.5.5
    ux = xh - base * uy_dir
    uy = yh + base * ux_dir
    theta1 = math.acos(_clamp(ux / math.hypot(ux, uy)))
    if uy < 0:
        theta1 = -theta1

    # F.6.5.6
    vx = -xh - base * uy_dir
    vy = -yh + base * ux_dir
    cosine = (ux * vx + uy * vy) / (math.hypot(ux, uy) * math.hypot(vx, vy))
    delta = math.acos(_clamp(cosine)) % (2 * math.pi)
    if ux * vy - uy * vx < 0:
        delta = -delta

    if not sweep and delta > 0:
        delta -= 2 * math.pi
    elif sweep and delta < 0:
        delta += 2 * math.pi

    return CenterArc(
        center=Point(cx, cy),
        rx=rx,
        ry=ry,
        phi=phi,
        theta1=theta1,
        delta=delta,
        start=Point(x1, y1),
        end=Point(x2, y2),
    )


def _clamp(value: float) -> float:
    return max(-1.0, min(1.0, value))
