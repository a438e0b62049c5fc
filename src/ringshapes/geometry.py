"""
geometry.py
-----------

Angle/radius helpers shared by every ring generator.

All ring shapes reduce their bounding rectangle to the largest centered square
first, so radius-based math is well defined regardless of aspect ratio.
Rectangles are Matplotlib `Bbox` objects; `(x, y, width, height)` tuples are
accepted wherever a rectangle is expected.

Angles are radians, measured from +X toward +Y.

Core API:

    centered_square(rect) -> Bbox
    inset_bbox(rect, dx, dy) -> Bbox
    point_on_circle(center, radius, angle) -> PointXY
    tangent_points(center, radius, angle, distance) -> tuple[PointXY, PointXY]
    transition_angle(r0, r1) -> float
    arc_sweep(start, end, clockwise) -> float
"""

from __future__ import annotations

__all__ = [
    "TAU", "PointXY", "RectLike", "Span", "Arc",
    "as_bbox", "centered_square", "inset_bbox", "rect_center",
    "point_on_circle", "tangent_points", "transition_angle", "arc_sweep",
]

import math
from dataclasses import dataclass
from typing import ClassVar, TypeAlias, Union

from matplotlib.transforms import Bbox, BboxBase

numeric: TypeAlias = Union[int, float]
PointXY: TypeAlias = tuple[float, float]
RectLike: TypeAlias = Union[BboxBase, tuple[numeric, numeric, numeric, numeric]]

TAU = 2.0 * math.pi


# ---------------------------------------------------------------------------
# Angular value types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Span:
    """Angular interval [start, end) of a ring segment, in radians."""
    start : float
    end   : float

    @property
    def sweep(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class Arc:
    """Angular interval with a winding direction, in radians.

    Counter-clockwise arcs (``clockwise=False``) run toward increasing angle.
    See `arc_sweep` for how ``end < start`` is interpreted.
    """
    start     : float
    end       : float
    clockwise : bool = False

    EMPTY       : ClassVar["Arc"]
    FULL_CIRCLE : ClassVar["Arc"]

    @property
    def sweep(self) -> float:
        return arc_sweep(self.start, self.end, self.clockwise)

    def offset_by(self, angle: float) -> Arc:
        """Return a copy rotated by ``angle`` radians."""
        return Arc(self.start + angle, self.end + angle, self.clockwise)


Arc.EMPTY = Arc(0.0, 0.0)
Arc.FULL_CIRCLE = Arc(0.0, TAU)


# ---------------------------------------------------------------------------
# Rectangles
# ---------------------------------------------------------------------------
def as_bbox(rect: RectLike) -> Bbox:
    """Coerce a `Bbox` or an ``(x, y, width, height)`` tuple to a `Bbox`."""
    if isinstance(rect, BboxBase):
        return Bbox(rect.get_points())
    if isinstance(rect, (tuple, list)) and len(rect) == 4:
        x, y, w, h = map(float, rect)
        return Bbox.from_bounds(x, y, w, h)
    raise TypeError(
        f"Expected a Bbox or (x, y, width, height) tuple, got {type(rect).__name__}."
    )


def centered_square(rect: RectLike) -> Bbox:
    """Return the largest axis-aligned square centered in ``rect``."""
    bbox = as_bbox(rect)
    dim = min(bbox.width, bbox.height)
    dx = (bbox.width - dim) / 2
    dy = (bbox.height - dim) / 2
    return Bbox.from_bounds(bbox.x0 + dx, bbox.y0 + dy, dim, dim)


def inset_bbox(rect: RectLike, dx: float, dy: float) -> Bbox:
    """Shrink ``rect`` by ``dx`` on the left/right and ``dy`` on top/bottom.

    Negative insets grow the rectangle. Over-insetting collapses the affected
    dimension to zero around the original center.
    """
    bbox = as_bbox(rect)
    cx, cy = rect_center(bbox)
    w = max(0.0, bbox.width - 2 * dx)
    h = max(0.0, bbox.height - 2 * dy)
    return Bbox.from_bounds(cx - w / 2, cy - h / 2, w, h)


def rect_center(rect: RectLike) -> PointXY:
    bbox = as_bbox(rect)
    return (bbox.x0 + bbox.width / 2, bbox.y0 + bbox.height / 2)


# ---------------------------------------------------------------------------
# Circle geometry
# ---------------------------------------------------------------------------
def point_on_circle(center: PointXY, radius: float, angle: float) -> PointXY:
    cx, cy = center
    return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def tangent_points(
        center   : PointXY,
        radius   : float,
        angle    : float,
        distance : float,
    ) -> tuple[PointXY, PointXY]:
    """Two points offset from the circle point along its tangent.

    The tangent at ``angle`` is perpendicular to the radius vector
    ``(cos a, sin a)``.

    Returns:
        (ahead, behind): ``ahead`` lies toward increasing angle,
        ``behind`` toward decreasing angle, both ``distance`` away from the
        point on the circle.
    """
    px, py = point_on_circle(center, radius, angle)
    tx, ty = -math.sin(angle), math.cos(angle)
    return (
        (px + distance * tx, py + distance * ty),
        (px - distance * tx, py - distance * ty),
    )


def transition_angle(r0: float, r1: float) -> float:
    """Chamfer angle for a radial step from ``r0`` down to ``r1``.

    Law of cosines on the isosceles triangle (center, two points on ``r0``)
    whose base equals the step depth ``|r0 - r1|``.
    """
    if r0 <= 0:
        return 0.0
    dr = abs(r0 - r1)
    cos_t = (2 * r0 * r0 - dr * dr) / (2 * r0 * r0)
    return math.acos(max(-1.0, min(1.0, cos_t)))


def arc_sweep(start: float, end: float, clockwise: bool = False) -> float:
    """Unsigned angular sweep of an arc drawn from ``start`` to ``end``.

    - an exactly zero request draws nothing (0.0);
    - a request of a full turn or more draws a full circle;
    - otherwise the request wraps modulo 2*pi in the drawing direction,
      so a counter-clockwise arc with ``end < start`` wraps past 2*pi.
    """
    diff = (start - end) if clockwise else (end - start)
    if diff == 0:
        return 0.0
    if diff >= TAU:
        return TAU
    sweep = diff % TAU
    return sweep if sweep > 0 else TAU
