"""
gear.py
-------

Gear ring: a toothed outline with optional rounded spoke slots and a center
hole, filled with the even-odd rule so the cutouts subtract.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from matplotlib.path import Path as mplPath

from .base import RingShape, clamp_count, clamp_ratio
from .geometry import PointXY, RectLike, centered_square, point_on_circle, rect_center
from .path_utils import PathBuilder, evenodd_compound

SPOKE_INNER_FRACTION = 0.35
CENTER_HOLE_FRACTION = 0.4
PLAIN_HOLE_FRACTION = 0.1


@dataclass(frozen=True)
class GearRing(RingShape):
    """Toothed gear with spokes.

    Args:
        tooth_count: Number of teeth, clamped to [2, 64].
        tooth_depth_ratio: Tooth root radius / tip radius, clamped to [0.65, 1].
        spoke_count: Number of spoke slots, clamped to [0, 12]; fewer than two
            cuts no slots.
        spoke_width_ratio: Slot width as a fraction of the spoke pitch,
            clamped to [0.2, 0.9].
        include_center_hole: Punch a circular hole at the center.
    """
    tooth_count         : int   = 24
    tooth_depth_ratio   : float = 0.8
    spoke_count         : int   = 6
    spoke_width_ratio   : float = 0.7
    include_center_hole : bool  = True

    def __post_init__(self):
        clamp_count(self, "tooth_count", 2, 64)
        clamp_ratio(self, "tooth_depth_ratio", 0.65, 1.0)
        clamp_count(self, "spoke_count", 0, 12)
        clamp_ratio(self, "spoke_width_ratio", 0.2, 0.9)

    # -------------------------------------------------------------------------
    # Contours
    # -------------------------------------------------------------------------
    def outline(self, rect: RectLike) -> mplPath:
        """The tooth silhouette alone: one closed contour of 4 vertices per tooth."""
        square = centered_square(rect)
        center = rect_center(square)
        r_outer = square.width * 0.5
        r_inner = r_outer * self.tooth_depth_ratio
        tooth_angle = 2 * math.pi / self.tooth_count
        segment_angle = tooth_angle / 4

        builder = PathBuilder()
        builder.move_to(point_on_circle(center, r_inner, 0.0))
        for i in range(self.tooth_count):
            a = tooth_angle * i
            for j in range(1, 5):
                if i == self.tooth_count - 1 and j == 4:
                    break
                r = r_inner if (j // 2) % 2 == 0 else r_outer
                builder.line_to(point_on_circle(center, r, a + segment_angle * j))
        return builder.close().to_path()

    def _spoke_slots(self, builder: PathBuilder, center: PointXY, r_outer: float) -> float:
        pitch = 2 * math.pi / self.spoke_count
        hole_width = pitch * self.spoke_width_ratio
        s_outer = r_outer * (self.tooth_depth_ratio - 0.1)
        s_inner = s_outer * SPOKE_INNER_FRACTION
        shoulder = hole_width * 0.25 * self.spoke_width_ratio

        for i in range(self.spoke_count):
            a0 = pitch * i
            a1 = a0 + hole_width
            a2 = a1 - shoulder
            a3 = a0 + shoulder
            builder.move_to(point_on_circle(center, s_outer, a0))
            builder.arc(center, s_outer, a0, a1)
            builder.line_to(point_on_circle(center, s_inner, a2))
            builder.arc(center, s_inner, a2, a3, clockwise=True)
            builder.close()
        return s_inner

    def cutouts(self, rect: RectLike) -> mplPath:
        """Spoke slots and center hole, as separate closed contours."""
        square = centered_square(rect)
        center = rect_center(square)
        r_outer = square.width * 0.5

        builder = PathBuilder()
        if self.spoke_count >= 2:
            s_inner = self._spoke_slots(builder, center, r_outer)
            if self.include_center_hole:
                builder.add_circle(center, s_inner * CENTER_HOLE_FRACTION)
        elif self.include_center_hole:
            builder.add_circle(center, r_outer * PLAIN_HOLE_FRACTION)
        return builder.to_path()

    def path(self, rect: RectLike) -> mplPath:
        return evenodd_compound(self.outline(rect), self.cutouts(rect))
