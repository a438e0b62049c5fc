"""
gauge.py
--------

Tick ring resembling a gauge or clock face.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from matplotlib.path import Path as mplPath

from .base import RingShape, clamp_count, clamp_ratio
from .geometry import RectLike, centered_square, point_on_circle, rect_center
from .path_utils import PathBuilder


@dataclass(frozen=True)
class GaugeRing(RingShape):
    """Evenly spaced radial ticks.

    Args:
        tick_count: Number of ticks, at least 1.
        thickness_ratio: Tick length as a fraction of the radius, in [0, 1].
    """
    tick_count      : int   = 60
    thickness_ratio : float = 0.1

    def __post_init__(self):
        clamp_count(self, "tick_count", 1)
        clamp_ratio(self, "thickness_ratio", 0.0, 1.0)

    def tick_angles(self) -> list[float]:
        da = 2 * math.pi / self.tick_count
        return [i * da for i in range(self.tick_count)]

    def path(self, rect: RectLike) -> mplPath:
        square = centered_square(rect)
        center = rect_center(square)
        radius = square.width * 0.5
        r_inner = radius * (1 - self.thickness_ratio)

        builder = PathBuilder()
        for a in self.tick_angles():
            builder.move_to(point_on_circle(center, r_inner, a))
            builder.line_to(point_on_circle(center, radius, a))
        return builder.to_path()
