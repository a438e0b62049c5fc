"""
wave.py
-------

Wave rings: a sine-like radius variation around a circle, approximated with
cubic Bezier segments rather than pointwise sampling.

Each wave period contributes three anchors (outer peak, inner valley at half
period, next outer peak) joined by two cubic segments. Control points sit on
the tangent at each anchor, offset by a fraction of the local arc length
``2*pi*R / frequency``; the outer and inner control ratios set the tension at
peaks and valleys respectively.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from matplotlib.path import Path as mplPath

from .base import RingShape, clamp_count, clamp_ratio
from .geometry import (
    PointXY, RectLike, as_bbox, inset_bbox, point_on_circle, rect_center,
    tangent_points,
)
from .path_utils import PathBuilder, evenodd_compound

MIN_AMPLITUDE, MAX_AMPLITUDE = 0.1, 0.95
MIN_FREQUENCY, MAX_FREQUENCY = 1, 60


def wave_ring_path(
        center             : PointXY,
        outer_radius       : float,
        inner_radius       : float,
        frequency          : int,
        outer_control_ratio: float,
        inner_control_ratio: float,
    ) -> mplPath:
    """Closed Bezier wave between ``outer_radius`` peaks and ``inner_radius`` valleys."""
    theta = 2 * math.pi / frequency
    half_theta = theta * 0.5
    c_dist_outer = (2 * math.pi * outer_radius / frequency) * outer_control_ratio
    c_dist_inner = (2 * math.pi * inner_radius / frequency) * inner_control_ratio

    builder = PathBuilder()
    builder.move_to(point_on_circle(center, outer_radius, 0.0))
    for i in range(frequency):
        a0 = theta * i
        a1 = a0 + half_theta
        a2 = a0 + theta
        valley = point_on_circle(center, inner_radius, a1)
        peak = point_on_circle(center, outer_radius, a2)

        c0_ahead, _ = tangent_points(center, outer_radius, a0, c_dist_outer)
        c1_ahead, c1_behind = tangent_points(center, inner_radius, a1, c_dist_inner)
        _, c2_behind = tangent_points(center, outer_radius, a2, c_dist_outer)

        builder.curve_to(valley, c0_ahead, c1_behind)
        builder.curve_to(peak, c1_ahead, c2_behind)
    return builder.close().to_path()


@dataclass(frozen=True)
class WaveRing(RingShape):
    """Wavy disc outline.

    Args:
        amplitude_ratio: Valley radius as a fraction of the peak radius,
            clamped to [0.1, 0.95].
        frequency: Full wave periods around the circle, clamped to [1, 60].
        outer_control_ratio: Control distance / arc length at the peaks.
        inner_control_ratio: Control distance / arc length at the valleys.
    """
    amplitude_ratio     : float = 0.8
    frequency           : int   = 6
    outer_control_ratio : float = 0.25
    inner_control_ratio : float = 0.275

    def __post_init__(self):
        clamp_ratio(self, "amplitude_ratio", MIN_AMPLITUDE, MAX_AMPLITUDE)
        clamp_count(self, "frequency", MIN_FREQUENCY, MAX_FREQUENCY)

    def radii(self, rect: RectLike) -> tuple[float, float]:
        """(outer, inner) radius inside ``rect``."""
        bbox = as_bbox(rect)
        outer = min(bbox.width, bbox.height) / 2
        return outer, outer * self.amplitude_ratio

    def path(self, rect: RectLike) -> mplPath:
        outer, inner = self.radii(rect)
        return wave_ring_path(
            rect_center(rect), outer, inner, self.frequency,
            self.outer_control_ratio, self.inner_control_ratio,
        )


@dataclass(frozen=True)
class HollowWaveRing(WaveRing):
    """Wavy-edged ring: a wave on ``rect`` minus a wave on ``rect`` inset by
    the thickness (``thickness_ratio`` of the half-side, clamped to [0.01, 0.99]).
    """
    thickness_ratio : float = 0.2

    def __post_init__(self):
        super().__post_init__()
        clamp_ratio(self, "thickness_ratio", 0.01, 0.99)

    def thickness(self, rect: RectLike) -> float:
        bbox = as_bbox(rect)
        return min(bbox.width, bbox.height) * 0.5 * self.thickness_ratio

    def path(self, rect: RectLike) -> mplPath:
        wave = WaveRing(
            self.amplitude_ratio, self.frequency,
            self.outer_control_ratio, self.inner_control_ratio,
        )
        thickness = self.thickness(rect)
        return evenodd_compound(
            wave.path(rect),
            wave.path(inset_bbox(rect, thickness, thickness)),
        )
