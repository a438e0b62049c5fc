"""
broadcast.py
------------

Broadcast (signal icon) ring: every span drawn as a stack of concentric arcs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from matplotlib.path import Path as mplPath

from .base import MIN_THICKNESS_RATIO, RingShape, clamp_count, clamp_ratio
from .geometry import RectLike, Span, centered_square, point_on_circle, rect_center
from .path_utils import PathBuilder
from .rng import RNG, get_rng


def random_broadcast_spans(
        ray_count_range        : tuple[int, int]     = (2, 6),
        span_width_ratio_range : tuple[float, float] = (0.1, 0.9),
        uniform_spacing        : bool                = True,
        rng                    : RNG                 = None,
    ) -> list[Span]:
    """Sample the rays of a broadcast ring.

    The circle is divided into ``ray_count`` equal slots, rotated together by
    a random offset in [0, 2*pi).

    - Uniform spacing: each slot start is the center of an arc whose width is
      a random fraction of the slot.
    - Non-uniform spacing: a random width is chosen first, then the arc is
      placed at a random position within the leftover room of the slot.

    Args:
        ray_count_range: Inclusive (min, max) number of rays.
        span_width_ratio_range: (min, max) arc width as a fraction of a slot.
        uniform_spacing: Selects the placement mode described above.
        rng: Optional RNG. If None, uses get_rng(thread_safe=True).

    Returns:
        One span per ray.
    """
    if rng is None:
        rng = get_rng(thread_safe=True)

    lo = max(1, int(ray_count_range[0]))
    hi = max(lo, int(ray_count_range[1]))
    ray_count = rng.randint(lo, hi)
    angle_per_ray = 2 * math.pi / ray_count
    offset = rng.uniform(0, 2 * math.pi)

    spans = []
    for i in range(ray_count):
        start_angle = angle_per_ray * i + offset
        ratio = rng.uniform(*span_width_ratio_range)
        if uniform_spacing:
            half_width = ratio / 2 * angle_per_ray
            spans.append(Span(start_angle - half_width, start_angle + half_width))
        else:
            width = ratio * angle_per_ray
            span_start = rng.uniform(0, angle_per_ray - width) + start_angle
            spans.append(Span(span_start, span_start + width))
    return spans


@dataclass(frozen=True)
class BroadcastRing(RingShape):
    """Concentric arc stacks, one stack per span.

    Args:
        thickness_ratio: Radial band occupied by the layers.
        layer_count: Arcs per span, at least 1.
        spans: Angular spans of the rays.
    """
    thickness_ratio : float            = 0.8
    layer_count     : int              = 6
    spans           : tuple[Span, ...] = ()

    def __post_init__(self):
        clamp_count(self, "layer_count", 1)
        clamp_ratio(self, "thickness_ratio", MIN_THICKNESS_RATIO, 1.0)
        object.__setattr__(self, "spans", tuple(self.spans))

    @classmethod
    def random(
            cls,
            thickness_ratio        : float               = 0.8,
            layer_count            : int                 = 6,
            ray_count_range        : tuple[int, int]     = (2, 6),
            span_width_ratio_range : tuple[float, float] = (0.1, 0.9),
            uniform_spacing        : bool                = True,
            rng                    : Optional[RNG]       = None,
        ) -> BroadcastRing:
        spans = random_broadcast_spans(
            ray_count_range, span_width_ratio_range, uniform_spacing, rng=rng,
        )
        return cls(thickness_ratio=thickness_ratio, layer_count=layer_count, spans=spans)

    def layer_radii(self, rect: RectLike) -> list[float]:
        radius = centered_square(rect).width * 0.5
        r0 = radius * (1 - self.thickness_ratio)
        dr = (radius - r0) / (self.layer_count + 1)
        return [r0 + dr * layer for layer in range(self.layer_count)]

    def path(self, rect: RectLike) -> mplPath:
        center = rect_center(centered_square(rect))
        radii = self.layer_radii(rect)
        builder = PathBuilder()
        for span in self.spans:
            for r in radii:
                builder.move_to(point_on_circle(center, r, span.start))
                builder.arc(center, r, span.start, span.end)
        return builder.to_path()
