"""
streaks.py
----------

Concentric streak rings.

 - `OffsetStreakRing`: one arc per layer, each layer's start angle advanced by
   a constant offset, producing a swirling cascade.
 - `SparseStreakRing`: every layer split into a random number of slices, each
   holding one streak trimmed away from its neighbours.

Random layouts are produced by `random_sparse_streaks`, a pure function of its
arguments and the injected RNG; shapes only consume the resulting spans.
"""

from __future__ import annotations

import math
import logging
from dataclasses import dataclass
from typing import Optional

from matplotlib.path import Path as mplPath

from .base import MIN_THICKNESS_RATIO, RingShape, clamp_count, clamp_ratio
from .geometry import (
    Arc, RectLike, Span, centered_square, point_on_circle, rect_center,
)
from .path_utils import PathBuilder, empty_path
from .rng import RNG, get_rng

logger = logging.getLogger(__name__)

MAX_TRIM_FRACTION = 0.49


# ---------------------------------------------------------------------------
# Offset streak ring
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OffsetStreakRing(RingShape):
    """Layered arcs with a per-layer angular offset.

    Args:
        thickness_ratio: Radial band occupied by the layers, as a fraction
            of the radius, in [0.01, 1].
        streak_count: Number of layers (one arc each), at least 1.
        streak_arc: Angular span of every arc, radians.
        streak_offset: Start-angle increment per layer, radians.
        clockwise: Direction in which the start offset advances; arcs
            themselves are always drawn toward increasing angle.
    """
    thickness_ratio : float = 0.25
    streak_count    : int   = 8
    streak_arc      : float = math.pi
    streak_offset   : float = math.pi * 0.2
    clockwise       : bool  = True

    def __post_init__(self):
        clamp_count(self, "streak_count", 1)
        clamp_ratio(self, "thickness_ratio", MIN_THICKNESS_RATIO, 1.0)

    def layers(self, rect: RectLike) -> list[tuple[float, Arc]]:
        """Radius and arc of every layer, innermost first."""
        radius = centered_square(rect).width * 0.5
        r0 = radius * (1 - self.thickness_ratio)
        dr = (radius - r0) / self.streak_count
        sign = 1 if self.clockwise else -1

        out = []
        for i in range(self.streak_count):
            a0 = self.streak_offset * (i + 1) * sign
            out.append((r0 + dr * i, Arc(a0, a0 + self.streak_arc)))
        return out

    def path(self, rect: RectLike) -> mplPath:
        center = rect_center(centered_square(rect))
        builder = PathBuilder()
        for r, arc in self.layers(rect):
            builder.move_to(point_on_circle(center, r, arc.start))
            builder.arc(center, r, arc.start, arc.end, arc.clockwise)
        return builder.to_path()


# ---------------------------------------------------------------------------
# Sparse streak ring
# ---------------------------------------------------------------------------
def random_sparse_streaks(
        layer_count       : int             = 6,
        streaks_per_layer : tuple[int, int] = (1, 6),
        rng               : RNG             = None,
    ) -> list[list[Span]]:
    """Sample streak spans for every layer of a sparse streak ring.

    Each layer picks a streak count from the inclusive ``streaks_per_layer``
    range and a random angular offset. The circle is cut into equal slices;
    each slice holds one streak trimmed by up to 49% of the slice width on
    either end, so neighbouring streaks never touch.

    Args:
        layer_count: Number of layers, at least 1.
        streaks_per_layer: Inclusive (min, max) streak count per layer.
        rng: Optional RNG. If None, uses get_rng(thread_safe=True).

    Returns:
        One list of spans per layer, innermost layer first.
    """
    if rng is None:
        rng = get_rng(thread_safe=True)

    layer_count = max(1, int(layer_count))
    lo = max(1, int(streaks_per_layer[0]))
    hi = max(lo, int(streaks_per_layer[1]))

    layers = []
    for _ in range(layer_count):
        streak_count = rng.randint(lo, hi)
        a_offset = rng.uniform(0, 2 * math.pi)
        angle_span = 2 * math.pi / streak_count
        spans = []
        for i in range(streak_count):
            a0 = angle_span * i + a_offset
            a1 = a0 + angle_span
            start = a0 + rng.uniform(0, angle_span * MAX_TRIM_FRACTION)
            end = a1 - rng.uniform(0, angle_span * MAX_TRIM_FRACTION)
            spans.append(Span(start, end))
        layers.append(spans)
    return layers


@dataclass(frozen=True)
class SparseStreakRing(RingShape):
    """Concentric layers of randomly sized, non-touching streaks.

    ``streaks`` holds one sequence of spans per layer; use `random` to sample
    them.
    """
    thickness_ratio : float                          = 0.25
    streaks         : tuple[tuple[Span, ...], ...]   = ()

    def __post_init__(self):
        clamp_ratio(self, "thickness_ratio", MIN_THICKNESS_RATIO, 1.0)
        object.__setattr__(self, "streaks", tuple(tuple(layer) for layer in self.streaks))

    @classmethod
    def random(
            cls,
            thickness_ratio   : float           = 0.25,
            layer_count       : int             = 6,
            streaks_per_layer : tuple[int, int] = (1, 6),
            rng               : Optional[RNG]   = None,
        ) -> SparseStreakRing:
        streaks = random_sparse_streaks(layer_count, streaks_per_layer, rng=rng)
        return cls(thickness_ratio=thickness_ratio, streaks=streaks)

    @property
    def layer_count(self) -> int:
        return len(self.streaks)

    def path(self, rect: RectLike) -> mplPath:
        if not self.streaks:
            logger.warning("SparseStreakRing has no layers; returning empty path")
            return empty_path()

        square = centered_square(rect)
        center = rect_center(square)
        radius = square.width * 0.5
        r0 = radius * (1 - self.thickness_ratio)
        dr = (radius - r0) / len(self.streaks)

        builder = PathBuilder()
        for layer_index, layer_streaks in enumerate(self.streaks):
            r = r0 + dr * layer_index
            for streak in layer_streaks:
                builder.move_to(point_on_circle(center, r, streak.start))
                builder.arc(center, r, streak.start, streak.end)
        return builder.to_path()
