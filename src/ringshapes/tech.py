"""
tech.py
-------

Tech-style rings with chamfered notches.

A notch list is a flat, even-length sequence of alternating start/end angles
(radians). Along each notch the outline steps in from the outer radius ``r0``
to ``r1 = r0 - inset``; the step walls are chamfered by the law-of-cosines
transition angle so they read as bevels rather than sharp gaps.

`HollowTechRing` overlays two independently notched rings (outer edge and
inner edge) with the even-odd rule, producing a true hollow ring.
"""

from __future__ import annotations

import math
import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from matplotlib.path import Path as mplPath

from .base import RingShape, clamp_ratio
from .geometry import (
    PointXY, RectLike, Span, centered_square, inset_bbox, point_on_circle,
    rect_center, transition_angle,
)
from .path_utils import PathBuilder, empty_path, evenodd_compound
from .rng import RNG, get_rng

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Notch spans
# ---------------------------------------------------------------------------
def flatten_spans(spans: Sequence[Span]) -> tuple[float, ...]:
    """Convert spans to the flat ``(start0, end0, start1, end1, ...)`` form."""
    return tuple(a for span in spans for a in (span.start, span.end))


def random_notch_spans(
        span_count_range  : tuple[int, int]     = (2, 5),
        width_ratio_range : tuple[float, float] = (0.25, 0.75),
        rng               : RNG                 = None,
    ) -> tuple[float, ...]:
    """Sample notch boundaries for a tech ring.

    The circle is divided into ``notch_count`` equal slots rotated by a random
    offset. Each slot holds one notch whose width is a random fraction of the
    slot and whose start sits between 20% and 80% of the leftover room.

    Args:
        span_count_range: Inclusive (min, max) number of notches.
        width_ratio_range: (min, max) notch width as a fraction of a slot.
        rng: Optional RNG. If None, uses get_rng(thread_safe=True).

    Returns:
        Flat tuple of alternating start/end angles.
    """
    if rng is None:
        rng = get_rng(thread_safe=True)

    lo = max(1, int(span_count_range[0]))
    hi = max(lo, int(span_count_range[1]))
    a_offset = rng.uniform(0, 2 * math.pi)
    notch_count = rng.randint(lo, hi)
    notch_span = 2 * math.pi / notch_count

    spans = []
    for i in range(notch_count):
        start_angle = notch_span * i + a_offset
        notch_width = notch_span * rng.uniform(*width_ratio_range)
        space = notch_span - notch_width
        notch_start = rng.uniform(0.2, 0.8) * space + start_angle
        spans.extend([notch_start, notch_start + notch_width])
    return tuple(spans)


def notch_ring_path(
        spans  : Sequence[float],
        center : PointXY,
        radius : float,
        inset  : float,
    ) -> mplPath:
    """Closed notched outline around ``center``.

    Returns an empty path when ``spans`` has odd length or fewer than two
    entries, or when ``radius`` is not positive.
    """
    if len(spans) < 2 or len(spans) % 2 != 0:
        logger.warning(f"Invalid notch span list of length {len(spans)}; returning empty path")
        return empty_path()
    if radius <= 0:
        logger.warning("Degenerate tech ring radius; returning empty path")
        return empty_path()

    r0 = radius
    r1 = radius - inset
    t = transition_angle(r0, r1)

    builder = PathBuilder()
    builder.move_to(point_on_circle(center, r0, spans[0]))
    for i in range(0, len(spans), 2):
        a0, a3 = spans[i], spans[i + 1]
        a1, a2 = a0 + t, a3 - t
        builder.line_to(point_on_circle(center, r1, a1))
        builder.arc(center, r1, a1, a2)
        builder.line_to(point_on_circle(center, r0, a3))
        if i + 2 < len(spans):
            builder.arc(center, r0, a3, spans[i + 2])
    builder.arc(center, r0, spans[-1], spans[0])
    return builder.close().to_path()


# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TechRing(RingShape):
    """Solid ring with chamfered notches cut into its outer edge.

    Args:
        inset_ratio: Notch depth as a fraction of the radius, in [0, 1].
        spans: Flat alternating start/end notch angles, radians.
    """
    inset_ratio : float              = 0.1
    spans       : tuple[float, ...]  = ()

    def __post_init__(self):
        clamp_ratio(self, "inset_ratio", 0.0, 1.0)
        object.__setattr__(self, "spans", tuple(float(a) for a in self.spans))

    @classmethod
    def from_spans(cls, spans: Sequence[Span], inset_ratio: float = 0.1) -> TechRing:
        return cls(inset_ratio=inset_ratio, spans=flatten_spans(spans))

    @classmethod
    def random(
            cls,
            inset_ratio      : float           = 0.1,
            span_count_range : tuple[int, int] = (2, 5),
            rng              : Optional[RNG]   = None,
        ) -> TechRing:
        spans = random_notch_spans(span_count_range, (0.25, 0.75), rng=rng)
        return cls(inset_ratio=inset_ratio, spans=spans)

    def path(self, rect: RectLike) -> mplPath:
        square = centered_square(rect)
        radius = square.width * 0.5
        return notch_ring_path(self.spans, rect_center(square), radius, radius * self.inset_ratio)


@dataclass(frozen=True)
class HollowTechRing(RingShape):
    """Hollow ring with independent notch patterns on its outer and inner edges.

    The inner notched ring is built in the square inset by
    ``thickness - inset``, where both are fractions of the outer radius.
    """
    inset_ratio     : float             = 0.1
    thickness_ratio : float             = 0.25
    outer_spans     : tuple[float, ...] = ()
    inner_spans     : tuple[float, ...] = ()

    def __post_init__(self):
        clamp_ratio(self, "inset_ratio", 0.0, 1.0)
        clamp_ratio(self, "thickness_ratio", 0.0, 1.0)
        object.__setattr__(self, "outer_spans", tuple(float(a) for a in self.outer_spans))
        object.__setattr__(self, "inner_spans", tuple(float(a) for a in self.inner_spans))

    @classmethod
    def from_spans(
            cls,
            outer_spans     : Sequence[Span],
            inner_spans     : Sequence[Span],
            inset_ratio     : float = 0.1,
            thickness_ratio : float = 0.25,
        ) -> HollowTechRing:
        return cls(
            inset_ratio=inset_ratio,
            thickness_ratio=thickness_ratio,
            outer_spans=flatten_spans(outer_spans),
            inner_spans=flatten_spans(inner_spans),
        )

    @classmethod
    def random(
            cls,
            inset_ratio            : float           = 0.1,
            thickness_ratio        : float           = 0.25,
            outer_span_count_range : tuple[int, int] = (2, 5),
            inner_span_count_range : tuple[int, int] = (1, 4),
            rng                    : Optional[RNG]   = None,
        ) -> HollowTechRing:
        if rng is None:
            rng = get_rng(thread_safe=True)
        outer = random_notch_spans(outer_span_count_range, (0.2, 0.8), rng=rng)
        inner = random_notch_spans(inner_span_count_range, (0.2, 0.8), rng=rng)
        return cls(
            inset_ratio=inset_ratio,
            thickness_ratio=thickness_ratio,
            outer_spans=outer,
            inner_spans=inner,
        )

    def inner_rect(self, rect: RectLike):
        square = centered_square(rect)
        radius = square.width * 0.5
        rect_inset = radius * self.thickness_ratio - radius * self.inset_ratio
        return inset_bbox(square, rect_inset, rect_inset)

    def path(self, rect: RectLike) -> mplPath:
        square = centered_square(rect)
        outer = TechRing(self.inset_ratio, self.outer_spans).path(square)
        inner = TechRing(self.inset_ratio, self.inner_spans).path(self.inner_rect(square))
        return evenodd_compound(outer, inner)
