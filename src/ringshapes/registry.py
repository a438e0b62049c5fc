"""
registry.py
-----------

Shape-kind lookup: ``path_for(kind, rect, **params)``.
"""

from __future__ import annotations

from typing import Any

from matplotlib.path import Path as mplPath

from .base import RingShape
from .broadcast import BroadcastRing
from .gauge import GaugeRing
from .gear import GearRing
from .geometry import RectLike
from .streaks import OffsetStreakRing, SparseStreakRing
from .tech import HollowTechRing, TechRing
from .wave import HollowWaveRing, WaveRing

SHAPES: dict[str, type[RingShape]] = {
    "gauge"         : GaugeRing,
    "offset_streak" : OffsetStreakRing,
    "sparse_streak" : SparseStreakRing,
    "broadcast"     : BroadcastRing,
    "tech"          : TechRing,
    "hollow_tech"   : HollowTechRing,
    "wave"          : WaveRing,
    "hollow_wave"   : HollowWaveRing,
    "gear"          : GearRing,
}


def make_shape(kind: str, **params: Any) -> RingShape:
    try:
        shape_cls = SHAPES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown shape kind {kind!r}. Expected one of: {', '.join(sorted(SHAPES))}."
        ) from None
    return shape_cls(**params)


def path_for(kind: str, rect: RectLike, **params: Any) -> mplPath:
    """Build the path of shape ``kind`` with ``params`` inside ``rect``."""
    return make_shape(kind, **params).path(rect)
