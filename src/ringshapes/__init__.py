from .rng import RNGBackend, RNG, get_rng, set_global_seed
from .geometry import (
    Span, Arc, as_bbox, centered_square, inset_bbox, rect_center,
    point_on_circle, tangent_points, transition_angle, arc_sweep,
)
from .path_utils import PathBuilder, evenodd_compound, contains_point_evenodd
from .base import RingShape
from .gauge import GaugeRing
from .streaks import OffsetStreakRing, SparseStreakRing, random_sparse_streaks
from .broadcast import BroadcastRing, random_broadcast_spans
from .tech import TechRing, HollowTechRing, random_notch_spans
from .wave import WaveRing, HollowWaveRing
from .gear import GearRing
from .burst import BurstRing, Spoke, random_burst_spokes, burst_clip_path, burst_wedges_path
from .registry import SHAPES, make_shape, path_for

__all__ = [
    "RNGBackend", "RNG", "get_rng", "set_global_seed",
    "Span", "Arc", "as_bbox", "centered_square", "inset_bbox", "rect_center",
    "point_on_circle", "tangent_points", "transition_angle", "arc_sweep",
    "PathBuilder", "evenodd_compound", "contains_point_evenodd",
    "RingShape", "GaugeRing", "OffsetStreakRing", "SparseStreakRing",
    "random_sparse_streaks", "BroadcastRing", "random_broadcast_spans",
    "TechRing", "HollowTechRing", "random_notch_spans",
    "WaveRing", "HollowWaveRing", "GearRing",
    "BurstRing", "Spoke", "random_burst_spokes", "burst_clip_path", "burst_wedges_path",
    "SHAPES", "make_shape", "path_for",
]
