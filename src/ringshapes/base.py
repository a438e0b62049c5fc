"""
base.py
-------

Defines the abstract base class for ring shapes and the clamping helpers
their parameter records use.

Every shape is a frozen dataclass of ratios and counts. Degenerate inputs are
clamped in ``__post_init__`` rather than rejected: out-of-range geometry never
raises, it only degrades the drawing.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from matplotlib.patches import PathPatch
from matplotlib.path import Path as mplPath

from .geometry import RectLike

logger = logging.getLogger(__name__)

# Layered streak and broadcast bands keep a sliver of width so layer radii
# stay strictly increasing.
MIN_THICKNESS_RATIO = 0.01


class RingShape(ABC):
    """
    Base class for ring shapes (gauge, streak, broadcast, tech, wave, gear).

    Subclasses implement a single operation, `path`, mapping a bounding
    rectangle to a freshly built Matplotlib path. Randomized shapes sample
    their spans once, when constructed, so repeated `path` calls agree.

    Example:
        >>> ring = GaugeRing(tick_count=12)
        >>> ax.add_patch(ring.patch((0, 0, 100, 100), facecolor="none"))
    """

    @abstractmethod
    def path(self, rect: RectLike) -> mplPath:
        """Build the shape's path inside ``rect``."""
        raise NotImplementedError

    def patch(self, rect: RectLike, **kwargs: Any) -> PathPatch:
        """Wrap `path` in a `PathPatch`; ``kwargs`` are passed to the patch."""
        return PathPatch(self.path(rect), **kwargs)


# -----------------------------------------------------------------------------
# Clamping helpers
# -----------------------------------------------------------------------------
def _set(obj: Any, name: str, value: Any) -> None:
    object.__setattr__(obj, name, value)


def clamp_ratio(obj: Any, name: str, lo: float, hi: float) -> None:
    """Clamp float field ``name`` of frozen dataclass ``obj`` into [lo, hi]."""
    value = float(getattr(obj, name))
    clamped = max(lo, min(value, hi))
    if clamped != value:
        logger.debug(f"{type(obj).__name__}.{name}={value} clamped to {clamped}")
    _set(obj, name, clamped)


def clamp_count(obj: Any, name: str, lo: int, hi: int | None = None) -> None:
    """Clamp integer field ``name`` of frozen dataclass ``obj`` into [lo, hi]."""
    value = int(getattr(obj, name))
    clamped = max(lo, value if hi is None else min(value, hi))
    if clamped != value:
        logger.debug(f"{type(obj).__name__}.{name}={value} clamped to {clamped}")
    _set(obj, name, clamped)
