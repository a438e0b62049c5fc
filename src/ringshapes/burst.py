"""
burst.py
--------

Burst ring: randomly spaced pie-slice rays shown through an annulus.

Unlike the other shapes, the burst ring draws straight onto a Matplotlib
`Axes`: it fills the ring's disc with a background color, then fills the ray
wedges with a foreground color, both clipped to the annulus. The geometry
(spoke list, clip annulus, wedge union) is kept in pure functions.

Spoke angles and widths are in degrees.
"""

from __future__ import annotations

import math
import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from matplotlib.axes import Axes
from matplotlib.patches import PathPatch
from matplotlib.path import Path as mplPath

from .geometry import RectLike, centered_square, inset_bbox, rect_center
from .path_utils import PathBuilder, circle_path, empty_path, evenodd_compound
from .rng import RNG, get_rng

logger = logging.getLogger(__name__)

MIN_STEP_DEG = 0.01


@dataclass(frozen=True)
class Spoke:
    """One ray of a burst ring."""
    angle : float  # center angle, degrees
    width : float  # angular width, degrees


def random_burst_spokes(
        width_range   : tuple[float, float] = (0.5, 1.2),
        spacing_range : tuple[float, float] = (0.5, 4.0),
        rng           : RNG                 = None,
    ) -> list[Spoke]:
    """Walk once around the circle laying down randomly sized, spaced spokes.

    Starting from a random offset in [0, 360], each step draws a width and a
    spacing, records a spoke, and advances by their sum until the walk passes
    360 degrees.

    Args:
        width_range: (min, max) spoke width, degrees.
        spacing_range: (min, max) gap following each spoke, degrees.
        rng: Optional RNG. If None, uses get_rng(thread_safe=True).

    Returns:
        Spokes in walk order.
    """
    if rng is None:
        rng = get_rng(thread_safe=True)

    w_lo, w_hi = (max(MIN_STEP_DEG, float(v)) for v in width_range)
    s_lo, s_hi = (max(0.0, float(v)) for v in spacing_range)

    spokes = []
    a_offset = rng.uniform(0, 360)
    a = 0.0
    while a < 360:
        w = rng.uniform(w_lo, max(w_lo, w_hi))
        s = rng.uniform(s_lo, max(s_lo, s_hi))
        spokes.append(Spoke(a + a_offset, w))
        a += s + w
    return spokes


def burst_clip_path(rect: RectLike, thickness: float) -> mplPath:
    """Annulus of the given thickness inside the centered square (even-odd)."""
    square = centered_square(rect)
    center = rect_center(square)
    radius = square.width / 2
    inner = inset_bbox(square, thickness, thickness).width / 2
    if inner <= 0:
        return circle_path(center, radius)
    return evenodd_compound(circle_path(center, radius), circle_path(center, inner))


def burst_wedges_path(rect: RectLike, spokes: Sequence[Spoke]) -> mplPath:
    """Union of pie slices from the center out to the square's radius."""
    square = centered_square(rect)
    center = rect_center(square)
    radius = square.width / 2
    if not spokes:
        return empty_path()

    builder = PathBuilder()
    for spoke in spokes:
        start = math.radians(spoke.angle - spoke.width / 2)
        end = math.radians(spoke.angle + spoke.width / 2)
        builder.move_to(center)
        builder.arc(center, radius, start, end)
        builder.close()
    return builder.to_path()


@dataclass(frozen=True)
class BurstRing:
    """Burst ring drawing routine.

    Args:
        thickness: Ring band width, in data units.
        background_color: Fill of the band between rays.
        foreground_color: Fill of the rays.
        spokes: Precomputed rays; see `random`.
    """
    thickness        : float
    background_color : Any               = "tab:blue"
    foreground_color : Any               = "tab:green"
    spokes           : tuple[Spoke, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "thickness", max(0.0, float(self.thickness)))
        object.__setattr__(self, "spokes", tuple(self.spokes))

    @classmethod
    def random(
            cls,
            thickness        : float,
            background_color : Any                 = "tab:blue",
            foreground_color : Any                 = "tab:green",
            width_range      : tuple[float, float] = (0.5, 1.2),
            spacing_range    : tuple[float, float] = (0.5, 4.0),
            rng              : Optional[RNG]       = None,
        ) -> BurstRing:
        spokes = random_burst_spokes(width_range, spacing_range, rng=rng)
        return cls(thickness, background_color, foreground_color, spokes)

    def draw(self, ax: Axes, rect: RectLike) -> tuple[PathPatch, PathPatch]:
        """Render onto ``ax`` inside ``rect``.

        Returns:
            (background, rays) patches, both clipped to the annulus.
        """
        if not isinstance(ax, Axes):
            raise TypeError(f"Expected a Matplotlib Axes, got {type(ax).__name__}.")

        square = centered_square(rect)
        clip = burst_clip_path(square, self.thickness)
        disc = circle_path(rect_center(square), square.width / 2)

        background = PathPatch(disc, facecolor=self.background_color, edgecolor="none")
        rays = PathPatch(
            burst_wedges_path(square, self.spokes),
            facecolor=self.foreground_color, edgecolor="none",
        )
        for patch in (background, rays):
            ax.add_patch(patch)
            patch.set_clip_path(clip, ax.transData)

        logger.debug(f"BurstRing drawn with {len(self.spokes)} spokes")
        return background, rays
