"""
gallery.py - Render every ring shape into a single PNG contact sheet.

Rows: gear rings, burst rings, tech rings, wave rings, and the stroked
streak/broadcast/gauge rings. Randomized shapes are sampled from one RNG,
so a fixed ``GalleryConfig.seed`` reproduces the sheet exactly.

Usage:
    python -m ringshapes.gallery
"""

import math
import time
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import matplotlib as mpl
# Use a non-interactive backend (no display needed to write PNGs)
mpl.use("Agg")
import matplotlib.pyplot as plt

from .base import RingShape
from .broadcast import BroadcastRing
from .burst import BurstRing
from .config import GalleryConfig
from .gauge import GaugeRing
from .gear import GearRing
from .logging_utils import configure_logging
from .rng import RNG
from .streaks import OffsetStreakRing, SparseStreakRing
from .tech import HollowTechRing, TechRing
from .wave import HollowWaveRing, WaveRing

logger = logging.getLogger(__name__)

CELL_PADDING = 0.08


def _fill(color: str, **kwargs: Any) -> dict:
    return {"facecolor": color, "edgecolor": "none", **kwargs}


def _stroke(color: str, lw: float = 2.0, **kwargs: Any) -> dict:
    return {"facecolor": "none", "edgecolor": color, "lw": lw, "capstyle": "round", **kwargs}


def build_rows(rng: RNG, cell_size: float = 200.0) -> list[tuple[str, list[tuple[Any, dict]]]]:
    """Gallery content: ``(title, [(shape, patch_style), ...])`` per row."""
    scale = cell_size / 200.0
    return [
        ("Gear Rings", [
            (GearRing(), _fill("red")),
            (GearRing(7, 0.5, 3, 0.9, True), _fill("green")),
            (GearRing(64, 0.9, 12, include_center_hole=False), _fill("blue")),
        ]),
        ("Burst Rings", [
            (BurstRing.random(40 * scale, "blue", "green", rng=rng), {}),
            (BurstRing.random(20 * scale, "red", "yellow", rng=rng), {}),
            (BurstRing.random(10 * scale, "purple", "orange", rng=rng), {}),
        ]),
        ("Tech Rings", [
            (TechRing.random(rng=rng), _fill("blue")),
            (HollowTechRing.random(thickness_ratio=0.25, rng=rng), _fill("green")),
            (TechRing.random(0.05, (6, 6), rng=rng), _stroke("red", 4)),
            (HollowTechRing.random(rng=rng), _fill("orange")),
            (TechRing.random(0.2, (1, 3), rng=rng), _fill("yellow", edgecolor="black", lw=2)),
        ]),
        ("Wave Rings", [
            (WaveRing(), _fill("blue")),
            (WaveRing(amplitude_ratio=0.5, frequency=16), _fill("green")),
            (HollowWaveRing(amplitude_ratio=0.9, frequency=27, thickness_ratio=0.1), _fill("red")),
            (HollowWaveRing(amplitude_ratio=0.4, frequency=2, thickness_ratio=0.5), _fill("purple")),
            (HollowWaveRing(amplitude_ratio=0.2, frequency=1, thickness_ratio=0.3), _fill("orange")),
        ]),
        ("Streak Rings", [
            (OffsetStreakRing(), _stroke("blue")),
            (OffsetStreakRing(streak_arc=math.pi / 3, clockwise=False), _stroke("green", 3)),
            (SparseStreakRing.random(rng=rng), _stroke("red", 2)),
            (BroadcastRing.random(rng=rng), _stroke("purple", 2)),
            (GaugeRing(tick_count=120, thickness_ratio=0.05), _stroke("black", 1)),
        ]),
    ]


def render_gallery(config: Optional[GalleryConfig] = None) -> Path:
    """Draw all gallery rows and save them as a PNG.

    Returns:
        Path of the written image.
    """
    config = config or GalleryConfig()
    rng = RNG(seed=config.seed)
    rows = build_rows(rng, config.cell_size)

    cell = config.cell_size
    n_rows = len(rows)
    n_cols = max(len(items) for _, items in rows)
    pad = cell * CELL_PADDING

    width_in = config.img_size[0] / config.dpi
    height_in = config.img_size[1] / config.dpi
    fig, ax = plt.subplots(figsize=(width_in, height_in), frameon=False)
    try:
        ax.set_xlim(0, n_cols * cell)
        ax.set_ylim(0, n_rows * cell)
        ax.set_aspect("equal")
        ax.axis("off")

        for row_index, (title, items) in enumerate(rows):
            y0 = (n_rows - 1 - row_index) * cell
            ax.text(0, y0 + cell, title, fontsize=10, va="bottom")
            for col_index, (shape, style) in enumerate(items):
                rect = (col_index * cell + pad, y0 + pad, cell - 2 * pad, cell - 2 * pad)
                if isinstance(shape, RingShape):
                    ax.add_patch(shape.patch(rect, **style))
                else:
                    shape.draw(ax, rect)
            logger.debug(f"Row '{title}': {len(items)} shapes drawn")

        ts = time.strftime("%Y%m%d_%H%M%S")
        out_path = config.output_dir / f"gallery_{ts}.png"
        fig.savefig(out_path, dpi=config.dpi)
    finally:
        plt.close(fig)

    logger.info(f"Gallery written: {out_path}")
    return out_path


def main(config: Optional[GalleryConfig] = None) -> Path:
    config = config or GalleryConfig()
    log_path = configure_logging(
        level=config.logger_level,
        log_dir=config.output_dir / "logs",
        name="ringshapes",
        run_prefix="gallery",
    )
    logger.info(f"GalleryConfig: {asdict(config)}")
    logger.info(f"Logs written to: {log_path}")
    return render_gallery(config)


if __name__ == "__main__":
    main()
