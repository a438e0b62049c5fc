"""
-------
conftest.py
-------
Shared pytest fixtures for ring shape tests.
"""

import math

import pytest
import numpy as np
import matplotlib
matplotlib.use("Agg")  # ensure headless backend for CI
import matplotlib.pyplot as plt
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch
from matplotlib.path import Path as mplPath

from ringshapes.rng import RNG
from ringshapes.path_utils import split_subpaths


# -----------------------------------------------------------------------------
# Core Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
    """
    Create and yield an isolated Matplotlib Figure/Axes pair.

    The figure is automatically closed after the test to avoid memory leaks.
    """
    fig, ax = plt.subplots(figsize=(4, 4))
    ax.set_xlim(0, 200)
    ax.set_ylim(0, 200)
    yield fig, ax
    plt.close(fig)


# -----------------------------------------------------------------------------
# Geometry fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def square_100():
    return (0.0, 0.0, 100.0, 100.0)


@pytest.fixture
def square_200():
    return (0.0, 0.0, 200.0, 200.0)


@pytest.fixture
def seeded_rng():
    """Deterministic RNG instance."""
    return RNG(seed=1234)


# -----------------------------------------------------------------------------
# Path inspection helpers
# -----------------------------------------------------------------------------
def _polar(point, center):
    """(radius, angle) of ``point`` around ``center``; angle in [0, 2*pi)."""
    dx, dy = point[0] - center[0], point[1] - center[1]
    return math.hypot(dx, dy), math.atan2(dy, dx) % (2 * math.pi)


def _anchors(path: mplPath) -> np.ndarray:
    """On-curve points: MOVETO/LINETO vertices and CURVE4 end points."""
    out = []
    codes = path.codes
    i = 0
    while i < len(codes):
        if codes[i] == mplPath.CURVE4:
            out.append(path.vertices[i + 2])
            i += 3
        elif codes[i] == mplPath.CLOSEPOLY:
            i += 1
        else:
            out.append(path.vertices[i])
            i += 1
    return np.array(out)


@pytest.fixture
def polar():
    return _polar


@pytest.fixture
def anchors():
    return _anchors


@pytest.fixture
def subpaths():
    return split_subpaths


# -----------------------------------------------------------------------------
# Rendering helpers
# -----------------------------------------------------------------------------
def _render_mask(path: mplPath, size: int = 200) -> np.ndarray:
    """Rasterize ``path`` (data units == pixels) and return the filled mask.

    Row 0 is the top of the image.
    """
    fig = Figure(figsize=(size / 100, size / 100), dpi=100)
    canvas = FigureCanvasAgg(fig)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, size)
    ax.set_ylim(0, size)
    ax.axis("off")
    ax.add_patch(PathPatch(path, facecolor="black", edgecolor="none", antialiased=False))
    canvas.draw()
    rgba = np.asarray(canvas.buffer_rgba())
    return rgba[..., 0] < 128


@pytest.fixture
def filled_pixel():
    """``filled_pixel(path, (x, y))``: True if Agg paints the pixel at (x, y)."""
    def _filled(path: mplPath, point, size: int = 200) -> bool:
        mask = _render_mask(path, size)
        x, y = int(point[0]), int(point[1])
        return bool(mask[size - 1 - y, x])
    return _filled
