"""
test_streaks.py
---------------

Tests for offset and sparse streak rings.
"""

import logging
import math

import pytest
from matplotlib.path import Path as mplPath

from ringshapes.base import MIN_THICKNESS_RATIO
from ringshapes.geometry import Span
from ringshapes.rng import RNG
from ringshapes.streaks import (
    MAX_TRIM_FRACTION, OffsetStreakRing, SparseStreakRing, random_sparse_streaks,
)


# ---------------------------------------------------------------------------
# Offset streak ring
# ---------------------------------------------------------------------------
def test_offset_layers_span_exact_arc(square_200):
    ring = OffsetStreakRing(thickness_ratio=0.25, streak_count=8,
                            streak_arc=math.pi, streak_offset=0.2 * math.pi)
    layers = ring.layers(square_200)

    assert len(layers) == 8
    for i, (r, arc) in enumerate(layers):
        assert arc.sweep == pytest.approx(math.pi)
        assert arc.start == pytest.approx(0.2 * math.pi * (i + 1))


def test_offset_layer_radii_strictly_increase(square_200):
    layers = OffsetStreakRing(thickness_ratio=0.5, streak_count=5).layers(square_200)
    radii = [r for r, _ in layers]
    assert radii[0] == pytest.approx(50)
    assert all(b > a for a, b in zip(radii, radii[1:]))
    assert radii[-1] < 100


def test_offset_direction_flips_start_angles(square_200):
    cw = OffsetStreakRing(streak_count=3, clockwise=True).layers(square_200)
    ccw = OffsetStreakRing(streak_count=3, clockwise=False).layers(square_200)
    for (_, a), (_, b) in zip(cw, ccw):
        assert a.start == pytest.approx(-b.start)


def test_offset_path_one_subpath_per_layer(square_200, subpaths, polar):
    ring = OffsetStreakRing(streak_count=4, streak_arc=math.pi / 2)
    path = ring.path(square_200)
    subs = subpaths(path)
    assert len(subs) == 4

    for sub, (r, arc) in zip(subs, ring.layers(square_200)):
        r_first, _ = polar(sub.vertices[0], (100, 100))
        r_last, _ = polar(sub.vertices[-1], (100, 100))
        assert r_first == pytest.approx(r)
        assert r_last == pytest.approx(r)
        assert mplPath.CLOSEPOLY not in sub.codes


@pytest.mark.parametrize("given", [0.0, -0.5])
def test_offset_zero_thickness_keeps_layers_apart(given, square_200):
    ring = OffsetStreakRing(thickness_ratio=given, streak_count=4)
    assert ring.thickness_ratio == pytest.approx(MIN_THICKNESS_RATIO)
    radii = [r for r, _ in ring.layers(square_200)]
    assert radii == pytest.approx([99, 99.25, 99.5, 99.75])
    assert all(a < b for a, b in zip(radii, radii[1:]))


def test_offset_single_layer_and_clamp(square_200):
    layers = OffsetStreakRing(thickness_ratio=0.25, streak_count=0).layers(square_200)
    assert len(layers) == 1
    assert layers[0][0] == pytest.approx(75)


# ---------------------------------------------------------------------------
# Sparse streaks
# ---------------------------------------------------------------------------
def test_random_sparse_streaks_is_reproducible():
    a = random_sparse_streaks(6, (1, 6), rng=RNG(seed=7))
    b = random_sparse_streaks(6, (1, 6), rng=RNG(seed=7))
    assert a == b


@pytest.mark.parametrize("seed", [0, 1, 42, 2024])
def test_random_sparse_streaks_respect_slices(seed):
    layers = random_sparse_streaks(6, (2, 5), rng=RNG(seed=seed))
    assert len(layers) == 6

    for spans in layers:
        assert 2 <= len(spans) <= 5
        slice_width = 2 * math.pi / len(spans)
        min_sweep = slice_width * (1 - 2 * MAX_TRIM_FRACTION)
        for s in spans:
            assert s.sweep >= min_sweep - 1e-12
            assert s.sweep <= slice_width
        # streaks keep their slice order and never touch
        for a, b in zip(spans, spans[1:]):
            assert b.start > a.end
        assert spans[-1].end < spans[0].start + 2 * math.pi


def test_random_sparse_streaks_fixed_count():
    layers = random_sparse_streaks(3, (4, 4), rng=RNG(seed=3))
    assert [len(layer) for layer in layers] == [4, 4, 4]


def test_sparse_ring_path_layers(square_200, subpaths, polar):
    streaks = [
        [Span(0.0, 1.0)],
        [Span(0.5, 1.5), Span(3.0, 4.0)],
    ]
    ring = SparseStreakRing(thickness_ratio=0.5, streaks=streaks)
    assert ring.layer_count == 2

    subs = subpaths(ring.path(square_200))
    assert len(subs) == 3

    # r0 = 50, dr = 25
    radii = [polar(s.vertices[0], (100, 100))[0] for s in subs]
    assert radii == pytest.approx([50, 75, 75])
    r_end, a_end = polar(subs[2].vertices[-1], (100, 100))
    assert r_end == pytest.approx(75)
    assert a_end == pytest.approx(4.0)


def test_sparse_zero_thickness_keeps_layers_apart(square_200, subpaths, polar):
    ring = SparseStreakRing(thickness_ratio=0.0, streaks=[[Span(0.0, 1.0)], [Span(2.0, 3.0)]])
    assert ring.thickness_ratio == pytest.approx(MIN_THICKNESS_RATIO)
    radii = [polar(s.vertices[0], (100, 100))[0] for s in subpaths(ring.path(square_200))]
    assert radii == pytest.approx([99, 99.5])


def test_sparse_ring_random_classmethod(square_200, subpaths):
    ring = SparseStreakRing.random(layer_count=4, streaks_per_layer=(1, 3), rng=RNG(seed=11))
    assert ring.layer_count == 4
    total = sum(len(layer) for layer in ring.streaks)
    assert len(subpaths(ring.path(square_200))) == total


def test_sparse_ring_without_layers_is_empty(square_200, caplog):
    caplog.set_level(logging.WARNING, logger="ringshapes")
    path = SparseStreakRing().path(square_200)
    assert len(path.vertices) == 0
    assert "empty path" in caplog.text
