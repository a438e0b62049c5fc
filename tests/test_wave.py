"""
test_wave.py
------------

Tests for Bezier wave rings.
"""

import math

import pytest
from matplotlib.path import Path as mplPath

from ringshapes.geometry import point_on_circle
from ringshapes.path_utils import contains_point_evenodd, signed_area
from ringshapes.wave import HollowWaveRing, WaveRing


# ---------------------------------------------------------------------------
# Parameter clamping
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("given,expected", [(0.0, 0.1), (0.5, 0.5), (2.0, 0.95)])
def test_amplitude_clamped(given, expected):
    assert WaveRing(amplitude_ratio=given).amplitude_ratio == pytest.approx(expected)


@pytest.mark.parametrize("given,expected", [(0, 1), (-3, 1), (16, 16), (100, 60)])
def test_frequency_clamped(given, expected):
    assert WaveRing(frequency=given).frequency == expected


def test_hollow_thickness_clamped():
    assert HollowWaveRing(thickness_ratio=0.0).thickness_ratio == pytest.approx(0.01)
    assert HollowWaveRing(thickness_ratio=1.0).thickness_ratio == pytest.approx(0.99)
    assert HollowWaveRing(amplitude_ratio=5).amplitude_ratio == pytest.approx(0.95)


# ---------------------------------------------------------------------------
# Solid wave
# ---------------------------------------------------------------------------
def test_wave_codes(square_200):
    path = WaveRing(amplitude_ratio=0.8, frequency=6).path(square_200)
    codes = list(path.codes)
    assert len(codes) == 1 + 6 * 2 * 3 + 1
    assert codes[0] == mplPath.MOVETO
    assert codes[-1] == mplPath.CLOSEPOLY
    assert codes.count(mplPath.CURVE4) == 36


def test_wave_anchors_alternate_peak_and_valley(square_200, anchors):
    ring = WaveRing(amplitude_ratio=0.8, frequency=6)
    pts = anchors(ring.path(square_200))
    half = math.pi / 6

    assert len(pts) == 13
    for k, p in enumerate(pts):
        r = 80 if k % 2 else 100
        assert tuple(p) == pytest.approx(point_on_circle((100, 100), r, k * half), abs=1e-9)


def test_wave_first_control_point_on_tangent(square_200):
    path = WaveRing(amplitude_ratio=0.8, frequency=6, outer_control_ratio=0.25).path(square_200)
    c = 2 * math.pi * 100 / 6 * 0.25
    assert tuple(path.vertices[1]) == pytest.approx((200, 100 + c))


def test_wave_radii_on_non_square_rect():
    ring = WaveRing(amplitude_ratio=0.5)
    assert ring.radii((0, 0, 300, 200)) == pytest.approx((100, 50))
    path = ring.path((0, 0, 300, 200))
    assert tuple(path.vertices[0]) == pytest.approx((250, 100))


def test_wave_is_filled_disc(square_200):
    path = WaveRing().path(square_200)
    assert contains_point_evenodd(path, (100, 100))
    assert signed_area(path) > 0


# ---------------------------------------------------------------------------
# Hollow wave
# ---------------------------------------------------------------------------
def test_hollow_wave_radii(square_200, subpaths, polar):
    ring = HollowWaveRing(amplitude_ratio=0.8, frequency=6, thickness_ratio=0.2)
    assert ring.thickness(square_200) == pytest.approx(20)

    subs = subpaths(ring.path(square_200))
    assert len(subs) == 2
    r_outer = max(polar(v, (100, 100))[0] for v in subs[0].vertices)
    r_inner = max(polar(v, (100, 100))[0] for v in subs[1].vertices)
    assert r_outer == pytest.approx(100, abs=1e-6)
    assert r_inner == pytest.approx(80, abs=1e-6)
    assert r_outer - r_inner == pytest.approx(ring.thickness(square_200), abs=1e-6)


def test_hollow_wave_fill(square_200):
    path = HollowWaveRing(thickness_ratio=0.2).path(square_200)
    center = (100, 100)
    assert not contains_point_evenodd(path, center)
    assert contains_point_evenodd(path, point_on_circle(center, 90, 0.0))
    assert not contains_point_evenodd(path, point_on_circle(center, 150, 0.0))


def test_hollow_wave_renders_hollow(square_200, filled_pixel):
    path = HollowWaveRing(thickness_ratio=0.2).path(square_200)
    assert not filled_pixel(path, (100, 100))
    assert filled_pixel(path, point_on_circle((100, 100), 90, 0.0))
