"""
test_registry.py
----------------

Tests for shape-kind lookup.
"""

import numpy as np
import pytest
from matplotlib.path import Path as mplPath

from ringshapes.base import RingShape
from ringshapes.gauge import GaugeRing
from ringshapes.registry import SHAPES, make_shape, path_for


@pytest.mark.parametrize("kind", sorted(SHAPES))
def test_every_kind_builds_with_defaults(kind, square_200):
    shape = make_shape(kind)
    assert isinstance(shape, RingShape)
    assert isinstance(shape.path(square_200), mplPath)


def test_path_for_forwards_parameters(square_100):
    expected = GaugeRing(tick_count=4, thickness_ratio=0.5).path(square_100)
    got = path_for("gauge", square_100, tick_count=4, thickness_ratio=0.5)
    np.testing.assert_allclose(got.vertices, expected.vertices)
    assert list(got.codes) == list(expected.codes)


def test_unknown_kind_raises():
    with pytest.raises(ValueError, match="Unknown shape kind"):
        make_shape("spiral")


def test_bad_parameter_raises_type_error():
    with pytest.raises(TypeError):
        make_shape("gear", teeth=5)
