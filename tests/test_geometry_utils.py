import numpy as np
import pytest

from planegeometry import Circle, Ellipse, Vector2, config
from planegeometry.model.geometry_utils import (
    ellipse_to_polyline,
    polygon_to_polyline,
    polyline_length,
)


def test_polygon_ring_is_closed():
    square = [Vector2(0.0, 0.0), Vector2(2.0, 0.0), Vector2(2.0, 2.0), Vector2(0.0, 2.0)]
    pts = polygon_to_polyline(square)
    assert pts.shape == (5, 2)
    np.testing.assert_array_equal(pts[-1], [0.0, 0.0])
    assert polyline_length(pts) == pytest.approx(8.0)


def test_ellipse_polyline_default_resolution():
    pts = ellipse_to_polyline(Vector2(0.0, 0.0), 2.0, 1.0, Vector2(1.0, 0.0))
    assert pts.shape == (config.DEFAULT_POLYLINE_SEGMENTS + 1, 2)
    np.testing.assert_allclose(pts[0], [2.0, 0.0])


def test_ellipse_polyline_rejects_too_few_segments():
    with pytest.raises(ValueError):
        ellipse_to_polyline(Vector2(0.0, 0.0), 2.0, 1.0, Vector2(1.0, 0.0), n_segments=2)


def test_fine_polyline_length_approaches_perimeter():
    circle = Circle(Vector2(3.0, -1.0), 2.0)
    assert polyline_length(circle.to_polyline(2000)) == pytest.approx(circle.perimeter(), rel=1e-5)

    ellipse = Ellipse(Vector2(-3.0, 0.0), Vector2(3.0, 0.0), 2.0)
    assert polyline_length(ellipse.to_polyline(2000)) == pytest.approx(ellipse.perimeter(), rel=1e-3)
