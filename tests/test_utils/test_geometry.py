"""Tests for geometry helpers."""

import numpy as np
import pytest
from shapely.geometry import LinearRing, Polygon

from clipmorph.utils.geometry import (
    bbox,
    normalize_to_unit_square,
    signed_area,
    total_squared_distance,
    winding_direction,
)

UNIT_SQUARE = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])


def test_signed_area_unit_square():
    assert signed_area(UNIT_SQUARE) == pytest.approx(1.0)
    assert signed_area(UNIT_SQUARE[::-1]) == pytest.approx(-1.0)


def test_signed_area_matches_shapely(rng):
    for _ in range(20):
        # Star-shaped polygon: random radii at sorted angles
        angles = np.sort(rng.uniform(0, 2 * np.pi, 12))
        radii = rng.uniform(1, 3, 12)
        pts = np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])
        if rng.random() < 0.5:
            pts = pts[::-1]
        sa = signed_area(pts)
        assert abs(sa) == pytest.approx(Polygon(pts).area)
        assert (sa > 0) == LinearRing(pts).is_ccw


def test_signed_area_closed_duplicate_point_is_harmless():
    closed = np.vstack([UNIT_SQUARE, UNIT_SQUARE[:1]])
    assert signed_area(closed) == pytest.approx(1.0)


def test_winding_direction():
    assert winding_direction(UNIT_SQUARE) == 1
    assert winding_direction(UNIT_SQUARE[::-1]) == -1
    assert winding_direction(np.array([[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]])) == 0
    assert winding_direction(np.empty((0, 2))) == 0


def test_bbox():
    pts = np.array([[2.0, 5.0], [-1.0, 3.0], [4.0, -2.0]])
    assert bbox(pts) == (-1.0, -2.0, 4.0, 5.0)
    assert bbox(np.empty((0, 2))) == (0.0, 0.0, 0.0, 0.0)


def test_normalize_fills_unit_square(rng):
    for _ in range(20):
        pts = rng.normal(size=(30, 2)) * rng.uniform(0.1, 50, size=2) + rng.uniform(-100, 100, size=2)
        out = normalize_to_unit_square(pts)
        assert np.all(out >= -1e-6)
        assert np.all(out <= 1 + 1e-6)
        xmin, ymin, xmax, ymax = bbox(out)
        assert max(xmax - xmin, ymax - ymin) == pytest.approx(1.0)


def test_normalize_centers_shorter_axis():
    wide = np.array([[0.0, 0.0], [40.0, 0.0], [40.0, 10.0], [0.0, 10.0]])
    out = normalize_to_unit_square(wide)
    np.testing.assert_allclose(out[:, 0], [0, 1, 1, 0])
    np.testing.assert_allclose(out[:, 1], [0.375, 0.375, 0.625, 0.625])


def test_normalize_preserves_aspect_ratio():
    pts = np.array([[10.0, 20.0], [16.0, 20.0], [16.0, 29.0]])
    out = normalize_to_unit_square(pts)
    xmin, ymin, xmax, ymax = bbox(out)
    assert (xmax - xmin) / (ymax - ymin) == pytest.approx(6 / 9)


def test_normalize_single_point_falls_back_to_unit_scale():
    out = normalize_to_unit_square(np.tile([3.0, 7.0], (5, 1)))
    np.testing.assert_allclose(out, np.full((5, 2), 0.5))


def test_normalize_empty():
    assert normalize_to_unit_square(np.empty((0, 2))).shape == (0, 2)


def test_total_squared_distance():
    a = np.array([[0.0, 0.0], [1.0, 1.0]])
    b = np.array([[3.0, 4.0], [1.0, 1.0]])
    assert total_squared_distance(a, b) == pytest.approx(25.0)
