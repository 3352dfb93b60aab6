"""Tests for leaf math and geometry helpers."""

import math

import numpy as np
import pytest

from sceneboard.utils.geometry import (
    bbox,
    drop_consecutive_duplicates,
    rotate_points,
    signed_area,
)
from sceneboard.utils.math_helpers import ellipse_perimeter, solve_quadratic


def test_solve_quadratic():
    assert solve_quadratic(1, -3, 2) == pytest.approx((1, 2))
    assert solve_quadratic(1, 0, 1) == ()
    assert solve_quadratic(0, 2, -4) == (2,)
    assert solve_quadratic(1, -2, 1) == pytest.approx((1, 1))


def test_solve_quadratic_tolerates_round_off_at_tangency():
    roots = solve_quadratic(1.0, 2.0, 1.0 + 1e-12)
    assert len(roots) == 2
    assert roots[0] == pytest.approx(-1)


def test_ellipse_perimeter():
    assert ellipse_perimeter(1, 1) == pytest.approx(2 * math.pi)
    # degenerate ellipse is a doubled segment
    assert ellipse_perimeter(1, 0) == pytest.approx(4, rel=1e-3)


def test_area_and_winding():
    ccw = np.array([[0, 0], [2, 0], [2, 1], [0, 1]], dtype=float)
    assert signed_area(ccw) == pytest.approx(2)
    assert signed_area(ccw[::-1]) == pytest.approx(-2)
    assert signed_area(ccw[:2]) == 0.0


def test_bbox_and_duplicates():
    pts = np.array([[0, 0], [0, 0], [3, 1], [0, 0]], dtype=float)
    assert bbox(pts) == (0, 0, 3, 1)
    assert len(drop_consecutive_duplicates(pts)) == 3
    assert len(drop_consecutive_duplicates(pts, closed=True)) == 2


def test_rotation():
    square = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
    turned = rotate_points(square, math.pi / 2, (0.5, 0.5))
    np.testing.assert_allclose(turned[0], [1, 0], atol=1e-12)
