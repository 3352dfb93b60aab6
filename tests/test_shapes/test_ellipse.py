"""Tests for Ellipse geometry and affine images."""

import math

import pytest

from sceneboard.core.point import Point, almost_equal
from sceneboard.core.transform import TransformMatrix
from sceneboard.shapes import Ellipse, circle
from sceneboard.style import LineWidthFlag


def test_circle():
    c = circle(0, 0, 2)
    assert c.is_circle
    assert c.bounding_box().extents() == pytest.approx((-2, -2, 2, 2))
    assert c.perimeter() == pytest.approx(4 * math.pi)


def test_rotated_bounding_box():
    e = Ellipse(0, 0, 2, 1, angle=math.pi / 2)
    assert e.bounding_box().extents() == pytest.approx((-1, -2, 1, 2))
    d = Ellipse(0, 0, 2, 1, angle=math.pi / 4)
    hw = math.sqrt(2.5)
    assert d.bounding_box().extents() == pytest.approx((-hw, -hw, hw, hw))


def test_bounding_box_with_line_width():
    c = circle(1, 1, 1, line_width=2)
    assert c.bounding_box(LineWidthFlag.USE).extents() == pytest.approx((-1, -1, 3, 3))


def test_non_uniform_scaling_of_circle():
    c = circle(0, 0, 1)
    c.transform(TransformMatrix.scaling(2, 1))
    assert c.x_radius == pytest.approx(2)
    assert c.y_radius == pytest.approx(1)
    assert c.angle == pytest.approx(0)
    assert not c.is_circle


def test_rotation_accumulates_angle():
    e = Ellipse(3, 4, 2, 1)
    e.rotate(0.5)
    assert e.angle == pytest.approx(0.5)
    assert (e.x_radius, e.y_radius) == pytest.approx((2, 1))
    assert almost_equal(e.center(), Point(3, 4))


def test_axis_angle_is_folded():
    e = Ellipse(0, 0, 2, 1)
    e.rotate(math.pi)
    assert e.angle == pytest.approx(0, abs=1e-9)
    e.rotate(3 * math.pi / 4)
    assert e.angle == pytest.approx(-math.pi / 4)


def test_shear_uses_principal_axes():
    c = circle(0, 0, 1)
    c.transform(TransformMatrix(1, 1, 0, 0, 1, 0))
    golden = (1 + math.sqrt(5)) / 2
    assert c.x_radius == pytest.approx(golden)
    assert c.y_radius == pytest.approx(1 / golden)
    # area preserved by a unit-determinant map
    assert c.x_radius * c.y_radius == pytest.approx(1)


def test_scale_about_center():
    e = Ellipse(5, 5, 2, 1, angle=0.3)
    e.scale(0.5)
    assert almost_equal(e.center(), Point(5, 5))
    assert (e.x_radius, e.y_radius) == pytest.approx((1, 0.5))
    assert e.angle == pytest.approx(0.3)


def test_sampled_path_starts_at_top():
    e = Ellipse(0, 0, 2, 1)
    path = e.sampled_path(4)
    assert path.closed
    assert len(path) == 4
    assert almost_equal(path[0], Point(0, 1), 1e-12)
    assert almost_equal(path[1], Point(-2, 0), 1e-12)
    assert not path.is_clockwise()


def test_point_at():
    e = Ellipse(1, 1, 2, 1, angle=math.pi / 2)
    assert almost_equal(e.point_at(0), Point(1, 3), 1e-12)
