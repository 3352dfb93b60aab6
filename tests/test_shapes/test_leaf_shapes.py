"""Tests for Dot, Line, Arrow, Polyline and Text."""

import math

import pytest

from sceneboard.config import GeometryConfig
from sceneboard.context import BoardContext
from sceneboard.core.path import Path
from sceneboard.core.point import Point, almost_equal
from sceneboard.core.rect import Rect
from sceneboard.shapes import Arrow, Dot, Line, Polyline, ShapeKind, Text, rectangle, triangle
from sceneboard.style import Color, LineCap, LineWidthFlag


def test_dot_bounding_box():
    d = Dot(1, 2, line_width=2)
    assert d.bounding_box() == Rect(1, 2, 0, 0)
    assert d.bounding_box(LineWidthFlag.USE) == Rect(0, 3, 2, 2)


def test_line_bounding_box():
    line = Line(0, 0, 10, 0, line_width=2)
    assert line.bounding_box() == Rect(0, 0, 10, 0)
    assert line.bounding_box(LineWidthFlag.USE).extents() == pytest.approx((0, -1, 10, 1))
    line.style.line_cap = LineCap.SQUARE
    box = line.bounding_box(LineWidthFlag.USE)
    assert box.left == pytest.approx(-1)
    assert box.right == pytest.approx(11)


def test_style_overrides():
    line = Line(0, 0, 1, 1, line_width=3, pen_color=Color.RED)
    assert line.line_width == 3
    assert line.style.pen_color == Color.RED
    assert line.kind is ShapeKind.LINE
    assert line.name == "line"


def test_arrow_head_and_bounding_box():
    arrow = Arrow(0, 0, 10, 0, line_width=1)
    head = arrow.extremity()
    assert head.closed
    assert len(head) == 3
    assert head[0] == Point(10, 0)
    box = arrow.bounding_box()
    assert box.left == pytest.approx(0)
    assert box.right == pytest.approx(10)
    assert box.top == pytest.approx(10 * math.sin(0.3))
    assert box.bottom == pytest.approx(-10 * math.sin(0.3))


def test_arrow_shaft_stops_at_head_base():
    arrow = Arrow(0, 0, 20, 0, line_width=1)
    shaft = arrow.shaft()
    assert shaft[1].x == pytest.approx(20 - 10 * math.cos(0.3))


def test_arrow_head_follows_context_geometry():
    ctx = BoardContext(geometry=GeometryConfig(arrow_head_length=5.0, arrow_head_angle=0.5))
    arrow = Arrow(0, 0, 20, 0, line_width=1, context=ctx)
    assert arrow.head_length() == pytest.approx(5)
    assert arrow.extremity()[1].y == pytest.approx(5 * math.sin(0.5))
    assert arrow.clone().shaft()[1].x == pytest.approx(20 - 5 * math.cos(0.5))


def test_polyline_area_with_hole():
    square = rectangle(0, 4, 4, 4)
    square.add_hole(Path([Point(1, 1), Point(3, 1), Point(3, 3), Point(1, 3)]))
    assert square.area() == pytest.approx(12)
    assert square.contains(Point(0.5, 0.5))
    assert not square.contains(Point(2, 2))


def test_rectangle_and_triangle():
    r = rectangle(0, 2, 4, 2)
    assert r.closed
    assert len(r) == 4
    assert r.bounding_box() == Rect(0, 2, 4, 2)
    t = triangle(Point(0, 0), Point(4, 0), Point(0, 3))
    assert t.area() == pytest.approx(6)


def test_polyline_accepts_a_path():
    p = Path([Point(0, 0), Point(1, 0), Point(1, 1)])
    poly = Polyline(p, closed=True)
    assert poly.closed
    assert not p.closed
    poly.add_point(Point(0, 1))
    assert len(poly) == 4
    assert len(p) == 3


def test_polyline_outline_uses_style():
    poly = Polyline([Point(0, 0), Point(10, 0)], line_width=2)
    outline = poly.outline()
    assert outline.bounding_box().extents() == pytest.approx((0, -1, 10, 1))


def test_text_box_estimate():
    t = Text(0, 0, "abc", size=10)
    assert t.style.fill_color.is_null()
    assert t.bounding_box().extents() == pytest.approx((0, 0, 21.3, 10))


def test_text_rotation_follows_transforms():
    t = Text(0, 0, "abc", size=10)
    t.rotate(math.pi / 2, Point(0, 0))
    assert t.angle == pytest.approx(math.pi / 2)
    assert almost_equal(t.position, Point(0, 0))


def test_translate_and_move_center():
    r = rectangle(0, 2, 4, 2)
    r.translate(1, 1)
    assert r.bounding_box() == Rect(1, 3, 4, 2)
    r.move_center(0, 0)
    assert r.center() == Point(0, 0)


def test_resize_keeps_center():
    r = rectangle(0, 2, 4, 2)
    r.resize(8, 1)
    box = r.bounding_box()
    assert box.width == pytest.approx(8)
    assert box.height == pytest.approx(1)
    assert almost_equal(box.center, Point(2, 1))


def test_scale_to_width():
    r = rectangle(0, 2, 4, 2)
    r.scale_to_width(2)
    assert r.bounding_box().width == pytest.approx(2)
    assert r.bounding_box().height == pytest.approx(1)


def test_line_width_scaling_flag():
    scaling = BoardContext(line_width_scaling=True)
    fixed = BoardContext(line_width_scaling=False)
    a = Line(0, 0, 1, 0, context=scaling, line_width=2)
    b = Line(0, 0, 1, 0, context=fixed, line_width=2)
    a.scale(3)
    b.scale(3)
    assert a.line_width == 6
    assert b.line_width == 2
    # translation never touches the width
    a.translate(5, 5)
    assert a.line_width == 6


def test_clone_is_deep():
    r = rectangle(0, 2, 4, 2)
    c = r.clone()
    c.translate(10, 0)
    c.style.line_width = 5
    assert r.bounding_box() == Rect(0, 2, 4, 2)
    assert r.line_width == 1


def test_functional_variants_leave_original():
    r = rectangle(0, 2, 4, 2)
    moved = r.translated(1, 0)
    assert moved.bounding_box().left == 1
    assert r.bounding_box().left == 0


def test_scale_to_height_and_scaled():
    r = rectangle(0, 2, 4, 2)
    big = r.scaled(2)
    assert big.bounding_box().width == pytest.approx(8)
    assert r.bounding_box().width == pytest.approx(4)
    r.scale_to_height(4)
    assert r.bounding_box().height == pytest.approx(4)
    assert r.bounding_box().width == pytest.approx(8)


def test_rotate_deg_about_center():
    r = rectangle(0, 2, 4, 2)
    r.rotate_deg(90)
    box = r.bounding_box()
    assert box.width == pytest.approx(2)
    assert box.height == pytest.approx(4)
    assert almost_equal(box.center, Point(2, 1))


def test_color_with_alpha():
    red = Color(255, 0, 0)
    faded = red.with_alpha(128)
    assert faded.alpha == 128
    assert faded.red == 255
    assert red.alpha == 255
