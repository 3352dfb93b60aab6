"""Tests for Rect bounding-box algebra (y axis up, top = max y)."""

from sceneboard.core.point import Point
from sceneboard.core.rect import Rect


def test_accessors():
    r = Rect(1, 10, 4, 3)
    assert r.right == 5
    assert r.bottom == 7
    assert r.center == Point(3, 8.5)
    assert r.extents() == (1, 7, 5, 10)
    assert r.corners == (Point(1, 10), Point(5, 10), Point(5, 7), Point(1, 7))


def test_from_corners_normalises_order():
    assert Rect.from_corners(Point(4, 0), Point(0, 3)) == Rect(0, 3, 4, 3)


def test_from_points():
    r = Rect.from_points([Point(1, 1), Point(-2, 5), Point(3, 0)])
    assert r == Rect(-2, 5, 5, 5)
    assert Rect.from_points([]).is_null()


def test_union():
    a = Rect(0, 10, 10, 10)
    b = Rect(5, 12, 10, 5)
    assert a | b == Rect(0, 12, 15, 12)
    assert a | b == b | a


def test_union_with_null_is_identity():
    r = Rect(3, 4, 1, 2)
    assert Rect() | r == r
    assert r | Rect() == r


def test_intersection():
    a = Rect(0, 10, 10, 10)
    b = Rect(5, 12, 10, 5)
    assert a & b == Rect(5, 10, 5, 3)


def test_disjoint_intersection_is_empty():
    inter = Rect(0, 1, 1, 1) & Rect(5, 10, 1, 1)
    assert inter.width == 0
    assert inter.height == 0


def test_union_contains_both():
    a = Rect(-3, 2, 1, 1)
    b = Rect(4, -1, 2, 6)
    u = a | b
    assert u.contains_rect(a)
    assert u.contains_rect(b)


def test_containment_is_inclusive():
    r = Rect(0, 1, 1, 1)
    assert r.contains(Point(1, 1))
    assert not r.strictly_contains(Point(1, 1))
    assert r.strictly_contains(Point(0.5, 0.5))


def test_intersects():
    a = Rect(0, 10, 10, 10)
    assert a.intersects(Rect(10, 20, 5, 10))
    assert not a.strictly_intersects(Rect(10, 20, 5, 10))
    assert a.strictly_intersects(Rect(5, 15, 10, 10))
    assert not a.intersects(Rect(20, 10, 1, 1))


def test_grow_and_translate():
    r = Rect(0, 1, 1, 1)
    assert r.grow(0.5) == Rect(-0.5, 1.5, 2, 2)
    assert r.translated(2, 3) == Rect(2, 4, 1, 1)
