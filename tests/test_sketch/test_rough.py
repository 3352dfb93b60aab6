"""Tests for the rough (hand-drawn) filter."""

import pytest

from sceneboard.context import BoardContext
from sceneboard.core.point import Point
from sceneboard.errors import SceneError
from sceneboard.shapes import Arrow, Dot, Ellipse, Group, Line, ShapeKind, ShapeList, Text, circle, rectangle
from sceneboard.sketch import RoughMapper, make_rough
from sceneboard.style import Color, LineCap, LineJoin, SketchFilling

SEED = 1234


def _context(seed: int = SEED) -> BoardContext:
    ctx = BoardContext()
    ctx.seed(seed)
    return ctx


def test_rough_line_is_a_nearby_curve(seeded_context):
    result = make_rough(Line(0, 0, 10, 0), context=seeded_context)
    assert isinstance(result, ShapeList)
    assert len(result) == 1
    curve = result[0]
    assert curve.kind is ShapeKind.BEZIER
    # endpoints move by at most 1.5% of the segment length
    assert (curve.points[0] - Point(0, 0)).norm() <= 0.15 + 1e-12
    assert (curve.points[-1] - Point(10, 0)).norm() <= 0.15 + 1e-12
    assert curve.style.line_cap is LineCap.ROUND
    assert curve.style.line_join is LineJoin.ROUND


def test_rough_output_is_reproducible_under_a_seed():
    first = make_rough(rectangle(0, 10, 10, 10), repeat=2, context=_context())
    second = make_rough(rectangle(0, 10, 10, 10), repeat=2, context=_context())
    third = make_rough(rectangle(0, 10, 10, 10), repeat=2, context=_context(SEED + 1))
    points = [p for s in first.depth_first() for p in s.points]
    assert points == [p for s in second.depth_first() for p in s.points]
    assert points != [p for s in third.depth_first() for p in s.points]


def test_repeat_produces_copies(seeded_context):
    result = make_rough(Line(0, 0, 10, 0), repeat=3, context=seeded_context)
    assert len(result) == 1
    assert result[0].kind is ShapeKind.GROUP
    assert result.deep_size() == 3


def test_repeat_below_one_raises():
    with pytest.raises(SceneError):
        make_rough(Line(0, 0, 1, 0), repeat=0)
    with pytest.raises(SceneError):
        RoughMapper(repeat=-1)


def test_degenerate_line_is_kept(seeded_context):
    result = make_rough(Line(1, 1, 1, 1), context=seeded_context)
    assert result[0].kind is ShapeKind.LINE


def test_rough_polyline_follows_vertices(seeded_context):
    result = make_rough(rectangle(0, 10, 10, 10), context=seeded_context)
    curve = result[0]
    assert curve.kind is ShapeKind.BEZIER
    # closed rectangle: 4 edges, shared junctions
    assert len(curve.points) == 5
    assert len(curve.controls) == 8
    assert curve.style.fill_color.is_null()


def test_plain_filling_keeps_fill_on_first_copy(seeded_context):
    square = rectangle(0, 10, 10, 10, fill_color=Color.RED)
    result = make_rough(square, repeat=2, filling=SketchFilling.PLAIN, context=seeded_context)
    first, second = result[0]
    assert first.style.fill_color == Color.RED
    assert second.style.fill_color.is_null()


def test_default_filling_keeps_fill_color(seeded_context):
    square = rectangle(0, 10, 10, 10, fill_color=Color.RED)
    assert make_rough(square, context=seeded_context)[0].style.fill_color == Color.RED
    bare = make_rough(square, filling=SketchFilling.NO_FILLING, context=seeded_context)[0]
    assert bare.style.fill_color.is_null()


def test_hachure_filling_is_painted_first(seeded_context):
    square = rectangle(0, 1, 1, 1, fill_color=Color.BLUE)
    result = make_rough(
        square,
        filling=SketchFilling.STRAIGHT_HACHURE,
        spacing=0.25,
        context=seeded_context,
    )
    fill, outline = result[0]
    assert fill.kind is ShapeKind.GROUP
    assert len(fill) == 3
    assert all(line.style.pen_color == Color.BLUE for line in fill)
    assert outline.kind is ShapeKind.BEZIER
    assert outline.style.fill_color.is_null()


def test_rough_ellipse(seeded_context):
    result = make_rough(circle(0, 0, 10), context=seeded_context)
    curve = result[0]
    assert curve.kind is ShapeKind.BEZIER
    # 20 samples plus a two-vertex overlap
    assert len(curve.points) == 22
    for p in curve.points:
        assert 9 <= p.norm() <= 11


def test_rough_ellipse_with_crossing_hachures(seeded_context):
    e = Ellipse(0, 0, 4, 2, fill_color=Color.GRAY)
    result = make_rough(e, filling=SketchFilling.CROSSING_HACHURE, spacing=0.5, context=seeded_context)
    fill, outline = result[0]
    assert len(fill) > 0
    assert outline.kind is ShapeKind.BEZIER


def test_rough_arrow(seeded_context):
    result = make_rough(Arrow(0, 0, 20, 0), context=seeded_context)
    group = result[0]
    assert group.kind is ShapeKind.GROUP
    shaft, head = group
    assert shaft.kind is ShapeKind.BEZIER
    assert head.kind is ShapeKind.BEZIER
    assert shaft.style.fill_color.is_null()


def test_rough_bezier_moves_controls_with_points(seeded_context):
    line = make_rough(Line(0, 0, 10, 0), context=_context())[0]
    rough = make_rough(line, context=seeded_context)[0]
    for i in range(len(line.points)):
        shift = rough.points[i] - line.points[i]
        assert shift.norm() <= line.line_width + 1e-12
    first_shift = rough.points[0] - line.points[0]
    moved = rough.controls[0] - line.controls[0]
    assert moved.x == pytest.approx(first_shift.x)
    assert moved.y == pytest.approx(first_shift.y)


def test_unsupported_kinds_are_copied(seeded_context):
    scene = ShapeList([Text(0, 0, "label"), Dot(1, 1)])
    result = make_rough(scene, context=seeded_context)
    assert [s.kind for s in result] == [ShapeKind.TEXT, ShapeKind.DOT]


def test_rough_recurses_into_groups(seeded_context):
    group = Group([Line(0, 0, 10, 0), circle(0, 0, 5)])
    group.set_clipping_rectangle(-5, 5, 10, 10)
    result = make_rough(group, context=seeded_context)
    rough_group = result[0]
    assert rough_group.kind is ShapeKind.GROUP
    assert rough_group.has_clipping()
    assert [s.kind for s in rough_group] == [ShapeKind.BEZIER, ShapeKind.BEZIER]


def test_automatic_spacing_follows_line_width(seeded_context):
    square = rectangle(0, 1, 1, 1, fill_color=Color.BLUE, line_width=0.1)
    result = make_rough(square, filling=SketchFilling.STRAIGHT_HACHURE, context=seeded_context)
    fill, _ = result[0]
    # max(0.1, 3 * 0.1) = 0.3 apart
    assert len(fill) == 3
