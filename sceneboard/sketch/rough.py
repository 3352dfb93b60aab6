"""Hand-drawn ("rough") renditions of shapes, with optional hachure filling.

Each stroked edge becomes ``repeat`` independently perturbed Bezier copies.
Perturbations are small fractions of the edge length and are drawn from the
context's numpy Generator, so output is reproducible only under a fixed seed.
"""

from __future__ import annotations

import logging
import math

from sceneboard.context import BoardContext, resolve
from sceneboard.core.path import Path
from sceneboard.core.point import Point, almost_equal, mix
from sceneboard.errors import SceneError
from sceneboard.shapes.base import Shape
from sceneboard.shapes.bezier import Bezier
from sceneboard.shapes.composite import Group, ShapeList
from sceneboard.shapes.ellipse import Ellipse
from sceneboard.shapes.line import Arrow, Line
from sceneboard.shapes.polyline import Polyline
from sceneboard.shapes.visitor import ShapeMapper
from sceneboard.sketch.hachure import shape_hachures
from sceneboard.style import Color, LineCap, LineJoin, SketchFilling, Style
from sceneboard.utils.geometry import drop_consecutive_duplicates

logger = logging.getLogger(__name__)


class RoughMapper(ShapeMapper):
    def __init__(
        self,
        repeat: int = 1,
        filling: SketchFilling = SketchFilling.NO_FILLING,
        angle: float = 0.0,
        spacing: float = 0.0,
        context: BoardContext | None = None,
    ) -> None:
        super().__init__()
        if repeat < 1:
            raise SceneError(f"Rough repeat count must be at least 1, got {repeat}")
        self.repeat = repeat
        self.filling = filling
        self.angle = angle
        # 0 = automatic, derived from each shape's line width
        self.spacing = spacing
        self.context = resolve(context)
        self._cfg = self.context.geometry

    # -- random displacements -------------------------------------------------

    def slid(self, p: Point, radius: float) -> Point:
        """p moved in a random direction by 15% to 100% of radius."""
        rng = self.context.rng
        r = radius * (0.15 + rng.random() * 0.85)
        theta = rng.uniform(0.0, 2 * math.pi)
        return p.translated(r * math.cos(theta), r * math.sin(theta))

    def slid_away_from_segment(self, p: Point, a: Point, b: Point) -> Point:
        ab = b - a
        magnitude = ab.norm() * self._cfg.rough_midpoint_offset
        r = magnitude * (self.context.rng.random() * 2.0 - 1.0)
        return p + ab.normalised().rotated_pi2() * r

    def slid_in_box(self, p: Point, u: Point, u_mag: float, v: Point, v_mag: float) -> Point:
        rng = self.context.rng
        return p + u * rng.uniform(-u_mag, u_mag) + v * rng.uniform(-v_mag, v_mag)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _rough_style(style: Style) -> Style:
        return style.copy(line_cap=LineCap.ROUND, line_join=LineJoin.ROUND)

    def _spacing(self, style: Style) -> float:
        if self.spacing > 0:
            return self.spacing
        return max(self._cfg.min_hachure_spacing, style.line_width * 3)

    def _stroke(
        self,
        a: Point,
        b: Point,
        style: Style,
        start_radius: float,
        end: Point | None = None,
        end_radius: float | None = None,
    ) -> Bezier:
        """One perturbed interpolating Bezier standing in for segment [a, b]."""
        ab = b - a
        u = ab.normalised()
        v = u.rotated_pi2()
        p0 = self.slid(a, start_radius)
        p1 = self.slid_away_from_segment(mix(a, b, 0.5), a, b)
        p2 = self.slid_in_box(mix(a, b, 0.75), u, ab.norm() * self._cfg.rough_box_along, v, start_radius)
        p3 = self.slid(end if end is not None else b, end_radius if end_radius is not None else start_radius)
        return Bezier.interpolation(p0, p1, p2, p3, style, context=self.context)

    def _fill(self, shape: Shape, style: Style, add_horizontals: bool = False) -> Group:
        hstyle = style.copy(pen_color=shape.style.fill_color, fill_color=Color.NULL)
        return hachures(
            shape,
            hstyle,
            self.filling,
            self._spacing(style),
            self.angle,
            add_horizontals=add_horizontals,
            context=self.context,
        )

    @staticmethod
    def _wrap(parts: list[Shape]) -> Shape:
        if len(parts) == 1:
            return parts[0]
        return Group(parts)

    # -- per-kind mapping -----------------------------------------------------

    def visit_shape(self, shape: Shape) -> Shape:
        logger.warning("Rough filter leaves %s shapes unchanged", shape.name)
        return shape.clone()

    def visit_line(self, line: Line) -> Shape:
        if almost_equal(line.a, line.b):
            return line.clone()
        radius = self._cfg.rough_endpoint_radius * line.length()
        style = self._rough_style(line.style)
        return self._wrap([self._stroke(line.a, line.b, style, radius) for _ in range(self.repeat)])

    def visit_arrow(self, arrow: Arrow) -> Shape:
        if almost_equal(arrow.a, arrow.b):
            return arrow.clone()
        radius = self._cfg.rough_endpoint_radius * arrow.length()
        style = self._rough_style(arrow.style).copy(fill_color=Color.NULL)
        head = arrow.extremity()
        head_center = Point.from_array(head.points.mean(axis=0))
        parts: list[Shape] = [
            self._stroke(arrow.a, arrow.b, style, radius, end=head_center, end_radius=radius / 2)
            for _ in range(self.repeat)
        ]
        head_shape = Polyline(head, closed=True, style=self._rough_style(arrow.style))
        parts.append(RoughMapper(1, SketchFilling.PLAIN, context=self.context).visit_polyline(head_shape))
        return Group(parts)

    def visit_polyline(self, polyline: Polyline) -> Shape:
        raw = drop_consecutive_duplicates(polyline.path.points, polyline.closed)
        if len(raw) < 2:
            return polyline.clone()
        pts = [Point.from_array(row) for row in raw]
        if polyline.closed:
            pts.append(pts[0])

        style = self._rough_style(polyline.style)
        parts: list[Shape] = []
        if self.filling.is_hachure:
            parts.append(self._fill(polyline, style, add_horizontals=polyline.style.pen_color.is_null()))

        for k in range(self.repeat):
            a = self.slid(pts[0], self._cfg.rough_endpoint_radius * (pts[1] - pts[0]).norm())
            curve: Bezier | None = None
            for nxt in pts[1:]:
                radius = self._cfg.rough_endpoint_radius * (nxt - a).norm()
                b = self.slid(nxt, radius)
                ab = b - a
                u = ab.normalised()
                piece = Bezier.interpolation(
                    a,
                    self.slid_away_from_segment(mix(a, b, 0.5), a, b),
                    self.slid_in_box(mix(a, b, 0.75), u, ab.norm() * self._cfg.rough_box_along, u.rotated_pi2(), radius),
                    b,
                    style,
                    context=self.context,
                )
                curve = piece if curve is None else curve.extend(piece)
                a = b
            if k > 0 or self.filling is not SketchFilling.PLAIN:
                curve.style.fill_color = Color.NULL
            parts.append(curve)
        return self._wrap(parts)

    def visit_ellipse(self, ellipse: Ellipse) -> Shape:
        style = self._rough_style(ellipse.style)
        parts: list[Shape] = []
        if self.filling.is_hachure:
            parts.append(self._fill(ellipse, style))

        radius = ellipse.perimeter() * self._cfg.ellipse_rough_radius
        for k in range(self.repeat):
            sampled = list(ellipse.sampled_path(self._cfg.ellipse_rough_samples))
            # Overlap the start so the hand-drawn loop visibly closes
            loop = sampled + sampled[:2]
            jittered = Path([self.slid(p, radius) for p in loop], closed=False)
            curve = Bezier.smoothed_polyline(jittered, self._cfg.smoothing_tension, style, context=self.context)
            if k > 0 or self.filling is not SketchFilling.PLAIN:
                curve.style.fill_color = Color.NULL
            parts.append(curve)
        return self._wrap(parts)

    def visit_bezier(self, bezier: Bezier) -> Shape:
        result = bezier.clone()
        radius = bezier.style.line_width
        last = len(result.points) - 1
        for i, p in enumerate(result.points):
            moved = self.slid(p, radius)
            shift = moved - p
            result.points[i] = moved
            if i > 0:
                result.controls[2 * i - 1] = result.controls[2 * i - 1] + shift
            if i < last:
                result.controls[2 * i] = result.controls[2 * i] + shift
        return result


def hachures(
    shape: Shape,
    style: Style | None = None,
    filling: SketchFilling = SketchFilling.STRAIGHT_HACHURE,
    spacing: float = 0.1,
    angle: float = 0.0,
    add_horizontals: bool = False,
    context: BoardContext | None = None,
) -> Group:
    """Group of hachure strokes filling ``shape``.

    Crossing modes add a second pass at ``angle + pi/2``; sketchy modes
    roughen every stroke. The default stroke style is solid, round-capped,
    round-joined and unfilled.
    """
    ctx = resolve(context)
    if style is None:
        style = ctx.default_style(line_cap=LineCap.ROUND, line_join=LineJoin.ROUND, fill_color=Color.NULL)
    segments = shape_hachures(shape, spacing, angle, add_horizontals)
    if filling.is_crossing:
        segments += shape_hachures(shape, spacing, angle + math.pi / 2, False)

    mapper = RoughMapper(1, context=ctx) if filling.is_sketchy else None
    group = Group(context=ctx)
    for a, b in segments:
        line = Line.between(a, b, style, context=ctx)
        group.add(mapper.visit_line(line) if mapper is not None else line)
    logger.debug("Hachured %s with %d strokes", shape.name, len(group))
    return group


def make_rough(
    shape: Shape,
    repeat: int = 1,
    filling: SketchFilling = SketchFilling.PLAIN,
    angle: float = 0.0,
    spacing: float = 0.0,
    context: BoardContext | None = None,
) -> ShapeList:
    """Rough rendition of ``shape`` (recursing into composites), wrapped in a ShapeList.

    With the default PLAIN filling the first copy keeps the shape's fill color.
    """
    mapper = RoughMapper(repeat, filling, angle, spacing, context)
    result = ShapeList(context=context)
    result.add(shape.accept(mapper))
    return result
