"""Stroke outline: the boundary polygon(s) of a path stroked with a given width.

Open path:  left offsets forward, end cap, right offsets backward, start cap.
Closed path: one ring per side, joined at every vertex including the seam.
Right-side offsets are produced as the LEFT side of the reversed traversal,
so a single join routine handles both sides.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Polygon
from shapely.ops import unary_union
from shapely.validation import make_valid

from sceneboard.config import DEFAULT_GEOMETRY, GeometryConfig
from sceneboard.core.path import Path
from sceneboard.core.point import Point, line_intersection
from sceneboard.core.rect import Rect
from sceneboard.style import LineCap, LineJoin
from sceneboard.utils.geometry import bbox, drop_consecutive_duplicates, signed_area

logger = logging.getLogger(__name__)


@dataclass
class StrokeOutline:
    """Result of stroking a path."""

    # Each polygon is an (n, 2) ring, implicitly closed
    polygons: list[NDArray[np.float64]] = field(default_factory=list)
    # Cap centers and miter apexes
    auxiliary_points: list[Point] = field(default_factory=list)
    closed: bool = False

    def is_empty(self) -> bool:
        return not self.polygons

    def all_points(self) -> NDArray[np.float64]:
        if not self.polygons:
            return np.zeros((0, 2))
        return np.vstack(self.polygons)

    def bounding_box(self) -> Rect:
        if not self.polygons:
            return Rect()
        return Rect.from_extents(*bbox(self.all_points()))

    def to_geometry(self):
        """Shapely geometry covered by the stroke."""
        rings = [r for r in self.polygons if len(r) >= 3]
        if not rings:
            return Polygon()
        if self.closed and len(rings) == 2:
            shell, hole = sorted(rings, key=lambda r: abs(signed_area(r)), reverse=True)
            poly = Polygon(shell, [hole])
        else:
            poly = unary_union([Polygon(r) for r in rings])
        if not poly.is_valid:
            poly = make_valid(poly)
        return poly


def _unit(p: Point) -> Point:
    return p / p.norm()


def _arc(center: Point, radius: float, start: float, sweep: float, segments: int) -> list[Point]:
    """Points on a circular arc, endpoints included, axis extremes included."""
    step = 2 * math.pi / max(segments, 4)
    n = max(1, math.ceil(abs(sweep) / step - 1e-9))
    angles = [start + sweep * k / n for k in range(n + 1)]
    # Axis-extreme angles strictly inside the sweep keep bounding boxes exact
    lo, hi = sorted((start, start + sweep))
    k = math.floor(lo / (math.pi / 2)) + 1
    while k * math.pi / 2 < hi:
        angles.append(k * math.pi / 2)
        k += 1
    angles.sort(reverse=sweep < 0)
    return [Point(center.x + radius * math.cos(a), center.y + radius * math.sin(a)) for a in angles]


def _join(
    v: Point,
    da: Point,
    db: Point,
    seg_a: float,
    seg_b: float,
    h: float,
    join: LineJoin,
    miter_limit: float,
    cfg: GeometryConfig,
    aux: list[Point],
) -> list[Point]:
    """Left-side offset points at vertex v between incoming da and outgoing db."""
    na, nb = da.rotated_pi2(), db.rotated_pi2()
    a = v + na * h
    b = v + nb * h
    turn = da.cross(db)
    dot = da.dot(db)

    if abs(turn) <= cfg.collinear_eps and dot > 0:
        return [a]

    if turn > cfg.collinear_eps:
        # Left turn: left side is the inner side
        p = line_intersection(a, a + da, b, b + db, cfg.parallel_eps)
        if p.is_infinity() or (p - v).norm() > math.hypot(h, min(seg_a, seg_b)):
            return [a, v, b]
        return [p]

    if join is LineJoin.ROUND:
        sweep = -abs(math.atan2(turn, dot))
        if abs(turn) <= cfg.collinear_eps:
            sweep = -math.pi
        pts = _arc(v, h, na.argument(), sweep, cfg.arc_segments)
        pts[0], pts[-1] = a, b
        return pts

    if join is LineJoin.MITER:
        # Interior angle between the two segments, in [0, pi]
        theta = math.acos(max(-1.0, min(1.0, -dot)))
        sin_half = math.sin(theta / 2)
        if sin_half > 0 and 1.0 / sin_half <= miter_limit:
            apex = v + _unit(na + nb) * (h / sin_half)
            aux.append(apex)
            return [apex]

    return [a, b]


def _cap(p: Point, d: Point, h: float, cap: LineCap, cfg: GeometryConfig) -> list[Point]:
    """Cap at p for travel direction d, from the left offset to the right offset."""
    n = d.rotated_pi2()
    left, right = p + n * h, p - n * h
    if cap is LineCap.SQUARE:
        ext = d * h
        return [left, left + ext, right + ext, right]
    if cap is LineCap.ROUND:
        pts = _arc(p, h, n.argument(), -math.pi, cfg.arc_segments)
        pts[0], pts[-1] = left, right
        return pts
    return [left, right]


def _drop_collinear(pts: NDArray[np.float64], closed: bool, eps: float) -> NDArray[np.float64]:
    """Drop vertices where the path continues straight through."""
    changed = True
    while changed and len(pts) > 2:
        changed = False
        n = len(pts)
        indices = range(n) if closed else range(1, n - 1)
        for i in indices:
            u = pts[i] - pts[i - 1]
            w = pts[(i + 1) % n] - pts[i]
            nu, nw = np.hypot(*u), np.hypot(*w)
            cross = (u[0] * w[1] - u[1] * w[0]) / (nu * nw)
            if abs(cross) <= eps and np.dot(u, w) > 0:
                pts = np.delete(pts, i, axis=0)
                changed = True
                break
    return pts


def _side(
    pts: list[Point],
    closed: bool,
    h: float,
    join: LineJoin,
    miter_limit: float,
    cfg: GeometryConfig,
    aux: list[Point],
) -> list[Point]:
    """Left offset chain along pts (joins only; no caps)."""
    m = len(pts)
    dirs = []
    lengths = []
    for i in range(m if closed else m - 1):
        seg = pts[(i + 1) % m] - pts[i]
        lengths.append(seg.norm())
        dirs.append(seg / lengths[-1])

    out: list[Point] = []
    if closed:
        for i in range(m):
            out.extend(_join(pts[i], dirs[i - 1], dirs[i], lengths[i - 1], lengths[i], h, join, miter_limit, cfg, aux))
        return out

    out.append(pts[0] + dirs[0].rotated_pi2() * h)
    for i in range(1, m - 1):
        out.extend(_join(pts[i], dirs[i - 1], dirs[i], lengths[i - 1], lengths[i], h, join, miter_limit, cfg, aux))
    return out


def stroke_outline(
    path: Path,
    width: float,
    cap: LineCap = LineCap.BUTT,
    join: LineJoin = LineJoin.MITER,
    miter_limit: float = 4.0,
    config: GeometryConfig | None = None,
) -> StrokeOutline:
    """Compute the stroked boundary of a path.

    Degenerate segments and straight-through vertices are skipped. Fewer than
    two distinct points produce an empty outline; a non-positive width yields
    the centerline itself.
    """
    cfg = config or DEFAULT_GEOMETRY
    closed = path.closed
    raw = drop_consecutive_duplicates(path.points, closed, cfg.duplicate_eps)
    if len(raw) < 2:
        logger.debug("Stroke outline skipped: %d distinct point(s)", len(raw))
        return StrokeOutline(closed=closed)
    if width <= 0:
        return StrokeOutline(polygons=[raw], closed=closed)

    raw = _drop_collinear(raw, closed, cfg.collinear_eps)
    if closed and len(raw) < 3:
        closed = False
    pts = [Point(float(x), float(y)) for x, y in raw]
    h = width / 2.0
    aux: list[Point] = []

    if closed:
        left = _side(pts, True, h, join, miter_limit, cfg, aux)
        right = _side(pts[::-1], True, h, join, miter_limit, cfg, aux)
        polygons = [_ring(left), _ring(right)]
        return StrokeOutline(polygons=polygons, auxiliary_points=aux, closed=True)

    d_end = _unit(pts[-1] - pts[-2])
    d_start = _unit(pts[1] - pts[0])
    ring = _side(pts, False, h, join, miter_limit, cfg, aux)
    ring.extend(_cap(pts[-1], d_end, h, cap, cfg))
    back = _side(pts[::-1], False, h, join, miter_limit, cfg, aux)
    ring.extend(back[1:])
    ring.extend(_cap(pts[0], -d_start, h, cap, cfg)[:-1])
    aux = [pts[0], pts[-1]] + aux
    return StrokeOutline(polygons=[_ring(ring)], auxiliary_points=aux, closed=False)


def _ring(points: list[Point]) -> NDArray[np.float64]:
    return drop_consecutive_duplicates(np.array([[p.x, p.y] for p in points], dtype=np.float64), closed=True)


def path_bounding_box(
    path: Path,
    width: float,
    cap: LineCap = LineCap.BUTT,
    join: LineJoin = LineJoin.MITER,
    miter_limit: float = 4.0,
    config: GeometryConfig | None = None,
) -> Rect:
    """Bounding box of the stroked path, falling back to the bare path box."""
    outline = stroke_outline(path, width, cap, join, miter_limit, config)
    if outline.is_empty():
        box = path.bounding_box()
        if len(path) and width > 0:
            return box.grow(width / 2)
        return box
    return outline.bounding_box()
