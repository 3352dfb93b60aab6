"""Polygonal shapes backed by a Path (with optional holes)."""

from __future__ import annotations

from typing import Iterable

from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from sceneboard.core.path import Path
from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.stroke.outline import StrokeOutline, path_bounding_box, stroke_outline
from sceneboard.style import LineWidthFlag


class Polyline(Shape):
    kind = ShapeKind.POLYLINE

    def __init__(self, points: Iterable[Point] | Path = (), closed: bool = False, style=None, **kwargs) -> None:
        super().__init__(style, **kwargs)
        if isinstance(points, Path):
            self.path = points.copy()
            if closed:
                self.path.close()
        else:
            self.path = Path(points, closed=closed)

    @property
    def closed(self) -> bool:
        return self.path.closed

    @property
    def holes(self) -> list[Path]:
        return self.path.holes

    def add_point(self, p: Point) -> Polyline:
        self.path.add(p)
        return self

    def add_hole(self, hole: Path) -> Polyline:
        self.path.add_hole(hole)
        return self

    def __len__(self) -> int:
        return len(self.path)

    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        if flag is LineWidthFlag.USE:
            s = self.style
            return path_bounding_box(self.path, s.line_width, s.line_cap, s.line_join, s.miter_limit, self.geometry)
        return self.path.bounding_box()

    def transform(self, matrix: TransformMatrix) -> Polyline:
        self.path.transform(matrix)
        return self

    def outline(self) -> StrokeOutline:
        s = self.style
        return stroke_outline(self.path, s.line_width, s.line_cap, s.line_join, s.miter_limit, self.geometry)

    def to_polygon(self) -> Polygon:
        """Filled region, holes subtracted."""
        if len(self.path) < 3:
            return Polygon()
        return Polygon(self.path.points, [h.points for h in self.path.holes if len(h) >= 3])

    def area(self) -> float:
        return float(self.to_polygon().area)

    def contains(self, p: Point) -> bool:
        """True when p lies in the filled interior (not inside a hole)."""
        return bool(self.to_polygon().contains(ShapelyPoint(p.x, p.y)))


def rectangle(left: float, top: float, width: float, height: float, style=None, **kwargs) -> Polyline:
    """Closed rectangle; ``top`` is the upper (max y) edge."""
    points = [
        Point(left, top),
        Point(left + width, top),
        Point(left + width, top - height),
        Point(left, top - height),
    ]
    return Polyline(points, closed=True, style=style, **kwargs)


def triangle(p1: Point, p2: Point, p3: Point, style=None, **kwargs) -> Polyline:
    return Polyline([p1, p2, p3], closed=True, style=style, **kwargs)
