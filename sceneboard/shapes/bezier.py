"""Piecewise cubic Bezier curves.

Points p0..pn and 2n control points: segment i runs from ``points[i]`` with
control ``controls[2i]`` to ``points[i+1]`` with control ``controls[2i+1]``.
Evaluation and exact extrema go through svgpathtools.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from svgpathtools import CubicBezier

from sceneboard.core.path import Path
from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.errors import SceneError
from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.stroke.outline import path_bounding_box
from sceneboard.style import LineJoin, LineWidthFlag


def _c(p: Point) -> complex:
    return complex(p.x, p.y)


class Bezier(Shape):
    kind = ShapeKind.BEZIER

    def __init__(self, points: Sequence[Point], controls: Sequence[Point], style=None, **kwargs) -> None:
        super().__init__(style, **kwargs)
        if len(points) < 2:
            raise SceneError(f"A Bezier curve needs at least 2 points, got {len(points)}")
        if len(controls) != 2 * (len(points) - 1):
            raise SceneError(
                f"Expected {2 * (len(points) - 1)} control points for {len(points)} points, got {len(controls)}"
            )
        self.points: list[Point] = list(points)
        self.controls: list[Point] = list(controls)

    @classmethod
    def interpolation(cls, p0: Point, p1: Point, p2: Point, p3: Point, style=None, **kwargs) -> Bezier:
        """Single cubic passing through p0..p3 at t = 0, 1/3, 2/3, 1."""
        c1 = (p0 * -5 + p1 * 18 - p2 * 9 + p3 * 2) / 6
        c2 = (p0 * 2 - p1 * 9 + p2 * 18 - p3 * 5) / 6
        return cls([p0, p3], [c1, c2], style, **kwargs)

    @classmethod
    def smoothed_polyline(cls, path: Path, tension: float = 0.75, style=None, **kwargs) -> Bezier:
        """Cardinal-spline smoothing through the path's vertices (closed paths loop)."""
        pts = list(path)
        if path.closed and pts:
            pts.append(pts[0])
        n = len(pts)
        tangents = []
        for i in range(n):
            if path.closed and (i == 0 or i == n - 1):
                prev, nxt = pts[-2], pts[1]
            else:
                prev, nxt = pts[max(i - 1, 0)], pts[min(i + 1, n - 1)]
            tangents.append((nxt - prev) * (tension / 3))
        controls: list[Point] = []
        for i in range(n - 1):
            controls.append(pts[i] + tangents[i] * 0.5)
            controls.append(pts[i + 1] - tangents[i + 1] * 0.5)
        return cls(pts, controls, style, **kwargs)

    def segments(self) -> list[CubicBezier]:
        return [
            CubicBezier(
                _c(self.points[i]),
                _c(self.controls[2 * i]),
                _c(self.controls[2 * i + 1]),
                _c(self.points[i + 1]),
            )
            for i in range(len(self.points) - 1)
        ]

    def extend(self, other: Bezier) -> Bezier:
        """Append another curve; a shared junction point is stored once."""
        if self.points[-1] == other.points[0]:
            self.points.extend(other.points[1:])
        else:
            # Straight connector segment between the two curves
            a, b = self.points[-1], other.points[0]
            self.controls.extend([a + (b - a) / 3, a + (b - a) * (2 / 3)])
            self.points.extend(other.points)
        self.controls.extend(other.controls)
        return self

    def discretized_path(self, samples_per_segment: int | None = None) -> Path:
        n = samples_per_segment or self.geometry.samples_per_segment
        pts: list[Point] = [self.points[0]]
        for seg in self.segments():
            for k in range(1, n + 1):
                z = seg.point(k / n)
                pts.append(Point(float(z.real), float(z.imag)))
        return Path(pts, closed=False)

    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        if flag is LineWidthFlag.USE:
            s = self.style
            return path_bounding_box(self.discretized_path(), s.line_width, s.line_cap, LineJoin.ROUND, s.miter_limit, self.geometry)
        box = Rect()
        for seg in self.segments():
            xmin, xmax, ymin, ymax = seg.bbox()
            box = box | Rect.from_extents(float(xmin), float(ymin), float(xmax), float(ymax))
        return box

    def transform(self, matrix: TransformMatrix) -> Bezier:
        pts = matrix.apply_array(np.array([[p.x, p.y] for p in self.points]))
        ctl = matrix.apply_array(np.array([[p.x, p.y] for p in self.controls]))
        self.points = [Point.from_array(row) for row in pts]
        self.controls = [Point.from_array(row) for row in ctl]
        return self
