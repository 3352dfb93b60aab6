"""Straight segments and arrows."""

from __future__ import annotations

import math

from sceneboard.core.path import Path
from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.stroke.outline import path_bounding_box
from sceneboard.style import LineWidthFlag


class Line(Shape):
    kind = ShapeKind.LINE

    def __init__(self, x1: float, y1: float, x2: float, y2: float, style=None, **kwargs) -> None:
        super().__init__(style, **kwargs)
        self.a = Point(x1, y1)
        self.b = Point(x2, y2)

    @classmethod
    def between(cls, a: Point, b: Point, style=None, **kwargs) -> Line:
        return cls(a.x, a.y, b.x, b.y, style, **kwargs)

    def length(self) -> float:
        return (self.b - self.a).norm()

    def path(self) -> Path:
        return Path([self.a, self.b], closed=False)

    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        if flag is LineWidthFlag.USE:
            s = self.style
            return path_bounding_box(self.path(), s.line_width, s.line_cap, s.line_join, s.miter_limit, self.geometry)
        return Rect.from_points([self.a, self.b])

    def transform(self, matrix: TransformMatrix) -> Line:
        self.a = matrix.apply(self.a)
        self.b = matrix.apply(self.b)
        return self


class Arrow(Line):
    """A line ending with a triangular head at ``b``."""

    kind = ShapeKind.ARROW

    def _direction(self) -> Point:
        ab = self.b - self.a
        if ab.norm() == 0.0:
            return Point(1.0, 0.0)
        return ab.normalised()

    def head_length(self) -> float:
        return self.geometry.arrow_head_length * self.style.line_width

    def extremity(self) -> Path:
        """Closed triangle: tip, then the two barb points."""
        back = -self._direction() * self.head_length()
        angle = self.geometry.arrow_head_angle
        return Path([self.b, self.b + back.rotated(angle), self.b + back.rotated(-angle)], closed=True)

    def shaft(self) -> Path:
        """Shaft stopping at the head base."""
        cut = self.head_length() * math.cos(self.geometry.arrow_head_angle)
        end = self.b - self._direction() * min(cut, self.length())
        return Path([self.a, end], closed=False)

    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        head = self.extremity().bounding_box()
        if flag is LineWidthFlag.USE:
            s = self.style
            shaft = path_bounding_box(self.shaft(), s.line_width, s.line_cap, s.line_join, s.miter_limit, self.geometry)
        else:
            shaft = self.shaft().bounding_box()
        return shaft | head
