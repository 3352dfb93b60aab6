"""A single stroked point."""

from __future__ import annotations

from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.style import LineWidthFlag


class Dot(Shape):
    kind = ShapeKind.DOT

    def __init__(self, x: float, y: float, style=None, **kwargs) -> None:
        super().__init__(style, **kwargs)
        self.position = Point(x, y)

    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        if flag is LineWidthFlag.USE:
            w = self.style.line_width
            return Rect(self.position.x - w / 2, self.position.y + w / 2, w, w)
        return Rect(self.position.x, self.position.y, 0.0, 0.0)

    def transform(self, matrix: TransformMatrix) -> Dot:
        self.position = matrix.apply(self.position)
        return self
