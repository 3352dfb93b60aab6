"""Ellipses and circles."""

from __future__ import annotations

import math

import numpy as np

from sceneboard.core.path import Path
from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.shapes.base import Shape, ShapeKind
from sceneboard.style import LineWidthFlag
from sceneboard.utils.math_helpers import ellipse_perimeter


def _fold_axis_angle(angle: float) -> float:
    """Axis orientation is defined modulo pi; keep it in (-pi/2, pi/2]."""
    while angle > math.pi / 2:
        angle -= math.pi
    while angle <= -math.pi / 2:
        angle += math.pi
    return angle


class Ellipse(Shape):
    """Ellipse with semi-axes ``x_radius`` / ``y_radius``, the x axis rotated by ``angle``."""

    kind = ShapeKind.ELLIPSE

    def __init__(
        self,
        x: float,
        y: float,
        x_radius: float,
        y_radius: float,
        angle: float = 0.0,
        style=None,
        **kwargs,
    ) -> None:
        super().__init__(style, **kwargs)
        self.center_point = Point(x, y)
        self.x_radius = float(x_radius)
        self.y_radius = float(y_radius)
        self.angle = float(angle)

    @property
    def is_circle(self) -> bool:
        return math.isclose(self.x_radius, self.y_radius, rel_tol=1e-12, abs_tol=1e-15)

    def axes(self) -> np.ndarray:
        """2×2 matrix whose columns are the rotated semi-axis vectors."""
        c, s = math.cos(self.angle), math.sin(self.angle)
        return np.array([[c, -s], [s, c]]) @ np.diag([self.x_radius, self.y_radius])

    def half_extents(self) -> tuple[float, float]:
        c, s = math.cos(self.angle), math.sin(self.angle)
        hw = math.sqrt((self.x_radius * c) ** 2 + (self.y_radius * s) ** 2)
        hh = math.sqrt((self.x_radius * s) ** 2 + (self.y_radius * c) ** 2)
        return hw, hh

    def bounding_box(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Rect:
        hw, hh = self.half_extents()
        if flag is LineWidthFlag.USE:
            hw += self.style.line_width / 2
            hh += self.style.line_width / 2
        return Rect(self.center_point.x - hw, self.center_point.y + hh, 2 * hw, 2 * hh)

    def center(self, flag: LineWidthFlag = LineWidthFlag.IGNORE) -> Point:
        return self.center_point

    def transform(self, matrix: TransformMatrix) -> Ellipse:
        self.center_point = matrix.apply(self.center_point)
        conj = matrix.linear @ self.axes()
        a1, a2 = conj[:, 0], conj[:, 1]
        n1, n2 = float(np.hypot(*a1)), float(np.hypot(*a2))
        if n1 == 0.0 or n2 == 0.0 or abs(float(a1 @ a2)) <= 1e-12 * n1 * n2:
            # Conjugate semi-axes still orthogonal: they are the principal axes
            self.x_radius, self.y_radius = n1, n2
            angle = math.atan2(a1[1], a1[0]) if n1 > 0 else math.atan2(-a2[0], a2[1])
        else:
            # Principal axes of the image from the quadratic form A·Aᵀ
            eigenvalues, eigenvectors = np.linalg.eigh(conj @ conj.T)
            self.x_radius = math.sqrt(max(float(eigenvalues[1]), 0.0))
            self.y_radius = math.sqrt(max(float(eigenvalues[0]), 0.0))
            major = eigenvectors[:, 1]
            angle = math.atan2(major[1], major[0])
        self.angle = _fold_axis_angle(angle)
        return self

    def perimeter(self) -> float:
        return ellipse_perimeter(self.x_radius, self.y_radius)

    def point_at(self, t: float) -> Point:
        """Point at parameter t (0 = end of the x semi-axis)."""
        v = self.axes() @ np.array([math.cos(t), math.sin(t)])
        return Point(self.center_point.x + float(v[0]), self.center_point.y + float(v[1]))

    def sampled_path(self, n: int = 20, from_top: bool = True) -> Path:
        """Closed n-vertex approximation, counterclockwise, starting at the top."""
        start = math.pi / 2 if from_top else 0.0
        return Path([self.point_at(start + 2 * math.pi * k / n) for k in range(n)], closed=True)


def circle(x: float, y: float, radius: float, style=None, **kwargs) -> Ellipse:
    return Ellipse(x, y, radius, radius, 0.0, style, **kwargs)
