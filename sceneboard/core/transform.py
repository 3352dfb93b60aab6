"""2×3 affine transform matrices.

A TransformMatrix maps (x, y) to (m11 x + m12 y + m13, m21 x + m22 y + m23).
Composition follows matrix multiplication: ``(T * U).apply(p) == T.apply(U.apply(p))``.
"""

from __future__ import annotations

import enum
import math
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from sceneboard.core.point import Point

if TYPE_CHECKING:
    from sceneboard.core.rect import Rect


class RotationType(enum.Enum):
    """Angle-sign convention of the target coordinate system."""

    POSTSCRIPT = "postscript"  # y axis up, positive angles counterclockwise
    SVG = "svg"  # y axis down


class TransformMatrix:
    __slots__ = ("_m",)

    def __init__(self, m11=1.0, m12=0.0, m13=0.0, m21=0.0, m22=1.0, m23=0.0) -> None:
        self._m = np.array([[m11, m12, m13], [m21, m22, m23]], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> TransformMatrix:
        t = cls()
        t._m = np.array(arr[:2, :3], dtype=np.float64)
        return t

    @classmethod
    def identity(cls) -> TransformMatrix:
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float) -> TransformMatrix:
        return cls(1.0, 0.0, dx, 0.0, 1.0, dy)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None, center: Point | None = None) -> TransformMatrix:
        if sy is None:
            sy = sx
        s = cls(sx, 0.0, 0.0, 0.0, sy, 0.0)
        if center is None:
            return s
        return cls.translation(center.x, center.y) * s * cls.translation(-center.x, -center.y)

    @classmethod
    def rotation(
        cls,
        angle: float,
        center: Point | None = None,
        rotation_type: RotationType = RotationType.POSTSCRIPT,
    ) -> TransformMatrix:
        c, s = math.cos(angle), math.sin(angle)
        if rotation_type is RotationType.SVG:
            r = cls(c, s, 0.0, -s, c, 0.0)
        else:
            r = cls(c, -s, 0.0, s, c, 0.0)
        if center is None:
            return r
        return cls.translation(center.x, center.y) * r * cls.translation(-center.x, -center.y)

    @classmethod
    def fit_to_page(
        cls,
        bbox: Rect,
        page_width: float,
        page_height: float,
        margin: float = 0.0,
        flip_y: bool = True,
    ) -> TransformMatrix:
        """Device transform fitting a scene bbox into a page, centered, uniform scale.

        With flip_y the y-up scene is mapped to a y-down page (SVG-style).
        """
        avail_w = page_width - 2 * margin
        avail_h = page_height - 2 * margin
        if bbox.width == 0.0 and bbox.height == 0.0:
            scale = 1.0
        elif bbox.width == 0.0:
            scale = avail_h / bbox.height
        elif bbox.height == 0.0:
            scale = avail_w / bbox.width
        else:
            scale = min(avail_w / bbox.width, avail_h / bbox.height)
        dx = margin + (avail_w - scale * bbox.width) / 2 - scale * bbox.left
        if flip_y:
            dy = margin + (avail_h - scale * bbox.height) / 2 + scale * bbox.top
            return cls(scale, 0.0, dx, 0.0, -scale, dy)
        dy = margin + (avail_h - scale * bbox.height) / 2 - scale * bbox.bottom
        return cls(scale, 0.0, dx, 0.0, scale, dy)

    # -- access ---------------------------------------------------------------

    @property
    def array(self) -> NDArray[np.float64]:
        return self._m.copy()

    def homogeneous(self) -> NDArray[np.float64]:
        """3×3 homogeneous form."""
        return np.vstack([self._m, [0.0, 0.0, 1.0]])

    @property
    def linear(self) -> NDArray[np.float64]:
        return self._m[:, :2].copy()

    @property
    def offset(self) -> Point:
        return Point(float(self._m[0, 2]), float(self._m[1, 2]))

    def linear_scale(self) -> float:
        """Largest singular value of the linear part."""
        return float(np.linalg.svd(self._m[:, :2], compute_uv=False)[0])

    def determinant(self) -> float:
        return float(np.linalg.det(self._m[:, :2]))

    def is_identity(self) -> bool:
        return bool(np.allclose(self._m, np.eye(2, 3)))

    # -- algebra --------------------------------------------------------------

    def __mul__(self, other: TransformMatrix) -> TransformMatrix:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        return TransformMatrix.from_array(self.homogeneous() @ other.homogeneous())

    def __add__(self, delta: Point) -> TransformMatrix:
        """Same linear part, translation shifted by delta."""
        if not isinstance(delta, Point):
            return NotImplemented
        t = TransformMatrix.from_array(self._m)
        t._m[0, 2] += delta.x
        t._m[1, 2] += delta.y
        return t

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        return bool(np.allclose(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    def inverse(self) -> TransformMatrix:
        return TransformMatrix.from_array(np.linalg.inv(self.homogeneous()))

    def apply(self, p: Point) -> Point:
        m = self._m
        return Point(
            float(m[0, 0] * p.x + m[0, 1] * p.y + m[0, 2]),
            float(m[1, 0] * p.x + m[1, 1] * p.y + m[1, 2]),
        )

    def apply_array(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        """Map an (n, 2) array of points."""
        if len(points) == 0:
            return np.zeros((0, 2))
        return points @ self._m[:, :2].T + self._m[:, 2]

    def apply_length(self, value: float) -> float:
        """Map a length with the uniform part of the transform (sqrt |det|)."""
        return value * math.sqrt(abs(self.determinant()))

    def __repr__(self) -> str:
        m = self._m
        return (
            f"TransformMatrix({m[0, 0]:g}, {m[0, 1]:g}, {m[0, 2]:g}, "
            f"{m[1, 0]:g}, {m[1, 1]:g}, {m[1, 2]:g})"
        )
