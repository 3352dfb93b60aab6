"""2D point / vector value type."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from sceneboard.errors import SceneError
from sceneboard.utils.math_helpers import EPSILON


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __mul__(self, k: float) -> Point:
        return Point(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Point:
        return Point(self.x / k, self.y / k)

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        """z component of the 3D cross product. Positive when other is counterclockwise."""
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def normalised(self) -> Point:
        n = self.norm()
        if n == 0.0:
            raise SceneError(f"Cannot normalise zero-length vector {self}")
        return Point(self.x / n, self.y / n)

    def argument(self) -> float:
        return math.atan2(self.y, self.x)

    def rotated(self, angle: float, center: Point | None = None) -> Point:
        """Counterclockwise rotation, about the origin unless a center is given."""
        c, s = math.cos(angle), math.sin(angle)
        if center is None:
            return Point(c * self.x - s * self.y, s * self.x + c * self.y)
        dx, dy = self.x - center.x, self.y - center.y
        return Point(center.x + c * dx - s * dy, center.y + s * dx + c * dy)

    def rotated_pi2(self) -> Point:
        return Point(-self.y, self.x)

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def is_infinity(self) -> bool:
        return math.isinf(self.x) or math.isinf(self.y)

    def as_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    @classmethod
    def from_array(cls, arr) -> Point:
        return cls(float(arr[0]), float(arr[1]))


# "No solution" sentinel, e.g. intersection of parallel lines
INFINITY = Point(math.inf, math.inf)


def mix(a: Point, b: Point, t: float) -> Point:
    """(1 - t) a + t b."""
    return Point((1 - t) * a.x + t * b.x, (1 - t) * a.y + t * b.y)


def almost_equal(a: Point, b: Point, eps: float = EPSILON) -> bool:
    return abs(a.x - b.x) <= eps and abs(a.y - b.y) <= eps


def orthogonal(u: Point, v: Point, eps: float = EPSILON) -> bool:
    return abs(u.dot(v)) <= eps


def line_intersection(a1: Point, a2: Point, b1: Point, b2: Point, eps: float = 1e-9) -> Point:
    """Intersection of the infinite lines (a1, a2) and (b1, b2).

    Lines are taken in the form a x + b y + c = 0. Returns INFINITY when the
    lines are (nearly) parallel.
    """
    la, lb = a1.y - a2.y, a2.x - a1.x
    lc = a1.x * (a2.y - a1.y) + a1.y * (a1.x - a2.x)
    ma, mb = b1.y - b2.y, b2.x - b1.x
    mc = b1.x * (b2.y - b1.y) + b1.y * (b1.x - b2.x)
    det = la * mb - ma * lb
    if abs(det) <= eps * math.hypot(la, lb) * math.hypot(ma, mb):
        return INFINITY
    return Point((lb * mc - mb * lc) / det, (ma * lc - la * mc) / det)
