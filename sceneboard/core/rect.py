"""Axis-aligned bounding boxes.

A Rect is stored as (left, top, width, height) where ``top`` is the MAXIMUM y
coordinate: the y axis points up and the box extends downward from top, so
``bottom = top - height``. All-zero is the null (empty) rect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from sceneboard.core.point import Point


@dataclass(frozen=True)
class Rect:
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_corners(cls, top_left: Point, bottom_right: Point) -> Rect:
        left = min(top_left.x, bottom_right.x)
        right = max(top_left.x, bottom_right.x)
        top = max(top_left.y, bottom_right.y)
        bottom = min(top_left.y, bottom_right.y)
        return cls(left, top, right - left, top - bottom)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> Rect:
        """Tight box around a point sequence; null when the sequence is empty."""
        it = iter(points)
        first = next(it, None)
        if first is None:
            return cls()
        rect = cls(first.x, first.y, 0.0, 0.0)
        for p in it:
            rect = rect.grow_to_contain(p)
        return rect

    @classmethod
    def from_extents(cls, xmin: float, ymin: float, xmax: float, ymax: float) -> Rect:
        return cls(xmin, ymax, xmax - xmin, ymax - ymin)

    # -- accessors ------------------------------------------------------------

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top - self.height

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def corners(self) -> tuple[Point, Point, Point, Point]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    @property
    def center(self) -> Point:
        return Point(self.left + self.width / 2, self.top - self.height / 2)

    def is_null(self) -> bool:
        return self.left == 0.0 and self.top == 0.0 and self.width == 0.0 and self.height == 0.0

    def extents(self) -> tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax), the layout used by utils.geometry.bbox."""
        return (self.left, self.bottom, self.right, self.top)

    # -- algebra --------------------------------------------------------------

    def union(self, other: Rect) -> Rect:
        if self.is_null():
            return other
        if other.is_null():
            return self
        left = min(self.left, other.left)
        top = max(self.top, other.top)
        right = max(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(left, top, right - left, top - bottom)

    def intersection(self, other: Rect) -> Rect:
        left = max(self.left, other.left)
        top = min(self.top, other.top)
        width = min(self.right, other.right) - left
        height = top - max(self.bottom, other.bottom)
        return Rect(left, top, max(width, 0.0), max(height, 0.0))

    __or__ = union
    __and__ = intersection

    def grow_to_contain(self, p: Point) -> Rect:
        left = min(self.left, p.x)
        right = max(self.right, p.x)
        top = max(self.top, p.y)
        bottom = min(self.bottom, p.y)
        return Rect(left, top, right - left, top - bottom)

    def grow(self, margin: float) -> Rect:
        return Rect(self.left - margin, self.top + margin, self.width + 2 * margin, self.height + 2 * margin)

    def translated(self, dx: float, dy: float) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.width, self.height)

    # -- predicates -----------------------------------------------------------

    def contains(self, p: Point) -> bool:
        return self.left <= p.x <= self.right and self.bottom <= p.y <= self.top

    def strictly_contains(self, p: Point) -> bool:
        return self.left < p.x < self.right and self.bottom < p.y < self.top

    def contains_rect(self, other: Rect) -> bool:
        return all(self.contains(c) for c in other.corners)

    def intersects(self, other: Rect) -> bool:
        return any(self.contains(c) for c in other.corners) or any(other.contains(c) for c in self.corners)

    def strictly_intersects(self, other: Rect) -> bool:
        return any(self.strictly_contains(c) for c in other.corners) or any(
            other.strictly_contains(c) for c in self.corners
        )
