"""Polygonal paths with an open/closed flag and optional holes."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import ConvexHull, QhullError

from sceneboard.core.point import Point
from sceneboard.core.rect import Rect
from sceneboard.core.transform import TransformMatrix
from sceneboard.errors import SceneError
from sceneboard.utils.geometry import arc_lengths, as_points, signed_area

logger = logging.getLogger(__name__)


class Path:
    """Ordered vertices; a closed path never stores its closing vertex twice."""

    def __init__(
        self,
        points: Iterable[Point] | NDArray[np.float64] = (),
        closed: bool = False,
        holes: Iterable[Path] = (),
    ) -> None:
        if isinstance(points, np.ndarray):
            self._points = as_points(points).copy()
        else:
            self._points = as_points([(p.x, p.y) for p in points])
        self.closed = closed
        if closed:
            self._drop_closing_duplicate()
        self.holes: list[Path] = []
        for hole in holes:
            self.add_hole(hole)

    def _drop_closing_duplicate(self) -> None:
        if len(self._points) > 1 and np.array_equal(self._points[0], self._points[-1]):
            self._points = self._points[:-1]

    # -- container protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return Point.from_array(self._points[index])

    def __iter__(self) -> Iterator[Point]:
        for row in self._points:
            yield Point(float(row[0]), float(row[1]))

    def __repr__(self) -> str:
        kind = "closed" if self.closed else "open"
        return f"Path({len(self)} points, {kind}, {len(self.holes)} holes)"

    @property
    def points(self) -> NDArray[np.float64]:
        """(n, 2) copy of the vertices."""
        return self._points.copy()

    def is_empty(self) -> bool:
        return len(self._points) == 0

    def add(self, p: Point) -> Path:
        self._points = np.vstack([self._points, [p.x, p.y]])
        return self

    def extend(self, points: Iterable[Point]) -> Path:
        for p in points:
            self.add(p)
        return self

    def pop(self) -> Point:
        last = self[-1]
        self._points = self._points[:-1]
        return last

    def clear(self) -> Path:
        self._points = np.zeros((0, 2))
        self.holes = []
        return self

    def close(self) -> Path:
        self.closed = True
        self._drop_closing_duplicate()
        return self

    def open(self) -> Path:
        self.closed = False
        return self

    def add_hole(self, hole: Path) -> Path:
        h = hole.copy()
        h.holes = []
        h.close()
        self.holes.append(h)
        return self

    def copy(self) -> Path:
        p = Path(self._points, closed=self.closed)
        p.holes = [h.copy() for h in self.holes]
        return p

    # -- geometry -------------------------------------------------------------

    def bounding_box(self) -> Rect:
        if len(self._points) == 0:
            return Rect()
        xmin, ymin = self._points.min(axis=0)
        xmax, ymax = self._points.max(axis=0)
        return Rect.from_extents(float(xmin), float(ymin), float(xmax), float(ymax))

    def center(self) -> Point:
        return self.bounding_box().center

    def length(self) -> float:
        if len(self._points) < 2:
            return 0.0
        pts = np.vstack([self._points, self._points[:1]]) if self.closed else self._points
        return float(arc_lengths(pts)[-1])

    def signed_area(self) -> float:
        return signed_area(self._points)

    def is_clockwise(self) -> bool:
        """Clockwise in the y-up frame, i.e. negative shoelace area."""
        return self.signed_area() < 0

    def set_clockwise(self) -> Path:
        if not self.is_clockwise():
            self._points = self._points[::-1].copy()
        return self

    def set_counterclockwise(self) -> Path:
        if self.is_clockwise():
            self._points = self._points[::-1].copy()
        return self

    def convex_hull(self) -> Path:
        """Closed counterclockwise hull of the vertices (holes ignored)."""
        if len(self._points) < 3:
            return Path(self._points, closed=True)
        try:
            hull = ConvexHull(self._points)
        except QhullError as e:
            logger.warning("Convex hull failed on degenerate path: %s", e)
            return Path(self._points, closed=True)
        # 2D hull vertices are already in counterclockwise order
        return Path(self._points[hull.vertices], closed=True)

    # -- transforms -----------------------------------------------------------

    def transform(self, matrix: TransformMatrix) -> Path:
        self._points = matrix.apply_array(self._points)
        for hole in self.holes:
            hole.transform(matrix)
        return self

    def transformed(self, matrix: TransformMatrix) -> Path:
        return self.copy().transform(matrix)

    def translate(self, dx: float, dy: float) -> Path:
        return self.transform(TransformMatrix.translation(dx, dy))

    def rotate(self, angle: float, center: Point | None = None) -> Path:
        if center is None:
            center = self.center()
        return self.transform(TransformMatrix.rotation(angle, center))

    def scale(self, sx: float, sy: float | None = None) -> Path:
        """Scale about the bounding-box center, which stays in place."""
        return self.transform(TransformMatrix.scaling(sx, sy, self.center()))

    def move_center(self, p: Point) -> Path:
        delta = p - self.center()
        return self.translate(delta.x, delta.y)


def mix(a: Path, b: Path, t: float) -> Path:
    """Vertex-wise interpolation between two paths of equal size."""
    if len(a) != len(b):
        raise SceneError(f"Cannot mix paths of different sizes ({len(a)} vs {len(b)})")
    return Path((1 - t) * a.points + t * b.points, closed=a.closed)
