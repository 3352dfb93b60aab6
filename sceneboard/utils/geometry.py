"""Leaf-node geometry helpers over (n, 2) point arrays. No shape imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def as_points(points) -> NDArray[np.float64]:
    """Coerce a sequence of (x, y) pairs to a float (n, 2) array."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.zeros((0, 2))
    return arr.reshape(-1, 2)


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over the implicitly closed polygon. Positive = CCW, Negative = CW."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def arc_lengths(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Cumulative arc-length along a point sequence."""
    diffs = np.diff(points, axis=0)
    segment_lengths = np.sqrt(np.sum(diffs**2, axis=1))
    return np.concatenate([[0.0], np.cumsum(segment_lengths)])


def drop_consecutive_duplicates(
    points: NDArray[np.float64], closed: bool = False, eps: float = 1e-12
) -> NDArray[np.float64]:
    """Remove zero-length segments. For closed input the seam is checked too."""
    if len(points) == 0:
        return points
    keep = [0]
    for i in range(1, len(points)):
        if np.hypot(*(points[i] - points[keep[-1]])) > eps:
            keep.append(i)
    result = points[keep]
    if closed and len(result) > 1 and np.hypot(*(result[-1] - result[0])) <= eps:
        result = result[:-1]
    return result


def rotate_points(points: NDArray[np.float64], angle: float, center: tuple[float, float] = (0.0, 0.0)) -> NDArray[np.float64]:
    """Rotate an (n, 2) array counterclockwise about a center."""
    c, s = np.cos(angle), np.sin(angle)
    rot = np.array([[c, -s], [s, c]])
    origin = np.asarray(center, dtype=np.float64)
    return (points - origin) @ rot.T + origin
