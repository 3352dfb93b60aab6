"""Hachure scan lines: parallel segments clipped to a polygon or an ellipse.

Scanning happens in a frame rotated by ``-angle`` about the shape center, so
scan lines are horizontal there; segments are rotated back afterwards.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from sceneboard.core.path import Path
from sceneboard.core.point import Point
from sceneboard.errors import SceneError
from sceneboard.shapes.base import Shape
from sceneboard.shapes.ellipse import Ellipse
from sceneboard.shapes.polyline import Polyline
from sceneboard.utils.geometry import rotate_points
from sceneboard.utils.math_helpers import solve_quadratic

logger = logging.getLogger(__name__)

Segment = tuple[Point, Point]

# Relative slack when counting scan lines, so an exact multiple of spacing is kept
_COUNT_EPS = 1e-9


def _rings(path: Path) -> list[np.ndarray]:
    return [r for r in [path.points] + [h.points for h in path.holes] if len(r) >= 3]


def path_hachures(path: Path, spacing: float, angle: float = 0.0, add_horizontals: bool = False) -> list[Segment]:
    """Scan-line fill of a polygon (holes excluded by even-odd pairing).

    Scan lines start one ``spacing`` above the lowest vertex and stop before
    the highest. With ``add_horizontals`` the polygon's own horizontal edges
    (in the scan frame) are emitted as extra segments.
    """
    if spacing <= 0:
        raise SceneError(f"Hachure spacing must be positive, got {spacing}")
    rings = _rings(path)
    if not rings:
        return []
    c = path.center()
    center = (c.x, c.y)

    starts, ends = [], []
    horizontals: list[tuple[np.ndarray, np.ndarray]] = []
    for ring in rings:
        pts = rotate_points(ring, -angle, center) if angle else ring
        nxt = np.roll(pts, -1, axis=0)
        flat = np.isclose(pts[:, 1], nxt[:, 1], rtol=0.0, atol=1e-12)
        for a, b in zip(pts[flat], nxt[flat]):
            horizontals.append((a, b))
        starts.append(pts[~flat])
        ends.append(nxt[~flat])
    a = np.vstack(starts)
    b = np.vstack(ends)

    result: list[np.ndarray] = []
    if len(a):
        swap = a[:, 1] > b[:, 1]
        lo = np.where(swap[:, None], b, a)
        hi = np.where(swap[:, None], a, b)
        inv_slope = (hi[:, 0] - lo[:, 0]) / (hi[:, 1] - lo[:, 1])
        ymin, ymax = float(lo[:, 1].min()), float(hi[:, 1].max())

        k = 1
        while True:
            y = ymin + k * spacing
            if y >= ymax:
                break
            # Half-open [ylo, yhi) so a shared vertex is counted once
            active = (lo[:, 1] <= y) & (y < hi[:, 1])
            xs = np.sort(lo[active, 0] + (y - lo[active, 1]) * inv_slope[active])
            for i in range(0, len(xs) - 1, 2):
                result.append(np.array([[xs[i], y], [xs[i + 1], y]]))
            k += 1

    if add_horizontals:
        result.extend(np.array([h0, h1]) for h0, h1 in horizontals)

    segments = []
    for seg in result:
        if angle:
            seg = rotate_points(seg, angle, center)
        segments.append((Point(float(seg[0, 0]), float(seg[0, 1])), Point(float(seg[1, 0]), float(seg[1, 1]))))
    return segments


def ellipse_hachures(ellipse: Ellipse, spacing: float, angle: float = 0.0) -> list[Segment]:
    """Analytic scan-line fill of an ellipse.

    Scan lines run from the lowest to the highest tangent line in the scan
    frame, ``floor(2 * half_height / spacing) + 1`` of them; the tangent
    chords are kept as zero-length segments.
    """
    if spacing <= 0:
        raise SceneError(f"Hachure spacing must be positive, got {spacing}")
    rx, ry = ellipse.x_radius, ellipse.y_radius
    if rx <= 0 or ry <= 0:
        return []

    # Implicit form A x² + B x y + C y² = 1 in the scan frame, centered on the ellipse
    alpha = ellipse.angle - angle
    ca, sa = math.cos(alpha), math.sin(alpha)
    a_coef = (ca / rx) ** 2 + (sa / ry) ** 2
    b_coef = math.sin(2 * alpha) * (1 / rx**2 - 1 / ry**2)
    c_coef = (sa / rx) ** 2 + (ca / ry) ** 2
    half_height = math.sqrt((rx * sa) ** 2 + (ry * ca) ** 2)

    count = math.floor(2 * half_height / spacing + _COUNT_EPS) + 1
    center = ellipse.center_point
    segments: list[Segment] = []
    for i in range(count):
        y = -half_height + i * spacing
        roots = solve_quadratic(a_coef, b_coef * y, c_coef * y * y - 1.0)
        if len(roots) != 2:
            continue
        p = Point(roots[0], y).rotated(angle) + center
        q = Point(roots[1], y).rotated(angle) + center
        segments.append((p, q))
    return segments


def shape_hachures(shape: Shape, spacing: float, angle: float = 0.0, add_horizontals: bool = False) -> list[Segment]:
    """Hachure segments for the fillable kinds (Polyline, Ellipse)."""
    if isinstance(shape, Ellipse):
        return ellipse_hachures(shape, spacing, angle)
    if isinstance(shape, Polyline):
        return path_hachures(shape.path, spacing, angle, add_horizontals)
    logger.warning("No hachure fill for %s shapes", shape.name)
    return []
