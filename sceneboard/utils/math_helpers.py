"""Math helpers: quadratic roots and ellipse perimeter. No shape imports."""

from __future__ import annotations

import math

EPSILON = 1e-10


def solve_quadratic(a: float, b: float, c: float, tolerance: float = 1e-9) -> tuple[float, ...]:
    """Real roots of a x² + b x + c = 0, sorted ascending.

    A slightly negative discriminant (|Δ| ≤ tolerance · b²-scale) is treated as a
    tangency and yields the double root twice.
    """
    if a == 0.0:
        if b == 0.0:
            return ()
        return (-c / b,)
    delta = b * b - 4.0 * a * c
    scale = max(1.0, b * b, abs(4.0 * a * c))
    if delta < 0.0:
        if delta < -tolerance * scale:
            return ()
        delta = 0.0
    root = math.sqrt(delta)
    x1 = (-b - root) / (2.0 * a)
    x2 = (-b + root) / (2.0 * a)
    return (x1, x2) if x1 <= x2 else (x2, x1)


def ellipse_perimeter(a: float, b: float) -> float:
    """Ramanujan's second approximation of an ellipse perimeter."""
    if a + b == 0.0:
        return 0.0
    h = ((a - b) / (a + b)) ** 2
    return math.pi * (a + b) * (1 + 3 * h / (10 + math.sqrt(4 - 3 * h)))
