"""Math helpers: root finding and tolerant comparison. No engine imports."""

from __future__ import annotations

import math

# Leading coefficient below this is treated as zero (quadratic → linear).
_EPSILON = 1e-9


def solve_quadratic(a: float, b: float, c: float) -> list[float]:
    """Real roots of a·t² + b·t + c = 0 (0, 1 or 2 of them)."""
    if abs(a) < _EPSILON:
        if abs(b) < _EPSILON:
            return []
        return [-c / b]

    disc = b * b - 4.0 * a * c
    if disc < 0.0:
        return []
    sqrt_disc = math.sqrt(disc)
    return [(-b + sqrt_disc) / (2.0 * a), (-b - sqrt_disc) / (2.0 * a)]


def approximately(a: float, b: float, rel_tol: float = 1e-3) -> bool:
    """|a - b| within ``rel_tol`` of the larger magnitude (at least 1)."""
    return abs(a - b) <= rel_tol * max(1.0, abs(a), abs(b))


def lerp(p: tuple[float, float], q: tuple[float, float], t: float) -> tuple[float, float]:
    return (p[0] + (q[0] - p[0]) * t, p[1] + (q[1] - p[1]) * t)
