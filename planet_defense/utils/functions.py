"""
Shared geometry helpers for Planet Defense.

Point containment tests used by the shape-accurate hit test, plus small
numeric helpers shared by the models.
"""

from __future__ import annotations

Point = tuple[float, float]


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Clamp *value* into ``[minimum, maximum]``."""
    return max(minimum, min(maximum, value))


def distance_squared(x1: float, y1: float, x2: float, y2: float) -> float:
    """Squared euclidean distance (no sqrt needed for radius checks)."""
    dx = x2 - x1
    dy = y2 - y1
    return dx * dx + dy * dy


def point_in_rect(
    px: float, py: float,
    left: float, top: float, width: float, height: float,
) -> bool:
    """Return True if (*px*, *py*) lies inside the axis-aligned rectangle."""
    return left <= px <= left + width and top <= py <= top + height


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def point_in_triangle(px: float, py: float, a: Point, b: Point, c: Point) -> bool:
    """Return True if (*px*, *py*) lies inside or on triangle *abc*.

    Works for either winding.  A degenerate (zero-area) triangle
    contains nothing.
    """
    if _cross(a, b, c) == 0:
        return False
    p = (px, py)
    d1 = _cross(a, b, p)
    d2 = _cross(b, c, p)
    d3 = _cross(c, a, p)
    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0
    return not (has_neg and has_pos)
