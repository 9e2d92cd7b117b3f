"""
Hit-test strategies for Planet Defense.

Both strategies answer the same question (which missile does this
pointer press destroy?) and share one rule: when missiles exist but
none is under the pointer, the one closest to impact is taken so a
press is never wasted.

- ``RadialHitTest``: distance to the missile centre against an enlarged
  radius (forgiving on touch screens).
- ``ShapeHitTest``: point-in-silhouette against the drawn body, nose
  and fins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from planet_defense.config import HIT_ENLARGEMENT
from planet_defense.models.missile import Missile, nearest_impact_index
from planet_defense.utils.functions import (
    distance_squared,
    point_in_rect,
    point_in_triangle,
)


class HitTest(ABC):
    """Base class: subclasses implement ``find``."""

    name = "base"

    @abstractmethod
    def find(self, missiles: Sequence[Missile], x: float, y: float) -> Optional[int]:
        """Index of the first missile under (*x*, *y*), or None."""

    def select(self, missiles: Sequence[Missile], x: float, y: float) -> Optional[int]:
        """Index of the missile to destroy for a press at (*x*, *y*).

        Falls back to the lowest missile (largest y, earliest on ties)
        when nothing matches; None only when *missiles* is empty.
        """
        if not missiles:
            return None
        index = self.find(missiles, x, y)
        if index is not None:
            return index
        return nearest_impact_index(missiles)


class RadialHitTest(HitTest):
    name = "radial"

    def __init__(self, enlargement: float = HIT_ENLARGEMENT) -> None:
        self.enlargement = enlargement

    def hits(self, missile: Missile, x: float, y: float) -> bool:
        reach = missile.radius * self.enlargement
        return distance_squared(missile.x, missile.y, x, y) <= reach * reach

    def find(self, missiles: Sequence[Missile], x: float, y: float) -> Optional[int]:
        for i, missile in enumerate(missiles):
            if self.hits(missile, x, y):
                return i
        return None


class ShapeHitTest(HitTest):
    name = "shape"

    def hits(self, missile: Missile, x: float, y: float) -> bool:
        # Move the press into missile-local space
        lx = x - missile.x
        ly = y - missile.y
        shape = missile.silhouette()
        if point_in_rect(lx, ly, *shape.body):
            return True
        return any(point_in_triangle(lx, ly, *tri) for tri in shape.triangles)

    def find(self, missiles: Sequence[Missile], x: float, y: float) -> Optional[int]:
        for i, missile in enumerate(missiles):
            if self.hits(missile, x, y):
                return i
        return None


HIT_TESTS: dict[str, type[HitTest]] = {
    RadialHitTest.name: RadialHitTest,
    ShapeHitTest.name: ShapeHitTest,
}


def make_hit_test(name: str) -> HitTest:
    """Build a hit-test strategy by name (``"radial"`` or ``"shape"``)."""
    try:
        return HIT_TESTS[name]()
    except KeyError:
        raise ValueError(
            f"unknown hit test {name!r}; expected one of {sorted(HIT_TESTS)}"
        ) from None
