"""
Missile model for Planet Defense.

A missile falls straight down at a constant speed picked when it
spawns.  ``MissileManager`` owns the live list and provides the
removal helpers the game loop and hit tests need.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence

from planet_defense.config import (
    MISSILE_BODY_HEIGHT,
    MISSILE_BODY_WIDTH,
    MISSILE_FIN_HEIGHT,
    MISSILE_FIN_WIDTH,
)
from planet_defense.utils.functions import Point

log = logging.getLogger(__name__)


# ── Silhouette ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Silhouette:
    """Missile outline in missile-local coordinates (origin at centre).

    ``body`` is ``(left, top, width, height)``; the nose and fins are
    triangles.  The same geometry feeds both drawing and the
    shape-accurate hit test.
    """

    body: tuple[float, float, float, float]
    nose: tuple[Point, Point, Point]
    left_fin: tuple[Point, Point, Point]
    right_fin: tuple[Point, Point, Point]

    @classmethod
    def for_radius(cls, radius: float) -> "Silhouette":
        bw = radius * MISSILE_BODY_WIDTH
        bh = radius * MISSILE_BODY_HEIGHT
        fh = bh * MISSILE_FIN_HEIGHT
        fw = bw * MISSILE_FIN_WIDTH
        half_w = bw / 2
        half_h = bh / 2
        return cls(
            body=(-half_w, -half_h, bw, bh),
            nose=((-half_w, -half_h), (half_w, -half_h), (0.0, -bh)),
            left_fin=(
                (-half_w, half_h),
                (-half_w - fw, half_h + fh),
                (-half_w, half_h + fh),
            ),
            right_fin=(
                (half_w, half_h),
                (half_w + fw, half_h + fh),
                (half_w, half_h + fh),
            ),
        )

    @property
    def triangles(self) -> tuple[tuple[Point, Point, Point], ...]:
        return (self.nose, self.left_fin, self.right_fin)


# ── Missile ─────────────────────────────────────────────────────────────────


@dataclass
class Missile:
    """A falling projectile.

    ``speed`` is in pixels per second and never changes after spawn.
    ``y`` grows downward; spawned missiles start at ``-radius`` so they
    slide in from above the viewport.
    """

    x: float
    y: float
    radius: float
    speed: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def update(self, delta_ms: float) -> None:
        """Advance the missile by *delta_ms* milliseconds."""
        self.y += self.speed * delta_ms / 1000.0

    def has_landed(self, ground_level: float) -> bool:
        """Return True once the whole missile is below *ground_level*."""
        return self.y - self.radius > ground_level

    def silhouette(self) -> Silhouette:
        return Silhouette.for_radius(self.radius)


# ── Selection ───────────────────────────────────────────────────────────────


def nearest_impact_index(missiles: Sequence[Missile]) -> Optional[int]:
    """Index of the lowest missile on screen (largest y).

    Ties go to the earliest spawned missile.  Returns None when
    *missiles* is empty.
    """
    if not missiles:
        return None
    best = 0
    for i in range(1, len(missiles)):
        if missiles[i].y > missiles[best].y:
            best = i
    return best


# ── Missile Manager ─────────────────────────────────────────────────────────


@dataclass
class MissileManager:
    """Owns the live missiles in spawn order."""

    missiles: list[Missile] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.missiles)

    def __iter__(self) -> Iterator[Missile]:
        return iter(self.missiles)

    def __getitem__(self, index: int) -> Missile:
        return self.missiles[index]

    @property
    def active_count(self) -> int:
        return len(self.missiles)

    def add(self, missile: Missile) -> None:
        self.missiles.append(missile)

    def pop(self, index: int) -> Missile:
        """Remove and return the missile at *index*."""
        return self.missiles.pop(index)

    def advance(self, delta_ms: float) -> None:
        """Move every missile down by one frame's worth of travel."""
        for missile in self.missiles:
            missile.update(delta_ms)

    def reset(self) -> None:
        self.missiles = []
