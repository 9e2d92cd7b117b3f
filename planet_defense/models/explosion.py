"""
Explosion model for Planet Defense.

Explosions are purely decorative: a circle that grows linearly from
zero to three times the destroyed missile's radius while fading out,
over a fixed 800 ms.  They never feed back into scoring or collisions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from planet_defense.config import (
    EXPLOSION_DEFAULT_BASE_RADIUS,
    EXPLOSION_DURATION,
    EXPLOSION_RADIUS_FACTOR,
)

if TYPE_CHECKING:
    from planet_defense.models.missile import Missile


# ── Explosion ──────────────────────────────────────────────────────────────


@dataclass
class Explosion:
    """A single expanding, fading explosion.

    The centre is fixed at creation.  Radius and alpha are derived from
    ``elapsed / duration`` on every update, so a long frame simply jumps
    ahead in the animation.
    """

    center_x: float
    center_y: float
    max_radius: float = EXPLOSION_DEFAULT_BASE_RADIUS * EXPLOSION_RADIUS_FACTOR
    duration: float = EXPLOSION_DURATION

    # Runtime state
    elapsed: float = 0.0
    current_radius: float = 0.0
    alpha: float = 1.0
    is_active: bool = True

    @classmethod
    def at(
        cls, x: float, y: float,
        base_radius: float = EXPLOSION_DEFAULT_BASE_RADIUS,
    ) -> "Explosion":
        """Create an explosion sized from the originating missile radius."""
        return cls(
            center_x=x,
            center_y=y,
            max_radius=base_radius * EXPLOSION_RADIUS_FACTOR,
        )

    @classmethod
    def from_missile(cls, missile: "Missile") -> "Explosion":
        return cls.at(missile.x, missile.y, missile.radius)

    @property
    def center_pos(self) -> tuple[float, float]:
        return (self.center_x, self.center_y)

    @property
    def progress(self) -> float:
        """Fraction of the lifetime used up, clamped to 1."""
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)

    def update(self, delta_ms: float) -> None:
        """Advance the animation by *delta_ms* milliseconds."""
        if not self.is_active:
            return
        self.elapsed = min(self.elapsed + delta_ms, max(self.duration, 0.0))
        progress = self.progress
        self.current_radius = self.max_radius * progress
        self.alpha = 1.0 - progress
        if progress >= 1.0:
            self.is_active = False


# ── Explosion Manager ──────────────────────────────────────────────────────


@dataclass
class ExplosionManager:
    """Owns the live explosions and retires finished ones."""

    explosions: list[Explosion] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.explosions)

    def __iter__(self):
        return iter(self.explosions)

    @property
    def active_count(self) -> int:
        return sum(1 for e in self.explosions if e.is_active)

    def add(self, explosion: Explosion) -> None:
        self.explosions.append(explosion)

    def update(self, delta_ms: float) -> list[Explosion]:
        """Advance every explosion and drop the ones that finished.

        Returns the explosions still running after this update.
        """
        for exp in self.explosions:
            exp.update(delta_ms)
        self.explosions = [e for e in self.explosions if e.is_active]
        return self.explosions

    def reset(self) -> None:
        self.explosions = []
