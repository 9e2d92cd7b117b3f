"""
Missile spawner for Planet Defense.

Difficulty ramps two ways: each spawn shrinks the gap to the next one
by ``decay`` (never below ``floor``), and every missile carries the
current score as extra speed.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from planet_defense.config import (
    MISSILE_RADIUS_MIN,
    MISSILE_RADIUS_RANGE,
    MISSILE_SPEED_BASE,
    MISSILE_SPEED_PER_POINT,
    MISSILE_SPEED_RANGE,
    SPAWN_DECAY,
    SPAWN_INTERVAL_INITIAL,
    SPAWN_INTERVAL_MIN,
)
from planet_defense.models.missile import Missile
from planet_defense.utils.functions import clamp

log = logging.getLogger(__name__)


@dataclass
class Spawner:
    """Decides when the next missile enters and builds it.

    ``last_spawn_time`` is None until the first spawn; an unset value
    counts as time 0 so the first missile arrives one full interval in.
    """

    initial_interval: float = SPAWN_INTERVAL_INITIAL
    decay: float = SPAWN_DECAY
    floor: float = SPAWN_INTERVAL_MIN
    rng: random.Random = field(default_factory=random.Random, repr=False)

    interval: float = field(init=False)
    last_spawn_time: Optional[float] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not 0 < self.decay <= 1:
            raise ValueError(f"spawn decay must be in (0, 1], got {self.decay}")
        if self.floor <= 0:
            raise ValueError(f"spawn floor must be positive, got {self.floor}")
        self.interval = max(self.floor, self.initial_interval)

    def due(self, timestamp: float) -> bool:
        """Return True when more than one interval has passed."""
        last = self.last_spawn_time if self.last_spawn_time is not None else 0.0
        return timestamp - last > self.interval

    def spawn(self, timestamp: float, score: int, width: float) -> Optional[Missile]:
        """Spawn a missile if one is due, then tighten the interval."""
        if not self.due(timestamp):
            return None
        self.last_spawn_time = timestamp
        missile = self.make_missile(score, width)
        self.interval = max(self.floor, self.interval * self.decay)
        log.debug(
            "spawned missile r=%.1f x=%.1f speed=%.1f, next in %.0f ms",
            missile.radius, missile.x, missile.speed, self.interval,
        )
        return missile

    def make_missile(self, score: int, width: float) -> Missile:
        """Build a missile just above the viewport, fully inside it horizontally."""
        radius = MISSILE_RADIUS_MIN + self.rng.random() * MISSILE_RADIUS_RANGE
        x = radius + self.rng.random() * (width - radius * 2)
        if width >= radius * 2:
            x = clamp(x, radius, width - radius)
        else:
            x = width / 2
        speed = (
            MISSILE_SPEED_BASE
            + self.rng.random() * MISSILE_SPEED_RANGE
            + score * MISSILE_SPEED_PER_POINT
        )
        return Missile(x=x, y=-radius, radius=radius, speed=speed)

    def reset(self) -> None:
        self.interval = max(self.floor, self.initial_interval)
        self.last_spawn_time = None
