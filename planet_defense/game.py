"""
Core game logic for Planet Defense.

``Game`` owns every piece of simulation state (missiles, explosions,
spawner, score, health) and advances it one frame at a time through
``step(delta_ms)``.  Pointer presses come in through ``handle_pointer``.
Rendering, audio and the HUD are sinks: the game calls them but never
reads anything back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional

from planet_defense.config import (
    DEFAULT_HIT_TEST,
    INITIAL_HEALTH,
    POINTS_PER_MISSILE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from planet_defense.models.explosion import Explosion, ExplosionManager
from planet_defense.models.missile import Missile, MissileManager
from planet_defense.models.spawner import Spawner
from planet_defense.models.targeting import HitTest, make_hit_test

log = logging.getLogger(__name__)


# ── Game states ─────────────────────────────────────────────────────────────


class GameState(Enum):
    READY = auto()
    RUNNING = auto()
    GAME_OVER = auto()


# ── Render snapshot ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MissileView:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class ExplosionView:
    x: float
    y: float
    radius: float
    alpha: float


@dataclass(frozen=True)
class Frame:
    """Read-only picture of one simulation step for the render sink."""
    width: int
    height: int
    missiles: tuple[MissileView, ...]
    explosions: tuple[ExplosionView, ...]
    score: int
    health: int
    state: GameState


# ── Game ────────────────────────────────────────────────────────────────────


@dataclass
class Game:
    """Top-level simulation controller.

    ``clock_ms`` is simulation time: the sum of every delta passed to
    ``step``.  The spawner measures intervals against it, so the game
    can be driven with synthetic deltas.
    """

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    state: GameState = GameState.READY

    score: int = 0
    health: int = INITIAL_HEALTH
    clock_ms: float = 0.0

    # Subsystems
    missiles: MissileManager = field(default_factory=MissileManager)
    explosions: ExplosionManager = field(default_factory=ExplosionManager)
    spawner: Spawner = field(default_factory=Spawner)
    hit_test: HitTest = field(default_factory=lambda: make_hit_test(DEFAULT_HIT_TEST))

    # Sinks
    on_hud: Optional[Callable[[int, int], None]] = field(default=None, repr=False)
    on_hit: Optional[Callable[[], None]] = field(default=None, repr=False)
    on_game_over: Optional[Callable[[int], None]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"viewport must be positive, got {self.width}x{self.height}"
            )

    @property
    def ground_level(self) -> int:
        return self.height

    @property
    def is_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    # ── Lifecycle ───────────────────────────────────────────────────────

    def reset(self) -> None:
        """Clear the field and (re)enter RUNNING from any state."""
        self.missiles.reset()
        self.explosions.reset()
        self.spawner.reset()
        self.score = 0
        self.health = INITIAL_HEALTH
        self.clock_ms = 0.0
        self.state = GameState.RUNNING
        log.info("game started (%dx%d, %s hit test)",
                 self.width, self.height, self.hit_test.name)
        self._notify_hud()

    start = reset

    def resize(self, width: int, height: int) -> None:
        """Change the viewport; affects spawn placement and ground level only."""
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def _end_game(self) -> None:
        if self.state == GameState.GAME_OVER:
            return
        self.state = GameState.GAME_OVER
        log.info("game over, final score %d", self.score)
        self._call_sink(self.on_game_over, self.score)

    # ── Per-frame update ────────────────────────────────────────────────

    def step(self, delta_ms: float) -> GameState:
        """Advance the simulation by *delta_ms* milliseconds.

        Returns the state after the step.  Does nothing unless RUNNING.
        """
        if self.state != GameState.RUNNING:
            return self.state

        self.clock_ms += delta_ms

        # 1. Spawn
        missile = self.spawner.spawn(self.clock_ms, self.score, self.width)
        if missile is not None:
            self.missiles.add(missile)

        # 2. Kinematics and ground impact
        self._update_missiles(delta_ms)
        if self.state == GameState.GAME_OVER:
            return self.state

        # 3. Explosions
        self.explosions.update(delta_ms)
        return self.state

    def _update_missiles(self, delta_ms: float) -> None:
        self.missiles.advance(delta_ms)
        # Reverse order so pops don't shift unvisited indices
        for i in range(len(self.missiles) - 1, -1, -1):
            if not self.missiles[i].has_landed(self.ground_level):
                continue
            self.missiles.pop(i)
            self.health = max(0, self.health - 1)
            log.debug("missile reached the ground, health %d", self.health)
            self._notify_hud()
            if self.health <= 0:
                self._end_game()
                return

    # ── Player actions ──────────────────────────────────────────────────

    def handle_pointer(self, x: float, y: float) -> Optional[Missile]:
        """Destroy at most one missile for a press at (*x*, *y*).

        Returns the destroyed missile, or None when nothing changed.
        """
        if self.state != GameState.RUNNING:
            return None
        index = self.hit_test.select(self.missiles.missiles, x, y)
        if index is None:
            return None

        missile = self.missiles.pop(index)
        self.score += POINTS_PER_MISSILE
        self.explosions.add(Explosion.from_missile(missile))
        log.debug("hit missile at (%.0f, %.0f), score %d",
                  missile.x, missile.y, self.score)
        self._notify_hud()
        self._call_sink(self.on_hit)
        return missile

    # ── Sinks ───────────────────────────────────────────────────────────

    def frame(self) -> Frame:
        """Snapshot the current state for drawing."""
        return Frame(
            width=self.width,
            height=self.height,
            missiles=tuple(
                MissileView(m.x, m.y, m.radius) for m in self.missiles
            ),
            explosions=tuple(
                ExplosionView(e.center_x, e.center_y, e.current_radius, e.alpha)
                for e in self.explosions
            ),
            score=self.score,
            health=self.health,
            state=self.state,
        )

    def _notify_hud(self) -> None:
        self._call_sink(self.on_hud, self.score, self.health)

    def _call_sink(self, sink: Optional[Callable[..., None]], *args) -> None:
        if sink is None:
            return
        try:
            sink(*args)
        except Exception:
            log.warning("sink %r failed", sink, exc_info=True)
