"""
Scene renderer for Planet Defense.

Draws a ``Frame`` snapshot onto a pygame surface: star field, the
planet peeking up from the bottom edge, missiles, explosions, the HUD
and the game-over overlay.  Nothing here touches game state.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

import pygame

from planet_defense.config import (
    COLOR_BACKGROUND,
    COLOR_CONTINENT,
    COLOR_EARTH_DARK,
    COLOR_EARTH_LIGHT,
    COLOR_EXPLOSION_INNER,
    COLOR_EXPLOSION_MID,
    COLOR_EXPLOSION_OUTER,
    COLOR_MISSILE_BODY,
    COLOR_MISSILE_FIN,
    COLOR_MISSILE_TIP,
    COLOR_TEXT,
    CONTINENTS,
    EARTH_CENTER_DROP,
    EARTH_RADIUS_FACTOR,
    EXPLOSION_CORE_FACTOR,
    STAR_COUNT,
)
from planet_defense.game import ExplosionView, Frame, GameState, MissileView
from planet_defense.models.missile import Silhouette
from planet_defense.ui.text import ScoreDisplay

Color = tuple[int, int, int]

GRADIENT_RINGS: int = 12
EARTH_RINGS: int = 24


def lerp_color(a: Color, b: Color, t: float) -> Color:
    t = max(0.0, min(1.0, t))
    return tuple(int(ca + (cb - ca) * t) for ca, cb in zip(a, b))  # type: ignore[return-value]


def explosion_ring_color(t: float, alpha: float) -> tuple[int, int, int, int]:
    """Colour at fraction *t* of the explosion radius.

    Bright yellow centre, orange halfway, transparent red rim.
    """
    if t <= 0.5:
        rgb = lerp_color(COLOR_EXPLOSION_INNER, COLOR_EXPLOSION_MID, t / 0.5)
        a = 0.8 + (0.5 - 0.8) * (t / 0.5)
    else:
        rgb = lerp_color(COLOR_EXPLOSION_MID, COLOR_EXPLOSION_OUTER, (t - 0.5) / 0.5)
        a = 0.5 * (1.0 - (t - 0.5) / 0.5)
    return (*rgb, int(255 * max(0.0, a * alpha)))


# ── Star field ──────────────────────────────────────────────────────────────


@dataclass
class StarField:
    """Stars stored as viewport fractions so they survive a resize."""

    count: int = STAR_COUNT
    rng: random.Random = field(default_factory=random.Random, repr=False)
    stars: list[tuple[float, float, float, float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.stars:
            self.generate()

    def generate(self) -> None:
        """Re-roll every star: (x, y, brightness, size)."""
        self.stars = [
            (
                self.rng.random(),
                self.rng.random(),
                0.5 + self.rng.random() * 0.5,
                0.5 + self.rng.random() * 1.5,
            )
            for _ in range(self.count)
        ]

    def draw(self, surface: pygame.Surface, width: int, height: int) -> None:
        for fx, fy, brightness, size in self.stars:
            level = int(255 * brightness)
            pygame.draw.circle(
                surface, (level, level, level),
                (int(fx * width), int(fy * height)),
                max(1, round(size)),
            )


# ── Scene renderer ──────────────────────────────────────────────────────────


@dataclass
class SceneRenderer:
    """Render sink: one ``draw`` call per simulation step."""

    stars: StarField = field(default_factory=StarField)
    debug: bool = False
    _font: Optional[pygame.font.Font] = field(default=None, repr=False)
    _big_font: Optional[pygame.font.Font] = field(default=None, repr=False)

    def resize(self) -> None:
        self.stars.generate()

    def draw(
        self,
        surface: pygame.Surface,
        frame: Frame,
        hud: Optional[ScoreDisplay] = None,
        debug_lines: Optional[list[str]] = None,
    ) -> None:
        surface.fill(COLOR_BACKGROUND)
        self.stars.draw(surface, frame.width, frame.height)
        self.draw_earth(surface, frame.width, frame.height)
        for missile in frame.missiles:
            self.draw_missile(surface, missile)
        for explosion in frame.explosions:
            self.draw_explosion(surface, explosion)
        if hud is not None:
            self.draw_hud(surface, hud)
            if frame.state == GameState.GAME_OVER:
                self.draw_game_over(surface, hud, frame.width, frame.height)
        if self.debug and debug_lines:
            self.draw_debug(surface, debug_lines, frame.height)

    # ── Backdrop ────────────────────────────────────────────────────────

    def draw_earth(self, surface: pygame.Surface, width: int, height: int) -> None:
        radius = min(width, height) * EARTH_RADIUS_FACTOR
        cx = width / 2
        cy = height + radius * EARTH_CENTER_DROP
        # Sunlit highlight sits 0.4 R above the centre
        for i in range(EARTH_RINGS):
            t = i / (EARTH_RINGS - 1)
            ring = radius - (radius * 0.9) * t
            center = (int(cx), int(cy - radius * 0.4 * t))
            color = lerp_color(COLOR_EARTH_DARK, COLOR_EARTH_LIGHT, t)
            pygame.draw.circle(surface, color, center, max(1, int(ring)))

        for shape in CONTINENTS:
            points = [
                (cx + px * radius, cy - radius + py * radius)
                for px, py in shape
            ]
            pygame.draw.polygon(surface, COLOR_CONTINENT, points)

    # ── Entities ────────────────────────────────────────────────────────

    def draw_missile(self, surface: pygame.Surface, missile: MissileView) -> None:
        shape = Silhouette.for_radius(missile.radius)

        def world(point: tuple[float, float]) -> tuple[float, float]:
            return (missile.x + point[0], missile.y + point[1])

        left, top, w, h = shape.body
        pygame.draw.rect(
            surface, COLOR_MISSILE_BODY,
            pygame.Rect(int(missile.x + left), int(missile.y + top),
                        max(1, int(w)), max(1, int(h))),
        )
        pygame.draw.polygon(surface, COLOR_MISSILE_TIP, [world(p) for p in shape.nose])
        pygame.draw.polygon(surface, COLOR_MISSILE_FIN, [world(p) for p in shape.left_fin])
        pygame.draw.polygon(surface, COLOR_MISSILE_FIN, [world(p) for p in shape.right_fin])

    def draw_explosion(self, surface: pygame.Surface, explosion: ExplosionView) -> None:
        radius = int(explosion.radius)
        if radius <= 0 or explosion.alpha <= 0:
            return
        size = radius * 2 + 2
        layer = pygame.Surface((size, size), pygame.SRCALPHA)
        center = (radius + 1, radius + 1)
        # Outer rings first so brighter inner rings paint over them
        for i in range(GRADIENT_RINGS, 0, -1):
            t = i / GRADIENT_RINGS
            pygame.draw.circle(
                layer, explosion_ring_color(t, explosion.alpha),
                center, max(1, int(radius * t)),
            )
        core = int(radius * EXPLOSION_CORE_FACTOR)
        if core > 0:
            pygame.draw.circle(
                layer, (255, 255, 255, int(255 * 0.6 * explosion.alpha)),
                center, core,
            )
        surface.blit(layer, (int(explosion.x) - radius - 1, int(explosion.y) - radius - 1))

    # ── Text ────────────────────────────────────────────────────────────

    def _fonts(self) -> tuple[pygame.font.Font, pygame.font.Font]:
        if self._font is None or self._big_font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 28)
            self._big_font = pygame.font.Font(None, 64)
        return self._font, self._big_font

    def draw_hud(self, surface: pygame.Surface, hud: ScoreDisplay) -> None:
        font, _ = self._fonts()
        y = 10
        for text in (hud.format_score(), hud.format_health()):
            rendered = font.render(text, True, COLOR_TEXT)
            surface.blit(rendered, (10, y))
            y += rendered.get_height() + 4

    def draw_game_over(
        self, surface: pygame.Surface, hud: ScoreDisplay, width: int, height: int,
    ) -> None:
        font, big = self._fonts()
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        surface.blit(shade, (0, 0))

        lines = [
            (big, "GAME OVER"),
            (font, hud.format_final_score()),
            (font, hud.format_high_score()),
            (font, "Press R to restart"),
        ]
        y = height // 2 - 80
        for f, text in lines:
            rendered = f.render(text, True, COLOR_TEXT)
            surface.blit(rendered, (width // 2 - rendered.get_width() // 2, y))
            y += rendered.get_height() + 12

    def draw_debug(self, surface: pygame.Surface, lines: list[str], height: int) -> None:
        font, _ = self._fonts()
        y = height - 22 * len(lines) - 5
        for text in lines:
            surface.blit(font.render(text, True, (0, 255, 0)), (5, y))
            y += 22
