"""
Main entry point for Planet Defense.

Initializes pygame, wires the game to its render, audio and HUD sinks,
and runs the frame loop.  Pointer events are drained before each tick
so a press is always handled between two simulation steps.

Usage:
    python planet-defense.py [OPTIONS]

Options:
    --width N            Simulation viewport width (default: 800)
    --height N           Simulation viewport height (default: 600)
    --scale N            Display scale multiplier (1-4, default: 1)
    --fullscreen         Launch in fullscreen mode
    --hit-test NAME      Hit-test strategy: radial (default) or shape
    --seed N             Seed the spawner for a reproducible run
    --mute               Disable the impact sound
    --debug              Enable debug overlays
    --log-level LEVEL    DEBUG, INFO, WARNING or ERROR (default: WARNING)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from dataclasses import dataclass, field
from typing import Optional

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from planet_defense.config import (
    DEFAULT_HIT_TEST,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TITLE,
    UPDATE_RATE,
)
from planet_defense.game import Game, GameState
from planet_defense.loop import LoopDriver
from planet_defense.models.spawner import Spawner
from planet_defense.models.targeting import HIT_TESTS, make_hit_test
from planet_defense.ui.audio import AudioManager
from planet_defense.ui.text import ScoreDisplay
from planet_defense.utils.input_handler import PointerEvent, PointerReader

log = logging.getLogger("planet_defense.main")


# ── Constants ───────────────────────────────────────────────────────────────

FRAME_TIME: float = 1.0 / UPDATE_RATE          # ~16.67 ms

DEFAULT_SCALE: int = 1
MIN_SCALE: int = 1
MAX_SCALE: int = 4

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ── Argument parsing ───────────────────────────────────────────────────────


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Planet Defense – tap the missiles before they land",
    )
    parser.add_argument(
        "--width", type=_positive_int, default=SCREEN_WIDTH, metavar="N",
        help=f"Simulation viewport width (default: {SCREEN_WIDTH})",
    )
    parser.add_argument(
        "--height", type=_positive_int, default=SCREEN_HEIGHT, metavar="N",
        help=f"Simulation viewport height (default: {SCREEN_HEIGHT})",
    )
    parser.add_argument(
        "--scale", type=int, default=DEFAULT_SCALE,
        choices=range(MIN_SCALE, MAX_SCALE + 1),
        metavar="N",
        help=f"Display scale multiplier ({MIN_SCALE}-{MAX_SCALE}, default: {DEFAULT_SCALE})",
    )
    parser.add_argument(
        "--fullscreen", action="store_true",
        help="Launch in fullscreen mode",
    )
    parser.add_argument(
        "--hit-test", default=DEFAULT_HIT_TEST, choices=sorted(HIT_TESTS),
        help=f"Hit-test strategy (default: {DEFAULT_HIT_TEST})",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed the spawner for a reproducible run",
    )
    parser.add_argument(
        "--mute", action="store_true",
        help="Disable the impact sound",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug overlays (FPS, entity counts)",
    )
    parser.add_argument(
        "--log-level", default="WARNING", choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Route log records to stderr at *level*."""
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class PlanetDefenseApp:
    """Top-level application wrapper.

    Owns the pygame display, the game, the loop driver and the sinks.
    """

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    scale: int = DEFAULT_SCALE
    fullscreen: bool = False
    debug: bool = False
    hit_test: str = DEFAULT_HIT_TEST
    seed: Optional[int] = None
    mute: bool = False

    # Runtime state (initialized in ``init``)
    screen: object = field(default=None, repr=False)
    canvas: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    game: Optional[Game] = field(default=None, repr=False)
    driver: Optional[LoopDriver] = field(default=None, repr=False)
    pointer: Optional[PointerReader] = field(default=None, repr=False)
    renderer: object = field(default=None, repr=False)
    running: bool = False

    # Sinks
    hud: ScoreDisplay = field(default_factory=ScoreDisplay)
    audio: AudioManager = field(default_factory=AudioManager)

    # Performance tracking
    frame_times: list[float] = field(default_factory=list)
    fps: float = 0.0

    # ── Initialisation ──────────────────────────────────────────────────

    def build_game(self) -> Game:
        """Create the game and connect its sinks."""
        game = Game(
            width=self.width,
            height=self.height,
            spawner=Spawner(rng=random.Random(self.seed)),
            hit_test=make_hit_test(self.hit_test),
        )
        game.on_hud = self.hud.update
        game.on_hit = self.audio.play_impact
        return game

    def init(self) -> bool:
        """Initialise pygame and create the display surface.

        Returns True on success, False on failure.
        """
        if pygame is None:
            log.error("pygame is required. Install with: pip install pygame")
            return False

        try:
            pygame.init()
        except Exception as exc:
            log.error("Error initialising pygame: %s", exc)
            return False

        flags = pygame.RESIZABLE
        if self.fullscreen:
            flags = pygame.FULLSCREEN

        try:
            self.screen = pygame.display.set_mode(
                (self.width * self.scale, self.height * self.scale), flags,
            )
        except Exception as exc:
            log.error("Error creating display: %s", exc)
            pygame.quit()
            return False

        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        # The scene module needs pygame at import time
        from planet_defense.ui.scene import SceneRenderer, StarField

        self.audio.enabled = not self.mute
        self.audio.init()

        self.game = self.build_game()
        self.driver = LoopDriver(step=self.game.step)
        self.canvas = pygame.Surface((self.width, self.height))
        self.pointer = PointerReader(
            display_size=self.screen.get_size(),
            simulation_size=(self.width, self.height),
        )
        self.renderer = SceneRenderer(
            stars=StarField(rng=random.Random(self.seed)),
            debug=self.debug,
        )

        self.restart()
        self.running = True
        return True

    def restart(self) -> None:
        """Reset the game and re-arm the loop driver."""
        self.game.reset()
        self.driver.arm()
        if self.pointer is not None:
            self.pointer.release()

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Execute the main game loop at 60 FPS."""
        if not self.running:
            return

        try:
            while self.running:
                frame_start = time.perf_counter()

                self._handle_events()
                self.driver.tick(float(pygame.time.get_ticks()))
                self._render()

                self.clock.tick(UPDATE_RATE)

                # Performance tracking
                elapsed = time.perf_counter() - frame_start
                self.frame_times.append(elapsed)
                if len(self.frame_times) > 60:
                    self.frame_times.pop(0)
                avg = sum(self.frame_times) / len(self.frame_times)
                self.fps = 1.0 / avg if avg > 0 else 0.0
        except KeyboardInterrupt:
            log.info("interrupted")
        finally:
            self.shutdown()

    # ── Event handling ──────────────────────────────────────────────────

    def _handle_events(self) -> None:
        """Process pygame events.

        Keyboard controls:
            R / Enter / Space – restart after game over
            ESC               – exit game

        Pointer controls:
            Left click or tap – destroy a missile
        """
        for event in pygame.event.get():
            self._dispatch(event)

    def _dispatch(self, event) -> None:
        if event.type == pygame.QUIT:
            self.running = False

        elif event.type == pygame.VIDEORESIZE:
            self._resize(event.w, event.h)

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key in (pygame.K_r, pygame.K_RETURN, pygame.K_SPACE):
                if self.game.state == GameState.GAME_OVER:
                    self.restart()

        else:
            press = self.pointer.read(event)
            if press is not None:
                self._on_press(press)

    def _on_press(self, press: PointerEvent) -> None:
        # Restart is keyboard only; presses after game over are dropped
        if self.game.state != GameState.RUNNING:
            log.debug("press at (%.0f, %.0f) ignored in %s",
                      press.x, press.y, self.game.state.name)
            return
        self.game.handle_pointer(press.x, press.y)

    def _resize(self, display_w: int, display_h: int) -> None:
        """Follow the window size; the simulation keeps the display scale."""
        self.width = max(1, display_w // self.scale)
        self.height = max(1, display_h // self.scale)
        self.game.resize(self.width, self.height)
        self.canvas = pygame.Surface((self.width, self.height))
        self.pointer.resize(self.screen.get_size(), (self.width, self.height))
        self.renderer.resize()

    # ── Rendering ───────────────────────────────────────────────────────

    def _render(self) -> None:
        """Draw the latest frame and present it at display scale."""
        if self.screen is None:
            return

        debug_lines = None
        if self.debug:
            debug_lines = [
                f"FPS: {self.fps:.1f}",
                f"Missiles: {self.game.missiles.active_count}",
                f"Explosions: {self.game.explosions.active_count}",
                f"Spawn interval: {self.game.spawner.interval:.0f} ms",
            ]
        self.renderer.draw(self.canvas, self.game.frame(), self.hud, debug_lines)

        if self.canvas.get_size() == self.screen.get_size():
            self.screen.blit(self.canvas, (0, 0))
        else:
            pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
        pygame.display.flip()

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Clean up and quit pygame."""
        self.running = False
        if self.driver is not None:
            self.driver.stop()
        self.audio.shutdown()
        if pygame is not None:
            pygame.quit()


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    app = PlanetDefenseApp(
        width=args.width,
        height=args.height,
        scale=args.scale,
        fullscreen=args.fullscreen,
        debug=args.debug,
        hit_test=args.hit_test,
        seed=args.seed,
        mute=args.mute,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
