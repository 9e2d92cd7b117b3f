"""
HUD text for Planet Defense.

``ScoreDisplay`` is the HUD sink: the game pushes ``(score, health)``
into it whenever either value changes, and the renderer pulls the
formatted strings back out.
"""

from __future__ import annotations

from dataclasses import dataclass

from planet_defense.config import INITIAL_HEALTH


@dataclass
class ScoreDisplay:
    """Tracks and formats score, health and session high score."""

    score: int = 0
    health: int = INITIAL_HEALTH
    high_score: int = 0
    updates: int = 0

    def update(self, score: int, health: int) -> None:
        """Receive a fresh ``(score, health)`` pair from the game."""
        self.score = score
        self.health = health
        self.updates += 1
        if self.score > self.high_score:
            self.high_score = self.score

    def format_score(self) -> str:
        return f"Score: {self.score}"

    def format_health(self) -> str:
        return f"Earth Health: {self.health}"

    def format_high_score(self) -> str:
        return f"Best: {self.high_score}"

    def format_final_score(self) -> str:
        return f"Final Score: {self.score}"
