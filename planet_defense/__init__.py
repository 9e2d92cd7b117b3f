"""
Planet Defense - tap falling missiles before they reach the planet.
"""

__version__ = "1.0.0"

from .game import Game, GameState
from .loop import LoopDriver
from .config import *  # noqa: F401,F403

__all__ = ["Game", "GameState", "LoopDriver"]
