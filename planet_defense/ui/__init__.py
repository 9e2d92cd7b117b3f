"""User interface components."""

from .audio import AudioManager
from .text import ScoreDisplay

__all__ = [
    "AudioManager",
    "ScoreDisplay",
]
