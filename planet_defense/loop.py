"""
Loop driver for Planet Defense.

Turns the display's monotonically increasing timestamps into
millisecond deltas and feeds them to a step function, one call per
refresh.  The driver disarms itself when a step reports game over and
stays quiet until ``arm()`` is called again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from planet_defense.game import GameState

log = logging.getLogger(__name__)


@dataclass
class LoopDriver:
    """Explicit scheduler for ``Game.step``."""

    step: Callable[[float], GameState]
    previous_timestamp: Optional[float] = field(default=None, init=False)
    frames: int = field(default=0, init=False)
    _armed: bool = field(default=False, init=False, repr=False)

    @property
    def is_armed(self) -> bool:
        return self._armed

    def arm(self) -> None:
        """(Re)start scheduling; the next tick has a zero delta."""
        self._armed = True
        self.previous_timestamp = None
        self.frames = 0

    def stop(self) -> None:
        """Stop scheduling.  Safe to call when already stopped."""
        if self._armed:
            log.debug("loop stopped after %d frames", self.frames)
        self._armed = False

    def tick(self, timestamp: float) -> bool:
        """Run one step for *timestamp* (ms).  Returns True while armed."""
        if not self._armed:
            return False
        if self.previous_timestamp is None:
            self.previous_timestamp = timestamp
        delta = timestamp - self.previous_timestamp
        self.previous_timestamp = timestamp

        self.frames += 1
        state = self.step(delta)
        if state == GameState.GAME_OVER:
            self.stop()
        return self._armed
