"""
Input handler for Planet Defense.

Normalises mouse clicks and touches into a single ``PointerEvent`` in
simulation coordinates.  Multi-touch gestures are reduced to the first
finger; mouse events that SDL synthesises from touches are dropped so a
tap never counts twice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]


@dataclass(frozen=True)
class PointerEvent:
    """A single pointer press in simulation coordinates."""
    x: float
    y: float


def to_simulation(
    pos: tuple[float, float],
    display_size: tuple[float, float],
    simulation_size: tuple[float, float],
) -> tuple[float, float]:
    """Map a window position onto the simulation viewport.

    Each axis is scaled by ``simulation / display`` so the mapping holds
    when the window is scaled or stretched.
    """
    dw, dh = display_size
    sw, sh = simulation_size
    scale_x = sw / dw if dw else 1.0
    scale_y = sh / dh if dh else 1.0
    return (pos[0] * scale_x, pos[1] * scale_y)


@dataclass
class PointerReader:
    """Turns raw pygame events into ``PointerEvent`` objects.

    ``display_size`` is the window size in pixels; ``simulation_size``
    the viewport the game simulates.  Both change on resize.
    """

    display_size: tuple[int, int]
    simulation_size: tuple[int, int]
    _fingers: set[int] = field(default_factory=set, repr=False)

    def resize(
        self,
        display_size: tuple[int, int],
        simulation_size: tuple[int, int],
    ) -> None:
        self.display_size = display_size
        self.simulation_size = simulation_size

    def release(self) -> None:
        """Forget every finger still marked as down."""
        self._fingers.clear()

    def read(self, event: Any) -> Optional[PointerEvent]:
        """Return a PointerEvent for *event*, or None if it isn't a press."""
        if pygame is None:
            return None

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1 or getattr(event, "touch", False):
                return None
            x, y = to_simulation(
                event.pos, self.display_size, self.simulation_size,
            )
            return PointerEvent(x, y)

        if event.type == pygame.FINGERDOWN:
            first = not self._fingers
            self._fingers.add(event.finger_id)
            if not first:
                return None
            # Finger coordinates are normalised to 0..1 of the window
            return PointerEvent(
                event.x * self.simulation_size[0],
                event.y * self.simulation_size[1],
            )

        if event.type == pygame.FINGERUP:
            self._fingers.discard(event.finger_id)
        elif event.type == pygame.WINDOWFOCUSLOST:
            # Lifts outside the window never arrive as FINGERUP
            self.release()

        return None
