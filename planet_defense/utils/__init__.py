"""Utility functions and helpers."""

from .functions import (
    clamp,
    distance_squared,
    point_in_rect,
    point_in_triangle,
)
from .input_handler import PointerEvent, PointerReader, to_simulation

__all__ = [
    "clamp",
    "distance_squared",
    "point_in_rect",
    "point_in_triangle",
    "PointerEvent",
    "PointerReader",
    "to_simulation",
]
