"""Pointer gesture events delivered by the host's input source."""

from dataclasses import dataclass
from enum import Enum


class GesturePhase(str, Enum):
    """Phase of a pointer event within one gesture."""

    DOWN = "down"
    MOVE = "move"
    UP = "up"


@dataclass(frozen=True, slots=True)
class GestureEvent:
    """A single pointer event.

    Attributes:
        phase: Gesture phase
        x: X coordinate in pixels
        y: Y coordinate in pixels
        timestamp_ms: Event time in milliseconds, or None to stamp it on arrival
    """

    phase: GesturePhase
    x: float
    y: float
    timestamp_ms: int | None = None
