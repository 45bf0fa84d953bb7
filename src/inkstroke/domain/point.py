"""Timed point types for stroke capture.

This module defines the point types the drawing pipeline is built from:
- TimedPoint: A 2D pointer sample with its capture timestamp
- ControlPointPair: The two Bezier control points synthesized around a sample
"""

import math
import time
from dataclasses import dataclass, field


def current_millis() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class TimedPoint:
    """A pointer sample in canvas space with its capture time.

    Immutable and hashable. The timestamp is captured when the point is
    created unless one is given explicitly (recorded gestures, tests).

    Attributes:
        x: X coordinate in pixels
        y: Y coordinate in pixels
        timestamp_ms: Capture time in milliseconds
    """

    x: float
    y: float
    timestamp_ms: int = field(default_factory=current_millis)

    def distance_to(self, other: "TimedPoint") -> float:
        """Euclidean distance to another point in pixels."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def velocity_from(self, start: "TimedPoint") -> float:
        """Calculate the velocity from a start point to this point.

        The elapsed time is clamped to at least 1 ms, so samples taken in the
        same millisecond (or out of order) never divide by zero.

        Args:
            start: The earlier point

        Returns:
            Velocity in pixels per millisecond, or 0.0 if the result is not
            finite
        """
        elapsed = max(1, self.timestamp_ms - start.timestamp_ms)
        velocity = self.distance_to(start) / elapsed
        if not math.isfinite(velocity):
            return 0.0
        return velocity

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class ControlPointPair:
    """Control points synthesized for the sample between two curve segments.

    Attributes:
        c1: Incoming control point (second control point of the curve that
            ends at the sample)
        c2: Outgoing control point (first control point of the curve that
            starts at the sample)
    """

    c1: TimedPoint
    c2: TimedPoint


def distance(a: TimedPoint, b: TimedPoint) -> float:
    """Euclidean distance between two points."""
    return a.distance_to(b)
