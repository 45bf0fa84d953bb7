"""Curve and stroke types.

This module defines the output of the stroke assembler:
- CurveSegment: One cubic Bezier piece with independent start/end widths
- Stroke: An ordered, non-empty run of curve segments from one gesture
"""

import math
from dataclasses import dataclass

from inkstroke.domain.point import TimedPoint

# Samples used to approximate arc length (t = 0.0, 0.1, ..., 1.0)
LENGTH_SAMPLE_STEPS = 10


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def cubic_bezier(t: float, start: float, c1: float, c2: float, end: float) -> float:
    """Evaluate one coordinate of a cubic Bezier curve at parameter t.

    Uses de Casteljau subdivision, so coincident points evaluate to exactly
    that coordinate and a degenerate curve has zero length.
    """
    ab = _lerp(start, c1, t)
    bc = _lerp(c1, c2, t)
    cd = _lerp(c2, end, t)
    return _lerp(_lerp(ab, bc, t), _lerp(bc, cd, t), t)


@dataclass(frozen=True, slots=True)
class CurveSegment:
    """A cubic Bezier segment tagged with stroke widths.

    Attributes:
        start: Curve start point (a raw sample)
        control1: First control point
        control2: Second control point
        end: Curve end point (the next raw sample)
        start_width: Stroke width at the start, in pixels
        end_width: Stroke width at the end, in pixels
    """

    start: TimedPoint
    control1: TimedPoint
    control2: TimedPoint
    end: TimedPoint
    start_width: float
    end_width: float

    def __post_init__(self) -> None:
        if self.start_width < 0 or self.end_width < 0:
            raise ValueError(
                f"Curve widths must be non-negative, got "
                f"{self.start_width} and {self.end_width}"
            )

    def point_at(self, t: float) -> tuple[float, float]:
        """Evaluate the curve at parameter t in [0, 1].

        Args:
            t: Curve parameter (0 is the start point, 1 the end point)

        Returns:
            Tuple of (x, y) coordinates
        """
        x = cubic_bezier(t, self.start.x, self.control1.x, self.control2.x, self.end.x)
        y = cubic_bezier(t, self.start.y, self.control1.y, self.control2.y, self.end.y)
        return (x, y)

    def length(self) -> float:
        """Approximate the arc length of the curve.

        Samples the curve at 11 evenly spaced parameter values and sums the
        chord lengths between consecutive samples. Accurate enough to choose
        a rendering step count.

        Returns:
            Approximate length in pixels
        """
        total = 0.0
        prev_x, prev_y = self.point_at(0.0)
        for i in range(1, LENGTH_SAMPLE_STEPS + 1):
            x, y = self.point_at(i / LENGTH_SAMPLE_STEPS)
            total += math.hypot(x - prev_x, y - prev_y)
            prev_x, prev_y = x, y
        return total

    def points(self) -> tuple[TimedPoint, TimedPoint, TimedPoint, TimedPoint]:
        """Return the four geometric points in curve order."""
        return (self.start, self.control1, self.control2, self.end)

    @property
    def max_width(self) -> float:
        """Widest stroke width along the segment."""
        return max(self.start_width, self.end_width)


@dataclass(frozen=True, slots=True)
class Stroke:
    """One continuous gesture, from pointer down to pointer up.

    The atomic unit of undo/redo.

    Attributes:
        curves: Curve segments in drawing order
    """

    curves: tuple[CurveSegment, ...]

    def __post_init__(self) -> None:
        if not self.curves:
            raise ValueError("A stroke needs at least one curve segment")

    def __len__(self) -> int:
        return len(self.curves)
