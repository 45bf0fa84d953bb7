"""Geometric operations for stroke synthesis and export.

This module provides the geometry the drawing pipeline relies on:
- Catmull-Rom style control point synthesis
- Stroke bounding boxes that account for stroke thickness
- Crop rectangles clamped to the canvas

All functions are pure and stateless. Degenerate input (coincident points,
empty stroke lists) resolves to defined values rather than raising.
"""

import math
from collections.abc import Iterable

from inkstroke.domain import CanvasSize, ControlPointPair, Rect, Stroke, TimedPoint


def synthesize_control_points(
    s1: TimedPoint, s2: TimedPoint, s3: TimedPoint
) -> ControlPointPair:
    """Calculate the Bezier control points around s2.

    The midpoints of (s1, s2) and (s2, s3) are joined by a line, split at a
    point weighted by the two segment lengths, and the line is translated so
    that point lands on s2. The translated midpoints become the control
    points. Using `c2` here as the first control point of the curve leaving
    s2, and `c1` of the next triple as the second control point of that
    curve, gives tangent continuity at every sample.

    Args:
        s1: Previous sample
        s2: Sample the curve passes through
        s3: Next sample

    Returns:
        ControlPointPair with c1 on the s1 side and c2 on the s3 side.
        Coincident input collapses to c1 == c2 == s2.

    Examples:
        >>> a, b, c = TimedPoint(0, 0, 0), TimedPoint(10, 0, 10), TimedPoint(20, 0, 20)
        >>> pair = synthesize_control_points(a, b, c)
        >>> (pair.c1.x, pair.c1.y, pair.c2.x, pair.c2.y)
        (5.0, 0.0, 15.0, 0.0)
    """
    m1x = (s1.x + s2.x) / 2.0
    m1y = (s1.y + s2.y) / 2.0
    m2x = (s2.x + s3.x) / 2.0
    m2y = (s2.y + s3.y) / 2.0

    l1 = math.hypot(s1.x - s2.x, s1.y - s2.y)
    l2 = math.hypot(s2.x - s3.x, s2.y - s3.y)

    total = l1 + l2
    k = l2 / total if total > 0 else 0.0

    # Weighted center on the midpoint line
    cmx = m2x + (m1x - m2x) * k
    cmy = m2y + (m1y - m2y) * k

    tx = s2.x - cmx
    ty = s2.y - cmy

    return ControlPointPair(
        c1=TimedPoint(m1x + tx, m1y + ty, s2.timestamp_ms),
        c2=TimedPoint(m2x + tx, m2y + ty, s2.timestamp_ms),
    )


def compute_bounds(strokes: Iterable[Stroke]) -> Rect:
    """Calculate the bounding box of a set of strokes.

    Every curve contributes its start, both control points and its end,
    each grown by half of the curve's widest stroke width. Control points
    bound the curve (convex hull property), so the result may be slightly
    loose but never clips ink.

    Args:
        strokes: Strokes to bound

    Returns:
        Rect around all strokes, or Rect(0, 0, 0, 0) if there are none
    """
    min_x = min_y = math.inf
    max_x = max_y = -math.inf

    for stroke in strokes:
        for curve in stroke.curves:
            half_width = curve.max_width / 2.0
            for point in curve.points():
                min_x = min(min_x, point.x - half_width)
                min_y = min(min_y, point.y - half_width)
                max_x = max(max_x, point.x + half_width)
                max_y = max(max_y, point.y + half_width)

    if min_x == math.inf:
        return Rect(0.0, 0.0, 0.0, 0.0)
    return Rect(min_x, min_y, max_x, max_y)


def crop_rect(bounds: Rect, padding: int, canvas: CanvasSize) -> Rect:
    """Expand bounds by padding and clamp to the canvas on whole pixels.

    Args:
        bounds: Content bounds from compute_bounds
        padding: Extra pixels kept on every side (>= 0)
        canvas: Canvas the crop must stay inside

    Returns:
        Integer-aligned Rect inside [0, width] x [0, height]. May be empty
        if the content lies entirely outside the canvas.
    """
    padded = bounds.expand(padding)
    left = max(0, math.floor(padded.left))
    top = max(0, math.floor(padded.top))
    right = min(canvas.width, math.ceil(padded.right))
    bottom = min(canvas.height, math.ceil(padded.bottom))
    return Rect(float(left), float(top), float(right), float(bottom))
