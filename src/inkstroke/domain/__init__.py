"""Domain models for inkstroke.

This module contains the value types that flow through the drawing pipeline.
All models are immutable (frozen dataclasses) so that committed strokes can be
shared between the live buffer, the undo/redo history and exports without
copying.

Key classes:
- TimedPoint: A pointer sample with its capture timestamp
- ControlPointPair: Synthesized Bezier control points around a sample
- CurveSegment: A cubic Bezier piece with start/end widths
- Stroke: The curve segments of one gesture
- CanvasSize, Rect: Canvas dimensions and bounds
- GestureEvent, GesturePhase: Pointer events from the host
"""

from inkstroke.domain.canvas import CanvasSize, Rect
from inkstroke.domain.curve import CurveSegment, Stroke, cubic_bezier
from inkstroke.domain.gesture import GestureEvent, GesturePhase
from inkstroke.domain.point import ControlPointPair, TimedPoint, current_millis, distance

__all__: list[str] = [
    # Enums
    "GesturePhase",
    # Core types
    "TimedPoint",
    "ControlPointPair",
    "CurveSegment",
    "Stroke",
    "CanvasSize",
    "Rect",
    "GestureEvent",
    # Helpers
    "cubic_bezier",
    "current_millis",
    "distance",
]
