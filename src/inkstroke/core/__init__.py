"""Core stroke-synthesis algorithms for inkstroke.

This module contains the pipeline that turns pointer samples into ink:

- Geometry (control point synthesis, stroke bounds, crop rectangles)
- Width model (velocity normalization, gamma pressure response, EMA)
- Stroke assembly (noise filter, sliding window, undo/redo history)
- The SignaturePad facade a host widget drives

Key functions:
- synthesize_control_points: Catmull-Rom style control points around a sample
- compute_bounds: Stroke bounds including stroke thickness
- crop_rect: Padded crop rectangle clamped to the canvas
- width_for: Target width for a velocity
- ema: Exponential moving average step

Key classes:
- StrokeAssembler: Gesture state machine and stroke history
- SignaturePad: Thread-safe drawing surface with live buffer and exports
"""

from inkstroke.core.geometry import compute_bounds, crop_rect, synthesize_control_points
from inkstroke.core.width import ema, normalize_velocity, width_for
from inkstroke.core.assembler import AssemblerState, StrokeAssembler
from inkstroke.core.pad import SignaturePad

__all__ = [
    # Assembler classes
    "AssemblerState",
    "SignaturePad",
    "StrokeAssembler",
    # Geometry functions
    "compute_bounds",
    "crop_rect",
    "ema",
    "normalize_velocity",
    "synthesize_control_points",
    "width_for",
]
