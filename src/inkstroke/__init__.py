"""Inkstroke - Smooth, variable-width ink strokes from raw pointer input.

Inkstroke turns a noisy, timestamped stream of pointer samples into smooth
cubic Bezier segments whose width follows a simulated pen pressure, keeps a
stroke-level undo/redo history, and renders the result to a raster buffer or
an SVG document.

Example:
    >>> from inkstroke import SignaturePad
    >>> pad = SignaturePad()
    >>> pad.update_canvas_size(400, 200)
    >>> pad.pointer_down(10, 10, timestamp_ms=0)
    >>> pad.pointer_move(40, 12, timestamp_ms=16)
    >>> pad.pointer_up()
"""

from inkstroke.core.pad import SignaturePad

__version__ = "0.1.0"

__all__ = ["SignaturePad", "__version__"]
