"""Signature pad: the widget-facing drawing surface.

SignaturePad wires the stroke assembler, the live raster buffer and the
exporter together behind the operations a host widget calls: pointer events,
undo/redo/clear, canvas resizes and exports.

Every public operation runs under a single re-entrant lock, so a pointer
event, a history change and an export never interleave even when the host
calls in from more than one thread.
"""

import threading
from collections.abc import Callable

from PIL import Image

from inkstroke.config import Background, DrawingConfig
from inkstroke.core.assembler import StrokeAssembler
from inkstroke.domain import CanvasSize, GestureEvent, GesturePhase, Stroke, TimedPoint
from inkstroke.io.exporter import SignatureExporter
from inkstroke.io.raster import PillowDrawTarget, render_segment, render_strokes
from inkstroke.utils.logging import SessionLogger

Callback = Callable[[], None]


class SignaturePad:
    """Captures pointer gestures as smooth variable-width ink.

    Example:
        pad = SignaturePad(DrawingConfig.fountain_pen(color="navy"))
        pad.update_canvas_size(400, 200)
        pad.pointer_down(12, 40)
        pad.pointer_move(30, 44)
        pad.pointer_move(52, 41)
        pad.pointer_up()
        svg = pad.to_svg()
        png = pad.to_image(crop=True, crop_padding=8)
    """

    def __init__(
        self,
        config: DrawingConfig | None = None,
        *,
        on_start_sign: Callback | None = None,
        on_sign: Callback | None = None,
        on_clear: Callback | None = None,
        session_logger: SessionLogger | None = None,
    ) -> None:
        """Initialize an empty pad with no canvas size.

        Args:
            config: Pen configuration (defaults to DrawingConfig())
            on_start_sign: Called on every pointer down
            on_sign: Called when the pad goes from empty to having strokes
            on_clear: Called when the pad becomes empty again
            session_logger: Session logger (a default one is created if None)
        """
        self._lock = threading.RLock()
        self._assembler = StrokeAssembler(config)
        self._exporter = SignatureExporter()
        self._session = session_logger if session_logger is not None else SessionLogger()

        self._canvas_size = CanvasSize(0, 0)
        self._buffer: PillowDrawTarget | None = None

        self._on_start_sign = on_start_sign
        self._on_sign = on_sign
        self._on_clear = on_clear
        self._was_empty = True

    # State

    @property
    def config(self) -> DrawingConfig:
        return self._assembler.config

    @property
    def canvas_size(self) -> CanvasSize:
        return self._canvas_size

    @property
    def is_empty(self) -> bool:
        with self._lock:
            return self._assembler.is_empty

    @property
    def strokes(self) -> tuple[Stroke, ...]:
        """Committed strokes in drawing order."""
        with self._lock:
            return self._assembler.committed_strokes

    @property
    def session_logger(self) -> SessionLogger:
        return self._session

    def set_config(self, config: DrawingConfig) -> None:
        """Change the pen configuration for subsequent segments.

        Committed strokes keep their geometry and widths. The pen color is
        not part of a stroke, so a color change repaints the live buffer.
        """
        with self._lock:
            color_changed = config.color != self._assembler.config.color
            self._assembler.set_config(config)
            if color_changed:
                self._redraw()

    def update_canvas_size(self, width: int, height: int) -> None:
        """Apply a layout size change from the host.

        Recreates the live buffer and repaints it from history. Exports use
        the most recent size.
        """
        with self._lock:
            self._canvas_size = CanvasSize(width, height)
            if self._canvas_size.is_empty:
                self._buffer = None
                return
            self._buffer = PillowDrawTarget(width, height)
            self._redraw()

    # Pointer input

    def pointer_down(self, x: float, y: float, timestamp_ms: int | None = None) -> None:
        """Start a gesture."""
        with self._lock:
            self._assembler.begin(self._point(x, y, timestamp_ms))
            self._session.log_gesture_start(x, y)
        self._fire(self._on_start_sign)

    def pointer_move(self, x: float, y: float, timestamp_ms: int | None = None) -> None:
        """Feed a gesture sample, drawing any completed segment live."""
        with self._lock:
            curve = self._assembler.add(self._point(x, y, timestamp_ms))
            if curve is None:
                return
            self._session.log_segment(
                curve.start_width, curve.end_width, self._assembler.last_velocity
            )
            if self._buffer is not None:
                self._buffer.set_color(self.config.color)
                render_segment(self._buffer, curve)

    def pointer_up(self) -> None:
        """Finish the gesture and commit its stroke, if it has one."""
        with self._lock:
            stroke = self._assembler.end()
            if stroke is None:
                self._session.log_tap_discarded()
            else:
                self._session.log_stroke_committed(
                    len(stroke.curves), len(self._assembler.committed_strokes)
                )
            callback = self._emptiness_change()
        self._fire(callback)

    def handle_event(self, event: GestureEvent) -> None:
        """Dispatch a pointer event from the host's input source."""
        if event.phase is GesturePhase.DOWN:
            self.pointer_down(event.x, event.y, event.timestamp_ms)
        elif event.phase is GesturePhase.MOVE:
            self.pointer_move(event.x, event.y, event.timestamp_ms)
        else:
            self.pointer_up()

    @staticmethod
    def _point(x: float, y: float, timestamp_ms: int | None) -> TimedPoint:
        if timestamp_ms is None:
            return TimedPoint(x, y)
        return TimedPoint(x, y, timestamp_ms)

    # History

    def can_undo(self) -> bool:
        with self._lock:
            return self._assembler.can_undo()

    def can_redo(self) -> bool:
        with self._lock:
            return self._assembler.can_redo()

    def undo(self) -> bool:
        """Undo the last stroke.

        Returns:
            True if a stroke was undone
        """
        with self._lock:
            success = self._assembler.undo()
            self._session.log_history("undo", success)
            if success:
                self._redraw()
            callback = self._emptiness_change()
        self._fire(callback)
        return success

    def redo(self) -> bool:
        """Redo the last undone stroke.

        Returns:
            True if a stroke was redone
        """
        with self._lock:
            success = self._assembler.redo()
            self._session.log_history("redo", success)
            if success:
                self._redraw()
            callback = self._emptiness_change()
        self._fire(callback)
        return success

    def clear(self) -> None:
        """Remove all strokes, history and in-progress input."""
        with self._lock:
            self._assembler.clear()
            self._session.log_clear()
            self._redraw()
            callback = self._emptiness_change()
        self._fire(callback)

    # Rendering and export

    def snapshot(self) -> Image.Image:
        """Copy of the live buffer (transparent background).

        Returns:
            An independent image; zero-sized before the canvas is laid out
        """
        with self._lock:
            if self._buffer is None:
                return Image.new("RGBA", (0, 0), (0, 0, 0, 0))
            return self._buffer.image.copy()

    def to_svg(self) -> str:
        """Export committed strokes as an SVG document sized to the canvas."""
        with self._lock:
            strokes = self._assembler.committed_strokes
            svg = self._exporter.to_svg(strokes, self._canvas_size, self.config.color)
            self._session.log_export(
                "svg", self._canvas_size.width, self._canvas_size.height, len(strokes)
            )
            return svg

    def to_image(
        self,
        background: Background = Background.OPAQUE,
        crop: bool = False,
        crop_padding: int = 0,
        background_color: str = "white",
    ) -> Image.Image:
        """Export committed strokes as a new RGBA image.

        Args:
            background: Opaque fill or transparent
            crop: Crop to the drawn content
            crop_padding: Pixels kept around the content when cropping
            background_color: Fill color for opaque backgrounds

        Returns:
            A new image, zero-sized if the canvas has no size yet
        """
        with self._lock:
            strokes = self._assembler.committed_strokes
            image = self._exporter.to_image(
                strokes,
                self._canvas_size,
                self.config.color,
                background=background,
                background_color=background_color,
                crop=crop,
                crop_padding=crop_padding,
            )
            self._session.log_export("image", image.width, image.height, len(strokes))
            return image

    def _redraw(self) -> None:
        if self._buffer is None:
            return
        self._buffer.clear()
        render_strokes(self._buffer, self._assembler.committed_strokes, self.config.color)
        for curve in self._assembler.in_progress_curves:
            render_segment(self._buffer, curve)

    def _emptiness_change(self) -> Callback | None:
        # Caller holds the lock; the returned callback runs after release
        is_empty = self._assembler.is_empty
        if is_empty == self._was_empty:
            return None
        self._was_empty = is_empty
        return self._on_clear if is_empty else self._on_sign

    @staticmethod
    def _fire(callback: Callback | None) -> None:
        if callback is not None:
            callback()
