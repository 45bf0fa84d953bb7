"""Stroke assembly from live pointer samples.

The StrokeAssembler is a two-state machine (IDLE -> COLLECTING -> IDLE) that
turns one gesture's samples into width-tagged curve segments and commits them
as an immutable Stroke on pointer up. It also owns the stroke-level
undo/redo history.

Per accepted sample the assembler keeps a sliding window of raw points. Once
the window holds four points, control points are synthesized around the two
middle samples, a curve is emitted between them, and the window slides
forward by one:

    window:  p0   p1 ---- curve ---- p2   p3
                     c2(p0,p1,p2)  c1(p1,p2,p3)
"""

import logging
import math
from enum import Enum, auto

from inkstroke.config import DrawingConfig
from inkstroke.core.geometry import synthesize_control_points
from inkstroke.core.width import ema, width_for
from inkstroke.domain import CurveSegment, Stroke, TimedPoint
from inkstroke.exceptions import GestureStateError

logger = logging.getLogger(__name__)

# Window size at which a curve can be synthesized
CURVE_WINDOW_SIZE = 4


def _is_finite(point: TimedPoint) -> bool:
    return math.isfinite(point.x) and math.isfinite(point.y)


class AssemblerState(Enum):
    """Gesture state of the assembler."""

    IDLE = auto()
    COLLECTING = auto()


class StrokeAssembler:
    """Builds strokes from pointer samples and keeps undo/redo history.

    Drive it with `begin`, `add` and `end` in gesture order. Numeric edge
    cases (repeated timestamps, coincident points) never raise; calling the
    gesture entry points out of order does.

    Example:
        assembler = StrokeAssembler(DrawingConfig())
        assembler.begin(TimedPoint(0, 0, 0))
        assembler.add(TimedPoint(10, 0, 10))
        assembler.add(TimedPoint(20, 0, 20))
        stroke = assembler.end()
    """

    def __init__(self, config: DrawingConfig | None = None) -> None:
        """Initialize an idle assembler with empty history.

        Args:
            config: Pen configuration (defaults to DrawingConfig())
        """
        self._config = config if config is not None else DrawingConfig()
        self._state = AssemblerState.IDLE

        self._strokes: list[Stroke] = []
        self._undone: list[Stroke] = []
        self._points: list[TimedPoint] = []
        self._curves: list[CurveSegment] = []

        self._last_velocity = 0.0
        self._last_width = 0.0
        self._rejected_samples = 0

    # Configuration

    @property
    def config(self) -> DrawingConfig:
        return self._config

    def set_config(self, config: DrawingConfig) -> None:
        """Replace the pen configuration.

        The new configuration applies from the next emitted segment.
        Committed strokes and already emitted segments keep their widths.
        """
        self._config = config

    # Gesture state machine

    @property
    def state(self) -> AssemblerState:
        return self._state

    def begin(self, point: TimedPoint) -> None:
        """Start a gesture at the pointer-down position.

        A non-finite position still starts the gesture; the first finite
        sample then seeds the window instead.

        Raises:
            GestureStateError: If a gesture is already in progress
        """
        if self._state is not AssemblerState.IDLE:
            raise GestureStateError("begin a gesture", self._state.name)

        self._points.clear()
        self._curves.clear()
        self._state = AssemblerState.COLLECTING

        if not _is_finite(point):
            self._rejected_samples += 1
            logger.debug("Non-finite gesture start dropped")
            return

        self._points.append(point)
        self._ensure_window_depth()
        logger.debug("Gesture started at (%.1f, %.1f)", point.x, point.y)

    def add(self, point: TimedPoint) -> CurveSegment | None:
        """Feed a pointer-move sample.

        Samples with a NaN or infinite coordinate are dropped like noise.

        Args:
            point: The new sample

        Returns:
            The curve segment completed by this sample, or None if the sample
            was rejected as noise or the window is still filling

        Raises:
            GestureStateError: If no gesture is in progress
        """
        if self._state is not AssemblerState.COLLECTING:
            raise GestureStateError("add a sample", self._state.name)

        if not _is_finite(point):
            self._rejected_samples += 1
            logger.debug("Non-finite sample rejected")
            return None

        if self._points:
            gap = point.distance_to(self._points[-1])
            if gap < self._config.input_noise_threshold:
                self._rejected_samples += 1
                logger.debug("Sample rejected as noise (%.3f px)", gap)
                return None

        self._points.append(point)

        if len(self._points) >= CURVE_WINDOW_SIZE:
            return self._emit_curve()

        self._ensure_window_depth()
        return None

    def end(self) -> Stroke | None:
        """Finish the gesture at pointer up.

        Returns:
            The committed Stroke, or None if the gesture produced no curves
            (a tap, or movement that never filled the window)

        Raises:
            GestureStateError: If no gesture is in progress
        """
        if self._state is not AssemblerState.COLLECTING:
            raise GestureStateError("end a gesture", self._state.name)

        stroke: Stroke | None = None
        if self._curves:
            stroke = Stroke(curves=tuple(self._curves))
            self._strokes.append(stroke)
            self._undone.clear()
            logger.debug("Stroke committed with %d curves", len(stroke.curves))

        self._points.clear()
        self._curves.clear()
        self._state = AssemblerState.IDLE
        return stroke

    def _ensure_window_depth(self) -> None:
        # A lone sample is doubled so the window never holds a single point
        if len(self._points) == 1:
            self._points.append(self._points[0])

    def _emit_curve(self) -> CurveSegment:
        p0, p1, p2, p3 = self._points[:CURVE_WINDOW_SIZE]
        control2 = synthesize_control_points(p0, p1, p2).c2
        control3 = synthesize_control_points(p1, p2, p3).c1

        velocity = p2.velocity_from(p1)
        velocity = ema(self._last_velocity, velocity, self._config.velocity_smoothness)

        target_width = width_for(velocity, self._config)
        if self._last_width > 0:
            new_width = ema(self._last_width, target_width, self._config.width_smoothness)
        else:
            new_width = target_width

        curve = CurveSegment(
            start=p1,
            control1=control2,
            control2=control3,
            end=p2,
            start_width=self._last_width,
            end_width=new_width,
        )
        self._curves.append(curve)

        self._last_velocity = velocity
        self._last_width = new_width
        del self._points[0]
        return curve

    # History

    @property
    def committed_strokes(self) -> tuple[Stroke, ...]:
        return tuple(self._strokes)

    @property
    def redo_strokes(self) -> tuple[Stroke, ...]:
        return tuple(self._undone)

    @property
    def is_empty(self) -> bool:
        return not self._strokes

    def can_undo(self) -> bool:
        return bool(self._strokes)

    def can_redo(self) -> bool:
        return bool(self._undone)

    def undo(self) -> bool:
        """Move the last committed stroke onto the redo stack.

        Returns:
            True if a stroke was undone, False if there was nothing to undo
        """
        if not self._strokes:
            return False
        self._undone.append(self._strokes.pop())
        return True

    def redo(self) -> bool:
        """Recommit the most recently undone stroke.

        Returns:
            True if a stroke was redone, False if the redo stack was empty
        """
        if not self._undone:
            return False
        self._strokes.append(self._undone.pop())
        return True

    def clear(self) -> None:
        """Drop all history and in-progress state and reset the filters."""
        self._strokes.clear()
        self._undone.clear()
        self._points.clear()
        self._curves.clear()
        self._last_velocity = 0.0
        self._last_width = 0.0

    # In-progress state

    @property
    def in_progress_points(self) -> tuple[TimedPoint, ...]:
        return tuple(self._points)

    @property
    def in_progress_curves(self) -> tuple[CurveSegment, ...]:
        return tuple(self._curves)

    @property
    def last_velocity(self) -> float:
        return self._last_velocity

    @property
    def last_width(self) -> float:
        return self._last_width

    @property
    def rejected_samples(self) -> int:
        """Number of samples dropped by the noise filter since creation."""
        return self._rejected_samples
