"""Unit tests for the stroke assembler state machine and history."""

import math

import pytest

from inkstroke.config import DrawingConfig
from inkstroke.core.assembler import AssemblerState, StrokeAssembler
from inkstroke.domain import Stroke, TimedPoint
from inkstroke.exceptions import GestureStateError


@pytest.fixture
def linear_config() -> DrawingConfig:
    """Pen with a linear response and no smoothing or noise filtering."""
    return DrawingConfig(
        min_width=2.0,
        max_width=10.0,
        min_velocity=0.0,
        max_velocity=2.0,
        width_variation=1.0,
        velocity_smoothness=0.0,
        width_smoothness=0.0,
        input_noise_threshold=0.0,
    )


def draw_line(
    assembler: StrokeAssembler, y: float = 0.0, samples: int = 5, t0: int = 0
) -> Stroke | None:
    """Drag horizontally at 1 px/ms, 10 px per sample."""
    assembler.begin(TimedPoint(0.0, y, t0))
    for i in range(1, samples):
        assembler.add(TimedPoint(10.0 * i, y, t0 + 10 * i))
    return assembler.end()


class TestGestureLifecycle:
    """Tests for begin/add/end transitions."""

    def test_initial_state(self) -> None:
        """Test a new assembler is idle and empty."""
        assembler = StrokeAssembler()
        assert assembler.state is AssemblerState.IDLE
        assert assembler.is_empty
        assert not assembler.can_undo()
        assert not assembler.can_redo()

    def test_begin_duplicates_first_point(self) -> None:
        """Test that pointer down seeds the window with the point twice."""
        assembler = StrokeAssembler()
        p = TimedPoint(3.0, 4.0, 0)
        assembler.begin(p)
        assert assembler.state is AssemblerState.COLLECTING
        assert assembler.in_progress_points == (p, p)

    def test_first_curve_scenario(self, linear_config: DrawingConfig) -> None:
        """Test the first curve of a straight drag at 1 px/ms."""
        assembler = StrokeAssembler(linear_config)
        assembler.begin(TimedPoint(0, 0, 0))
        assert assembler.add(TimedPoint(10, 0, 10)) is None
        curve = assembler.add(TimedPoint(20, 0, 20))

        assert curve is not None
        assert assembler.last_velocity == pytest.approx(1.0)
        assert curve.start_width == 0.0
        assert curve.end_width == pytest.approx(6.0)
        assert curve.start.to_tuple() == (0.0, 0.0)
        assert curve.end.to_tuple() == (10.0, 0.0)

    def test_curves_are_contiguous(self, linear_config: DrawingConfig) -> None:
        """Test that each curve starts where the previous one ended."""
        assembler = StrokeAssembler(linear_config)
        stroke = draw_line(assembler, samples=8)

        assert stroke is not None
        for prev, curr in zip(stroke.curves, stroke.curves[1:]):
            assert curr.start == prev.end
            assert curr.start_width == prev.end_width

    def test_curve_count(self, linear_config: DrawingConfig) -> None:
        """Test one curve per sample once the window is full."""
        assembler = StrokeAssembler(linear_config)
        stroke = draw_line(assembler, samples=5)
        assert stroke is not None
        assert len(stroke) == 3

    def test_tap_commits_nothing(self) -> None:
        """Test that pointer down then up leaves the drawing empty."""
        assembler = StrokeAssembler()
        assembler.begin(TimedPoint(5.0, 5.0, 0))
        assert assembler.end() is None
        assert assembler.is_empty
        assert assembler.state is AssemblerState.IDLE

    def test_short_drag_commits_nothing(self, linear_config: DrawingConfig) -> None:
        """Test that a drag too short to fill the window commits nothing."""
        assembler = StrokeAssembler(linear_config)
        assert draw_line(assembler, samples=2) is None
        assert assembler.is_empty

    def test_end_resets_in_progress(self, linear_config: DrawingConfig) -> None:
        """Test that pointer up clears the window and curves."""
        assembler = StrokeAssembler(linear_config)
        draw_line(assembler)
        assert assembler.in_progress_points == ()
        assert assembler.in_progress_curves == ()

    def test_begin_while_collecting(self) -> None:
        """Test that a second pointer down is rejected."""
        assembler = StrokeAssembler()
        assembler.begin(TimedPoint(0, 0, 0))
        with pytest.raises(GestureStateError, match="COLLECTING"):
            assembler.begin(TimedPoint(1, 1, 1))

    def test_add_while_idle(self) -> None:
        """Test that a move without pointer down is rejected."""
        with pytest.raises(GestureStateError) as exc_info:
            StrokeAssembler().add(TimedPoint(0, 0, 0))
        assert exc_info.value.state == "IDLE"

    def test_end_while_idle(self) -> None:
        """Test that pointer up without pointer down is rejected."""
        with pytest.raises(GestureStateError):
            StrokeAssembler().end()

    def test_repeated_timestamps(self) -> None:
        """Test that samples sharing a timestamp still produce finite widths."""
        config = DrawingConfig(input_noise_threshold=0.0)
        assembler = StrokeAssembler(config)
        assembler.begin(TimedPoint(0, 0, 5))
        for i in range(1, 6):
            assembler.add(TimedPoint(i * 3.0, 0, 5))
        stroke = assembler.end()

        assert stroke is not None
        for curve in stroke.curves:
            assert config.min_width <= curve.end_width <= config.max_width


class TestNoiseFilter:
    """Tests for input noise rejection."""

    def test_close_samples_rejected(self) -> None:
        """Test samples closer than the threshold are dropped."""
        assembler = StrokeAssembler(DrawingConfig(input_noise_threshold=2.0))
        assembler.begin(TimedPoint(0, 0, 0))
        assert assembler.add(TimedPoint(1.0, 1.0, 5)) is None
        assert assembler.rejected_samples == 1
        assert len(assembler.in_progress_points) == 2

    def test_threshold_is_exclusive(self) -> None:
        """Test that a sample exactly at the threshold is kept."""
        assembler = StrokeAssembler(DrawingConfig(input_noise_threshold=2.0))
        assembler.begin(TimedPoint(0, 0, 0))
        assembler.add(TimedPoint(2.0, 0.0, 5))
        assert assembler.rejected_samples == 0
        assert len(assembler.in_progress_points) == 3

    def test_jitter_only_gesture(self) -> None:
        """Test that a gesture of pure jitter commits nothing."""
        assembler = StrokeAssembler()
        assembler.begin(TimedPoint(10, 10, 0))
        for i in range(20):
            assembler.add(TimedPoint(10.2, 10.1, i))
        assert assembler.end() is None
        assert assembler.rejected_samples == 20

    def test_non_finite_samples_rejected(self, linear_config: DrawingConfig) -> None:
        """Test that NaN and infinite samples are dropped without raising."""
        assembler = StrokeAssembler(linear_config)
        assembler.begin(TimedPoint(0, 0, 0))
        assert assembler.add(TimedPoint(math.nan, 5.0, 5)) is None
        assert assembler.add(TimedPoint(math.inf, 0.0, 6)) is None
        assert assembler.rejected_samples == 2
        assert len(assembler.in_progress_points) == 2

        for i in range(1, 5):
            assembler.add(TimedPoint(10.0 * i, 0.0, 10 * i))
        stroke = assembler.end()
        assert stroke is not None
        for curve in stroke.curves:
            for point in curve.points():
                assert math.isfinite(point.x) and math.isfinite(point.y)

    def test_non_finite_start(self, linear_config: DrawingConfig) -> None:
        """Test that the first finite sample seeds a gesture started at NaN."""
        assembler = StrokeAssembler(linear_config)
        assembler.begin(TimedPoint(math.nan, math.nan, 0))
        assert assembler.state is AssemblerState.COLLECTING
        assert assembler.in_progress_points == ()

        p = TimedPoint(4.0, 4.0, 10)
        assembler.add(p)
        assert assembler.in_progress_points == (p, p)
        assert assembler.rejected_samples == 1


class TestWidthSmoothing:
    """Tests for velocity and width smoothing across segments."""

    def test_width_ema(self) -> None:
        """Test that the second width is smoothed against the first."""
        config = DrawingConfig(
            min_width=2.0,
            max_width=10.0,
            max_velocity=2.0,
            width_variation=1.0,
            velocity_smoothness=0.0,
            width_smoothness=0.5,
            input_noise_threshold=0.0,
        )
        assembler = StrokeAssembler(config)
        assembler.begin(TimedPoint(0, 0, 0))
        assembler.add(TimedPoint(10, 0, 10))
        first = assembler.add(TimedPoint(30, 0, 20))
        # Second curve spans 10 -> 30 in 10 ms: normalized velocity 1.0, target width 2.0
        second = assembler.add(TimedPoint(40, 0, 30))

        assert first is not None and second is not None
        assert first.end_width == pytest.approx(6.0)
        assert second.start_width == pytest.approx(6.0)
        assert second.end_width == pytest.approx(0.5 * 6.0 + 0.5 * 2.0)

    def test_set_config_applies_to_next_segment(self, linear_config: DrawingConfig) -> None:
        """Test that a new pen applies from the next segment only."""
        assembler = StrokeAssembler(linear_config)
        first = draw_line(assembler)
        assert first is not None

        wide = linear_config.model_copy(update={"min_width": 20.0, "max_width": 20.0})
        assembler.set_config(wide)
        assembler.begin(TimedPoint(0, 50, 1000))
        assembler.add(TimedPoint(10, 50, 1010))
        curve = assembler.add(TimedPoint(20, 50, 1020))

        assert assembler.config is wide
        assert curve is not None
        assert curve.end_width == pytest.approx(20.0)
        assert assembler.committed_strokes[0] is first
        assert first.curves[0].end_width == pytest.approx(6.0)


class TestHistory:
    """Tests for undo, redo and clear."""

    def test_undo_redo_roundtrip(self, linear_config: DrawingConfig) -> None:
        """Test that undo then redo restores the same stroke."""
        assembler = StrokeAssembler(linear_config)
        stroke = draw_line(assembler)

        assert assembler.undo()
        assert assembler.is_empty
        assert assembler.can_redo()
        assert assembler.redo_strokes == (stroke,)

        assert assembler.redo()
        assert assembler.committed_strokes == (stroke,)
        assert not assembler.can_redo()

    def test_undo_order(self, linear_config: DrawingConfig) -> None:
        """Test that undo removes the most recent stroke first."""
        assembler = StrokeAssembler(linear_config)
        a = draw_line(assembler, y=0.0)
        b = draw_line(assembler, y=20.0, t0=1000)

        assembler.undo()
        assert assembler.committed_strokes == (a,)
        assembler.undo()
        assembler.redo()
        assert assembler.committed_strokes == (a,)
        assembler.redo()
        assert assembler.committed_strokes == (a, b)

    def test_new_stroke_clears_redo(self, linear_config: DrawingConfig) -> None:
        """Test that committing a stroke discards the redo stack."""
        assembler = StrokeAssembler(linear_config)
        draw_line(assembler)
        assembler.undo()
        draw_line(assembler, y=30.0, t0=1000)
        assert not assembler.can_redo()
        assert not assembler.redo()

    def test_tap_keeps_redo(self, linear_config: DrawingConfig) -> None:
        """Test that a gesture without curves leaves the redo stack alone."""
        assembler = StrokeAssembler(linear_config)
        draw_line(assembler)
        assembler.undo()
        assembler.begin(TimedPoint(1, 1, 500))
        assembler.end()
        assert assembler.can_redo()

    def test_undo_redo_on_empty(self) -> None:
        """Test that undo and redo on empty stacks are no-ops."""
        assembler = StrokeAssembler()
        assert not assembler.undo()
        assert not assembler.redo()
        assert assembler.is_empty

    def test_clear_is_idempotent(self, linear_config: DrawingConfig) -> None:
        """Test that clearing twice equals clearing once."""
        assembler = StrokeAssembler(linear_config)
        draw_line(assembler)
        draw_line(assembler, y=10.0, t0=1000)
        assembler.undo()

        assembler.clear()
        assert assembler.is_empty
        assert not assembler.can_redo()
        assert assembler.last_width == 0.0
        assert assembler.last_velocity == 0.0

        assembler.clear()
        assert assembler.is_empty
        assert not assembler.can_undo()

    def test_committed_strokes_snapshot(self, linear_config: DrawingConfig) -> None:
        """Test that the returned history cannot mutate the assembler."""
        assembler = StrokeAssembler(linear_config)
        draw_line(assembler)
        strokes = assembler.committed_strokes
        assembler.undo()
        assert len(strokes) == 1
