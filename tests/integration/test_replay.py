"""End-to-end tests that replay gesture recordings and verify exported files."""

import json
import re
from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from inkstroke import __version__
from inkstroke.cli.app import app
from inkstroke.config import DrawingConfig
from inkstroke.core.pad import SignaturePad
from inkstroke.io.recording import RecordingReader

runner = CliRunner()


def signature_events() -> list[dict]:
    """Two strokes: a gentle wave and an underline, plus a tap."""
    events: list[dict] = []
    t = 0
    events.append({"phase": "down", "x": 30, "y": 60, "t": t})
    for i in range(1, 25):
        t += 16
        events.append({"phase": "move", "x": 30 + 8 * i, "y": 60 + 12 * ((i % 4) - 1.5), "t": t})
    events.append({"phase": "up", "x": 222, "y": 60, "t": t + 16})

    t += 400
    events.append({"phase": "down", "x": 40, "y": 110, "t": t})
    for i in range(1, 12):
        t += 10
        events.append({"phase": "move", "x": 40 + 15 * i, "y": 110 + 0.5 * i, "t": t})
    events.append({"phase": "up", "x": 205, "y": 115, "t": t + 10})

    events.append({"phase": "down", "x": 250, "y": 30, "t": t + 500})
    events.append({"phase": "up", "x": 250, "y": 30, "t": t + 520})
    return events


@pytest.fixture
def recording(tmp_path: Path) -> Path:
    path = tmp_path / "signature.json"
    data = {"canvas": {"width": 300, "height": 150}, "events": signature_events()}
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def replay(path: Path, config: DrawingConfig | None = None) -> SignaturePad:
    pad = SignaturePad(config)
    with RecordingReader(path) as reader:
        pad.update_canvas_size(reader.canvas_size.width, reader.canvas_size.height)
        for event in reader.iter_events():
            pad.handle_event(event)
    return pad


class TestReplayPipeline:
    """Replay recordings through the pad without the CLI."""

    def test_strokes_and_taps(self, recording: Path) -> None:
        """Test that two drags commit and the tap is discarded."""
        pad = replay(recording)
        assert len(pad.strokes) == 2
        assert pad.session_logger.stats.taps_discarded == 1

    def test_replay_is_deterministic(self, recording: Path) -> None:
        """Test that replaying a recording twice gives identical exports."""
        first = replay(recording)
        second = replay(recording)
        assert first.strokes == second.strokes
        assert first.to_svg() == second.to_svg()
        assert first.to_image().tobytes() == second.to_image().tobytes()

    def test_widths_within_pen_range(self, recording: Path) -> None:
        """Test that every emitted width respects the pen range."""
        config = DrawingConfig.fountain_pen()
        pad = replay(recording, config)
        for stroke in pad.strokes:
            for curve in stroke.curves:
                assert config.min_width <= curve.end_width <= config.max_width

    def test_fast_stroke_is_thinner(self, recording: Path) -> None:
        """Test that the faster underline ends up thinner than the wave."""
        pad = replay(recording)
        wave, underline = pad.strokes
        assert underline.curves[-1].end_width < wave.curves[-1].end_width

    def test_undo_then_export(self, recording: Path) -> None:
        """Test that exports reflect undo."""
        pad = replay(recording)
        pad.undo()
        svg = pad.to_svg()
        assert len(re.findall(r"<path", svg)) >= 1
        assert len(pad.strokes) == 1


class TestCli:
    """Test the inkstroke command."""

    def test_render_both(self, recording: Path) -> None:
        """Test default render writes SVG and PNG next to the recording."""
        result = runner.invoke(app, [str(recording)])

        assert result.exit_code == 0, result.output
        svg_path = recording.parent / "signature-ink.svg"
        png_path = recording.parent / "signature-ink.png"
        assert svg_path.exists()
        assert png_path.exists()
        assert "<path" in svg_path.read_text(encoding="utf-8")
        with Image.open(png_path) as image:
            assert image.size == (300, 150)
            assert image.getpixel((0, 0)) == (255, 255, 255, 255)
        assert "Complete" in result.output

    def test_render_svg_only(self, recording: Path, tmp_path: Path) -> None:
        """Test --format svg with an explicit output stem."""
        out = tmp_path / "out" / "sig"
        result = runner.invoke(app, [str(recording), "--format", "svg", "-o", str(out), "-q"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "out" / "sig.svg").exists()
        assert not (tmp_path / "out" / "sig.png").exists()

    def test_render_cropped_transparent(self, recording: Path, tmp_path: Path) -> None:
        """Test cropped, transparent PNG output."""
        out = tmp_path / "cropped"
        result = runner.invoke(
            app,
            [str(recording), "-f", "png", "-o", str(out), "--crop", "--padding", "4", "--transparent", "-q"],
        )

        assert result.exit_code == 0, result.output
        with Image.open(tmp_path / "cropped.png") as image:
            assert image.width < 300
            assert image.height < 150
            assert image.getpixel((0, 0))[3] == 0

    def test_render_with_preset_and_color(self, recording: Path, tmp_path: Path) -> None:
        """Test preset and color options reach the SVG."""
        out = tmp_path / "blue"
        result = runner.invoke(
            app,
            [str(recording), "-f", "svg", "-o", str(out), "-p", "marker", "-c", "#0000ff", "-q"],
        )

        assert result.exit_code == 0, result.output
        assert 'stroke="#0000ff"' in (tmp_path / "blue.svg").read_text(encoding="utf-8")

    def test_list_presets(self) -> None:
        """Test --list-presets prints the preset table."""
        result = runner.invoke(app, ["--list-presets"])
        assert result.exit_code == 0
        assert "fountain_pen" in result.output
        assert "edding" in result.output

    def test_version(self) -> None:
        """Test --version."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a recording path that does not exist."""
        result = runner.invoke(app, [str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Recording not found" in result.output

    def test_invalid_recording(self, tmp_path: Path) -> None:
        """Test a file that is not a recording."""
        path = tmp_path / "bad.json"
        path.write_text('{"events": []}', encoding="utf-8")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1
        assert "Could not load recording" in result.output

    def test_invalid_color(self, recording: Path) -> None:
        """Test an unknown pen color."""
        result = runner.invoke(app, [str(recording), "--color", "not-a-color"])
        assert result.exit_code == 1
        assert "Invalid pen settings" in result.output

    def test_unknown_preset(self, recording: Path) -> None:
        """Test an unknown preset name."""
        result = runner.invoke(app, [str(recording), "--preset", "crayon"])
        assert result.exit_code == 1
        assert "Unknown preset" in result.output

    def test_verbose_and_quiet(self, recording: Path) -> None:
        """Test that --verbose and --quiet are mutually exclusive."""
        result = runner.invoke(app, [str(recording), "-v", "-q"])
        assert result.exit_code == 1

    def test_gesture_out_of_order(self, tmp_path: Path) -> None:
        """Test a recording with a move before any pointer down."""
        path = tmp_path / "broken.json"
        data = {
            "canvas": {"width": 100, "height": 100},
            "events": [{"phase": "move", "x": 1, "y": 1, "t": 0}],
        }
        path.write_text(json.dumps(data), encoding="utf-8")
        result = runner.invoke(app, [str(path), "-f", "svg"])
        assert result.exit_code == 1
        assert "Cannot add a sample" in result.output

    def test_zero_canvas_png(self, tmp_path: Path) -> None:
        """Test that a PNG cannot be written for a zero-sized canvas."""
        path = tmp_path / "blank.json"
        path.write_text('{"canvas": {"width": 0, "height": 0}}', encoding="utf-8")

        svg_result = runner.invoke(app, [str(path), "-f", "svg", "-q"])
        assert svg_result.exit_code == 0
        assert (tmp_path / "blank-ink.svg").exists()

        png_result = runner.invoke(app, [str(path), "-f", "png"])
        assert png_result.exit_code == 1
        assert "Could not save export" in png_result.output
