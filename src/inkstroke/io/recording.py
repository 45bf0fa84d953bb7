"""Gesture recording reader.

A recording is a JSON file holding the canvas size and the pointer events of
one drawing session, in delivery order:

    {
        "canvas": {"width": 400, "height": 200},
        "events": [
            {"phase": "down", "x": 10, "y": 20, "t": 0},
            {"phase": "move", "x": 14, "y": 21, "t": 16},
            {"phase": "up", "x": 14, "y": 21, "t": 32}
        ]
    }

Timestamps (`t`, milliseconds) are optional; events without one are stamped
when they are replayed.
"""

from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from inkstroke.domain import CanvasSize, GestureEvent, GesturePhase
from inkstroke.exceptions import RecordingFormatError, RecordingLoadError


class RecordedCanvas(BaseModel):
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class RecordedEvent(BaseModel):
    phase: GesturePhase
    x: float
    y: float
    t: int | None = None


class Recording(BaseModel):
    """Validated contents of a recording file."""

    canvas: RecordedCanvas
    events: list[RecordedEvent] = Field(default_factory=list)


class RecordingReader:
    """Loads gesture recordings and yields their pointer events.

    Example:
        with RecordingReader(Path("signature.json")) as reader:
            pad.update_canvas_size(*reader.canvas_size.to_tuple())
            for event in reader.iter_events():
                pad.handle_event(event)
    """

    def __init__(self, recording_path: Path) -> None:
        """Initialize the recording reader.

        Args:
            recording_path: Path to the JSON recording
        """
        self._recording_path = recording_path
        self._recording: Recording | None = None

    def load(self) -> None:
        """Load and validate the recording.

        Raises:
            FileNotFoundError: If the recording file does not exist
            RecordingLoadError: If the file cannot be read
            RecordingFormatError: If the file is not a valid recording
        """
        if not self._recording_path.exists():
            raise FileNotFoundError(f"Recording file not found: {self._recording_path}")

        try:
            raw = self._recording_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise RecordingLoadError(str(self._recording_path), str(e)) from e

        try:
            self._recording = Recording.model_validate_json(raw)
        except ValidationError as e:
            raise RecordingFormatError(str(self._recording_path), str(e)) from e

    def _require_loaded(self) -> Recording:
        if self._recording is None:
            raise RuntimeError("Recording not loaded. Call load() first.")
        return self._recording

    @property
    def canvas_size(self) -> CanvasSize:
        """Canvas size the recording was captured on.

        Raises:
            RuntimeError: If the recording has not been loaded yet
        """
        canvas = self._require_loaded().canvas
        return CanvasSize(canvas.width, canvas.height)

    @property
    def event_count(self) -> int:
        """Number of pointer events in the recording.

        Raises:
            RuntimeError: If the recording has not been loaded yet
        """
        return len(self._require_loaded().events)

    @property
    def gesture_count(self) -> int:
        """Number of gestures (pointer-down events) in the recording."""
        return sum(
            1 for event in self._require_loaded().events if event.phase is GesturePhase.DOWN
        )

    def iter_events(self) -> Iterator[GestureEvent]:
        """Iterate over the recorded events in delivery order.

        Raises:
            RuntimeError: If the recording has not been loaded yet
        """
        for event in self._require_loaded().events:
            yield GestureEvent(phase=event.phase, x=event.x, y=event.y, timestamp_ms=event.t)

    def close(self) -> None:
        """Release the loaded recording."""
        self._recording = None

    def __enter__(self) -> "RecordingReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
