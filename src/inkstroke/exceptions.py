"""Exception hierarchy for Inkstroke.

Numeric degeneracies in the drawing pipeline (zero elapsed time, coincident
points, zero-length curves) are never reported through these exceptions;
they resolve to defined fallback values in place.
"""


class InkStrokeError(Exception):
    """Base exception for all Inkstroke errors."""

    pass


class GestureError(InkStrokeError):
    """Errors related to the pointer gesture lifecycle."""

    pass


class GestureStateError(GestureError):
    """A gesture entry point was called in the wrong assembler state."""

    def __init__(self, operation: str, state: str) -> None:
        self.operation = operation
        self.state = state
        super().__init__(f"Cannot {operation} while assembler is {state}")


class RecordingError(InkStrokeError):
    """Errors related to gesture recordings."""

    pass


class RecordingLoadError(RecordingError):
    """Error loading a gesture recording file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load recording '{path}': {reason}")


class RecordingFormatError(RecordingError):
    """Recording file is not a valid gesture recording."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid recording format '{path}': {details}")


class ExportError(InkStrokeError):
    """Errors related to exporting a drawing."""

    pass


class ExportSaveError(ExportError):
    """Error saving an exported drawing."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save export '{path}': {reason}")
