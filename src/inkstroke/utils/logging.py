"""Logging utilities for Inkstroke."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog


@dataclass
class SessionStats:
    """Statistics for one drawing session."""

    gestures_started: int = 0
    segments_emitted: int = 0
    strokes_committed: int = 0
    taps_discarded: int = 0
    undo_count: int = 0
    redo_count: int = 0
    clear_count: int = 0
    export_count: int = 0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("inkstroke")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SessionLogger:
    """Logger for drawing-session events and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("inkstroke")
        self._stats = SessionStats()

    def log_gesture_start(self, x: float, y: float) -> None:
        """Log pointer down."""
        self._logger.debug("Gesture started", x=round(x, 1), y=round(y, 1))
        self._stats.gestures_started += 1

    def log_segment(self, start_width: float, end_width: float, velocity: float) -> None:
        """Log an emitted curve segment."""
        self._logger.debug(
            "Segment emitted",
            start_width=round(start_width, 2),
            end_width=round(end_width, 2),
            velocity=round(velocity, 3),
        )
        self._stats.segments_emitted += 1

    def log_stroke_committed(self, curve_count: int, stroke_count: int) -> None:
        """Log a committed stroke."""
        self._logger.info("Stroke committed", curves=curve_count, strokes=stroke_count)
        self._stats.strokes_committed += 1

    def log_tap_discarded(self) -> None:
        """Log a gesture that produced no curves."""
        self._logger.debug("Gesture produced no curves")
        self._stats.taps_discarded += 1

    def log_history(self, action: str, success: bool) -> None:
        """Log an undo or redo request."""
        self._logger.info("History action", action=action, success=success)
        if not success:
            return
        if action == "undo":
            self._stats.undo_count += 1
        elif action == "redo":
            self._stats.redo_count += 1

    def log_clear(self) -> None:
        """Log a clear."""
        self._logger.info("Drawing cleared")
        self._stats.clear_count += 1

    def log_export(self, kind: str, width: int, height: int, strokes: int) -> None:
        """Log an export."""
        self._logger.info("Export", kind=kind, width=width, height=height, strokes=strokes)
        self._stats.export_count += 1

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._stats
