"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from inkstroke.config import PRESETS

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Inkstroke[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_recording_info(path: str, width: int, height: int, events: int, gestures: int) -> None:
    """Print recording information.

    Args:
        path: Path to the recording file
        width: Canvas width in pixels
        height: Canvas height in pixels
        events: Number of pointer events
        gestures: Number of gestures
    """
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(
        f"  {width}×{height} px {SYM_DOT} {events:,} events {SYM_DOT} {gestures:,} gestures"
    )


def print_replay_result(strokes: int, segments: int, taps: int) -> None:
    """Print replay statistics.

    Args:
        strokes: Committed strokes
        segments: Emitted curve segments
        taps: Gestures that produced no stroke
    """
    console.print(f"  [green]{strokes}[/green] strokes {SYM_DOT} {segments} segments")
    if taps:
        console.print(f"  {taps} taps without movement")


def print_presets() -> None:
    """Print a table of the built-in pen presets."""
    table = Table(title="Pen presets", title_justify="left")
    table.add_column("Preset", style="bold")
    table.add_column("Width (px)", justify="right")
    table.add_column("Max velocity", justify="right")
    table.add_column("Gamma", justify="right")
    table.add_column("Noise (px)", justify="right")

    for name, factory in PRESETS.items():
        config = factory("black")
        table.add_row(
            name,
            f"{config.min_width:g}–{config.max_width:g}",
            f"{config.max_velocity:g}",
            f"{config.width_variation:g}",
            f"{config.input_noise_threshold:g}",
        )
    console.print(table)


def print_success(outputs: list[str], total_time_s: float) -> None:
    """Print success message with written files.

    Args:
        outputs: Paths of written files
        total_time_s: Total run time in seconds
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    for output in outputs:
        line = Text("  ")
        line.append(output, style="bold")
        console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
