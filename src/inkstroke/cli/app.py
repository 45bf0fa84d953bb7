"""CLI application entry point for inkstroke.

This module provides the main CLI interface using Typer. It replays a
gesture recording through a SignaturePad and writes the result as SVG
and/or PNG.
"""

import time
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from inkstroke import __version__
from inkstroke.cli.output import (
    console,
    print_error,
    print_header,
    print_presets,
    print_recording_info,
    print_replay_result,
    print_step,
    print_success,
)
from inkstroke.config import (
    Background,
    DrawingConfig,
    ExportConfig,
    InkSettings,
    LoggingConfig,
    get_preset,
)
from inkstroke.core import SignaturePad
from inkstroke.exceptions import (
    ExportSaveError,
    InkStrokeError,
    RecordingFormatError,
    RecordingLoadError,
)
from inkstroke.io import ExportWriter, RecordingReader
from inkstroke.utils import SessionLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="inkstroke",
    help="Render recorded pointer gestures as smooth variable-width ink.",
    add_completion=False,
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Files written by a render."""

    SVG = "svg"
    PNG = "png"
    BOTH = "both"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Inkstroke[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    recording: Annotated[
        Path | None,
        typer.Argument(
            help="Path to a JSON gesture recording",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path without extension (default: {name}-ink)",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Files to write",
            case_sensitive=False,
        ),
    ] = OutputFormat.BOTH,
    preset: Annotated[
        str | None,
        typer.Option(
            "--preset",
            "-p",
            help="Pen preset (fountain_pen|bic_pen|marker|edding)",
        ),
    ] = None,
    color: Annotated[
        str,
        typer.Option(
            "--color",
            "-c",
            help="Pen color (name or hex)",
        ),
    ] = "black",
    transparent: Annotated[
        bool,
        typer.Option(
            "--transparent",
            help="Transparent PNG background instead of white",
        ),
    ] = False,
    crop: Annotated[
        bool,
        typer.Option(
            "--crop",
            help="Crop the PNG to the drawn strokes",
        ),
    ] = False,
    padding: Annotated[
        int,
        typer.Option(
            "--padding",
            help="Padding in pixels kept around cropped strokes",
            min=0,
        ),
    ] = 0,
    list_presets: Annotated[
        bool,
        typer.Option(
            "--list-presets",
            help="List the built-in pen presets and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Replay a gesture recording and export the drawing.

    The recording's pointer events are fed through the same stroke pipeline
    a live signature pad uses, then the committed strokes are written as an
    SVG document and/or a PNG image.

    Example:
        inkstroke signature.json --preset fountain_pen --crop --padding 8

    This will create signature-ink.svg and signature-ink.png next to the
    recording.
    """
    if list_presets:
        print_presets()
        raise typer.Exit(code=0)

    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if recording is None:
        print_error("Missing recording", details="Pass the path to a JSON gesture recording.")
        raise typer.Exit(code=1)

    if not recording.exists() or not recording.is_file():
        print_error(
            f"Recording not found: {recording}",
            details=f"The file '{recording}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    try:
        drawing = get_preset(preset, color) if preset else DrawingConfig(color=color)
        settings = InkSettings(
            drawing=drawing,
            export=ExportConfig(
                background=Background.TRANSPARENT if transparent else Background.OPAQUE,
                crop=crop,
                crop_padding=padding,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level,
            ),
        )
    except (ValidationError, ValueError) as e:
        print_error("Invalid pen settings", details=str(e))
        raise typer.Exit(code=1) from None

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    start_time = time.time()
    session = SessionLogger(logger)
    pad = SignaturePad(settings.drawing, session_logger=session)

    try:
        if not quiet:
            print_step("Loading recording")

        with RecordingReader(recording) as reader:
            if not quiet:
                print_recording_info(
                    path=str(recording),
                    width=reader.canvas_size.width,
                    height=reader.canvas_size.height,
                    events=reader.event_count,
                    gestures=reader.gesture_count,
                )
                print_step("Replaying gestures")

            pad.update_canvas_size(reader.canvas_size.width, reader.canvas_size.height)
            for event in reader.iter_events():
                pad.handle_event(event)

        stats = session.stats
        if not quiet:
            print_replay_result(
                strokes=len(pad.strokes),
                segments=stats.segments_emitted,
                taps=stats.taps_discarded,
            )
            print_step("Exporting")

        writer = ExportWriter(output if output is not None else ExportWriter.get_output_stem(recording))
        written: list[str] = []

        if output_format in (OutputFormat.SVG, OutputFormat.BOTH):
            written.append(str(writer.save_svg(pad.to_svg())))

        if output_format in (OutputFormat.PNG, OutputFormat.BOTH):
            image = pad.to_image(
                background=settings.export.background,
                crop=settings.export.crop,
                crop_padding=settings.export.crop_padding,
                background_color=settings.export.background_color,
            )
            written.append(str(writer.save_image(image)))

        if not quiet:
            print_success(outputs=written, total_time_s=time.time() - start_time)

    except FileNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except (RecordingLoadError, RecordingFormatError) as e:
        print_error("Could not load recording", details=str(e))
        raise typer.Exit(code=1)
    except ExportSaveError as e:
        print_error(f"Could not save export: {e.reason}")
        raise typer.Exit(code=1)
    except InkStrokeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
