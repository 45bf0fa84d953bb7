"""Command-line interface for inkstroke.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Replay of recorded gestures through the stroke pipeline
- SVG and PNG export with crop and background options
- Pen presets
- Verbose/quiet output modes
"""

from inkstroke.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
