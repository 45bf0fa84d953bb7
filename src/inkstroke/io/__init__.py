"""Rendering and file I/O layer for inkstroke.

This module turns strokes into pixels and SVG, and moves recordings and
exports between the pipeline and the filesystem.

Key responsibilities:
- Rasterize variable-width curves onto a draw target
- Build SVG documents from width-tagged curves
- Export committed strokes (full canvas or cropped)
- Load gesture recordings and save exports

Key classes:
- PillowDrawTarget: RGBA software buffer
- SvgBuilder: SVG document builder
- SignatureExporter: Raster and vector export
- RecordingReader: Load gesture recordings
- ExportWriter: Save SVG/PNG files
"""

from inkstroke.io.exporter import SignatureExporter
from inkstroke.io.raster import (
    DrawTarget,
    PillowDrawTarget,
    render_segment,
    render_stroke,
    render_strokes,
)
from inkstroke.io.recording import RecordingReader
from inkstroke.io.vector import SvgBuilder, SvgPathBuilder, SvgPoint
from inkstroke.io.writer import ExportWriter

__all__ = [
    "DrawTarget",
    "ExportWriter",
    "PillowDrawTarget",
    "RecordingReader",
    "SignatureExporter",
    "SvgBuilder",
    "SvgPathBuilder",
    "SvgPoint",
    "render_segment",
    "render_stroke",
    "render_strokes",
]
