"""Export of committed strokes to raster images and SVG documents.

Every export renders into a freshly created buffer or string, so callers can
keep the result while drawing continues.
"""

import logging
from collections.abc import Sequence

from PIL import Image

from inkstroke.config import Background
from inkstroke.core.geometry import compute_bounds, crop_rect
from inkstroke.domain import CanvasSize, Stroke
from inkstroke.io.raster import TRANSPARENT, PillowDrawTarget, render_strokes
from inkstroke.io.vector import SvgBuilder

logger = logging.getLogger(__name__)


class SignatureExporter:
    """Converts strokes into PNG-ready images and SVG documents.

    Example:
        exporter = SignatureExporter()
        image = exporter.to_image(strokes, CanvasSize(400, 200), "black", crop=True)
        svg = exporter.to_svg(strokes, CanvasSize(400, 200), "black")
    """

    def to_image(
        self,
        strokes: Sequence[Stroke],
        size: CanvasSize,
        color: str,
        background: Background = Background.OPAQUE,
        background_color: str = "white",
        crop: bool = False,
        crop_padding: int = 0,
    ) -> Image.Image:
        """Render strokes to a new RGBA image.

        Args:
            strokes: Strokes to render, in drawing order
            size: Canvas size to render at
            color: Pen color
            background: Opaque fill or transparent
            background_color: Fill color for opaque backgrounds
            crop: Crop to the stroke bounds
            crop_padding: Pixels kept around the bounds when cropping

        Returns:
            A new image. A zero-sized canvas yields a zero-sized image.

        Raises:
            ValueError: If crop_padding is negative
        """
        if crop_padding < 0:
            raise ValueError(f"crop_padding must be >= 0, got {crop_padding}")

        if size.is_empty:
            logger.debug("Raster export skipped: canvas size is %s", size)
            return Image.new("RGBA", (0, 0), TRANSPARENT)

        target = PillowDrawTarget(size.width, size.height)
        target.clear(background_color if background is Background.OPAQUE else None)
        render_strokes(target, strokes, color)
        image = target.image

        if crop and strokes:
            rect = crop_rect(compute_bounds(strokes), crop_padding, size)
            if not rect.is_empty:
                image = image.crop(rect.to_box())

        return image

    def to_svg(self, strokes: Sequence[Stroke], size: CanvasSize, color: str) -> str:
        """Render strokes to an SVG document sized to the canvas.

        Each curve is written with the rounded mean of its start and end
        width. A zero-sized canvas yields a zero-sized document without
        paths.

        Args:
            strokes: Strokes to export
            size: Canvas size (viewport and viewBox)
            color: Pen color

        Returns:
            SVG document string
        """
        builder = SvgBuilder()
        if size.is_empty:
            logger.debug("Vector export has no paths: canvas size is %s", size)
            return builder.build(width=max(size.width, 0), height=max(size.height, 0), color=color)

        for stroke in strokes:
            for curve in stroke.curves:
                builder.append(curve, (curve.start_width + curve.end_width) / 2.0)
        return builder.build(width=size.width, height=size.height, color=color)
