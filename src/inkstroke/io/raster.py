"""Variable-width curve rasterization.

Curves are drawn by sampling points along the Bezier and stamping a round
pen at each one, with the pen width eased from the segment's start width to
its end width. The same routine serves live drawing, history replay and
static export, so all three produce identical pixels.

Drawing goes through the small DrawTarget protocol; PillowDrawTarget is the
software buffer implementation.
"""

import math
from collections.abc import Iterable
from typing import Protocol

from PIL import Image, ImageColor, ImageDraw

from inkstroke.domain import CurveSegment, Rect, Stroke

TRANSPARENT = (0, 0, 0, 0)


class DrawTarget(Protocol):
    """Minimal 2D drawing surface the rasterizer needs."""

    def set_stroke_width(self, width: float) -> None: ...

    def set_color(self, color: str) -> None: ...

    def plot_point(self, x: float, y: float) -> None: ...

    def fill_rect(self, rect: Rect, color: str) -> None: ...

    def clear(self, color: str | None = None) -> None: ...


class PillowDrawTarget:
    """RGBA software buffer backed by a Pillow image.

    Example:
        target = PillowDrawTarget(400, 200)
        target.clear("white")
        render_strokes(target, strokes, "black")
        target.image.save("signature.png")
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a fully transparent buffer.

        Args:
            width: Buffer width in pixels
            height: Buffer height in pixels
        """
        self._image = Image.new("RGBA", (width, height), TRANSPARENT)
        self._draw = ImageDraw.Draw(self._image)
        self._stroke_width = 1.0
        self._fill: tuple[int, ...] = (0, 0, 0, 255)

    @property
    def image(self) -> Image.Image:
        """The underlying image (live, not a copy)."""
        return self._image

    @property
    def stroke_width(self) -> float:
        return self._stroke_width

    def set_stroke_width(self, width: float) -> None:
        self._stroke_width = width

    def set_color(self, color: str) -> None:
        self._fill = ImageColor.getcolor(color, "RGBA")

    def plot_point(self, x: float, y: float) -> None:
        """Stamp a round pen of the current width centered on (x, y)."""
        radius = self._stroke_width / 2.0
        if radius <= 0.5:
            # Hairline
            self._draw.point((x, y), fill=self._fill)
            return
        self._draw.ellipse(
            (x - radius, y - radius, x + radius, y + radius),
            fill=self._fill,
        )

    def fill_rect(self, rect: Rect, color: str) -> None:
        self._draw.rectangle(
            (rect.left, rect.top, rect.right, rect.bottom),
            fill=ImageColor.getcolor(color, "RGBA"),
        )

    def clear(self, color: str | None = None) -> None:
        """Fill the whole buffer with a color, or make it transparent."""
        fill = TRANSPARENT if color is None else ImageColor.getcolor(color, "RGBA")
        self._image.paste(fill, (0, 0, self._image.width, self._image.height))


def render_segment(target: DrawTarget, segment: CurveSegment) -> None:
    """Draw one curve segment with eased width.

    The step count is the ceiling of the approximate arc length, so points
    land roughly a pixel apart. Width follows a cubic ease:
    start + (end - start) * t^3. A segment whose length overflows is skipped.

    Args:
        target: Surface to draw on (its color must already be set)
        segment: Curve to draw
    """
    length = segment.length()
    if not math.isfinite(length):
        return
    steps = math.ceil(length)
    width_change = segment.end_width - segment.start_width
    for i in range(steps):
        t = i / steps
        x, y = segment.point_at(t)
        target.set_stroke_width(segment.start_width + width_change * t * t * t)
        target.plot_point(x, y)


def render_stroke(target: DrawTarget, stroke: Stroke) -> None:
    """Draw every curve of a stroke in order."""
    for curve in stroke.curves:
        render_segment(target, curve)


def render_strokes(target: DrawTarget, strokes: Iterable[Stroke], color: str) -> None:
    """Draw strokes in order using one pen color.

    Args:
        target: Surface to draw on
        strokes: Strokes to draw
        color: Pen color
    """
    target.set_color(color)
    for stroke in strokes:
        render_stroke(target, stroke)
