"""SVG path export for strokes.

Curves are written as relative cubic commands on integer coordinates
(fractional precision is not visible at export resolution). Consecutive
curves share one <path> element as long as they connect and round to the
same stroke width; otherwise a new path starts.

The document is an SVG Tiny 1.2 file built with svgwrite.

Reference: https://www.w3.org/TR/SVGTiny12/paths.html
"""

import io
import math
from dataclasses import dataclass

import svgwrite

from inkstroke.domain import CurveSegment, TimedPoint

SVG_MOVE = "M"
SVG_RELATIVE_CUBIC_BEZIER_CURVE = "c"
ZERO_CURVE = "0,0 0,0 0,0 "


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


@dataclass(frozen=True, slots=True)
class SvgPoint:
    """A point as written to the SVG document (integer coordinates).

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: int
    y: int

    @classmethod
    def from_point(cls, point: TimedPoint) -> "SvgPoint":
        return cls(round_half_up(point.x), round_half_up(point.y))

    def relative_to(self, reference: "SvgPoint") -> str:
        """Format as "dx,dy" offset from a reference point."""
        return str(SvgPoint(self.x - reference.x, self.y - reference.y))

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


class SvgPathBuilder:
    """Accumulates the path data of one <path> element.

    Attributes:
        start_point: Absolute start of the path
        stroke_width: Rounded stroke width shared by every curve in the path
        last_point: End of the most recently appended curve
    """

    def __init__(self, start_point: SvgPoint, stroke_width: int) -> None:
        self.start_point = start_point
        self.stroke_width = stroke_width
        self.last_point = start_point
        self._commands: list[str] = []

    def append(self, control1: SvgPoint, control2: SvgPoint, end: SvgPoint) -> "SvgPathBuilder":
        """Append a curve as a relative cubic command.

        Curves whose relative offsets are all zero draw nothing and are
        dropped.
        """
        command = (
            f"{control1.relative_to(self.last_point)} "
            f"{control2.relative_to(self.last_point)} "
            f"{end.relative_to(self.last_point)} "
        )
        if command != ZERO_CURVE:
            self._commands.append(command)
        self.last_point = end
        return self

    @property
    def is_empty(self) -> bool:
        """True if every appended curve was dropped as a zero curve."""
        return not self._commands

    def path_data(self) -> str:
        """Return the `d` attribute for this path."""
        return f"{SVG_MOVE}{self.start_point}{SVG_RELATIVE_CUBIC_BEZIER_CURVE}{''.join(self._commands)}"


class SvgBuilder:
    """Builds a complete SVG document from width-tagged curves.

    Example:
        builder = SvgBuilder()
        for curve in curves:
            builder.append(curve, (curve.start_width + curve.end_width) / 2)
        svg = builder.build(width=800, height=600, color="black")
    """

    def __init__(self) -> None:
        self._paths: list[SvgPathBuilder] = []
        self._current: SvgPathBuilder | None = None

    def clear(self) -> None:
        """Drop all accumulated paths."""
        self._paths = []
        self._current = None

    def append(self, curve: CurveSegment, stroke_width: float) -> "SvgBuilder":
        """Append a curve, starting a new path when it does not continue the current one.

        Args:
            curve: Curve to append
            stroke_width: Stroke width for this curve (rounded for output)

        Returns:
            This builder for chaining
        """
        rounded_width = round_half_up(stroke_width)
        start = SvgPoint.from_point(curve.start)

        current = self._current
        if current is None or start != current.last_point or rounded_width != current.stroke_width:
            self._flush()
            current = SvgPathBuilder(start, rounded_width)
            self._current = current

        current.append(
            SvgPoint.from_point(curve.control1),
            SvgPoint.from_point(curve.control2),
            SvgPoint.from_point(curve.end),
        )
        return self

    def build(self, width: int, height: int, color: str = "black") -> str:
        """Render the accumulated paths as an SVG document.

        Args:
            width: Viewport width in pixels
            height: Viewport height in pixels
            color: Stroke color

        Returns:
            The SVG document as a string
        """
        self._flush()

        dwg = svgwrite.Drawing(profile="tiny", size=(width, height), debug=False)
        dwg.attribs["viewBox"] = f"0 0 {width} {height}"
        group = dwg.g(
            stroke_linejoin="round",
            stroke_linecap="round",
            fill="none",
            stroke=color,
        )
        for path in self._paths:
            group.add(dwg.path(d=path.path_data(), stroke_width=path.stroke_width))
        dwg.add(group)

        buffer = io.StringIO()
        dwg.write(buffer)
        return buffer.getvalue()

    def _flush(self) -> None:
        if self._current is not None and not self._current.is_empty:
            self._paths.append(self._current)
        self._current = None
