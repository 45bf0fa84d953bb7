"""Canvas-space rectangle and size types."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CanvasSize:
    """Pixel dimensions of the drawing surface.

    Attributes:
        width: Width in pixels
        height: Height in pixels
    """

    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        """True until the surface has been laid out with a positive area."""
        return self.width <= 0 or self.height <= 0

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (width, height) tuple."""
        return (self.width, self.height)


@dataclass(frozen=True, slots=True)
class Rect:
    """An axis-aligned rectangle in canvas coordinates (y grows downward).

    Attributes:
        left: Minimum x
        top: Minimum y
        right: Maximum x
        bottom: Maximum y
    """

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        """True if the rectangle encloses no area."""
        return self.width <= 0 or self.height <= 0

    def expand(self, amount: float) -> "Rect":
        """Return a copy grown by `amount` on every side."""
        return Rect(
            self.left - amount,
            self.top - amount,
            self.right + amount,
            self.bottom + amount,
        )

    def to_box(self) -> tuple[int, int, int, int]:
        """Convert to an integer (left, top, right, bottom) box."""
        return (int(self.left), int(self.top), int(self.right), int(self.bottom))
