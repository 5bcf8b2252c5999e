"""Axis-aligned integer rectangles used as hit boxes."""

from dataclasses import dataclass


@dataclass
class Rect:
    """A rectangle with its top-left corner at (x, y)."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        """First column past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First row past the bottom edge."""
        return self.y + self.height

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def move_to(self, x: int, y: int) -> None:
        """Move the top-left corner to (x, y), keeping the size."""
        self.x = x
        self.y = y

    def intersects(self, other: "Rect") -> bool:
        """True if both rectangles are non-empty and share some area."""
        if self.empty or other.empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )