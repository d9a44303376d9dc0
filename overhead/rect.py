"""Axis-aligned rectangles used for collision tests."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its bottom-left and top-right corners."""

    bottom_left: Point = (0.0, 0.0)
    top_right: Point = (0.0, 0.0)

    @property
    def center(self) -> Point:
        """The midpoint of the two corners."""
        return (
            (self.bottom_left[0] + self.top_right[0]) / 2.0,
            (self.bottom_left[1] + self.top_right[1]) / 2.0,
        )

    @property
    def width(self) -> float:
        """Horizontal extent; negative if the corners are swapped."""
        return self.top_right[0] - self.bottom_left[0]

    @property
    def height(self) -> float:
        """Vertical extent; negative if the corners are swapped."""
        return self.top_right[1] - self.bottom_left[1]