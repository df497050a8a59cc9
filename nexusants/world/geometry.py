"""Geometry — grid positions and inclusive rectangles.

Positions are plain value objects.  Signed offsets are applied with
``offset`` and may land outside the grid; callers bounds-check against
the field they are about to touch.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A single grid coordinate.

    Attributes:
        x: Column index.
        y: Row index.
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        """Return the position shifted by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)

    def manhattan(self, other: Position) -> int:
        """Return the taxicab distance to ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle, inclusive on both corners.

    Attributes:
        top_left: Corner with the smallest coordinates.
        bottom_right: Corner with the largest coordinates.
    """

    top_left: Position
    bottom_right: Position

    def __post_init__(self) -> None:
        if (
            self.top_left.x > self.bottom_right.x
            or self.top_left.y > self.bottom_right.y
        ):
            msg = f"top_left {self.top_left} lies beyond bottom_right {self.bottom_right}"
            raise ValueError(msg)

    @classmethod
    def from_corners(cls, x1: int, y1: int, x2: int, y2: int) -> Rect:
        """Build a rect from raw corner coordinates."""
        return cls(Position(x1, y1), Position(x2, y2))

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x + 1

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y + 1

    def contains(self, point: Position) -> bool:
        """Return True if ``point`` lies inside the rectangle (edges included)."""
        return (
            self.top_left.x <= point.x <= self.bottom_right.x
            and self.top_left.y <= point.y <= self.bottom_right.y
        )

    def cells(self) -> Iterator[Position]:
        """Yield every position covered by the rectangle, row by row."""
        for y in range(self.top_left.y, self.bottom_right.y + 1):
            for x in range(self.top_left.x, self.bottom_right.x + 1):
                yield Position(x, y)
