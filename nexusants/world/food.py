"""FoodField — per-cell food units stored as a NumPy grid.

The grid holds small unsigned counts.  At runtime food only ever leaves
the field, one unit at a time, when an ant picks it up; the only way to
add food is explicit seeding at construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from nexusants.world.geometry import Position, Rect

FOOD_MAX = int(np.iinfo(np.uint8).max)


@dataclass
class FoodField:
    """A W x H grid of food counts.

    Attributes:
        width: Grid columns.
        height: Grid rows.
        grid: Food units per cell, indexed as ``grid[y, x]``.
    """

    width: int
    height: int
    grid: NDArray[np.uint8] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Start with an empty field."""
        self.grid = np.zeros((self.height, self.width), dtype=np.uint8)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_optional(self, x: int, y: int) -> int | None:
        """Return the food at ``(x, y)``, or None outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return int(self.grid[y, x])

    def get(self, pos: Position) -> int:
        """Return the food at ``pos``; cells beyond the edge hold nothing."""
        value = self.get_optional(pos.x, pos.y)
        return 0 if value is None else value

    def set(self, pos: Position, amount: int) -> None:
        """Overwrite the food at ``pos``, clamped to the storable range.

        Out-of-bounds positions are ignored.
        """
        if not self.in_bounds(pos.x, pos.y):
            return
        self.grid[pos.y, pos.x] = min(max(int(amount), 0), FOOD_MAX)

    def take_one(self, pos: Position) -> bool:
        """Remove a single unit of food from ``pos``.

        Returns:
            True if a unit was removed, False if the cell was empty or
            outside the grid.
        """
        current = self.get(pos)
        if current < 1:
            return False
        self.grid[pos.y, pos.x] = current - 1
        return True

    def seed_rect(self, rect: Rect, amount: int) -> None:
        """Place ``amount`` units on every in-bounds cell of ``rect``."""
        for pos in rect.cells():
            self.set(pos, amount)

    def nonzero_cells(self) -> list[tuple[int, int]]:
        """Return ``(x, y)`` for every cell that still holds food."""
        ys, xs = np.nonzero(self.grid)
        return [(int(x), int(y)) for y, x in zip(ys, xs, strict=True)]

    def total(self) -> int:
        return int(self.grid.sum(dtype=np.int64))
