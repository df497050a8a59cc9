"""PheromoneField — the home-trail scalar grid.

Searching ants mark the cells they pass with home pheromone; the field is
stored as a NumPy 2D array and spread out each tick by ``diffusion.py``.
Every accessor is bounds-checked so that reads and writes past the grid
edge quietly do nothing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from nexusants.world.geometry import Position

# North, south, east, west.  Scan order decides ties.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (1, 0), (-1, 0))


@dataclass
class PheromoneField:
    """A W x H grid of non-negative pheromone levels.

    Attributes:
        width: Grid columns.
        height: Grid rows.
        deposit_center: Amount added to the cell an ant stands on.
        deposit_around: Amount added to every other cell in vision range.
        diffusion_rate: Fraction of each cell handed to its neighbours
            per tick.
        grid: Concentration values (>= 0), indexed as ``grid[y, x]``.
    """

    width: int
    height: int
    deposit_center: float = 10.0
    deposit_around: float = 3.0
    diffusion_rate: float = 0.05
    grid: NDArray[np.float64] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Start with a zeroed grid."""
        self.grid = np.zeros((self.height, self.width), dtype=np.float64)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_optional(self, x: int, y: int) -> float | None:
        """Return the level at ``(x, y)``, or None outside the grid."""
        if not self.in_bounds(x, y):
            return None
        return float(self.grid[y, x])

    def read(self, x: int, y: int) -> float:
        """Return the level at ``(x, y)``; 0.0 beyond the edge."""
        value = self.get_optional(x, y)
        return 0.0 if value is None else value

    def add(self, x: int, y: int, amount: float) -> None:
        """Add pheromone to one cell, ignoring out-of-bounds targets.

        Args:
            x: Column index.
            y: Row index.
            amount: Quantity to add (must be >= 0).
        """
        if self.in_bounds(x, y):
            self.grid[y, x] += amount

    def deposit(self, pos: Position, vision_radius: int) -> None:
        """Mark the square of Chebyshev radius ``vision_radius`` around ``pos``.

        The centre receives ``deposit_center``; every other cell in range
        receives ``deposit_around``.
        """
        for dx in range(-vision_radius, vision_radius + 1):
            for dy in range(-vision_radius, vision_radius + 1):
                amount = (
                    self.deposit_center if dx == 0 and dy == 0 else self.deposit_around
                )
                self.add(pos.x + dx, pos.y + dy, amount)

    def neighbour_extreme(
        self,
        pos: Position,
        prefer: Callable[[float, float], bool],
    ) -> Position | None:
        """Pick the orthogonal neighbour whose level wins under ``prefer``.

        Neighbours are scanned north, south, east, west.  A later
        neighbour replaces the current pick only when
        ``prefer(candidate, best)`` is True, so the first one found wins
        ties.

        Returns:
            The chosen neighbour, or None if no neighbour is in bounds.
        """
        best: Position | None = None
        best_level = 0.0
        for dx, dy in NEIGHBOUR_OFFSETS:
            level = self.get_optional(pos.x + dx, pos.y + dy)
            if level is None:
                continue
            if best is None or prefer(level, best_level):
                best = pos.offset(dx, dy)
                best_level = level
        return best

    def total(self) -> float:
        """Return the summed pheromone mass of the whole field."""
        return float(self.grid.sum())
