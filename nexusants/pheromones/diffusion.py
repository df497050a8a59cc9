"""Diffusion logic for the pheromone field.

Operates on the raw NumPy array inside ``PheromoneField``.  Separated from
``fields.py`` so that the diffusion kernel can be swapped or optimised
independently.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nexusants.pheromones.fields import PheromoneField


def diffuse(field: PheromoneField) -> None:
    """Spread pheromone to neighbouring cells.

    Each cell gives ``diffusion_rate`` of its value to its four cardinal
    neighbours in equal shares.  Shares that would cross the grid edge
    are dropped (no wrap), so boundary cells leak mass out of the field.
    All cells donate from the values they held at the start of the step.

    This modifies ``field.grid`` in-place.

    Args:
        field: The pheromone field to diffuse.
    """
    rate = field.diffusion_rate
    if rate <= 0:
        return

    grid = field.grid
    share = grid * (rate / 4.0)
    grid *= 1.0 - rate  # keep the non-donated portion

    grid[1:, :] += share[:-1, :]  # donate south
    grid[:-1, :] += share[1:, :]  # donate north
    grid[:, 1:] += share[:, :-1]  # donate east
    grid[:, :-1] += share[:, 1:]  # donate west
