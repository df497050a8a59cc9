"""Nexus — the colony's home rectangle and food store."""

from __future__ import annotations

from dataclasses import dataclass

from nexusants.world.geometry import Position, Rect

NEXUS_FOOD_MAX = 2**64 - 1


@dataclass
class Nexus:
    """Fixed home region that counts delivered food.

    Attributes:
        rect: Inclusive home rectangle.
        food: Units delivered so far.  Never decreases and saturates at
            ``NEXUS_FOOD_MAX``.
    """

    rect: Rect
    food: int = 0

    @property
    def reference_corner(self) -> Position:
        """Cell that homing ants head for."""
        return self.rect.top_left

    def contains(self, point: Position) -> bool:
        return self.rect.contains(point)

    def deposit_food(self) -> None:
        """Add one delivered unit to the store."""
        self.food = min(self.food + 1, NEXUS_FOOD_MAX)
