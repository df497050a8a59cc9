"""Colony — coordinator that owns every piece of shared simulation state.

A Colony holds the food field, the home-pheromone field, the Nexus and
the ant population.  One ``tick`` diffuses the pheromone field and then
steps each ant exactly once, in list order, lending it the shared state
for the duration of its step.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nexusants.colony.ant import Ant, AntState, StateKind
from nexusants.pheromones.diffusion import diffuse

if TYPE_CHECKING:
    from numpy.random import Generator

    from nexusants.display.frame import FrameSink
    from nexusants.pheromones.fields import PheromoneField
    from nexusants.world.food import FoodField
    from nexusants.world.geometry import Rect
    from nexusants.world.nexus import Nexus


@dataclass(frozen=True)
class ColonySnapshot:
    """Read-only view of a colony handed to renderers.

    Attributes:
        ants: ``(x, y)`` of every ant, in step order.
        food_cells: ``(x, y)`` of every cell holding food.
        nexus: The home rectangle.
        nexus_food: Units delivered so far.
    """

    ants: tuple[tuple[int, int], ...]
    food_cells: tuple[tuple[int, int], ...]
    nexus: Rect
    nexus_food: int


@dataclass
class Colony:
    """Top-level state for the ant colony.

    Attributes:
        food: Food units per cell.
        pheromones: Home-pheromone field.
        nexus: Home rectangle and delivered-food counter.
        vision_radius: Vision radius given to newly spawned ants.
        ants: Ant population, stepped in list order.
    """

    food: FoodField
    pheromones: PheromoneField
    nexus: Nexus
    vision_radius: int = 1
    ants: list[Ant] = field(default_factory=list)

    def spawn_ant(self) -> Ant:
        """Create a searching ant on the Nexus reference corner.

        Returns:
            The newly created Ant (also appended to ``self.ants``).
        """
        ant = Ant(
            position=self.nexus.reference_corner,
            state=AntState.searching(),
            vision_radius=self.vision_radius,
        )
        self.ants.append(ant)
        return ant

    def tick(self, rng: Generator) -> None:
        """Advance the colony by one tick.

        Diffusion finishes before any ant looks at the field, then every
        ant takes exactly one step.

        Args:
            rng: Random generator for the ants' fallback random walk.
        """
        diffuse(self.pheromones)
        for ant in self.ants:
            ant.step(self.food, self.pheromones, self.nexus, rng)

    def snapshot(self) -> ColonySnapshot:
        """Capture ant positions, food cells and the Nexus for rendering."""
        return ColonySnapshot(
            ants=tuple((ant.position.x, ant.position.y) for ant in self.ants),
            food_cells=tuple(self.food.nonzero_cells()),
            nexus=self.nexus.rect,
            nexus_food=self.nexus.food,
        )

    def render_into(self, frame: FrameSink) -> None:
        """Light a pixel for every ant, food cell and Nexus cell.

        Pixels outside the frame are skipped.
        """

        def light(x: int, y: int) -> None:
            if 0 <= x < frame.width and 0 <= y < frame.height:
                frame.set_pixel(x, y)

        snap = self.snapshot()
        for x, y in snap.ants:
            light(x, y)
        for x, y in snap.food_cells:
            light(x, y)
        for pos in snap.nexus.cells():
            light(pos.x, pos.y)

    def state_counts(self) -> dict[StateKind, int]:
        """Return the number of ants in each state (zero entries included)."""
        counts = Counter(ant.state.kind for ant in self.ants)
        return {kind: counts.get(kind, 0) for kind in StateKind}
