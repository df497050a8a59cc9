"""SimulationEngine — builds the colony and drives it tick by tick.

Owns the random generator and the tick counter.  Each ``step``:

1. Diffuses the home-pheromone field
2. Steps every ant once, in fixed order

and ``render`` draws the resulting state into a frame sink.  Pacing
against wall-clock time is left to the caller (see ``nexusants.ui``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.random import Generator

from nexusants.colony.colony import Colony, ColonySnapshot
from nexusants.pheromones.fields import PheromoneField
from nexusants.simulation.config import SimulationConfig
from nexusants.world.food import FoodField
from nexusants.world.nexus import Nexus

if TYPE_CHECKING:
    from nexusants.display.frame import FrameSink

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        colony: The colony and all its shared state.
        rng: Master random generator.
        tick: Current tick count.
    """

    config: SimulationConfig
    colony: Colony = field(init=False)
    rng: Generator = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Validate config and build fields, Nexus, food and ants."""
        self.config.validate()
        self.rng = np.random.default_rng(self.config.seed)
        self.colony = build_colony(self.config)
        logger.info(
            "colony ready: %dx%d grid, %d ants, %d food units, nexus %s",
            self.config.world_width,
            self.config.world_height,
            len(self.colony.ants),
            self.colony.food.total(),
            self.config.nexus,
        )

    def step(self) -> None:
        """Advance the simulation by one tick."""
        self.colony.tick(self.rng)
        self.tick += 1
        if logger.isEnabledFor(logging.DEBUG):
            counts = self.colony.state_counts()
            logger.debug(
                "tick %d: nexus food %d, %s",
                self.tick,
                self.colony.nexus.food,
                ", ".join(f"{k.name.lower()}={v}" for k, v in counts.items()),
            )

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    def snapshot(self) -> ColonySnapshot:
        return self.colony.snapshot()

    def render(self, sink: FrameSink) -> None:
        """Draw the current state into ``sink`` and flush it."""
        self.colony.render_into(sink)
        sink.flush()


def build_colony(config: SimulationConfig) -> Colony:
    """Create a colony from configuration, seeded with food and ants.

    Args:
        config: Validated simulation configuration.

    Returns:
        A colony ready for its first tick.
    """
    food = FoodField(width=config.world_width, height=config.world_height)
    for patch in config.food_patches:
        food.seed_rect(patch.rect, patch.amount)

    pheromones = PheromoneField(
        width=config.world_width,
        height=config.world_height,
        deposit_center=config.deposit_center,
        deposit_around=config.deposit_around,
        diffusion_rate=config.diffusion_rate,
    )
    colony = Colony(
        food=food,
        pheromones=pheromones,
        nexus=Nexus(rect=config.nexus_rect),
        vision_radius=config.vision_radius,
    )
    for _ in range(config.initial_ants):
        colony.spawn_ant()
    return colony
