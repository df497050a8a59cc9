"""Shared fixtures for the nexusants test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from nexusants.colony.colony import Colony
from nexusants.pheromones.fields import PheromoneField
from nexusants.simulation.config import SimulationConfig
from nexusants.world.food import FoodField
from nexusants.world.geometry import Rect
from nexusants.world.nexus import Nexus


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_food_field() -> FoodField:
    """An empty 8x8 food field."""
    return FoodField(width=8, height=8)


@pytest.fixture
def small_pheromone_field() -> PheromoneField:
    """An 8x8 pheromone field for fast tests."""
    return PheromoneField(width=8, height=8)


@pytest.fixture
def small_nexus() -> Nexus:
    """A 2x2 Nexus at (4, 4)-(5, 5)."""
    return Nexus(rect=Rect.from_corners(4, 4, 5, 5))


@pytest.fixture
def small_config() -> SimulationConfig:
    """A 16x16 world with no food, no ants and a fixed seed."""
    return SimulationConfig(
        seed=777,
        world_width=16,
        world_height=16,
        nexus=[7, 7, 8, 8],
        initial_ants=0,
        food_patches=[],
    )


@pytest.fixture
def small_colony(
    small_food_field: FoodField,
    small_pheromone_field: PheromoneField,
    small_nexus: Nexus,
) -> Colony:
    """An 8x8 colony with no ants yet."""
    return Colony(
        food=small_food_field,
        pheromones=small_pheromone_field,
        nexus=small_nexus,
    )
