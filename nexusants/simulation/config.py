"""Config — load simulation parameters from YAML files.

All tunable constants (grid size, vision radius, pheromone doses,
diffusion rate, Nexus placement, population, food patches) live in YAML
and are parsed into a typed dataclass here.  Nothing in the simulation
core reads module-level globals, so tests can build any configuration
they need.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from nexusants.world.food import FOOD_MAX
from nexusants.world.geometry import Rect


@dataclass
class FoodPatch:
    """A rectangular block of cells seeded with the same amount of food.

    Attributes:
        x: Left column.
        y: Top row.
        width: Columns covered.
        height: Rows covered.
        amount: Units placed on each cell.
    """

    x: int
    y: int
    width: int = 4
    height: int = 4
    amount: int = 100

    @property
    def rect(self) -> Rect:
        return Rect.from_corners(
            self.x,
            self.y,
            self.x + self.width - 1,
            self.y + self.height - 1,
        )


def _default_patches() -> list[FoodPatch]:
    # Four-by-four block twenty cells west of the default Nexus
    return [FoodPatch(x=204, y=80)]


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay; None draws fresh entropy.
        world_width: Number of grid columns (display pixels).
        world_height: Number of grid rows (display pixels).
        vision_radius: Chebyshev radius each ant sees and marks.
        deposit_center: Home pheromone added under a marking ant.
        deposit_around: Home pheromone added to the rest of its vision.
        diffusion_rate: Fraction of each cell spread to neighbours per tick.
        nexus: Home rectangle as ``[x1, y1, x2, y2]`` (inclusive).
        initial_ants: Ants spawned on the Nexus at startup.
        food_patches: Food seeded before the first tick.
    """

    seed: int | None = None
    world_width: int = 448
    world_height: int = 160
    vision_radius: int = 1
    deposit_center: float = 10.0
    deposit_around: float = 3.0
    diffusion_rate: float = 0.05
    nexus: list[int] = field(default_factory=lambda: [224, 80, 231, 87])
    initial_ants: int = 1000
    food_patches: list[FoodPatch] = field(default_factory=_default_patches)

    @property
    def nexus_rect(self) -> Rect:
        x1, y1, x2, y2 = self.nexus
        return Rect.from_corners(x1, y1, x2, y2)

    def validate(self) -> None:
        """Check that the configuration describes a buildable world.

        Raises:
            ValueError: If sizes, rates, the Nexus placement or a food
                patch are invalid.
        """
        if self.world_width <= 0 or self.world_height <= 0:
            msg = f"world size must be positive, got {self.world_width}x{self.world_height}"
            raise ValueError(msg)
        if self.vision_radius < 0:
            msg = f"vision_radius must be >= 0, got {self.vision_radius}"
            raise ValueError(msg)
        if not 0.0 <= self.diffusion_rate <= 1.0:
            msg = f"diffusion_rate must be within [0, 1], got {self.diffusion_rate}"
            raise ValueError(msg)
        if self.deposit_center < 0 or self.deposit_around < 0:
            msg = "pheromone deposits must be >= 0"
            raise ValueError(msg)
        if self.initial_ants < 0:
            msg = f"initial_ants must be >= 0, got {self.initial_ants}"
            raise ValueError(msg)
        if len(self.nexus) != 4:
            msg = f"nexus must be [x1, y1, x2, y2], got {self.nexus}"
            raise ValueError(msg)
        rect = self.nexus_rect
        if (
            rect.top_left.x < 0
            or rect.top_left.y < 0
            or rect.bottom_right.x >= self.world_width
            or rect.bottom_right.y >= self.world_height
        ):
            msg = f"nexus {self.nexus} lies outside the {self.world_width}x{self.world_height} grid"
            raise ValueError(msg)
        for patch in self.food_patches:
            if patch.width < 1 or patch.height < 1:
                msg = f"food patch must be at least 1x1, got {patch.width}x{patch.height}"
                raise ValueError(msg)
            if not 0 <= patch.amount <= FOOD_MAX:
                msg = f"food patch amount must be within [0, {FOOD_MAX}], got {patch.amount}"
                raise ValueError(msg)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated and validated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the loaded values are invalid.
        """
        path = Path(path)
        with path.open("r") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        defaults = cls()
        patches = data.get("food_patches")
        if patches is not None:
            try:
                patches = [FoodPatch(**patch) for patch in patches]
            except TypeError as err:
                msg = f"invalid food patch in {path}: {err}"
                raise ValueError(msg) from err
        config = cls(
            seed=data.get("seed", defaults.seed),
            world_width=data.get("world_width", defaults.world_width),
            world_height=data.get("world_height", defaults.world_height),
            vision_radius=data.get("vision_radius", defaults.vision_radius),
            deposit_center=data.get("deposit_center", defaults.deposit_center),
            deposit_around=data.get("deposit_around", defaults.deposit_around),
            diffusion_rate=data.get("diffusion_rate", defaults.diffusion_rate),
            nexus=list(data.get("nexus", defaults.nexus)),
            initial_ants=data.get("initial_ants", defaults.initial_ants),
            food_patches=defaults.food_patches if patches is None else patches,
        )
        config.validate()
        return config
