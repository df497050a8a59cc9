"""Ant — individual agent driven by a four-state foraging machine.

Each tick an ant performs exactly one transition of its state machine:

- **Searching**: mark the surroundings with home pheromone, look for food
  in vision range, otherwise walk *down* the home gradient so that scouts
  push outward into ground nobody has marked yet.
- **Found food**: walk straight to the spotted cell and try to pick up
  one unit.
- **Homing**: walk toward the Nexus until any part of it is in sight.
- **Depositing**: walk onto the sighted Nexus cell and hand the unit over.

Ants never see each other; all interaction goes through the shared food
and pheromone fields, which the colony lends to ``Ant.step`` for the
duration of the call.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from nexusants.world.geometry import Position

if TYPE_CHECKING:
    from numpy.random import Generator

    from nexusants.pheromones.fields import PheromoneField
    from nexusants.world.food import FoodField
    from nexusants.world.nexus import Nexus


class StateKind(Enum):
    """Tag of the ant state machine."""

    SEARCHING = auto()
    FOUND_FOOD = auto()
    HOMING = auto()
    DEPOSITING = auto()


@dataclass(frozen=True)
class AntState:
    """Tagged state value.

    Attributes:
        kind: Which state the ant is in.
        target: Cell the ant is heading for; set for FOUND_FOOD and
            DEPOSITING, None otherwise.
    """

    kind: StateKind
    target: Position | None = None

    def __post_init__(self) -> None:
        needs_target = self.kind in (StateKind.FOUND_FOOD, StateKind.DEPOSITING)
        if needs_target != (self.target is not None):
            msg = f"{self.kind.name} state with target={self.target}"
            raise ValueError(msg)

    @classmethod
    def searching(cls) -> AntState:
        return cls(StateKind.SEARCHING)

    @classmethod
    def found_food(cls, target: Position) -> AntState:
        return cls(StateKind.FOUND_FOOD, target)

    @classmethod
    def homing(cls) -> AntState:
        return cls(StateKind.HOMING)

    @classmethod
    def depositing(cls, target: Position) -> AntState:
        return cls(StateKind.DEPOSITING, target)


def step_towards(position: Position, target: Position) -> Position:
    """Return the cell one step from ``position`` toward ``target``.

    Axis rules are tried in a fixed order (decrease x, increase x,
    decrease y, increase y) and only the first that applies is used.
    """
    if target.x < position.x:
        return position.offset(-1, 0)
    if target.x > position.x:
        return position.offset(1, 0)
    if target.y < position.y:
        return position.offset(0, -1)
    if target.y > position.y:
        return position.offset(0, 1)
    return position


def random_step(position: Position, width: int, height: int, rng: Generator) -> Position:
    """Take one uniformly random orthogonal step.

    Steps that would cross the far edge are clamped to it; steps below
    zero leave the coordinate at zero.

    Raises:
        AssertionError: If the direction draw falls outside 0-3, which
            would mean the generator broke its contract.
    """
    choice = int(rng.integers(4))
    match choice:
        case 0:
            return Position(min(position.x + 1, width - 1), position.y)
        case 1:
            return Position(max(position.x - 1, 0), position.y)
        case 2:
            return Position(position.x, min(position.y + 1, height - 1))
        case 3:
            return Position(position.x, max(position.y - 1, 0))
        case _:
            msg = f"direction draw {choice} outside 0-3"
            raise AssertionError(msg)


@dataclass
class Ant:
    """A single ant agent.

    Attributes:
        position: Current cell.
        state: Current state-machine value.
        vision_radius: Chebyshev radius the ant can see and mark.  0 means
            only the cell it stands on.
    """

    position: Position
    state: AntState = field(default_factory=AntState.searching)
    vision_radius: int = 1

    def step(
        self,
        food: FoodField,
        pheromones: PheromoneField,
        nexus: Nexus,
        rng: Generator,
    ) -> None:
        """Perform one tick of the state machine.

        Args:
            food: Shared food grid (read, and decremented on pickup).
            pheromones: Shared home-pheromone field.
            nexus: The colony home; receives delivered food.
            rng: Random generator for the fallback random walk.
        """
        self.state = self._transition(food, pheromones, nexus, rng)

    def _transition(
        self,
        food: FoodField,
        pheromones: PheromoneField,
        nexus: Nexus,
        rng: Generator,
    ) -> AntState:
        """Map the current state to the next one, moving as a side effect."""
        state = self.state
        match state.kind:
            case StateKind.SEARCHING:
                return self._search(food, pheromones, rng)
            case StateKind.FOUND_FOOD:
                pheromones.deposit(self.position, self.vision_radius)
                return self._approach_food(food, state)
            case StateKind.HOMING:
                return self._head_home(nexus)
            case StateKind.DEPOSITING:
                return self._deliver(nexus, state)
            case _:
                msg = f"unhandled ant state {state}"
                raise AssertionError(msg)

    # -- Per-state behaviour --

    def _search(
        self,
        food: FoodField,
        pheromones: PheromoneField,
        rng: Generator,
    ) -> AntState:
        pheromones.deposit(self.position, self.vision_radius)

        spotted = self._first_in_vision(lambda pos: food.get(pos) > 0)
        if spotted is not None:
            return AntState.found_food(spotted)

        # Walk away from home
        weakest = pheromones.neighbour_extreme(self.position, operator.lt)
        if weakest is None:
            self.position = random_step(
                self.position,
                pheromones.width,
                pheromones.height,
                rng,
            )
        else:
            self.position = weakest
        return AntState.searching()

    def _approach_food(self, food: FoodField, state: AntState) -> AntState:
        target = state.target
        assert target is not None
        if self.position != target:
            self.position = step_towards(self.position, target)
            return state
        if food.take_one(self.position):
            return AntState.homing()
        return AntState.searching()

    def _head_home(self, nexus: Nexus) -> AntState:
        sighted = self._first_in_vision(nexus.contains)
        if sighted is not None:
            return AntState.depositing(sighted)
        self.position = step_towards(self.position, nexus.reference_corner)
        return AntState.homing()

    def _deliver(self, nexus: Nexus, state: AntState) -> AntState:
        target = state.target
        assert target is not None
        if self.position != target:
            self.position = step_towards(self.position, target)
            return state
        nexus.deposit_food()
        return AntState.searching()

    def _first_in_vision(
        self,
        predicate: Callable[[Position], bool],
    ) -> Position | None:
        """Return the first cell in vision range matching ``predicate``.

        Cells are scanned column by column (dx outer, dy inner).  Offsets
        that go below zero on either axis are skipped.
        """
        r = self.vision_radius
        for dx in range(-r, r + 1):
            for dy in range(-r, r + 1):
                pos = self.position.offset(dx, dy)
                if pos.x < 0 or pos.y < 0:
                    continue
                if predicate(pos):
                    return pos
        return None
