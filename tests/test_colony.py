"""Tests for nexusants.colony.colony - the tick coordinator."""

import numpy as np
import pytest
from numpy.random import Generator

from nexusants.colony.ant import Ant, AntState, StateKind
from nexusants.colony.colony import Colony
from nexusants.display.frame import PixelFrame
from nexusants.world.geometry import Position


class TestColony:
    """Tests for Colony ownership and spawning."""

    def test_spawn_ant_on_reference_corner(self, small_colony: Colony) -> None:
        ant = small_colony.spawn_ant()
        assert ant in small_colony.ants
        assert ant.position == Position(4, 4)
        assert ant.state == AntState.searching()
        assert ant.vision_radius == small_colony.vision_radius

    def test_state_counts(self, small_colony: Colony) -> None:
        small_colony.spawn_ant()
        small_colony.spawn_ant().state = AntState.homing()
        counts = small_colony.state_counts()
        assert counts[StateKind.SEARCHING] == 1
        assert counts[StateKind.HOMING] == 1
        assert counts[StateKind.FOUND_FOOD] == 0
        assert counts[StateKind.DEPOSITING] == 0


class TestTick:
    """Tests for one colony tick."""

    def test_diffuses_without_ants(self, small_colony: Colony, rng: Generator) -> None:
        small_colony.pheromones.add(0, 0, 10.0)
        small_colony.tick(rng)
        assert small_colony.pheromones.read(0, 0) == pytest.approx(9.5)
        assert small_colony.pheromones.read(1, 0) == pytest.approx(0.125)

    def test_diffusion_runs_before_ants_mark(
        self,
        small_colony: Colony,
        rng: Generator,
    ) -> None:
        small_colony.spawn_ant()
        small_colony.tick(rng)
        # A fresh deposit would have been cut by diffusion had it run after
        assert small_colony.pheromones.read(4, 4) == 10.0

    def test_every_ant_steps_once(self, small_colony: Colony, rng: Generator) -> None:
        for _ in range(3):
            small_colony.spawn_ant()
        small_colony.tick(rng)
        # Each marks (4, 4) before leaving; equal neighbours send all north
        assert [a.position for a in small_colony.ants] == [Position(4, 3)] * 3
        assert small_colony.pheromones.read(4, 4) == 30.0
        assert small_colony.pheromones.read(4, 3) == 9.0

    def test_fixed_order_on_contested_food(
        self,
        small_colony: Colony,
        rng: Generator,
    ) -> None:
        target = Position(1, 1)
        small_colony.food.set(target, 1)
        first = Ant(position=target, state=AntState.found_food(target))
        second = Ant(position=target, state=AntState.found_food(target))
        small_colony.ants.extend([first, second])
        small_colony.tick(rng)
        assert first.state == AntState.homing()
        assert second.state == AntState.searching()
        assert small_colony.food.get(target) == 0


class TestDelivery:
    """A single ant fetches a single unit of food and brings it home."""

    @pytest.mark.parametrize(
        "food_at",
        [Position(5, 3), Position(3, 4), Position(5, 5)],
    )
    def test_round_trip(
        self,
        small_colony: Colony,
        rng: Generator,
        food_at: Position,
    ) -> None:
        ant = small_colony.spawn_ant()
        small_colony.food.set(food_at, 1)
        # Travel both ways plus detect, pick up, sight Nexus, deliver
        bound = 2 * ant.position.manhattan(food_at) + 4

        for ticks in range(1, bound + 1):
            small_colony.tick(rng)
            if ant.state == AntState.searching() and small_colony.nexus.food == 1:
                break
        else:
            pytest.fail(f"ant did not deliver within {bound} ticks")

        assert ticks <= bound
        assert small_colony.nexus.food == 1
        assert small_colony.food.get(food_at) == 0
        assert small_colony.food.total() == 0


class TestSnapshot:
    """Tests for the read-only view and frame rendering."""

    def test_snapshot_contents(self, small_colony: Colony) -> None:
        small_colony.spawn_ant()
        small_colony.food.set(Position(1, 2), 5)
        small_colony.nexus.food = 3
        snap = small_colony.snapshot()
        assert snap.ants == ((4, 4),)
        assert snap.food_cells == ((1, 2),)
        assert snap.nexus == small_colony.nexus.rect
        assert snap.nexus_food == 3

    def test_snapshot_is_frozen(self, small_colony: Colony) -> None:
        snap = small_colony.snapshot()
        with pytest.raises(AttributeError):
            snap.nexus_food = 10  # type: ignore[misc]

    def test_render_into_frame(self, small_colony: Colony) -> None:
        ant = small_colony.spawn_ant()
        ant.position = Position(0, 7)
        small_colony.food.set(Position(7, 0), 1)
        frame = PixelFrame(width=8, height=8)
        small_colony.render_into(frame)
        expected = np.zeros((8, 8), dtype=bool)
        expected[7, 0] = True
        expected[0, 7] = True
        expected[4:6, 4:6] = True  # inclusive Nexus rectangle
        assert np.array_equal(frame.pixels, expected)

    def test_render_skips_pixels_outside_frame(self, small_colony: Colony) -> None:
        small_colony.food.set(Position(7, 7), 1)
        frame = PixelFrame(width=4, height=4)
        small_colony.render_into(frame)
        assert frame.lit_count() == 0
