"""Tests for antrivals.world.leaf — fall physics, walls, landing."""

import pytest
from numpy.random import Generator

from antrivals.geometry.vector import ZERO, Vector2
from antrivals.world.leaf import (
    GRAVITY,
    INITIAL_AMOUNT,
    PIXELS_PER_METRE,
    WALL_DAMPING,
    FallingLeaf,
    drag_and_gravity,
)

GROUND = 300.0
MIN_X = 10.0
MAX_X = 390.0


class TestSpawn:
    """Tests for newly detached leaves."""

    def test_spawn_velocity_ranges(self, rng: Generator) -> None:
        for _ in range(100):
            leaf = FallingLeaf.spawn(Vector2(50.0, 20.0), rng)
            assert -15.0 <= leaf.vel.x <= 15.0
            assert 0.0 <= leaf.vel.y <= 30.0
            assert leaf.amount == INITIAL_AMOUNT

    def test_bites_consume(self) -> None:
        leaf = FallingLeaf(pos=ZERO)
        for _ in range(5):
            leaf.take_bite(50.0)
        assert leaf.amount == 0.0
        assert leaf.is_consumed


class TestForces:
    """Tests for the drag + gravity model."""

    def test_still_air_is_pure_gravity(self) -> None:
        # A leaf drifting with the wind feels no drag
        acc = drag_and_gravity(Vector2(60.0, 0.0))
        assert acc.x == pytest.approx(0.0)
        assert acc.y == pytest.approx(GRAVITY * PIXELS_PER_METRE)

    def test_wind_pushes_resting_leaf(self) -> None:
        acc = drag_and_gravity(ZERO)
        assert acc.x > 0.0

    def test_drag_opposes_fast_fall(self) -> None:
        acc = drag_and_gravity(Vector2(60.0, 1000.0))
        assert acc.y < 0.0


class TestUpdate:
    """Tests for integration, walls and landing."""

    def test_falls_and_drifts(self) -> None:
        leaf = FallingLeaf(pos=Vector2(200.0, 50.0))
        leaf.update(0.1, GROUND, MIN_X, MAX_X)
        assert leaf.pos.y > 50.0
        assert leaf.pos.x > 200.0
        assert leaf.vel.y > 0.0

    def test_non_positive_dt_is_ignored(self) -> None:
        leaf = FallingLeaf(pos=Vector2(200.0, 50.0), vel=Vector2(1.0, 2.0))
        leaf.update(0.0, GROUND, MIN_X, MAX_X)
        leaf.update(-0.5, GROUND, MIN_X, MAX_X)
        assert leaf.pos == Vector2(200.0, 50.0)
        assert leaf.vel == Vector2(1.0, 2.0)

    def test_reaches_terminal_velocity(self) -> None:
        leaf = FallingLeaf(pos=Vector2(200.0, 0.0))
        for _ in range(200):
            leaf.update(0.01, 1e9, -1e9, 1e9)
        # sqrt(m g / (0.5 rho Cd A)) ~ 3.18 m/s
        assert leaf.vel.y == pytest.approx(318.0, rel=0.05)
        assert leaf.vel.x == pytest.approx(60.0, abs=3.0)

    def test_lands_on_surface(self) -> None:
        leaf = FallingLeaf(pos=Vector2(200.0, GROUND - 1.0), vel=Vector2(5.0, 100.0))
        leaf.update(0.1, GROUND, MIN_X, MAX_X)
        assert leaf.pos.y == GROUND
        assert leaf.vel == ZERO
        assert leaf.acc == ZERO
        assert leaf.is_grounded(GROUND)

    def test_grounded_leaf_stays_put(self) -> None:
        leaf = FallingLeaf(pos=Vector2(200.0, GROUND + 4.0), vel=Vector2(3.0, 3.0))
        leaf.update(0.1, GROUND, MIN_X, MAX_X)
        assert leaf.pos == Vector2(200.0, GROUND)
        leaf.update(0.1, GROUND, MIN_X, MAX_X)
        assert leaf.pos == Vector2(200.0, GROUND)
        assert leaf.vel == ZERO

    def test_left_wall_bounce(self) -> None:
        leaf = FallingLeaf(pos=Vector2(MIN_X + 0.1, 50.0), vel=Vector2(-100.0, 0.0))
        leaf.update(0.1, GROUND, MIN_X, MAX_X)
        assert leaf.pos.x == MIN_X
        assert leaf.vel.x > 0.0

    def test_right_wall_damps(self) -> None:
        leaf = FallingLeaf(pos=Vector2(MAX_X - 0.1, 50.0), vel=Vector2(200.0, 0.0))
        leaf.update(0.1, GROUND, MIN_X, MAX_X)
        assert leaf.pos.x == MAX_X
        assert leaf.vel.x < 0.0
        assert abs(leaf.vel.x) < 200.0 * abs(WALL_DAMPING)
