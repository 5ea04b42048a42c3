"""Tests for antrivals.colony.steering — Reynolds steering physics."""

import math

import pytest
from numpy.random import Generator

from antrivals.colony.steering import SteeringBody
from antrivals.geometry.vector import ZERO, Vector2
from antrivals.world.world import Bounds


class TestSteeringForces:
    """Tests for the force accumulator."""

    def test_steering_clamped_to_max_force(self) -> None:
        body = SteeringBody(pos=ZERO)
        body.apply_steering(Vector2(1.0, 0.0))
        assert body.acc.x == pytest.approx(0.2)
        assert body.acc.y == pytest.approx(0.0)

    def test_move_forward_at_max_speed_is_neutral(self) -> None:
        body = SteeringBody(pos=ZERO, vel=Vector2(2.0, 0.0))
        body.move_forward()
        assert body.acc.length() == pytest.approx(0.0)

    def test_turn_pulls_sideways(self) -> None:
        body = SteeringBody(pos=ZERO, vel=Vector2(2.0, 0.0))
        body.turn(math.pi / 2)
        assert body.acc.length() == pytest.approx(0.2)
        assert body.acc.y > 0
        assert body.acc.x < 0

    def test_seek_points_at_target(self) -> None:
        body = SteeringBody(pos=Vector2(5.0, 5.0))
        body.seek(Vector2(5.0, 50.0))
        assert body.acc.x == pytest.approx(0.0)
        assert body.acc.y == pytest.approx(0.2)

    def test_wander_adds_fixed_magnitude(self, rng: Generator) -> None:
        body = SteeringBody(pos=ZERO)
        body.wander(rng)
        assert body.acc.length() == pytest.approx(0.2)

    def test_forces_accumulate(self) -> None:
        body = SteeringBody(pos=ZERO)
        body.seek(Vector2(10.0, 0.0))
        body.seek(Vector2(10.0, 0.0))
        assert body.acc.x == pytest.approx(0.4)


class TestIntegration:
    """Tests for semi-implicit Euler and sensors."""

    def test_integrate(self) -> None:
        body = SteeringBody(pos=ZERO, vel=Vector2(1.0, 0.0), acc=Vector2(0.5, 0.0))
        body.integrate()
        assert body.vel == Vector2(1.5, 0.0)
        assert body.pos == Vector2(1.5, 0.0)
        assert body.acc == ZERO

    def test_integrate_caps_speed(self) -> None:
        body = SteeringBody(pos=ZERO, vel=Vector2(0.0, 3.0))
        body.integrate()
        assert body.vel.length() == pytest.approx(2.0)
        assert body.pos.y == pytest.approx(2.0)

    def test_sensor_positions(self) -> None:
        body = SteeringBody(pos=Vector2(10.0, 10.0), vel=Vector2(1.0, 0.0))
        front = body.sensor_position(0.0)
        assert front.x == pytest.approx(40.0)
        assert front.y == pytest.approx(10.0)
        side = body.sensor_position(math.pi / 2)
        assert side.x == pytest.approx(10.0)
        assert side.y == pytest.approx(40.0)

    def test_reverse(self) -> None:
        body = SteeringBody(pos=ZERO, vel=Vector2(1.0, -2.0))
        body.reverse()
        assert body.vel == Vector2(-1.0, 2.0)


class TestBounds:
    """Tests for bouncing off the arena edges."""

    BOUNDS = Bounds(left=0.0, right=100.0, top=10.0, bottom=90.0)

    def test_side_wall_bounce(self) -> None:
        body = SteeringBody(pos=Vector2(-5.0, 50.0), vel=Vector2(-1.0, 0.5))
        body.clamp_to_bounds(self.BOUNDS)
        assert body.pos == Vector2(0.0, 50.0)
        assert body.vel == Vector2(1.0, 0.5)

    def test_surface_bounce(self) -> None:
        body = SteeringBody(pos=Vector2(50.0, 5.0), vel=Vector2(0.3, -1.0))
        body.clamp_to_bounds(self.BOUNDS)
        assert body.pos == Vector2(50.0, 10.0)
        assert body.vel == Vector2(0.3, 1.0)

    def test_floor_bounce(self) -> None:
        body = SteeringBody(pos=Vector2(50.0, 95.0), vel=Vector2(0.0, 1.0))
        body.clamp_to_bounds(self.BOUNDS)
        assert body.pos == Vector2(50.0, 90.0)
        assert body.vel == Vector2(0.0, -1.0)

    def test_inside_is_untouched(self) -> None:
        body = SteeringBody(pos=Vector2(50.0, 50.0), vel=Vector2(1.0, 1.0))
        body.clamp_to_bounds(self.BOUNDS)
        assert body.pos == Vector2(50.0, 50.0)
        assert body.vel == Vector2(1.0, 1.0)
