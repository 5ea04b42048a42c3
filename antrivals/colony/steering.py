"""Steering — Reynolds-style locomotion for ants.

A ``SteeringBody`` accumulates bounded steering forces during a tick and
integrates them once with semi-implicit Euler.  Behaviour code (see
``ant.py``) only decides *which* steering call to make.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from antrivals.geometry.vector import ZERO, Vector2

if TYPE_CHECKING:
    from numpy.random import Generator

    from antrivals.world.world import Bounds


@dataclass
class SteeringBody:
    """Position, velocity and acceleration of a steered agent.

    Attributes:
        pos: World position in pixels.
        vel: Velocity in pixels per tick.
        acc: Steering accumulator, cleared by ``integrate``.
        max_speed: Velocity magnitude cap.
        max_force: Magnitude cap for a single steering correction.
        sensor_distance: How far ahead the antennae sample.
        sensor_angle: Angular offset of the side antennae (radians).
        wander_strength: Magnitude of the random wander impulse.
    """

    pos: Vector2
    vel: Vector2 = ZERO
    acc: Vector2 = ZERO
    max_speed: float = 2.0
    max_force: float = 0.2
    sensor_distance: float = 30.0
    sensor_angle: float = math.pi / 3
    wander_strength: float = 0.2

    def apply_steering(self, desired: Vector2) -> None:
        """Accumulate ``desired − vel`` (desired rescaled to max speed)."""
        desired = desired.with_length(self.max_speed)
        steer = (desired - self.vel).limit(self.max_force)
        self.acc = self.acc + steer

    def move_forward(self) -> None:
        self.apply_steering(self.vel)

    def turn(self, angle: float) -> None:
        self.apply_steering(self.vel.rotate(angle))

    def seek(self, target: Vector2) -> None:
        self.apply_steering(target - self.pos)

    def wander(self, rng: Generator) -> None:
        """Add an unclamped random impulse of fixed magnitude."""
        self.acc = self.acc + Vector2.random_unit(rng) * self.wander_strength

    def reverse(self) -> None:
        """Turn the heading through 180 degrees."""
        self.vel = -self.vel

    def integrate(self) -> None:
        """Apply the accumulated force for one tick and clear it."""
        self.vel = (self.vel + self.acc).limit(self.max_speed)
        self.pos = self.pos + self.vel
        self.acc = ZERO

    def sensor_position(self, angle: float) -> Vector2:
        """World point sampled by an antenna rotated ``angle`` from heading."""
        offset = self.vel.rotate(angle).with_length(self.sensor_distance)
        return self.pos + offset

    def clamp_to_bounds(self, bounds: Bounds) -> None:
        """Bounce off the walls, the floor and the surface line.

        The velocity component perpendicular to any crossed boundary is
        negated, then the position is clamped inside ``bounds``.
        """
        vx, vy = self.vel.x, self.vel.y
        x, y = self.pos.x, self.pos.y

        if x < bounds.left or x > bounds.right:
            vx = -vx
        if y > bounds.bottom:
            vy = -vy
        if y < bounds.top:
            y = bounds.top
            vy = -vy

        x = min(max(x, bounds.left), bounds.right)
        y = min(max(y, bounds.top), bounds.bottom)
        self.vel = Vector2(vx, vy)
        self.pos = Vector2(x, y)
