"""FallingLeaf — a food particle with Newtonian fall physics.

Leaves detach from tree canopies and fall under gravity and quadratic
air drag relative to a steady wind, then lie on the surface line until
ants have eaten them.  Forces are evaluated in SI units and converted
to pixels with a fixed pixels-per-metre scale:

- Gravity: ``g`` downwards (+y on screen).
- Drag: ``0.5 * rho * Cd * A * |v_rel|^2`` opposite to ``v_rel``,
  where ``v_rel`` is the leaf velocity minus the wind.
- Integration: semi-implicit Euler over the real elapsed frame time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from antrivals.geometry.vector import ZERO, Vector2

if TYPE_CHECKING:
    from numpy.random import Generator

# -- Physical constants (SI) -------------------------------------------------

PIXELS_PER_METRE = 100.0
GRAVITY = 9.81  # m/s^2
AIR_DENSITY = 1.29  # kg/m^3
DRAG_COEFFICIENT = 1.2  # flat, irregular body
FRONTAL_AREA = 0.0025  # m^2 (25 cm^2)
LEAF_MASS = 0.002  # kg
WIND = Vector2(0.6, 0.0)  # m/s

WALL_DAMPING = -0.2
INITIAL_AMOUNT = 250.0
_MIN_RELATIVE_SPEED = 1e-5


@dataclass
class FallingLeaf:
    """A leaf: physics body plus an edible amount.

    Attributes:
        pos: Position in pixels.
        vel: Velocity in pixels per second.
        acc: Acceleration in pixels per second squared (last update).
        amount: Food left on the leaf; the leaf is removed at ``<= 0``.
    """

    pos: Vector2
    vel: Vector2 = ZERO
    acc: Vector2 = ZERO
    amount: float = INITIAL_AMOUNT

    @classmethod
    def spawn(cls, pos: Vector2, rng: Generator) -> FallingLeaf:
        """Create a leaf at ``pos`` with a small random initial velocity."""
        vel = Vector2(float(rng.uniform(-15.0, 15.0)), float(rng.uniform(0.0, 30.0)))
        return cls(pos=pos, vel=vel)

    @property
    def is_consumed(self) -> bool:
        return self.amount <= 0

    def is_grounded(self, ground_y: float) -> bool:
        """True once the leaf lies on (or below) the ground line."""
        return self.pos.y >= ground_y

    def take_bite(self, bite: float) -> None:
        self.amount -= bite

    def update(self, dt: float, ground_y: float, min_x: float, max_x: float) -> None:
        """Advance the fall by ``dt`` seconds.

        A non-positive ``dt`` is ignored.  A leaf already on the ground
        is pinned there with zero velocity and no further integration.

        Args:
            dt: Real elapsed time since the previous update, in seconds.
            ground_y: The surface line in pixels.
            min_x: Left wall in pixels.
            max_x: Right wall in pixels.
        """
        if dt <= 0:
            return

        if self.pos.y >= ground_y:
            self.pos = Vector2(self.pos.x, ground_y)
            self.vel = ZERO
            self.acc = ZERO
            return

        self.acc = drag_and_gravity(self.vel)

        vel = self.vel + self.acc * dt
        pos = self.pos + vel * dt
        vx, vy = vel.x, vel.y
        x, y = pos.x, pos.y

        # Lateral walls
        if x < min_x:
            x = min_x
            vx *= WALL_DAMPING
        elif x > max_x:
            x = max_x
            vx *= WALL_DAMPING

        # Landing
        if y >= ground_y:
            y = ground_y
            vx, vy = 0.0, 0.0
            self.acc = ZERO

        self.pos = Vector2(x, y)
        self.vel = Vector2(vx, vy)


def drag_and_gravity(vel_px: Vector2) -> Vector2:
    """Total acceleration (px/s^2) on a leaf moving at ``vel_px`` (px/s)."""
    acc = Vector2(0.0, GRAVITY * PIXELS_PER_METRE)

    v_rel = vel_px * (1.0 / PIXELS_PER_METRE) - WIND
    speed = v_rel.length()
    if speed > _MIN_RELATIVE_SPEED:
        drag_mag = 0.5 * AIR_DENSITY * DRAG_COEFFICIENT * FRONTAL_AREA * speed * speed
        drag = v_rel.normalized() * -drag_mag
        acc = acc + drag * (PIXELS_PER_METRE / LEAF_MASS)
    return acc
