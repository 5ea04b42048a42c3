"""Vector2 — immutable 2D vector used by steering and leaf physics.

World coordinates follow screen convention: +x is right, +y is down.
All operations return new vectors; nothing mutates in place.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numpy.random import Generator

_EPSILON = 1e-9


@dataclass(frozen=True)
class Vector2:
    """A 2D vector value.

    Attributes:
        x: Horizontal component.
        y: Vertical component (positive is down).
    """

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> Vector2:
        """Build a vector pointing along ``angle`` (radians)."""
        return cls(math.cos(angle) * length, math.sin(angle) * length)

    @classmethod
    def random_unit(cls, rng: Generator) -> Vector2:
        """Return a unit vector with a uniformly random heading."""
        return cls.from_angle(float(rng.uniform(0.0, 2.0 * math.pi)))

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def distance_to(self, other: Vector2) -> float:
        return (self - other).length()

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.length()
        if mag < _EPSILON:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def with_length(self, length: float) -> Vector2:
        """Rescale to ``length``; the zero vector stays zero."""
        return self.normalized() * length

    def limit(self, max_length: float) -> Vector2:
        """Clamp the magnitude to ``max_length``, keeping direction."""
        mag_sq = self.length_squared()
        if mag_sq <= max_length * max_length:
            return self
        return self.with_length(max_length)

    def rotate(self, angle: float) -> Vector2:
        """Rotate by ``angle`` radians (clockwise on screen, since +y is down)."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )


ZERO = Vector2(0.0, 0.0)
