"""Forest — static trees whose canopies emit falling leaves.

Only the emission geometry is modelled: each tree keeps a fixed list of
canopy points from which new leaves start their fall.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antrivals.geometry.vector import Vector2

if TYPE_CHECKING:
    from numpy.random import Generator

_CANOPY_HEIGHT = 2.0  # canopy centre above the base, in tree sizes
_CANOPY_SPREAD_X = 1.1
_CANOPY_SPREAD_Y = 0.7


@dataclass
class Tree:
    """A tree standing on the surface line.

    Attributes:
        base_x: World x of the trunk.
        base_y: World y where the trunk meets the ground.
        size: Nominal tree size in pixels (scales the canopy).
        leaf_positions: Canopy points that leaves fall from.
    """

    base_x: float
    base_y: float
    size: float
    leaf_positions: list[Vector2] = field(default_factory=list)

    @classmethod
    def grow(
        cls,
        base_x: float,
        base_y: float,
        size: float,
        rng: Generator,
        *,
        leaf_count: int = 40,
    ) -> Tree:
        """Create a tree with ``leaf_count`` points scattered in its canopy.

        Points are sampled uniformly inside an ellipse centred above the
        trunk, so every leaf starts above the ground.

        Args:
            base_x: Trunk x position.
            base_y: Ground y position.
            size: Tree size in pixels.
            rng: Seeded random generator.
            leaf_count: Number of canopy points.

        Returns:
            The new Tree.
        """
        cx = base_x
        cy = base_y - size * _CANOPY_HEIGHT
        rx = size * _CANOPY_SPREAD_X
        ry = size * _CANOPY_SPREAD_Y
        points = []
        for _ in range(leaf_count):
            angle = float(rng.uniform(0.0, 2.0 * math.pi))
            radius = math.sqrt(float(rng.random()))
            points.append(
                Vector2(
                    cx + math.cos(angle) * radius * rx,
                    cy + math.sin(angle) * radius * ry,
                ),
            )
        return cls(base_x=base_x, base_y=base_y, size=size, leaf_positions=points)
