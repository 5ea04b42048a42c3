"""World — the fixed geometry of the arena.

The World knows where the playable area, the surface line and the two
nests are, and owns the forest that drops leaves onto the surface.  It
holds no per-tick state; ants, leaves and pheromones are owned by the
simulation engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antrivals.geometry.vector import Vector2
from antrivals.pheromones.fields import ActiveArea
from antrivals.world.forest import Tree

if TYPE_CHECKING:
    from numpy.random import Generator

_AGENT_EDGE_MARGIN = 5.0
_LEAF_EDGE_MARGIN = 6.0
_NEST_FRACTIONS = (0.25, 0.75)
_FALLBACK_SPAWN_Y = 50.0
_SPAWN_JITTER = 2.0


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box an ant is kept inside.

    Attributes:
        left: Minimum x.
        right: Maximum x.
        top: Minimum y (the surface line).
        bottom: Maximum y.
    """

    left: float
    right: float
    top: float
    bottom: float


@dataclass
class World:
    """Arena geometry plus the static forest.

    Attributes:
        width: Total world width in pixels.
        height: Total world height in pixels.
        left_margin: Unplayable strip on the left.
        right_margin: Unplayable strip on the right.
        surface_y: The ground line; ants live below it, leaves land on it.
        nest_inset: Distance of each nest above the bottom edge.
        forest: Trees currently standing on the surface.
    """

    width: int
    height: int
    left_margin: int
    right_margin: int
    surface_y: float
    nest_inset: float = 30.0
    forest: list[Tree] = field(default_factory=list, repr=False)

    @property
    def play_left(self) -> float:
        return float(self.left_margin)

    @property
    def play_right(self) -> float:
        return float(self.width - self.right_margin)

    @property
    def playable_width(self) -> float:
        return self.play_right - self.play_left

    @property
    def agent_bounds(self) -> Bounds:
        """Box that ants are clamped into after every move."""
        return Bounds(
            left=self.play_left + _AGENT_EDGE_MARGIN,
            right=self.play_right - _AGENT_EDGE_MARGIN,
            top=self.surface_y,
            bottom=self.height - _AGENT_EDGE_MARGIN,
        )

    @property
    def leaf_x_range(self) -> tuple[float, float]:
        """Horizontal walls for falling leaves."""
        return (
            self.play_left + _LEAF_EDGE_MARGIN,
            self.play_right - _LEAF_EDGE_MARGIN,
        )

    @property
    def active_area(self) -> ActiveArea:
        """Region of the pheromone grid that evaporates."""
        return ActiveArea(
            x_min=self.play_left,
            x_max=self.play_right,
            y_min=self.surface_y,
        )

    def nest_position(self, colony_id: int) -> Vector2:
        """Nest of colony 0 (left quarter) or 1 (right quarter)."""
        return Vector2(
            self.play_left + self.playable_width * _NEST_FRACTIONS[colony_id],
            self.height - self.nest_inset,
        )

    def is_underground(self, pos: Vector2) -> bool:
        """True when ``pos`` lies strictly below the surface line."""
        return pos.y > self.surface_y

    def plant_forest(
        self,
        rng: Generator,
        *,
        positions: tuple[float, ...],
        sizes: tuple[float, ...],
        leaves_per_tree: int = 40,
    ) -> None:
        """Replace the forest with trees at fractions of the playable width.

        Args:
            rng: Seeded random generator.
            positions: Tree x positions as fractions of the playable width.
            sizes: Tree sizes in pixels, paired with ``positions``.
            leaves_per_tree: Canopy points generated per tree.
        """
        self.forest = [
            Tree.grow(
                self.play_left + self.playable_width * frac,
                self.surface_y,
                size,
                rng,
                leaf_count=leaves_per_tree,
            )
            for frac, size in zip(positions, sizes, strict=True)
        ]

    def leaf_spawn_point(self, rng: Generator) -> Vector2:
        """Pick a random canopy point of a random tree, slightly jittered.

        Falls back to a fixed point near the top centre when there is no
        forest to drop from.
        """
        if not self.forest:
            return Vector2(self.width / 2, _FALLBACK_SPAWN_Y)

        tree = self.forest[int(rng.integers(len(self.forest)))]
        if not tree.leaf_positions:
            return Vector2(self.width / 2, _FALLBACK_SPAWN_Y)

        point = tree.leaf_positions[int(rng.integers(len(tree.leaf_positions)))]
        return Vector2(
            point.x + float(rng.uniform(-_SPAWN_JITTER, _SPAWN_JITTER)),
            point.y + float(rng.uniform(-_SPAWN_JITTER, _SPAWN_JITTER)),
        )
