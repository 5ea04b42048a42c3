"""Colony — nest, food stock, policy and daily statistics for one side.

Ants are not stored here: the engine keeps a single interleaved list so
both colonies act in one shared order each tick.  A Colony is the
bookkeeping the ants report into.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antrivals.colony.ant import Ant
from antrivals.colony.policies import ColonyPolicy
from antrivals.colony.stats import ColonyStatistics

if TYPE_CHECKING:
    from numpy.random import Generator

    from antrivals.geometry.vector import Vector2


@dataclass
class Colony:
    """Top-level state for a single colony.

    Attributes:
        colony_id: 0 (A) or 1 (B); selects the pheromone channels.
        nest: World position of the nest.
        policy: Tunable metabolism, spawn cost and evaporation rate.
        food_stock: Food delivered and not yet spent on new ants.
        stats: Daily food / birth / death counters.
    """

    colony_id: int
    nest: Vector2
    policy: ColonyPolicy = field(default_factory=ColonyPolicy)
    food_stock: int = 0
    stats: ColonyStatistics = field(default_factory=ColonyStatistics)

    def spawn_ant(self, rng: Generator) -> Ant:
        """Create a new ant at the nest and record the birth.

        Args:
            rng: Seeded random generator.

        Returns:
            The new Ant; the caller adds it to the population.
        """
        ant = Ant.spawn(self.nest, self.colony_id, rng)
        self.stats.register_birth()
        return ant

    def receive_food(self, amount: int) -> None:
        self.food_stock += amount

    def can_reproduce(self, population: int, cap: int) -> bool:
        """True when under the population cap and able to pay for an ant."""
        return population < cap and self.food_stock >= self.policy.spawn_cost

    def reproduce(self, rng: Generator) -> Ant:
        """Pay the spawn cost and hatch one ant at the nest."""
        self.food_stock -= self.policy.spawn_cost
        return self.spawn_ant(rng)

    def reset(self) -> None:
        """Empty the stock and clear statistics; the policy is kept."""
        self.food_stock = 0
        self.stats.reset()
