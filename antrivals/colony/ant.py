"""Ant — a foraging agent steered by scent.

Each ant reads the shared pheromone grid through three antennae (front,
left, right), picks a steering action from a small state machine, moves,
and then writes back to the grid:

- **Searching** ants head straight for any grounded leaf they can smell;
  otherwise they follow their colony's *food* scent and wander when the
  trail runs out.
- **Returning** ants carry a bite of leaf and follow their colony's
  *home* scent back to the nest.  An ant that smells no home scent at
  all is given a direct bearing to its nest.
- While carrying food an ant lays food scent additively.  Otherwise it
  lays home scent at its own trail strength, but only where that is
  stronger than what is already there.

Trail strength starts at 1.0 on every pickup and delivery and fades
linearly, so home scent is strongest near where an ant last left home.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from antrivals.colony.steering import SteeringBody
from antrivals.geometry.vector import Vector2
from antrivals.pheromones.fields import PheromoneChannel

if TYPE_CHECKING:
    from numpy.random import Generator

    from antrivals.colony.colony import Colony
    from antrivals.pheromones.fields import PheromoneGrid
    from antrivals.world.leaf import FallingLeaf
    from antrivals.world.world import World

# -- Constants ---------------------------------------------------------------

MAX_ENERGY = 1500.0
LIFESPAN_RANGE = (2000.0, 5000.0)
SMELL_RADIUS = 120.0
TRAIL_DECAY = 0.002  # trail strength lost per tick
FOOD_SCENT_DEPOSIT = 0.5
PICKUP_RADIUS = 15.0
BITE_SIZE = 50.0
DELIVERY_RADIUS = 28.0
SEARCH_TURN = 0.5  # fraction of sensor angle
RETURN_TURN = 0.8
SCENT_EPSILON = 1e-6  # below this an antenna smells nothing


class AntState(Enum):
    """Behavioural state of an ant."""

    SEARCHING = auto()
    RETURNING = auto()
    WANDERING = auto()


@dataclass
class Ant:
    """A single ant.

    Attributes:
        body: Steering physics (position, velocity, acceleration).
        colony_id: 0 for colony A, 1 for colony B.
        state: Behaviour chosen on the last tick.
        has_food: Whether the ant is carrying a bite of leaf.
        energy: Remaining energy; the ant dies at 0.
        max_energy: Energy restored on every pickup.
        age: Ticks lived.
        max_age: Lifespan in ticks, drawn at birth.
        trail_strength: Home scent the ant currently lays (0.0-1.0).
        smell_radius: Distance at which grounded leaves are sensed.
    """

    body: SteeringBody
    colony_id: int
    state: AntState = AntState.SEARCHING
    has_food: bool = False
    energy: float = MAX_ENERGY
    max_energy: float = MAX_ENERGY
    age: int = 0
    max_age: float = LIFESPAN_RANGE[1]
    trail_strength: float = 1.0
    smell_radius: float = SMELL_RADIUS

    @classmethod
    def spawn(cls, pos: Vector2, colony_id: int, rng: Generator) -> Ant:
        """Create an ant at ``pos`` heading somewhere upward.

        The initial heading is random but always has a non-positive
        vertical component, so newborns leave the nest toward the
        surface.  Lifespan is drawn uniformly from ``LIFESPAN_RANGE``.

        Args:
            pos: Spawn position (normally the nest).
            colony_id: Owning colony.
            rng: Seeded random generator.

        Returns:
            A new Ant in the SEARCHING state with full energy.
        """
        heading = Vector2.random_unit(rng)
        if heading.y > 0:
            heading = Vector2(heading.x, -heading.y)
        lo, hi = LIFESPAN_RANGE
        return cls(
            body=SteeringBody(pos=pos, vel=heading),
            colony_id=colony_id,
            max_age=float(rng.uniform(lo, hi)),
        )

    @property
    def pos(self) -> Vector2:
        return self.body.pos

    @property
    def home_channel(self) -> PheromoneChannel:
        return PheromoneChannel.home(self.colony_id)

    @property
    def food_channel(self) -> PheromoneChannel:
        return PheromoneChannel.food(self.colony_id)

    @property
    def is_dead(self) -> bool:
        """True once the ant has starved or reached its lifespan."""
        return self.energy <= 0 or self.age >= self.max_age

    def update(
        self,
        grid: PheromoneGrid,
        leaves: list[FallingLeaf],
        colony: Colony,
        world: World,
        rng: Generator,
    ) -> int:
        """Run one tick: metabolism, decision, movement, interaction.

        Args:
            grid: Shared pheromone grid (read by the antennae, written by
                the deposit).
            leaves: All leaves currently in the world.
            colony: The ant's own colony (nest, policy, statistics).
            world: Arena geometry.
            rng: Seeded random generator.

        Returns:
            Food units delivered to the nest this tick (0 or 1).
        """
        self.age += 1
        self.energy = max(0.0, self.energy - colony.policy.metabolism_rate)
        self.trail_strength = max(0.0, self.trail_strength - TRAIL_DECAY)

        self.state = AntState.RETURNING if self.has_food else AntState.SEARCHING

        match self.state:
            case AntState.SEARCHING:
                if not self._smell_food(leaves, world):
                    self.state = self._follow_food_scent(grid, rng)
            case AntState.RETURNING:
                self._return_home(grid, colony.nest, rng)
            case AntState.WANDERING:
                self.body.wander(rng)

        self.body.integrate()
        self.body.clamp_to_bounds(world.agent_bounds)

        return self._interact(grid, leaves, colony, world)

    # -- Sensing -------------------------------------------------------------

    def _sense(
        self,
        grid: PheromoneGrid,
        channel: PheromoneChannel,
    ) -> tuple[float, float, float]:
        """Read ``channel`` at the front, left and right antennae."""
        angle = self.body.sensor_angle
        front = grid.get(self.body.sensor_position(0.0), channel)
        left = grid.get(self.body.sensor_position(-angle), channel)
        right = grid.get(self.body.sensor_position(angle), channel)
        return front, left, right

    def _smell_food(self, leaves: list[FallingLeaf], world: World) -> bool:
        """Seek the closest grounded leaf within smell range, if any."""
        closest: Vector2 | None = None
        record = self.smell_radius
        for leaf in leaves:
            if leaf.is_consumed or not leaf.is_grounded(world.surface_y):
                continue
            dist = self.pos.distance_to(leaf.pos)
            if dist < record:
                record = dist
                closest = leaf.pos

        if closest is None:
            return False
        self.body.seek(closest)
        return True

    # -- State behaviours ----------------------------------------------------

    def _follow_food_scent(self, grid: PheromoneGrid, rng: Generator) -> AntState:
        """Steer along the colony's food scent.

        Returns:
            SEARCHING while a usable gradient exists, WANDERING when the
            antennae smell nothing or left and right tie exactly.
        """
        front, left, right = self._sense(grid, self.food_channel)

        if max(front, left, right) < SCENT_EPSILON:
            self.body.wander(rng)
            return AntState.WANDERING

        turn = self.body.sensor_angle * SEARCH_TURN
        if front > left and front > right:
            self.body.move_forward()
        elif left > right:
            self.body.turn(-turn)
        elif right > left:
            self.body.turn(turn)
        else:
            self.body.wander(rng)
            return AntState.WANDERING
        return AntState.SEARCHING

    def _return_home(self, grid: PheromoneGrid, nest: Vector2, rng: Generator) -> None:
        """Steer along the colony's home scent, or straight for the nest.

        When no antenna picks up any home scent the ant steers directly
        at its nest, with a wander impulse on top.
        """
        front, left, right = self._sense(grid, self.home_channel)

        if max(front, left, right) < SCENT_EPSILON:
            self.body.seek(nest)
            self.body.wander(rng)
            return

        turn = self.body.sensor_angle * RETURN_TURN
        if front >= left and front >= right:
            self.body.move_forward()
        elif left > right:
            self.body.turn(-turn)
        else:
            self.body.turn(turn)

    # -- Environment interaction --------------------------------------------

    def _interact(
        self,
        grid: PheromoneGrid,
        leaves: list[FallingLeaf],
        colony: Colony,
        world: World,
    ) -> int:
        """Lay scent, then pick up a leaf or deliver to the nest."""
        if world.is_underground(self.pos):
            if self.has_food:
                grid.add(self.pos, self.food_channel, FOOD_SCENT_DEPOSIT)
            elif self.trail_strength > grid.get(self.pos, self.home_channel):
                grid.set(self.pos, self.home_channel, self.trail_strength)

        if not self.has_food:
            for leaf in leaves:
                if leaf.is_consumed or not leaf.is_grounded(world.surface_y):
                    continue
                if self.pos.distance_to(leaf.pos) < PICKUP_RADIUS:
                    leaf.take_bite(BITE_SIZE)
                    self.has_food = True
                    self.energy = self.max_energy
                    self.body.reverse()
                    self.trail_strength = 1.0
                    colony.stats.register_food()
                    break
            return 0

        if self.pos.distance_to(colony.nest) < DELIVERY_RADIUS:
            self.has_food = False
            self.trail_strength = 1.0
            self.body.reverse()
            return 1
        return 0
