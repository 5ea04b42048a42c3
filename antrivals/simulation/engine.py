"""SimulationEngine — the physics-step loop.

Owns all simulation state and advances it one physics step at a time,
in a fixed order:

1. Advance the clock by one tick (and roll daily statistics at midnight)
2. Evaporate the pheromone grid
3. Maybe drop a new leaf from the forest (seasonal rate)
4. Update leaf physics; remove eaten leaves
5. Update ants one at a time; remove the dead
6. Each colony may buy one new ant from its food stock

A frame (``advance_frame``) runs zero or more steps according to the
frame controls.  Reset replaces all state between frames, never during
a step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

import numpy as np
from numpy.random import Generator

from antrivals.colony.ant import Ant
from antrivals.colony.colony import Colony
from antrivals.pheromones.fields import PheromoneGrid
from antrivals.simulation.config import SimulationConfig
from antrivals.simulation.controls import FrameControls
from antrivals.simulation.snapshot import (
    AntView,
    ClockView,
    ColonyView,
    LeafView,
    SimulationSnapshot,
)
from antrivals.world.clock import WorldClock
from antrivals.world.leaf import FallingLeaf
from antrivals.world.world import World

logger = logging.getLogger(__name__)

DEFAULT_DT = 1.0 / 60.0
_SEASON_LEAF_MODIFIER = {2: 1.5, 3: 0.05}  # autumn, winter
_NOMINAL_LEAF_MODIFIER = 0.2


def leaf_spawn_modifier(season_index: int) -> float:
    """Seasonal multiplier on the base leaf-spawn probability."""
    return _SEASON_LEAF_MODIFIER.get(season_index, _NOMINAL_LEAF_MODIFIER)


@dataclass
class SimulationEngine:
    """Drives the two-colony simulation forward step by step.

    Attributes:
        config: Loaded simulation configuration.
        world: Arena geometry and forest.
        grid: Shared four-channel pheromone grid.
        colonies: Colony A and colony B.
        ants: All living ants in processing order.
        leaves: All leaves, falling or grounded.
        clock: Calendar derived from the step count.
        controls: Global inputs written by a UI between frames.
        rng: Master seeded random generator.
        tick: Physics steps executed since the last reset.
    """

    config: SimulationConfig
    world: World = field(init=False)
    grid: PheromoneGrid = field(init=False)
    colonies: list[Colony] = field(init=False, default_factory=list)
    ants: list[Ant] = field(init=False, default_factory=list)
    leaves: list[FallingLeaf] = field(init=False, default_factory=list)
    clock: WorldClock = field(init=False)
    controls: FrameControls = field(init=False)
    rng: Generator = field(init=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build world, grid, colonies and clock from config, then reset."""
        cfg = self.config
        self.rng = np.random.default_rng(cfg.seed)
        self.world = World(
            width=cfg.world_width,
            height=cfg.world_height,
            left_margin=cfg.left_margin,
            right_margin=cfg.right_margin,
            surface_y=cfg.surface_y,
            nest_inset=cfg.nest_inset,
        )
        self.grid = PheromoneGrid(
            cols=cfg.grid_cols,
            rows=cfg.grid_rows,
            resolution=cfg.resolution,
            nest_radius=cfg.nest_radius,
            active_area=self.world.active_area,
        )
        self.colonies = [
            Colony(
                colony_id=colony_id,
                nest=self.world.nest_position(colony_id),
                policy=replace(policy),
            )
            for colony_id, policy in enumerate(cfg.colonies)
        ]
        self.clock = WorldClock(
            day_length=cfg.day_length,
            season_length_days=cfg.season_length_days,
            listeners=[colony.stats for colony in self.colonies],
        )
        self.controls = FrameControls(
            steps_per_frame=cfg.steps_per_frame,
            leaf_spawn_probability=cfg.leaf_spawn_probability,
        )
        self.reset()

    # -- Lifecycle -------------------------------------------------------------

    def reset(self) -> None:
        """Restart the simulation while keeping every tunable parameter.

        Clears ants and leaves, zeroes food stocks and statistics, resets
        the clock and the pheromone grid, replants the forest, seeds the
        initial population and unpauses.
        """
        cfg = self.config
        self.ants = []
        self.leaves = []
        for colony in self.colonies:
            colony.reset()
        self.clock.reset()
        nest_a, nest_b = (colony.nest for colony in self.colonies)
        self.grid.reset(nest_a, nest_b)
        self.world.plant_forest(
            self.rng,
            positions=cfg.tree_positions,
            sizes=cfg.tree_sizes,
            leaves_per_tree=cfg.leaves_per_tree,
        )

        for _ in range(cfg.initial_ants // len(self.colonies)):
            for colony in self.colonies:
                self.ants.append(colony.spawn_ant(self.rng))

        self.clock.recalculate()
        self.controls.paused = False
        self.tick = 0
        logger.info(
            "Simulation reset: seed=%d, %d ants, %d trees",
            cfg.seed,
            len(self.ants),
            len(self.world.forest),
        )

    # -- Stepping ------------------------------------------------------------

    def population(self, colony_id: int) -> int:
        """Number of living ants belonging to ``colony_id``."""
        return sum(1 for ant in self.ants if ant.colony_id == colony_id)

    def step(self, dt: float = DEFAULT_DT) -> None:
        """Advance the simulation by one physics step.

        Populations used for reproduction are counted before this step's
        deaths are pruned.

        Args:
            dt: Real seconds since the previous frame; only leaf physics
                uses it.
        """
        populations = [self.population(c.colony_id) for c in self.colonies]

        # 1. Clock
        self.clock.tick(1.0)
        self.clock.recalculate()

        # 2. Pheromones
        colony_a, colony_b = self.colonies
        self.grid.evaporate(
            colony_a.policy.evaporation_rate,
            colony_b.policy.evaporation_rate,
        )

        # 3. Leaf spawning
        chance = self.controls.leaf_spawn_probability * leaf_spawn_modifier(
            self.clock.season_index,
        )
        if self.rng.random() < chance:
            spawn = self.world.leaf_spawn_point(self.rng)
            self.leaves.append(FallingLeaf.spawn(spawn, self.rng))

        # 4. Leaves
        min_x, max_x = self.world.leaf_x_range
        for leaf in self.leaves:
            leaf.update(dt, self.world.surface_y, min_x, max_x)
        self.leaves = [leaf for leaf in self.leaves if not leaf.is_consumed]

        # 5. Ants, strictly one after another
        survivors: list[Ant] = []
        for ant in self.ants:
            colony = self.colonies[ant.colony_id]
            delivered = ant.update(
                self.grid,
                self.leaves,
                colony,
                self.world,
                self.rng,
            )
            if delivered:
                colony.receive_food(delivered)
            if ant.is_dead:
                colony.stats.register_death()
            else:
                survivors.append(ant)
        self.ants = survivors

        # 6. Reproduction
        for colony, population in zip(self.colonies, populations, strict=True):
            if colony.can_reproduce(population, self.config.max_per_colony):
                self.ants.append(colony.reproduce(self.rng))

        self.tick += 1

    def advance_frame(self, dt: float = DEFAULT_DT) -> int:
        """Apply the frame controls and run this frame's physics steps.

        A pending reset request is performed (and cleared) first.  A
        paused simulation runs no steps and leaves all state untouched.

        Args:
            dt: Real seconds since the previous frame.

        Returns:
            Number of physics steps executed.
        """
        if self.controls.reset_requested:
            self.controls.reset_requested = False
            self.reset()

        if self.controls.paused:
            return 0

        steps = max(1, self.controls.steps_per_frame)
        for _ in range(steps):
            self.step(dt)
        return steps

    def run(self, ticks: int, dt: float = DEFAULT_DT) -> None:
        """Run a fixed number of physics steps, ignoring frame controls.

        Args:
            ticks: Number of steps to advance.
            dt: Seconds of leaf physics per step.
        """
        for _ in range(ticks):
            self.step(dt)

    # -- Read-only output ----------------------------------------------------

    def snapshot(self) -> SimulationSnapshot:
        """Copy the externally visible state."""
        surface_y = self.world.surface_y
        clock = self.clock
        return SimulationSnapshot(
            tick=self.tick,
            ants=tuple(
                AntView(
                    x=ant.pos.x,
                    y=ant.pos.y,
                    colony_id=ant.colony_id,
                    has_food=ant.has_food,
                    state=ant.state,
                )
                for ant in self.ants
            ),
            leaves=tuple(
                LeafView(
                    x=leaf.pos.x,
                    y=leaf.pos.y,
                    amount=leaf.amount,
                    grounded=leaf.is_grounded(surface_y),
                )
                for leaf in self.leaves
            ),
            colonies=tuple(
                ColonyView(
                    colony_id=colony.colony_id,
                    food_stock=colony.food_stock,
                    population=self.population(colony.colony_id),
                    current_day=colony.stats.current_day,
                    previous_day=colony.stats.previous_day,
                )
                for colony in self.colonies
            ),
            clock=ClockView(
                day=clock.day,
                hour=clock.hour,
                minute=clock.minute,
                season_index=clock.season_index,
                season_name=clock.season_name,
                day_progress=clock.day_progress,
                season_progress=clock.season_progress,
            ),
            pheromones=self.grid.values.copy(),
        )
