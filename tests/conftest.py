"""Shared fixtures for the Ant Rivals test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from antrivals.colony.colony import Colony
from antrivals.colony.policies import ColonyPolicy
from antrivals.pheromones.fields import PheromoneGrid
from antrivals.simulation.config import SimulationConfig
from antrivals.simulation.engine import SimulationEngine
from antrivals.world.world import World


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_world() -> World:
    """A 200x120 arena: playable x 20-180, surface at y=30.

    Agent bounds are x 25-175, y 30-115; nests sit at (60, 90) and
    (140, 90).
    """
    return World(
        width=200,
        height=120,
        left_margin=20,
        right_margin=20,
        surface_y=30.0,
    )


@pytest.fixture
def small_grid() -> PheromoneGrid:
    """A 50x30 grid at resolution 4, covering the small world."""
    return PheromoneGrid(cols=50, rows=30, resolution=4)


@pytest.fixture
def colony_a(small_world: World) -> Colony:
    """Colony A at its nest with unit metabolism."""
    return Colony(
        colony_id=0,
        nest=small_world.nest_position(0),
        policy=ColonyPolicy(metabolism_rate=1.0, spawn_cost=4, evaporation_rate=0.99),
    )


@pytest.fixture
def small_config() -> SimulationConfig:
    """A small world with no starting ants and no falling leaves."""
    return SimulationConfig(
        world_width=200,
        world_height=120,
        left_margin=20,
        right_margin=20,
        surface_fraction=0.25,
        initial_ants=0,
        leaf_spawn_probability=0.0,
        tree_positions=(0.5,),
        tree_sizes=(10.0,),
        leaves_per_tree=8,
    )


@pytest.fixture
def empty_engine(small_config: SimulationConfig) -> SimulationEngine:
    """An engine over the small config: empty, leafless, day 1."""
    return SimulationEngine(config=small_config)
