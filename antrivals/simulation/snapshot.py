"""Read-only views of simulation state for renderers and loggers.

Snapshots copy everything they expose, so a consumer can hold one
across frames without seeing later mutations.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from antrivals.colony.ant import AntState
from antrivals.colony.stats import DayCounts


@dataclass(frozen=True, slots=True)
class AntView:
    x: float
    y: float
    colony_id: int
    has_food: bool
    state: AntState


@dataclass(frozen=True, slots=True)
class LeafView:
    x: float
    y: float
    amount: float
    grounded: bool


@dataclass(frozen=True, slots=True)
class ColonyView:
    colony_id: int
    food_stock: int
    population: int
    current_day: DayCounts
    previous_day: DayCounts


@dataclass(frozen=True, slots=True)
class ClockView:
    day: int
    hour: int
    minute: int
    season_index: int
    season_name: str
    day_progress: float
    season_progress: float


@dataclass(frozen=True, slots=True)
class SimulationSnapshot:
    """Everything an external consumer may read after a frame.

    Attributes:
        tick: Physics steps executed since the last reset.
        ants: One view per living ant, in processing order.
        leaves: One view per leaf.
        colonies: Colony A then colony B.
        clock: Calendar fields.
        pheromones: Copy of the grid, shape ``(rows, cols, 4)``.
    """

    tick: int
    ants: tuple[AntView, ...]
    leaves: tuple[LeafView, ...]
    colonies: tuple[ColonyView, ...]
    clock: ClockView
    pheromones: NDArray[np.float64]
