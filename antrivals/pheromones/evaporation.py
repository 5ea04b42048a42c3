"""Evaporation of the shared pheromone grid.

Operates on the raw NumPy array inside a ``PheromoneGrid``.  Kept apart
from ``fields.py`` so the per-tick bulk update stays vectorised and the
point accessors stay simple.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from antrivals.pheromones.fields import PheromoneChannel

if TYPE_CHECKING:
    from antrivals.pheromones.fields import PheromoneGrid

FOOD_DECAY_OFFSET = 0.01


def decay_factors(rate_home_a: float, rate_home_b: float) -> np.ndarray:
    """Per-channel multipliers for one evaporation pass.

    Food scent fades faster than home scent by a fixed offset, floored
    at zero.

    Args:
        rate_home_a: Colony A retention rate in ``[0, 1)``.
        rate_home_b: Colony B retention rate in ``[0, 1)``.

    Returns:
        Array of four factors ordered like ``PheromoneChannel``.
    """
    return np.array(
        [
            rate_home_a,
            max(0.0, rate_home_a - FOOD_DECAY_OFFSET),
            rate_home_b,
            max(0.0, rate_home_b - FOOD_DECAY_OFFSET),
        ],
        dtype=np.float64,
    )


def evaporate(grid: PheromoneGrid, rate_home_a: float, rate_home_b: float) -> None:
    """Decay every active cell once, then refresh the nest beacons.

    Cells outside the grid's active area (under the sidebars or in the
    sky) are left untouched.  After decay, active cells within
    ``nest_radius`` of a nest are set back to 1.0 on that nest's home
    channel so a returning ant can always find it.

    Args:
        grid: The pheromone grid to update in place.
        rate_home_a: Colony A retention rate.
        rate_home_b: Colony B retention rate.
    """
    factors = decay_factors(rate_home_a, rate_home_b)
    active = grid.active_mask
    grid.values[active] *= factors

    for colony_id, nest_mask in enumerate(grid.nest_masks):
        grid.values[nest_mask, PheromoneChannel.home(colony_id)] = 1.0
