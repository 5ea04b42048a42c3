"""PheromoneGrid — four-channel scent grid shared by both colonies.

Each cell stores one intensity per channel (home/food for colony A and
colony B) in a single NumPy array of shape ``(rows, cols, 4)``.  All
public operations take *world* coordinates; the grid maps them to cells
by floor division with its resolution.  Values are kept in ``[0, 1]``
and out-of-grid coordinates never touch real cells.

Bulk decay lives in ``evaporation.py``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np
from numpy.typing import NDArray

from antrivals.geometry.vector import Vector2


class PheromoneChannel(IntEnum):
    """Channel index inside a cell; values match the array's last axis."""

    HOME_A = 0
    FOOD_A = 1
    HOME_B = 2
    FOOD_B = 3

    @classmethod
    def home(cls, colony_id: int) -> PheromoneChannel:
        """Home channel for colony 0 or 1."""
        return cls(colony_id * 2)

    @classmethod
    def food(cls, colony_id: int) -> PheromoneChannel:
        """Food channel for colony 0 or 1."""
        return cls(colony_id * 2 + 1)


@dataclass(frozen=True)
class ActiveArea:
    """World-space region in which evaporation runs.

    Attributes:
        x_min: Leftmost world x of an active cell corner.
        x_max: Rightmost world x of an active cell corner.
        y_min: Topmost world y of an active cell corner (the surface).
    """

    x_min: float
    x_max: float
    y_min: float


@dataclass
class PheromoneGrid:
    """Dense ``cols × rows`` grid with four channels per cell.

    Attributes:
        cols: Number of cell columns.
        rows: Number of cell rows.
        resolution: Cell edge length in world pixels.
        nest_radius: World distance around a nest that evaporation keeps
            pinned at 1.0 on that nest's home channel.
        active_area: Region evaporated each tick.  ``None`` means the
            whole grid.
        values: Raw intensities, indexed ``values[row, col, channel]``.
        nests: Nest positions recorded by the last ``reset`` (A, B).
    """

    cols: int
    rows: int
    resolution: int
    nest_radius: float = 25.0
    active_area: ActiveArea | None = None
    values: NDArray[np.float64] = field(init=False, repr=False)
    nests: tuple[Vector2, ...] = field(init=False, default=())
    _active_mask: NDArray[np.bool_] = field(init=False, repr=False)
    _nest_masks: tuple[NDArray[np.bool_], ...] = field(
        init=False,
        repr=False,
        default=(),
    )

    def __post_init__(self) -> None:
        """Allocate a zeroed grid and precompute the active-area mask."""
        self.values = np.zeros((self.rows, self.cols, 4), dtype=np.float64)
        wx, wy = self._cell_corners()
        if self.active_area is None:
            self._active_mask = np.ones((self.rows, self.cols), dtype=bool)
        else:
            area = self.active_area
            self._active_mask = (
                (wx >= area.x_min) & (wx <= area.x_max) & (wy >= area.y_min)
            )

    # -- Lifecycle -----------------------------------------------------------

    def reset(self, nest_a: Vector2, nest_b: Vector2) -> None:
        """Zero every channel, then pin each nest cell's home channel to 1.0.

        Args:
            nest_a: World position of colony A's nest.
            nest_b: World position of colony B's nest.
        """
        self.values.fill(0.0)
        self.nests = (nest_a, nest_b)

        wx, wy = self._cell_corners()
        masks = []
        for nest in self.nests:
            dist = np.hypot(wx - nest.x, wy - nest.y)
            masks.append((dist < self.nest_radius) & self._active_mask)
        self._nest_masks = tuple(masks)

        for colony_id, nest in enumerate(self.nests):
            cell = self.cell_of(nest)
            if cell is not None:
                col, row = cell
                self.values[row, col, PheromoneChannel.home(colony_id)] = 1.0

    def evaporate(self, rate_home_a: float, rate_home_b: float) -> None:
        """Decay the active area once; see ``evaporation.evaporate``."""
        from antrivals.pheromones.evaporation import evaporate

        evaporate(self, rate_home_a, rate_home_b)

    # -- Point access ------------------------------------------------------

    def cell_of(self, pos: Vector2) -> tuple[int, int] | None:
        """Return ``(col, row)`` for a world position, or None off-grid."""
        col = math.floor(pos.x / self.resolution)
        row = math.floor(pos.y / self.resolution)
        if 0 <= col < self.cols and 0 <= row < self.rows:
            return col, row
        return None

    def get(self, pos: Vector2, channel: PheromoneChannel) -> float:
        """Read a channel at a world position (0.0 when off-grid)."""
        cell = self.cell_of(pos)
        if cell is None:
            return 0.0
        col, row = cell
        return float(self.values[row, col, channel])

    def set(self, pos: Vector2, channel: PheromoneChannel, value: float) -> None:
        """Write a clamped value; no-op when off-grid."""
        cell = self.cell_of(pos)
        if cell is None:
            return
        col, row = cell
        self.values[row, col, channel] = _clamp01(value)

    def add(self, pos: Vector2, channel: PheromoneChannel, delta: float) -> None:
        """Accumulate into a cell, clamping the sum; no-op when off-grid."""
        cell = self.cell_of(pos)
        if cell is None:
            return
        col, row = cell
        current = float(self.values[row, col, channel])
        self.values[row, col, channel] = _clamp01(current + delta)

    # -- Internals ---------------------------------------------------------

    def _cell_corners(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """World coordinates of every cell's top-left corner."""
        xs = np.arange(self.cols, dtype=np.float64) * self.resolution
        ys = np.arange(self.rows, dtype=np.float64) * self.resolution
        wx, wy = np.meshgrid(xs, ys)
        return wx, wy

    @property
    def active_mask(self) -> NDArray[np.bool_]:
        return self._active_mask

    @property
    def nest_masks(self) -> tuple[NDArray[np.bool_], ...]:
        return self._nest_masks


def _clamp01(value: float) -> float:
    if value < 0.0:
        return 0.0
    return min(value, 1.0)
