"""Policies — player-adjustable knobs for one colony.

Policies are read by the engine every step, so a UI may change them
between frames.  They survive a simulation reset.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ColonyPolicy:
    """Tunable parameters for a single colony.

    Attributes:
        metabolism_rate: Energy each ant burns per tick (> 0).
        spawn_cost: Food stock consumed per new ant (>= 1).
        evaporation_rate: Fraction of home scent kept per tick, in
            ``[0, 1)``.  Food scent keeps 0.01 less.
    """

    metabolism_rate: float = 0.167
    spawn_cost: int = 4
    evaporation_rate: float = 0.995
