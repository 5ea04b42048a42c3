"""Headless runner — step the simulation without a display.

Useful for long experiments and for checking determinism: the same
config and frame count always produce the same CSV.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from antrivals.simulation.config import SimulationConfig
from antrivals.simulation.engine import DEFAULT_DT, SimulationEngine

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "frame",
    "day",
    "population_a",
    "population_b",
    "food_stock_a",
    "food_stock_b",
]


def run_headless(
    config: SimulationConfig,
    frames: int,
    *,
    dt: float = DEFAULT_DT,
    log_path: Path | None = None,
) -> SimulationEngine:
    """Advance ``frames`` frames and log a summary at each new day.

    Args:
        config: Simulation configuration.
        frames: Number of frames to run (each runs ``steps_per_frame``
            physics steps).
        dt: Fixed frame time in seconds used for leaf physics.
        log_path: Optional CSV file, one row per frame.

    Returns:
        The engine in its final state.
    """
    engine = SimulationEngine(config=config)
    writer = None
    csv_file = None
    try:
        if log_path is not None:
            csv_file = Path(log_path).open("w", newline="")
            writer = csv.writer(csv_file)
            writer.writerow(CSV_HEADER)

        last_day = engine.clock.day
        for frame in range(1, frames + 1):
            engine.advance_frame(dt)
            if writer is not None:
                colony_a, colony_b = engine.colonies
                writer.writerow(
                    [
                        frame,
                        engine.clock.day,
                        engine.population(0),
                        engine.population(1),
                        colony_a.food_stock,
                        colony_b.food_stock,
                    ],
                )
            if engine.clock.day != last_day:
                last_day = engine.clock.day
                _log_day_summary(engine)
    finally:
        if csv_file is not None:
            csv_file.close()

    return engine


def _log_day_summary(engine: SimulationEngine) -> None:
    clock = engine.clock
    for colony in engine.colonies:
        prev = colony.stats.previous_day
        logger.info(
            "Day %d (%s) colony %s: pop=%d stock=%d food=%d births=%d deaths=%d",
            clock.day - 1,
            clock.season_name,
            "AB"[colony.colony_id],
            engine.population(colony.colony_id),
            colony.food_stock,
            prev.food,
            prev.births,
            prev.deaths,
        )
