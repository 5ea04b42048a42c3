"""Config — load simulation parameters from YAML files.

All tunable constants (world geometry, grid resolution, calendar,
forest layout, initial colony policies and frame controls) live in YAML
and are parsed into typed dataclasses here.  Per-ant behaviour
constants live next to the behaviour in ``colony/ant.py``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from antrivals.colony.policies import ColonyPolicy

logger = logging.getLogger(__name__)


def _default_policies() -> list[ColonyPolicy]:
    return [
        ColonyPolicy(metabolism_rate=0.167, spawn_cost=4, evaporation_rate=0.995),
        ColonyPolicy(metabolism_rate=0.334, spawn_cost=3, evaporation_rate=0.995),
    ]


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        world_width: World width in pixels.
        world_height: World height in pixels.
        left_margin: Unplayable strip on the left (pixels).
        right_margin: Unplayable strip on the right (pixels).
        surface_fraction: Surface line as a fraction of the height.
        resolution: Pheromone cell size in pixels.
        nest_inset: Nest distance above the bottom edge (pixels).
        nest_radius: Radius kept at full home scent around each nest.
        initial_ants: Total starting population, split between colonies.
        max_per_colony: Hard population cap per colony.
        day_length: Ticks per simulated day.
        season_length_days: Days per season.
        tree_positions: Tree x positions as fractions of playable width.
        tree_sizes: Tree sizes in pixels, paired with ``tree_positions``.
        leaves_per_tree: Leaf emission points per tree canopy.
        steps_per_frame: Physics steps run per rendered frame.
        leaf_spawn_probability: Base per-step chance of a new leaf.
        colonies: Starting policy for colony A and colony B.
    """

    seed: int = 42
    world_width: int = 1400
    world_height: int = 700
    left_margin: int = 280
    right_margin: int = 320
    surface_fraction: float = 0.35
    resolution: int = 4
    nest_inset: float = 30.0
    nest_radius: float = 25.0
    initial_ants: int = 50
    max_per_colony: int = 1000
    day_length: int = 1440
    season_length_days: int = 3
    tree_positions: tuple[float, ...] = (0.1, 0.3, 0.5, 0.75, 0.9)
    tree_sizes: tuple[float, ...] = (55.0, 45.0, 65.0, 50.0, 55.0)
    leaves_per_tree: int = 40
    steps_per_frame: int = 1
    leaf_spawn_probability: float = 0.042
    colonies: list[ColonyPolicy] = field(default_factory=_default_policies)

    def __post_init__(self) -> None:
        """Reject geometry the simulation cannot run in.

        Raises:
            ValueError: If sizes are non-positive, the margins leave no
                playable width, the surface fraction is outside (0, 1),
                the tree lists differ in length, or there are not
                exactly two colony policies.
        """
        if self.world_width <= 0 or self.world_height <= 0:
            msg = (
                "world size must be positive, got "
                f"{self.world_width}x{self.world_height}"
            )
            raise ValueError(msg)
        if self.resolution <= 0:
            msg = f"resolution must be positive, got {self.resolution}"
            raise ValueError(msg)
        if self.left_margin + self.right_margin >= self.world_width:
            msg = (
                f"margins {self.left_margin}+{self.right_margin} leave no "
                f"playable width in {self.world_width}"
            )
            raise ValueError(msg)
        if not 0.0 < self.surface_fraction < 1.0:
            msg = f"surface_fraction must be in (0, 1), got {self.surface_fraction}"
            raise ValueError(msg)
        if len(self.tree_positions) != len(self.tree_sizes):
            msg = "tree_positions and tree_sizes must have the same length"
            raise ValueError(msg)
        if len(self.colonies) != 2:
            msg = f"exactly two colony policies are required, got {len(self.colonies)}"
            raise ValueError(msg)

    @property
    def surface_y(self) -> float:
        return self.world_height * self.surface_fraction

    @property
    def grid_cols(self) -> int:
        return self.world_width // self.resolution

    @property
    def grid_rows(self) -> int:
        return self.world_height // self.resolution

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If the loaded geometry is invalid or the file
                lists more colony entries than there are colonies.
        """
        path = Path(path)
        with path.open("r") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        defaults = cls()
        colonies = _merge_policies(defaults.colonies, data.get("colonies") or [])

        config = cls(
            seed=data.get("seed", defaults.seed),
            world_width=data.get("world_width", defaults.world_width),
            world_height=data.get("world_height", defaults.world_height),
            left_margin=data.get("left_margin", defaults.left_margin),
            right_margin=data.get("right_margin", defaults.right_margin),
            surface_fraction=data.get(
                "surface_fraction",
                defaults.surface_fraction,
            ),
            resolution=data.get("resolution", defaults.resolution),
            nest_inset=data.get("nest_inset", defaults.nest_inset),
            nest_radius=data.get("nest_radius", defaults.nest_radius),
            initial_ants=data.get("initial_ants", defaults.initial_ants),
            max_per_colony=data.get("max_per_colony", defaults.max_per_colony),
            day_length=data.get("day_length", defaults.day_length),
            season_length_days=data.get(
                "season_length_days",
                defaults.season_length_days,
            ),
            tree_positions=tuple(
                data.get("tree_positions", defaults.tree_positions),
            ),
            tree_sizes=tuple(data.get("tree_sizes", defaults.tree_sizes)),
            leaves_per_tree=data.get("leaves_per_tree", defaults.leaves_per_tree),
            steps_per_frame=data.get("steps_per_frame", defaults.steps_per_frame),
            leaf_spawn_probability=data.get(
                "leaf_spawn_probability",
                defaults.leaf_spawn_probability,
            ),
            colonies=colonies,
        )
        logger.debug("Loaded config from %s (seed=%d)", path, config.seed)
        return config


def _merge_policies(
    defaults: list[ColonyPolicy],
    entries: list[dict[str, Any] | None],
) -> list[ColonyPolicy]:
    """Overlay YAML colony entries on the per-colony defaults.

    Entry ``i`` only overrides the keys it names; missing keys and
    missing entries keep colony ``i``'s default policy.

    Raises:
        ValueError: If there are more entries than colonies.
    """
    if len(entries) > len(defaults):
        msg = f"expected at most {len(defaults)} colony entries, got {len(entries)}"
        raise ValueError(msg)
    return [
        replace(base, **(entries[i] or {})) if i < len(entries) else replace(base)
        for i, base in enumerate(defaults)
    ]
