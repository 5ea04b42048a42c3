"""Entry point for ``python -m antrivals``.

Loads the default YAML config, builds the two-colony simulation and
either opens a Pygame window or runs a fixed number of frames headless.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from antrivals.simulation.config import SimulationConfig

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, then launch the viewer or the headless runner."""
    parser = argparse.ArgumentParser(
        prog="antrivals",
        description="Ant Rivals - two colonies foraging by stigmergy",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config seed",
    )
    parser.add_argument(
        "--headless",
        type=int,
        metavar="FRAMES",
        default=None,
        help="Run FRAMES frames without a window",
    )
    parser.add_argument(
        "--csv",
        type=pathlib.Path,
        default=None,
        help="Per-frame CSV log (headless only)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Target frames per second (default: 60)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = SimulationConfig.from_yaml(args.config)
    if args.seed is not None:
        config.seed = args.seed

    if args.headless is not None:
        from antrivals.simulation.headless import run_headless

        run_headless(config, args.headless, log_path=args.csv)
        return

    from antrivals.simulation.engine import SimulationEngine
    from antrivals.ui.pygame_client import PygameRenderer

    engine = SimulationEngine(config=config)
    renderer = PygameRenderer(engine=engine)
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
