"""Entry point for ``python -m nexusants``.

Loads the default YAML config, builds a simulation engine, and either
opens a Pygame window to watch the ants forage or runs a fixed number of
ticks headless and logs the outcome.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from nexusants.display.frame import PixelFrame
from nexusants.simulation.config import SimulationConfig
from nexusants.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nexusants",
        description="nexusants - pheromone-trail ant foraging on a pixel display",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml when present)",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=3,
        help="Screen pixels per simulated pixel (default: 3)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=30.0,
        help="Simulation ticks per second (default: 30)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window for --ticks ticks",
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=1000,
        help="Ticks to run in headless mode (default: 1000)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def load_config(path: pathlib.Path | None) -> SimulationConfig:
    """Load the chosen config, or the bundled default when none was given.

    Without an explicit path the source-tree ``config/default.yaml`` is
    used if it exists; otherwise the built-in defaults apply, which carry
    the same values.  An explicit path that does not exist still raises.
    """
    if path is not None:
        return SimulationConfig.from_yaml(path)
    if _DEFAULT_CONFIG.is_file():
        return SimulationConfig.from_yaml(_DEFAULT_CONFIG)
    logger.info("no config file at %s, using built-in defaults", _DEFAULT_CONFIG)
    return SimulationConfig()


def run_headless(engine: SimulationEngine, ticks: int) -> PixelFrame:
    """Step and render ``ticks`` frames into an in-memory sink.

    Returns:
        The frame sink, holding the last rendered picture.
    """
    frame = PixelFrame(
        width=engine.config.world_width,
        height=engine.config.world_height,
    )
    for _ in range(ticks):
        engine.step()
        engine.render(frame)
    logger.info(
        "finished %d ticks: nexus food %d, %d food units left",
        engine.tick,
        engine.colony.nexus.food,
        engine.colony.food.total(),
    )
    return frame


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, launch renderer."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    engine = SimulationEngine(config=config)

    if args.headless:
        run_headless(engine, args.ticks)
        return

    from nexusants.ui.pygame_client import PygameDisplay

    display = PygameDisplay(
        engine=engine,
        cell_size=args.cell_size,
        ticks_per_second=args.speed,
    )
    display.run(fps=args.fps)


if __name__ == "__main__":
    main()
