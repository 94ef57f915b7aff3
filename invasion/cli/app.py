from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from pydantic import ValidationError

from invasion.cli.models import RunConfig, SimulationReport
from invasion.common.config import settings
from invasion.common.errors import MapLoadError
from invasion.engine.engine import SimulationEngine
from invasion.persist.mapfile import load_map

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invasion-sim",
        description="Alien invasion simulator: aliens wander a city map and destroy "
        "every city in which two of them meet.",
    )
    parser.add_argument(
        "-f",
        "--filepath",
        default=settings.map_path,
        help="map file the simulation runs on (default: %(default)s)",
    )
    parser.add_argument(
        "-a",
        "--aliens",
        type=int,
        default=settings.num_aliens,
        help="number of alien invaders (default: %(default)s)",
    )
    parser.add_argument(
        "-s",
        "--steps",
        type=int,
        default=settings.num_steps,
        help="maximum number of steps, the scatter counts as step 1 (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=settings.random_seed, help="random seed")
    parser.add_argument("--json", action="store_true", help="print a JSON report")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def simulate(config: RunConfig) -> SimulationReport:
    graph = load_map(config.map_path)
    initial_map = graph.render()
    engine = SimulationEngine(graph, seed=config.seed)
    engine.run(config.aliens, config.steps)
    return SimulationReport.from_engine(config, initial_map, engine)


def write_report(report: SimulationReport, out: TextIO) -> None:
    blocks = [
        report.initial_map,
        [record.message for record in report.destructions],
        report.final_map,
    ]
    out.write("\n\n".join("\n".join(block) for block in blocks if block))
    out.write("\n")


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    out = out if out is not None else sys.stdout
    try:
        config = RunConfig(
            map_path=args.filepath,
            aliens=args.aliens,
            steps=args.steps,
            seed=args.seed,
        )
    except ValidationError as exc:
        logger.error("Invalid run configuration: %s", exc)
        return 1
    try:
        report = simulate(config)
    except MapLoadError as exc:
        logger.error("Failed to load map: %s", exc)
        return 1
    if args.json:
        out.write(report.model_dump_json(indent=2))
        out.write("\n")
    else:
        write_report(report, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
