from __future__ import annotations

import argparse

from . import config
from .blocks import kind_from_name
from .logutil import log
from .sim import Simulation


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="blockworld",
        description="Procedural block world with chunk streaming and block break/place.",
    )
    parser.add_argument("--seed", type=int, default=config.SEED, help="Terrain noise seed.")
    parser.add_argument(
        "--radius",
        type=int,
        default=config.LOAD_RADIUS,
        help="Chunks to keep generated around the viewpoint.",
    )
    parser.add_argument("--select", default="grass", help="Initial block kind to place.")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Generate the spawn area, report world stats and exit without a window.",
    )
    ns = parser.parse_args(argv)

    if ns.radius < 0:
        parser.error("--radius must be >= 0")
    try:
        selected = kind_from_name(ns.select)
    except ValueError as e:
        parser.error(str(e))

    sim = Simulation(seed=ns.seed, load_radius=ns.radius)
    sim.select(selected)
    sim.start()

    if ns.headless:
        exposed = sum(1 for _ in sim.exposed())
        log(
            "WORLD",
            f"seed={ns.seed} chunks={len(sim.loaded_chunks)} blocks={len(sim.grid)} exposed={exposed}",
        )
        return 0

    from .viewer import run

    run(sim)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
