"""
Command-line driver: build a swarm, run it, print the final state.
"""

import sys
from typing import List, Optional

from loguru import logger

from glowswarm.config import SwarmConfig
from glowswarm.core.swarm import GlowwormSwarm

REPORT_HEADER = "Final positions and luminosities:"


def run_simulation(config: SwarmConfig) -> GlowwormSwarm:
    """Initialize a swarm from ``config`` and run it for ``config.iterations`` steps."""
    swarm = GlowwormSwarm(
        perception_radius=config.perception_radius,
        attraction_factor=config.attraction_factor,
        random_motion_factor=config.random_motion_factor,
        update_mode=config.update_mode,
        random_seed=config.seed,
        record_history=False,
    )
    swarm.initialize(
        swarm_size=config.swarm_size,
        dimensions=config.dimensions,
        min_position=config.min_position,
        max_position=config.max_position,
        min_luminosity=config.min_luminosity,
        max_luminosity=config.max_luminosity,
    )
    swarm.run(config.iterations)
    stats = swarm.get_swarm_statistics()
    logger.info(
        f"finished after {stats['iteration']} iterations: "
        f"luminosity {stats['luminosity_stats']}, "
        f"mean neighbors {stats['mean_neighbor_count']:.2f}, "
        f"brightest {stats['brightest_glowworm']}, "
        f"diversity {stats['diversity']:.4f}"
    )
    return swarm


def format_report(swarm: GlowwormSwarm) -> List[str]:
    """One header line, then one line per glowworm in population order."""
    lines = [REPORT_HEADER]
    for glowworm in swarm.glowworms:
        lines.append(
            f"Position: {glowworm.position}, Luminosity: {glowworm.luminosity}"
        )
    return lines


def main(config: Optional[SwarmConfig] = None) -> int:
    if config is None:
        config = SwarmConfig.from_env()

    swarm = run_simulation(config)
    for line in format_report(swarm):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
