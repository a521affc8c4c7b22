import numpy as np
import pytest

from glowswarm.core.agent import Glowworm
from glowswarm.core.swarm import GlowwormSwarm


@pytest.fixture
def rng():
    """Seeded generator so draws are reproducible."""
    return np.random.default_rng(42)


@pytest.fixture
def make_glowworm():
    """Factory for hand-placed glowworms."""

    def _make(position, luminosity=0.5, glowworm_id="glowworm_0"):
        return Glowworm(id=glowworm_id, position=position, luminosity=luminosity)

    return _make


@pytest.fixture
def three_glowworms(make_glowworm):
    """Glowworms at [0,0], [1,0] and [5,0]."""
    return [
        make_glowworm([0.0, 0.0], glowworm_id="a"),
        make_glowworm([1.0, 0.0], glowworm_id="b"),
        make_glowworm([5.0, 0.0], glowworm_id="c"),
    ]


@pytest.fixture
def default_swarm():
    """Swarm with the default run parameters, initialized with seed 42."""
    swarm = GlowwormSwarm(
        perception_radius=2.0,
        attraction_factor=0.1,
        random_motion_factor=0.1,
        random_seed=42,
    )
    swarm.initialize(
        swarm_size=10,
        dimensions=2,
        min_position=-10.0,
        max_position=10.0,
        min_luminosity=0.0,
        max_luminosity=1.0,
    )
    return swarm
