"""
Glowworm swarm simulation.

The swarm owns a fixed population of glowworms and three tuning parameters.
Each call to ``update`` walks the population once: a glowworm counts its
neighbors, brightens by ``attraction_factor`` per neighbor, then diffuses by
a scaled standard-normal step in every coordinate.

Movement is pure random diffusion. Glowworms do not move toward brighter
neighbors and the perception radius never changes.
"""

from enum import Enum
from typing import List, Dict, Any, Optional
import numpy as np
from pydantic import BaseModel, ConfigDict
from loguru import logger

from glowswarm.core.agent import Glowworm
from glowswarm.core.exceptions import InvalidParameter, check_bounds, check_positive


class UpdateMode(Enum):
    """How a single update step reads the population."""

    # each glowworm sees positions already moved earlier in the same pass
    SEQUENTIAL = "sequential"
    # every neighbor count is taken from the positions at the start of the pass
    SYNCHRONOUS = "synchronous"


class SwarmState(BaseModel):
    """Represents the current state of the entire swarm."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    glowworms: List[Glowworm]
    iteration: int = 0

    @property
    def positions(self) -> np.ndarray:
        """Get all positions as a (swarm_size, dimensions) array."""
        return np.array([g.position for g in self.glowworms])

    @property
    def luminosities(self) -> np.ndarray:
        return np.array([g.luminosity for g in self.glowworms])


class GlowwormSwarm:
    """
    A fixed-size population of glowworms sharing perception and motion parameters.

    The population size never changes after ``initialize``: no glowworm is
    added or removed, and positions are not clamped back into the initial
    bounds after they drift.
    """

    def __init__(
        self,
        perception_radius: float,
        attraction_factor: float,
        random_motion_factor: float,
        update_mode: UpdateMode = UpdateMode.SEQUENTIAL,
        random_seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        record_history: bool = True,
    ):
        """
        Configure the swarm. Call ``initialize`` to create the population.

        Args:
            perception_radius: Distance below which another glowworm is a neighbor
            attraction_factor: Luminosity gained per neighbor per update
            random_motion_factor: Scale of the per-coordinate diffusion noise
            update_mode: Sequential in-place pass or synchronous two-phase pass
            random_seed: Seed for a fresh generator when ``rng`` is not given
            rng: Generator to draw from; takes precedence over ``random_seed``
            record_history: Keep a deep copy of the state after every step
        """
        if perception_radius < 0:
            raise InvalidParameter(
                f"perception_radius must be non-negative, got {perception_radius}"
            )

        self.perception_radius = perception_radius
        self.attraction_factor = attraction_factor
        self.random_motion_factor = random_motion_factor
        self.update_mode = update_mode
        self.rng = rng if rng is not None else np.random.default_rng(random_seed)
        self.record_history = record_history

        self.history: List[SwarmState] = []
        self.swarm_state: Optional[SwarmState] = None

    @property
    def glowworms(self) -> List[Glowworm]:
        if self.swarm_state is None:
            return []
        return self.swarm_state.glowworms

    def initialize(
        self,
        swarm_size: int,
        dimensions: int,
        min_position: float,
        max_position: float,
        min_luminosity: float,
        max_luminosity: float,
    ) -> SwarmState:
        """
        Create ``swarm_size`` independently initialized glowworms.

        Returns:
            Initial swarm state
        """
        check_positive("swarm_size", swarm_size)
        check_positive("dimensions", dimensions)
        check_bounds("position", min_position, max_position)
        check_bounds("luminosity", min_luminosity, max_luminosity)

        logger.info(
            f"init swarm of {swarm_size} glowworms in {dimensions}D, "
            f"position bounds [{min_position}, {max_position}], "
            f"luminosity bounds [{min_luminosity}, {max_luminosity}]"
        )

        glowworms = [
            Glowworm.initialize(
                self.rng,
                dimensions,
                min_position,
                max_position,
                min_luminosity,
                max_luminosity,
                glowworm_id=f"glowworm_{i}",
            )
            for i in range(swarm_size)
        ]

        self.swarm_state = SwarmState(glowworms=glowworms, iteration=0)
        self.history = []
        self._record()
        return self.swarm_state

    def update(self) -> SwarmState:
        """
        Perform one simulation step, mutating every glowworm.

        Returns:
            Updated swarm state
        """
        if self.swarm_state is None:
            raise RuntimeError("Swarm must be initialized before update()")

        if self.update_mode == UpdateMode.SYNCHRONOUS:
            self._update_synchronous()
        else:
            self._update_sequential()

        self.swarm_state.iteration += 1
        logger.debug(
            f"iteration {self.swarm_state.iteration}: "
            f"mean luminosity {float(np.mean(self.swarm_state.luminosities)):.4f}"
        )

        self._record()
        return self.swarm_state

    def run(self, iterations: int) -> SwarmState:
        """Call ``update`` ``iterations`` times and return the final state."""
        logger.info(f"running {iterations} iterations ({self.update_mode.value})")
        for _ in range(iterations):
            self.update()
        return self.swarm_state

    def _update_sequential(self) -> None:
        glowworms = self.swarm_state.glowworms
        for glowworm in glowworms:
            glowworm.update_neighbor_count(glowworms, self.perception_radius)
            self._brighten(glowworm)
            self._diffuse(glowworm)

    def _update_synchronous(self) -> None:
        glowworms = self.swarm_state.glowworms
        for glowworm in glowworms:
            glowworm.update_neighbor_count(glowworms, self.perception_radius)
        for glowworm in glowworms:
            self._brighten(glowworm)
            self._diffuse(glowworm)

    def _brighten(self, glowworm: Glowworm) -> None:
        glowworm.luminosity += self.attraction_factor * glowworm.neighbor_count

    def _diffuse(self, glowworm: Glowworm) -> None:
        noise = self.rng.standard_normal(glowworm.dimensions)
        glowworm.update_position(
            glowworm.position_array + noise * self.random_motion_factor
        )

    def _record(self) -> None:
        if self.record_history:
            self.history.append(self.swarm_state.model_copy(deep=True))

    def get_glowworm_by_id(self, glowworm_id: str) -> Optional[Glowworm]:
        """Get glowworm by ID."""
        for glowworm in self.glowworms:
            if glowworm.id == glowworm_id:
                return glowworm
        return None

    def get_swarm_statistics(self) -> Dict[str, Any]:
        """Get current swarm statistics."""
        glowworms = self.glowworms
        if not glowworms:
            raise RuntimeError("Swarm must be initialized before computing statistics")

        luminosities = self.swarm_state.luminosities
        brightest = max(glowworms, key=lambda g: g.luminosity)

        return {
            "iteration": self.swarm_state.iteration,
            "swarm_size": len(glowworms),
            "luminosity_stats": {
                "mean": float(np.mean(luminosities)),
                "std": float(np.std(luminosities)),
                "min": float(np.min(luminosities)),
                "max": float(np.max(luminosities)),
            },
            "mean_neighbor_count": float(
                np.mean([g.neighbor_count for g in glowworms])
            ),
            "brightest_glowworm": brightest.id,
            "diversity": self._calculate_diversity(),
        }

    def _calculate_diversity(self) -> float:
        """Calculate swarm diversity (average distance between glowworms)."""
        glowworms = self.glowworms
        if len(glowworms) < 2:
            return 0.0

        distances = []
        for i in range(len(glowworms)):
            for j in range(i + 1, len(glowworms)):
                distances.append(glowworms[i].distance_to(glowworms[j]))

        return float(np.mean(distances))
