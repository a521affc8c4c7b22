"""
Single glowworm agent.

A glowworm carries a position in the search space, a luminosity that grows
with local crowding, and the number of neighbors it saw during the most
recent update.
"""

import numbers
from typing import List, Sequence
import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator

from glowswarm.core.exceptions import (
    DimensionMismatch,
    check_bounds,
    check_positive,
)


class Glowworm(BaseModel):
    """Represents a single glowworm in the swarm."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    id: str
    position: List[float]
    luminosity: float
    neighbor_count: int = 0

    @field_validator("position", mode="before")
    @classmethod
    def validate_position(cls, v):
        """Accept positions as lists or numpy arrays."""
        if not isinstance(v, (list, tuple, np.ndarray)):
            raise ValueError("Position must be a list or numpy array")
        for x in v:
            if not isinstance(x, numbers.Real):
                raise ValueError(f"Position coordinates must be real numbers, got {x!r}")
        return [float(x) for x in v]

    @classmethod
    def initialize(
        cls,
        rng: np.random.Generator,
        dimensions: int,
        min_position: float,
        max_position: float,
        min_luminosity: float,
        max_luminosity: float,
        glowworm_id: str = "glowworm_0",
    ) -> "Glowworm":
        """
        Create a glowworm with a uniformly random position and luminosity.

        Args:
            rng: Random generator used for every draw
            dimensions: Length of the position vector
            min_position: Lower bound for each coordinate
            max_position: Upper bound for each coordinate
            min_luminosity: Lower bound for the starting luminosity
            max_luminosity: Upper bound for the starting luminosity
            glowworm_id: Identifier assigned to the new glowworm

        Returns:
            A glowworm with neighbor_count set to 0
        """
        check_positive("dimensions", dimensions)
        check_bounds("position", min_position, max_position)
        check_bounds("luminosity", min_luminosity, max_luminosity)

        position = rng.uniform(min_position, max_position, size=dimensions)
        luminosity = float(rng.uniform(min_luminosity, max_luminosity))

        return cls(
            id=glowworm_id,
            position=position,
            luminosity=luminosity,
            neighbor_count=0,
        )

    @property
    def dimensions(self) -> int:
        return len(self.position)

    @property
    def position_array(self) -> np.ndarray:
        """Get position as numpy array."""
        return np.array(self.position)

    def update_position(self, new_position: np.ndarray) -> None:
        """Update position from numpy array."""
        self.position = new_position.tolist()

    def distance_to(self, other: "Glowworm") -> float:
        """Euclidean distance between this glowworm and another."""
        if self.dimensions != other.dimensions:
            raise DimensionMismatch(self.dimensions, other.dimensions)
        return float(np.linalg.norm(self.position_array - other.position_array))

    def count_neighbors(
        self, glowworms: Sequence["Glowworm"], perception_radius: float
    ) -> int:
        """Count other glowworms strictly closer than the perception radius."""
        # identity, not equality: two glowworms on the same spot are still distinct
        return sum(
            1
            for other in glowworms
            if other is not self and self.distance_to(other) < perception_radius
        )

    def update_neighbor_count(
        self, glowworms: Sequence["Glowworm"], perception_radius: float
    ) -> int:
        """Recompute and store the neighbor count against the given population."""
        self.neighbor_count = self.count_neighbors(glowworms, perception_radius)
        return self.neighbor_count
