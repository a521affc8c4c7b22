"""
Configuration for glowswarm runs.

This module contains the default run parameters and the validated
``SwarmConfig`` model the driver is built from.
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, model_validator

from glowswarm.core.swarm import UpdateMode

# Population
DEFAULT_SWARM_SIZE = 10
DEFAULT_DIMENSIONS = 2

# Initial bounds
DEFAULT_MIN_POSITION = -10.0
DEFAULT_MAX_POSITION = 10.0
DEFAULT_MIN_LUMINOSITY = 0.0
DEFAULT_MAX_LUMINOSITY = 1.0

# Dynamics
DEFAULT_PERCEPTION_RADIUS = 2.0
DEFAULT_ATTRACTION_FACTOR = 0.1
DEFAULT_RANDOM_MOTION_FACTOR = 0.1
DEFAULT_ITERATIONS = 100

ENV_PREFIX = "GLOWSWARM_"


class SwarmConfig(BaseModel):
    swarm_size: int = Field(DEFAULT_SWARM_SIZE, ge=1)
    dimensions: int = Field(DEFAULT_DIMENSIONS, ge=1)
    min_position: float = DEFAULT_MIN_POSITION
    max_position: float = DEFAULT_MAX_POSITION
    min_luminosity: float = DEFAULT_MIN_LUMINOSITY
    max_luminosity: float = DEFAULT_MAX_LUMINOSITY
    perception_radius: float = Field(DEFAULT_PERCEPTION_RADIUS, ge=0.0)
    attraction_factor: float = DEFAULT_ATTRACTION_FACTOR
    random_motion_factor: float = DEFAULT_RANDOM_MOTION_FACTOR
    iterations: int = Field(DEFAULT_ITERATIONS, ge=0)
    seed: Optional[int] = Field(None, ge=0)
    update_mode: UpdateMode = UpdateMode.SEQUENTIAL

    @model_validator(mode="after")
    def validate_bounds(self):
        """Both bound pairs must be ordered min <= max."""
        if self.min_position > self.max_position:
            raise ValueError("min_position must not exceed max_position")
        if self.min_luminosity > self.max_luminosity:
            raise ValueError("min_luminosity must not exceed max_luminosity")
        return self

    @classmethod
    def from_env(cls) -> "SwarmConfig":
        """
        Build a config from GLOWSWARM_* environment variables.

        Variables map onto field names, e.g. ``GLOWSWARM_SEED=42`` or
        ``GLOWSWARM_UPDATE_MODE=synchronous``. Unset fields keep their defaults.
        A ``.env`` file in the working directory is loaded first.
        """
        load_dotenv(find_dotenv(usecwd=True))
        overrides = {}
        for name in cls.model_fields:
            value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
            if value is not None and value != "":
                overrides[name] = value
        return cls(**overrides)
