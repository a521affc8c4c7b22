"""
Exceptions raised by the glowworm swarm.

The simulation trusts nothing the caller hands it at initialization time:
bad sizes and inverted bounds are rejected up front instead of producing
an empty or nonsensical population.
"""


class GlowswarmError(Exception):
    """Base class for all glowswarm errors."""


class InvalidParameter(GlowswarmError, ValueError):
    """A size, bound pair or radius is outside its valid range."""


class DimensionMismatch(GlowswarmError, ValueError):
    """Two glowworms with different dimensionality were compared."""

    def __init__(self, left: int, right: int):
        super().__init__(
            f"Cannot compare positions of dimension {left} and {right}"
        )
        self.left = left
        self.right = right


def check_bounds(name: str, lower: float, upper: float) -> None:
    """Raise InvalidParameter if lower > upper."""
    if lower > upper:
        raise InvalidParameter(f"{name} bounds are inverted: min={lower} > max={upper}")


def check_positive(name: str, value: int) -> None:
    """Raise InvalidParameter if value < 1."""
    if value < 1:
        raise InvalidParameter(f"{name} must be at least 1, got {value}")
