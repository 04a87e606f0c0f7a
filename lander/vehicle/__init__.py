"""Lander vehicle parameters."""

from lander.vehicle.parameters import (
    DEFAULT_LANDER,
    LanderParameters,
)

__all__ = [
    "DEFAULT_LANDER",
    "LanderParameters",
]
