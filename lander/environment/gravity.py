"""Gravity model for Mars descent simulation.

Point-mass (inverse-square) gravity about the planet centre. The core
function is numba-compiled, matching the per-tick call rate of the
integrator.

Example:
    >>> from lander.environment import Gravity
    >>>
    >>> grav = Gravity()
    >>> g = grav.acceleration(np.array([MARS_RADIUS, 0.0, 0.0]))  # ~3.74 m/s^2 toward centre
"""

import numpy as np
from beartype import beartype
from numba import njit
from numpy.typing import NDArray

# =============================================================================
# Constants
# =============================================================================

GRAVITY: float = 6.673e-11  # Gravitational constant [m^3/(kg*s^2)]
MARS_MASS: float = 6.42e23  # [kg]
MARS_RADIUS: float = 3386000.0  # Mean radius [m]
MARS_DAY: float = 88642.65  # Sidereal rotation period [s]
MU_MARS: float = GRAVITY * MARS_MASS  # Gravitational parameter [m^3/s^2]


# =============================================================================
# Numba-Optimized Core Functions
# =============================================================================


@njit(cache=True, fastmath=True)
def _inverse_square_gravity(
    x: float, y: float, z: float,
    mu: float = MU_MARS,
) -> tuple[float, float, float]:
    """Numba-optimized point-mass gravity.

    g = -mu/r^2 * r_hat, zero at the origin.
    """
    r_sq = x*x + y*y + z*z
    if r_sq == 0.0:
        return (0.0, 0.0, 0.0)

    r = np.sqrt(r_sq)
    g_over_r = mu / (r_sq * r)

    return (-g_over_r * x, -g_over_r * y, -g_over_r * z)


# =============================================================================
# Gravity Class
# =============================================================================


@beartype
class Gravity:
    """Inverse-square gravity about the planet centre.

    Example:
        >>> grav = Gravity()
        >>> position = np.array([1.2 * MARS_RADIUS, 0.0, 0.0])
        >>> g = grav.acceleration(position)
    """

    def __init__(self, mu: float = MU_MARS) -> None:
        """Initialize gravity model.

        Args:
            mu: Gravitational parameter G*M [m^3/s^2]
        """
        self.mu = mu

    @beartype
    def acceleration(
        self,
        position: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        """Compute gravitational acceleration at position.

        Args:
            position: Planet-centred position [x, y, z] [m]

        Returns:
            Acceleration vector [ax, ay, az] [m/s^2]
        """
        x, y, z = float(position[0]), float(position[1]), float(position[2])
        gx, gy, gz = _inverse_square_gravity(x, y, z, self.mu)
        return np.array([gx, gy, gz])

    @beartype
    def magnitude(self, position: NDArray[np.float64]) -> float:
        """Get gravity magnitude at position [m/s^2]."""
        return float(np.linalg.norm(self.acceleration(position)))

    @beartype
    def potential(self, position: NDArray[np.float64]) -> float:
        """Get gravitational potential energy per unit mass [J/kg]."""
        r = float(np.linalg.norm(position))
        if r == 0.0:
            return float("-inf")
        return -self.mu / r


# =============================================================================
# Convenience Functions
# =============================================================================


@beartype
def surface_gravity(mu: float = MU_MARS, radius: float = MARS_RADIUS) -> float:
    """Gravity magnitude at the surface [m/s^2]."""
    return mu / (radius * radius)


@beartype
def circular_orbit_velocity(altitude: float) -> float:
    """Circular orbital velocity at altitude above the surface [m/s]."""
    r = MARS_RADIUS + altitude
    return float(np.sqrt(MU_MARS / r))


@beartype
def escape_velocity(altitude: float = 0.0) -> float:
    """Escape velocity at altitude above the surface [m/s]."""
    r = MARS_RADIUS + altitude
    return float(np.sqrt(2 * MU_MARS / r))


@beartype
def orbital_period(altitude: float) -> float:
    """Period of a circular orbit at altitude [s]."""
    r = MARS_RADIUS + altitude
    return float(2 * np.pi * np.sqrt(r ** 3 / MU_MARS))


@beartype
def synchronous_orbit_radius(period: float = MARS_DAY) -> float:
    """Radius of the circular orbit whose period equals `period` [m]."""
    return float((MU_MARS * (period / (2 * np.pi)) ** 2) ** (1.0 / 3.0))
