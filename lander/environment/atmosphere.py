"""Exponential Mars atmosphere model.

Density falls off exponentially with a single scale height and is cut
to zero above the exosphere and below the surface:

    rho(h) = RHO_SURFACE * exp(-h / SCALE_HEIGHT),  0 <= h <= EXOSPHERE

Example:
    >>> from lander.environment import MarsAtmosphere
    >>>
    >>> atm = MarsAtmosphere()
    >>> rho = atm.density(10000.0)  # kg/m^3
"""

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.environment.gravity import MARS_RADIUS

# =============================================================================
# Constants
# =============================================================================

RHO_SURFACE = 0.017  # Surface density [kg/m^3]
SCALE_HEIGHT = 11000.0  # [m]
EXOSPHERE = 200000.0  # Top of the modelled atmosphere [m]


# =============================================================================
# Atmosphere Model
# =============================================================================


@beartype
class MarsAtmosphere:
    """Isothermal exponential atmosphere.

    Example:
        >>> atm = MarsAtmosphere()
        >>> rho = atm.density(0.0)  # Surface density
        >>> rho = atm.density_at(state.position)
    """

    def __init__(
        self,
        surface_density: float = RHO_SURFACE,
        scale_height: float = SCALE_HEIGHT,
        exosphere: float = EXOSPHERE,
        planet_radius: float = MARS_RADIUS,
    ) -> None:
        """Initialize atmosphere model.

        Args:
            surface_density: Density at zero altitude [kg/m^3]
            scale_height: Exponential scale height [m]
            exosphere: Altitude above which density is zero [m]
            planet_radius: Radius used to convert position to altitude [m]
        """
        self.surface_density = surface_density
        self.scale_height = scale_height
        self.exosphere = exosphere
        self.planet_radius = planet_radius

    @beartype
    def density(self, altitude: float) -> float:
        """Get density at altitude.

        Args:
            altitude: Height above the surface [m]

        Returns:
            Density [kg/m^3]
        """
        if altitude > self.exosphere or altitude < 0.0:
            return 0.0
        return float(self.surface_density * np.exp(-altitude / self.scale_height))

    @beartype
    def density_at(self, position: NDArray[np.float64]) -> float:
        """Get density at a planet-centred position [kg/m^3]."""
        return self.density(float(np.linalg.norm(position)) - self.planet_radius)

    @beartype
    def dynamic_pressure(self, altitude: float, velocity: float) -> float:
        """Get dynamic pressure (q = 0.5 * rho * v^2) [Pa]."""
        return 0.5 * self.density(altitude) * velocity ** 2

    @beartype
    def profile(
        self,
        altitudes: NDArray[np.float64] | list[float],
    ) -> dict[str, NDArray[np.float64]]:
        """Get density over a range of altitudes."""
        altitudes = np.asarray(altitudes, dtype=np.float64)

        return {
            "altitude": altitudes,
            "density": np.array([self.density(float(h)) for h in altitudes]),
        }
