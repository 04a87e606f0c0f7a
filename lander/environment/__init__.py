"""Environment models for lander simulation.

Provides Mars gravity and atmosphere, the `LanderEnvironment` interface
consumed by the integrator, and its default Mars implementation.

Example:
    >>> from lander.environment import Gravity, MarsAtmosphere, MarsEnvironment
    >>>
    >>> atm = MarsAtmosphere()
    >>> rho = atm.density(altitude=10000.0)  # kg/m^3
    >>>
    >>> grav = Gravity()
    >>> g = grav.acceleration(position)  # m/s^2
"""

from lander.environment.gravity import (
    GRAVITY,
    MARS_DAY,
    MARS_MASS,
    MARS_RADIUS,
    MU_MARS,
    Gravity,
    circular_orbit_velocity,
    escape_velocity,
    orbital_period,
    surface_gravity,
    synchronous_orbit_radius,
)
from lander.environment.atmosphere import (
    EXOSPHERE,
    MarsAtmosphere,
)
from lander.environment.base import LanderEnvironment
from lander.environment.mars import MarsEnvironment

__all__ = [
    # Constants
    "GRAVITY",
    "MARS_MASS",
    "MARS_RADIUS",
    "MARS_DAY",
    "MU_MARS",
    "EXOSPHERE",
    # Models
    "Gravity",
    "MarsAtmosphere",
    "LanderEnvironment",
    "MarsEnvironment",
    # Orbit helpers
    "circular_orbit_velocity",
    "escape_velocity",
    "orbital_period",
    "surface_gravity",
    "synchronous_orbit_radius",
]
