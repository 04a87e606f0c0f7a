"""Default Mars environment for the lander.

Bundles the atmosphere, engine, parachute envelope and attitude hold
behind the `LanderEnvironment` interface consumed by the integrator.

Example:
    >>> from lander.environment import MarsEnvironment
    >>>
    >>> env = MarsEnvironment()
    >>> numerical_dynamics(state, env)
"""

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.dynamics.state import LanderState
from lander.environment.atmosphere import EXOSPHERE, MarsAtmosphere
from lander.environment.gravity import MARS_RADIUS
from lander.gnc.control.attitude import attitude_stabilization
from lander.propulsion.throttle_model import ThrottleModel
from lander.vehicle.parameters import LanderParameters


@beartype
class MarsEnvironment:
    """Mars atmosphere, descent engine and parachute models.

    Example:
        >>> env = MarsEnvironment(vehicle=LanderParameters(engine_lag=0.2))
        >>> rho = env.atmospheric_density(state.position)
        >>> thrust = env.thrust_wrt_world(state)
    """

    def __init__(
        self,
        vehicle: LanderParameters | None = None,
        atmosphere: MarsAtmosphere | None = None,
        engine: ThrottleModel | None = None,
    ) -> None:
        """Initialize environment.

        Args:
            vehicle: Lander parameters
            atmosphere: Atmosphere model
            engine: Throttle model; built from `vehicle` when omitted
        """
        self.vehicle = vehicle or LanderParameters()
        self.atmosphere = atmosphere or MarsAtmosphere()
        self.engine = engine or ThrottleModel(self.vehicle)

    @beartype
    def atmospheric_density(self, position: NDArray[np.float64]) -> float:
        """Local air density [kg/m^3]."""
        return self.atmosphere.density_at(position)

    @beartype
    def thrust_wrt_world(self, state: LanderState) -> NDArray[np.float64]:
        """Engine thrust in the world frame [N]."""
        return self.engine.thrust_wrt_world(state)

    @beartype
    def safe_to_deploy_parachute(self, state: LanderState) -> bool:
        """Check the chute load and deployment speed limits.

        Unsafe when the drag load would exceed `max_parachute_drag`, or
        when moving faster than `max_parachute_speed` inside the atmosphere.
        """
        speed = state.speed
        density = self.atmospheric_density(state.position)
        load = self.vehicle.parachute_load(density, speed)
        altitude = state.radius - MARS_RADIUS

        if load > self.vehicle.max_parachute_drag:
            return False
        if speed > self.vehicle.max_parachute_speed and altitude < EXOSPHERE:
            return False
        return True

    @beartype
    def attitude_stabilization(self, state: LanderState) -> None:
        """Point the thrust axis radially outward."""
        attitude_stabilization(state)
