"""Fixed-step equations of motion for the lander.

Each tick computes the accelerations from the pre-update state,

    a = g - a_drag_lander + a_thrust  [- a_drag_chute when DEPLOYED]

then takes one explicit Euler step, updating position from the old
velocity before updating velocity:

    r' = r + dt * v
    v' = v + dt * a

The autopilot and attitude stabilization run afterwards on the updated
state, so their effect on throttle and orientation is felt from the next
tick's force computation.

Example:
    >>> from lander.dynamics import numerical_dynamics
    >>> from lander.environment import MarsEnvironment
    >>> from lander.scenarios import initialize_simulation
    >>>
    >>> state = initialize_simulation(1)
    >>> env = MarsEnvironment()
    >>> for _ in range(100):
    ...     numerical_dynamics(state, env)
"""

import logging
from dataclasses import dataclass

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.dynamics.state import LanderState, ParachuteStatus, normalize
from lander.environment.base import LanderEnvironment
from lander.environment.gravity import Gravity
from lander.gnc.control.autopilot import DEFAULT_GAINS, AutopilotGains, autopilot
from lander.vehicle.parameters import DEFAULT_LANDER, LanderParameters

logger = logging.getLogger(__name__)

_default_gravity = Gravity()


# =============================================================================
# Forces
# =============================================================================


@beartype
@dataclass(frozen=True)
class AccelerationBreakdown:
    """Per-term accelerations for one tick [m/s^2].

    Drag terms are stored with the sign of the velocity; they are
    subtracted when forming `total`.
    """
    gravity: NDArray[np.float64]
    drag_lander: NDArray[np.float64]
    drag_chute: NDArray[np.float64]
    thrust: NDArray[np.float64]
    total: NDArray[np.float64]
    mass: float


@beartype
def lander_mass(fuel: float | int, vehicle: LanderParameters = DEFAULT_LANDER) -> float:
    """Current total mass; fuel contributes linearly [kg]."""
    return vehicle.mass(float(fuel))


@beartype
def resolve_vehicle(environment: LanderEnvironment) -> LanderParameters:
    """Vehicle the environment was built for, or the default lander."""
    vehicle = getattr(environment, "vehicle", None)
    return vehicle if isinstance(vehicle, LanderParameters) else DEFAULT_LANDER


@beartype
def quadratic_drag(
    density: float,
    drag_coef: float,
    area: float,
    velocity: NDArray[np.float64],
    mass: float,
) -> NDArray[np.float64]:
    """Quadratic drag acceleration along the velocity direction.

    Zero at zero speed.
    """
    speed = float(np.linalg.norm(velocity))
    return 0.5 * density * drag_coef * area * speed * speed * normalize(velocity) / mass


@beartype
def compute_accelerations(
    state: LanderState,
    environment: LanderEnvironment,
    vehicle: LanderParameters | None = None,
    gravity: Gravity | None = None,
) -> AccelerationBreakdown:
    """Compute all accelerations acting on the lander.

    Args:
        state: Current (pre-update) lander state
        environment: Density, thrust and safety models
        vehicle: Lander parameters; taken from `environment.vehicle` when omitted
        gravity: Gravity model (defaults to Mars point mass)

    Returns:
        Breakdown of each term and the total
    """
    vehicle = vehicle or resolve_vehicle(environment)
    gravity = gravity or _default_gravity
    mass = lander_mass(state.fuel, vehicle)
    density = environment.atmospheric_density(state.position)

    gravity_acc = gravity.acceleration(state.position)
    drag_lander = quadratic_drag(
        density, vehicle.drag_coef_lander, vehicle.lander_drag_area, state.velocity, mass,
    )
    thrust_acc = environment.thrust_wrt_world(state) / mass
    drag_chute = quadratic_drag(
        density, vehicle.drag_coef_chute, vehicle.chute_drag_area, state.velocity, mass,
    )

    total = gravity_acc - drag_lander + thrust_acc
    if state.parachute_status is ParachuteStatus.DEPLOYED:
        total = total - drag_chute

    return AccelerationBreakdown(
        gravity=gravity_acc,
        drag_lander=drag_lander,
        drag_chute=drag_chute,
        thrust=thrust_acc,
        total=total,
        mass=mass,
    )


# =============================================================================
# Integration
# =============================================================================


@beartype
def numerical_dynamics(
    state: LanderState,
    environment: LanderEnvironment,
    vehicle: LanderParameters | None = None,
    gains: AutopilotGains = DEFAULT_GAINS,
    gravity: Gravity | None = None,
) -> AccelerationBreakdown:
    """Advance the lander state by exactly one `delta_t`.

    Args:
        state: Lander state, updated in place
        environment: Density, thrust, safety and attitude models
        vehicle: Lander parameters; taken from `environment.vehicle` when omitted
        gains: Autopilot gains, used when `state.autopilot_enabled`
        gravity: Gravity model (defaults to Mars point mass)

    Returns:
        Accelerations applied during this tick
    """
    accelerations = compute_accelerations(state, environment, vehicle, gravity)
    dt = state.delta_t

    # Position from the old velocity, then velocity from the new acceleration
    state.position = state.position + dt * state.velocity
    state.velocity = state.velocity + dt * accelerations.total
    state.time = state.time + dt

    if state.autopilot_enabled:
        autopilot(state, environment, gains)

    if state.stabilized_attitude:
        environment.attitude_stabilization(state)

    logger.debug(
        "t=%.1f r=%.1f v=%.2f throttle=%.3f chute=%s",
        state.time, state.radius, state.speed, state.throttle, state.parachute_status.name,
    )

    return accelerations
