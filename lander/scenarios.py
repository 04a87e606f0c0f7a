"""Canned initial conditions for the lander simulation.

Ten scenario slots exist; 0-6 carry initial conditions and 7-9 are
reserved. Reserved slots are present in `SCENARIOS` with a value of
None so callers can check for them explicitly.

Example:
    >>> from lander.scenarios import initialize_simulation, list_scenarios
    >>>
    >>> for scenario_id, description in list_scenarios():
    ...     print(scenario_id, description)
    >>> state = initialize_simulation(1)  # descent from 10 km
"""

import logging
from dataclasses import dataclass

import numpy as np
from beartype import beartype

from lander.dynamics.state import LanderState, ParachuteStatus
from lander.environment.atmosphere import EXOSPHERE
from lander.environment.gravity import MARS_RADIUS
from lander.vehicle.parameters import DEFAULT_LANDER

logger = logging.getLogger(__name__)

N_SCENARIOS = 10
DEFAULT_TIME_STEP = 0.1

# =============================================================================
# Scenario Configuration
# =============================================================================


@beartype
@dataclass(frozen=True)
class ScenarioConfig:
    """Initial conditions and control flags for one scenario.

    Attributes:
        description: Human-readable summary
        position: Planet-centred position [m]
        velocity: Velocity [m/s]
        orientation: xyz Euler angles [deg]
        stabilized_attitude: Start with attitude hold on
        autopilot_enabled: Start with the autopilot on
        delta_t: Integration time step [s]
    """
    description: str
    position: tuple[float, float, float]
    velocity: tuple[float, float, float]
    orientation: tuple[float, float, float]
    stabilized_attitude: bool = False
    autopilot_enabled: bool = False
    delta_t: float = DEFAULT_TIME_STEP

    def create_state(self, scenario_id: int | None = None) -> LanderState:
        """Build a fresh lander state with full tanks and the chute stowed."""
        return LanderState(
            position=np.array(self.position, dtype=np.float64),
            velocity=np.array(self.velocity, dtype=np.float64),
            orientation=np.array(self.orientation, dtype=np.float64),
            fuel=1.0,
            throttle=0.0,
            parachute_status=ParachuteStatus.NOT_DEPLOYED,
            stabilized_attitude=self.stabilized_attitude,
            autopilot_enabled=self.autopilot_enabled,
            delta_t=self.delta_t,
            scenario_id=scenario_id,
        )


# =============================================================================
# Scenario Table
# =============================================================================


SCENARIOS: dict[int, ScenarioConfig | None] = {
    0: ScenarioConfig(
        description="circular orbit",
        position=(1.2 * MARS_RADIUS, 0.0, 0.0),
        velocity=(0.0, -3247.087385863725, 0.0),
        orientation=(0.0, 90.0, 0.0),
    ),
    1: ScenarioConfig(
        description="descent from 10km",
        position=(0.0, -(MARS_RADIUS + 10000.0), 0.0),
        velocity=(0.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
        stabilized_attitude=True,
    ),
    2: ScenarioConfig(
        description="elliptical orbit, thrust changes orbital plane",
        position=(0.0, 0.0, 1.2 * MARS_RADIUS),
        velocity=(3500.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
    ),
    3: ScenarioConfig(
        description="polar launch at escape velocity (but drag prevents escape)",
        position=(0.0, 0.0, MARS_RADIUS + DEFAULT_LANDER.size / 2.0),
        velocity=(0.0, 0.0, 5027.0),
        orientation=(0.0, 0.0, 0.0),
    ),
    4: ScenarioConfig(
        description="elliptical orbit that clips the atmosphere and decays",
        position=(0.0, 0.0, MARS_RADIUS + 100000.0),
        velocity=(4000.0, 0.0, 0.0),
        orientation=(0.0, 90.0, 0.0),
    ),
    5: ScenarioConfig(
        description="descent from 200km",
        position=(0.0, -(MARS_RADIUS + EXOSPHERE), 0.0),
        velocity=(0.0, 0.0, 0.0),
        orientation=(0.0, 0.0, 90.0),
        stabilized_attitude=True,
    ),
    # Synchronous orbit: r = (G*M * (MARS_DAY / 2pi)^2)^(1/3). The velocity is
    # kept as the literal initial condition rather than 2*pi*r / MARS_DAY.
    6: ScenarioConfig(
        description="geostationary orbit",
        position=(20429635.87, 0.0, 0.0),
        velocity=(0.0, 1448.025, 0.0),
        orientation=(0.0, 90.0, 0.0),
    ),
    7: None,
    8: None,
    9: None,
}


# =============================================================================
# Lookup
# =============================================================================


@beartype
def get_scenario(scenario_id: int) -> ScenarioConfig | None:
    """Get the configuration for a scenario, or None if the slot is empty."""
    return SCENARIOS.get(scenario_id)


@beartype
def scenario_description(scenario_id: int) -> str:
    """Descriptive string for a scenario; empty for reserved slots."""
    if not 0 <= scenario_id < N_SCENARIOS:
        raise ValueError(f"Scenario id must be in [0, {N_SCENARIOS - 1}], got {scenario_id}")
    config = SCENARIOS[scenario_id]
    return config.description if config is not None else ""


@beartype
def list_scenarios() -> list[tuple[int, str]]:
    """List (id, description) for every populated scenario."""
    return [
        (scenario_id, config.description)
        for scenario_id, config in SCENARIOS.items()
        if config is not None
    ]


@beartype
def initialize_simulation(scenario_id: int) -> LanderState:
    """Create the initial lander state for a scenario.

    Args:
        scenario_id: Scenario slot in [0, 9]

    Returns:
        Freshly initialized state

    Raises:
        ValueError: If the id is out of range or the slot is reserved
    """
    if not 0 <= scenario_id < N_SCENARIOS:
        raise ValueError(f"Scenario id must be in [0, {N_SCENARIOS - 1}], got {scenario_id}")

    config = SCENARIOS[scenario_id]
    if config is None:
        raise ValueError(f"Scenario {scenario_id} is reserved and has no initial conditions")

    logger.info("Initializing scenario %d: %s", scenario_id, config.description)
    return config.create_state(scenario_id)
