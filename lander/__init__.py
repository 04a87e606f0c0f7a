"""Lander - Mars lander descent simulation.

Advances a lander's position, velocity, orientation and fuel one fixed
time step at a time under gravity, body and parachute drag, and thrust,
with an optional descent autopilot.

Example:
    >>> from lander import Simulator, initialize_simulation
    >>>
    >>> sim = Simulator.from_scenario(1)
    >>> sim.state.autopilot_enabled = True
    >>> result = sim.run()
    >>> df = result.to_dataframe()
"""

__version__ = "0.1.0"

from lander.dynamics import (
    AccelerationBreakdown,
    LanderState,
    ParachuteStatus,
    compute_accelerations,
    numerical_dynamics,
)
from lander.environment import (
    Gravity,
    LanderEnvironment,
    MarsAtmosphere,
    MarsEnvironment,
)
from lander.gnc.control import (
    AutopilotGains,
    attitude_stabilization,
    autopilot,
    throttle_policy,
)
from lander.propulsion import ThrottleModel
from lander.scenarios import (
    SCENARIOS,
    ScenarioConfig,
    get_scenario,
    initialize_simulation,
    list_scenarios,
    scenario_description,
)
from lander.simulation import (
    FlightStatus,
    SimConfig,
    SimulationResult,
    Simulator,
)
from lander.vehicle import LanderParameters

__all__ = [
    # Dynamics
    "AccelerationBreakdown",
    "LanderState",
    "ParachuteStatus",
    "compute_accelerations",
    "numerical_dynamics",
    # Environment
    "Gravity",
    "LanderEnvironment",
    "MarsAtmosphere",
    "MarsEnvironment",
    # Control
    "AutopilotGains",
    "attitude_stabilization",
    "autopilot",
    "throttle_policy",
    # Vehicle
    "LanderParameters",
    "ThrottleModel",
    # Scenarios
    "SCENARIOS",
    "ScenarioConfig",
    "get_scenario",
    "initialize_simulation",
    "list_scenarios",
    "scenario_description",
    # Simulation
    "FlightStatus",
    "SimConfig",
    "SimulationResult",
    "Simulator",
]
