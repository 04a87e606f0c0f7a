"""Simulation module for lander descent.

Provides the step-driven simulator that owns one lander state and adds
fuel burn, parachute failure and touchdown detection around the
integrator.

Example:
    >>> from lander.simulation import Simulator
    >>>
    >>> sim = Simulator.from_scenario(1)
    >>> while sim.altitude > 0:
    ...     sim.step()
"""

from lander.simulation.simulator import (
    FlightStatus,
    SimConfig,
    SimulationResult,
    Simulator,
)

__all__ = [
    "FlightStatus",
    "SimConfig",
    "SimulationResult",
    "Simulator",
]
