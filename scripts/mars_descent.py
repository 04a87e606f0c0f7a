#!/usr/bin/env python
"""Example: Autopilot descent to the Martian surface.

Runs one of the canned scenarios with the descent autopilot engaged and
prints a short flight summary:
1. Initialize the lander from a scenario slot
2. Let the autopilot manage throttle, parachute and attitude
3. Step until touchdown or the time limit

Usage:
    uv run python scripts/mars_descent.py [scenario_id]
"""

import logging
import sys

import numpy as np

from lander.scenarios import list_scenarios
from lander.simulation import FlightStatus, SimConfig, Simulator
from lander.vehicle import DEFAULT_LANDER


def run_descent(scenario_id: int = 1) -> None:
    """Fly a scenario with the autopilot enabled."""
    print("=" * 60)
    print("MARS LANDER DESCENT")
    print("=" * 60)

    print("\nScenarios:")
    for sid, description in list_scenarios():
        marker = "*" if sid == scenario_id else " "
        print(f" {marker} {sid}: {description}")

    print("\nVehicle:")
    print(f"  Full mass: {DEFAULT_LANDER.full_mass:.0f} kg")
    print(f"  Max thrust: {DEFAULT_LANDER.max_thrust:.0f} N")

    # =========================================================================
    # Fly
    # =========================================================================
    sim = Simulator.from_scenario(scenario_id, config=SimConfig(max_time=5000.0))
    sim.state.autopilot_enabled = True
    result = sim.run()

    # =========================================================================
    # Summary
    # =========================================================================
    print("\nResult:")
    print(f"  Status: {result.status.value}")
    print(f"  Flight time: {result.time[-1]:.1f} s")
    print(f"  Fuel remaining: {100 * result.fuel[-1]:.1f} %")
    print(f"  Peak speed: {np.max(result.speed):.1f} m/s")

    if result.status is not FlightStatus.FLYING:
        print(f"  Impact descent rate: {sim.impact_descent_rate:.2f} m/s")
        print(f"  Impact ground speed: {sim.impact_ground_speed:.2f} m/s")

    deployed = [
        t for t, status in zip(result.time, result.parachute_status)
        if status.name == "DEPLOYED"
    ]
    if deployed:
        print(f"  Parachute deployed at t={deployed[0]:.1f} s")


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_descent(int(sys.argv[1]) if len(sys.argv) > 1 else 1)
