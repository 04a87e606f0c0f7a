"""Shared fixtures for lander tests."""

import numpy as np
import pytest

from lander.dynamics.state import LanderState
from lander.environment.gravity import MARS_RADIUS


class StubEnvironment:
    """Deterministic environment with fixed density, thrust and safety answer."""

    def __init__(self, density=0.0, thrust=None, safe=True):
        self.density = density
        self.thrust = np.zeros(3) if thrust is None else np.asarray(thrust, dtype=np.float64)
        self.safe = safe
        self.safety_checks = 0
        self.stabilize_calls = 0

    def atmospheric_density(self, position):
        return self.density

    def thrust_wrt_world(self, state):
        return self.thrust.copy()

    def safe_to_deploy_parachute(self, state):
        self.safety_checks += 1
        return self.safe

    def attitude_stabilization(self, state):
        self.stabilize_calls += 1


@pytest.fixture
def vacuum():
    """Environment with no atmosphere and no thrust."""
    return StubEnvironment()


@pytest.fixture
def low_state():
    """Lander at rest 5 km above the surface on the -Y axis."""
    return LanderState(
        position=np.array([0.0, -(MARS_RADIUS + 5000.0), 0.0]),
        velocity=np.zeros(3),
        orientation=np.zeros(3),
    )
