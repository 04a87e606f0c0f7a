"""Unit tests for the descent autopilot."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from conftest import StubEnvironment
from lander.dynamics.state import LanderState, ParachuteStatus
from lander.environment.gravity import MARS_RADIUS
from lander.gnc.control import (
    AutopilotGains,
    autopilot,
    controller_output,
    throttle_policy,
)


def radial_state(altitude, radial_velocity=0.0, **kwargs):
    """State on the +Z axis moving radially."""
    return LanderState(
        position=np.array([0.0, 0.0, MARS_RADIUS + altitude]),
        velocity=np.array([0.0, 0.0, radial_velocity]),
        orientation=np.zeros(3),
        **kwargs,
    )


# =============================================================================
# Throttle Policy Tests
# =============================================================================


class TestThrottlePolicy:
    """Test the piecewise-linear Pout to throttle map."""

    def test_lower_boundary_is_zero(self):
        """Pout == -offset should route to zero throttle."""
        assert throttle_policy(-0.5) == 0.0

    def test_upper_boundary_is_full(self):
        """Pout == 1 - offset should give full throttle."""
        assert throttle_policy(0.5) == 1.0

    def test_linear_region(self):
        """Inside the band the slope is one about the offset."""
        assert_allclose(throttle_policy(0.0), 0.5)
        assert_allclose(throttle_policy(-0.25), 0.25)
        assert_allclose(throttle_policy(0.3), 0.8)

    def test_saturation(self):
        """Large outputs saturate at 0 and 1."""
        assert throttle_policy(-40.0) == 0.0
        assert throttle_policy(40.0) == 1.0

    def test_custom_offset(self):
        """Breakpoints move with the offset."""
        assert throttle_policy(-0.3, offset=0.3) == 0.0
        assert_allclose(throttle_policy(0.0, offset=0.3), 0.3)
        assert throttle_policy(0.7, offset=0.3) == 1.0


# =============================================================================
# Controller Output Tests
# =============================================================================


class TestControllerOutput:
    """Test the proportional control signal."""

    def test_default_gains(self):
        """Pout = 0.5 * -(0.5 + 0.02 h + descent_rate)."""
        assert_allclose(controller_output(1000.0, -10.0), 0.5 * -(0.5 + 20.0 - 10.0))

    def test_on_target_descent(self):
        """Descending at the target rate gives zero output."""
        altitude = 2500.0
        target = -(0.5 + 0.02 * altitude)
        assert_allclose(controller_output(altitude, target), 0.0, atol=1e-12)

    def test_throttle_always_clamped(self):
        """Throttle stays in [0, 1] across the flight envelope."""
        for altitude in np.linspace(0.0, 300000.0, 25):
            for rate in np.linspace(-5000.0, 5000.0, 25):
                pout = controller_output(float(altitude), float(rate))
                throttle = throttle_policy(pout)
                assert 0.0 <= throttle <= 1.0


# =============================================================================
# Autopilot Tests
# =============================================================================


class TestAutopilot:
    """Test autopilot side effects on the lander state."""

    def test_forces_attitude_hold(self):
        """Autopilot should always turn on attitude stabilization."""
        state = radial_state(50000.0, -100.0)
        autopilot(state, StubEnvironment(safe=False))
        assert state.stabilized_attitude

    def test_boundary_output_gives_zero_throttle(self):
        """Pout of exactly -0.5 should command zero throttle."""
        # 0.5 + 0.02 * 0 + 0.5 = 1 -> Pout = -0.5
        state = radial_state(0.0, 0.5, throttle=0.7)
        autopilot(state, StubEnvironment(safe=False))
        assert state.throttle == 0.0

    def test_fast_descent_full_throttle(self):
        """Descending far faster than the target gives full throttle."""
        state = radial_state(1000.0, -500.0)
        autopilot(state, StubEnvironment(safe=False))
        assert state.throttle == 1.0

    def test_linear_throttle(self):
        """Moderate error lands in the linear region."""
        # Pout = 0.5 * -(0.5 + 2 - 2.7) = 0.1
        state = radial_state(100.0, -2.7)
        autopilot(state, StubEnvironment(safe=False))
        assert_allclose(state.throttle, 0.6, rtol=1e-9)

    def test_deploys_at_threshold_altitude(self):
        """Exactly 150 km with a safe envelope should deploy the chute."""
        state = radial_state(150000.0)
        autopilot(state, StubEnvironment(safe=True))
        assert state.parachute_status is ParachuteStatus.DEPLOYED

    def test_no_deploy_above_threshold(self):
        """Above 150 km the chute stays stowed and safety is not queried."""
        env = StubEnvironment(safe=True)
        state = radial_state(150001.0)
        autopilot(state, env)
        assert state.parachute_status is ParachuteStatus.NOT_DEPLOYED
        assert env.safety_checks == 0

    def test_no_deploy_when_unsafe(self):
        """Unsafe envelope should keep the chute stowed."""
        state = radial_state(10000.0, -800.0)
        autopilot(state, StubEnvironment(safe=False))
        assert state.parachute_status is ParachuteStatus.NOT_DEPLOYED

    def test_deployment_is_sticky(self):
        """A deployed chute stays deployed even when no longer safe."""
        state = radial_state(10000.0, parachute_status=ParachuteStatus.DEPLOYED)
        autopilot(state, StubEnvironment(safe=False))
        assert state.parachute_status is ParachuteStatus.DEPLOYED

    def test_lost_chute_not_redeployed(self):
        """A lost chute cannot be deployed again."""
        state = radial_state(10000.0, parachute_status=ParachuteStatus.LOST)
        autopilot(state, StubEnvironment(safe=True))
        assert state.parachute_status is ParachuteStatus.LOST

    def test_only_control_fields_change(self):
        """Autopilot must not touch kinematics or fuel."""
        state = radial_state(8000.0, -60.0)
        before = state.copy()
        autopilot(state, StubEnvironment(safe=True))

        assert_allclose(state.position, before.position)
        assert_allclose(state.velocity, before.velocity)
        assert_allclose(state.orientation, before.orientation)
        assert state.fuel == before.fuel

    @pytest.mark.parametrize("altitude", [20000.0, 160000.0])
    def test_custom_deploy_altitude(self, altitude):
        """Deployment altitude follows the gains."""
        gains = AutopilotGains(parachute_altitude=100000.0)
        state = radial_state(altitude)
        autopilot(state, StubEnvironment(safe=True), gains)
        expected = altitude <= 100000.0
        assert (state.parachute_status is ParachuteStatus.DEPLOYED) == expected
