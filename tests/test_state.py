"""Unit tests for lander state and attitude utilities."""

import numpy as np
import pytest
from numpy.testing import assert_allclose

from lander.dynamics.state import (
    LanderState,
    ParachuteStatus,
    dcm_to_euler_xyz,
    euler_xyz_to_dcm,
    normalize,
)

# =============================================================================
# Vector Utilities
# =============================================================================


class TestNormalize:
    """Test unit-vector normalization."""

    def test_unit_length(self):
        """Normalized vector should have unit length."""
        v = normalize(np.array([3.0, 4.0, 12.0]))
        assert_allclose(np.linalg.norm(v), 1.0, atol=1e-12)
        assert_allclose(v, [3 / 13, 4 / 13, 12 / 13], atol=1e-12)

    def test_zero_vector(self):
        """Zero vector should normalize to zero, not NaN."""
        v = normalize(np.zeros(3))
        assert np.all(np.isfinite(v))
        assert_allclose(v, [0.0, 0.0, 0.0])


# =============================================================================
# Euler Angle Tests
# =============================================================================


class TestEulerAngles:
    """Test xyz Euler angle conversions."""

    def test_identity(self):
        """Zero angles should give the identity DCM."""
        assert_allclose(euler_xyz_to_dcm(np.zeros(3)), np.eye(3), atol=1e-12)

    def test_dcm_orthonormal(self):
        """DCM should be orthonormal with unit determinant."""
        dcm = euler_xyz_to_dcm(np.array([10.0, -35.0, 120.0]))
        assert_allclose(dcm @ dcm.T, np.eye(3), atol=1e-12)
        assert_allclose(np.linalg.det(dcm), 1.0, atol=1e-12)

    def test_roundtrip(self):
        """Angles away from gimbal lock should survive a DCM round trip."""
        angles = np.array([30.0, 45.0, 60.0])
        recovered = dcm_to_euler_xyz(euler_xyz_to_dcm(angles))
        assert_allclose(recovered, angles, atol=1e-9)

    def test_gimbal_lock_preserves_rotation(self):
        """At y = 90 deg the recovered angles should give the same DCM."""
        dcm = euler_xyz_to_dcm(np.array([20.0, 90.0, 30.0]))
        recovered = dcm_to_euler_xyz(dcm)
        assert_allclose(euler_xyz_to_dcm(recovered), dcm, atol=1e-9)

    def test_pitch_90_points_body_z_along_x(self):
        """A 90 deg y rotation should carry body +Z onto world +X."""
        dcm = euler_xyz_to_dcm(np.array([0.0, 90.0, 0.0]))
        assert_allclose(dcm @ np.array([0.0, 0.0, 1.0]), [1.0, 0.0, 0.0], atol=1e-12)


# =============================================================================
# State Tests
# =============================================================================


class TestLanderState:
    """Test LanderState validation and properties."""

    def test_defaults(self):
        """New state should have full tanks, zero throttle and a stowed chute."""
        state = LanderState(
            position=np.array([1.0, 0.0, 0.0]),
            velocity=np.zeros(3),
            orientation=np.zeros(3),
        )
        assert state.fuel == 1.0
        assert state.throttle == 0.0
        assert state.parachute_status is ParachuteStatus.NOT_DEPLOYED
        assert not state.autopilot_enabled
        assert state.delta_t == 0.1

    def test_bad_shape(self):
        """Position with the wrong shape should raise."""
        with pytest.raises(ValueError, match="Position"):
            LanderState(
                position=np.zeros(2),
                velocity=np.zeros(3),
                orientation=np.zeros(3),
            )

    def test_fuel_out_of_range(self):
        """Negative fuel should raise."""
        with pytest.raises(ValueError, match="Fuel"):
            LanderState(
                position=np.ones(3),
                velocity=np.zeros(3),
                orientation=np.zeros(3),
                fuel=-0.1,
            )

    def test_non_positive_time_step(self):
        """Zero time step should raise."""
        with pytest.raises(ValueError, match="Time step"):
            LanderState(
                position=np.ones(3),
                velocity=np.zeros(3),
                orientation=np.zeros(3),
                delta_t=0.0,
            )

    def test_descent_rate_sign(self):
        """Moving toward the centre should give a negative descent rate."""
        state = LanderState(
            position=np.array([0.0, 0.0, 5.0e6]),
            velocity=np.array([3.0, 0.0, -40.0]),
            orientation=np.zeros(3),
        )
        assert_allclose(state.descent_rate, -40.0)
        assert_allclose(state.speed, np.hypot(3.0, 40.0))
        assert_allclose(state.radius, 5.0e6)

    def test_copy_is_independent(self):
        """Mutating a copy should not affect the original."""
        state = LanderState(
            position=np.array([1.0, 2.0, 3.0]),
            velocity=np.zeros(3),
            orientation=np.zeros(3),
        )
        clone = state.copy()
        clone.position[0] = 100.0
        clone.parachute_status = ParachuteStatus.DEPLOYED

        assert state.position[0] == 1.0
        assert state.parachute_status is ParachuteStatus.NOT_DEPLOYED

    def test_is_finite(self):
        """NaN velocity should mark the state non-finite."""
        state = LanderState(
            position=np.ones(3),
            velocity=np.array([np.nan, 0.0, 0.0]),
            orientation=np.zeros(3),
        )
        assert not state.is_finite
