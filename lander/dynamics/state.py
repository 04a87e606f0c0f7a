"""Lander state representation for descent simulation.

The state carries:
- Position (3): [x, y, z] in planet-centred Cartesian coordinates [m]
- Velocity (3): [vx, vy, vz] in the same frame [m/s]
- Orientation (3): xyz Euler angles of the body frame [deg]
- Fuel fraction, commanded throttle, parachute status
- Control flags (attitude stabilization, autopilot) and the fixed time step

Coordinate frames:
- World: planet-centred, non-rotating
- Body: lander frame, +Z is the "up" axis along which the engine thrusts

Euler convention:
- Orientation (x, y, z) maps to the body-to-world DCM Rz(z) @ Ry(y) @ Rx(x)
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

# =============================================================================
# Vector Utilities
# =============================================================================


@beartype
def normalize(v: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return the unit vector along v, or the zero vector when |v| == 0."""
    norm = np.linalg.norm(v)
    if norm == 0.0:
        return np.zeros_like(v)
    return v / norm


@beartype
def euler_xyz_to_dcm(orientation_deg: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert xyz Euler angles to a body-to-world DCM.

    Args:
        orientation_deg: [x, y, z] rotation angles [degrees]

    Returns:
        3x3 DCM whose columns are the body axes expressed in the world frame
    """
    a, b, c = np.radians(orientation_deg)
    ca, sa = np.cos(a), np.sin(a)
    cb, sb = np.cos(b), np.sin(b)
    cc, sc = np.cos(c), np.sin(c)

    return np.array([
        [cc*cb, cc*sb*sa - sc*ca, cc*sb*ca + sc*sa],
        [sc*cb, sc*sb*sa + cc*ca, sc*sb*ca - cc*sa],
        [-sb, cb*sa, cb*ca],
    ])


@beartype
def dcm_to_euler_xyz(dcm: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert a body-to-world DCM to xyz Euler angles [degrees].

    At gimbal lock (y = +/-90 deg) the x angle is set to zero and the
    remaining rotation is carried entirely by z.
    """
    sin_b = float(np.clip(-dcm[2, 0], -1.0, 1.0))
    b = np.arcsin(sin_b)

    if np.cos(b) > 1e-8:
        a = np.arctan2(dcm[2, 1], dcm[2, 2])
        c = np.arctan2(dcm[1, 0], dcm[0, 0])
    else:
        a = 0.0
        c = np.arctan2(-dcm[0, 1], dcm[1, 1])

    return np.degrees(np.array([a, b, c], dtype=np.float64))


# =============================================================================
# State Classes
# =============================================================================


class ParachuteStatus(Enum):
    """Deployment state of the drag chute."""

    NOT_DEPLOYED = 0
    DEPLOYED = 1
    LOST = 2  # Deployed outside the safe envelope and torn away


@beartype
@dataclass
class LanderState:
    """Mutable per-simulation lander state.

    Attributes:
        position: [x, y, z] planet-centred position [m]
        velocity: [vx, vy, vz] velocity [m/s]
        orientation: [x, y, z] Euler angles of the body frame [deg]
        fuel: fraction of full fuel load remaining, in [0, 1]
        throttle: fraction of maximum thrust commanded, in [0, 1]
        parachute_status: chute deployment state
        stabilized_attitude: hold the nose radially outward each tick
        autopilot_enabled: run the autopilot each tick
        delta_t: fixed integration time step [s]
        scenario_id: preset that populated this state, if any
        time: simulation time [s]
        landed: set once the lander touches the surface
    """
    position: NDArray[np.float64]
    velocity: NDArray[np.float64]
    orientation: NDArray[np.float64]
    fuel: float = 1.0
    throttle: float = 0.0
    parachute_status: ParachuteStatus = ParachuteStatus.NOT_DEPLOYED
    stabilized_attitude: bool = False
    autopilot_enabled: bool = False
    delta_t: float = 0.1
    scenario_id: int | None = None
    time: float = 0.0
    landed: bool = False

    def __post_init__(self) -> None:
        """Validate state."""
        self.position = np.asarray(self.position, dtype=np.float64)
        self.velocity = np.asarray(self.velocity, dtype=np.float64)
        self.orientation = np.asarray(self.orientation, dtype=np.float64)

        if self.position.shape != (3,):
            raise ValueError(f"Position must be shape (3,), got {self.position.shape}")
        if self.velocity.shape != (3,):
            raise ValueError(f"Velocity must be shape (3,), got {self.velocity.shape}")
        if self.orientation.shape != (3,):
            raise ValueError(f"Orientation must be shape (3,), got {self.orientation.shape}")
        if not 0.0 <= self.fuel <= 1.0:
            raise ValueError(f"Fuel fraction must be in [0, 1], got {self.fuel}")
        if not 0.0 <= self.throttle <= 1.0:
            raise ValueError(f"Throttle must be in [0, 1], got {self.throttle}")
        if self.delta_t <= 0:
            raise ValueError(f"Time step must be positive, got {self.delta_t}")

    def copy(self) -> "LanderState":
        """Create a copy of this state."""
        return LanderState(
            position=self.position.copy(),
            velocity=self.velocity.copy(),
            orientation=self.orientation.copy(),
            fuel=float(self.fuel),
            throttle=float(self.throttle),
            parachute_status=self.parachute_status,
            stabilized_attitude=self.stabilized_attitude,
            autopilot_enabled=self.autopilot_enabled,
            delta_t=self.delta_t,
            scenario_id=self.scenario_id,
            time=float(self.time),
            landed=self.landed,
        )

    @property
    def radius(self) -> float:
        """Distance from the planet centre [m]."""
        return float(np.linalg.norm(self.position))

    @property
    def speed(self) -> float:
        """Speed magnitude [m/s]."""
        return float(np.linalg.norm(self.velocity))

    @property
    def descent_rate(self) -> float:
        """Radial velocity [m/s], negative while descending."""
        return float(np.dot(self.velocity, normalize(self.position)))

    @property
    def dcm_body_to_world(self) -> NDArray[np.float64]:
        """Get DCM that transforms vectors from body to world frame."""
        return euler_xyz_to_dcm(self.orientation)

    @property
    def is_finite(self) -> bool:
        """True while position and velocity hold only finite values."""
        return bool(np.all(np.isfinite(self.position)) and np.all(np.isfinite(self.velocity)))
