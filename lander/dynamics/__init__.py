"""Dynamics module for lander descent simulation.

This module provides the lander state and the fixed-step explicit Euler
integrator that advances it under gravity, drag and thrust.

Example:
    >>> from lander.dynamics import LanderState, numerical_dynamics
    >>> from lander.environment import MarsEnvironment
    >>> import numpy as np
    >>>
    >>> state = LanderState(
    ...     position=np.array([0.0, 0.0, 3396000.0]),
    ...     velocity=np.zeros(3),
    ...     orientation=np.zeros(3),
    ... )
    >>> numerical_dynamics(state, MarsEnvironment())
"""

from lander.dynamics.state import (
    LanderState,
    ParachuteStatus,
    dcm_to_euler_xyz,
    euler_xyz_to_dcm,
    normalize,
)
from lander.dynamics.integrator import (
    AccelerationBreakdown,
    compute_accelerations,
    lander_mass,
    numerical_dynamics,
    quadratic_drag,
)

__all__ = [
    # State
    "LanderState",
    "ParachuteStatus",
    # Vector and attitude utilities
    "normalize",
    "euler_xyz_to_dcm",
    "dcm_to_euler_xyz",
    # Integration
    "AccelerationBreakdown",
    "compute_accelerations",
    "lander_mass",
    "numerical_dynamics",
    "quadratic_drag",
]
