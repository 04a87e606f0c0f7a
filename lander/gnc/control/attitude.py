"""Attitude stabilization for the lander.

Snaps the orientation so the body +Z axis (engine thrust axis) points
radially away from the planet centre. The remaining two body axes are
chosen perpendicular to it; their roll about the vertical is arbitrary
but deterministic.

Example:
    >>> from lander.gnc.control import attitude_stabilization
    >>>
    >>> attitude_stabilization(state)
    >>> state.dcm_body_to_world[:, 2]  # == position / |position|
"""

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.dynamics.state import LanderState, dcm_to_euler_xyz, normalize

SMALL_NUM = 1e-9


@beartype
def stabilized_orientation(position: NDArray[np.float64]) -> NDArray[np.float64]:
    """Euler angles that point the body +Z axis along the local vertical.

    Args:
        position: Planet-centred position [m], must be non-zero

    Returns:
        [x, y, z] Euler angles [deg]
    """
    up = normalize(position)

    # Any vector perpendicular to up; fall back when up is along the poles
    left = np.array([-up[1], up[0], 0.0])
    if np.linalg.norm(left) < SMALL_NUM:
        left = np.array([-up[2], 0.0, up[0]])
    left = normalize(left)
    out = np.cross(left, up)

    dcm = np.column_stack([out, left, up])
    return dcm_to_euler_xyz(dcm)


@beartype
def attitude_stabilization(state: LanderState) -> None:
    """Point the lander's thrust axis radially outward.

    Leaves the orientation untouched at the planet centre, where the
    vertical is undefined.
    """
    if not np.any(state.position):
        return
    state.orientation = stabilized_orientation(state.position)
