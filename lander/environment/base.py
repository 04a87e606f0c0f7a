"""Capability interface between the integrator and the physics models.

The integrator and autopilot never look up density, thrust or the
parachute envelope globally; they receive an object satisfying
`LanderEnvironment`. Tests inject deterministic stubs through it.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from lander.dynamics.state import LanderState


@runtime_checkable
class LanderEnvironment(Protocol):
    """Protocol for the force and safety models consumed each tick."""

    def atmospheric_density(self, position: NDArray[np.float64]) -> float:
        """Local air density at a planet-centred position [kg/m^3]."""
        ...

    def thrust_wrt_world(self, state: "LanderState") -> NDArray[np.float64]:
        """Current engine thrust in the world frame [N]."""
        ...

    def safe_to_deploy_parachute(self, state: "LanderState") -> bool:
        """Whether the chute would survive deployment in this state."""
        ...

    def attitude_stabilization(self, state: "LanderState") -> None:
        """Force the orientation to the stabilized attitude."""
        ...
