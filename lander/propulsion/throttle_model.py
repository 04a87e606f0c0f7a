"""Engine throttle response and thrust direction.

Converts the commanded throttle on the lander state into a world-frame
thrust vector. The engine may respond with a dead time (`engine_delay`)
and a first-order lag (`engine_lag`); with both zero the commanded
throttle is applied immediately.

Example:
    >>> from lander.propulsion import ThrottleModel
    >>>
    >>> engine = ThrottleModel(LanderParameters(engine_lag=0.5))
    >>> thrust_world = engine.thrust_wrt_world(state)  # [N]
"""

from collections import deque
from dataclasses import dataclass, field

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.dynamics.state import LanderState
from lander.vehicle.parameters import LanderParameters

# =============================================================================
# Throttle Model
# =============================================================================


@beartype
@dataclass
class ThrottleModel:
    """Dynamic throttle model for the descent engine.

    The engine thrusts along body +Z. Thrust is cut when the tanks are
    empty or the lander has touched down.

    Attributes:
        vehicle: Lander parameters (max thrust, delay, lag)
    """
    vehicle: LanderParameters = field(default_factory=LanderParameters)

    _buffer: deque = field(default_factory=deque, init=False, repr=False)
    _lagged_throttle: float = field(default=0.0, init=False, repr=False)
    _last_update_time: float = field(default=-1.0, init=False, repr=False)

    @property
    def is_immediate(self) -> bool:
        """True when the engine has neither delay nor lag."""
        return self.vehicle.engine_delay <= 0 and self.vehicle.engine_lag <= 0

    @beartype
    def reset(self) -> None:
        """Clear the delay buffer and lag state."""
        self._buffer.clear()
        self._lagged_throttle = 0.0
        self._last_update_time = -1.0

    @beartype
    def effective_throttle(self, state: LanderState) -> float:
        """Throttle the engine is actually delivering this tick.

        Args:
            state: Current lander state

        Returns:
            Delivered throttle fraction in [0, 1]
        """
        commanded = min(1.0, max(0.0, float(state.throttle)))
        if state.landed or state.fuel <= 0.0:
            commanded = 0.0

        if self.is_immediate:
            return commanded

        # Simulation restarted from an earlier time
        if state.time < self._last_update_time:
            self.reset()

        if state.time != self._last_update_time:
            delayed = self._delay(commanded, state.delta_t)
            lag = self.vehicle.engine_lag
            if lag <= 0:
                self._lagged_throttle = delayed
            else:
                alpha = 1.0 - np.exp(-state.delta_t / lag)
                self._lagged_throttle += alpha * (delayed - self._lagged_throttle)
            self._last_update_time = float(state.time)

        return float(self._lagged_throttle)

    def _delay(self, commanded: float, dt: float) -> float:
        """Push the command through the dead-time buffer."""
        n_ticks = int(round(self.vehicle.engine_delay / dt))
        if n_ticks == 0:
            return commanded

        if len(self._buffer) != n_ticks:
            self._buffer = deque([0.0] * n_ticks)

        delayed = self._buffer.popleft()
        self._buffer.append(commanded)
        return delayed

    @beartype
    def thrust_body(self, state: LanderState) -> NDArray[np.float64]:
        """Thrust vector in the body frame [N]."""
        return np.array([0.0, 0.0, self.vehicle.max_thrust * self.effective_throttle(state)])

    @beartype
    def thrust_wrt_world(self, state: LanderState) -> NDArray[np.float64]:
        """Thrust vector in the world frame [N]."""
        return state.dcm_body_to_world @ self.thrust_body(state)
