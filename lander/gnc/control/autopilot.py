"""Descent autopilot.

Proportional controller on a composite error that drives the descent
rate toward a target which shrinks linearly with altitude:

    target descent rate = -(0.5 + kh * altitude)
    Pout = kp * -(0.5 + kh * altitude + descent_rate)

Pout is mapped to throttle through a unity-slope region centred on
`offset` and saturated at 0 and 1. No integral or derivative memory is
kept between ticks. The autopilot also holds attitude and deploys the
parachute once low enough and inside the safe envelope.

Example:
    >>> from lander.gnc.control import AutopilotGains, autopilot
    >>>
    >>> state.autopilot_enabled = True
    >>> autopilot(state, environment)  # updates throttle / parachute
"""

import logging
from dataclasses import dataclass

import numpy as np
from beartype import beartype

from lander.dynamics.state import LanderState, ParachuteStatus, normalize
from lander.environment.base import LanderEnvironment
from lander.environment.gravity import MARS_RADIUS

logger = logging.getLogger(__name__)

# =============================================================================
# Gains
# =============================================================================


@beartype
@dataclass(frozen=True)
class AutopilotGains:
    """Autopilot gains and thresholds.

    Attributes:
        kh: Target descent rate per metre of altitude [1/s]
        kp: Proportional gain
        offset: Throttle at zero controller output
        target_descent_rate: Descent rate demanded at zero altitude [m/s]
        parachute_altitude: Altitude at or below which the chute may deploy [m]
    """
    kh: float = 0.02
    kp: float = 0.5
    offset: float = 0.5
    target_descent_rate: float = 0.5
    parachute_altitude: float = 150000.0


DEFAULT_GAINS = AutopilotGains()


# =============================================================================
# Control Law
# =============================================================================


@beartype
def throttle_policy(pout: float, offset: float = 0.5) -> float:
    """Map controller output to a throttle in [0, 1].

    Pout <= -offset gives 0, Pout >= 1 - offset gives 1, and the open
    interval between is linear with unit slope.
    """
    if pout <= -offset:
        return 0.0
    elif pout < 1.0 - offset:
        return float(offset + pout)
    else:
        return 1.0


@beartype
def controller_output(
    altitude: float,
    descent_rate: float,
    gains: AutopilotGains = DEFAULT_GAINS,
) -> float:
    """Proportional output for the current altitude and descent rate.

    Args:
        altitude: Height above the surface [m]
        descent_rate: Radial velocity [m/s], negative while descending
        gains: Controller gains

    Returns:
        Pout (dimensionless)
    """
    error = -(gains.target_descent_rate + gains.kh * altitude + descent_rate)
    return float(gains.kp * error)


@beartype
def autopilot(
    state: LanderState,
    environment: LanderEnvironment,
    gains: AutopilotGains = DEFAULT_GAINS,
) -> None:
    """Set throttle, attitude hold and parachute for the current state.

    Mutates only `throttle`, `stabilized_attitude` and `parachute_status`.

    Args:
        state: Lander state, updated in place
        environment: Supplies the parachute safety check
        gains: Controller gains
    """
    altitude = float(np.linalg.norm(state.position)) - MARS_RADIUS
    descent_rate = float(np.dot(state.velocity, normalize(state.position)))

    pout = controller_output(altitude, descent_rate, gains)

    state.stabilized_attitude = True
    state.throttle = throttle_policy(pout, gains.offset)

    # Deployment is one-way; a lost chute is never redeployed
    if (
        state.parachute_status is ParachuteStatus.NOT_DEPLOYED
        and altitude <= gains.parachute_altitude
        and environment.safe_to_deploy_parachute(state)
    ):
        state.parachute_status = ParachuteStatus.DEPLOYED
        logger.info(
            "Parachute deployed at t=%.1f s, altitude %.0f m, speed %.1f m/s",
            state.time, altitude, state.speed,
        )
