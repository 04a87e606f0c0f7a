"""Control algorithms for the lander.

Provides the descent autopilot (throttle and parachute) and attitude
stabilization.
"""

from lander.gnc.control.attitude import (
    attitude_stabilization,
    stabilized_orientation,
)
from lander.gnc.control.autopilot import (
    DEFAULT_GAINS,
    AutopilotGains,
    autopilot,
    controller_output,
    throttle_policy,
)

__all__ = [
    "AutopilotGains",
    "DEFAULT_GAINS",
    "attitude_stabilization",
    "autopilot",
    "controller_output",
    "stabilized_orientation",
    "throttle_policy",
]
