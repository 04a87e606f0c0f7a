"""GNC (Guidance, Navigation, Control) module for the lander.

Example:
    >>> from lander.gnc import autopilot, attitude_stabilization
    >>>
    >>> autopilot(state, environment)
    >>> attitude_stabilization(state)
"""

from lander.gnc.control import (
    AutopilotGains,
    attitude_stabilization,
    autopilot,
)

__all__ = [
    "AutopilotGains",
    "attitude_stabilization",
    "autopilot",
]
