"""Descent engine models.

Provides the throttle response model that turns the commanded throttle
into a world-frame thrust vector.
"""

from lander.propulsion.throttle_model import ThrottleModel

__all__ = [
    "ThrottleModel",
]
