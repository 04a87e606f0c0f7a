"""Physical parameters of the lander vehicle.

Mass, geometry, aerodynamic and engine constants, grouped so the
integrator and environment models can be run against different
vehicles in the same process.

Example:
    >>> from lander.vehicle import LanderParameters
    >>>
    >>> vehicle = LanderParameters()
    >>> print(f"Full mass: {vehicle.full_mass:.0f} kg")
    >>> print(f"Max thrust: {vehicle.max_thrust:.0f} N")
"""

from dataclasses import dataclass

import numpy as np
from beartype import beartype

from lander.environment.gravity import surface_gravity


@beartype
@dataclass(frozen=True)
class LanderParameters:
    """Lander vehicle constants.

    Attributes:
        unloaded_mass: Mass with empty tanks [kg]
        fuel_capacity: Tank volume [l]
        fuel_density: [kg/l]
        fuel_rate_at_max_thrust: Volumetric burn rate at full throttle [l/s]
        size: Characteristic radius [m]
        drag_coef_lander: Body drag coefficient
        drag_coef_chute: Parachute drag coefficient
        thrust_to_weight: Full-throttle thrust over fully fuelled surface weight
        max_parachute_drag: Chute load above which it tears away [N]
        max_parachute_speed: Speed above which deployment is unsafe [m/s]
        max_impact_ground_speed: Touchdown horizontal speed limit [m/s]
        max_impact_descent_rate: Touchdown vertical speed limit [m/s]
        engine_delay: Dead time between throttle command and response [s]
        engine_lag: First-order time constant of the engine response [s]
    """
    unloaded_mass: float = 100.0
    fuel_capacity: float = 100.0
    fuel_density: float = 1.0
    fuel_rate_at_max_thrust: float = 0.5
    size: float = 1.0
    drag_coef_lander: float = 1.0
    drag_coef_chute: float = 2.0
    thrust_to_weight: float = 1.5
    max_parachute_drag: float = 20000.0
    max_parachute_speed: float = 500.0
    max_impact_ground_speed: float = 1.0
    max_impact_descent_rate: float = 1.0
    engine_delay: float = 0.0
    engine_lag: float = 0.0

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.unloaded_mass <= 0:
            raise ValueError(f"Unloaded mass must be positive, got {self.unloaded_mass}")
        if self.size <= 0:
            raise ValueError(f"Lander size must be positive, got {self.size}")
        if self.engine_delay < 0 or self.engine_lag < 0:
            raise ValueError("Engine delay and lag must be non-negative")

    def mass(self, fuel: float) -> float:
        """Total mass at a fuel fraction [kg]."""
        return self.unloaded_mass + self.fuel_capacity * self.fuel_density * fuel

    @property
    def full_mass(self) -> float:
        """Mass with full tanks [kg]."""
        return self.mass(1.0)

    @property
    def max_thrust(self) -> float:
        """Full-throttle thrust [N]."""
        return self.thrust_to_weight * self.full_mass * surface_gravity()

    @property
    def lander_drag_area(self) -> float:
        """Body reference area [m^2]."""
        return np.pi * self.size * self.size

    @property
    def chute_drag_area(self) -> float:
        """Parachute reference area used for drag [m^2]."""
        return 20.0 * self.size * self.size

    def parachute_load(self, density: float, speed: float) -> float:
        """Drag load on the chute at deployment [N].

        Uses a canopy of five (2 * size)^2 panels.
        """
        area = 5.0 * (2.0 * self.size) ** 2
        return 0.5 * self.drag_coef_chute * density * area * speed ** 2


DEFAULT_LANDER = LanderParameters()
