"""Step-driven descent simulation for the Mars lander.

Wraps the per-tick integrator with the bookkeeping a driving loop needs:
fuel consumption, parachute failure, touchdown detection and history.

Each `Simulator.step()`:
    1. numerical_dynamics (forces, Euler step, autopilot, attitude hold)
    2. fuel burn at the commanded throttle
    3. parachute loss if deployed outside the safe envelope
    4. touchdown check and landing/crash classification

Example:
    >>> from lander.simulation import Simulator, SimConfig
    >>>
    >>> sim = Simulator.from_scenario(1)
    >>> sim.state.autopilot_enabled = True
    >>> result = sim.run()
    >>> print(sim.status, result.time[-1])
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from beartype import beartype
from numpy.typing import NDArray

from lander.dynamics.integrator import numerical_dynamics
from lander.dynamics.state import LanderState, ParachuteStatus, normalize
from lander.environment.base import LanderEnvironment
from lander.environment.gravity import MARS_RADIUS
from lander.environment.mars import MarsEnvironment
from lander.gnc.control.autopilot import AutopilotGains
from lander.scenarios import initialize_simulation
from lander.vehicle.parameters import LanderParameters

logger = logging.getLogger(__name__)

# =============================================================================
# Configuration
# =============================================================================


@beartype
@dataclass
class SimConfig:
    """Simulation configuration.

    Attributes:
        max_time: Simulation time at which `run` stops [s]
        record_history: Keep a copy of the state after every tick
        model_parachute_loss: Tear the chute away when deployed unsafely
        autopilot_gains: Gains used whenever the autopilot is enabled
    """
    max_time: float = 10000.0
    record_history: bool = True
    model_parachute_loss: bool = True
    autopilot_gains: AutopilotGains = field(default_factory=AutopilotGains)


class FlightStatus(Enum):
    """Outcome of the flight so far."""

    FLYING = "flying"
    LANDED = "landed"
    CRASHED = "crashed"


# =============================================================================
# Simulator
# =============================================================================


@beartype
@dataclass
class Simulator:
    """Step-driven lander simulator.

    Owns one lander state; several simulators can run side by side.

    Example:
        >>> sim = Simulator.from_scenario(5)
        >>> while sim.status is FlightStatus.FLYING and sim.time < 600.0:
        ...     sim.step()
    """
    state: LanderState
    vehicle: LanderParameters = field(default_factory=LanderParameters)
    environment: LanderEnvironment | None = None
    config: SimConfig = field(default_factory=SimConfig)

    # Internal
    status: FlightStatus = field(default=FlightStatus.FLYING, init=False)
    impact_ground_speed: float | None = field(default=None, init=False)
    impact_descent_rate: float | None = field(default=None, init=False)
    _history: list[LanderState] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        """Build the default environment and seed the history."""
        if self.environment is None:
            self.environment = MarsEnvironment(vehicle=self.vehicle)
        if self.config.record_history:
            self._history = [self.state.copy()]

    @classmethod
    def from_scenario(
        cls,
        scenario_id: int,
        vehicle: LanderParameters | None = None,
        environment: LanderEnvironment | None = None,
        config: SimConfig | None = None,
    ) -> "Simulator":
        """Create simulator initialized from a canned scenario.

        Args:
            scenario_id: Scenario slot in [0, 9]
            vehicle: Lander parameters
            environment: Environment models; Mars defaults when omitted
            config: Simulation configuration
        """
        return cls(
            state=initialize_simulation(scenario_id),
            vehicle=vehicle or LanderParameters(),
            environment=environment,
            config=config or SimConfig(),
        )

    def get_state(self) -> LanderState:
        """Get current state.

        Returns a copy to prevent external modification.
        """
        return self.state.copy()

    def step(self) -> LanderState:
        """Advance the simulation by one tick.

        Returns:
            State after the tick

        Raises:
            FloatingPointError: If position or velocity become non-finite
        """
        if self.status is not FlightStatus.FLYING:
            return self.state

        numerical_dynamics(
            self.state,
            self.environment,
            vehicle=self.vehicle,
            gains=self.config.autopilot_gains,
        )

        if not self.state.is_finite:
            logger.error("Non-finite lander state at t=%.1f s", self.state.time)
            raise FloatingPointError(
                f"Lander state became non-finite at t={self.state.time:.1f} s"
            )

        self._burn_fuel()
        if self.config.model_parachute_loss:
            self._check_parachute()
        self._check_touchdown()

        if self.config.record_history:
            self._history.append(self.state.copy())

        return self.state

    def run(self, max_time: float | None = None) -> "SimulationResult":
        """Step until touchdown or the time limit.

        Args:
            max_time: Overrides `config.max_time` [s]

        Returns:
            Result built from the recorded history
        """
        t_final = self.config.max_time if max_time is None else max_time
        logger.info(
            "Starting simulation: scenario=%s, dt=%.3f s, max_time=%.0f s",
            self.state.scenario_id, self.state.delta_t, t_final,
        )

        while self.status is FlightStatus.FLYING and self.state.time < t_final:
            self.step()

        logger.info(
            "Simulation stopped at t=%.1f s: %s, altitude %.0f m",
            self.state.time, self.status.value, self.altitude,
        )
        return SimulationResult.from_simulator(self)

    def _burn_fuel(self) -> None:
        """Consume fuel at the commanded throttle; tanks never go negative."""
        if self.state.fuel <= 0.0 or self.state.throttle <= 0.0:
            return

        burned = (
            self.state.delta_t * self.vehicle.fuel_rate_at_max_thrust * self.state.throttle
            / self.vehicle.fuel_capacity
        )
        self.state.fuel = max(0.0, float(self.state.fuel - burned))

        if self.state.fuel == 0.0:
            logger.warning("Fuel exhausted at t=%.1f s", self.state.time)

    def _check_parachute(self) -> None:
        """Lose a deployed chute that is outside the safe envelope."""
        if self.state.parachute_status is not ParachuteStatus.DEPLOYED:
            return
        if not self.environment.safe_to_deploy_parachute(self.state):
            self.state.parachute_status = ParachuteStatus.LOST
            logger.warning(
                "Parachute lost at t=%.1f s, speed %.1f m/s",
                self.state.time, self.state.speed,
            )

    def _check_touchdown(self) -> None:
        """Detect surface contact and classify the landing."""
        if self.altitude >= self.vehicle.size / 2.0:
            return

        up = normalize(self.state.position)
        climb_speed = float(np.dot(self.state.velocity, up))
        ground_speed = float(np.linalg.norm(self.state.velocity - climb_speed * up))

        self.state.landed = True
        self.impact_ground_speed = ground_speed
        self.impact_descent_rate = -climb_speed

        if (
            ground_speed > self.vehicle.max_impact_ground_speed
            or -climb_speed > self.vehicle.max_impact_descent_rate
        ):
            self.status = FlightStatus.CRASHED
            logger.warning(
                "Crashed at t=%.1f s: descent rate %.2f m/s, ground speed %.2f m/s",
                self.state.time, -climb_speed, ground_speed,
            )
        else:
            self.status = FlightStatus.LANDED
            logger.info(
                "Landed at t=%.1f s: descent rate %.2f m/s, ground speed %.2f m/s",
                self.state.time, -climb_speed, ground_speed,
            )

    def get_history(self) -> list[LanderState]:
        """Get recorded state history."""
        return self._history.copy()

    def clear_history(self) -> None:
        """Clear recorded state history."""
        self._history = [self.state.copy()]

    @property
    def time(self) -> float:
        """Current simulation time [s]."""
        return float(self.state.time)

    @property
    def altitude(self) -> float:
        """Current altitude [m]."""
        return self.state.radius - MARS_RADIUS


# =============================================================================
# Results and Analysis
# =============================================================================


@beartype
@dataclass
class SimulationResult:
    """Results from a completed simulation.

    Provides convenient access to trajectory data.
    """
    states: list[LanderState]
    status: FlightStatus = FlightStatus.FLYING

    @property
    def time(self) -> NDArray[np.float64]:
        """Time array [s]."""
        return np.array([s.time for s in self.states], dtype=np.float64)

    @property
    def position(self) -> NDArray[np.float64]:
        """Position history [m], shape (N, 3)."""
        return np.array([s.position for s in self.states], dtype=np.float64).reshape(-1, 3)

    @property
    def velocity(self) -> NDArray[np.float64]:
        """Velocity history [m/s], shape (N, 3)."""
        return np.array([s.velocity for s in self.states], dtype=np.float64).reshape(-1, 3)

    @property
    def altitude(self) -> NDArray[np.float64]:
        """Altitude history [m]."""
        return np.array([s.radius - MARS_RADIUS for s in self.states])

    @property
    def speed(self) -> NDArray[np.float64]:
        """Speed history [m/s]."""
        return np.array([s.speed for s in self.states])

    @property
    def descent_rate(self) -> NDArray[np.float64]:
        """Radial velocity history [m/s]."""
        return np.array([s.descent_rate for s in self.states])

    @property
    def fuel(self) -> NDArray[np.float64]:
        """Fuel fraction history."""
        return np.array([s.fuel for s in self.states], dtype=np.float64)

    @property
    def throttle(self) -> NDArray[np.float64]:
        """Commanded throttle history."""
        return np.array([s.throttle for s in self.states], dtype=np.float64)

    @property
    def parachute_status(self) -> list[ParachuteStatus]:
        """Parachute status at each recorded tick."""
        return [s.parachute_status for s in self.states]

    @classmethod
    def from_simulator(cls, sim: Simulator) -> "SimulationResult":
        """Create result from simulator history."""
        return cls(states=sim.get_history(), status=sim.status)

    def to_dataframe(self):
        """Convert to Polars DataFrame."""
        import polars as pl

        return pl.DataFrame({
            "time": self.time,
            "altitude": self.altitude,
            "speed": self.speed,
            "descent_rate": self.descent_rate,
            "fuel": self.fuel,
            "throttle": self.throttle,
            "parachute": [status.name for status in self.parachute_status],
            "x": self.position[:, 0],
            "y": self.position[:, 1],
            "z": self.position[:, 2],
            "vx": self.velocity[:, 0],
            "vy": self.velocity[:, 1],
            "vz": self.velocity[:, 2],
        })
