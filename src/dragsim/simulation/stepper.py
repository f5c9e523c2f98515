"""
Stepper - Shared fixed-step Euler loop for longitudinal simulations.

Provides:
- SimulatorConfig: time step, time limit and termination thresholds
- StepForces / StepSample: per-step force breakdown and sample
- MilestoneLatch: first-crossing-wins event times
- RunState: sample buffers, milestones and markers for one run
- Stepper: bounded explicit-Euler loop, subclassed per vehicle class
"""

from dataclasses import dataclass
import logging
from typing import Dict, List, Optional

from dragsim.constants import PhysicsConstants, PHYSICS
from dragsim.environment.conditions import EnvironmentConfig
from dragsim.simulation.result import Milestones, SimulationResult, TerminationReason
from dragsim.vehicles.specs import VehicleCategory

logger = logging.getLogger(__name__)

MPS_TO_KPH = 3.6


@dataclass
class SimulatorConfig:
    """Simulator configuration."""
    # Time stepping
    dt: float = 0.01                       # 100 Hz
    max_time: float = 120.0                # s

    # Termination
    accel_threshold: float = 0.01          # m/s^2, equilibrium
    terminal_velocity_kph: float = 150.0   # ground vehicles only
    post_takeoff_time: float = 1.0         # s rolled after rotation

    def __post_init__(self):
        if not self.dt > 0:
            raise ValueError(f"dt must be positive, got {self.dt!r}")
        if self.max_time < 0:
            raise ValueError(f"max_time must be non-negative, got {self.max_time!r}")

    @property
    def max_steps(self) -> int:
        """Upper bound on the number of recorded samples."""
        return int(self.max_time / self.dt) + 1


@dataclass(frozen=True)
class StepForces:
    """Longitudinal forces acting on the vehicle for one step (N)."""
    thrust: float
    drag: float
    resistance: float = 0.0

    @property
    def net(self) -> float:
        return self.thrust - self.drag - self.resistance


@dataclass(frozen=True)
class StepSample:
    """State produced by one Euler step."""
    index: int
    time: float          # s, time at start of step
    velocity: float      # m/s, before update
    velocity_new: float  # m/s
    position_new: float  # m
    acceleration: float  # m/s^2
    g_force: float

    @property
    def velocity_new_kph(self) -> float:
        return self.velocity_new * MPS_TO_KPH


class MilestoneLatch:
    """Named event times that can be set exactly once."""

    def __init__(self, *names: str):
        self._values: Dict[str, Optional[float]] = dict.fromkeys(names)

    def __contains__(self, name: str) -> bool:
        return self._values.get(name) is not None

    def latch(self, name: str, value: float) -> bool:
        """Record a value if none has been recorded yet.

        Returns:
            True if the value was recorded by this call
        """
        if name not in self._values:
            raise KeyError(f"Unknown milestone: {name}")
        if self._values[name] is not None:
            return False
        self._values[name] = value
        logger.debug("Milestone %s latched at %.4f", name, value)
        return True

    def get(self, name: str) -> Optional[float]:
        return self._values[name]

    def as_dict(self) -> Dict[str, Optional[float]]:
        return dict(self._values)


class _SampleBuffer:
    """Append-only sample storage for the five output channels."""

    def __init__(self):
        self.time: List[float] = []
        self.distance: List[float] = []
        self.velocity: List[float] = []
        self.acceleration: List[float] = []
        self.g_force: List[float] = []

    def __len__(self) -> int:
        return len(self.time)

    def append(self, time: float, distance: float, velocity_kph: float,
               acceleration: float, g_force: float) -> None:
        self.time.append(time)
        self.distance.append(distance)
        self.velocity.append(velocity_kph)
        self.acceleration.append(acceleration)
        self.g_force.append(g_force)


class RunState:
    """Buffers and markers owned by a single ``Stepper.run`` call."""

    def __init__(self, milestones: MilestoneLatch):
        self.samples = _SampleBuffer()
        self.milestones = milestones
        # Sample indices of events a subclass needs to refer back to
        self.markers: Dict[str, int] = {}


class Stepper:
    """Explicit-Euler longitudinal simulation.

    Subclasses supply the force model and their own milestones and
    termination checks. Each step:

        a     = F_net(v) / m
        v_new = v + a * dt
        x_new = x + v * dt        (position uses pre-update velocity)

    The loop is bounded by ``max_time / dt`` steps. Samples, milestones
    and markers live in a ``RunState`` local to ``run`` and are handed to
    the hooks, so the stepper itself holds only its inputs.
    """

    category: VehicleCategory

    def __init__(
        self,
        environment: EnvironmentConfig,
        config: SimulatorConfig | None = None,
        constants: PhysicsConstants | None = None,
    ):
        """Initialize stepper.

        Args:
            environment: Environment conditions (provides air density)
            config: Simulator configuration. Uses defaults if None.
            constants: Physical constants. Uses the shared set if None.
        """
        self.environment = environment
        self.config = config or SimulatorConfig()
        self.constants = constants or PHYSICS

    # Force model ---------------------------------------------------------

    @property
    def mass(self) -> float:
        """Mass in kg used for the whole run."""
        raise NotImplementedError

    @property
    def vehicle_id(self) -> str:
        raise NotImplementedError

    @property
    def vehicle_name(self) -> str:
        raise NotImplementedError

    def forces(self, velocity: float) -> StepForces:
        """Force breakdown at the given speed (m/s)."""
        raise NotImplementedError

    def drag_force(self, velocity: float, drag_coefficient: float, area_m2: float) -> float:
        """Quadratic drag F = 0.5 * rho * v^2 * Cd * A.

        Args:
            velocity: Speed in m/s
            drag_coefficient: Cd
            area_m2: Reference area in m^2

        Returns:
            Drag force in Newtons
        """
        rho = self.environment.air_density
        return 0.5 * rho * velocity * velocity * drag_coefficient * area_m2

    # Hooks ---------------------------------------------------------------

    def _new_milestones(self) -> MilestoneLatch:
        return MilestoneLatch()

    def on_sample(self, run: RunState, sample: StepSample) -> None:
        """Called after each sample is recorded."""

    def check_termination(self, run: RunState, sample: StepSample) -> Optional[TerminationReason]:
        """Return a reason to stop after this sample, or None to continue."""
        return None

    def build_milestones(self, run: RunState) -> Milestones:
        raise NotImplementedError

    # Loop ----------------------------------------------------------------

    def run(self) -> SimulationResult:
        """Run the simulation to completion.

        Returns:
            Frozen SimulationResult for this run
        """
        state = RunState(self._new_milestones())
        samples = state.samples

        dt = self.config.dt
        max_time = self.config.max_time
        mass = self.mass
        gravity = self.constants.gravity

        velocity = 0.0
        position = 0.0
        index = 0
        termination = TerminationReason.MAX_TIME

        while index * dt < max_time:
            t = index * dt

            acceleration = self.forces(velocity).net / mass
            g_force = acceleration / gravity

            velocity_new = velocity + acceleration * dt
            position_new = position + velocity * dt

            samples.append(t, position_new, velocity_new * MPS_TO_KPH, acceleration, g_force)
            sample = StepSample(
                index=index,
                time=t,
                velocity=velocity,
                velocity_new=velocity_new,
                position_new=position_new,
                acceleration=acceleration,
                g_force=g_force,
            )
            self.on_sample(state, sample)

            reason = self.check_termination(state, sample)
            if reason is not None:
                termination = reason
                duration = t
                break

            velocity = velocity_new
            position = position_new
            index += 1
        else:
            duration = index * dt

        logger.debug(
            "%s finished after %d steps (%.2f s): %s",
            self.vehicle_id, len(samples), duration, termination.value,
        )

        return SimulationResult(
            vehicle_id=self.vehicle_id,
            vehicle_name=self.vehicle_name,
            category=self.category,
            time=samples.time,
            distance=samples.distance,
            velocity=samples.velocity,
            acceleration=samples.acceleration,
            g_force=samples.g_force,
            milestones=self.build_milestones(state),
            simulation_duration=duration,
            termination=termination,
            dt=dt,
        )
