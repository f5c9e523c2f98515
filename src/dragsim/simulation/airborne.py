"""
Airborne vehicle simulator - Jet takeoff roll down a runway.

Simulates:
- Dry or afterburner (wet) thrust with high-speed derating
- Aerodynamic drag on wing area
- Takeoff detection, then one more second of roll
- Runway overrun abort
"""

from typing import Optional

from dragsim.constants import PhysicsConstants
from dragsim.environment.conditions import EnvironmentConfig
from dragsim.simulation.result import AirborneMilestones, SimulationResult, TerminationReason
from dragsim.simulation.stepper import (
    MPS_TO_KPH,
    MilestoneLatch,
    RunState,
    SimulatorConfig,
    StepForces,
    StepSample,
    Stepper,
)
from dragsim.vehicles.specs import AirborneVehicleSpec, VehicleCategory

OVERRUN_FACTOR = 1.5
# Absorbs float error when post_takeoff_time is a whole number of steps
TIME_EPSILON = 1e-9


class AirborneVehicleSimulator(Stepper):
    """Jet aircraft takeoff roll.

    No rolling resistance or lift is modeled; the aircraft is considered
    airborne once it reaches its takeoff speed.
    """

    category = VehicleCategory.FIGHTER_JET

    def __init__(
        self,
        spec: AirborneVehicleSpec,
        environment: EnvironmentConfig,
        use_takeoff_weight: bool = True,
        use_afterburner: bool = True,
        thrust_multiplier: float = 1.0,
        config: SimulatorConfig | None = None,
        constants: PhysicsConstants | None = None,
    ):
        """Initialize airborne simulator.

        Args:
            spec: Jet specification
            environment: Environment conditions
            use_takeoff_weight: Use takeoff weight (else empty weight)
            use_afterburner: Use wet thrust (else dry thrust)
            thrust_multiplier: Scale applied to thrust
            config: Simulator configuration
            constants: Physical constants
        """
        super().__init__(environment, config, constants)
        self.spec = spec
        self.use_takeoff_weight = use_takeoff_weight
        self.use_afterburner = use_afterburner
        self.thrust_multiplier = thrust_multiplier

    @property
    def mass(self) -> float:
        if self.use_takeoff_weight:
            return self.spec.takeoff_weight_kg
        return self.spec.empty_weight_kg

    @property
    def vehicle_id(self) -> str:
        return self.spec.vehicle_id

    @property
    def vehicle_name(self) -> str:
        return self.spec.name

    @property
    def base_thrust_kn(self) -> float:
        if self.use_afterburner:
            return self.spec.wet_thrust_kn
        return self.spec.dry_thrust_kn

    def thrust_factor(self, velocity: float) -> float:
        """High-speed thrust derating.

        Linear loss from derate_start_kph over derate_span_kph, floored.

        Args:
            velocity: Speed in m/s

        Returns:
            Factor in [derate_floor, 1.0]
        """
        c = self.constants
        velocity_kph = velocity * MPS_TO_KPH
        if velocity_kph <= c.derate_start_kph:
            return 1.0
        loss = (velocity_kph - c.derate_start_kph) / c.derate_span_kph * c.derate_max_loss
        return max(c.derate_floor, 1.0 - loss)

    def thrust_force(self, velocity: float) -> float:
        """Engine thrust in Newtons at the given speed (m/s)."""
        thrust_kn = self.base_thrust_kn * self.thrust_factor(velocity) * self.thrust_multiplier
        return thrust_kn * 1000.0

    def forces(self, velocity: float) -> StepForces:
        drag = self.drag_force(velocity, self.spec.drag_coefficient, self.spec.wing_area_m2)
        return StepForces(thrust=self.thrust_force(velocity), drag=drag)

    def _new_milestones(self) -> MilestoneLatch:
        return MilestoneLatch("time_takeoff", "runway_distance")

    def on_sample(self, run: RunState, sample: StepSample) -> None:
        if sample.velocity_new >= self.spec.takeoff_speed_mps:
            if run.milestones.latch("time_takeoff", sample.time):
                run.milestones.latch("runway_distance", sample.position_new)
                run.markers["takeoff"] = sample.index

    def time_since_takeoff(self, run: RunState, sample: StepSample) -> Optional[float]:
        """Seconds rolled since the takeoff sample, or None before takeoff."""
        takeoff_index = run.markers.get("takeoff")
        if takeoff_index is None:
            return None
        return (sample.index - takeoff_index) * self.config.dt

    def check_termination(self, run: RunState, sample: StepSample) -> Optional[TerminationReason]:
        elapsed = self.time_since_takeoff(run, sample)
        if elapsed is not None and elapsed >= self.config.post_takeoff_time - TIME_EPSILON:
            return TerminationReason.TAKEOFF_COMPLETE
        if sample.position_new > self.spec.runway_length_m * OVERRUN_FACTOR:
            return TerminationReason.OVERRUN
        return None

    def build_milestones(self, run: RunState) -> AirborneMilestones:
        return AirborneMilestones(**run.milestones.as_dict())


def simulate_airborne_vehicle(
    spec: AirborneVehicleSpec,
    environment: EnvironmentConfig,
    use_takeoff_weight: bool = True,
    use_afterburner: bool = True,
    thrust_multiplier: float = 1.0,
    max_time: float = 120.0,
    dt: float = 0.01,
) -> SimulationResult:
    """Simulate a jet takeoff roll from brake release.

    Args:
        spec: Jet specification
        environment: Environment conditions
        use_takeoff_weight: Use takeoff weight (else empty weight)
        use_afterburner: Use wet thrust (else dry thrust)
        thrust_multiplier: Scale applied to thrust
        max_time: Time limit in seconds
        dt: Time step in seconds

    Returns:
        SimulationResult tagged "fighter_jet"
    """
    config = SimulatorConfig(dt=dt, max_time=max_time)
    simulator = AirborneVehicleSimulator(
        spec,
        environment,
        use_takeoff_weight=use_takeoff_weight,
        use_afterburner=use_afterburner,
        thrust_multiplier=thrust_multiplier,
        config=config,
    )
    return simulator.run()
