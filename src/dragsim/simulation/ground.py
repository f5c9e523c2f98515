"""
Ground vehicle simulator - Straight-line acceleration of a car.

Simulates:
- Tire traction limit by surface and drivetrain
- Torque-limited launch, power-limited above walking pace
- Aerodynamic drag and rolling resistance
- 0-100 km/h, 400 m and 1 km milestones
"""

from typing import Optional

from dragsim.constants import PhysicsConstants
from dragsim.environment.conditions import EnvironmentConfig
from dragsim.simulation.result import GroundMilestones, SimulationResult, TerminationReason
from dragsim.simulation.stepper import (
    MilestoneLatch,
    RunState,
    SimulatorConfig,
    StepForces,
    StepSample,
    Stepper,
)
from dragsim.vehicles.specs import GroundVehicleSpec, VehicleCategory

SPEED_MILESTONE_KPH = 100.0
QUARTER_MILE_M = 400.0
ONE_KM_M = 1000.0


class GroundVehicleSimulator(Stepper):
    """Car acceleration run on a straight road.

    Thrust is the smaller of the tire traction limit and the engine force.
    The run ends at equilibrium, at the terminal velocity cap, or at the
    time limit.

    Usage:
        sim = GroundVehicleSimulator(spec, environment)
        result = sim.run()
    """

    category = VehicleCategory.CAR

    def __init__(
        self,
        spec: GroundVehicleSpec,
        environment: EnvironmentConfig,
        power_multiplier: float = 1.0,
        config: SimulatorConfig | None = None,
        constants: PhysicsConstants | None = None,
    ):
        """Initialize ground simulator.

        Args:
            spec: Car specification
            environment: Environment conditions
            power_multiplier: Scale applied to horsepower
            config: Simulator configuration
            constants: Physical constants
        """
        super().__init__(environment, config, constants)
        self.spec = spec
        self.power_multiplier = power_multiplier

        c = self.constants
        self._tire_limit = (
            c.friction_coefficient(environment.surface_condition)
            * spec.curb_weight_kg
            * c.gravity
            * c.weight_share(spec.drivetrain)
        )
        self._rolling_resistance = c.rolling_resistance_coeff * spec.curb_weight_kg * c.gravity

    @property
    def mass(self) -> float:
        return self.spec.curb_weight_kg

    @property
    def vehicle_id(self) -> str:
        return self.spec.vehicle_id

    @property
    def vehicle_name(self) -> str:
        return self.spec.name

    @property
    def tire_limit(self) -> float:
        """Maximum tractive force the tires can transmit (N)."""
        return self._tire_limit

    @property
    def rolling_resistance(self) -> float:
        """Speed-independent rolling resistance (N)."""
        return self._rolling_resistance

    def engine_force(self, velocity: float) -> float:
        """Engine tractive force at the wheels.

        Args:
            velocity: Speed in m/s

        Returns:
            Force in Newtons (torque limited near standstill, else F = P / v)
        """
        c = self.constants
        if velocity < c.standstill_speed_mps:
            return self.spec.torque_nm / c.wheel_radius_m

        power_w = self.spec.horsepower * self.power_multiplier * c.watts_per_hp
        return power_w / velocity

    def forces(self, velocity: float) -> StepForces:
        available = min(self._tire_limit, self.engine_force(velocity))
        drag = self.drag_force(velocity, self.spec.drag_coefficient, self.spec.frontal_area_m2)
        return StepForces(thrust=available, drag=drag, resistance=self._rolling_resistance)

    def _new_milestones(self) -> MilestoneLatch:
        return MilestoneLatch("time_0_to_100", "time_quarter_mile", "time_1_km")

    def on_sample(self, run: RunState, sample: StepSample) -> None:
        velocities = run.samples.velocity
        if len(velocities) >= 2 and velocities[-2] < SPEED_MILESTONE_KPH <= velocities[-1]:
            run.milestones.latch("time_0_to_100", sample.time)
        if sample.position_new >= QUARTER_MILE_M:
            run.milestones.latch("time_quarter_mile", sample.time)
        if sample.position_new >= ONE_KM_M:
            run.milestones.latch("time_1_km", sample.time)

    def check_termination(self, run: RunState, sample: StepSample) -> Optional[TerminationReason]:
        if abs(sample.acceleration) < self.config.accel_threshold:
            return TerminationReason.EQUILIBRIUM
        # TODO: derive the cap from spec.top_speed_kph once front ends stop relying on the fixed 150 km/h window
        if sample.velocity_new_kph > self.config.terminal_velocity_kph:
            return TerminationReason.SPEED_CAP
        return None

    def build_milestones(self, run: RunState) -> GroundMilestones:
        return GroundMilestones(**run.milestones.as_dict())


def simulate_ground_vehicle(
    spec: GroundVehicleSpec,
    environment: EnvironmentConfig,
    power_multiplier: float = 1.0,
    max_time: float = 120.0,
    dt: float = 0.01,
) -> SimulationResult:
    """Simulate a car accelerating from rest.

    Args:
        spec: Car specification
        environment: Environment conditions
        power_multiplier: Scale applied to horsepower
        max_time: Time limit in seconds
        dt: Time step in seconds

    Returns:
        SimulationResult tagged "car"
    """
    config = SimulatorConfig(dt=dt, max_time=max_time)
    return GroundVehicleSimulator(spec, environment, power_multiplier, config).run()
