"""Tests for the ground vehicle simulator."""

import pytest
import numpy as np

from dragsim.environment.conditions import EnvironmentConfig, SurfaceCondition
from dragsim.simulation.ground import GroundVehicleSimulator, simulate_ground_vehicle
from dragsim.simulation.result import GroundMilestones, TerminationReason
from dragsim.simulation.stepper import SimulatorConfig
from dragsim.vehicles.catalog import VehicleCatalog
from dragsim.vehicles.specs import Drivetrain, GroundVehicleSpec, VehicleCategory


@pytest.fixture
def dry_env():
    return EnvironmentConfig.create(15.0, 0.0, SurfaceCondition.DRY)


@pytest.fixture
def plaid():
    return VehicleCatalog().get("tesla_model_s_plaid")


def _weak_car(**overrides) -> GroundVehicleSpec:
    params = dict(
        horsepower=10.0,
        torque_nm=100.0,
        curb_weight_kg=1000.0,
        drivetrain=Drivetrain.FWD,
        drag_coefficient=0.4,
        frontal_area_m2=2.2,
        vehicle_id="weak_car",
    )
    params.update(overrides)
    return GroundVehicleSpec(**params)


class TestGroundForces:
    """Test the force model at known states."""

    def test_launch_forces_match_hand_calculation(self, plaid, dry_env):
        """At rest the Plaid is torque limited."""
        sim = GroundVehicleSimulator(plaid, dry_env)
        forces = sim.forces(0.0)

        assert sim.engine_force(0.0) == pytest.approx(1620 / 0.33)
        assert sim.tire_limit == pytest.approx(21091.5)
        assert forces.thrust == pytest.approx(4909.09, abs=0.01)
        assert forces.drag == 0.0
        assert forces.resistance == pytest.approx(274.1895, abs=1e-3)

    def test_power_limited_above_standstill(self, plaid, dry_env):
        """Above 0.1 m/s engine force is P / v."""
        sim = GroundVehicleSimulator(plaid, dry_env, power_multiplier=1.2)
        assert sim.engine_force(50.0) == pytest.approx(1020 * 1.2 * 745.7 / 50.0)

    def test_thrust_limited_by_tires(self, plaid, dry_env):
        """At low speed power exceeds traction, so tires limit thrust."""
        sim = GroundVehicleSimulator(plaid, dry_env)
        assert sim.forces(5.0).thrust == pytest.approx(sim.tire_limit)

    def test_drivetrain_weight_share(self, dry_env):
        """RWD puts half the weight on driven wheels."""
        awd = GroundVehicleSimulator(_weak_car(drivetrain="AWD"), dry_env)
        rwd = GroundVehicleSimulator(_weak_car(drivetrain="RWD"), dry_env)
        assert rwd.tire_limit == pytest.approx(awd.tire_limit * 0.5)

    def test_surface_friction(self, plaid):
        """Icy surface cuts traction to 35%."""
        icy = EnvironmentConfig.create(15.0, 0.0, SurfaceCondition.ICY)
        sim = GroundVehicleSimulator(plaid, icy)
        assert sim.tire_limit == pytest.approx(21091.5 * 0.35)


class TestGroundSimulation:
    """Test complete acceleration runs."""

    def test_first_step_scenario(self, plaid, dry_env):
        """First sample matches the hand-computed launch step."""
        result = simulate_ground_vehicle(plaid, dry_env)

        assert result.time[0] == 0.0
        assert result.distance[0] == 0.0
        assert result.acceleration[0] == pytest.approx(2.1558, abs=1e-4)
        assert result.g_force[0] == pytest.approx(0.2198, abs=1e-4)
        assert result.velocity[0] == pytest.approx(0.021558 * 3.6, rel=1e-3)

    def test_arrays_parallel_and_time_exact(self, plaid, dry_env):
        """All channels have equal length and time[i] == i * dt."""
        result = simulate_ground_vehicle(plaid, dry_env)
        n = result.num_samples

        assert n > 1
        assert len(result.distance) == len(result.velocity) == n
        assert len(result.acceleration) == len(result.g_force) == n
        assert np.array_equal(result.time, np.arange(n) * 0.01)

    def test_position_uses_previous_velocity(self, plaid, dry_env):
        """x_new = x + v * dt with v the pre-update velocity."""
        result = simulate_ground_vehicle(plaid, dry_env)
        v_mps = result.velocity / 3.6

        assert result.distance[1] == pytest.approx(v_mps[0] * 0.01)
        assert np.allclose(np.diff(result.distance), v_mps[:-1] * 0.01)

    def test_speed_cap_terminates(self, plaid, dry_env):
        """Fast car stops at the 150 km/h cap."""
        result = simulate_ground_vehicle(plaid, dry_env)

        assert result.category == VehicleCategory.CAR
        assert result.termination == TerminationReason.SPEED_CAP
        assert result.final_velocity > 150.0
        assert result.velocity[-2] <= 150.0
        assert result.simulation_duration == pytest.approx(result.time[-1])

    def test_zero_to_hundred_first_crossing(self, plaid, dry_env):
        """0-100 is the time of the first sample at or above 100 km/h."""
        result = simulate_ground_vehicle(plaid, dry_env)
        t100 = result.milestones.time_0_to_100

        assert isinstance(result.milestones, GroundMilestones)
        assert 2.5 < t100 < 3.5
        idx = int(round(t100 / 0.01))
        assert result.time[idx] == t100
        assert result.velocity[idx] >= 100.0
        assert result.velocity[idx - 1] < 100.0

    def test_distance_milestones(self, plaid, dry_env):
        """With the cap raised, 400 m and 1 km are both reached in order."""
        config = SimulatorConfig(terminal_velocity_kph=400.0)
        result = GroundVehicleSimulator(plaid, dry_env, config=config).run()
        m = result.milestones

        assert m.time_quarter_mile is not None
        assert m.time_1_km is not None
        assert m.time_0_to_100 < m.time_quarter_mile < m.time_1_km

        idx = int(round(m.time_1_km / 0.01))
        assert result.distance[idx] >= 1000.0
        assert result.distance[idx - 1] < 1000.0

    def test_never_reaches_hundred(self, dry_env):
        """A weak car settles below 100 km/h and reports no 0-100 time."""
        result = simulate_ground_vehicle(_weak_car(), dry_env)

        assert result.milestones.time_0_to_100 is None
        assert result.milestone("time_0_to_100") is None
        assert np.max(result.velocity) < 100.0
        assert result.termination in (TerminationReason.EQUILIBRIUM, TerminationReason.MAX_TIME)

    def test_icy_surface_is_slower(self, plaid, dry_env):
        """Less grip means a longer 0-100 time."""
        icy = EnvironmentConfig.create(15.0, 0.0, SurfaceCondition.ICY)
        dry_result = simulate_ground_vehicle(plaid, dry_env)
        icy_result = simulate_ground_vehicle(plaid, icy)

        assert icy_result.milestones.time_0_to_100 > dry_result.milestones.time_0_to_100

    def test_directly_built_environment(self, plaid):
        """A constructor-built environment with a surface name runs like create()."""
        direct = simulate_ground_vehicle(plaid, EnvironmentConfig(30.0, 2000.0, "WET"))
        created = simulate_ground_vehicle(plaid, EnvironmentConfig.create(30.0, 2000.0, "wet"))

        assert direct.num_samples == created.num_samples
        assert np.array_equal(direct.velocity, created.velocity)
        assert direct.milestones == created.milestones

    def test_power_multiplier_speeds_up_power_limited_car(self, dry_env):
        """More power helps a car that is power limited."""
        spec = _weak_car(horsepower=100.0, curb_weight_kg=1500.0,
                         drag_coefficient=0.3, drivetrain="AWD")
        base = simulate_ground_vehicle(spec, dry_env)
        boosted = simulate_ground_vehicle(spec, dry_env, power_multiplier=1.5)

        assert base.milestones.time_0_to_100 is not None
        assert boosted.milestones.time_0_to_100 < base.milestones.time_0_to_100

    def test_max_time_bounds_steps(self, plaid, dry_env):
        """Step count never exceeds max_time / dt + 1."""
        result = simulate_ground_vehicle(plaid, dry_env, max_time=1.0, dt=0.01)

        assert result.termination == TerminationReason.MAX_TIME
        assert result.num_samples <= int(1.0 / 0.01) + 1
        assert result.simulation_duration == pytest.approx(1.0)

    def test_zero_max_time_gives_empty_result(self, plaid, dry_env):
        """No steps are taken without any time budget."""
        result = simulate_ground_vehicle(plaid, dry_env, max_time=0.0)

        assert result.num_samples == 0
        assert result.final_velocity == 0.0
        assert result.final_distance == 0.0

    def test_deterministic(self, plaid, dry_env):
        """Identical inputs give bit-identical outputs."""
        a = simulate_ground_vehicle(plaid, dry_env)
        b = simulate_ground_vehicle(plaid, dry_env)

        assert np.array_equal(a.velocity, b.velocity)
        assert np.array_equal(a.distance, b.distance)
        assert a.milestones == b.milestones

    def test_rerun_does_not_carry_state(self, plaid, dry_env):
        """Running the same simulator twice gives the same result."""
        sim = GroundVehicleSimulator(plaid, dry_env)
        first = sim.run()
        second = sim.run()

        assert first.num_samples == second.num_samples
        assert first.milestones == second.milestones
