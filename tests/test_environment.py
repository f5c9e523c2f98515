"""Tests for the atmosphere model and environment conditions."""

import pytest
import numpy as np

from dragsim.constants import PHYSICS, PhysicsConstants
from dragsim.environment.atmosphere import AtmosphereModel, air_density, validate_air_density
from dragsim.environment.conditions import EnvironmentConfig, EnvironmentRanges, SurfaceCondition


class TestAtmosphereModel:
    """Test ISA air density."""

    def test_sea_level_calibration(self):
        """15 C at sea level should give ISA density within 1%."""
        rho = air_density(15.0, 0.0)
        assert rho == pytest.approx(1.225, rel=0.01)

    def test_validate_reports_pass(self):
        """Built-in calibration check should pass."""
        passed, message = validate_air_density()
        assert passed
        assert "1.2250" in message

    def test_density_decreases_with_altitude(self):
        """Density must be strictly decreasing from 0 to 10 km."""
        altitudes = np.linspace(0.0, 10000.0, 101)
        densities = AtmosphereModel().density_profile(15.0, altitudes)

        assert densities.shape == altitudes.shape
        assert np.all(np.diff(densities) < 0)

    def test_density_decreases_with_temperature(self):
        """Warmer air at sea level is thinner."""
        assert air_density(30.0, 0.0) < air_density(15.0, 0.0) < air_density(-10.0, 0.0)

    def test_known_altitude_value(self):
        """Density at 5 km in ISA conditions is roughly 0.736 kg/m^3."""
        assert air_density(15.0, 5000.0) == pytest.approx(0.736, rel=0.01)

    def test_absolute_zero_returns_floor(self):
        """Non-physical temperatures degrade to the density floor."""
        assert air_density(-273.15, 0.0) == PHYSICS.min_air_density
        assert air_density(-300.0, 0.0) == PHYSICS.min_air_density

    def test_extreme_altitude_returns_floor(self):
        """Temperature below 0 K at altitude degrades to the floor."""
        assert air_density(15.0, 50000.0) == PHYSICS.min_air_density

    def test_density_is_never_below_floor(self):
        """High but valid altitudes are clamped to the floor."""
        for altitude in (20000.0, 40000.0, 44000.0):
            rho = air_density(15.0, altitude)
            assert rho >= PHYSICS.min_air_density
            assert np.isfinite(rho)

    def test_custom_constants(self):
        """Model uses injected constants."""
        model = AtmosphereModel(PhysicsConstants(min_air_density=0.5))
        assert model.density(15.0, 50000.0) == 0.5

    def test_pressure_at_sea_level(self):
        """Surface pressure is the ISA reference."""
        assert AtmosphereModel().pressure_at(15.0, 0.0) == pytest.approx(101325.0)

    def test_pressure_exponent_is_positive(self):
        """Barometric exponent is +g/(R*L), so pressure falls with height."""
        model = AtmosphereModel()

        assert model.pressure_exponent == pytest.approx(9.81 / (287.05 * 0.0065))
        assert model.pressure_exponent > 0
        assert model.pressure_at(15.0, 1000.0) < model.pressure_at(15.0, 0.0)


class TestEnvironmentConfig:
    """Test environment construction."""

    def test_create_derives_density(self):
        """Density comes from the atmosphere model."""
        env = EnvironmentConfig.create(25.0, 1500.0, SurfaceCondition.WET)

        assert env.air_density == pytest.approx(air_density(25.0, 1500.0))
        assert env.surface_condition == SurfaceCondition.WET

    def test_surface_from_string(self):
        """Surface names are accepted case-insensitively."""
        env = EnvironmentConfig.create(surface_condition="ICY")
        assert env.surface_condition is SurfaceCondition.ICY

    def test_unknown_surface_raises(self):
        """Unknown surface names are rejected."""
        with pytest.raises(ValueError):
            EnvironmentConfig.create(surface_condition="gravel")

    def test_direct_construction_derives_density(self):
        """The plain constructor derives density as create does."""
        env = EnvironmentConfig(35.0, 3000.0)

        assert env.air_density == pytest.approx(air_density(35.0, 3000.0))
        assert env.air_density < 0.9
        assert env == EnvironmentConfig.create(35.0, 3000.0)

    def test_direct_construction_normalizes(self):
        """The plain constructor parses surfaces and clamps altitude."""
        env = EnvironmentConfig(15.0, -250.0, "WET")

        assert env.surface_condition is SurfaceCondition.WET
        assert env.altitude_m == 0.0
        assert env.air_density == pytest.approx(1.225, rel=1e-3)
        with pytest.raises(ValueError):
            EnvironmentConfig(surface_condition="gravel")

    def test_density_is_not_an_argument(self):
        """Density cannot be supplied by hand."""
        with pytest.raises(TypeError):
            EnvironmentConfig(15.0, 0.0, SurfaceCondition.DRY, 2.0)

    def test_negative_altitude_clamped(self):
        """Altitude below sea level is treated as 0."""
        env = EnvironmentConfig.create(15.0, -100.0)
        assert env.altitude_m == 0.0
        assert env.air_density == pytest.approx(air_density(15.0, 0.0))

    def test_to_dict(self):
        """Environment serializes with wire names."""
        data = EnvironmentConfig.create(20.0, 0.0, "dry").to_dict()
        assert data["surface_condition"] == "dry"
        assert set(data) == {"temperature", "altitude", "surface_condition", "air_density"}

    def test_ranges_clamp(self):
        """Values outside selectable ranges are clamped."""
        ranges = EnvironmentRanges()
        assert ranges.clamp(100.0, -5.0) == (60.0, 0.0)
        assert ranges.clamp(20.0, 2500.0) == (20.0, 2500.0)


class TestPhysicsConstants:
    """Test constant tables."""

    def test_friction_table(self):
        """Friction coefficient by surface."""
        assert PHYSICS.friction_coefficient(SurfaceCondition.DRY) == 1.0
        assert PHYSICS.friction_coefficient("wet") == 0.75
        assert PHYSICS.friction_coefficient(SurfaceCondition.ICY) == 0.35

    def test_weight_share_table(self):
        """Weight share by drivetrain."""
        assert PHYSICS.weight_share("AWD") == 1.0
        assert PHYSICS.weight_share("RWD") == 0.5
        assert PHYSICS.weight_share("FWD") == 0.55

    def test_tables_are_read_only(self):
        """Constant tables cannot be mutated."""
        with pytest.raises(TypeError):
            PHYSICS.friction_coeffs["dry"] = 2.0
