"""
Atmosphere model - ISA troposphere air density.

Maps a surface temperature and an altitude to air density using the
International Standard Atmosphere lapse-rate model. Out-of-range inputs
degrade to a density floor instead of raising.
"""

from typing import Tuple
import numpy as np

from dragsim.constants import PhysicsConstants, PHYSICS


class AtmosphereModel:
    """ISA troposphere model (h <= 11 km).

    T(h) = T0 - L*h
    P(h) = P0 * (T(h)/T0)^(g/(R*L))
    rho  = P(h) / (R * T(h))

    The exponent is positive. The form P0 * (T(h)/T0)^(-g/(R*L)), seen in
    some write-ups of this model, makes pressure and density grow with
    altitude since T(h)/T0 < 1; it is not used here.
    """

    def __init__(self, constants: PhysicsConstants | None = None):
        """Initialize atmosphere model.

        Args:
            constants: Physical constants. Uses the shared set if None.
        """
        self.constants = constants or PHYSICS

    @property
    def pressure_exponent(self) -> float:
        """Barometric exponent g/(R*L)."""
        c = self.constants
        return c.gravity / (c.r_specific * c.lapse_rate)

    def temperature_at(self, temperature_c: float, altitude_m: float) -> float:
        """Absolute temperature at altitude.

        Args:
            temperature_c: Surface temperature in Celsius
            altitude_m: Altitude in meters

        Returns:
            Temperature in Kelvin (may be <= 0 for nonsense inputs)
        """
        return (temperature_c + 273.15) - self.constants.lapse_rate * altitude_m

    def pressure_at(self, temperature_c: float, altitude_m: float) -> float:
        """Static pressure at altitude in Pa, 0.0 if temperature is non-physical."""
        surface_k = temperature_c + 273.15
        temp_k = self.temperature_at(temperature_c, altitude_m)
        if temp_k <= 0 or surface_k <= 0:
            return 0.0
        return self.constants.isa_pressure_pa * (temp_k / surface_k) ** self.pressure_exponent

    def density(self, temperature_c: float, altitude_m: float) -> float:
        """Calculate air density.

        Args:
            temperature_c: Surface temperature in Celsius
            altitude_m: Altitude in meters

        Returns:
            Air density in kg/m^3, never below the configured floor
        """
        floor = self.constants.min_air_density
        temp_k = self.temperature_at(temperature_c, altitude_m)
        if temp_k <= 0:
            return floor

        pressure = self.pressure_at(temperature_c, altitude_m)
        density = pressure / (self.constants.r_specific * temp_k)
        return float(max(density, floor))

    def density_profile(self, temperature_c: float, altitudes_m: np.ndarray) -> np.ndarray:
        """Air density over a range of altitudes.

        Args:
            temperature_c: Surface temperature in Celsius
            altitudes_m: Altitudes in meters

        Returns:
            Array of densities, same shape as altitudes_m
        """
        altitudes = np.asarray(altitudes_m, dtype=float)
        return np.array([self.density(temperature_c, h) for h in altitudes.ravel()]).reshape(altitudes.shape)


_DEFAULT_MODEL = AtmosphereModel()


def air_density(temperature_c: float, altitude_m: float) -> float:
    """Air density in kg/m^3 for a surface temperature and altitude."""
    return _DEFAULT_MODEL.density(temperature_c, altitude_m)


def validate_air_density(tolerance: float = 0.01) -> Tuple[bool, str]:
    """Check the model against ISA sea level (15 C, 0 m -> 1.225 kg/m^3).

    Args:
        tolerance: Allowed relative error

    Returns:
        Tuple of (passed, human readable result)
    """
    rho_sl = air_density(15.0, 0.0)
    expected = PHYSICS.isa_density
    error = abs(rho_sl - expected) / expected

    passed = error < tolerance
    message = (
        f"ISA SL: {rho_sl:.4f} kg/m^3 "
        f"(Expected: {expected}, Error: {error * 100:.2f}%)"
    )
    return passed, message
