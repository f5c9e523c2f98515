"""
Physical constants - Immutable tuning tables shared by every simulation.

Provides:
- Gravity, gas constant and ISA reference values
- Tire friction coefficients per surface condition
- Traction weight share per drivetrain
- Ground and jet tuning values (wheel radius, rolling resistance, derating)
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _frozen(values: dict) -> Mapping[str, float]:
    return MappingProxyType(dict(values))


@dataclass(frozen=True)
class PhysicsConstants:
    """Physics and tuning constants.

    A single instance (``PHYSICS``) is built at import time and shared
    read-only by every simulator.
    """
    # Gravity
    gravity: float = 9.81                 # m/s^2

    # Air
    r_specific: float = 287.05            # J/(kg*K)
    isa_temp_kelvin: float = 288.15       # 15 C
    isa_pressure_pa: float = 101325.0
    isa_density: float = 1.225            # kg/m^3
    lapse_rate: float = 0.0065            # K/m, troposphere
    min_air_density: float = 0.01         # kg/m^3 floor

    # Ground vehicle
    wheel_radius_m: float = 0.33
    rolling_resistance_coeff: float = 0.013
    watts_per_hp: float = 745.7
    standstill_speed_mps: float = 0.1     # below this, torque limited

    # Jet
    derate_start_kph: float = 1200.0
    derate_span_kph: float = 2000.0
    derate_max_loss: float = 0.2
    derate_floor: float = 0.8

    # Surface -> tire friction coefficient
    friction_coeffs: Mapping[str, float] = field(default_factory=lambda: _frozen({
        "dry": 1.0,
        "wet": 0.75,
        "icy": 0.35,
    }))

    # Drivetrain -> share of weight on driven wheels
    weight_distribution: Mapping[str, float] = field(default_factory=lambda: _frozen({
        "AWD": 1.0,
        "RWD": 0.5,
        "FWD": 0.55,
    }))

    def friction_coefficient(self, surface: str) -> float:
        """Tire friction coefficient for a surface condition.

        Args:
            surface: Surface name ("dry", "wet" or "icy")

        Returns:
            Friction coefficient mu
        """
        return self.friction_coeffs[getattr(surface, "value", surface)]

    def weight_share(self, drivetrain: str) -> float:
        """Fraction of vehicle weight on the driven wheels.

        Args:
            drivetrain: Drivetrain name ("AWD", "RWD" or "FWD")

        Returns:
            Weight share in [0, 1]
        """
        return self.weight_distribution[getattr(drivetrain, "value", drivetrain)]


PHYSICS = PhysicsConstants()
