"""
Environment conditions - Weather and surface state for a run.

Manages:
- Surface condition (dry, wet, icy)
- Temperature and altitude
- Derived air density
"""

from dataclasses import dataclass, field
from enum import Enum
import numpy as np

from dragsim.environment.atmosphere import air_density


class SurfaceCondition(str, Enum):
    """Road/runway surface condition."""
    DRY = "dry"
    WET = "wet"
    ICY = "icy"

    @classmethod
    def parse(cls, value: "SurfaceCondition | str") -> "SurfaceCondition":
        """Convert a string to a SurfaceCondition.

        Raises:
            ValueError: If the value is not a known surface
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Unknown surface condition: {value!r}") from None


@dataclass(frozen=True)
class EnvironmentConfig:
    """Environmental conditions affecting a simulation.

    Air density is always derived from temperature and altitude and is
    not a constructor argument. Negative altitudes are treated as sea
    level and surface names are parsed case-insensitively.
    """
    temperature_c: float = 15.0
    altitude_m: float = 0.0
    surface_condition: SurfaceCondition = SurfaceCondition.DRY
    air_density: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "temperature_c", float(self.temperature_c))
        object.__setattr__(self, "altitude_m", max(float(self.altitude_m), 0.0))
        object.__setattr__(self, "surface_condition", SurfaceCondition.parse(self.surface_condition))
        object.__setattr__(self, "air_density", air_density(self.temperature_c, self.altitude_m))

    @classmethod
    def create(
        cls,
        temperature_c: float = 15.0,
        altitude_m: float = 0.0,
        surface_condition: SurfaceCondition | str = SurfaceCondition.DRY,
    ) -> "EnvironmentConfig":
        """Create an environment with density from the ISA model.

        Args:
            temperature_c: Surface temperature in Celsius
            altitude_m: Altitude in meters (negative values are treated as 0)
            surface_condition: Surface condition or its name

        Returns:
            New EnvironmentConfig
        """
        return cls(temperature_c, altitude_m, surface_condition)

    def to_dict(self) -> dict:
        return {
            "temperature": self.temperature_c,
            "altitude": self.altitude_m,
            "surface_condition": self.surface_condition.value,
            "air_density": self.air_density,
        }


@dataclass(frozen=True)
class EnvironmentRanges:
    """Selectable environment ranges for front ends."""
    temperature_min_c: float = -40.0
    temperature_max_c: float = 60.0
    temperature_step_c: float = 5.0

    altitude_min_m: float = 0.0
    altitude_max_m: float = 5000.0
    altitude_step_m: float = 500.0

    def clamp(self, temperature_c: float, altitude_m: float) -> tuple[float, float]:
        """Clamp temperature and altitude into the selectable range."""
        return (
            float(np.clip(temperature_c, self.temperature_min_c, self.temperature_max_c)),
            float(np.clip(altitude_m, self.altitude_min_m, self.altitude_max_m)),
        )
