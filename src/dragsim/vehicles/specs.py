"""
Vehicle specifications - Ground vehicle and jet aircraft data.

Provides:
- VehicleCategory discriminant ("car" / "fighter_jet")
- Drivetrain layout
- GroundVehicleSpec: curb weight, power, torque, drag
- AirborneVehicleSpec: thrust, weights, wing area, takeoff data
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, Union


class VehicleCategory(str, Enum):
    """Vehicle class discriminant."""
    CAR = "car"
    FIGHTER_JET = "fighter_jet"


class Drivetrain(str, Enum):
    """Driven wheels layout."""
    AWD = "AWD"
    RWD = "RWD"
    FWD = "FWD"

    @classmethod
    def parse(cls, value: "Drivetrain | str") -> "Drivetrain":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unknown drivetrain: {value!r}") from None


def _require_positive(spec: object, *names: str) -> None:
    for name in names:
        value = getattr(spec, name)
        if not value > 0:
            raise ValueError(f"{type(spec).__name__}.{name} must be positive, got {value!r}")


@dataclass(frozen=True)
class GroundVehicleSpec:
    """Ground vehicle (car) specification.

    Torque is only used to launch from rest; above walking pace the car is
    treated as power limited.
    """
    horsepower: float
    torque_nm: float
    curb_weight_kg: float
    drivetrain: Drivetrain
    drag_coefficient: float
    frontal_area_m2: float

    # Catalog metadata
    vehicle_id: str = "custom_car"
    name: str = "Custom Car"
    manufacturer: str = ""
    year: int = 0
    acceleration_0_100_s: Optional[float] = None  # published figure
    top_speed_kph: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "drivetrain", Drivetrain.parse(self.drivetrain))
        _require_positive(
            self, "horsepower", "torque_nm", "curb_weight_kg",
            "drag_coefficient", "frontal_area_m2",
        )

    @property
    def category(self) -> VehicleCategory:
        return VehicleCategory.CAR

    def to_dict(self) -> dict:
        """Catalog record with specs nested under "specs"."""
        data = asdict(self)
        specs = {
            "horsepower": data["horsepower"],
            "torque": data["torque_nm"],
            "curb_weight": data["curb_weight_kg"],
            "drivetrain": self.drivetrain.value,
            "drag_coefficient": data["drag_coefficient"],
            "frontal_area": data["frontal_area_m2"],
        }
        if self.acceleration_0_100_s is not None:
            specs["acceleration_0_100"] = self.acceleration_0_100_s
        if self.top_speed_kph is not None:
            specs["top_speed"] = self.top_speed_kph
        return {
            "id": self.vehicle_id,
            "name": self.name,
            "manufacturer": self.manufacturer,
            "category": self.category.value,
            "year": self.year,
            "specs": specs,
        }


@dataclass(frozen=True)
class AirborneVehicleSpec:
    """Jet aircraft specification for a runway takeoff roll.

    Thrust values are per aircraft in kN; takeoff speed is in km/h.
    """
    dry_thrust_kn: float
    wet_thrust_kn: float
    empty_weight_kg: float
    takeoff_weight_kg: float
    drag_coefficient: float
    wing_area_m2: float
    takeoff_speed_kph: float
    runway_length_m: float

    # Catalog metadata
    vehicle_id: str = "custom_jet"
    name: str = "Custom Jet"
    manufacturer: str = ""
    year: int = 0
    max_loaded_weight_kg: Optional[float] = None
    max_speed_kph: Optional[float] = None

    def __post_init__(self):
        _require_positive(
            self, "dry_thrust_kn", "wet_thrust_kn", "empty_weight_kg",
            "takeoff_weight_kg", "drag_coefficient", "wing_area_m2",
            "takeoff_speed_kph", "runway_length_m",
        )

    @property
    def category(self) -> VehicleCategory:
        return VehicleCategory.FIGHTER_JET

    @property
    def takeoff_speed_mps(self) -> float:
        return self.takeoff_speed_kph / 3.6

    def to_dict(self) -> dict:
        """Catalog record with specs nested under "specs"."""
        specs = {
            "dry_thrust": self.dry_thrust_kn,
            "wet_thrust": self.wet_thrust_kn,
            "empty_weight": self.empty_weight_kg,
            "takeoff_weight": self.takeoff_weight_kg,
            "drag_coefficient": self.drag_coefficient,
            "wing_area": self.wing_area_m2,
            "takeoff_speed": self.takeoff_speed_kph,
            "runway_length": self.runway_length_m,
        }
        if self.max_loaded_weight_kg is not None:
            specs["max_loaded_weight"] = self.max_loaded_weight_kg
        if self.max_speed_kph is not None:
            specs["max_speed"] = self.max_speed_kph
        return {
            "id": self.vehicle_id,
            "name": self.name,
            "manufacturer": self.manufacturer,
            "category": self.category.value,
            "year": self.year,
            "specs": specs,
        }


VehicleSpec = Union[GroundVehicleSpec, AirborneVehicleSpec]
