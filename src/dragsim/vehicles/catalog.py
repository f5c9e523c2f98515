"""
Vehicle catalog - Lookup of built-in and registered vehicles.

Manages:
- Built-in cars and fighter jets
- Registration of custom vehicles
- Lookup by identifier
"""

import logging
from typing import Dict, List, Iterable

from dragsim.vehicles.specs import (
    AirborneVehicleSpec,
    Drivetrain,
    GroundVehicleSpec,
    VehicleCategory,
    VehicleSpec,
)

logger = logging.getLogger(__name__)


class VehicleNotFound(KeyError):
    """Raised when a vehicle identifier is not in the catalog."""

    def __init__(self, vehicle_id: str):
        super().__init__(vehicle_id)
        self.vehicle_id = vehicle_id

    def __str__(self) -> str:
        return f"Vehicle not found: {self.vehicle_id}"


BUILTIN_CARS: List[GroundVehicleSpec] = [
    GroundVehicleSpec(
        vehicle_id="bugatti_chiron",
        name="Bugatti Chiron",
        manufacturer="Bugatti",
        year=2016,
        horsepower=1500,
        torque_nm=1600,
        curb_weight_kg=1995,
        drivetrain=Drivetrain.AWD,
        drag_coefficient=0.34,
        frontal_area_m2=2.4,
        acceleration_0_100_s=2.4,
        top_speed_kph=420,
    ),
    GroundVehicleSpec(
        vehicle_id="tesla_model_s_plaid",
        name="Tesla Model S Plaid",
        manufacturer="Tesla",
        year=2021,
        horsepower=1020,
        torque_nm=1620,
        curb_weight_kg=2150,
        drivetrain=Drivetrain.AWD,
        drag_coefficient=0.208,
        frontal_area_m2=2.197,
        acceleration_0_100_s=2.15,
        top_speed_kph=322,
    ),
    GroundVehicleSpec(
        vehicle_id="lamborghini_aventador",
        name="Lamborghini Aventador",
        manufacturer="Lamborghini",
        year=2011,
        horsepower=740,
        torque_nm=690,
        curb_weight_kg=1575,
        drivetrain=Drivetrain.AWD,
        drag_coefficient=0.33,
        frontal_area_m2=2.5,
        acceleration_0_100_s=2.9,
        top_speed_kph=350,
    ),
]

BUILTIN_JETS: List[AirborneVehicleSpec] = [
    AirborneVehicleSpec(
        vehicle_id="f16_viper",
        name="F-16 Fighting Falcon",
        manufacturer="General Dynamics",
        year=1978,
        dry_thrust_kn=109,
        wet_thrust_kn=156,
        empty_weight_kg=7700,
        takeoff_weight_kg=16330,
        max_loaded_weight_kg=21320,
        drag_coefficient=0.025,
        wing_area_m2=27.87,
        takeoff_speed_kph=260,
        max_speed_kph=2124,
        runway_length_m=2400,
    ),
    AirborneVehicleSpec(
        vehicle_id="f15_eagle",
        name="F-15 Eagle",
        manufacturer="McDonnell Douglas",
        year=1972,
        dry_thrust_kn=65.3,
        wet_thrust_kn=100.6,
        empty_weight_kg=13054,
        takeoff_weight_kg=20610,
        max_loaded_weight_kg=30844,
        drag_coefficient=0.025,
        wing_area_m2=56.5,
        takeoff_speed_kph=280,
        max_speed_kph=2663,
        runway_length_m=1500,
    ),
]


class VehicleCatalog:
    """Container of vehicle specifications keyed by identifier.

    Usage:
        catalog = VehicleCatalog()
        spec = catalog.get("tesla_model_s_plaid")
    """

    def __init__(self, vehicles: Iterable[VehicleSpec] | None = None):
        """Initialize catalog.

        Args:
            vehicles: Initial vehicles. Uses the built-in set if None.
        """
        self._vehicles: Dict[str, VehicleSpec] = {}
        if vehicles is None:
            vehicles = [*BUILTIN_CARS, *BUILTIN_JETS]
        for spec in vehicles:
            self.register(spec)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __contains__(self, vehicle_id: object) -> bool:
        return vehicle_id in self._vehicles

    def register(self, spec: VehicleSpec, replace: bool = False) -> str:
        """Add a vehicle to the catalog.

        Args:
            spec: Vehicle specification
            replace: Overwrite an existing entry with the same id

        Returns:
            Vehicle ID

        Raises:
            ValueError: If the id is taken and replace is False
        """
        if spec.vehicle_id in self._vehicles and not replace:
            raise ValueError(f"Vehicle already registered: {spec.vehicle_id}")
        self._vehicles[spec.vehicle_id] = spec
        logger.debug("Registered %s (%s)", spec.vehicle_id, spec.category.value)
        return spec.vehicle_id

    def remove(self, vehicle_id: str) -> bool:
        """Remove a vehicle.

        Returns:
            True if the vehicle was removed
        """
        return self._vehicles.pop(vehicle_id, None) is not None

    def get(self, vehicle_id: str) -> VehicleSpec:
        """Look up a vehicle by id.

        Raises:
            VehicleNotFound: If no vehicle has this id
        """
        try:
            return self._vehicles[vehicle_id]
        except KeyError:
            raise VehicleNotFound(vehicle_id) from None

    def all(self) -> List[VehicleSpec]:
        return list(self._vehicles.values())

    def list_cars(self) -> List[GroundVehicleSpec]:
        return [v for v in self._vehicles.values() if v.category == VehicleCategory.CAR]

    def list_jets(self) -> List[AirborneVehicleSpec]:
        return [v for v in self._vehicles.values() if v.category == VehicleCategory.FIGHTER_JET]

    def to_dict(self) -> dict:
        """Catalog grouped by class, as served to front ends."""
        return {
            "cars": [car.to_dict() for car in self.list_cars()],
            "jets": [jet.to_dict() for jet in self.list_jets()],
        }
