"""
Vehicles module - Vehicle specifications and catalog.

This module contains:
- GroundVehicleSpec / AirborneVehicleSpec: Vehicle data
- VehicleCatalog: Built-in vehicles and lookup by id
"""

from dragsim.vehicles.specs import (
    AirborneVehicleSpec,
    Drivetrain,
    GroundVehicleSpec,
    VehicleCategory,
    VehicleSpec,
)
from dragsim.vehicles.catalog import VehicleCatalog, VehicleNotFound, BUILTIN_CARS, BUILTIN_JETS

__all__ = [
    "AirborneVehicleSpec",
    "Drivetrain",
    "GroundVehicleSpec",
    "VehicleCategory",
    "VehicleSpec",
    "VehicleCatalog",
    "VehicleNotFound",
    "BUILTIN_CARS",
    "BUILTIN_JETS",
]
