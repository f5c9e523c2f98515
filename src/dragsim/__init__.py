"""
dragsim - Straight-line acceleration simulator for cars and fighter jets.

This package provides a deterministic fixed-step simulation with:
- ISA atmosphere model for air density
- Traction and power limited car acceleration
- Thrust and drag limited jet takeoff rolls
- Built-in vehicle catalog
- Result comparison and export
"""

__version__ = "0.1.0"

from dragsim.environment.atmosphere import air_density
from dragsim.environment.conditions import EnvironmentConfig, SurfaceCondition
from dragsim.simulation.ground import simulate_ground_vehicle
from dragsim.simulation.airborne import simulate_airborne_vehicle
from dragsim.simulation.result import SimulationResult
from dragsim.simulation.runner import simulate_vehicle
from dragsim.vehicles.catalog import VehicleCatalog, VehicleNotFound

__all__ = [
    "air_density",
    "EnvironmentConfig",
    "SurfaceCondition",
    "simulate_ground_vehicle",
    "simulate_airborne_vehicle",
    "SimulationResult",
    "simulate_vehicle",
    "VehicleCatalog",
    "VehicleNotFound",
    "__version__",
]
