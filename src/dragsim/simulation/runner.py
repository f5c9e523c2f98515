"""
Runner - Simulate a catalog vehicle under given conditions.

Looks up the vehicle, derives the environment's air density and dispatches
to the ground or airborne simulator by vehicle class.
"""

import logging

from dragsim.environment.conditions import EnvironmentConfig, SurfaceCondition
from dragsim.simulation.airborne import simulate_airborne_vehicle
from dragsim.simulation.ground import simulate_ground_vehicle
from dragsim.simulation.result import SimulationResult
from dragsim.vehicles.catalog import VehicleCatalog
from dragsim.vehicles.specs import AirborneVehicleSpec, GroundVehicleSpec, VehicleSpec

logger = logging.getLogger(__name__)

_DEFAULT_CATALOG: VehicleCatalog | None = None


def default_catalog() -> VehicleCatalog:
    """Shared catalog of built-in vehicles."""
    global _DEFAULT_CATALOG
    if _DEFAULT_CATALOG is None:
        _DEFAULT_CATALOG = VehicleCatalog()
    return _DEFAULT_CATALOG


def simulate_spec(
    spec: VehicleSpec,
    environment: EnvironmentConfig,
    power_multiplier: float = 1.0,
    thrust_multiplier: float = 1.0,
    use_afterburner: bool = True,
    use_takeoff_weight: bool = True,
    max_time: float = 120.0,
    dt: float = 0.01,
) -> SimulationResult:
    """Run the simulator matching the spec's vehicle class.

    Args:
        spec: Vehicle specification
        environment: Environment conditions
        power_multiplier: Horsepower scale (cars)
        thrust_multiplier: Thrust scale (jets)
        use_afterburner: Use wet thrust (jets)
        use_takeoff_weight: Use takeoff weight, else empty weight (jets)
        max_time: Time limit in seconds
        dt: Time step in seconds

    Returns:
        SimulationResult for the vehicle
    """
    if isinstance(spec, GroundVehicleSpec):
        return simulate_ground_vehicle(spec, environment, power_multiplier, max_time, dt)
    if isinstance(spec, AirborneVehicleSpec):
        return simulate_airborne_vehicle(
            spec,
            environment,
            use_takeoff_weight=use_takeoff_weight,
            use_afterburner=use_afterburner,
            thrust_multiplier=thrust_multiplier,
            max_time=max_time,
            dt=dt,
        )
    raise TypeError(f"Unsupported vehicle spec: {type(spec).__name__}")


def simulate_vehicle(
    vehicle_id: str,
    temperature_c: float = 15.0,
    altitude_m: float = 0.0,
    surface_condition: SurfaceCondition | str = SurfaceCondition.DRY,
    power_multiplier: float = 1.0,
    thrust_multiplier: float = 1.0,
    use_afterburner: bool = True,
    catalog: VehicleCatalog | None = None,
) -> SimulationResult:
    """Simulate a catalog vehicle.

    Args:
        vehicle_id: Catalog identifier
        temperature_c: Surface temperature in Celsius
        altitude_m: Altitude in meters
        surface_condition: Surface condition or its name
        power_multiplier: Horsepower scale (cars)
        thrust_multiplier: Thrust scale (jets)
        use_afterburner: Use wet thrust (jets)
        catalog: Catalog to search. Uses the built-in catalog if None.

    Returns:
        SimulationResult for the vehicle

    Raises:
        VehicleNotFound: If vehicle_id is not in the catalog
    """
    catalog = catalog or default_catalog()
    spec = catalog.get(vehicle_id)
    environment = EnvironmentConfig.create(temperature_c, altitude_m, surface_condition)

    logger.info(
        "Simulating %s at %.1f C, %.0f m, %s (rho=%.4f)",
        vehicle_id, environment.temperature_c, environment.altitude_m,
        environment.surface_condition.value, environment.air_density,
    )
    result = simulate_spec(
        spec,
        environment,
        power_multiplier=power_multiplier,
        thrust_multiplier=thrust_multiplier,
        use_afterburner=use_afterburner,
    )
    logger.info("Finished %s: %s", vehicle_id, result.summary())
    return result
