#!/usr/bin/env python3
"""
Basic Drag Race Example

This example demonstrates how to:
1. Look up vehicles in the built-in catalog
2. Build environment conditions with ISA air density
3. Run a car acceleration and a jet takeoff roll
4. Compare two cars and export the results

Run with: python run_drag_race.py
"""

import logging

from dragsim import EnvironmentConfig, VehicleCatalog
from dragsim.environment import validate_air_density
from dragsim.scoring import compare_results
from dragsim.simulation import simulate_spec
from dragsim.telemetry import ResultExporter


def main():
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    print("=" * 60)
    print("dragsim Basic Drag Race Example")
    print("=" * 60)

    # Step 1: Catalog
    print("\n1. Vehicles in catalog:")
    catalog = VehicleCatalog()
    for spec in catalog.all():
        print(f"   {spec.vehicle_id:<24} {spec.name} ({spec.category.value})")

    # Step 2: Environment
    print("\n2. Environment...")
    passed, message = validate_air_density()
    print(f"   Calibration: {message} {'OK' if passed else 'FAILED'}")
    env = EnvironmentConfig.create(temperature_c=25.0, altitude_m=1500.0, surface_condition="dry")
    print(f"   25 C at 1500 m: rho = {env.air_density:.4f} kg/m^3")

    # Step 3: Run simulations
    print("\n3. Running simulations...")
    plaid = simulate_spec(catalog.get("tesla_model_s_plaid"), env)
    chiron = simulate_spec(catalog.get("bugatti_chiron"), env)
    viper = simulate_spec(catalog.get("f16_viper"), env)

    for result in (plaid, chiron):
        print(f"   {result.vehicle_name}: 0-100 = {result.milestone('time_0_to_100')} s, "
              f"final {result.final_velocity:.1f} km/h ({result.termination.value})")
    print(f"   {viper.vehicle_name}: takeoff at {viper.milestone('time_takeoff')} s "
          f"after {viper.milestone('runway_distance')} m")

    # Step 4: Compare and export
    print("\n4. Comparison:")
    comparison = compare_results(plaid, chiron)
    print(f"   Winner: {comparison.winner} by {comparison.winner_metric}")

    exporter = ResultExporter()
    path = exporter.export_comparison_csv([plaid, chiron, viper])
    print(f"   Summary written to {path}")

    print("\n" + "=" * 60)
    print("Simulation complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
