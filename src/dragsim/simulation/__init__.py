"""
Simulation module - Fixed-step longitudinal simulation.

This module contains:
- Stepper: Shared explicit-Euler loop
- GroundVehicleSimulator: Car acceleration runs
- AirborneVehicleSimulator: Jet takeoff rolls
- SimulationResult: Immutable run output
"""

from dragsim.simulation.result import (
    AirborneMilestones,
    GroundMilestones,
    SimulationResult,
    TerminationReason,
)
from dragsim.simulation.stepper import MilestoneLatch, SimulatorConfig, StepForces, Stepper
from dragsim.simulation.ground import GroundVehicleSimulator, simulate_ground_vehicle
from dragsim.simulation.airborne import AirborneVehicleSimulator, simulate_airborne_vehicle
from dragsim.simulation.runner import simulate_spec, simulate_vehicle

__all__ = [
    "AirborneMilestones",
    "GroundMilestones",
    "SimulationResult",
    "TerminationReason",
    "MilestoneLatch",
    "SimulatorConfig",
    "StepForces",
    "Stepper",
    "GroundVehicleSimulator",
    "simulate_ground_vehicle",
    "AirborneVehicleSimulator",
    "simulate_airborne_vehicle",
    "simulate_spec",
    "simulate_vehicle",
]
