"""
Environment module - Atmosphere and surface conditions.

This module contains:
- AtmosphereModel: ISA air density
- EnvironmentConfig: Temperature, altitude, surface and derived density
- SurfaceCondition: Dry / wet / icy
"""

from dragsim.environment.atmosphere import AtmosphereModel, air_density, validate_air_density
from dragsim.environment.conditions import EnvironmentConfig, EnvironmentRanges, SurfaceCondition

__all__ = [
    "AtmosphereModel",
    "air_density",
    "validate_air_density",
    "EnvironmentConfig",
    "EnvironmentRanges",
    "SurfaceCondition",
]
