"""
Simulation result - Immutable output record of a single run.

Provides:
- Five parallel sample arrays (time, distance, velocity, acceleration, g-force)
- Class-specific milestones (car: 0-100, 400 m, 1 km; jet: takeoff)
- Final state and termination reason
- Wire-format dictionary
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Union
import numpy as np

from dragsim.vehicles.specs import VehicleCategory


class TerminationReason(str, Enum):
    """Why the simulation loop stopped."""
    EQUILIBRIUM = "equilibrium"            # |a| below threshold
    SPEED_CAP = "speed_cap"                # ground terminal velocity cap
    TAKEOFF_COMPLETE = "takeoff_complete"  # jet rolled 1 s past rotation
    OVERRUN = "overrun"                    # jet passed 1.5x runway length
    MAX_TIME = "max_time"


@dataclass(frozen=True)
class GroundMilestones:
    """Car milestones, in seconds. None if never reached."""
    time_0_to_100: Optional[float] = None
    time_quarter_mile: Optional[float] = None  # 400 m
    time_1_km: Optional[float] = None


@dataclass(frozen=True)
class AirborneMilestones:
    """Jet milestones. None if the aircraft never reached takeoff speed."""
    time_takeoff: Optional[float] = None   # s
    runway_distance: Optional[float] = None  # m

    @property
    def took_off(self) -> bool:
        return self.time_takeoff is not None


Milestones = Union[GroundMilestones, AirborneMilestones]

# Order of keys in the serialized record
WIRE_MILESTONES = ("time_0_to_100", "time_quarter_mile", "time_1_km", "time_takeoff")


def _frozen_array(values) -> np.ndarray:
    array = np.array(values, dtype=float)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class SimulationResult:
    """Output of one ground or airborne simulation.

    All sample arrays have the same length and are read-only.
    ``time[i] == i * dt`` for every sample.
    """
    vehicle_id: str
    vehicle_name: str
    category: VehicleCategory

    time: np.ndarray          # s
    distance: np.ndarray      # m
    velocity: np.ndarray      # km/h
    acceleration: np.ndarray  # m/s^2
    g_force: np.ndarray       # g

    milestones: Milestones
    simulation_duration: float
    termination: TerminationReason
    dt: float = 0.01

    def __post_init__(self):
        for name in ("time", "distance", "velocity", "acceleration", "g_force"):
            object.__setattr__(self, name, _frozen_array(getattr(self, name)))

        lengths = {len(self.time), len(self.distance), len(self.velocity),
                   len(self.acceleration), len(self.g_force)}
        if len(lengths) != 1:
            raise ValueError(f"Sample arrays differ in length: {sorted(lengths)}")

    @property
    def num_samples(self) -> int:
        return len(self.time)

    @property
    def final_velocity(self) -> float:
        """Last recorded velocity in km/h (0 for an empty run)."""
        return float(self.velocity[-1]) if self.num_samples else 0.0

    @property
    def final_distance(self) -> float:
        """Last recorded distance in m (0 for an empty run)."""
        return float(self.distance[-1]) if self.num_samples else 0.0

    @property
    def max_g_force(self) -> float:
        return float(np.max(self.g_force)) if self.num_samples else 0.0

    def milestone(self, name: str) -> Optional[float]:
        """Milestone value by wire name, None if absent for this class."""
        return getattr(self.milestones, name, None)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire format shared with front ends.

        Milestones that do not apply to the vehicle class, or were never
        reached, are None.
        """
        data: Dict[str, Any] = {
            "vehicle_id": self.vehicle_id,
            "vehicle_name": self.vehicle_name,
            "category": self.category.value,
            "time_array": self.time.tolist(),
            "distance_array": self.distance.tolist(),
            "velocity_array": self.velocity.tolist(),
            "acceleration_array": self.acceleration.tolist(),
            "g_force_array": self.g_force.tolist(),
        }
        for name in WIRE_MILESTONES:
            data[name] = self.milestone(name)
        data["final_velocity"] = self.final_velocity
        data["final_distance"] = self.final_distance
        data["runway_distance"] = self.milestone("runway_distance")
        data["simulation_duration"] = self.simulation_duration
        return data

    def summary(self) -> Dict[str, Any]:
        """Scalar fields only, for logging and tables."""
        data = {f.name: getattr(self.milestones, f.name) for f in fields(self.milestones)}
        data.update({
            "vehicle_id": self.vehicle_id,
            "category": self.category.value,
            "samples": self.num_samples,
            "final_velocity": round(self.final_velocity, 3),
            "final_distance": round(self.final_distance, 3),
            "simulation_duration": round(self.simulation_duration, 3),
            "termination": self.termination.value,
        })
        return data
