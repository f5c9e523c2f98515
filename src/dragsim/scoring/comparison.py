"""
Comparison - Head-to-head ranking of two simulation results.

Provides:
- CustomSettings: per-vehicle multipliers for a matchup
- ComparisonResult: both results plus the winner
- compare_results: pick a winner by the most meaningful shared metric
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from dragsim.simulation.result import SimulationResult

MULTIPLIER_MIN = 0.8
MULTIPLIER_MAX = 1.5


@dataclass(frozen=True)
class CustomSettings:
    """User tuning for a matchup."""
    vehicle_1_multiplier: float = 1.0
    vehicle_2_multiplier: float = 1.0
    use_afterburner: bool = True

    def __post_init__(self):
        for name in ("vehicle_1_multiplier", "vehicle_2_multiplier"):
            value = getattr(self, name)
            if not MULTIPLIER_MIN <= value <= MULTIPLIER_MAX:
                raise ValueError(
                    f"{name} must be within [{MULTIPLIER_MIN}, {MULTIPLIER_MAX}], got {value!r}"
                )


@dataclass(frozen=True, eq=False)
class ComparisonResult:
    """Outcome of comparing two runs."""
    vehicle_1: SimulationResult
    vehicle_2: SimulationResult
    winner: Optional[str] = None         # vehicle_id
    winner_metric: Optional[str] = None  # metric that decided it

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vehicle_1": self.vehicle_1.to_dict(),
            "vehicle_2": self.vehicle_2.to_dict(),
            "winner": self.winner,
            "winner_metric": self.winner_metric,
        }


def _lower_wins(a: SimulationResult, b: SimulationResult, metric: str) -> Optional[str]:
    va, vb = a.milestone(metric), b.milestone(metric)
    if va < vb:
        return a.vehicle_id
    if vb < va:
        return b.vehicle_id
    return None


def compare_results(
    vehicle_1: SimulationResult,
    vehicle_2: SimulationResult,
) -> ComparisonResult:
    """Decide which of two runs wins.

    Metrics, first applicable one decides:
    1. time_0_to_100 if both reached 100 km/h (lower wins)
    2. time_takeoff if both took off (lower wins)
    3. final_velocity (higher wins)

    Args:
        vehicle_1: First result
        vehicle_2: Second result

    Returns:
        ComparisonResult, winner None on a tie
    """
    for metric in ("time_0_to_100", "time_takeoff"):
        if vehicle_1.milestone(metric) is not None and vehicle_2.milestone(metric) is not None:
            winner = _lower_wins(vehicle_1, vehicle_2, metric)
            return ComparisonResult(
                vehicle_1, vehicle_2, winner, metric if winner else None,
            )

    winner = None
    if vehicle_1.final_velocity > vehicle_2.final_velocity:
        winner = vehicle_1.vehicle_id
    elif vehicle_2.final_velocity > vehicle_1.final_velocity:
        winner = vehicle_2.vehicle_id
    return ComparisonResult(
        vehicle_1, vehicle_2, winner, "final_velocity" if winner else None,
    )
