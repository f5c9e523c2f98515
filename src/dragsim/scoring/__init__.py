"""
Scoring module - Comparing simulation results.

This module contains:
- compare_results: Head-to-head winner selection
- ComparisonResult: Comparison outcome
- CustomSettings: Matchup multipliers
"""

from dragsim.scoring.comparison import ComparisonResult, CustomSettings, compare_results

__all__ = [
    "ComparisonResult",
    "CustomSettings",
    "compare_results",
]
