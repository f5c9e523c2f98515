"""
Result exporter - Export simulation results to various formats.

Provides:
- JSON export (wire format)
- CSV export (one row per sample)
- NumPy compressed export
"""

from dataclasses import dataclass
from typing import Iterable
from pathlib import Path
import json
import csv
import numpy as np

from dragsim.simulation.result import SimulationResult, WIRE_MILESTONES

CSV_COLUMNS = ("time_s", "distance_m", "velocity_kph", "acceleration_mps2", "g_force")


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy and enum types."""

    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if hasattr(obj, "value"):
            return obj.value
        return super().default(obj)


@dataclass
class ExporterConfig:
    """Exporter configuration."""
    output_dir: str = "./simulation_data"
    include_summary: bool = True
    precision: int = 4


class ResultExporter:
    """Export simulation results to files for external tools."""

    def __init__(self, config: ExporterConfig | None = None):
        """Initialize exporter.

        Args:
            config: Exporter configuration
        """
        self.config = config or ExporterConfig()

        self._output_path = Path(self.config.output_dir)
        self._output_path.mkdir(parents=True, exist_ok=True)

    @property
    def output_path(self) -> Path:
        return self._output_path

    def export_json(
        self,
        result: SimulationResult,
        filename: str | None = None,
    ) -> Path:
        """Export a result in wire format.

        Args:
            result: Simulation result
            filename: Output filename (defaults to "<vehicle_id>.json")

        Returns:
            Path to exported file
        """
        output_file = self._output_path / (filename or f"{result.vehicle_id}.json")

        data = result.to_dict()
        if self.config.include_summary:
            data["summary"] = result.summary()

        with open(output_file, 'w') as f:
            json.dump(data, f, indent=2, cls=NumpyEncoder)

        return output_file

    def export_csv(
        self,
        result: SimulationResult,
        filename: str | None = None,
    ) -> Path:
        """Export the sample arrays to CSV.

        Args:
            result: Simulation result
            filename: Output filename (defaults to "<vehicle_id>.csv")

        Returns:
            Path to exported file
        """
        output_file = self._output_path / (filename or f"{result.vehicle_id}.csv")
        p = self.config.precision

        with open(output_file, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(CSV_COLUMNS)

            rows = zip(result.time, result.distance, result.velocity,
                       result.acceleration, result.g_force)
            for row in rows:
                writer.writerow([f"{value:.{p}f}" for value in row])

        return output_file

    def export_numpy(
        self,
        result: SimulationResult,
        filename: str | None = None,
    ) -> Path:
        """Export the sample arrays and milestones to a compressed .npz.

        Absent milestones are stored as NaN.

        Args:
            result: Simulation result
            filename: Output filename (defaults to "<vehicle_id>.npz")

        Returns:
            Path to exported file
        """
        output_file = self._output_path / (filename or f"{result.vehicle_id}.npz")

        arrays = {
            "time": result.time,
            "distance": result.distance,
            "velocity": result.velocity,
            "acceleration": result.acceleration,
            "g_force": result.g_force,
        }
        for name in (*WIRE_MILESTONES, "runway_distance"):
            value = result.milestone(name)
            arrays[name] = np.array(np.nan if value is None else value)

        np.savez_compressed(output_file, **arrays)

        return output_file

    def export_comparison_csv(
        self,
        results: Iterable[SimulationResult],
        filename: str = "comparison.csv",
    ) -> Path:
        """Export one summary row per result.

        Args:
            results: Simulation results
            filename: Output filename

        Returns:
            Path to exported file
        """
        output_file = self._output_path / filename
        header = ["vehicle_id", "category", *WIRE_MILESTONES, "runway_distance",
                  "final_velocity", "final_distance", "simulation_duration"]

        with open(output_file, 'w', newline='') as f:
            writer = csv.writer(f)
            writer.writerow(header)
            for result in results:
                data = result.to_dict()
                writer.writerow(["" if data[key] is None else data[key] for key in header])

        return output_file
