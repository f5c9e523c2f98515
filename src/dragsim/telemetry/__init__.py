"""
Telemetry module - Exporting simulation data.

This module contains:
- ResultExporter: Export results to JSON, CSV and NumPy formats
"""

from dragsim.telemetry.exporter import ExporterConfig, NumpyEncoder, ResultExporter

__all__ = [
    "ExporterConfig",
    "NumpyEncoder",
    "ResultExporter",
]
