"""
Analysis for the circuit analyzer.

Pure functions over component data: per-component complex impedance,
series/parallel reductions and the aggregate analysis report.
"""

from .analysis_report import DEFAULT_FREQUENCY_HZ, AnalysisReport, analyze
from .impedance import (
    OPEN_CIRCUIT_IMPEDANCE,
    angular_frequency,
    component_impedance,
    is_open_circuit,
    parallel_impedance_magnitude,
    parallel_resistance,
    series_impedance_magnitude,
    series_resistance,
)

__all__ = [
    "AnalysisReport",
    "DEFAULT_FREQUENCY_HZ",
    "OPEN_CIRCUIT_IMPEDANCE",
    "analyze",
    "angular_frequency",
    "component_impedance",
    "is_open_circuit",
    "parallel_impedance_magnitude",
    "parallel_resistance",
    "series_impedance_magnitude",
    "series_resistance",
]
