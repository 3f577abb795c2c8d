"""
simulation/analysis_report.py

Aggregate analysis of a CircuitModel at one frequency: resistance and
impedance magnitude for each group, plus the combined series+parallel
figures shown when both groups are populated.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from ..models.circuit import CircuitModel
from .impedance import (
    angular_frequency,
    parallel_impedance_magnitude,
    parallel_resistance,
    series_impedance_magnitude,
    series_resistance,
)

logger = logging.getLogger(__name__)

DEFAULT_FREQUENCY_HZ = 50.0


@dataclass(frozen=True)
class AnalysisReport:
    """Totals for both groups at ``frequency_hz``."""

    frequency_hz: float
    series_resistance: float
    series_impedance_magnitude: float
    parallel_resistance: float
    parallel_impedance_magnitude: float
    component_count: int
    series_count: int
    parallel_count: int

    @property
    def has_both_groups(self) -> bool:
        return self.series_count > 0 and self.parallel_count > 0

    @property
    def combined_resistance(self) -> Optional[float]:
        """Series R plus parallel R, only when both groups have members."""
        if not self.has_both_groups:
            return None
        return self.series_resistance + self.parallel_resistance

    @property
    def combined_impedance_magnitude(self) -> Optional[float]:
        """Series |Z| plus parallel |Z|, only when both groups have members."""
        if not self.has_both_groups:
            return None
        return self.series_impedance_magnitude + self.parallel_impedance_magnitude

    def to_dict(self) -> dict:
        data = asdict(self)
        data["combined_resistance"] = self.combined_resistance
        data["combined_impedance_magnitude"] = self.combined_impedance_magnitude
        return data

    def summary(self) -> str:
        """Multi-line 'Circuit Analysis Report' text."""
        lines = [
            "Circuit Analysis Report",
            f"Frequency: {self.frequency_hz:.1f} Hz",
            f"Series: {self.series_count} components | "
            f"R = {self.series_resistance:.3f} Ohm | Z = {self.series_impedance_magnitude:.3f} Ohm",
            f"Parallel: {self.parallel_count} components | "
            f"R = {self.parallel_resistance:.3f} Ohm | Z = {self.parallel_impedance_magnitude:.3f} Ohm",
        ]
        if self.has_both_groups:
            lines.append("COMBINED (Series + Parallel):")
            lines.append(
                f"Total R = {self.combined_resistance:.3f} Ohm | "
                f"Total Z = {self.combined_impedance_magnitude:.3f} Ohm"
            )
        elif self.series_count:
            lines.append("Only Series Circuit (Resistance dominates)")
        elif self.parallel_count:
            lines.append("Only Parallel Circuit (Resistance dominates)")
        else:
            lines.append("No components added yet!")
        return "\n".join(lines)


def analyze(model: CircuitModel, frequency_hz: float = DEFAULT_FREQUENCY_HZ) -> AnalysisReport:
    """Compute an AnalysisReport for the model's current group membership."""
    angular_frequency(frequency_hz)
    components = model.components
    report = AnalysisReport(
        frequency_hz=float(frequency_hz),
        series_resistance=series_resistance(components, model.series),
        series_impedance_magnitude=series_impedance_magnitude(
            components, model.series, frequency_hz
        ),
        parallel_resistance=parallel_resistance(components, model.parallel),
        parallel_impedance_magnitude=parallel_impedance_magnitude(
            components, model.parallel, frequency_hz
        ),
        component_count=model.component_count,
        series_count=model.series_count,
        parallel_count=model.parallel_count,
    )
    logger.debug("Analyzed %d components at %s Hz", report.component_count, frequency_hz)
    return report
