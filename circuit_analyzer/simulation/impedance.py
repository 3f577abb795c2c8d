"""
simulation/impedance.py

Complex impedance of individual components and series/parallel reductions
at a single analysis frequency.

All functions are pure. Aggregates take the component mapping of a
CircuitModel plus an ordered id sequence; ids missing from the mapping are
skipped. Degenerate aggregates (nothing eligible, or a reciprocal sum of
exactly zero) come back as 0.0 rather than raising.
"""

import logging
import math
from typing import Iterable, Mapping

import numpy as np

from ..errors import InvalidFrequencyError
from ..models.component import ComponentData

logger = logging.getLogger(__name__)

# Stand-in for a zero-farad capacitor: a huge but finite real impedance
OPEN_CIRCUIT_IMPEDANCE = complex(1e10, 0.0)


def angular_frequency(frequency_hz: float) -> float:
    """Return omega = 2*pi*f, rejecting non-positive or non-finite f."""
    if not math.isfinite(frequency_hz) or frequency_hz <= 0:
        raise InvalidFrequencyError(
            f"Analysis frequency must be a positive number of hertz (got {frequency_hz})"
        )
    return 2.0 * math.pi * frequency_hz


def is_open_circuit(impedance: complex) -> bool:
    """True if *impedance* is the zero-capacitance open-circuit stand-in."""
    return impedance == OPEN_CIRCUIT_IMPEDANCE


def component_impedance(component: ComponentData, frequency_hz: float) -> complex:
    """
    Complex impedance of one component.

    Resistor: R. Inductor: j*omega*L. Capacitor: -j/(omega*C), or
    OPEN_CIRCUIT_IMPEDANCE when C == 0.
    """
    omega = angular_frequency(frequency_hz)
    if component.component_type == "Resistor":
        return complex(component.value, 0.0)
    if component.component_type == "Inductor":
        return complex(0.0, omega * component.value)
    if component.value == 0.0:
        return OPEN_CIRCUIT_IMPEDANCE
    return complex(0.0, -1.0 / (omega * component.value))


def _members(components: Mapping[int, ComponentData], ids: Iterable[int]):
    for component_id in ids:
        component = components.get(component_id)
        if component is not None:
            yield component


def series_resistance(components: Mapping[int, ComponentData], ids: Iterable[int]) -> float:
    """Sum of resistor values; capacitors and inductors contribute nothing."""
    return float(
        sum(c.value for c in _members(components, ids) if c.component_type == "Resistor")
    )


def parallel_resistance(components: Mapping[int, ComponentData], ids: Iterable[int]) -> float:
    """
    Harmonic sum of resistor values.

    Zero-valued and non-resistor members are skipped. Returns 0.0 when no
    resistor is eligible.
    """
    conductance = 0.0
    for c in _members(components, ids):
        if c.component_type == "Resistor" and c.value != 0.0:
            conductance += 1.0 / c.value
    if conductance == 0.0:
        return 0.0
    return 1.0 / conductance


def _impedances(components, ids, frequency_hz: float) -> np.ndarray:
    return np.array(
        [component_impedance(c, frequency_hz) for c in _members(components, ids)],
        dtype=complex,
    )


def series_impedance_magnitude(
    components: Mapping[int, ComponentData], ids: Iterable[int], frequency_hz: float
) -> float:
    """|sum(Z)| over every member regardless of type."""
    angular_frequency(frequency_hz)
    total = np.sum(_impedances(components, ids, frequency_hz))
    return float(np.abs(total))


def parallel_impedance_magnitude(
    components: Mapping[int, ComponentData], ids: Iterable[int], frequency_hz: float
) -> float:
    """
    |1 / sum(1/Z)| over every member.

    Members whose impedance is exactly zero are skipped. Returns 0.0 when
    the reciprocal sum is exactly zero.
    """
    angular_frequency(frequency_hz)
    impedances = _impedances(components, ids, frequency_hz)
    impedances = impedances[impedances != 0]
    admittance = np.sum(1.0 / impedances) if impedances.size else 0j
    if admittance == 0:
        logger.debug("Parallel reciprocal sum is zero; reporting 0 impedance")
        return 0.0
    return float(np.abs(1.0 / admittance))
