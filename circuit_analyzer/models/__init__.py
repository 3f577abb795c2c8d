"""
Pure Python data models for the circuit analyzer.

This package holds the component vocabulary and the circuit store. It has
no knowledge of history, analysis or presentation.
"""

from .circuit import CircuitModel, Snapshot
from .component import (
    CIRCUIT_GROUPS,
    COMPONENT_TYPES,
    COMPONENT_UNITS,
    PARALLEL,
    SERIES,
    ComponentData,
    normalize_component_type,
    normalize_group,
)

__all__ = [
    "CircuitModel",
    "Snapshot",
    "ComponentData",
    "COMPONENT_TYPES",
    "COMPONENT_UNITS",
    "CIRCUIT_GROUPS",
    "SERIES",
    "PARALLEL",
    "normalize_component_type",
    "normalize_group",
]
