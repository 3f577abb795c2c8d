"""
ComponentData - Pure Python data model for circuit components.

Component types use display names as canonical identifiers:
'Resistor', 'Capacitor', 'Inductor'. Circuit groups are 'SERIES' and
'PARALLEL'. Both sets are closed.
"""

from dataclasses import asdict, dataclass

from ..errors import UnknownComponentTypeError, UnknownGroupError

# Component type definitions using display names (canonical)
COMPONENT_TYPES = [
    "Resistor",
    "Capacitor",
    "Inductor",
]

SERIES = "SERIES"
PARALLEL = "PARALLEL"

CIRCUIT_GROUPS = [SERIES, PARALLEL]

# Unit of the stored value per component type
COMPONENT_UNITS = {
    "Resistor": "Ohm",
    "Capacitor": "F",
    "Inductor": "H",
}

# Accepted spellings at the parsing boundary -> canonical type
_TYPE_ALIASES = {
    "resistor": "Resistor",
    "r": "Resistor",
    "capacitor": "Capacitor",
    "c": "Capacitor",
    "inductor": "Inductor",
    "l": "Inductor",
}

_GROUP_ALIASES = {
    "series": SERIES,
    "s": SERIES,
    "parallel": PARALLEL,
    "p": PARALLEL,
}


def normalize_component_type(name: str) -> str:
    """Map a user-supplied type name to its canonical display name."""
    canonical = _TYPE_ALIASES.get(str(name).strip().lower())
    if canonical is None:
        raise UnknownComponentTypeError(
            f"Unknown component type '{name}'. Valid types: {', '.join(COMPONENT_TYPES)}"
        )
    return canonical


def normalize_group(name: str) -> str:
    """Map a user-supplied group name to SERIES or PARALLEL."""
    canonical = _GROUP_ALIASES.get(str(name).strip().lower())
    if canonical is None:
        raise UnknownGroupError(
            f"Unknown circuit group '{name}'. Valid groups: {', '.join(CIRCUIT_GROUPS)}"
        )
    return canonical


def format_number(value: float) -> str:
    """Shortest general-format rendering used in log lines ("100", "0.0001")."""
    return f"{value:g}"


@dataclass(frozen=True)
class ComponentData:
    """
    A single circuit component.

    Instances are immutable: the group is fixed at creation, and undo
    restores whole prior collections instead of editing fields.
    """

    component_id: int
    component_type: str
    value: float  # ohms, farads or henries depending on component_type
    group: str

    def __post_init__(self):
        if self.component_type not in COMPONENT_TYPES:
            raise UnknownComponentTypeError(
                f"Unknown component type '{self.component_type}'"
            )
        if self.group not in CIRCUIT_GROUPS:
            raise UnknownGroupError(f"Unknown circuit group '{self.group}'")

    @property
    def unit(self) -> str:
        return COMPONENT_UNITS[self.component_type]

    def describe(self) -> str:
        """One-line summary for listings, e.g. 'ID 3: Resistor 100 Ohm (SERIES)'."""
        return (
            f"ID {self.component_id}: {self.component_type} "
            f"{format_number(self.value)} {self.unit} ({self.group})"
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dictionary."""
        return asdict(self)
