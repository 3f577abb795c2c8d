"""
CircuitModel - Central data store for circuit state.

Holds the component set and the two ordered group sequences (series and
parallel). Every component id appears in exactly one sequence, the one
matching its group. The id counter lives here too and is never rewound,
not even by undo.
"""

from dataclasses import dataclass, field
from typing import Optional

from .component import PARALLEL, SERIES, ComponentData

# Immutable copy of the full component set, in stored order
Snapshot = tuple[ComponentData, ...]


@dataclass
class CircuitModel:
    """
    Central data store holding all circuit state.

    ``components`` preserves insertion order, which is also the order used
    to rebuild the group sequences after a restore.
    """

    components: dict[int, ComponentData] = field(default_factory=dict)
    series: list[int] = field(default_factory=list)
    parallel: list[int] = field(default_factory=list)
    next_id: int = 1

    # --- Component operations ---

    def allocate_id(self) -> int:
        """Hand out the next component id and advance the counter."""
        component_id = self.next_id
        self.next_id += 1
        return component_id

    def add_component(self, component: ComponentData) -> None:
        """Add a component and append it to its group sequence."""
        self.components[component.component_id] = component
        self._sequence_for(component.group).append(component.component_id)

    def remove_component(self, component_id: int) -> Optional[ComponentData]:
        """
        Remove a component from the set and from its group sequence.

        Returns the removed component, or None if the id is unknown.
        """
        component = self.components.pop(component_id, None)
        if component is None:
            return None
        sequence = self._sequence_for(component.group)
        if component_id in sequence:
            sequence.remove(component_id)
        return component

    def get_component(self, component_id: int) -> Optional[ComponentData]:
        return self.components.get(component_id)

    def group_ids(self, group: str) -> list[int]:
        """Return a copy of the id sequence for SERIES or PARALLEL."""
        return list(self._sequence_for(group))

    def _sequence_for(self, group: str) -> list[int]:
        return self.series if group == SERIES else self.parallel

    # --- Snapshot / restore ---

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the component set."""
        return tuple(self.components.values())

    def restore(self, snapshot: Snapshot) -> None:
        """Replace the component set wholesale and rebuild group sequences."""
        self.components = {c.component_id: c for c in snapshot}
        self.rebuild_groups()

    def rebuild_groups(self) -> None:
        """Rebuild both group sequences by scanning the set in stored order."""
        self.series = []
        self.parallel = []
        for component in self.components.values():
            self._sequence_for(component.group).append(component.component_id)

    # --- Statistics ---

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def series_count(self) -> int:
        return len(self.series)

    @property
    def parallel_count(self) -> int:
        return len(self.parallel)

    def get_stats(self) -> dict:
        """Counts shown on the main menu status line."""
        return {
            "total": self.component_count,
            "series": self.series_count,
            "parallel": self.parallel_count,
            "next_id": self.next_id,
        }

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize circuit state to a dictionary."""
        return {
            "components": [c.to_dict() for c in self.components.values()],
            "series": list(self.series),
            "parallel": list(self.parallel),
            "next_id": self.next_id,
        }


__all__ = ["CircuitModel", "Snapshot", "SERIES", "PARALLEL"]
