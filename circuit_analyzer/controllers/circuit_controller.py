"""
CircuitController - Component registry operations with undo.

This module contains no presentation code. It owns a CircuitModel and a
HistoryManager as one unit: every mutation snapshots the model first, then
applies the change, then logs it. Views register observer callbacks to
stay in sync.
"""

import logging
import math
from typing import Any, Callable, Optional

from ..errors import InvalidValueError
from ..models.circuit import CircuitModel
from ..models.component import ComponentData, format_number, normalize_component_type, normalize_group
from .history_manager import HistoryManager

logger = logging.getLogger(__name__)


def validate_value(value) -> float:
    """Return *value* as a float, raising InvalidValueError unless finite and > 0."""
    if isinstance(value, bool):
        raise InvalidValueError(f"Component value must be a number (got {value!r})")
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        raise InvalidValueError(f"Component value must be a number (got {value!r})") from None
    if not math.isfinite(numeric) or numeric <= 0:
        raise InvalidValueError(f"Component value must be positive (got {value!r})")
    return numeric


class CircuitController:
    """
    Controller for component add/remove/find and undo.

    Not thread-safe. A multi-threaded host must serialize every call on
    one controller, since snapshot capture and mutation happen as
    separate steps.

    Observer events:
        component_added (ComponentData) - A new component was added
        component_removed (int) - A component was removed (by ID)
        history_restored (None) - Undo replaced the component set
    """

    def __init__(self, model: Optional[CircuitModel] = None,
                 history: Optional[HistoryManager] = None):
        self.model = model or CircuitModel()
        self.history = history or HistoryManager()
        self._observers: list[Callable[[str, Any], None]] = []

    def add_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Register a callback for model change events."""
        if callback not in self._observers:
            self._observers.append(callback)

    def remove_observer(self, callback: Callable[[str, Any], None]) -> None:
        """Unregister a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self, event: str, data: Any) -> None:
        """Notify all observers of a model change."""
        for observer in self._observers:
            try:
                observer(event, data)
            except (TypeError, AttributeError, RuntimeError) as e:
                logger.error("Error notifying observer: %s", e)

    # --- Mutations ---

    def add_component(self, component_type: str, value, group: str) -> int:
        """
        Create a component and append it to its group.

        The pre-mutation state is snapshotted before anything changes.

        Returns:
            The new component's id.

        Raises:
            InvalidValueError: value is not a finite positive number.
            UnknownComponentTypeError, UnknownGroupError: bad type or group.
        """
        component_type = normalize_component_type(component_type)
        group = normalize_group(group)
        numeric = validate_value(value)

        self.history.snapshot(self.model.snapshot())
        component = ComponentData(
            component_id=self.model.allocate_id(),
            component_type=component_type,
            value=numeric,
            group=group,
        )
        self.model.add_component(component)
        self.history.log(
            f"Added {component_type} to {group} circuit "
            f"(ID={component.component_id}, value={format_number(numeric)})"
        )
        logger.info("Added %s", component.describe())
        self._notify("component_added", component)
        return component.component_id

    def remove_component(self, component_id: int) -> bool:
        """
        Remove a component by id.

        Returns:
            True if removed, False if no such component (nothing changes).
        """
        if self.model.get_component(component_id) is None:
            logger.debug("Remove ignored; no component with ID=%s", component_id)
            return False

        self.history.snapshot(self.model.snapshot())
        self.model.remove_component(component_id)
        self.history.log(f"Removed component ID={component_id}")
        logger.info("Removed component ID=%s", component_id)
        self._notify("component_removed", component_id)
        return True

    def undo(self) -> bool:
        """
        Restore the state captured before the most recent mutation.

        Returns:
            True if a snapshot was restored, False if history was empty.
        """
        snapshot = self.history.undo()
        if snapshot is None:
            logger.debug("Undo requested with empty history")
            return False

        self.model.restore(snapshot)
        logger.info("Undo restored %d component(s)", len(snapshot))
        self._notify("history_restored", None)
        return True

    # --- Queries ---

    def find_component(self, component_id: int) -> Optional[ComponentData]:
        """Look up a component without touching state or history."""
        return self.model.get_component(component_id)

    def list_groups(self) -> tuple[list[int], list[int]]:
        """Return copies of the (series_ids, parallel_ids) sequences."""
        return list(self.model.series), list(self.model.parallel)

    def get_log(self) -> list[str]:
        """Operation log, oldest first."""
        return self.history.get_log()

    def get_stats(self) -> dict:
        return self.model.get_stats()
