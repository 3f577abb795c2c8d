"""
HistoryManager - Snapshot stack for undo plus a bounded operation log.

The snapshot stack is unbounded by default; a max_depth may be given for
long-running hosts. The operation log is informational only and keeps the
most recent ``log_capacity`` descriptions.
"""

import logging
from collections import deque
from typing import Optional

from ..errors import SettingsError
from ..models.circuit import Snapshot

logger = logging.getLogger(__name__)

DEFAULT_LOG_CAPACITY = 20


class HistoryManager:
    """
    Stores pre-mutation snapshots and a FIFO log of operation descriptions.

    The manager never touches a CircuitModel. It receives snapshots from
    the controller and hands them back on undo.
    """

    def __init__(self, log_capacity: int = DEFAULT_LOG_CAPACITY,
                 max_depth: Optional[int] = None):
        """
        Initialize the history manager.

        Args:
            log_capacity: Number of log entries kept (default 20)
            max_depth: Maximum snapshots kept, or None for no limit
        """
        if log_capacity < 1:
            raise SettingsError(f"log_capacity must be at least 1 (got {log_capacity})")
        if max_depth is not None and max_depth < 1:
            raise SettingsError(f"max_depth must be at least 1 or None (got {max_depth})")
        self.max_depth = max_depth
        self._undo_stack: list[Snapshot] = []
        self._log: deque[str] = deque(maxlen=log_capacity)

    @property
    def log_capacity(self) -> int:
        return self._log.maxlen

    # --- Snapshots ---

    def snapshot(self, components: Snapshot) -> None:
        """Push an immutable copy of the component set onto the undo stack."""
        self._undo_stack.append(tuple(components))

        if self.max_depth is not None and len(self._undo_stack) > self.max_depth:
            self._undo_stack.pop(0)
            logger.debug("Undo depth %d reached; dropped oldest snapshot", self.max_depth)

    def undo(self) -> Optional[Snapshot]:
        """
        Pop the most recent snapshot.

        Returns:
            The snapshot, or None if there is nothing to undo
        """
        if not self._undo_stack:
            return None
        return self._undo_stack.pop()

    def can_undo(self) -> bool:
        """Return whether there are snapshots to restore."""
        return len(self._undo_stack) > 0

    def get_undo_count(self) -> int:
        """Return the number of snapshots on the stack."""
        return len(self._undo_stack)

    # --- Operation log ---

    def log(self, description: str) -> None:
        """Append a description, evicting the oldest entry when full."""
        self._log.append(description)

    def get_log(self) -> list[str]:
        """Return log entries oldest first. The list is a copy."""
        return list(self._log)
