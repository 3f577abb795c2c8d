"""
Controllers for the circuit analyzer.

This package holds the classes that mutate a CircuitModel (with undo
history) and the request surface presentation layers talk to.
"""

from .circuit_controller import CircuitController, validate_value
from .history_manager import DEFAULT_LOG_CAPACITY, HistoryManager
from .requests import (
    AddComponentRequest,
    AnalyzeRequest,
    FindComponentRequest,
    ListGroupsRequest,
    RemoveComponentRequest,
    RequestHandler,
    RequestResult,
    UndoRequest,
)

__all__ = [
    "CircuitController",
    "HistoryManager",
    "DEFAULT_LOG_CAPACITY",
    "validate_value",
    "RequestHandler",
    "RequestResult",
    "AddComponentRequest",
    "RemoveComponentRequest",
    "UndoRequest",
    "FindComponentRequest",
    "ListGroupsRequest",
    "AnalyzeRequest",
]
