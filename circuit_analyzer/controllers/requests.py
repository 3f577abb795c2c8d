"""
Request/result surface used by presentation layers.

Each request is a small dataclass. RequestHandler.handle() dispatches it to
the CircuitController and always returns a RequestResult: expected
conditions (bad value, unknown id, empty history) become failed results
instead of exceptions.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..errors import CircuitError, InvalidValueError, SettingsError
from ..settings import AnalyzerSettings
from ..simulation.analysis_report import analyze
from .circuit_controller import CircuitController
from .history_manager import HistoryManager

logger = logging.getLogger(__name__)

MSG_ADDED = "Component added successfully!"
MSG_REMOVED = "Component removed!"
MSG_FOUND = "Found!"
MSG_NOT_FOUND = "Not found."
MSG_UNDONE = "Undo successful."
MSG_NOTHING_TO_UNDO = "Nothing to undo."
MSG_INVALID_VALUE = "Invalid value. Enter a positive number."


@dataclass(frozen=True)
class AddComponentRequest:
    component_type: str
    value: float
    group: str


@dataclass(frozen=True)
class RemoveComponentRequest:
    component_id: int


@dataclass(frozen=True)
class UndoRequest:
    pass


@dataclass(frozen=True)
class FindComponentRequest:
    component_id: int


@dataclass(frozen=True)
class ListGroupsRequest:
    pass


@dataclass(frozen=True)
class AnalyzeRequest:
    frequency_hz: Optional[float] = None  # None uses the configured default


Request = Union[
    AddComponentRequest,
    RemoveComponentRequest,
    UndoRequest,
    FindComponentRequest,
    ListGroupsRequest,
    AnalyzeRequest,
]


@dataclass
class RequestResult:
    """Outcome of a request plus a status line the caller may display."""

    success: bool
    message: str = ""
    data: Any = None


class RequestHandler:
    """
    Dispatches requests to one CircuitController.

    Without a controller, one is built with history limits taken from
    *settings*. When both are given, the controller's history must already
    use the same log_capacity and undo_max_depth as *settings*.

    Raises:
        SettingsError: The controller's history limits disagree with settings.
    """

    def __init__(self, controller: Optional[CircuitController] = None,
                 settings: Optional[AnalyzerSettings] = None):
        if controller is not None and settings is not None:
            history = controller.history
            if (history.log_capacity, history.max_depth) != (
                    settings.log_capacity, settings.undo_max_depth):
                raise SettingsError(
                    f"Controller history (log_capacity={history.log_capacity}, "
                    f"max_depth={history.max_depth}) does not match settings "
                    f"(log_capacity={settings.log_capacity}, "
                    f"undo_max_depth={settings.undo_max_depth})"
                )
        self.settings = settings or AnalyzerSettings()
        self.controller = controller or CircuitController(
            history=HistoryManager(
                log_capacity=self.settings.log_capacity,
                max_depth=self.settings.undo_max_depth,
            )
        )
        self._handlers = {
            AddComponentRequest: self._add,
            RemoveComponentRequest: self._remove,
            UndoRequest: self._undo,
            FindComponentRequest: self._find,
            ListGroupsRequest: self._list,
            AnalyzeRequest: self._analyze,
        }

    def handle(self, request: Request) -> RequestResult:
        handler = self._handlers.get(type(request))
        if handler is None:
            raise TypeError(f"Unsupported request type: {type(request).__name__}")
        return handler(request)

    # --- Mutations ---

    def _add(self, request: AddComponentRequest) -> RequestResult:
        try:
            component_id = self.controller.add_component(
                request.component_type, request.value, request.group
            )
        except InvalidValueError as e:
            logger.debug("Add rejected: %s", e)
            return RequestResult(success=False, message=MSG_INVALID_VALUE)
        except CircuitError as e:
            logger.debug("Add rejected: %s", e)
            return RequestResult(success=False, message=str(e))
        return RequestResult(success=True, message=MSG_ADDED, data=component_id)

    def _remove(self, request: RemoveComponentRequest) -> RequestResult:
        if self.controller.remove_component(request.component_id):
            return RequestResult(success=True, message=MSG_REMOVED, data=request.component_id)
        return RequestResult(success=False, message=MSG_NOT_FOUND)

    def _undo(self, request: UndoRequest) -> RequestResult:
        if self.controller.undo():
            return RequestResult(success=True, message=MSG_UNDONE)
        return RequestResult(success=False, message=MSG_NOTHING_TO_UNDO)

    # --- Queries ---

    def _find(self, request: FindComponentRequest) -> RequestResult:
        component = self.controller.find_component(request.component_id)
        if component is None:
            return RequestResult(success=False, message=MSG_NOT_FOUND)
        return RequestResult(success=True, message=MSG_FOUND, data=component)

    def _list(self, request: ListGroupsRequest) -> RequestResult:
        return RequestResult(success=True, data=self.controller.list_groups())

    def _analyze(self, request: AnalyzeRequest) -> RequestResult:
        frequency = request.frequency_hz
        if frequency is None:
            frequency = self.settings.analysis_frequency_hz
        try:
            frequency = float(frequency)
        except (TypeError, ValueError):
            return RequestResult(
                success=False,
                message=f"Analysis frequency must be a number (got {request.frequency_hz!r})",
            )
        try:
            report = analyze(self.controller.model, frequency)
        except CircuitError as e:
            return RequestResult(success=False, message=str(e))
        return RequestResult(success=True, message=report.summary(), data=report)
