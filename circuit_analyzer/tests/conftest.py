"""
Shared test fixtures for the circuit analyzer test suite.

All fixtures build pure-Python model and controller objects.
"""

import pytest
from circuit_analyzer.controllers.circuit_controller import CircuitController
from circuit_analyzer.controllers.requests import RequestHandler
from circuit_analyzer.models.circuit import CircuitModel
from circuit_analyzer.models.component import ComponentData


def make_component(component_type, component_id, value, group="SERIES"):
    """Helper to create a ComponentData with minimal boilerplate."""
    return ComponentData(
        component_id=component_id,
        component_type=component_type,
        value=value,
        group=group,
    )


@pytest.fixture
def controller():
    return CircuitController()


@pytest.fixture
def handler():
    return RequestHandler()


@pytest.fixture
def events():
    """Fixture that returns a list and a callback that appends events to it."""
    recorded = []

    def callback(event, data):
        recorded.append((event, data))

    return recorded, callback


@pytest.fixture
def mixed_circuit():
    """
    Series:   R1 = 100 Ohm, L2 = 5 H
    Parallel: R3 = 100 Ohm, R4 = 100 Ohm, C5 = 100 uF

    Built directly on the model so no history is recorded.
    """
    model = CircuitModel()
    for component in (
        make_component("Resistor", 1, 100.0, "SERIES"),
        make_component("Inductor", 2, 5.0, "SERIES"),
        make_component("Resistor", 3, 100.0, "PARALLEL"),
        make_component("Resistor", 4, 100.0, "PARALLEL"),
        make_component("Capacitor", 5, 1e-4, "PARALLEL"),
    ):
        model.add_component(component)
    model.next_id = 6
    return model
