"""
Exception types raised by the circuit analyzer core.

Controllers raise these for bad input before any state is touched. The
request layer (controllers/requests.py) turns them into failed results so
they never reach a presentation layer as exceptions.
"""


class CircuitError(Exception):
    """Base class for circuit analyzer errors."""


class InvalidValueError(CircuitError, ValueError):
    """Raised when a component value is not a finite positive number."""


class UnknownComponentTypeError(CircuitError, ValueError):
    """Raised for a component type outside Resistor/Capacitor/Inductor."""


class UnknownGroupError(CircuitError, ValueError):
    """Raised for a circuit group other than SERIES or PARALLEL."""


class InvalidFrequencyError(CircuitError, ValueError):
    """Raised when an analysis frequency is not strictly positive."""


class SettingsError(CircuitError, ValueError):
    """Raised when configuration values cannot be used."""
