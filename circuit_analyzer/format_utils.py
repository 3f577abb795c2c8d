"""
format_utils.py

Parsing of numbers with SI unit prefixes, and validation of
user-entered component values and ids before they reach the controller.
"""
import re

from .models.component import COMPONENT_TYPES

# Dictionary of SI prefixes and their multipliers
# Includes common variations like 'u' for 'µ' and 'MEG' for 'M'
SI_PREFIX_MULTIPLIERS = {
    'f': 1e-15,  # Femto
    'p': 1e-12,  # Pico
    'n': 1e-9,   # Nano
    'u': 1e-6,   # Micro
    'µ': 1e-6,   # Micro
    'm': 1e-3,   # Milli
    'k': 1e3,    # Kilo
    'K': 1e3,    # Kilo
    'M': 1e6,    # Mega
    'MEG': 1e6,  # Mega (SPICE variant)
    'G': 1e9,    # Giga
    'T': 1e12,   # Tera
}

_NUMBER_RE = re.compile(r'^([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Zµ]*)$')

INVALID_VALUE_MESSAGE = "Invalid value. Enter a positive number."
INVALID_ID_MESSAGE = "Invalid ID."


def parse_value(s: str) -> float:
    """
    Parses a string with an optional SI prefix into a float.
    Examples: "10k" -> 10000.0, "25m" -> 0.025, "10u" -> 1e-5, "4.7MEG" -> 4.7e6
    """
    if not isinstance(s, str):
        return float(s)

    s = s.strip()
    match = _NUMBER_RE.match(s)
    if not match:
        raise ValueError(f"Invalid number format: {s}")

    num_str, unit_str = match.groups()
    # A dangling exponent ("1e", "2.5E") falls through to the unit group
    if unit_str[:1] in ('e', 'E'):
        raise ValueError(f"Invalid number format: {s}")
    number = float(num_str)
    if not unit_str:
        return number

    if unit_str.upper().startswith('MEG'):
        return number * SI_PREFIX_MULTIPLIERS['MEG']

    # Only the first character can be a prefix; the rest is a unit ("kOhm")
    multiplier = SI_PREFIX_MULTIPLIERS.get(unit_str[0])
    if multiplier is None:
        return number
    return number * multiplier


def validate_component_value(value: str, component_type: str) -> tuple[bool, str]:
    """
    Validate a component value string for the given component type.

    Returns:
        (is_valid, error_message); error_message is empty when valid.
    """
    if component_type not in COMPONENT_TYPES:
        return False, f"Unknown component type '{component_type}'."

    value = str(value).strip()
    if not value:
        return False, "Value cannot be empty."

    try:
        numeric = parse_value(value)
    except (ValueError, TypeError):
        return False, INVALID_VALUE_MESSAGE

    if not numeric > 0 or numeric == float("inf"):
        return False, INVALID_VALUE_MESSAGE

    return True, ""


def parse_component_id(text: str) -> int:
    """Parse a component id typed by the user. Raises ValueError if not a positive integer."""
    try:
        component_id = int(str(text).strip())
    except ValueError:
        raise ValueError(INVALID_ID_MESSAGE) from None
    if component_id < 1:
        raise ValueError(INVALID_ID_MESSAGE)
    return component_id
