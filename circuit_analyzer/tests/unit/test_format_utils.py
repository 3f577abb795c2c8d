"""
Tests for format_utils.py: SI prefix parsing, formatting, and validation.
"""

import pytest
from circuit_analyzer.format_utils import (
    INVALID_ID_MESSAGE,
    INVALID_VALUE_MESSAGE,
    parse_component_id,
    parse_value,
    validate_component_value,
)

# ── parse_value ──────────────────────────────────────────────────────


class TestParseValue:
    @pytest.mark.parametrize(
        "input_str, expected",
        [
            ("10k", 10_000.0),
            ("10K", 10_000.0),
            ("1M", 1_000_000.0),
            ("4.7M", 4_700_000.0),
            ("100n", 100e-9),
            ("1u", 1e-6),
            ("1µ", 1e-6),
            ("10m", 10e-3),
            ("2.2p", 2.2e-12),
            ("1f", 1e-15),
            ("1G", 1e9),
            ("1T", 1e12),
        ],
    )
    def test_si_suffixes(self, input_str, expected):
        assert parse_value(input_str) == pytest.approx(expected)

    def test_meg_suffix(self):
        assert parse_value("4.7MEG") == pytest.approx(4_700_000.0)
        assert parse_value("2meg") == pytest.approx(2_000_000.0)

    def test_bare_number(self):
        assert parse_value("100") == 100.0

    def test_leading_dot(self):
        assert parse_value(".5") == 0.5

    def test_negative_value(self):
        assert parse_value("-5") == -5.0

    def test_scientific_notation(self):
        assert parse_value("1e-4") == pytest.approx(1e-4)

    def test_number_with_unit_suffix(self):
        assert parse_value("10kOhm") == pytest.approx(10_000.0)
        assert parse_value("100uF") == pytest.approx(100e-6)
        assert parse_value("5H") == 5.0

    def test_whitespace(self):
        assert parse_value("  2 k ") == pytest.approx(2000.0)

    def test_non_string_passthrough(self):
        assert parse_value(3) == 3.0

    def test_exponent_with_prefix(self):
        assert parse_value("1e3k") == pytest.approx(1e6)
        assert parse_value("2.5E-3") == pytest.approx(2.5e-3)

    @pytest.mark.parametrize("bad", ["", "abc", "1.2.3", "k10", "--1", "1e", "2.5E", "3e+"])
    def test_invalid_string_raises(self, bad):
        with pytest.raises(ValueError):
            parse_value(bad)


# ── validation ───────────────────────────────────────────────────────


class TestValidateComponentValue:
    @pytest.mark.parametrize("value", ["100", "4.7k", "100u", "1e-9"])
    def test_valid(self, value):
        assert validate_component_value(value, "Resistor") == (True, "")

    @pytest.mark.parametrize("value", ["0", "-5", "abc", "-1k", "1e"])
    def test_invalid(self, value):
        assert validate_component_value(value, "Capacitor") == (False, INVALID_VALUE_MESSAGE)

    def test_empty(self):
        assert validate_component_value("  ", "Inductor") == (False, "Value cannot be empty.")

    def test_unknown_type(self):
        ok, message = validate_component_value("1", "Diode")
        assert not ok
        assert "Diode" in message


class TestParseComponentId:
    def test_valid(self):
        assert parse_component_id(" 12 ") == 12

    @pytest.mark.parametrize("bad", ["0", "-3", "x", "1.5", ""])
    def test_invalid(self, bad):
        with pytest.raises(ValueError, match=INVALID_ID_MESSAGE):
            parse_component_id(bad)
