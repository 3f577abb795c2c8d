"""Tests for settings.py: defaults, JSON file and environment overrides."""

import json

import pytest
from circuit_analyzer.errors import SettingsError
from circuit_analyzer.settings import (
    ENV_FREQUENCY,
    ENV_LOG_CAPACITY,
    ENV_UNDO_DEPTH,
    AnalyzerSettings,
    load_settings,
)


@pytest.fixture
def settings_file(tmp_path):
    def write(data):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(data))
        return path

    return write


class TestDefaults:
    def test_defaults(self):
        settings = load_settings(environ={})
        assert settings == AnalyzerSettings()
        assert settings.analysis_frequency_hz == 50.0
        assert settings.log_capacity == 20
        assert settings.undo_max_depth is None

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"analysis_frequency_hz": 0.0},
            {"analysis_frequency_hz": float("nan")},
            {"log_capacity": 0},
            {"undo_max_depth": 0},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(SettingsError):
            AnalyzerSettings(**kwargs)


class TestFile:
    def test_values_from_file(self, settings_file):
        path = settings_file({"analysis_frequency_hz": 60, "log_capacity": 5, "undo_max_depth": 10})
        settings = load_settings(path, environ={})
        assert settings.analysis_frequency_hz == 60.0
        assert settings.log_capacity == 5
        assert settings.undo_max_depth == 10

    def test_unknown_keys_ignored(self, settings_file):
        path = settings_file({"theme": "dark"})
        assert load_settings(path, environ={}) == AnalyzerSettings()

    def test_missing_file(self, tmp_path):
        with pytest.raises(SettingsError, match="not found"):
            load_settings(tmp_path / "nope.json", environ={})

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(SettingsError):
            load_settings(path, environ={})

    def test_non_object(self, settings_file):
        with pytest.raises(SettingsError):
            load_settings(settings_file([1, 2]), environ={})

    def test_bad_value_type(self, settings_file):
        with pytest.raises(SettingsError):
            load_settings(settings_file({"log_capacity": "many"}), environ={})

    @pytest.mark.parametrize(
        "data",
        [
            {"log_capacity": 2.7},
            {"undo_max_depth": 1.5},
            {"log_capacity": True},
        ],
    )
    def test_non_integer_counts_rejected(self, settings_file, data):
        with pytest.raises(SettingsError):
            load_settings(settings_file(data), environ={})

    def test_integral_float_count_accepted(self, settings_file):
        settings = load_settings(settings_file({"log_capacity": 5.0}), environ={})
        assert settings.log_capacity == 5


class TestEnvironment:
    def test_env_overrides_file(self, settings_file):
        path = settings_file({"analysis_frequency_hz": 60})
        settings = load_settings(path, environ={ENV_FREQUENCY: "400"})
        assert settings.analysis_frequency_hz == 400.0

    def test_all_env_overrides(self):
        settings = load_settings(
            environ={ENV_FREQUENCY: "1000", ENV_LOG_CAPACITY: "3", ENV_UNDO_DEPTH: "7"}
        )
        assert settings == AnalyzerSettings(1000.0, 3, 7)

    def test_undo_depth_none(self):
        settings = load_settings(environ={ENV_UNDO_DEPTH: "none"})
        assert settings.undo_max_depth is None

    def test_bad_env_value(self):
        with pytest.raises(SettingsError):
            load_settings(environ={ENV_FREQUENCY: "-5"})
