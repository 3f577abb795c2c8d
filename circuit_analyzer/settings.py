"""Analyzer settings - analysis frequency and history limits.

Defaults can be overridden from a JSON file and then from environment
variables. The core never reads settings itself; callers pass the values
into the controller and into each analysis request.
"""

import json
import logging
import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

from .errors import SettingsError

logger = logging.getLogger(__name__)

ENV_FREQUENCY = "CIRCUIT_ANALYZER_FREQUENCY"
ENV_LOG_CAPACITY = "CIRCUIT_ANALYZER_LOG_CAPACITY"
ENV_UNDO_DEPTH = "CIRCUIT_ANALYZER_UNDO_DEPTH"


@dataclass(frozen=True)
class AnalyzerSettings:
    """Configuration values consumed by the controller and request layer."""

    analysis_frequency_hz: float = 50.0
    log_capacity: int = 20
    undo_max_depth: Optional[int] = None  # None keeps every snapshot

    def __post_init__(self):
        if not math.isfinite(self.analysis_frequency_hz) or self.analysis_frequency_hz <= 0:
            raise SettingsError(
                f"analysis_frequency_hz must be positive (got {self.analysis_frequency_hz})"
            )
        if self.log_capacity < 1:
            raise SettingsError(f"log_capacity must be at least 1 (got {self.log_capacity})")
        if self.undo_max_depth is not None and self.undo_max_depth < 1:
            raise SettingsError(
                f"undo_max_depth must be at least 1 or null (got {self.undo_max_depth})"
            )


def _to_int(raw) -> int:
    # JSON floats like 2.7 and booleans are not counts
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValueError(raw)
    return int(raw)


def _coerce(name: str, raw):
    """Convert a raw JSON/env value to the type of field *name*."""
    try:
        if name == "analysis_frequency_hz":
            return float(raw)
        if name == "log_capacity":
            return _to_int(raw)
        if name == "undo_max_depth":
            if raw is None or str(raw).strip().lower() in ("", "none", "null"):
                return None
            return _to_int(raw)
    except (TypeError, ValueError):
        raise SettingsError(f"Invalid value for {name}: {raw!r}") from None
    raise SettingsError(f"Unknown setting {name}")


def _read_file(path: Path) -> dict:
    if not path.exists():
        raise SettingsError(f"Settings file not found: {path}")
    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        raise SettingsError(f"Failed to read settings from {path}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a JSON object")
    return data


def load_settings(path: Optional[Union[str, Path]] = None,
                  environ: Optional[dict] = None) -> AnalyzerSettings:
    """
    Build AnalyzerSettings from defaults, an optional JSON file and the environment.

    Args:
        path: JSON file with any of the AnalyzerSettings field names as keys.
        environ: Mapping used for overrides (defaults to os.environ).

    Raises:
        SettingsError: If the file is missing or malformed, or a value is invalid.
    """
    environ = os.environ if environ is None else environ
    known = {f.name for f in fields(AnalyzerSettings)}
    overrides = {}

    if path is not None:
        for key, raw in _read_file(Path(path)).items():
            if key not in known:
                logger.debug("Ignoring unknown setting %r in %s", key, path)
                continue
            overrides[key] = _coerce(key, raw)

    for env_name, key in (
        (ENV_FREQUENCY, "analysis_frequency_hz"),
        (ENV_LOG_CAPACITY, "log_capacity"),
        (ENV_UNDO_DEPTH, "undo_max_depth"),
    ):
        if env_name in environ:
            overrides[key] = _coerce(key, environ[env_name])

    settings = replace(AnalyzerSettings(), **overrides)
    logger.debug("Loaded settings: %s", settings)
    return settings
