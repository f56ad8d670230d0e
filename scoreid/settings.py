"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass
import json
import logging
import os
from pathlib import Path
from typing import Optional

from scoreid.errors import ConfigError


_DEFAULT_SIMILARITY_THRESHOLD = 0.7
_DEFAULT_FUZZY_THRESHOLD = 0.9
_DEFAULT_LOG_LEVEL = "WARNING"
_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    similarity_threshold: float = _DEFAULT_SIMILARITY_THRESHOLD
    fuzzy_threshold: float = _DEFAULT_FUZZY_THRESHOLD
    log_level: str = _DEFAULT_LOG_LEVEL

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def _threshold(name: str, value: object, path: Optional[Path]) -> float:
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid {name}: {value!r}", path) from None
    if not 0.0 <= threshold <= 1.0:
        raise ConfigError(f"{name} must be between 0 and 1: {threshold}", path)
    return threshold


def load_settings(path: Optional[Path]) -> Settings:
    """Load settings from JSON config file, with environment variable overrides.

    Priority order:
    1. Environment variables (SCOREID_SIMILARITY_THRESHOLD, SCOREID_LOG_LEVEL)
    2. JSON config file
    3. Defaults

    Args:
        path: Path to JSON config file, or None to use defaults only

    Returns:
        Settings object with resolved values

    Raises:
        ConfigError: the file is not a JSON object or a value is out of range
    """
    json_settings = {}
    if path and path.exists():
        try:
            json_settings = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON: {exc}", path) from exc
        if not isinstance(json_settings, dict):
            raise ConfigError("Settings must be a JSON object", path)

    similarity = os.getenv("SCOREID_SIMILARITY_THRESHOLD") or json_settings.get(
        "similarity_threshold", _DEFAULT_SIMILARITY_THRESHOLD
    )
    fuzzy = json_settings.get("fuzzy_threshold", _DEFAULT_FUZZY_THRESHOLD)

    log_level = str(os.getenv("SCOREID_LOG_LEVEL") or json_settings.get("log_level", _DEFAULT_LOG_LEVEL)).upper()
    if log_level not in _ALLOWED_LOG_LEVELS:
        raise ConfigError(f"Unsupported log level: {log_level}", path)

    return Settings(
        similarity_threshold=_threshold("similarity_threshold", similarity, path),
        fuzzy_threshold=_threshold("fuzzy_threshold", fuzzy, path),
        log_level=log_level,
    )


def default_config_path() -> Path:
    return Path.home() / ".config" / "scoreid" / "settings.json"
