"""Config loading helpers."""
from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from rotaplan.config import CONFIG


class ConfigError(ValueError):
    """Raised for unreadable or inconsistent configuration."""


def load_config(path: str | Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    suffix = path.suffix.lower()
    with path.open("r", encoding="utf-8") as fh:
        if suffix in {".yaml", ".yml"}:
            payload = yaml.safe_load(fh)
        elif suffix == ".json":
            payload = json.load(fh)
        else:
            raise ConfigError(f"unsupported config format: {path.suffix or path.name}")
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    return payload


def merge_config(base: Mapping[str, Any], overrides: Mapping[str, Any] | None) -> Dict[str, Any]:
    """Deep-merge *overrides* onto a copy of *base*; nested mappings merge key by key."""
    merged = copy.deepcopy(dict(base))
    for key, value in (overrides or {}).items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def validate_rotation(section: Mapping[str, Any]) -> None:
    rest_days = section.get("rest_days", 2)
    if isinstance(rest_days, bool) or not isinstance(rest_days, int) or rest_days < 1:
        raise ConfigError(f"rotation.rest_days must be a positive integer, got {rest_days!r}")
    weekend = section.get("weekend_days", [6, 7])
    if not isinstance(weekend, (list, tuple, set, frozenset)):
        raise ConfigError(f"rotation.weekend_days must be a list, got {weekend!r}")
    for day in weekend:
        if isinstance(day, bool) or not isinstance(day, int) or not 1 <= day <= 7:
            raise ConfigError(f"rotation.weekend_days entries must be ISO weekdays 1..7, got {day!r}")


def build_config(path: str | Path | None = None, overrides: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    """Defaults, then the config file (if any), then explicit overrides."""
    config = merge_config(CONFIG, load_config(path) if path else None)
    config = merge_config(config, overrides)
    validate_rotation(config.get("rotation", {}) or {})
    return config


__all__ = ["ConfigError", "build_config", "load_config", "merge_config", "validate_rotation"]
