"""Read floorplan config documents and normalize them on load."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from floorplan.interfaces.config_migration import migrate_config, needs_migration


class ConfigLoadError(Exception):
    """Raised when a config file cannot be read or is not a mapping."""


def load_config_document(path: Path) -> dict[str, Any]:
    """Parse a YAML or JSON config file into a plain dict (no migration)."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config {path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Path) -> dict[str, Any]:
    """Load a config file and migrate legacy entity colors in memory."""
    config = load_config_document(path)
    if needs_migration(config):
        migrate_config(config)
        logger.info("Migrated legacy color fields in {}", path)
    return config


def dump_config(config: dict[str, Any], fmt: str = "yaml") -> str:
    """Render a config document as YAML or JSON text."""
    if fmt == "json":
        return json.dumps(config, ensure_ascii=False, indent=2, default=str) + "\n"
    return yaml.safe_dump(config, allow_unicode=True, sort_keys=False)
