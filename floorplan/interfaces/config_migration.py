"""Config migration from flat legacy style colors to the nested ``colors`` block.

Older floorplan configs kept colors directly on an entity's style
(``onColor``/``offColor``, or ``cameraIdleColor`` and friends for cameras).
Newer configs nest them under ``style.colors``. The helpers here fold the
legacy fields into ``colors`` and are safe to run on every load.
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from loguru import logger

CAMERA_TYPE = "camera"

# Legacy style field -> key inside the new ``colors`` block.
LEGACY_BINARY_FIELDS: dict[str, str] = {
    "onColor": "onColor",
    "offColor": "offColor",
}
LEGACY_CAMERA_FIELDS: dict[str, str] = {
    "cameraIdleColor": "idleColor",
    "cameraRecordingColor": "recordingColor",
    "cameraStreamingColor": "streamingColor",
}

DEFAULT_BINARY_COLORS: dict[str, str] = {
    "onColor": "#facc15",
    "offColor": "#94a3b8",
}
DEFAULT_CAMERA_COLORS: dict[str, str] = {
    "idleColor": "#6b7280",
    "recordingColor": "#ef4444",
    "streamingColor": "#3b82f6",
}


def _style_of(entity: Any) -> dict | None:
    if not isinstance(entity, dict):
        return None
    style = entity.get("style")
    if not style or not isinstance(style, dict):
        return None
    return style


def _entities_of(config: Any) -> list | None:
    if not isinstance(config, dict):
        return None
    entities = config.get("entities")
    return entities if isinstance(entities, list) else None


def _has_any(style: dict, fields: dict[str, str]) -> bool:
    return any(style.get(name) for name in fields)


def _fold_colors(style: dict, fields: dict[str, str], defaults: dict[str, str]) -> None:
    """Replace legacy ``fields`` on ``style`` with a ``colors`` block."""
    style["colors"] = {
        target: style.get(source) or defaults[target] for source, target in fields.items()
    }
    for source in fields:
        style.pop(source, None)


def migrate_entity_colors(entity: Any) -> Any:
    """Migrate one entity's legacy color fields in place and return it."""
    style = _style_of(entity)
    if style is None or style.get("colors"):
        return entity

    if entity.get("type") == CAMERA_TYPE:
        if _has_any(style, LEGACY_CAMERA_FIELDS):
            _fold_colors(style, LEGACY_CAMERA_FIELDS, DEFAULT_CAMERA_COLORS)
            logger.debug("Migrated camera colors for entity {}", entity.get("entity", "<unnamed>"))
    elif _has_any(style, LEGACY_BINARY_FIELDS):
        _fold_colors(style, LEGACY_BINARY_FIELDS, DEFAULT_BINARY_COLORS)
        logger.debug("Migrated on/off colors for entity {}", entity.get("entity", "<unnamed>"))

    return entity


def migrate_config(config: Any, *, copy: bool = False) -> Any:
    """Migrate every entity of a floorplan config to the nested colors layout (idempotent).

    The document is modified in place unless ``copy`` is set, in which case a
    deep copy is migrated and the caller's object is left alone.
    """
    out = deepcopy(config) if copy else config
    if _entities_of(out) is None:
        return out

    out["entities"] = [migrate_entity_colors(entity) for entity in out["entities"]]
    return out


def entity_needs_migration(entity: Any) -> bool:
    """Whether an entity still carries legacy colors without a ``colors`` block.

    Binary and camera fields both count regardless of the entity's ``type``.
    """
    style = _style_of(entity)
    if style is None:
        return False

    has_old_binary_colors = _has_any(style, LEGACY_BINARY_FIELDS)
    has_old_camera_colors = _has_any(style, LEGACY_CAMERA_FIELDS)
    has_new_colors = bool(style.get("colors"))
    return (has_old_binary_colors or has_old_camera_colors) and not has_new_colors


def needs_migration(config: Any) -> bool:
    """Return True if any entity in ``config`` still uses legacy color fields."""
    entities = _entities_of(config)
    if entities is None:
        return False
    return any(entity_needs_migration(entity) for entity in entities)
