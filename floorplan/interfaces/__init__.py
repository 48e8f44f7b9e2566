"""Stable entry points for callers that load floorplan configs."""

from floorplan.interfaces.config_migration import (
    entity_needs_migration,
    migrate_config,
    migrate_entity_colors,
    needs_migration,
)

__all__ = ["entity_needs_migration", "migrate_config", "migrate_entity_colors", "needs_migration"]
