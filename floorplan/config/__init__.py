"""Configuration module for floorplan."""

from floorplan.config.loader import ConfigLoadError, dump_config, load_config, load_config_document

__all__ = ["ConfigLoadError", "dump_config", "load_config", "load_config_document"]
