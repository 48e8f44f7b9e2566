"""Floorplan - configuration migration for floorplan entity styles."""

from importlib.metadata import PackageNotFoundError, version

from loguru import logger

try:
    __version__ = version("floorplan-config")
except PackageNotFoundError:
    __version__ = "0.0.0+local"
__app_name__ = "Floorplan"

# Library code stays quiet unless the application opts in.
logger.disable("floorplan")
