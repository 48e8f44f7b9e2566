"""CLI module for floorplan."""
