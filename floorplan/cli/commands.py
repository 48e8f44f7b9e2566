"""CLI commands for floorplan."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

import typer
from loguru import logger

from floorplan import __app_name__, __version__
from floorplan.config.loader import ConfigLoadError, dump_config, load_config, load_config_document
from floorplan.interfaces.config_migration import entity_needs_migration

app = typer.Typer(
    name="floorplan",
    help=f"{__app_name__} - floorplan config migration",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    yaml = "yaml"
    json = "json"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{__app_name__} v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
    logger.enable("floorplan")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Floorplan config tools."""
    _configure_logging(verbose)


def _load_or_exit(loader, path: Path) -> dict:
    try:
        return loader(path)
    except ConfigLoadError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e


@app.command()
def check(path: Path = typer.Argument(..., help="Config file (YAML or JSON)")) -> None:
    """Report whether a config still uses legacy color fields.

    Exits with code 1 when migration is needed.
    """
    config = _load_or_exit(load_config_document, path)
    entities = config.get("entities")
    legacy = (
        [i for i, entity in enumerate(entities) if entity_needs_migration(entity)]
        if isinstance(entities, list)
        else []
    )
    if not legacy:
        typer.echo(f"{path}: up to date")
        return

    typer.echo(f"{path}: needs migration ({len(legacy)} legacy entities)")
    for index in legacy:
        logger.debug("Entity #{} uses legacy colors: {}", index, entities[index])
    raise typer.Exit(code=1)


@app.command()
def migrate(
    path: Path = typer.Argument(..., help="Config file (YAML or JSON)"),
    fmt: OutputFormat = typer.Option(OutputFormat.yaml, "--format", "-f", help="Output format"),
) -> None:
    """Print the migrated config to stdout. The file itself is not modified."""
    config = _load_or_exit(load_config, path)
    typer.echo(dump_config(config, fmt.value), nl=False)


if __name__ == "__main__":
    app()
