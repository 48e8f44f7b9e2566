"""Entry point for running floorplan as a module: python -m floorplan"""

from floorplan.cli.commands import app

if __name__ == "__main__":
    app()
