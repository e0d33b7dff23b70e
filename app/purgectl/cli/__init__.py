"""CLI package for purgectl.

This package contains the Typer application.
"""

from purgectl.cli.main import app

__all__ = ["app"]
