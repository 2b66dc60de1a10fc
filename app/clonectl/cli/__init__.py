"""CLI package for clonectl.

This package contains the Typer application and all subcommands.
"""

from clonectl.cli.main import app

__all__ = ["app"]
