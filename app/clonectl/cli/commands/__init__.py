"""CLI commands for clonectl.

This package contains all subcommand implementations.
"""

from clonectl.cli.commands import clone, config, remove

__all__ = ["clone", "config", "remove"]
