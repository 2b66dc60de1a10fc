"""Repository cloning.

This module provides repository URL parsing and the git clone
strategies that run after the destination has been cleared.
"""

from clonectl.clone.address import parse_repository
from clonectl.clone.models import (
    CloneError,
    CloneResult,
    CloneStrategy,
    GitCommandError,
    RepositoryAddress,
    RepositoryAddressError,
)
from clonectl.clone.strategies import GitCloner, build_clone_args

__all__ = [
    "CloneError",
    "CloneResult",
    "CloneStrategy",
    "GitCloner",
    "GitCommandError",
    "RepositoryAddress",
    "RepositoryAddressError",
    "build_clone_args",
    "parse_repository",
]
