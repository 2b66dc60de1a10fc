"""Fault-tolerant recursive removal.

This module provides the deletion core used to clear a destination
before a checkout: existence probing, classified directory listing,
the per-leaf deletion walk, and the final purge.
"""

from clonectl.removal.errors import (
    ErrorKind,
    FilesystemError,
    FinalizeError,
    ListingError,
    RemovalError,
    classify_os_error,
)
from clonectl.removal.finalizer import Finalizer
from clonectl.removal.models import Entry, EntryKind, RemovalReport, RemovalWarning
from clonectl.removal.primitives import FilesystemPrimitives
from clonectl.removal.probe import PathProbe
from clonectl.removal.reader import TreeReader
from clonectl.removal.remover import Remover, remove
from clonectl.removal.sink import DiagnosticsSink, NullSink
from clonectl.removal.walker import DeletionWalker

__all__ = [
    "DeletionWalker",
    "DiagnosticsSink",
    "Entry",
    "EntryKind",
    "ErrorKind",
    "FilesystemError",
    "FilesystemPrimitives",
    "FinalizeError",
    "Finalizer",
    "ListingError",
    "NullSink",
    "PathProbe",
    "RemovalError",
    "RemovalReport",
    "RemovalWarning",
    "Remover",
    "TreeReader",
    "classify_os_error",
    "remove",
]
