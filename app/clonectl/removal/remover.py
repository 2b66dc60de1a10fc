"""Removal orchestrator.

Runs the two deletion phases against one target: the observable
per-leaf walk, then the unconditional purge that guarantees the target
is gone.

There is no internal timeout. Filesystem calls cannot be interrupted
mid-syscall, so a caller imposing a deadline can only stop waiting;
work already done is not undone.
"""

import os

from clonectl.removal.finalizer import Finalizer
from clonectl.removal.models import Entry, RemovalReport
from clonectl.removal.primitives import FilesystemPrimitives
from clonectl.removal.probe import PathProbe
from clonectl.removal.reader import TreeReader
from clonectl.removal.sink import DiagnosticsSink, NullSink
from clonectl.removal.walker import DeletionWalker


class Remover:
    """Destroys a target path completely.

    Args:
        primitives: Filesystem adapter shared by every component.
        sink: Receiver for progress and warning lines.
    """

    def __init__(
        self,
        *,
        primitives: FilesystemPrimitives | None = None,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        self._fs = primitives or FilesystemPrimitives()
        self._sink = sink or NullSink()
        self._probe = PathProbe(self._fs)
        self._reader = TreeReader(self._fs)
        self._finalizer = Finalizer(primitives=self._fs, sink=self._sink)

    def remove(self, target: str | os.PathLike[str]) -> RemovalReport:
        """Remove ``target`` and everything beneath it.

        Idempotent: a target that does not exist is left untouched and
        yields an empty report.

        Args:
            target: Path to destroy.

        Returns:
            RemovalReport with the per-leaf audit trail.

        Raises:
            ListingError: If the target cannot be listed. The purge is
                not attempted.
            FinalizeError: If the purge cannot destroy the target.
        """
        path = os.fspath(target)
        report = RemovalReport(target=path)

        if not self._probe.exists(path):
            self._sink.debug("Nothing to remove at %s", path)
            return report

        report.existed = True
        self._sink.info("Pre-existing directory found: %s", os.path.abspath(path))

        entries = self._reader.list(path)
        walker = DeletionWalker(report, primitives=self._fs, sink=self._sink)
        for entry in entries:
            walker.clean(entry)

        self._finalizer.purge(path)

        self._sink.info(
            "Removed %s (%d leaves, %d warnings)",
            path,
            report.leaf_count,
            len(report.warnings),
        )
        return report

    def plan(self, target: str | os.PathLike[str]) -> list[Entry]:
        """List what ``remove`` would start from, without deleting anything.

        Args:
            target: Path that would be destroyed.

        Returns:
            Top-level entries of the target, empty if it does not exist.

        Raises:
            ListingError: If the target exists but cannot be listed.
        """
        path = os.fspath(target)
        if not self._probe.exists(path):
            return []
        return list(self._reader.list(path))


def remove(
    target: str | os.PathLike[str],
    *,
    sink: DiagnosticsSink | None = None,
    primitives: FilesystemPrimitives | None = None,
) -> RemovalReport:
    """Remove ``target`` completely. See Remover.remove."""
    return Remover(primitives=primitives, sink=sink).remove(target)
