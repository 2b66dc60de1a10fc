"""Recursive, observable deletion pass.

The walker unlinks every leaf it can reach and reports each step. It
never removes directories; emptied directory shells and anything the
walker could not resolve are left for the Finalizer.
"""

from collections.abc import Iterator

from clonectl.removal.errors import ErrorKind, FilesystemError, ListingError
from clonectl.removal.models import Entry, RemovalReport, RemovalWarning
from clonectl.removal.primitives import FilesystemPrimitives
from clonectl.removal.probe import PathProbe
from clonectl.removal.reader import TreeReader
from clonectl.removal.sink import DiagnosticsSink, NullSink


class DeletionWalker:
    """Depth-first deletion of the leaves below a directory.

    Siblings are visited one at a time; a directory counts as cleaned
    only after its whole subtree has been visited.

    Args:
        report: Audit trail the walker appends to.
        primitives: Filesystem adapter shared with the probe and reader.
        sink: Receiver for progress and warning lines.
    """

    def __init__(
        self,
        report: RemovalReport,
        *,
        primitives: FilesystemPrimitives | None = None,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        self._fs = primitives or FilesystemPrimitives()
        self._probe = PathProbe(self._fs)
        self._reader = TreeReader(self._fs)
        self._sink = sink or NullSink()
        self._report = report

    def clean(self, entry: Entry) -> None:
        """Delete ``entry`` if it is a leaf, or every leaf below it.

        The walk keeps an explicit stack of sibling iterators, so a
        directory's subtree is finished before its next sibling is
        visited and depth is not bounded by the recursion limit.

        Args:
            entry: Descriptor produced by TreeReader.
        """
        pending: list[Iterator[Entry]] = [iter((entry,))]
        while pending:
            current = next(pending[-1], None)
            if current is None:
                pending.pop()
            elif current.is_directory:
                children = self._list_children(current)
                if children is not None:
                    pending.append(children)
            else:
                self._clean_leaf(current)

    def _list_children(self, entry: Entry) -> Iterator[Entry] | None:
        try:
            return self._reader.list(entry.path)
        except ListingError as e:
            self._warn(entry.path, e.kind, str(e))
            return None

    def _clean_leaf(self, entry: Entry) -> None:
        if not self._probe.exists(entry.path):
            self._sink.debug("Already gone: %s", entry.path)
            self._report.skipped.append(entry.path)
            return

        self._sink.debug("Removing %s (%s) ...", entry.path, entry.kind.value)

        try:
            self._fs.unlink(entry.path)
        except FilesystemError as e:
            if e.kind == ErrorKind.PERMISSION_DENIED:
                self._retry_forced(entry, e)
            else:
                self._warn(entry.path, e.kind, str(e))
            return

        self._report.removed.append(entry.path)

    def _retry_forced(self, entry: Entry, first: FilesystemError) -> None:
        """Escalate a permission-denied unlink to one forced removal."""
        self._sink.debug("Permission denied on %s, retrying with forced removal", entry.path)

        try:
            self._fs.force_remove(entry.path)
        except FilesystemError as e:
            self._warn(entry.path, e.kind, f"{first}; forced retry failed: {e}")
            return

        self._report.retried.append(entry.path)

    def _warn(self, path: str, kind: ErrorKind, message: str) -> None:
        self._sink.warning("%s", message)
        self._report.warnings.append(RemovalWarning(path=path, kind=kind, message=message))
