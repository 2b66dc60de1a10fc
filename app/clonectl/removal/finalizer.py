"""Unconditional final purge of a removal target."""

from clonectl.removal.errors import FilesystemError, FinalizeError
from clonectl.removal.primitives import FilesystemPrimitives, is_missing
from clonectl.removal.sink import DiagnosticsSink, NullSink


class Finalizer:
    """Recursively force-deletes a path; a missing path is success."""

    def __init__(
        self,
        *,
        primitives: FilesystemPrimitives | None = None,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        self._fs = primitives or FilesystemPrimitives()
        self._sink = sink or NullSink()

    def purge(self, path: str) -> None:
        """Remove ``path`` and everything beneath it.

        Args:
            path: Target to destroy.

        Raises:
            FinalizeError: If removal fails for any reason other than the
                path being absent.
        """
        self._sink.debug("Purging %s ...", path)

        try:
            self._fs.force_remove_tree(path)
        except FilesystemError as e:
            if is_missing(e):
                return
            msg = f"Cannot guarantee removal of {path}: {e}"
            raise FinalizeError(msg, path=path, kind=e.kind) from e
