"""Directory listing for the removal walk."""

import os
from collections.abc import Iterator

from clonectl.removal.errors import FilesystemError, ListingError
from clonectl.removal.models import Entry
from clonectl.removal.primitives import FilesystemPrimitives


class TreeReader:
    """Lists and classifies the immediate children of a directory."""

    def __init__(self, primitives: FilesystemPrimitives | None = None) -> None:
        self._fs = primitives or FilesystemPrimitives()

    def list(self, directory: str) -> Iterator[Entry]:
        """List the children of ``directory``.

        The directory is resolved to an absolute path once; every entry
        path is built from that base. The listing is read before this
        method returns, so failures surface here and not mid-iteration.

        Args:
            directory: Directory to list.

        Returns:
            Iterator over one Entry per child, in filesystem order.

        Raises:
            ListingError: If the directory cannot be enumerated.
        """
        base = os.path.abspath(directory)

        try:
            children = self._fs.scandir(directory)
        except FilesystemError as e:
            msg = f"Cannot list directory {base}: {e.kind.value}"
            raise ListingError(msg, path=base, kind=e.kind) from e

        entries = [
            Entry(name=name, path=os.path.join(base, name), kind=kind) for name, kind in children
        ]
        return iter(entries)
