"""Existence probe for removal targets and leaves."""

from clonectl.removal.errors import FilesystemError
from clonectl.removal.primitives import FilesystemPrimitives


class PathProbe:
    """Reports whether a path currently resolves to a real entity.

    Resolution follows symbolic links, so a dangling link probes as
    absent. Never raises.
    """

    def __init__(self, primitives: FilesystemPrimitives | None = None) -> None:
        self._fs = primitives or FilesystemPrimitives()

    def exists(self, path: str) -> bool:
        """Check if ``path`` resolves to a non-empty canonical path.

        Args:
            path: Path to probe.

        Returns:
            True if resolution succeeds, False on any resolution failure.
        """
        try:
            return bool(self._fs.realpath(path))
        except FilesystemError:
            return False
