"""Filesystem primitives used by the removal core.

This is the only module in the removal package that touches ``os``
directly. Every OSError is converted to a FilesystemError carrying a
classified ErrorKind before it leaves this module.
"""

import logging
import os
import stat

from clonectl.removal.errors import ErrorKind, FilesystemError
from clonectl.removal.models import EntryKind

logger = logging.getLogger(__name__)


def _classify_dir_entry(entry: os.DirEntry[str]) -> EntryKind:
    """Classify a directory entry without following symbolic links.

    Args:
        entry: Entry yielded by os.scandir.

    Returns:
        EntryKind for the entry. Nodes that vanish before they can be
        inspected are reported as FILE; the walker's existence probe
        handles them.
    """
    try:
        if entry.is_symlink():
            return EntryKind.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
        if stat.S_ISSOCK(entry.stat(follow_symlinks=False).st_mode):
            return EntryKind.SOCKET
    except OSError:
        logger.debug("Cannot stat %s while listing", entry.path)
    return EntryKind.FILE


def _is_within(path: str, root: str) -> bool:
    path, root = os.path.abspath(path), os.path.abspath(root)
    return os.path.commonpath([path, root]) == root


def _chmod_add(path: str, bits: int) -> None:
    try:
        os.chmod(path, os.stat(path).st_mode | bits)
    except OSError:
        logger.debug("Cannot make %s writable", path)


def _make_writable(path: str, root: str) -> None:
    """Grant the owner access to a path's parent and the path itself.

    Unlinking needs write and search permission on the parent directory;
    removing a directory's children needs the same on the directory.
    Directories outside ``root`` are never changed.
    """
    parent = os.path.dirname(path) or "."
    if _is_within(parent, root):
        _chmod_add(parent, stat.S_IWUSR | stat.S_IXUSR)
    if os.path.isdir(path) and not os.path.islink(path) and _is_within(path, root):
        _chmod_add(path, stat.S_IRWXU)


def _remove_one(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def _force_remove_one(path: str, root: str) -> None:
    """Remove one entry, retrying once after a permission fix."""
    try:
        _remove_one(path)
    except FileNotFoundError:
        return
    except PermissionError:
        _make_writable(path, root)
        try:
            _remove_one(path)
        except FileNotFoundError:
            return


def _list_children(directory: str) -> list[tuple[str, bool]]:
    with os.scandir(directory) as it:
        return [(entry.path, entry.is_dir(follow_symlinks=False)) for entry in it]


def _force_list(directory: str, root: str) -> list[tuple[str, bool]]:
    """List (path, is_directory) children, retrying once after a permission fix."""
    try:
        return _list_children(directory)
    except FileNotFoundError:
        return []
    except PermissionError:
        _make_writable(directory, root)
    try:
        return _list_children(directory)
    except FileNotFoundError:
        return []


class FilesystemPrimitives:
    """Adapter over the filesystem operations the removal core needs.

    Components receive an instance so tests can substitute failures
    without touching a real filesystem.
    """

    def realpath(self, path: str) -> str:
        """Resolve a path strictly, following symbolic links.

        Args:
            path: Path to resolve.

        Returns:
            Canonical absolute path.

        Raises:
            FilesystemError: If any component is missing or unreadable.
        """
        try:
            return os.path.realpath(path, strict=True)
        except OSError as e:
            raise FilesystemError.from_os_error(e, path, "realpath") from e

    def scandir(self, path: str) -> list[tuple[str, EntryKind]]:
        """List the immediate children of a directory with their kinds.

        Args:
            path: Directory to list.

        Returns:
            (name, kind) pairs in the order the filesystem reports them.

        Raises:
            FilesystemError: If the directory cannot be enumerated.
        """
        try:
            with os.scandir(path) as it:
                return [(entry.name, _classify_dir_entry(entry)) for entry in it]
        except OSError as e:
            raise FilesystemError.from_os_error(e, path, "scandir") from e

    def unlink(self, path: str) -> None:
        """Remove a single non-directory entry.

        Symbolic links are removed themselves, never their targets.

        Raises:
            FilesystemError: If the entry cannot be removed.
        """
        try:
            os.unlink(path)
        except OSError as e:
            raise FilesystemError.from_os_error(e, path, "unlink") from e

    def force_remove(self, path: str, *, root: str | None = None) -> None:
        """Remove a single entry, forcing past permission bits.

        Not recursive: an empty directory is removed, a populated one is
        an error. A path that is already gone counts as removed.

        Args:
            path: Entry to remove.
            root: Outermost directory whose permissions may be changed.
                Defaults to the parent of ``path``.

        Raises:
            FilesystemError: If the entry still cannot be removed.
        """
        if root is None:
            root = os.path.dirname(path) or "."
        try:
            _force_remove_one(path, root)
        except OSError as e:
            raise FilesystemError.from_os_error(e, path, "force_remove") from e

    def force_remove_tree(self, path: str) -> None:
        """Remove a path and everything beneath it.

        Symbolic links are unlinked, never followed. Missing entries,
        including ``path`` itself, count as removed. Permissions are only
        changed on ``path`` and directories beneath it. The traversal keeps
        its own stack, so tree depth is not bounded by the interpreter's
        recursion limit.

        Raises:
            FilesystemError: If anything beneath the path cannot be removed.
        """
        if not os.path.lexists(path):
            return

        try:
            if os.path.islink(path) or not os.path.isdir(path):
                _force_remove_one(path, path)
                return

            # (directory, children already removed)
            pending: list[tuple[str, bool]] = [(path, False)]
            while pending:
                directory, emptied = pending.pop()
                if emptied:
                    _force_remove_one(directory, path)
                    continue
                pending.append((directory, True))
                for child, is_directory in _force_list(directory, path):
                    if is_directory:
                        pending.append((child, False))
                    else:
                        _force_remove_one(child, path)
        except OSError as e:
            failed = e.filename if isinstance(e.filename, str) else path
            raise FilesystemError.from_os_error(e, failed, "force_remove_tree") from e


def is_missing(error: FilesystemError) -> bool:
    """Check if a primitive failed only because its path does not exist."""
    return error.kind == ErrorKind.NOT_FOUND
