"""Test doubles shared by the removal tests."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from clonectl.removal.errors import ErrorKind, FilesystemError
from clonectl.removal.primitives import FilesystemPrimitives


@dataclass
class RecordingSink:
    """Diagnostics sink that keeps every formatted line."""

    lines: list[tuple[str, str]] = field(default_factory=list)

    def debug(self, msg: str, *args: object) -> None:
        self.lines.append(("debug", msg % args))

    def info(self, msg: str, *args: object) -> None:
        self.lines.append(("info", msg % args))

    def warning(self, msg: str, *args: object) -> None:
        self.lines.append(("warning", msg % args))

    def messages(self, level: str) -> list[str]:
        return [text for lvl, text in self.lines if lvl == level]


class FaultyPrimitives(FilesystemPrimitives):
    """Real primitives with injectable failures per operation and path.

    ``failures[(operation, path)]`` is a list of ErrorKind values consumed
    one per call; when the list is empty the real primitive runs.
    """

    def __init__(self) -> None:
        self.failures: dict[tuple[str, str], list[ErrorKind]] = {}
        self.calls: list[tuple[str, str]] = []

    def fail(self, operation: str, path: str | Path, *kinds: ErrorKind) -> None:
        self.failures.setdefault((operation, os.fspath(path)), []).extend(kinds)

    def _maybe_fail(self, operation: str, path: str) -> None:
        self.calls.append((operation, path))
        pending = self.failures.get((operation, path))
        if pending:
            raise FilesystemError(pending.pop(0), path, operation)

    def realpath(self, path: str) -> str:
        self._maybe_fail("realpath", path)
        return super().realpath(path)

    def scandir(self, path: str):  # type: ignore[no-untyped-def]
        self._maybe_fail("scandir", path)
        return super().scandir(path)

    def unlink(self, path: str) -> None:
        self._maybe_fail("unlink", path)
        super().unlink(path)

    def force_remove(self, path: str, *, root: str | None = None) -> None:
        self._maybe_fail("force_remove", path)
        super().force_remove(path, root=root)

    def force_remove_tree(self, path: str) -> None:
        self._maybe_fail("force_remove_tree", path)
        super().force_remove_tree(path)

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)
