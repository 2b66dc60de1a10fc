"""Removal domain models.

Defines the entry descriptors produced by directory listings and the
audit trail collected while a tree is being removed.
"""

from dataclasses import dataclass, field
from enum import Enum

from clonectl.removal.errors import ErrorKind


class EntryKind(str, Enum):
    """Type of a listed filesystem entry, taken once at listing time.

    Attributes:
        FILE: Regular file or any other non-directory special node.
        DIRECTORY: Directory (never a symlink to one).
        SOCKET: Unix domain socket.
        SYMLINK: Symbolic link, dangling or not.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SOCKET = "socket"
    SYMLINK = "symlink"


@dataclass(frozen=True, slots=True)
class Entry:
    """One filesystem node discovered during a directory listing.

    Attributes:
        name: Base name of the node.
        path: Absolute path of the node, unique within one walk.
        kind: Classification taken at listing time.
    """

    name: str
    path: str
    kind: EntryKind

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.name:
            msg = "Entry name cannot be empty"
            raise ValueError(msg)
        if not self.path:
            msg = "Entry path cannot be empty"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        """Check if the walker recurses into this entry."""
        return self.kind == EntryKind.DIRECTORY

    @property
    def is_leaf(self) -> bool:
        """Check if the walker deletes this entry directly."""
        return self.kind != EntryKind.DIRECTORY


@dataclass(frozen=True, slots=True)
class RemovalWarning:
    """A non-fatal failure recorded during the walk.

    Attributes:
        path: Entry that could not be handled.
        kind: Classified failure kind.
        message: Human-readable description.
    """

    path: str
    kind: ErrorKind
    message: str


@dataclass(slots=True)
class RemovalReport:
    """Audit trail of one removal.

    Attributes:
        target: Path requested for destruction.
        existed: Whether the target existed when the removal started.
        removed: Leaves unlinked on the first attempt, in visiting order.
        retried: Leaves removed by the forced retry after permission denial.
        skipped: Leaves already gone when the walker reached them.
        warnings: Non-fatal failures, left for the final purge.
    """

    target: str
    existed: bool = False
    removed: list[str] = field(default_factory=list)
    retried: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    warnings: list[RemovalWarning] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every leaf was handled without a warning."""
        return not self.warnings

    @property
    def leaf_count(self) -> int:
        """Number of leaves the walker reached."""
        return len(self.removed) + len(self.retried) + len(self.skipped) + len(self.warnings)
