"""Error taxonomy for the removal core.

Platform errno values are mapped into the closed ErrorKind set exactly
once, by the filesystem primitives. Everything above that boundary
matches on ErrorKind only.
"""

import errno
from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of filesystem failure kinds.

    Attributes:
        NOT_FOUND: The path (or a component of it) does not exist.
        PERMISSION_DENIED: EACCES or EPERM.
        NOT_A_DIRECTORY: A directory operation hit a non-directory.
        IS_A_DIRECTORY: A file operation hit a directory.
        BUSY: The path is held open or mounted (EBUSY, ETXTBSY).
        OTHER: Anything else.
    """

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    BUSY = "busy"
    OTHER = "other"


_ERRNO_KINDS: dict[int, ErrorKind] = {
    errno.ENOENT: ErrorKind.NOT_FOUND,
    errno.EACCES: ErrorKind.PERMISSION_DENIED,
    errno.EPERM: ErrorKind.PERMISSION_DENIED,
    errno.ENOTDIR: ErrorKind.NOT_A_DIRECTORY,
    errno.EISDIR: ErrorKind.IS_A_DIRECTORY,
    errno.EBUSY: ErrorKind.BUSY,
    errno.ETXTBSY: ErrorKind.BUSY,
}


def classify_os_error(error: OSError) -> ErrorKind:
    """Map an OSError to its ErrorKind.

    Args:
        error: Error raised by an os call.

    Returns:
        The matching ErrorKind, OTHER when the errno is not recognised.
    """
    if error.errno is None:
        return ErrorKind.OTHER
    return _ERRNO_KINDS.get(error.errno, ErrorKind.OTHER)


class FilesystemError(Exception):
    """Raised by FilesystemPrimitives when an operation fails.

    Attributes:
        kind: Classified failure kind.
        path: Path the operation was applied to.
        operation: Name of the primitive (realpath, scandir, unlink, ...).
    """

    def __init__(self, kind: ErrorKind, path: str, operation: str, detail: str = "") -> None:
        self.kind = kind
        self.path = path
        self.operation = operation
        self.detail = detail
        message = f"{operation} failed for {path}: {kind.value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    @classmethod
    def from_os_error(cls, error: OSError, path: str, operation: str) -> "FilesystemError":
        """Build a FilesystemError from the OSError that caused it."""
        return cls(classify_os_error(error), path, operation, error.strerror or str(error))


class RemovalError(Exception):
    """Base exception for failures that abort a removal.

    Attributes:
        path: Path the failing step operated on.
        kind: Classified failure kind of the underlying error.
    """

    def __init__(self, message: str, path: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.path = path
        self.kind = kind


class ListingError(RemovalError):
    """Raised when a directory cannot be enumerated.

    Fatal only for the top-level target; nested listing failures are
    recorded as warnings by the walker.
    """


class FinalizeError(RemovalError):
    """Raised when the final purge cannot destroy the target.

    The target may still exist; usually something outside the caller's
    control holds it open.
    """
