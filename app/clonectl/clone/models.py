"""Clone domain models and errors."""

from dataclasses import dataclass
from enum import Enum

from clonectl.removal.models import RemovalReport


class CloneStrategy(str, Enum):
    """How the git executable is launched.

    Attributes:
        SPAWN: Argument vector, no shell, all output discarded.
        EXECUTE: Argument vector, no shell, output captured.
        SHELL: Quoted command line run through /bin/sh, output captured.
        WRAPPER: Argument vector, inherits the terminal (prompts, progress).
    """

    SPAWN = "spawn"
    EXECUTE = "execute"
    SHELL = "shell"
    WRAPPER = "wrapper"


@dataclass(frozen=True, slots=True)
class RepositoryAddress:
    """Components of a repository URL.

    Attributes:
        hostname: Scheme and host prefix, e.g. "https://github.com/" or "git@github.com:".
        namespace: Owner or group.
        name: Repository name without a ".git" suffix.
    """

    hostname: str
    namespace: str
    name: str

    @property
    def slug(self) -> str:
        """Namespace and name joined as "owner/repo"."""
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True, slots=True)
class CloneResult:
    """Result of a successful clone.

    Attributes:
        repository: URL that was cloned.
        directory: Destination directory.
        branch: Branch checked out, None for the remote HEAD.
        strategy: Strategy used to run git.
        removal: Report of the destination clean-up that preceded the clone.
        output: Captured git output (empty for non-capturing strategies).
    """

    repository: str
    directory: str
    branch: str | None
    strategy: CloneStrategy
    removal: RemovalReport
    output: str = ""


class CloneError(Exception):
    """Base exception for clone failures."""


class RepositoryAddressError(CloneError, ValueError):
    """Raised when a repository URL cannot be parsed."""


class GitCommandError(CloneError):
    """Raised when the git process fails, times out, or cannot start.

    Attributes:
        returncode: Exit code, None if the process never completed.
        stderr: Captured standard error, empty for non-capturing strategies.
    """

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
