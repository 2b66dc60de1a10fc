"""Git clone execution.

Clears the destination with the removal core, then runs ``git clone``
using one of four interchangeable launch strategies.
"""

import logging
import os
import shlex
import subprocess

from clonectl.clone.address import parse_repository
from clonectl.clone.models import CloneResult, CloneStrategy, GitCommandError
from clonectl.removal import remove
from clonectl.removal.sink import DiagnosticsSink
from clonectl.utils.shell import run_command, run_interactive, run_silent

logger = logging.getLogger(__name__)

# Characters stripped from every argument before it reaches git
_UNSAFE_CHARACTERS = str.maketrans("", "", "${}()")


def build_clone_args(
    repository: str, directory: str | None, branch: str | None = None
) -> list[str]:
    """Build the ``git clone`` argument vector (without the executable).

    Args:
        repository: Repository URL.
        directory: Destination directory, None to let git choose.
        branch: Branch to check out, None for the remote HEAD.

    Returns:
        Argument list starting with "clone".
    """
    args = ["clone", repository]
    if branch:
        args += ["--branch", branch]
    if directory is not None:
        args.append(directory)
    return [arg.translate(_UNSAFE_CHARACTERS) for arg in args]


class GitCloner:
    """Clones repositories into a freshly cleared directory.

    Args:
        strategy: How git is launched.
        git: Git executable name or path.
        timeout: Seconds to wait for git. Ignored by WRAPPER, which is
            interactive and may wait for credentials.
    """

    def __init__(
        self,
        strategy: CloneStrategy = CloneStrategy.EXECUTE,
        *,
        git: str = "git",
        timeout: float | None = 30.0,
    ) -> None:
        self._strategy = strategy
        self._git = git
        self._timeout = timeout

    @property
    def strategy(self) -> CloneStrategy:
        """Strategy used to launch git."""
        return self._strategy

    def clone(
        self,
        repository: str,
        directory: str | None = None,
        branch: str | None = None,
        *,
        sink: DiagnosticsSink | None = None,
    ) -> CloneResult:
        """Remove the destination, then clone ``repository`` into it.

        Args:
            repository: Repository URL.
            directory: Destination; defaults to the repository name.
            branch: Branch to check out, None for the remote HEAD.
            sink: Receiver for the removal core's progress lines.

        Returns:
            CloneResult describing the clone and the removal before it.

        Raises:
            RepositoryAddressError: If the URL cannot be parsed.
            RemovalError: If the destination cannot be cleared.
            GitCommandError: If git fails, times out, or is not installed.
        """
        address = parse_repository(repository)
        destination = directory or address.name

        logger.info("Clearing destination %s", destination)
        report = remove(destination, sink=sink)

        args = build_clone_args(repository, os.path.relpath(destination), branch)
        logger.debug("Running %s clone: %s %s", self._strategy.value, self._git, args)

        output = self._run([self._git, *args])

        logger.info("Cloned %s into %s", address.slug, destination)
        return CloneResult(
            repository=repository,
            directory=destination,
            branch=branch,
            strategy=self._strategy,
            removal=report,
            output=output,
        )

    def _run(self, argv: list[str]) -> str:
        """Run git with the configured strategy and return captured output."""
        try:
            if self._strategy == CloneStrategy.SPAWN:
                code = run_silent(argv, timeout=self._timeout)
                self._check(code)
                return ""

            if self._strategy == CloneStrategy.WRAPPER:
                code = run_interactive(argv)
                self._check(code)
                return ""

            if self._strategy == CloneStrategy.SHELL:
                result = run_command(shlex.join(argv), timeout=self._timeout, shell=True)
            else:
                result = run_command(argv, timeout=self._timeout)
        except FileNotFoundError as e:
            raise GitCommandError(f"Git executable not found: {self._git}") from e
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(f"git clone timed out after {self._timeout}s") from e

        self._check(result.returncode, result.stderr)
        return result.stdout + result.stderr

    @staticmethod
    def _check(returncode: int, stderr: str = "") -> None:
        if returncode != 0:
            detail = stderr.strip() or f"exit code {returncode}"
            raise GitCommandError(f"git clone failed: {detail}", returncode, stderr)
