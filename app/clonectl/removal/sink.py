"""Diagnostics sinks for the removal core.

Components report progress through a sink passed to them explicitly.
Any ``logging.Logger`` satisfies the protocol.
"""

from typing import Protocol


class DiagnosticsSink(Protocol):
    """Receiver for human-readable progress lines (``%``-style formatting)."""

    def debug(self, msg: str, *args: object) -> None: ...

    def info(self, msg: str, *args: object) -> None: ...

    def warning(self, msg: str, *args: object) -> None: ...


class NullSink:
    """Sink that discards everything."""

    def debug(self, msg: str, *args: object) -> None:
        pass

    def info(self, msg: str, *args: object) -> None:
        pass

    def warning(self, msg: str, *args: object) -> None:
        pass
