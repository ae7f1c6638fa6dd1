"""Abstract base class for the build log.

The build log is the user-visible console of a build: every notable event of
the tagging step (skips, the echoed command, process output, failures and
cleanup) is written here as plain text lines.
"""

from abc import ABC, abstractmethod


class BuildLog(ABC):
    """Sink for build console lines."""

    @abstractmethod
    def println(self, line: str) -> None:
        """Write one informational line."""
        ...

    @abstractmethod
    def error(self, message: str, *, exc: BaseException | None) -> None:
        """Write an error line, followed by the traceback of `exc` when given."""
        ...

    @abstractmethod
    def fatal_error(self, message: str) -> None:
        """Write a fatal-level line."""
        ...
