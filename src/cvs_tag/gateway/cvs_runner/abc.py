"""Abstract base class for launching the cvs executable."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path

from cvs_tag.gateway.build_log.abc import BuildLog


class CvsRunInterrupted(Exception):
    """Raised when the wait for the cvs process is cancelled."""


class CvsRunner(ABC):
    """Runs one external command to completion."""

    @abstractmethod
    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        env: Mapping[str, str],
        log: BuildLog,
    ) -> int:
        """Run a command and block until it exits.

        Args:
            args: Argument vector, starting with the executable
            cwd: Working directory for the process
            env: Variables added to the inherited environment
            log: Receives each line the process writes to stdout/stderr

        Returns:
            The process exit code

        Raises:
            OSError: If the process cannot be started or read from
            CvsRunInterrupted: If the wait is cancelled
        """
        ...
