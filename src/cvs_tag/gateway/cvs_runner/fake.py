"""Fake cvs runner for testing."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from cvs_tag.gateway.build_log.abc import BuildLog
from cvs_tag.gateway.cvs_runner.abc import CvsRunInterrupted, CvsRunner


@dataclass(frozen=True)
class RunCall:
    args: tuple[str, ...]
    cwd: Path
    env: dict[str, str]
    cwd_existed: bool


class FakeCvsRunner(CvsRunner):
    """In-memory runner that never launches a process.

    Constructor Injection:
    ---------------------
    - exit_code: Exit code reported for every run
    - output_lines: Lines written to the build log as process output
    - launch_error: Raised instead of running (simulates I/O failure)
    - interrupted: Raise CvsRunInterrupted instead of running

    Mutation Tracking:
    -----------------
    - run_calls: RunCall records, including whether cwd existed during the run
    """

    def __init__(
        self,
        *,
        exit_code: int,
        output_lines: list[str] | None,
        launch_error: OSError | None,
        interrupted: bool,
    ) -> None:
        self._exit_code = exit_code
        self._output_lines = output_lines if output_lines is not None else []
        self._launch_error = launch_error
        self._interrupted = interrupted
        self._run_calls: list[RunCall] = []

    @classmethod
    def create_succeeding(cls) -> "FakeCvsRunner":
        """Create a FakeCvsRunner whose commands all exit 0."""
        return cls(exit_code=0, output_lines=None, launch_error=None, interrupted=False)

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        env: Mapping[str, str],
        log: BuildLog,
    ) -> int:
        self._run_calls.append(
            RunCall(args=tuple(args), cwd=cwd, env=dict(env), cwd_existed=cwd.is_dir())
        )

        if self._launch_error is not None:
            raise self._launch_error

        if self._interrupted:
            raise CvsRunInterrupted(f"interrupted while waiting for {args[0]}")

        for line in self._output_lines:
            log.println(line)
        return self._exit_code

    @property
    def run_calls(self) -> list[RunCall]:
        return list(self._run_calls)
