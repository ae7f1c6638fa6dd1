"""Execution of a built tag command.

Branch-mode commands run in the workspace. Date-mode (rtag) commands must run
outside a CVS working copy, so they run in a fresh temporary directory created
under the workspace and removed once the process has finished.

All failures are converted into an ExecutionOutcome; nothing raised by the
runner escapes execute_tag_command.
"""

import logging
import shutil
import tempfile
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path

from cvs_tag.command import TagCommand
from cvs_tag.gateway.build_log.abc import BuildLog
from cvs_tag.gateway.cvs_runner.abc import CvsRunInterrupted, CvsRunner
from cvs_tag.outcome import ExecutionOutcome, TagFailed, TagSucceeded, TagUnstable

logger = logging.getLogger(__name__)

DISPLAY_NAME = "Perform CVS tagging on successful build"

TEMP_DIR_PREFIX = "cvs-tag-"


@contextmanager
def scoped_work_dir(workspace_root: Path, *, use_temp_dir: bool, log: BuildLog) -> Iterator[Path]:
    """Yield the directory a tag command runs in.

    With `use_temp_dir`, a uniquely named directory is created under
    `workspace_root` and deleted on exit, whatever happened inside the block.
    Deletion failures are written to the build log and otherwise ignored.
    """
    if not use_temp_dir:
        yield workspace_root
        return

    work_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX, dir=workspace_root))
    logger.debug("Created temporary working directory %s", work_dir)
    try:
        yield work_dir
    finally:
        log.println(f"cleaning up {work_dir}")
        try:
            shutil.rmtree(work_dir)
        except OSError as e:
            log.error(f"Failed to delete {work_dir}: {e}", exc=e)


def execute_tag_command(
    command: TagCommand,
    *,
    runner: CvsRunner,
    log: BuildLog,
    env: Mapping[str, str],
    workspace_root: Path,
) -> ExecutionOutcome:
    """Run a tag command and map the result to an outcome.

    Args:
        command: Command produced by build_tag_command
        runner: Gateway that launches the process
        log: Build log receiving the echoed command, process output and notices
        env: Build environment passed to the process
        workspace_root: Build workspace

    Returns:
        TagSucceeded on exit code 0, TagUnstable on any other exit code,
        TagFailed if the process could not be run or the wait was interrupted
    """
    log.println(f"Executing tag command: {command.display()}")

    try:
        with scoped_work_dir(
            workspace_root, use_temp_dir=not command.uses_branch, log=log
        ) as work_dir:
            exit_code = runner.run(command.args, cwd=work_dir, env=env, log=log)
            if exit_code != 0:
                log.fatal_error(f"{DISPLAY_NAME} failed. exit code={exit_code}")
    except OSError as e:
        log.error(str(e), exc=e)
        log.println(f"I/O error occurred: {e}")
        return TagFailed(cause=f"I/O error: {e}")
    except CvsRunInterrupted as e:
        log.error(str(e), exc=e)
        log.println(f"Interrupted: {e}")
        return TagFailed(cause=f"interrupted: {e}")

    if exit_code != 0:
        return TagUnstable(exit_code=exit_code)
    return TagSucceeded()
