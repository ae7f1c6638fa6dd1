"""Production cvs runner using subprocess."""

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from cvs_tag.gateway.build_log.abc import BuildLog
from cvs_tag.gateway.cvs_runner.abc import CvsRunInterrupted, CvsRunner

logger = logging.getLogger(__name__)


class RealCvsRunner(CvsRunner):
    """Launches the command as a child process and streams its output to the build log."""

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        env: Mapping[str, str],
        log: BuildLog,
    ) -> int:
        logger.debug("Launching %s in %s", list(args), cwd)
        with subprocess.Popen(
            list(args),
            cwd=cwd,
            env={**os.environ, **env},
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            # cvs output may carry file names in any encoding
            encoding="utf-8",
            errors="replace",
        ) as process:
            try:
                assert process.stdout is not None
                for line in process.stdout:
                    log.println(line.rstrip("\n"))
                exit_code = process.wait()
            except KeyboardInterrupt as e:
                process.kill()
                process.wait()
                raise CvsRunInterrupted(f"interrupted while waiting for {args[0]}") from e
        logger.debug("%s exited with code %d", args[0], exit_code)
        return exit_code
