"""No-op cvs runner for dry-run mode."""

import shlex
from collections.abc import Mapping, Sequence
from pathlib import Path

from cvs_tag.gateway.build_log.abc import BuildLog
from cvs_tag.gateway.cvs_runner.abc import CvsRunner
from cvs_tag.output import user_output


class DryRunCvsRunner(CvsRunner):
    """Prints the command that would run and reports success without launching it.

    Usage:
        runner = DryRunCvsRunner()
        runner.run(["cvs", "-d", root, "tag", ...], cwd=workspace, env={}, log=log)
    """

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path,
        env: Mapping[str, str],
        log: BuildLog,
    ) -> int:
        user_output(f"[DRY RUN] Would run: {shlex.join(args)} (in {cwd})")
        return 0
