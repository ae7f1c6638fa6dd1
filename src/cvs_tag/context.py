"""Dependencies shared by CLI commands.

Tests pass a CvsTagContext built from fakes as the click `obj`; the CLI
creates the real one otherwise. `run --dry-run` swaps in DryRunCvsRunner.
"""

from dataclasses import dataclass

from cvs_tag.gateway.build_log.abc import BuildLog
from cvs_tag.gateway.build_log.real import StreamBuildLog
from cvs_tag.gateway.cvs_runner.abc import CvsRunner
from cvs_tag.gateway.cvs_runner.real import RealCvsRunner


@dataclass(frozen=True)
class CvsTagContext:
    runner: CvsRunner
    log: BuildLog


def create_context() -> CvsTagContext:
    return CvsTagContext(runner=RealCvsRunner(), log=StreamBuildLog())
