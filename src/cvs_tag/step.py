"""Post-build tagging step.

This is the seam a build host calls after a build finishes. The step skips
unsuccessful builds and non-CVS projects, resolves and validates the tag
template, builds the cvs command and executes it, converting every failure
into an ExecutionOutcome.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from cvs_tag.command import build_tag_command
from cvs_tag.executor import execute_tag_command
from cvs_tag.expression import (
    TemplateSyntaxError,
    VariableEnvironment,
    default_system_properties,
    local_now,
    resolve_template,
)
from cvs_tag.gateway.build_log.abc import BuildLog
from cvs_tag.gateway.cvs_runner.abc import CvsRunner
from cvs_tag.naming import InvalidTagName, ValidTagName, validate_tag_name
from cvs_tag.outcome import ExecutionOutcome, TagFailed, TagSucceeded
from cvs_tag.scm import ScmDescriptor, UnsupportedScm

logger = logging.getLogger(__name__)

SKIP_UNSUCCESSFUL_MESSAGE = "Skipping CVS Tagging as build result was not successful."


class BuildResult(Enum):
    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"
    NOT_BUILT = "NOT_BUILT"
    ABORTED = "ABORTED"


@dataclass(frozen=True)
class BuildContext:
    """What the build host knows about the finished build."""

    result: BuildResult
    scm: ScmDescriptor | UnsupportedScm
    environment: Mapping[str, str]
    workspace_root: Path
    timestamp: datetime


class TaggingStep:
    """Tags the sources of a successful build."""

    def __init__(
        self,
        *,
        runner: CvsRunner,
        system_properties: Mapping[str, str] | None = None,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        self._runner = runner
        self._system_properties = (
            system_properties if system_properties is not None else default_system_properties()
        )
        self._clock = clock

    def resolve_and_validate(
        self, tag_template: str, environment: Mapping[str, str]
    ) -> ValidTagName | InvalidTagName:
        """Resolve a template against the build environment and validate the result.

        Raises:
            TemplateSyntaxError: If the template is malformed
        """
        env = VariableEnvironment(variables=environment, system=self._system_properties)
        return validate_tag_name(resolve_template(tag_template, env, now=self._clock()))

    def execute(
        self, build: BuildContext, *, tag_template: str, move_tag: bool, log: BuildLog
    ) -> ExecutionOutcome:
        if build.result is not BuildResult.SUCCESS:
            log.println(SKIP_UNSUCCESSFUL_MESSAGE)
            return TagSucceeded(skipped_reason="build-not-successful")

        if isinstance(build.scm, UnsupportedScm):
            log.println(f"CVS Tag plugin does not support tagging for SCM {build.scm.describe()}.")
            return TagSucceeded(skipped_reason="unsupported-scm")

        try:
            validation = self.resolve_and_validate(tag_template, build.environment)
        except TemplateSyntaxError as e:
            log.error(f"Invalid tag template {tag_template!r}: {e}", exc=None)
            return TagFailed(cause=f"template-syntax: {e}")

        if isinstance(validation, InvalidTagName):
            log.error(validation.message, exc=None)
            return TagFailed(cause=f"{validation.error_type}: {validation.reason}")

        command = build_tag_command(
            build.scm,
            validation.tag_name,
            move_tag=move_tag,
            build_timestamp=build.timestamp,
        )
        logger.debug("Built %s command: %s", command.mode.value, command.args)

        return execute_tag_command(
            command,
            runner=self._runner,
            log=log,
            env=build.environment,
            workspace_root=build.workspace_root,
        )


def perform(
    build_result: BuildResult,
    scm: ScmDescriptor | UnsupportedScm,
    environment: Mapping[str, str],
    workspace_root: Path,
    build_timestamp: datetime,
    tag_template: str,
    move_tag: bool,
    log: BuildLog,
    *,
    runner: CvsRunner,
) -> ExecutionOutcome:
    """Tag a finished build. See TaggingStep.execute."""
    build = BuildContext(
        result=build_result,
        scm=scm,
        environment=environment,
        workspace_root=workspace_root,
        timestamp=build_timestamp,
    )
    step = TaggingStep(runner=runner)
    return step.execute(build, tag_template=tag_template, move_tag=move_tag, log=log)
