"""Tag the sources of a finished build."""

from pathlib import Path

import click

from cvs_tag.cli.commands.build_options import (
    build_environment,
    build_options,
    load_config_or_exit,
    parse_timestamp,
)
from cvs_tag.config import effective_tag_template
from cvs_tag.context import CvsTagContext
from cvs_tag.gateway.cvs_runner.dry_run import DryRunCvsRunner
from cvs_tag.outcome import TagFailed, TagUnstable
from cvs_tag.output import user_output
from cvs_tag.step import BuildResult, perform

# Click uses exit code 2 for usage errors
UNSTABLE_EXIT_CODE = 3


@click.command("run")
@build_options
@click.option(
    "--build-result",
    type=click.Choice([r.value for r in BuildResult]),
    default=BuildResult.SUCCESS.value,
    show_default=True,
    help="Result of the finished build",
)
@click.option("--dry-run", is_flag=True, help="Print the cvs command instead of running it")
@click.pass_obj
def run_cmd(
    ctx: CvsTagContext,
    workspace: Path,
    config_path: Path | None,
    tag_name: str | None,
    move_tag: bool | None,
    timestamp: str | None,
    env_pairs: tuple[str, ...],
    build_result: str,
    dry_run: bool,
) -> None:
    """Tag the workspace sources in CVS.

    Exits 0 when tagging succeeded or was skipped, 1 when it failed and 3 when
    the cvs command returned an error (the build should be marked unstable).
    """
    config = load_config_or_exit(workspace, config_path)
    runner = DryRunCvsRunner() if dry_run else ctx.runner

    outcome = perform(
        BuildResult(build_result),
        config.scm,
        build_environment(env_pairs),
        workspace.resolve(),
        parse_timestamp(timestamp),
        effective_tag_template(tag_name, config.tag_template),
        config.move_tag if move_tag is None else move_tag,
        ctx.log,
        runner=runner,
    )

    if isinstance(outcome, TagFailed):
        user_output(click.style("Error: ", fg="red") + outcome.message)
        raise SystemExit(1)
    if isinstance(outcome, TagUnstable):
        user_output(click.style("Warning: ", fg="yellow") + outcome.message)
        raise SystemExit(UNSTABLE_EXIT_CODE)
    if outcome.skipped:
        user_output(f"Tagging skipped ({outcome.skipped_reason})")
    else:
        user_output(click.style("✓ ", fg="green") + "Tagging completed")
