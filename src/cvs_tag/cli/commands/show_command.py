"""Print the cvs command a build would run, without running it."""

from pathlib import Path

import click

from cvs_tag.cli.commands.build_options import (
    build_environment,
    build_options,
    load_config_or_exit,
    parse_timestamp,
)
from cvs_tag.command import build_tag_command
from cvs_tag.config import effective_tag_template
from cvs_tag.context import CvsTagContext
from cvs_tag.expression import TemplateSyntaxError
from cvs_tag.naming import InvalidTagName
from cvs_tag.output import machine_output, user_output
from cvs_tag.scm import UnsupportedScm
from cvs_tag.step import TaggingStep


@click.command("show-command")
@build_options
@click.pass_obj
def show_command_cmd(
    ctx: CvsTagContext,
    workspace: Path,
    config_path: Path | None,
    tag_name: str | None,
    move_tag: bool | None,
    timestamp: str | None,
    env_pairs: tuple[str, ...],
) -> None:
    """Print the tag command for the configured workspace."""
    config = load_config_or_exit(workspace, config_path)
    if isinstance(config.scm, UnsupportedScm):
        user_output(
            click.style("Error: ", fg="red")
            + f"tagging is not supported for SCM {config.scm.describe()}"
        )
        raise SystemExit(1)

    template = effective_tag_template(tag_name, config.tag_template)
    step = TaggingStep(runner=ctx.runner)
    try:
        validation = step.resolve_and_validate(template, build_environment(env_pairs))
    except TemplateSyntaxError as e:
        user_output(click.style("Error: ", fg="red") + f"Invalid tag template: {e}")
        raise SystemExit(1) from e
    if isinstance(validation, InvalidTagName):
        user_output(click.style("Error: ", fg="red") + validation.message)
        raise SystemExit(1)

    command = build_tag_command(
        config.scm,
        validation.tag_name,
        move_tag=config.move_tag if move_tag is None else move_tag,
        build_timestamp=parse_timestamp(timestamp),
    )
    machine_output(command.display())
