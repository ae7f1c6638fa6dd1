"""Resolve a tag template against the current environment."""

import click

from cvs_tag.cli.commands.build_options import build_environment
from cvs_tag.expression import (
    TemplateSyntaxError,
    VariableEnvironment,
    default_system_properties,
    resolve_template,
)
from cvs_tag.output import machine_output, user_output


@click.command("resolve")
@click.argument("template")
@click.option("--env", "env_pairs", multiple=True, help="Set a build variable (KEY=VALUE)")
def resolve_cmd(template: str, env_pairs: tuple[str, ...]) -> None:
    """Print the tag name TEMPLATE resolves to."""
    env = VariableEnvironment(
        variables=build_environment(env_pairs), system=default_system_properties()
    )
    try:
        resolved = resolve_template(template, env)
    except TemplateSyntaxError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
    machine_output(resolved)
