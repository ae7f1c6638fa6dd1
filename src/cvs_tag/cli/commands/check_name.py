"""Check a tag template the way the job configuration form does."""

import click

from cvs_tag.naming import TagNameCheckFailed, check_tag_name
from cvs_tag.output import machine_output, user_output


@click.command("check-name")
@click.argument("template")
def check_name_cmd(template: str) -> None:
    """Validate TEMPLATE against an empty environment.

    Prints OK and the resolved sample name, or the validation error.
    """
    result = check_tag_name(template)
    if isinstance(result, TagNameCheckFailed):
        user_output(click.style("Error: ", fg="red") + result.message)
        raise SystemExit(1)
    machine_output(f"OK {result.resolved}")
