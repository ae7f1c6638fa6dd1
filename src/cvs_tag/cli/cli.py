import logging

import click

from cvs_tag.cli.commands.check_name import check_name_cmd
from cvs_tag.cli.commands.resolve import resolve_cmd
from cvs_tag.cli.commands.run import run_cmd
from cvs_tag.cli.commands.show_command import show_command_cmd
from cvs_tag.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="cvs-tag")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Tag CVS sources after a successful build."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(check_name_cmd)
cli.add_command(resolve_cmd)
cli.add_command(run_cmd)
cli.add_command(show_command_cmd)


def main() -> None:
    """CLI entry point used by the `cvs-tag` console script."""
    cli()
