# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click

# registers the container technologies
import cwrap_lib.container  # noqa: F401
from cwrap_lib.core.click_format import GNUHelpColorsGroup
from cwrap_lib.core.config import CFG
from cwrap_lib.generate.cli import env, init, preamble, remove, run, script
from cwrap_lib.technologies.cli import technologies

__version__ = "0.1.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=GNUHelpColorsGroup,
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help=f"Print the current version of {CFG.binary_name} and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Generate container launch snippets for a job.

    cwrap turns a job description and its container metadata into the shell
    snippets that a host-side launcher script embeds to run the job inside
    a container and to clean up afterwards.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(init)
cli.add_command(run)
cli.add_command(remove)
cli.add_command(env)
cli.add_command(preamble)
cli.add_command(script)
cli.add_command(technologies)
