# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

import click
from click_option_group import optgroup

from cwrap_lib.core.click_format import GNUHelpColorsCommand
from cwrap_lib.core.config import CFG
from cwrap_lib.core.error import CWrapError
from cwrap_lib.core.logger import get_logger
from cwrap_lib.properties.context import PlanningContext

from .generator import Generator

logger = get_logger(__name__)


def _generator_options(func: Callable) -> Callable:
    """
    Attach the job file argument and the options shared by all snippet commands.
    """
    decorators = [
        click.argument(
            "job_file", type=str, metavar=click.style("JOB_FILE", fg="green")
        ),
        optgroup.group(f"{click.style('General settings', fg='yellow')}"),
        optgroup.option(
            "--container-technology",
            "-t",
            type=str,
            default=None,
            help=f"Name of the container technology to generate the snippet for. If not specified, the type of the job's container is used, then the environment variable '{CFG.env_vars.container_technology}', then '{CFG.defaults.container_technology}'.",
        ),
        optgroup.group(f"{click.style('Planning context', fg='yellow')}"),
        optgroup.option(
            "--workflow-id",
            type=str,
            default=None,
            help="Identifier of the workflow the job belongs to.",
        ),
        optgroup.option(
            "--worker-package-version",
            type=str,
            default=None,
            help=f"Version of the worker package expected inside the container, as 'major.minor.patch'. Defaults to '{CFG.defaults.worker_package_version}'.",
        ),
        optgroup.option(
            "--strict-wp-check/--no-strict-wp-check",
            default=None,
            help="Require the worker package inside the container to match the version exactly.",
        ),
        optgroup.option(
            "--wp-download/--no-wp-download",
            default=None,
            help="Allow the worker package to be downloaded inside the container.",
        ),
    ]

    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _generate(
    job_file: str,
    snippet: Callable[[Generator], str],
    container_technology: str | None,
    workflow_id: str | None,
    worker_package_version: str | None,
    strict_wp_check: bool | None,
    wp_download: bool | None,
) -> NoReturn:
    """
    Construct a Generator for the job file, print the requested snippet and exit.
    """
    try:
        context = PlanningContext.fromDefaults(
            workflow_id=workflow_id,
            worker_package_version=worker_package_version,
            strict_worker_package_check=strict_wp_check,
            allow_worker_package_download=wp_download,
        )
        generator = Generator(Path(job_file), container_technology, context)
        print(snippet(generator))
        sys.exit(0)
    except CWrapError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)


@click.command(
    short_help="Print the container initialization snippet.",
    help=f"""Print the snippet that initializes the container of a job on the host.

{click.style("JOB_FILE", fg="green")}   Path to the YAML job description file.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@_generator_options
def init(job_file: str, **kwargs) -> NoReturn:
    _generate(job_file, Generator.init, **kwargs)


@click.command(
    short_help="Print the container run snippet.",
    help=f"""Print the snippet that starts the container of a job on the host
and launches the job script inside it.

{click.style("JOB_FILE", fg="green")}   Path to the YAML job description file.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@_generator_options
def run(job_file: str, **kwargs) -> NoReturn:
    _generate(job_file, Generator.run, **kwargs)


@click.command(
    short_help="Print the container removal snippet.",
    help=f"""Print the snippet that removes the container of a job on the host.

{click.style("JOB_FILE", fg="green")}   Path to the YAML job description file.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@_generator_options
def remove(job_file: str, **kwargs) -> NoReturn:
    _generate(job_file, Generator.remove, **kwargs)


@click.command(
    short_help="Print the job environment snippet.",
    help=f"""Print the snippet that sets the environment of a job inside its container.

{click.style("JOB_FILE", fg="green")}   Path to the YAML job description file.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@_generator_options
def env(job_file: str, **kwargs) -> NoReturn:
    _generate(job_file, Generator.environment, **kwargs)


@click.command(
    short_help="Print the worker package preamble.",
    help=f"""Print the snippet that sets up the worker package inside the container.

{click.style("JOB_FILE", fg="green")}   Path to the YAML job description file.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@_generator_options
def preamble(job_file: str, **kwargs) -> NoReturn:
    _generate(job_file, Generator.preamble, **kwargs)


@click.command(
    short_help="Print all container snippets of a job.",
    help=f"""Print all container snippets of a job in the order the launcher script uses them.

{click.style("JOB_FILE", fg="green")}   Path to the YAML job description file.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
@_generator_options
def script(job_file: str, **kwargs) -> NoReturn:
    _generate(job_file, Generator.script, **kwargs)
