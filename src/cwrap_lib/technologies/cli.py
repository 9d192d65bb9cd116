# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from typing import NoReturn

import click
from rich.console import Console

from cwrap_lib.container.interface import ContainerMeta
from cwrap_lib.core.click_format import GNUHelpColorsCommand
from cwrap_lib.core.config import CFG
from cwrap_lib.core.error import CWrapError
from cwrap_lib.core.logger import get_logger

from .presenter import TechnologiesPresenter

logger = get_logger(__name__)


@click.command(
    short_help="List the supported container technologies.",
    help="List the container technologies for which snippets can be generated.",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
)
def technologies() -> NoReturn:
    try:
        # resolve the default the same way the snippet commands do
        default = str(ContainerMeta.fromEnvVarOrDefault())
        presenter = TechnologiesPresenter(ContainerMeta.registered(), default)
        Console().print(presenter.createTechnologiesPanel())
        sys.exit(0)
    except CWrapError as e:
        logger.error(e)
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
