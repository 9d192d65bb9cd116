# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cwrap_lib.container.interface import ContainerInterface
from cwrap_lib.core.config import CFG


class TechnologiesPresenter:
    """
    Presents the container technologies cwrap can generate snippets for.
    """

    def __init__(self, technologies: list[type[ContainerInterface]], default: str):
        """
        Initialize the presenter.

        Args:
            technologies (list[type[ContainerInterface]]): Registered builder classes.
            default (str): Name of the technology used when none is selected.
        """
        self._technologies = technologies
        self._default = default.lower()

    def createTechnologiesPanel(self) -> Group:
        """
        Create a Rich panel listing the container technologies.

        Returns:
            Group: Rich Group containing the technologies table.
        """
        panel = Panel(
            self._createTechnologiesTable(),
            title=Text(
                "CONTAINER TECHNOLOGIES",
                style=CFG.technologies_presenter.title_style,
                justify="center",
            ),
            border_style=CFG.technologies_presenter.border_style,
            padding=(1, 1),
            expand=False,
        )

        return Group(Text(""), panel, Text(""))

    def _createTechnologiesTable(self) -> Table:
        settings = CFG.technologies_presenter

        table = Table(box=None, padding=(0, 2), expand=False)
        for header in ["Name", "Description", "Working directory", "Default"]:
            table.add_column(
                justify="left", header=Text(header, style=settings.headers_style)
            )

        for technology in self._technologies:
            builder = technology()
            name = technology.envName()
            is_default = name == self._default
            style = settings.default_style if is_default else settings.main_style

            table.add_row(
                Text(name, style=style),
                Text(builder.describe(), style=style),
                Text(builder.getContainerWorkingDirectory(), style=style),
                Text("yes" if is_default else "", style=style),
            )

        return table
