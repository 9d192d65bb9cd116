# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from abc import ABC

from cwrap_lib.core.error import CWrapNotInitializedError
from cwrap_lib.core.logger import get_logger
from cwrap_lib.properties.context import PlanningContext
from cwrap_lib.properties.job import Job

from .helpers import SnippetHelpers

logger = get_logger(__name__)


class ContainerInterface(ABC):
    """
    Abstract base class for container technology builders.

    A builder produces the shell snippets that a host-side launcher script embeds
    to run a job inside a container: initialization, run and removal on the host,
    and the environment set up inside the container before the job starts.

    Builders only construct text; they never execute anything. Shared helpers
    are injected through the constructor.
    """

    def __init__(self, helpers: SnippetHelpers | None = None):
        """
        Initialize the builder.

        Args:
            helpers (SnippetHelpers | None): Helpers used for launcher wrapping,
                environment rendering and the default worker package preamble.
                If None, the default helpers are used.
        """
        self._helpers = helpers or SnippetHelpers()
        self._context: PlanningContext | None = None

    @staticmethod
    def envName() -> str:
        """
        Return the name under which the container technology is registered.

        Returns:
            str: The container technology name.
        """
        raise NotImplementedError(
            "envName method is not implemented for this container technology"
        )

    def initialize(self, context: PlanningContext) -> None:
        """
        Bind the builder to the planning context of the current session.

        Must be called before the worker package preamble is constructed.

        Args:
            context (PlanningContext): Settings shared by all jobs of the session.
        """
        logger.debug(
            f"Initializing {self.describe()} builder for workflow '{context.workflow_id}'."
        )
        self._context = context

    def containerInit(self, job: Job) -> str:
        """
        Construct the snippet initializing the container on the host OS.

        Args:
            job (Job): Job with a container.

        Returns:
            str: The shell snippet.
        """
        raise NotImplementedError(
            "containerInit method is not implemented for this container technology"
        )

    def containerRun(self, job: Job) -> str:
        """
        Construct the snippet that starts the container on the host OS
        and launches the job script inside it.

        Args:
            job (Job): Job with a container.

        Returns:
            str: The shell snippet.
        """
        raise NotImplementedError(
            "containerRun method is not implemented for this container technology"
        )

    def containerRemove(self, job: Job) -> str:
        """
        Construct the snippet removing the container on the host OS.

        Args:
            job (Job): Job with a container.

        Returns:
            str: The shell snippet.
        """
        raise NotImplementedError(
            "containerRemove method is not implemented for this container technology"
        )

    def constructJobEnvironmentInContainer(self, job: Job) -> str:
        """
        Construct the snippet setting the job environment inside the container.

        The snippet is embedded in the script launched inside the container,
        before the job itself is executed.

        Args:
            job (Job): Job with a container.

        Returns:
            str: The shell snippet.
        """
        raise NotImplementedError(
            "constructJobEnvironmentInContainer method is not implemented for this container technology"
        )

    def constructContainerWorkerPackagePreamble(self) -> str:
        """
        Construct the snippet setting up the worker package inside the container.

        Returns:
            str: The shell snippet.

        Raises:
            CWrapNotInitializedError: If the builder has not been initialized.
        """
        if self._context is None:
            raise CWrapNotInitializedError(
                f"{self.describe()} builder must be initialized with a planning context before constructing the worker package preamble."
            )

        return self._helpers.constructContainerWorkerPackagePreamble(
            self._context, self.getContainerWorkingDirectory()
        )

    def getContainerWorkingDirectory(self) -> str:
        """
        Return the directory inside the container from which the job is launched.

        Returns:
            str: Path to the working directory.
        """
        raise NotImplementedError(
            "getContainerWorkingDirectory method is not implemented for this container technology"
        )

    def describe(self) -> str:
        """
        Return a human-readable name of the container technology.

        Returns:
            str: The description.
        """
        raise NotImplementedError(
            "describe method is not implemented for this container technology"
        )
