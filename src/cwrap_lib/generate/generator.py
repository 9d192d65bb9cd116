# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

from cwrap_lib.container.interface import ContainerInterface, ContainerMeta
from cwrap_lib.core.error import CWrapError
from cwrap_lib.core.logger import get_logger
from cwrap_lib.properties.context import PlanningContext
from cwrap_lib.properties.job import Job

logger = get_logger(__name__)


class Generator:
    """
    Generates the container snippets for a job loaded from a job description file.
    """

    def __init__(
        self,
        job_file: Path,
        technology: str | None = None,
        context: PlanningContext | None = None,
    ):
        """
        Load the job and prepare the builder of its container technology.

        The container technology is selected, in order of priority, from
        the `technology` argument, the `type` of the job's container,
        the environment variable, and the configuration.

        Args:
            job_file (Path): Path to the YAML job description file.
            technology (str | None): Name of the container technology to use.
            context (PlanningContext | None): Planning context to initialize the builder with.
                If None, a context is constructed from the configuration defaults.

        Raises:
            CWrapError: If the job cannot be loaded, has no container,
                or the container technology is unknown.
        """
        self._job = Job.fromFile(job_file)
        if self._job.container is None:
            raise CWrapError(
                f"Job '{self._job.job_id}' does not specify a container."
            )

        BuilderClass = ContainerMeta.obtain(technology or self._job.container.type)
        logger.debug(
            f"Using container technology '{str(BuilderClass)}' for job '{self._job.job_id}'."
        )

        self._builder: ContainerInterface = BuilderClass()
        self._builder.initialize(context or PlanningContext.fromDefaults())

    @property
    def job(self) -> Job:
        return self._job

    @property
    def builder(self) -> ContainerInterface:
        return self._builder

    def init(self) -> str:
        return self._builder.containerInit(self._job)

    def run(self) -> str:
        return self._builder.containerRun(self._job)

    def remove(self) -> str:
        return self._builder.containerRemove(self._job)

    def environment(self) -> str:
        return self._builder.constructJobEnvironmentInContainer(self._job)

    def preamble(self) -> str:
        return self._builder.constructContainerWorkerPackagePreamble()

    def script(self) -> str:
        """
        Return all snippets in the order the launcher script uses them.

        Each snippet is preceded by a comment naming it. Empty snippets are
        kept so that the structure is the same for all container technologies.

        Returns:
            str: The combined snippets.
        """
        sections = [
            ("container initialization (host)", self.init()),
            ("container run (host)", self.run()),
            ("container removal (host)", self.remove()),
            ("worker package setup (container)", self.preamble()),
            ("job environment (container)", self.environment()),
        ]

        return "\n".join(
            f"# ---- {self._builder.describe()}: {title} ----\n{snippet.rstrip()}\n"
            for title, snippet in sections
        )
