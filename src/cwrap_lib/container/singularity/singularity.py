# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from cwrap_lib.container.interface import (
    ContainerInterface,
    ContainerMeta,
    container_technology,
)
from cwrap_lib.core.config import CFG
from cwrap_lib.core.logger import get_logger
from cwrap_lib.properties.job import Job
from cwrap_lib.properties.profiles import Namespace

logger = get_logger(__name__)


@container_technology
class Singularity(ContainerInterface, metaclass=ContainerMeta):
    """
    Implementation of ContainerInterface for Singularity/Apptainer.

    Singularity runs the container as the invoking user and does not leave
    a container instance behind, so no initialization, user provisioning
    or removal is needed.
    """

    # directory in the container used as the working directory
    CONTAINER_WORKING_DIRECTORY = "/srv"

    # executable of the container runtime
    EXECUTABLE = "singularity"

    @staticmethod
    def envName() -> str:
        return "singularity"

    def containerInit(self, job: Job) -> str:
        return ""

    def containerRun(self, job: Job) -> str:
        assert job.container is not None

        command = self._helpers.wrapContainerInvocationWithLauncher(
            job, Singularity.EXECUTABLE
        )
        command += " exec "
        command += "--no-home "
        command += f"--bind $PWD:{Singularity.CONTAINER_WORKING_DIRECTORY} "

        if self._helpers.requestsGPUs(job):
            command += "--nv "

        for mount in job.container.mounts:
            command += f"--bind {mount} "

        command += f"--pwd {Singularity.CONTAINER_WORKING_DIRECTORY} "

        if (
            extra_args := job.profiles.get(
                Namespace.PEGASUS, CFG.profile_keys.container_arguments
            )
        ) is not None:
            command += f"{extra_args} "

        command += f"{job.container.lfn} "
        command += f"{Singularity.CONTAINER_WORKING_DIRECTORY}/{self._helpers.getJobLaunchScriptName(job)}"

        logger.debug(f"Singularity run command for job '{job.job_id}': {command}")
        return command

    def containerRemove(self, job: Job) -> str:
        return ""

    def constructJobEnvironmentInContainer(self, job: Job) -> str:
        assert job.container is not None

        return (
            "# setting environment variables for job\n"
            + self._helpers.constructJobEnvironmentFromContainer(job.container)
        )

    def getContainerWorkingDirectory(self) -> str:
        return Singularity.CONTAINER_WORKING_DIRECTORY

    def describe(self) -> str:
        return "Singularity"
