# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import threading

from cwrap_lib.container.interface import (
    ContainerInterface,
    ContainerMeta,
    SnippetHelpers,
    container_technology,
)
from cwrap_lib.core.config import CFG
from cwrap_lib.core.logger import get_logger
from cwrap_lib.properties.job import Job
from cwrap_lib.properties.profiles import Namespace

logger = get_logger(__name__)


@container_technology
class Docker(ContainerInterface, metaclass=ContainerMeta):
    """
    Implementation of ContainerInterface for Docker.

    The container is started as root so that the group and the user of the job
    can be provisioned inside it. The job script itself is then executed
    as that unprivileged user.
    """

    # directory in the container used as the working directory
    CONTAINER_WORKING_DIRECTORY = "/scratch"

    # variable storing the PATH of the root user inside the container
    ROOT_PATH_VARIABLE_KEY = "root_path"

    # executable of the container runtime
    EXECUTABLE = "docker"

    def __init__(self, helpers: SnippetHelpers | None = None):
        super().__init__(helpers)

        # worker package preamble is identical for all jobs, constructed at most once
        self._worker_package_preamble: str | None = None
        self._preamble_lock = threading.Lock()

    @staticmethod
    def envName() -> str:
        return "docker"

    def containerInit(self, job: Job) -> str:
        assert job.container is not None
        return f"docker_init {job.container.lfn}"

    def containerRun(self, job: Job) -> str:
        assert job.container is not None

        command = self._helpers.wrapContainerInvocationWithLauncher(
            job, Docker.EXECUTABLE
        )
        command += " run "
        # started as root, the job user is switched to inside the container
        command += "--user root "

        # directory where the job is run is mounted as the working directory
        command += f"-v $PWD:{Docker.CONTAINER_WORKING_DIRECTORY} "

        if self._helpers.requestsGPUs(job):
            command += "--gpus all "

        for mount in job.container.mounts:
            command += f"-v {mount} "

        command += f"-w={Docker.CONTAINER_WORKING_DIRECTORY} "

        # the payload is passed via -c regardless of the image's own entry point
        command += "--entrypoint /bin/sh "

        if (
            extra_args := job.profiles.get(
                Namespace.PEGASUS, CFG.profile_keys.container_arguments
            )
        ) is not None:
            command += f"{extra_args} "

        # resolved by the launcher script, not here
        command += "--name $cont_name "
        command += " $cont_image "

        command += self._constructUserPayload(job)

        logger.debug(f"Docker run command for job '{job.job_id}': {command}")
        return command

    def containerRemove(self, job: Job) -> str:
        return "docker rm --force $cont_name  1>&2"

    def constructContainerWorkerPackagePreamble(self) -> str:
        if (preamble := self._worker_package_preamble) is not None:
            return preamble

        with self._preamble_lock:
            if self._worker_package_preamble is None:
                logger.debug("Constructing the worker package preamble for Docker.")
                self._worker_package_preamble = (
                    super().constructContainerWorkerPackagePreamble()
                )

            return self._worker_package_preamble

    def constructJobEnvironmentInContainer(self, job: Job) -> str:
        assert job.container is not None

        environment = "# setting environment variables for job\n"
        environment += self._helpers.constructJobEnvironmentFromContainer(
            job.container
        )

        # su resets PATH, so fall back to the PATH of the root user
        if not job.container.profiles.contains(Namespace.ENV, "PATH"):
            environment += f"export PATH=\\${Docker.ROOT_PATH_VARIABLE_KEY}\n"

        return environment

    def getContainerWorkingDirectory(self) -> str:
        return Docker.CONTAINER_WORKING_DIRECTORY

    def describe(self) -> str:
        return "Docker"

    def _constructUserPayload(self, job: Job) -> str:
        """
        Construct the `-c` argument executed by the shell inside the container.

        The payload ensures that the group and the user of the job exist
        (creating them only if missing) and then launches the job script
        as that user. Host variables (`$cont_user`, ...) are expanded by the
        launcher script, while `\\$PATH` is expanded inside the container.

        Returns:
            str: The `-c "..."` argument.
        """
        script = self._helpers.getJobLaunchScriptName(job)
        payload = (
            "set -e ;"
            f"export {Docker.ROOT_PATH_VARIABLE_KEY}=\\$PATH ;"
            r'if ! grep -q -E  \"^$cont_group:\" /etc/group ; then '
            "groupadd -f --gid $cont_groupid $cont_group ;"
            "fi; "
            "if ! id $cont_user 2>/dev/null >/dev/null; then "
            "   if id $cont_userid 2>/dev/null >/dev/null; then "
            # uid already taken by another user of the image
            "       useradd -o --uid $cont_userid --gid $cont_groupid $cont_user; "
            "   else "
            "       useradd --uid $cont_userid --gid $cont_groupid $cont_user; "
            "   fi; "
            "fi; "
            "su $cont_user -c "
            f'\\"./{script} \\"'
        )

        return f'-c "{payload}"'
