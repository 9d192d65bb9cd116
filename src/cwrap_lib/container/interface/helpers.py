# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Shared snippet construction used by all container technology builders.

`SnippetHelpers` is injected into builders instead of being inherited, so that
a builder can be combined with a different helper implementation (e.g. in tests
or for launchers with different conventions).
"""

from cwrap_lib.core.common import escape_double_quoted, escape_for_heredoc
from cwrap_lib.core.config import CFG
from cwrap_lib.core.logger import get_logger
from cwrap_lib.properties.container import Container
from cwrap_lib.properties.context import PlanningContext
from cwrap_lib.properties.job import Job
from cwrap_lib.properties.profiles import Namespace

logger = get_logger(__name__)


class SnippetHelpers:
    """
    Default implementation of the helpers consumed by container builders.
    """

    def wrapContainerInvocationWithLauncher(self, job: Job, executable: str) -> str:
        """
        Prefix the container runtime executable with a launcher, if the job requests one.

        The launcher (e.g. `srun`) is taken from the `container.launcher` profile
        and its arguments from the `container.launcher.arguments` profile
        of the pegasus namespace.

        Args:
            job (Job): The job being wrapped.
            executable (str): Name of the container runtime executable.

        Returns:
            str: The (possibly wrapped) invocation of the executable.
        """
        launcher = job.profiles.get(
            Namespace.PEGASUS, CFG.profile_keys.container_launcher
        )
        if not launcher:
            return executable

        invocation = f"{launcher} "
        if launcher_args := job.profiles.get(
            Namespace.PEGASUS, CFG.profile_keys.container_launcher_arguments
        ):
            invocation += f"{launcher_args} "

        logger.debug(f"Wrapping '{executable}' with launcher '{invocation.strip()}'.")
        return invocation + executable

    def requestsGPUs(self, job: Job) -> bool:
        """
        Return True if the job requests GPUs in either the pegasus or the condor namespace.
        Only the presence of the request matters, not its value.
        """
        return job.profiles.contains(
            Namespace.PEGASUS, CFG.profile_keys.gpus
        ) or job.profiles.contains(Namespace.CONDOR, CFG.profile_keys.request_gpus)

    def constructJobEnvironmentFromContainer(self, container: Container) -> str:
        """
        Render the env profiles of the container as shell export statements.

        The lines are escaped for two shell passes: the unquoted heredoc through
        which the launcher writes the container script, and the double quotes
        of the export inside the container. Values may therefore reference
        variables of the container environment, e.g. `$HOME/bin`.

        Returns:
            str: One `export KEY="value"` line per environment variable, in declaration order.
        """
        return "".join(
            escape_for_heredoc(f'export {key}="{escape_double_quoted(value)}"') + "\n"
            for key, value in container.profiles.namespace(Namespace.ENV).items()
        )

    def constructContainerWorkerPackagePreamble(
        self, context: PlanningContext, working_dir: str
    ) -> str:
        """
        Construct the snippet setting up the worker package inside the container.

        The snippet is not job specific: it only depends on the planning context
        and on the working directory of the container technology.

        Args:
            context (PlanningContext): The planning context.
            working_dir (str): Working directory inside the container.

        Returns:
            str: The worker package preamble.
        """
        major, minor, patch = context.worker_package_version
        logger.debug(
            f"Constructing worker package preamble for workflow '{context.workflow_id}'."
        )

        lines = [
            f"# worker package setup for workflow {context.workflow_id}",
            f"pegasus_lite_version_major={major}",
            f"pegasus_lite_version_minor={minor}",
            f"pegasus_lite_version_patch={patch}",
            f"pegasus_lite_enforce_strict_wp_check={_toShellBool(context.strict_worker_package_check)}",
            f"pegasus_lite_version_allow_wp_auto_download={_toShellBool(context.allow_worker_package_download)}",
            "pegasus_lite_inside_container=true",
            f"export pegasus_lite_work_dir={working_dir}",
            f"cd {working_dir}",
            ". ./pegasus-lite-common.sh",
            "pegasus_lite_init",
            "# figure out the worker package to use",
            "pegasus_lite_worker_package",
        ]
        return "\n".join(lines) + "\n"

    def getJobLaunchScriptName(self, job: Job) -> str:
        """
        Return the name of the script that launches the job inside the container.
        """
        return job.getContainerScriptName()


def _toShellBool(value: bool) -> str:
    return "true" if value else "false"
