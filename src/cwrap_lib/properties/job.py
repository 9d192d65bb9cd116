# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Structured representation of a job that should run inside a container.

This module defines the `Job` dataclass holding the job identifier, the
profiles of the job and the description of its container. It handles loading
of YAML job description files.

`Job` focuses strictly on data representation; the construction of shell
snippets is implemented by the container technology builders.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

import yaml

from cwrap_lib.core.common import construct_container_script_name, load_yaml_loader
from cwrap_lib.core.error import CWrapError
from cwrap_lib.core.logger import get_logger

from .container import Container
from .profiles import Profiles

logger = get_logger(__name__)

SafeLoader: type[yaml.SafeLoader] = load_yaml_loader()


@dataclass
class Job:
    """
    Dataclass storing information about a job.
    """

    # Job identifier
    job_id: str

    # Container the job is executed in
    container: Container | None = None

    # Profiles associated with the job (pegasus, condor, ...)
    profiles: Profiles = field(default_factory=Profiles)

    def getContainerScriptName(self) -> str:
        """
        Return the name of the script that is launched inside the container.
        """
        return construct_container_script_name(self.job_id)

    @classmethod
    def fromFile(cls, file: Path) -> Self:
        """
        Load a Job from a YAML job description file.

        Args:
            file (Path): Path to the job description file.

        Returns:
            Job: Instance constructed from the file.

        Raises:
            CWrapError: If the file does not exist, cannot be parsed,
                    or does not contain a valid job description.
        """
        logger.debug(f"Loading job description from '{file}'.")

        if not file.is_file():
            raise CWrapError(f"Job description file '{file}' does not exist.")

        try:
            with file.open("r") as input:
                data = yaml.load(input, Loader=SafeLoader)
        except yaml.YAMLError as e:
            raise CWrapError(
                f"Could not parse the job description file '{file}': {e}."
            ) from e

        if not isinstance(data, dict):
            raise CWrapError(f"Invalid job description file '{file}'.")

        return cls.fromDict(data)

    @classmethod
    def fromDict(cls, data: dict[str, object]) -> Self:
        """
        Construct a Job from a dictionary.

        Raises:
            CWrapError: If the job ID is missing or the container or profiles are invalid.
        """
        if not (job_id := data.get("job_id")):
            raise CWrapError("Job description does not specify a 'job_id'.")

        container = data.get("container")

        return cls(
            job_id=str(job_id),
            container=Container.fromDict(container) if container else None,  # ty: ignore[invalid-argument-type]
            profiles=Profiles.fromDict(data.get("profiles")),  # ty: ignore[invalid-argument-type]
        )
