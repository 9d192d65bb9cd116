# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Planning-session-wide settings shared by all jobs of a workflow.
"""

from dataclasses import dataclass
from typing import Self

from cwrap_lib.core.config import CFG
from cwrap_lib.core.error import CWrapError


@dataclass(frozen=True)
class PlanningContext:
    """
    Settings of a planning session that container builders are bound to.

    The context is identical for all jobs generated within one session.
    """

    # Identifier of the workflow being planned
    workflow_id: str = "workflow"

    # Version of the worker package expected inside the container (major, minor, patch)
    worker_package_version: tuple[int, int, int] = (5, 0, 0)

    # Fail if the worker package inside the container does not match exactly
    strict_worker_package_check: bool = True

    # Allow the worker package to be downloaded inside the container
    allow_worker_package_download: bool = True

    @classmethod
    def fromDefaults(
        cls,
        workflow_id: str | None = None,
        worker_package_version: str | None = None,
        strict_worker_package_check: bool | None = None,
        allow_worker_package_download: bool | None = None,
    ) -> Self:
        """
        Construct a planning context, filling unspecified settings from the configuration.

        Raises:
            CWrapError: If the worker package version cannot be parsed.
        """
        defaults = CFG.defaults
        return cls(
            workflow_id=workflow_id or "workflow",
            worker_package_version=cls._parseVersion(
                worker_package_version or defaults.worker_package_version
            ),
            strict_worker_package_check=defaults.strict_worker_package_check
            if strict_worker_package_check is None
            else strict_worker_package_check,
            allow_worker_package_download=defaults.allow_worker_package_download
            if allow_worker_package_download is None
            else allow_worker_package_download,
        )

    @staticmethod
    def _parseVersion(version: str) -> tuple[int, int, int]:
        """
        Parse a `major.minor.patch` version string.

        Raises:
            CWrapError: If the version does not consist of three integers.
        """
        try:
            major, minor, patch = (int(x) for x in version.strip().split("."))
        except ValueError as e:
            raise CWrapError(
                f"Could not parse worker package version '{version}'. Expected format 'major.minor.patch'."
            ) from e

        return major, minor, patch
