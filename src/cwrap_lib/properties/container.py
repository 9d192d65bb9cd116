# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Description of the container a job runs in.
"""

from dataclasses import dataclass, field
from typing import Self

from cwrap_lib.core.error import CWrapError

from .mount import MountPoint
from .profiles import Profiles


@dataclass
class Container:
    """
    Dataclass describing a container image and how it is used by a job.
    """

    # Logical name of the container
    name: str

    # Logical filename of the container image
    lfn: str

    # Container technology the image is meant for (e.g. docker), if specified
    type: str | None = None

    # Host directories mounted into the container, in mount order
    mounts: list[MountPoint] = field(default_factory=list)

    # Profiles associated with the container (environment variables live in `env`)
    profiles: Profiles = field(default_factory=Profiles)

    @classmethod
    def fromDict(cls, data: dict[str, object]) -> Self:
        """
        Construct a Container from a dictionary.

        The `name` defaults to the `lfn` if it is not provided.

        Raises:
            CWrapError: If the LFN is missing or any mount point or profile is invalid.
        """
        if not isinstance(data, dict):
            raise CWrapError(f"Container description must be a mapping, not '{data}'.")

        if not (lfn := data.get("lfn")):
            raise CWrapError("Container description does not specify an 'lfn'.")

        mounts = data.get("mounts") or []
        if not isinstance(mounts, list):
            raise CWrapError(f"Container mounts must be a list, not '{mounts}'.")

        return cls(
            name=str(data.get("name") or lfn),
            lfn=str(lfn),
            type=str(data["type"]) if data.get("type") else None,
            mounts=[MountPoint.fromAny(x) for x in mounts],
            profiles=Profiles.fromDict(data.get("profiles")),  # ty: ignore[invalid-argument-type]
        )
