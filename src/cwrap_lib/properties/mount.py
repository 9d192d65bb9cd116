# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Representation of host directories mounted into a container.

This module defines `MountPoint`, a dataclass pairing a host path with a path
inside the container and optional mount options. Its string form is the value
of a single bind-mount flag of the container runtime (e.g. `-v` for Docker).
"""

from dataclasses import dataclass
from typing import Self

from cwrap_lib.core.error import CWrapError


@dataclass(frozen=True)
class MountPoint:
    """
    A directory on the host mounted into the container.

    Attributes:
        source (str): Path on the host.
        destination (str): Path inside the container.
        options (str | None): Mount options, e.g. `ro` or `rw`.
    """

    source: str
    destination: str
    options: str | None = None

    def __str__(self) -> str:
        if self.options:
            return f"{self.source}:{self.destination}:{self.options}"
        return f"{self.source}:{self.destination}"

    @classmethod
    def fromStr(cls, string: str) -> Self:
        """
        Parse a mount point specification of the form `source:destination[:options]`.

        Args:
            string (str): The mount point specification.

        Returns:
            MountPoint: The parsed mount point.

        Raises:
            CWrapError: If the specification does not consist of two or three
                non-empty colon-separated parts.
        """
        parts = string.strip().split(":")
        if len(parts) not in (2, 3) or not all(parts):
            raise CWrapError(
                f"Could not parse mount point '{string}'. Expected format 'source:destination[:options]'."
            )

        return cls(*parts)

    @classmethod
    def fromDict(cls, data: dict[str, str]) -> Self:
        """
        Construct a mount point from a dictionary with `source`, `destination`
        and optionally `options` keys.

        Raises:
            CWrapError: If a mandatory key is missing or empty.
        """
        try:
            source = data["source"]
            destination = data["destination"]
        except KeyError as e:
            raise CWrapError(f"Mount point {data} is missing key {e}.") from e

        if not source or not destination:
            raise CWrapError(f"Mount point {data} has an empty source or destination.")

        return cls(str(source), str(destination), data.get("options"))

    @classmethod
    def fromAny(cls, data: object) -> Self:
        """
        Construct a mount point from either its string or dictionary form.

        Raises:
            CWrapError: If the data has neither form or cannot be parsed.
        """
        if isinstance(data, str):
            return cls.fromStr(data)
        if isinstance(data, dict):
            return cls.fromDict(data)

        raise CWrapError(f"Invalid mount point specification '{data}'.")
