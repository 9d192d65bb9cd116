# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Profiles attached to jobs and containers.

A profile is a key-value pair living in a namespace. The `env` namespace holds
environment variables, the `pegasus` namespace holds planner settings (GPU
requests, extra container arguments, launchers) and the `condor` namespace
holds scheduler settings.

This module defines the `Namespace` enum and the `Profiles` container that
stores string values per namespace, preserving insertion order.
"""

from enum import Enum
from typing import Self

from cwrap_lib.core.error import CWrapError


class Namespace(Enum):
    """
    Namespaces recognized in profiles.
    """

    ENV = 1
    PEGASUS = 2
    CONDOR = 3
    GLOBUS = 4
    DAGMAN = 5
    HINTS = 6
    SELECTOR = 7
    METADATA = 8

    def __str__(self):
        return self.name.lower()

    @classmethod
    def fromStr(cls, s: str) -> Self:
        """
        Convert a string to the corresponding Namespace enum variant.

        Args:
            s (str): String representation of the namespace (case-insensitive).

        Returns:
            Namespace variant.

        Raises:
            CWrapError if the string corresponds to no Namespace.
        """
        try:
            return cls[s.upper()]
        except KeyError:
            raise CWrapError(f"Could not recognize a profile namespace '{s}'.")


class Profiles:
    """
    Mapping from namespace to the key-value pairs stored in it.

    Lookups never raise: a missing namespace behaves as an empty one
    and a missing key returns None.
    """

    def __init__(self, data: dict[Namespace, dict[str, str]] | None = None):
        self._profiles: dict[Namespace, dict[str, str]] = {}
        for namespace, values in (data or {}).items():
            for key, value in values.items():
                self.add(namespace, key, value)

    def add(self, namespace: Namespace, key: str, value: object) -> None:
        """
        Add a profile, replacing any previous value of the same key.
        The value is stored as a string, None is stored as an empty string.
        """
        self._profiles.setdefault(namespace, {})[key] = _toProfileValue(value)

    def get(self, namespace: Namespace, key: str) -> str | None:
        """
        Return the value of a profile or None if it is not set.
        """
        return self._profiles.get(namespace, {}).get(key)

    def contains(self, namespace: Namespace, key: str) -> bool:
        """
        Return True if the profile is set in the namespace, regardless of its value.
        """
        return key in self._profiles.get(namespace, {})

    def namespace(self, namespace: Namespace) -> dict[str, str]:
        """
        Return a copy of all key-value pairs of the namespace in insertion order.
        """
        return dict(self._profiles.get(namespace, {}))

    def toDict(self) -> dict[str, dict[str, str]]:
        """
        Convert the profiles into a dictionary keyed by namespace names.
        Empty namespaces are ignored.
        """
        return {
            str(namespace): dict(values)
            for namespace, values in self._profiles.items()
            if values
        }

    @classmethod
    def fromDict(cls, data: dict[str, dict[str, object]] | None) -> Self:
        """
        Construct profiles from a dictionary keyed by namespace names.

        Values are converted to strings, an empty value becomes an empty string.
        A namespace without any profiles may be given as None.

        Raises:
            CWrapError: If the data or the profiles of a namespace are not a mapping,
                or if a namespace is unknown.
        """
        if data is not None and not isinstance(data, dict):
            raise CWrapError(f"Profiles must be a mapping of namespaces, not '{data}'.")

        profiles = cls()
        for name, values in (data or {}).items():
            namespace = Namespace.fromStr(str(name))
            if values is None:
                continue
            if not isinstance(values, dict):
                raise CWrapError(
                    f"Profiles in namespace '{name}' must be key-value pairs, not '{values}'."
                )

            for key, value in values.items():
                profiles.add(namespace, str(key), value)

        return profiles

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profiles):
            return NotImplemented
        return self.toDict() == other.toDict()

    def __repr__(self) -> str:
        return f"Profiles({self.toDict()})"


def _toProfileValue(value: object) -> str:
    # key without a value in YAML
    if value is None:
        return ""
    # YAML booleans would otherwise become 'True'/'False'
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
