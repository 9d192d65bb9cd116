# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import os
from abc import ABCMeta

from cwrap_lib.core.config import CFG
from cwrap_lib.core.error import CWrapError
from cwrap_lib.core.logger import get_logger

from .interface import ContainerInterface

logger = get_logger(__name__)


class ContainerMeta(ABCMeta):
    """
    Metaclass for container technology classes.
    """

    # registry of supported container technologies
    _registry: dict[str, type[ContainerInterface]] = {}

    def __str__(cls: type[ContainerInterface]):
        """
        Get the string representation of the container technology class.
        """
        return cls.envName()

    @classmethod
    def register(cls, container_cls: type[ContainerInterface]):
        """
        Register a container technology class in the metaclass registry.

        Args:
            container_cls: Subclass of ContainerInterface to register.
        """
        cls._registry[container_cls.envName().lower()] = container_cls

    @classmethod
    def registered(mcs) -> list[type[ContainerInterface]]:
        """
        Return all registered container technology classes in registration order.
        """
        return list(mcs._registry.values())

    @classmethod
    def fromStr(mcs, name: str) -> type[ContainerInterface]:
        """
        Return the container technology class registered with the given name.
        The name is case-insensitive.

        Raises:
            CWrapError: If no class is registered for the given name.
        """
        try:
            return mcs._registry[name.lower()]
        except KeyError as e:
            raise CWrapError(
                f"No container technology registered as '{name}'."
            ) from e

    @classmethod
    def fromEnvVarOrDefault(mcs) -> type[ContainerInterface]:
        """
        Select a container technology based on the environment variable or the configuration.

        This method first checks the `CWRAP_CONTAINER_TECHNOLOGY` environment variable.
        If it is set, the method returns the registered class corresponding to its value.
        Otherwise, the default container technology from the configuration is used.

        Returns:
            type[ContainerInterface]: The selected container technology class.

        Raises:
            CWrapError: If the selected name is not registered.
        """
        name = os.environ.get(CFG.env_vars.container_technology)
        if name:
            logger.debug(
                f"Using container technology name from an environment variable: {name}."
            )
            return ContainerMeta.fromStr(name)

        logger.debug(
            f"Using default container technology: {CFG.defaults.container_technology}."
        )
        return ContainerMeta.fromStr(CFG.defaults.container_technology)

    @classmethod
    def obtain(mcs, name: str | None) -> type[ContainerInterface]:
        """
        Obtain a container technology class by name, environment variable, or configuration.

        Args:
            name (str | None): Optional name of the container technology to obtain.
                - If provided, returns the class registered under this name.
                - If `None`, falls back to `fromEnvVarOrDefault`.

        Returns:
            type[ContainerInterface]: The selected container technology class.

        Raises:
            CWrapError: If no container technology with the resolved name is registered.
        """
        if name:
            return ContainerMeta.fromStr(name)

        return ContainerMeta.fromEnvVarOrDefault()


def container_technology(cls: type[ContainerInterface]) -> type[ContainerInterface]:
    """
    Class decorator registering a container technology in `ContainerMeta`.
    """
    ContainerMeta.register(cls)
    return cls
