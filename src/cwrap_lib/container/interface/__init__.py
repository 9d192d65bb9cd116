# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Abstractions for generating container launch snippets.

This module defines the contract shared by all container technology builders:

- `ContainerInterface`: the base class every builder implements. It defines
  the snippets for initializing, running and removing a container on the host,
  the job environment inside the container, the worker package preamble,
  the container working directory and a description of the technology.

- `SnippetHelpers`: helpers injected into builders for launcher wrapping,
  rendering of environment profiles and the default worker package preamble.

- `ContainerMeta`: a metaclass that registers available builders and selects
  one by name, from an environment variable, or from the configuration.
  The `@container_technology` decorator registers implementations automatically.
"""

from .helpers import SnippetHelpers
from .interface import ContainerInterface
from .meta import ContainerMeta, container_technology

__all__ = [
    "ContainerInterface",
    "ContainerMeta",
    "SnippetHelpers",
    "container_technology",
]
