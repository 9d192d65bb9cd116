# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Docker backend for cwrap.

The `Docker` builder generates the snippets that load a Docker image on the
host, start the container as root, provision the job's group and user inside
it, launch the job script as that user and finally force-remove the container.
"""

from .docker import Docker

__all__ = ["Docker"]
