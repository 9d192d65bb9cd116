# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Container technology support for cwrap.

This module groups all components that turn a job description into shell
snippets for a container runtime. It defines the abstract builder interface
together with the concrete builders for Docker and Singularity.
"""

# import so that these container technologies are registered but do not export them from here
from .docker import Docker as _Docker
from .singularity import Singularity as _Singularity

_Docker, _Singularity
