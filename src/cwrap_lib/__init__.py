# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the cwrap command-line tool.

This package generates the shell snippets that a host-side launcher script
embeds to run a job's payload inside a container. It defines the data model
of jobs and containers, the builder interface shared by container technologies,
the concrete builders for Docker and Singularity, and the commands that print
the generated snippets.
"""

from .cwrap import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "container",
    "core",
    "generate",
    "properties",
    "technologies",
]
