# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Singularity backend for cwrap.

The `Singularity` builder generates a single `singularity exec` invocation
that runs the job script directly as the invoking user.
"""

from .singularity import Singularity

__all__ = ["Singularity"]
