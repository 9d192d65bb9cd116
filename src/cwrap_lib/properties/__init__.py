# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Data model of cwrap.

This module groups the structures describing what is being wrapped:

- `Job`: a job identifier, its profiles and its container.
- `Container`: the container image, its mount points and its profiles.
- `MountPoint`: a host directory mounted into the container.
- `Profiles` and `Namespace`: key-value settings grouped by namespace.
- `PlanningContext`: settings shared by all jobs of one planning session.
"""

from .container import Container
from .context import PlanningContext
from .job import Job
from .mount import MountPoint
from .profiles import Namespace, Profiles

__all__ = [
    "Container",
    "PlanningContext",
    "Job",
    "MountPoint",
    "Namespace",
    "Profiles",
]
