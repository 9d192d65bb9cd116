# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Listing of the container technologies known to cwrap.
"""

from .presenter import TechnologiesPresenter

__all__ = ["TechnologiesPresenter"]
