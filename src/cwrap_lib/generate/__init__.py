# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Generation of container snippets for jobs.

`Generator` loads a job description file, selects the builder of the job's
container technology, binds it to a planning context and produces the
individual snippets or all of them at once. The commands in `cli` expose
the snippets on the command line.
"""

from .generator import Generator

__all__ = ["Generator"]
