# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout cwrap.

Snippet builders never raise for well-formed input. Errors are reserved for
loading job descriptions, selecting a container technology and using a builder
that has not been initialized. Each exception carries an associated exit code
used by cwrap commands to report failures consistently.
"""

from cwrap_lib.core.config import CFG


class CWrapError(Exception):
    """Common exception type for all recoverable cwrap errors."""

    exit_code = CFG.exit_codes.default


class CWrapNotInitializedError(CWrapError):
    """Raised when a builder is used before being bound to a planning context."""

    pass
