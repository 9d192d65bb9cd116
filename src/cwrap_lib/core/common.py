# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the cwrap library.

This module provides helpers for YAML input, shell quoting of generated
values and naming of job-related files.
"""

from functools import lru_cache

import yaml

from .config import CFG
from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_loader() -> type[yaml.SafeLoader]:
    """Return the fastest available safe YAML loader (CSafeLoader if possible)."""
    try:
        from yaml import (
            CSafeLoader as SafeLoader,  # ty: ignore[possibly-missing-import]
        )

        logger.debug("Loaded YAML CLoader.")
    except ImportError:
        from yaml import SafeLoader

        logger.debug("Loaded default YAML loader.")

    return SafeLoader


def escape_double_quoted(value: str) -> str:
    """
    Escape a value so that it can be placed inside double quotes in a shell script.

    Only backslashes and double quotes are escaped. Dollar signs and backticks
    are kept, so the value may still reference other shell variables.

    Args:
        value (str): The raw value.

    Returns:
        str: The escaped value (without the surrounding quotes).
    """
    return value.replace("\\", "\\\\").replace('"', '\\"')


def escape_for_heredoc(text: str) -> str:
    """
    Escape text written into a script through an unquoted heredoc.

    The heredoc removes one level of backslashes and expands `$` and backticks,
    so these are escaped to reach the written script unchanged.

    Args:
        text (str): The text as it should appear in the written script.

    Returns:
        str: The escaped text.
    """
    return text.replace("\\", "\\\\").replace("$", "\\$").replace("`", "\\`")


def construct_container_script_name(job_id: str) -> str:
    """
    Construct the name of the script that is launched inside the container for a job.

    Args:
        job_id (str): Identifier of the job.

    Returns:
        str: Name of the script, e.g. `preprocess_ID0001-cont.sh`.
    """
    return f"{job_id}{CFG.suffixes.container_script}"
