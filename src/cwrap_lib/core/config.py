# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for cwrap.

This module defines dataclasses representing all configurable aspects of cwrap,
including file suffixes, environment variables, profile keys consulted when
building container commands, planning defaults and presentation settings.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class FileSuffixes:
    """File suffixes used by cwrap."""

    # Suffix appended to the job ID to name the script launched inside the container.
    container_script: str = "-cont.sh"


@dataclass
class EnvironmentVariables:
    """Environment variable names used by cwrap."""

    # Enables cwrap debug mode.
    debug_mode: str = "CWRAP_DEBUG"
    # Path to the cwrap configuration file.
    config: str = "CWRAP_CONFIG"
    # Name of the container technology to use if not specified otherwise.
    container_technology: str = "CWRAP_CONTAINER_TECHNOLOGY"


@dataclass
class ProfileKeys:
    """Profile keys read from the job when building container commands."""

    # Number of GPUs requested (pegasus namespace).
    gpus: str = "gpus"
    # Number of GPUs requested from HTCondor (condor namespace).
    request_gpus: str = "request_gpus"
    # Extra arguments passed verbatim to the container runtime (pegasus namespace).
    container_arguments: str = "container.arguments"
    # Launcher wrapping the container runtime, e.g. srun (pegasus namespace).
    container_launcher: str = "container.launcher"
    # Arguments for the launcher (pegasus namespace).
    container_launcher_arguments: str = "container.launcher.arguments"


@dataclass
class PlanningDefaults:
    """Defaults used when a planning context is not fully specified."""

    # Container technology used when neither the job nor the user selects one.
    container_technology: str = "docker"
    # Version of the worker package expected inside the container.
    worker_package_version: str = "5.0.0"
    # Fail if the worker package inside the container does not match exactly.
    strict_worker_package_check: bool = True
    # Allow the worker package to be downloaded inside the container.
    allow_worker_package_download: bool = True


@dataclass
class TechnologiesPresenterSettings:
    """Settings for TechnologiesPresenter."""

    # Style used for border lines.
    border_style: str = "white"
    # Style used for the title.
    title_style: str = "white bold"
    # Style used for table headers.
    headers_style: str = "default"
    # Style used for table values.
    main_style: str = "white"
    # Style used for the default container technology.
    default_style: str = "bright_green"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by cwrap.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of cwrap commands.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for cwrap."""

    suffixes: FileSuffixes = field(default_factory=FileSuffixes)
    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    profile_keys: ProfileKeys = field(default_factory=ProfileKeys)
    defaults: PlanningDefaults = field(default_factory=PlanningDefaults)
    technologies_presenter: TechnologiesPresenterSettings = field(
        default_factory=TechnologiesPresenterSettings
    )
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the cwrap binary.
    binary_name: str = "cwrap"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read cwrap config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path) if (env_path := os.getenv("CWRAP_CONFIG")) else None,
            # 2. Current working directory (for development/override)
            Path.cwd() / "cwrap_config.toml",
            # 3. XDG config home (standard user config location)
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "cwrap"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for cwrap.
CFG = Config.load()
