# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for cwrap.

This module collects the foundational helpers used across the cwrap codebase:
configuration, error types, structured logging, YAML loading, shell quoting
and help formatting for the command-line interface.
"""
