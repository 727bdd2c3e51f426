"""Beth Yw? exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class BethYwError(Exception):
    """Base exception for all Beth Yw? failures."""


class BethYwConfigError(BethYwError):
    """Raised for invalid runtime configuration."""


class BethYwNotFoundError(BethYwError):
    """Raised when a name, measure, area, or year lookup has no entry."""


class BethYwInvalidArgumentError(BethYwError):
    """Raised for malformed caller arguments such as language codes."""


class BethYwMalformedInputError(BethYwError):
    """Raised for structurally invalid headers, rows, JSON, or numbers."""


class BethYwOutOfRangeError(BethYwError):
    """Raised when a column mapping or header lacks required columns."""


class BethYwSourceError(BethYwError):
    """Raised for unreadable input sources and unsupported formats."""
