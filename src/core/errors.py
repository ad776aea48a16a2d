"""Daykit exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each scaffold step raises a specific error type for debuggability.
"""

from __future__ import annotations


class DaykitError(Exception):
    """Base exception for all daykit failures."""


class DaykitConfigError(DaykitError):
    """Raised for invalid runtime configuration."""


class DayTokenError(DaykitError):
    """Raised when a day token is not a positive integer."""


class DaykitFileNotFoundError(DaykitError):
    """Raised when a file expected to already exist is missing."""


class AnchorNotFoundError(DaykitError):
    """Raised when no dispatch line contains the anchor text."""


class DaykitIOError(DaykitError):
    """Raised for write, copy, or rename failures."""
