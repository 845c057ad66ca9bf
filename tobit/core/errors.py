"""
Exception hierarchy for the corpus loader.

Parsing and reconciliation never raise; these errors cover reading sources
and configuration files.
"""

from __future__ import annotations

from typing import Optional

from tobit.core.constants import ERROR_SOURCE_UNAVAILABLE


class TobitError(Exception):
    """Base class for all errors raised by the package."""


class SourceFetchError(TobitError):
    """A manuscript markup or annotation source could not be read."""

    def __init__(self, source: str, reason: Optional[str] = None) -> None:
        self.source = source
        self.reason = reason
        message = ERROR_SOURCE_UNAVAILABLE.format(source=source)
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ConfigError(TobitError):
    """The ingestion configuration is missing or invalid."""
