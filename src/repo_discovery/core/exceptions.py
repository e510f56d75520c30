"""Exceptions raised by repo-discovery."""

from typing import Any


class RepoDiscoveryError(Exception):
    """Base exception for all repo-discovery errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(RepoDiscoveryError):
    """The run configuration is contradictory or invalid."""


class FilterPatternError(ConfigurationError):
    """A filter pattern could not be compiled."""


class PlatformError(RepoDiscoveryError):
    """The platform returned a payload that could not be interpreted."""
