"""Core domain models and exceptions for repo-discovery."""

from repo_discovery.core.exceptions import (
    ConfigurationError,
    FilterPatternError,
    PlatformError,
    RepoDiscoveryError,
)
from repo_discovery.core.models import (
    LOCAL_PLATFORM,
    DiscoveryCriteria,
    RepositoryIdentifier,
    RepositoryOverride,
    RunConfig,
    repo_name,
)

__all__ = [
    # Models
    "DiscoveryCriteria",
    "RepositoryIdentifier",
    "RepositoryOverride",
    "RunConfig",
    "LOCAL_PLATFORM",
    "repo_name",
    # Exceptions
    "RepoDiscoveryError",
    "ConfigurationError",
    "FilterPatternError",
    "PlatformError",
]
