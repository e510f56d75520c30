"""Domain models for repo-discovery."""

from repo_discovery.core.models.config import LOCAL_PLATFORM, DiscoveryCriteria, RunConfig
from repo_discovery.core.models.repository import (
    RepositoryIdentifier,
    RepositoryOverride,
    full_name,
    repo_name,
    same_repository,
)

__all__ = [
    "DiscoveryCriteria",
    "RunConfig",
    "LOCAL_PLATFORM",
    "RepositoryIdentifier",
    "RepositoryOverride",
    "full_name",
    "repo_name",
    "same_repository",
]
