"""Repository autodiscovery."""

from repo_discovery.discovery.orchestrator import autodiscover_repositories
from repo_discovery.discovery.reconcile import merge_configured_repositories

__all__ = ["autodiscover_repositories", "merge_configured_repositories"]
