"""Repository-listing platforms."""

from repo_discovery.platforms.factory import create_platform
from repo_discovery.platforms.github import GitHubPlatform
from repo_discovery.platforms.static import StaticPlatform, StaticRepository

__all__ = ["create_platform", "GitHubPlatform", "StaticPlatform", "StaticRepository"]
