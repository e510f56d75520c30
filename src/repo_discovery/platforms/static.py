"""In-memory repository listing."""

import json
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, Field, ValidationError

from repo_discovery.core.exceptions import PlatformError
from repo_discovery.core.models import DiscoveryCriteria

logger = structlog.get_logger(__name__)


class StaticRepository(BaseModel):
    """A repository entry served by ``StaticPlatform``."""

    name: str
    topics: list[str] = Field(default_factory=list)
    mirror: bool = False
    archived: bool = False

    @property
    def namespace(self) -> str:
        return self.name.rpartition("/")[0]


class StaticPlatform:
    """Serves a fixed repository list, applying discovery criteria locally.

    Useful for offline runs and tests. Criteria are interpreted the same way
    ``GitHubPlatform`` interprets them.
    """

    def __init__(self, repositories: list[StaticRepository | str]) -> None:
        self._repositories = [
            StaticRepository(name=repo) if isinstance(repo, str) else repo
            for repo in repositories
        ]

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticPlatform":
        """Load a listing from a JSON file.

        The file holds a list whose items are repository names or objects
        with ``name``, ``topics``, ``mirror`` and ``archived`` keys.
        """
        try:
            data: Any = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise PlatformError(
                f"Cannot read repository listing: {path}",
                details={"path": str(path), "error": str(e)},
            ) from e
        if not isinstance(data, list):
            raise PlatformError(
                "Repository listing must be a JSON list",
                details={"path": str(path)},
            )
        try:
            repositories = [
                item if isinstance(item, str) else StaticRepository.model_validate(item)
                for item in data
            ]
        except ValidationError as e:
            raise PlatformError(
                "Invalid repository listing entry",
                details={"path": str(path), "errors": e.errors(include_url=False)},
            ) from e
        return cls(repositories)

    async def get_repos(self, criteria: DiscoveryCriteria) -> list[str]:
        repos = [
            repo.name
            for repo in self._repositories
            if matches_criteria(
                criteria,
                namespace=repo.namespace,
                topics=repo.topics,
                mirror=repo.mirror,
                archived=repo.archived,
            )
        ]
        logger.debug("Listed static repositories", count=len(repos))
        return repos


def matches_criteria(
    criteria: DiscoveryCriteria,
    *,
    namespace: str,
    topics: list[str],
    mirror: bool,
    archived: bool,
) -> bool:
    """Check a repository's metadata against discovery criteria."""
    if archived:
        return False
    if mirror and not criteria.include_mirrors:
        return False
    if criteria.topics and not set(criteria.topics) & set(topics):
        return False
    if criteria.namespaces:
        wanted = {ns.lower() for ns in criteria.namespaces}
        if namespace.lower() not in wanted:
            return False
    return True
