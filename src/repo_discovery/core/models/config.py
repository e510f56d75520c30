"""Run configuration models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from repo_discovery.core.models.repository import RepositoryIdentifier

# Platform value that disables discovery; also the sentinel repository entry.
LOCAL_PLATFORM = "local"


class DiscoveryCriteria(BaseModel):
    """Coarse criteria passed through to the repository-listing platform."""

    model_config = ConfigDict(frozen=True)

    topics: list[str] | None = None
    include_mirrors: bool | None = None
    namespaces: list[str] | None = None


class RunConfig(BaseModel):
    """Configuration for a single run.

    Accepts both snake_case field names and the camelCase keys used in
    configuration files (``autodiscoverFilter``, ``includeMirrors``...).
    Unknown keys are preserved for downstream consumers.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    platform: str = "github"
    autodiscover: bool = False
    repositories: list[RepositoryIdentifier] = Field(default_factory=list)

    autodiscover_filter: str | list[str] | None = None
    autodiscover_exclusions: str | list[str] | None = None

    autodiscover_topics: list[str] | None = None
    include_mirrors: bool | None = None
    autodiscover_namespaces: list[str] | None = None

    @property
    def is_local(self) -> bool:
        return self.platform == LOCAL_PLATFORM

    def discovery_criteria(self) -> DiscoveryCriteria:
        """Build the criteria handed to the platform listing call."""
        return DiscoveryCriteria(
            topics=self.autodiscover_topics,
            include_mirrors=self.include_mirrors,
            namespaces=self.autodiscover_namespaces,
        )

    def dump_repositories(self) -> list[str | dict[str, Any]]:
        """Serialize ``repositories`` to plain names and dicts."""
        return [
            entry if isinstance(entry, str) else entry.model_dump()
            for entry in self.repositories
        ]
