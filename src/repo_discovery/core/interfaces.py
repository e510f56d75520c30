"""Collaborator interfaces used by the discovery core."""

from typing import Any, Protocol, runtime_checkable

from repo_discovery.core.models import DiscoveryCriteria


class DiagnosticsLogger(Protocol):
    """Subset of the structlog bound logger API the core relies on."""

    def debug(self, event: str, **kw: Any) -> Any: ...

    def info(self, event: str, **kw: Any) -> Any: ...

    def warning(self, event: str, **kw: Any) -> Any: ...


@runtime_checkable
class RepositoryPlatform(Protocol):
    """Lists the repositories visible under the given criteria."""

    async def get_repos(self, criteria: DiscoveryCriteria) -> list[str]:
        """Return repository names, possibly empty.

        Transport and authorization errors are raised to the caller.
        """
        ...
