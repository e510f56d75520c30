"""Platform factory."""

from typing import TYPE_CHECKING

import structlog

from repo_discovery.core.exceptions import ConfigurationError
from repo_discovery.core.interfaces import RepositoryPlatform

if TYPE_CHECKING:
    from repo_discovery.config.settings import Settings

logger = structlog.get_logger(__name__)


def create_platform(
    settings: "Settings",
    platform: str | None = None,
    listing_file: str | None = None,
) -> RepositoryPlatform:
    """Create the repository-listing platform named by the settings.

    ``platform`` overrides ``settings.platform``. The local platform never
    lists anything, so it gets an empty static listing.
    """
    name = (platform or settings.platform).lower()

    if name == "github":
        from repo_discovery.platforms.github import GitHubPlatform

        created: RepositoryPlatform = GitHubPlatform(
            token=settings.token,
            endpoint=settings.endpoint,
            timeout=settings.request_timeout,
            page_size=settings.page_size,
        )
    elif name == "static":
        from repo_discovery.platforms.static import StaticPlatform

        if not listing_file:
            raise ConfigurationError(
                "The static platform requires a repository listing file",
                details={"platform": name},
            )
        created = StaticPlatform.from_file(listing_file)
    elif name == "local":
        from repo_discovery.platforms.static import StaticPlatform

        created = StaticPlatform([])
    else:
        raise ConfigurationError(
            f"Unknown platform: {name}",
            details={"platform": name},
        )

    logger.info("Platform created", platform=name)
    return created
