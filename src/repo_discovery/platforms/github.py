"""GitHub repository listing over the REST API."""

from typing import Any

import httpx
import structlog

from repo_discovery.core.exceptions import PlatformError
from repo_discovery.core.models import DiscoveryCriteria
from repo_discovery.platforms.static import matches_criteria

logger = structlog.get_logger(__name__)

DEFAULT_ENDPOINT = "https://api.github.com"


class GitHubPlatform:
    """Lists repositories accessible to the authenticated GitHub user.

    Archived repositories are never returned. Mirrors are returned only
    when ``include_mirrors`` is set; ``topics`` and ``namespaces`` (owner
    logins) narrow the listing further.

    HTTP and transport errors are raised unchanged.
    """

    def __init__(
        self,
        token: str | None = None,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 30.0,
        page_size: int = 100,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._token = token
        self._endpoint = endpoint.rstrip("/")
        self._timeout = timeout
        self._page_size = page_size
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def get_repos(self, criteria: DiscoveryCriteria) -> list[str]:
        timeout_config = httpx.Timeout(self._timeout, connect=5.0)
        async with httpx.AsyncClient(
            base_url=self._endpoint,
            headers=self._headers(),
            timeout=timeout_config,
            transport=self._transport,
        ) as client:
            items = await self._fetch_all(client)

        repos = [
            item["full_name"]
            for item in items
            if matches_criteria(
                criteria,
                namespace=(item.get("owner") or {}).get("login", ""),
                topics=item.get("topics") or [],
                mirror=bool(item.get("mirror_url")),
                archived=bool(item.get("archived")),
            )
        ]
        logger.debug("Listed GitHub repositories", total=len(items), count=len(repos))
        return repos

    async def _fetch_all(self, client: httpx.AsyncClient) -> list[dict[str, Any]]:
        """Follow ``Link: rel="next"`` pagination and collect every page."""
        items: list[dict[str, Any]] = []
        url: str | None = "/user/repos"
        params: dict[str, Any] | None = {"per_page": self._page_size}

        while url:
            response = await client.get(url, params=params)
            response.raise_for_status()
            page = response.json()
            if not isinstance(page, list):
                raise PlatformError(
                    "Unexpected repository listing payload",
                    details={"url": str(response.url)},
                )
            items.extend(page)
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string
            params = None

        return items
