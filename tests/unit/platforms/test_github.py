"""Tests for the GitHub platform."""

import httpx
import pytest

from repo_discovery.config.settings import Settings
from repo_discovery.core.exceptions import PlatformError
from repo_discovery.core.models import DiscoveryCriteria
from repo_discovery.platforms.github import DEFAULT_ENDPOINT, GitHubPlatform


def _repo(full_name: str, **fields) -> dict:
    owner = full_name.split("/")[0]
    return {
        "full_name": full_name,
        "owner": {"login": owner},
        "archived": False,
        "mirror_url": None,
        "topics": [],
        **fields,
    }


PAGE_ONE = [
    _repo("org/api", topics=["backend"]),
    _repo("org/mirror", mirror_url="https://example.com/mirror.git"),
]
PAGE_TWO = [
    _repo("org/old", archived=True),
    _repo("Other/Tool"),
]


def _paginated_handler(requests: list[httpx.Request]):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.params.get("page") == "2":
            return httpx.Response(200, json=PAGE_TWO)
        return httpx.Response(
            200,
            json=PAGE_ONE,
            headers={
                "Link": '<https://api.github.com/user/repos?per_page=2&page=2>; rel="next"'
            },
        )

    return handler


@pytest.mark.unit
class TestGitHubPlatform:
    """Tests for GitHubPlatform."""

    @pytest.mark.asyncio
    async def test_paginates_and_filters(self) -> None:
        requests: list[httpx.Request] = []
        platform = GitHubPlatform(
            token="secret",
            page_size=2,
            transport=httpx.MockTransport(_paginated_handler(requests)),
        )
        repos = await platform.get_repos(DiscoveryCriteria())

        assert repos == ["org/api", "Other/Tool"]
        assert len(requests) == 2
        assert requests[0].url.path == "/user/repos"
        assert requests[0].url.params["per_page"] == "2"
        assert requests[0].headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    async def test_criteria(self) -> None:
        platform = GitHubPlatform(transport=httpx.MockTransport(_paginated_handler([])))
        repos = await platform.get_repos(
            DiscoveryCriteria(include_mirrors=True, namespaces=["org"])
        )
        assert repos == ["org/api", "org/mirror"]

        repos = await platform.get_repos(DiscoveryCriteria(topics=["backend"]))
        assert repos == ["org/api"]

    @pytest.mark.asyncio
    async def test_no_token_no_auth_header(self) -> None:
        requests: list[httpx.Request] = []
        platform = GitHubPlatform(transport=httpx.MockTransport(_paginated_handler(requests)))
        await platform.get_repos(DiscoveryCriteria())
        assert "Authorization" not in requests[0].headers

    @pytest.mark.asyncio
    async def test_http_error_propagates(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(401, json={"message": "Bad credentials"})
        )
        platform = GitHubPlatform(token="bad", transport=transport)
        with pytest.raises(httpx.HTTPStatusError):
            await platform.get_repos(DiscoveryCriteria())

    @pytest.mark.asyncio
    async def test_unexpected_payload(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"message": "nope"})
        )
        platform = GitHubPlatform(transport=transport)
        with pytest.raises(PlatformError):
            await platform.get_repos(DiscoveryCriteria())

    @pytest.mark.asyncio
    async def test_null_owner(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json=[_repo("org/api", owner=None)])
        )
        platform = GitHubPlatform(transport=transport)
        assert await platform.get_repos(DiscoveryCriteria()) == ["org/api"]
        assert await platform.get_repos(DiscoveryCriteria(namespaces=["org"])) == []

    def test_settings_share_default_endpoint(self) -> None:
        assert Settings().endpoint == DEFAULT_ENDPOINT
