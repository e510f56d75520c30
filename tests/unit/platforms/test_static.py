"""Tests for the static platform."""

import json
from pathlib import Path

import pytest

from factories import StaticRepositoryFactory
from repo_discovery.core.exceptions import PlatformError
from repo_discovery.core.models import DiscoveryCriteria
from repo_discovery.platforms.static import StaticPlatform


@pytest.mark.unit
class TestStaticPlatform:
    """Tests for StaticPlatform."""

    @pytest.mark.asyncio
    async def test_default_criteria(self, static_platform: StaticPlatform) -> None:
        repos = await static_platform.get_repos(DiscoveryCriteria())
        assert repos == ["org/api", "org/web", "other/tool"]

    @pytest.mark.asyncio
    async def test_include_mirrors(self, static_platform: StaticPlatform) -> None:
        repos = await static_platform.get_repos(DiscoveryCriteria(include_mirrors=True))
        assert "org/api-mirror" in repos
        assert "org/legacy" not in repos

    @pytest.mark.asyncio
    async def test_topics(self, static_platform: StaticPlatform) -> None:
        repos = await static_platform.get_repos(DiscoveryCriteria(topics=["backend", "x"]))
        assert repos == ["org/api"]

    @pytest.mark.asyncio
    async def test_namespaces(self, static_platform: StaticPlatform) -> None:
        repos = await static_platform.get_repos(DiscoveryCriteria(namespaces=["OTHER"]))
        assert repos == ["other/tool"]

    @pytest.mark.asyncio
    async def test_factory_entries(self) -> None:
        platform = StaticPlatform(StaticRepositoryFactory.build_batch(3))
        repos = await platform.get_repos(DiscoveryCriteria())
        assert len(repos) == 3

    @pytest.mark.asyncio
    async def test_from_file(self, tmp_path: Path) -> None:
        listing = tmp_path / "repos.json"
        listing.write_text(
            json.dumps(["org/a", {"name": "org/b", "topics": ["t"]}, {"name": "org/c", "archived": True}])
        )
        platform = StaticPlatform.from_file(listing)
        assert await platform.get_repos(DiscoveryCriteria()) == ["org/a", "org/b"]

    def test_from_file_missing(self, tmp_path: Path) -> None:
        with pytest.raises(PlatformError):
            StaticPlatform.from_file(tmp_path / "missing.json")

    def test_from_file_not_a_list(self, tmp_path: Path) -> None:
        listing = tmp_path / "repos.json"
        listing.write_text('{"name": "org/a"}')
        with pytest.raises(PlatformError, match="JSON list"):
            StaticPlatform.from_file(listing)

    @pytest.mark.parametrize("entry", [{"nam": "org/a"}, 42, {"name": "org/a", "topics": "x"}])
    def test_from_file_invalid_entry(self, tmp_path: Path, entry) -> None:
        listing = tmp_path / "repos.json"
        listing.write_text(json.dumps(["org/ok", entry]))
        with pytest.raises(PlatformError, match="Invalid repository listing entry") as exc_info:
            StaticPlatform.from_file(listing)
        assert exc_info.value.details["errors"]
