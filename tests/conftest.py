"""Pytest configuration and fixtures."""

import pytest
import structlog

from doubles import RecordingLogger, RecordingPlatform
from repo_discovery.config.settings import get_settings
from repo_discovery.core.models import RunConfig
from repo_discovery.platforms.static import StaticPlatform, StaticRepository


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo structlog configuration done by CLI tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def discovered_platform() -> RecordingPlatform:
    """Platform listing two repositories of one organisation."""
    return RecordingPlatform(["org/repo1", "org/repo2"])


@pytest.fixture
def autodiscover_config() -> RunConfig:
    """Remote config with autodiscovery enabled and nothing else set."""
    return RunConfig(platform="github", autodiscover=True)


@pytest.fixture
def static_platform() -> StaticPlatform:
    """Static listing covering topics, mirrors, archives and namespaces."""
    return StaticPlatform(
        [
            StaticRepository(name="org/api", topics=["backend"]),
            StaticRepository(name="org/web", topics=["frontend"]),
            StaticRepository(name="org/api-mirror", mirror=True),
            StaticRepository(name="org/legacy", archived=True),
            "other/tool",
        ]
    )
