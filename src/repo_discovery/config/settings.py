"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from repo_discovery.platforms.github import DEFAULT_ENDPOINT


class Settings(BaseSettings):
    """Process-level settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPO_DISCOVERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    environment: str = "development"
    log_level: str = "INFO"
    json_logs: bool = False

    # Platform: "github" | "static" | "local"
    platform: str = "github"
    endpoint: str = DEFAULT_ENDPOINT
    token: str | None = None
    request_timeout: float = 30.0
    page_size: int = 100

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
