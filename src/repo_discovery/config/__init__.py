"""Configuration for repo-discovery."""

from repo_discovery.config.loader import load_run_config
from repo_discovery.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "load_run_config"]
