"""Autodiscovery of the repositories a run operates on."""

import structlog

from repo_discovery.core.exceptions import ConfigurationError
from repo_discovery.core.interfaces import DiagnosticsLogger, RepositoryPlatform
from repo_discovery.core.models import LOCAL_PLATFORM, RepositoryIdentifier, RunConfig
from repo_discovery.discovery.reconcile import merge_configured_repositories
from repo_discovery.filters.engine import apply_filters, prepare_filter

logger = structlog.get_logger(__name__)


async def autodiscover_repositories(
    config: RunConfig,
    platform: RepositoryPlatform,
    *,
    log: DiagnosticsLogger | None = None,
) -> RunConfig:
    """Resolve ``config.repositories`` for this run.

    - Local platform: ``repositories`` becomes ``["local"]``; an explicit
      repository list is rejected.
    - Autodiscover disabled: the config is returned unchanged.
    - Otherwise the platform is queried, the result filtered with
      ``autodiscoverFilter``/``autodiscoverExclusions`` and reconciled with
      the configured repositories.

    Empty discovery or filter results return the config unchanged.

    Raises:
        ConfigurationError: Local platform combined with a repository list.
        FilterPatternError: A filter is a malformed regex literal.
    """
    log = log or logger

    if config.is_local:
        if config.repositories:
            log.debug(
                "Found repositories when in local mode",
                repositories=config.dump_repositories(),
            )
            raise ConfigurationError(
                "Invalid configuration: repositories list not supported "
                "when platform=local",
                details={"repositories": config.dump_repositories()},
            )
        config.repositories = [LOCAL_PLATFORM]
        return config

    if not config.autodiscover:
        if not config.repositories:
            log.warning(
                "No repositories found - did you want to run with flag --autodiscover?"
            )
        return config

    discovered: list[RepositoryIdentifier] = list(
        await platform.get_repos(config.discovery_criteria()) or []
    )
    if not discovered:
        log.debug("No repositories were autodiscovered")
        return config

    log.debug("Autodiscovered repositories", count=len(discovered))

    # An empty list still counts as a configured filter and selects nothing
    if config.autodiscover_filter not in (None, ""):
        log.debug(
            "Applying autodiscoverFilter",
            autodiscover_filter=config.autodiscover_filter,
        )
        discovered = apply_filters(
            discovered,
            prepare_filter(config.autodiscover_filter),
            prepare_filter(config.autodiscover_exclusions),
            log=log,
        )
        if not discovered:
            log.debug("None of the discovered repositories matched the filter")
            return config
        log.debug("Autodiscovered repositories after filter", count=len(discovered))

    log.info("Autodiscovered repositories", repositories=discovered)

    if config.repositories:
        log.debug("Checking autodiscovered repositories against configured repositories")
        discovered, _ = merge_configured_repositories(
            discovered, config.repositories, log=log
        )

    return config.model_copy(update={"repositories": discovered})
