"""Reconciliation of operator overrides with discovered repositories."""

from collections.abc import Sequence

import structlog

from repo_discovery.core.interfaces import DiagnosticsLogger
from repo_discovery.core.models import RepositoryIdentifier, repo_name, same_repository

logger = structlog.get_logger(__name__)


def merge_configured_repositories(
    discovered: Sequence[RepositoryIdentifier],
    configured: Sequence[RepositoryIdentifier],
    *,
    log: DiagnosticsLogger | None = None,
) -> tuple[list[RepositoryIdentifier], list[str]]:
    """Substitute configured entries for matching discovered ones.

    Every discovered position whose name matches a configured entry
    (case-insensitively) is replaced by that entry, so order follows
    discovery. Configured entries with no discovered counterpart are not
    added to the result.

    Returns:
        The merged list and the names of unmatched configured entries.
    """
    log = log or logger
    merged = list(discovered)
    unmatched: list[str] = []

    for entry in configured:
        repository = repo_name(entry)
        found = False
        for i, candidate in enumerate(merged):
            if same_repository(candidate, entry):
                found = True
                merged[i] = entry
        if found:
            log.debug("Using configured repository settings", repository=repository)
        else:
            unmatched.append(repository)
            log.warning(
                "Configured repository is not in autodiscover list",
                repository=repository,
            )

    return merged, unmatched
