"""Include/exclude filtering of discovered repository names."""

from collections.abc import Sequence

import structlog

from repo_discovery.core.interfaces import DiagnosticsLogger
from repo_discovery.core.models import RepositoryIdentifier, full_name
from repo_discovery.filters.patterns import compile_pattern

logger = structlog.get_logger(__name__)


def prepare_filter(value: str | Sequence[str] | None) -> list[str]:
    """Normalize a filter setting (single string, list or unset) to a list."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def apply_filter(
    candidates: Sequence[RepositoryIdentifier], pattern: str
) -> list[RepositoryIdentifier]:
    """Return the candidates selected by a single pattern, in candidate order."""
    predicate = compile_pattern(pattern)
    return [entry for entry in candidates if predicate(full_name(entry))]


def apply_filters(
    candidates: Sequence[RepositoryIdentifier],
    include_patterns: Sequence[str],
    exclude_patterns: Sequence[str],
    *,
    log: DiagnosticsLogger | None = None,
) -> list[RepositoryIdentifier]:
    """Filter candidates with ordered include and exclude patterns.

    Matches are accumulated in first-seen order across the include
    patterns, deduplicated by exact name. Exclude patterns are evaluated
    against that accumulated set only, never the full candidate list.

    Raises:
        FilterPatternError: If any pattern is a malformed regex literal.
    """
    log = log or logger

    matched: dict[str, RepositoryIdentifier] = {}
    for pattern in include_patterns:
        selected = apply_filter(candidates, pattern)
        log.debug("Include pattern applied", pattern=pattern, count=len(selected))
        for entry in selected:
            matched.setdefault(full_name(entry), entry)

    removed: set[str] = set()
    for pattern in exclude_patterns:
        selected = apply_filter(list(matched.values()), pattern)
        log.debug("Exclude pattern applied", pattern=pattern, count=len(selected))
        removed.update(full_name(entry) for entry in selected)

    return [entry for name, entry in matched.items() if name not in removed]
