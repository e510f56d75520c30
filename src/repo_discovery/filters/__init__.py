"""Repository name filtering."""

from repo_discovery.filters.engine import apply_filter, apply_filters, prepare_filter
from repo_discovery.filters.patterns import compile_pattern, is_regex_pattern

__all__ = [
    "apply_filter",
    "apply_filters",
    "prepare_filter",
    "compile_pattern",
    "is_regex_pattern",
]
