"""Filter pattern classification and compilation.

A filter pattern is either a regex literal or a glob:

- Regex literal: ``/body/`` or ``/body/i`` (case-insensitive), optionally
  prefixed with ``!`` to negate. Matching is unanchored (``re.search``).
- Glob: anything else, matched with ``wcmatch`` in minimatch style. ``*``
  and ``?`` stay within one ``/``-separated segment, ``**`` spans segments,
  braces (``org/{api,web}``) and extglobs (``@(a|b)``) expand. Globs match
  case-insensitively and do not treat dot-prefixed names as hidden.
  A leading ``!`` negates the glob.
"""

import re
from collections.abc import Callable

from wcmatch import glob

from repo_discovery.core.exceptions import FilterPatternError

NamePredicate = Callable[[str], bool]

_REGEX_START = re.compile(r"^!?/")
_REGEX_END = re.compile(r"/i?$")


def is_regex_pattern(pattern: str) -> bool:
    """Check whether a filter string uses the regex literal syntax."""
    return bool(_REGEX_START.search(pattern) and _REGEX_END.search(pattern))


def regex_predicate(pattern: str) -> NamePredicate:
    """Compile a regex literal into a name predicate.

    Raises:
        FilterPatternError: If the body is not a valid regular expression.
    """
    body = _REGEX_END.sub("", _REGEX_START.sub("", pattern, count=1), count=1)
    flags = re.IGNORECASE if pattern.endswith("i") else 0
    try:
        regex = re.compile(body, flags)
    except re.error as e:
        raise FilterPatternError(
            f'Failed to parse regex pattern "{pattern}"',
            details={"pattern": pattern, "error": str(e)},
        ) from e

    if pattern.startswith("!"):
        return lambda name: regex.search(name) is None
    return lambda name: regex.search(name) is not None


GLOB_FLAGS = (
    glob.GLOBSTAR
    | glob.BRACE
    | glob.EXTGLOB
    | glob.DOTGLOB
    | glob.IGNORECASE
    | glob.NEGATE
    | glob.NEGATEALL
    | glob.FORCEUNIX
)


def glob_match(name: str, pattern: str) -> bool:
    """Match a repository name against a glob, case-insensitively."""
    return glob.globmatch(name, pattern, flags=GLOB_FLAGS)


def glob_predicate(pattern: str) -> NamePredicate:
    """Compile a glob into a name predicate."""
    matcher = glob.compile(pattern, flags=GLOB_FLAGS)
    return lambda name: matcher.match(name)


def compile_pattern(pattern: str) -> NamePredicate:
    """Classify a filter pattern and compile it into a predicate."""
    if is_regex_pattern(pattern):
        return regex_predicate(pattern)
    return glob_predicate(pattern)
