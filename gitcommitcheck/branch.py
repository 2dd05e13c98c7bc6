"""Branch name pattern matching."""
import re
from functools import lru_cache
from typing import Iterable, Pattern


@lru_cache(maxsize=None)
def _compile(pattern: str) -> Pattern[str]:
    parts = []
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if pattern.startswith("**", i):
            parts.append(".*")
            i += 2
            continue
        if char == "*":
            parts.append("[^/]*")
        elif char == "?":
            parts.append("[^/]")
        else:
            parts.append(re.escape(char))
        i += 1
    return re.compile("".join(parts) + r"\Z", re.DOTALL)


def glob_match(pattern: str, name: str) -> bool:
    """Check if a branch name matches a glob pattern.

    ``*`` matches within one path segment, ``**`` across segments and ``?``
    matches a single character other than ``/``.
    """
    return _compile(pattern).match(name) is not None


def matches_any_pattern(name: str, patterns: Iterable[str]) -> bool:
    """Check a branch against several patterns; no patterns matches every branch."""
    patterns = list(patterns)
    if not patterns:
        return True
    return any(glob_match(pattern, name) for pattern in patterns)
