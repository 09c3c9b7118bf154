"""Filter patterns typed by the user.

Filters are regular expressions matched anywhere in the candidate, so typing
a prefix or any fragment of a name selects it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .types import InvalidFilterError

__all__ = ["compile_filter", "filter_names"]


def compile_filter(pattern: str) -> re.Pattern[str]:
    """Compile a user supplied filter.

    Raises:
        InvalidFilterError: the pattern is not a valid regular expression
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidFilterError(pattern, str(e)) from e


def filter_names(names: Iterable[str], pattern: re.Pattern[str]) -> list[str]:
    """Keep the names matched (non-anchored) by `pattern`, in order."""
    return [name for name in names if pattern.search(name)]
