"""Command line parsing for completions.

Extracts the `--suite`, `--test` and `--path` values from the partially typed
command line so the candidates can be narrowed to what the user already typed.
"""

from __future__ import annotations

import re

from .constants import (
    DEFAULT_PATH,
    DEFAULT_SUITE_FILTER,
    DEFAULT_TEST_FILTER,
    PATH_FLAG,
    RUNNER_COMMAND,
    SUITE_FLAG,
    TEST_FLAG,
)
from .models import CommandContext

__all__ = ["parse_command_context", "tokenize", "unquote"]

# A token is a run of non-blank characters and double-quoted sections.
# An unterminated quote extends to the end of the line (the user is typing it).
_TOKEN_PATTERN = re.compile(r'(?:"[^"]*"?|[^\s"])+')

_FLAGS = (SUITE_FLAG, TEST_FLAG, PATH_FLAG)


def tokenize(raw: str) -> list[str]:
    """Split a command line on whitespace, keeping quoted sections whole.

    Quote characters are kept in the tokens.
    E.g., 'run-tests --test "some foo"' -> ["run-tests", "--test", '"some foo"']
    """
    return _TOKEN_PATTERN.findall(raw)


def unquote(value: str) -> str:
    """Remove the double quotes surrounding `value`, if any."""
    if len(value) >= 2 and value[0] == value[-1] == '"':  # noqa: PLR2004
        return value[1:-1]
    return value


def _runner_arguments(tokens: list[str]) -> list[str]:
    """Return the tokens following the last runner command.

    Anything typed before it (e.g. `use nutest;`) is irrelevant.
    When the runner is not found, every token is kept.
    """
    for index in range(len(tokens) - 1, -1, -1):
        if tokens[index] == RUNNER_COMMAND:
            return tokens[index + 1 :]
    return tokens


def _flag_values(tokens: list[str]) -> dict[str, str]:
    """Collect the value of each known flag.

    Both `--flag value` and `--flag=value` are understood; the last occurrence wins.
    """
    values: dict[str, str] = {}
    index = 0
    while index < len(tokens):
        flag, equal, inline_value = tokens[index].partition("=")
        if flag in _FLAGS:
            if equal:
                if inline_value:
                    values[flag] = inline_value
            # a following `--x` token is the next flag, not this flag's value
            elif index + 1 < len(tokens) and not tokens[index + 1].startswith("--"):
                index += 1
                values[flag] = tokens[index]
        index += 1
    return values


def parse_command_context(raw: str) -> CommandContext:
    """Parse a partially typed command line.

    Never fails: unknown tokens are ignored and missing values get defaults.

    Args:
        raw: The command line buffer

    Returns:
        The suite & test filters and the path to scan
    """
    values = _flag_values(_runner_arguments(tokenize(raw or "")))
    return CommandContext(
        suite=values.get(SUITE_FLAG, DEFAULT_SUITE_FILTER),
        test=values.get(TEST_FLAG, DEFAULT_TEST_FILTER),
        path=values.get(PATH_FLAG, DEFAULT_PATH),
    )
