"""Data models for nutest completions.

The key names produced by `CompletionResult.to_dict` are read by the shell
completion renderer and must not change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, StrEnum
from typing import Any

from .constants import DEFAULT_PATH, DEFAULT_SUITE_FILTER, DEFAULT_TEST_FILTER

__all__ = [
    "PREFIX_ALGORITHM",
    "CommandContext",
    "CompletionKind",
    "CompletionOptions",
    "CompletionResult",
    "ExitCode",
    "Marker",
    "OptionEntry",
]

PREFIX_ALGORITHM = "prefix"


class CompletionKind(StrEnum):
    """What is being completed."""

    SUITES = "suites"
    TESTS = "tests"
    DISPLAY = "display"
    RETURNS = "returns"


class Marker(Enum):
    """Classification of a declaration, read from the line above it."""

    TEST = "test"
    IGNORE = "ignore"  # a disabled test
    HOOK = "hook"  # setup / teardown
    NONE = "none"


class ExitCode(IntEnum):
    """Standard exit codes for the nutest-complete command."""

    SUCCESS = 0
    USAGE_ERROR = 1  # Invalid arguments
    COMMAND_ERROR = 4  # Command execution failed


@dataclass(frozen=True)
class CommandContext:
    """Filters typed on the `run-tests` command line."""

    suite: str = DEFAULT_SUITE_FILTER  # regex
    test: str = DEFAULT_TEST_FILTER  # regex
    path: str = DEFAULT_PATH


@dataclass(frozen=True)
class OptionEntry:
    """A static completion value with its description."""

    value: str
    description: str

    def to_dict(self) -> dict[str, str]:
        """Return the value / description record."""
        return {"value": self.value, "description": self.description}


@dataclass
class CompletionOptions:
    """Display hints for the shell.

    `positional` and `completion_algorithm` are left to None for static
    enumerations, in which case they are not serialized.
    """

    sort: bool = False
    positional: bool | None = None
    completion_algorithm: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the options record, skipping unset hints."""
        data: dict[str, Any] = {"sort": self.sort}
        if self.positional is not None:
            data["positional"] = self.positional
        if self.completion_algorithm is not None:
            data["completion_algorithm"] = self.completion_algorithm
        return data


@dataclass
class CompletionResult:
    """Completions plus display options."""

    completions: list[str | OptionEntry] = field(default_factory=list)
    options: CompletionOptions = field(default_factory=CompletionOptions)

    @classmethod
    def candidates(cls, values: list[str]) -> CompletionResult:
        """Wrap dynamically discovered candidates (suites or tests)."""
        return cls(
            completions=list(values),
            options=CompletionOptions(sort=False, positional=False, completion_algorithm=PREFIX_ALGORITHM),
        )

    @classmethod
    def static(cls, entries: list[OptionEntry]) -> CompletionResult:
        """Wrap a fixed enumeration, keeping its declared order."""
        return cls(completions=list(entries), options=CompletionOptions(sort=False))

    def values(self) -> list[str]:
        """Return the completion strings only."""
        return [item.value if isinstance(item, OptionEntry) else item for item in self.completions]

    def to_dict(self) -> dict[str, Any]:
        """Return the record consumed by the shell."""
        return {
            "completions": [item.to_dict() if isinstance(item, OptionEntry) else item for item in self.completions],
            "options": self.options.to_dict(),
        }
