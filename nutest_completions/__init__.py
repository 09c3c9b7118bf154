"""Shell completions for the nutest `run-tests` command.

Completes suite names, test names and the `--display` / `--returns` values
from the partially typed command line and the suites found on disk.

This package provides:
- context: parsing of the typed command line
- discovery: suite & test discovery
- options: static option values
- handlers: the `complete` entry point and shell integration
"""

from __future__ import annotations

from .context import parse_command_context
from .discovery import list_suites, list_tests
from .handlers import complete, handle_compgen
from .models import CommandContext, CompletionKind, CompletionResult, OptionEntry
from .options import display_options, returns_options

__all__ = [
    "CommandContext",
    "CompletionKind",
    "CompletionResult",
    "OptionEntry",
    "complete",
    "display_options",
    "handle_compgen",
    "list_suites",
    "list_tests",
    "parse_command_context",
    "returns_options",
]
