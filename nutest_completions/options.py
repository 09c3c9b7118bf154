"""Static completions for the `--display` and `--returns` options.

Values are listed from the least to the most verbose and must be shown in
that order.
"""

from __future__ import annotations

from .constants import DISPLAY_OPTIONS, RETURNS_OPTIONS
from .models import CompletionResult, OptionEntry

__all__ = ["display_options", "returns_options"]


def display_options() -> CompletionResult:
    """Completions for `--display`."""
    return CompletionResult.static([OptionEntry(value, description) for value, description in DISPLAY_OPTIONS])


def returns_options() -> CompletionResult:
    """Completions for `--returns`."""
    return CompletionResult.static([OptionEntry(value, description) for value, description in RETURNS_OPTIONS])
