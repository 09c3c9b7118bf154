"""Exceptions raised while computing completions.

None of them reach the shell: the completion entry point turns them into
empty results.
"""

__all__ = ["InvalidFilterError", "NutestCompletionError"]


class NutestCompletionError(Exception):
    """Base class for completion failures."""


class InvalidFilterError(NutestCompletionError):
    """A user supplied filter is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid filter {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason
