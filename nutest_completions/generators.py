"""Shell integration snippets.

The generated code defines one completer per completion kind, each calling
`nutest-complete` and handing its JSON record back to the shell.
"""

from __future__ import annotations

from collections.abc import Callable

from .constants import PATH_FLAG, RUNNER_COMMAND, SUITE_FLAG, TEST_FLAG
from .models import CompletionKind

__all__ = ["DEFAULT_PATHS", "GENERATORS", "completer_name", "generate_nu"]

# Default user-level completion paths
DEFAULT_PATHS = {
    "nu": "~/.config/nushell/completions/nutest.nu",
}

PROGRAM = "nutest-complete"


def completer_name(kind: CompletionKind) -> str:
    """Name of the nushell completer for `kind`."""
    return f"nu-complete nutest {kind.value}"


def generate_nu() -> str:
    """Generate the nushell completion module.

    Returns:
        The nushell script content
    """
    completers: list[str] = []
    for kind in CompletionKind:
        completers.append(f"""export def "{completer_name(kind)}" [context: string] {{
    ^{PROGRAM} {kind.value} $context | from json
}}""")
    completer_block = "\n\n".join(completers)

    return f"""# Nushell completions for nutest
# Generated by: {PROGRAM} compgen nu
#
# Attach them to the {RUNNER_COMMAND} signature, e.g.:
#   {SUITE_FLAG}: string@"{completer_name(CompletionKind.SUITES)}"
#   {TEST_FLAG}: string@"{completer_name(CompletionKind.TESTS)}"
#   --display: string@"{completer_name(CompletionKind.DISPLAY)}"
#   --returns: string@"{completer_name(CompletionKind.RETURNS)}"
# {PATH_FLAG} is read from the command line to locate the suites.

{completer_block}
"""


GENERATORS: dict[str, Callable[[], str]] = {
    "nu": generate_nu,
}
