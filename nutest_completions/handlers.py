"""Completion entry points.

`complete` is what a shell completer calls; `handle_compgen` produces the
shell integration code.
"""

from __future__ import annotations

from pathlib import Path

from .constants import SUPPORTED_SHELLS
from .context import parse_command_context, unquote
from .discovery import list_suites, list_tests
from .generators import DEFAULT_PATHS, GENERATORS
from .logging_setup import get_logger
from .models import CommandContext, CompletionKind, CompletionResult
from .options import display_options, returns_options
from .types import NutestCompletionError

__all__ = ["complete", "get_default_path", "handle_compgen"]

log = get_logger("nutest.handlers")


def _scan_directory(context: CommandContext, cwd: str | Path | None) -> Path:
    """Directory holding the suites; relative paths are taken from `cwd` when given."""
    directory = Path(unquote(context.path))
    if cwd is not None and not directory.is_absolute():
        return Path(cwd) / directory
    return directory


def _complete(kind: CompletionKind, raw: str, cwd: str | Path | None) -> CompletionResult:
    if kind is CompletionKind.DISPLAY:
        return display_options()
    if kind is CompletionKind.RETURNS:
        return returns_options()

    context = parse_command_context(raw)
    directory = _scan_directory(context, cwd)
    log.debug("Completing %s from %r: %s in %s", kind.value, raw, context, directory)
    if kind is CompletionKind.SUITES:
        return CompletionResult.candidates(list_suites(directory, context.suite))
    return CompletionResult.candidates(list_tests(directory, context.suite, context.test))


def complete(kind: CompletionKind | str, raw: str = "", cwd: str | Path | None = None) -> CompletionResult:
    """Compute the completions of one kind for a command line.

    Never raises: failures give an empty result.

    Args:
        kind: What to complete ("suites", "tests", "display" or "returns")
        raw: The partially typed command line (ignored by "display" and "returns")
        cwd: Base directory for a relative --path (process working directory if not set)

    Returns:
        The completions and their display options
    """
    try:
        kind = CompletionKind(kind)
    except ValueError:
        log.warning("Unknown completion kind: %s", kind)
        return CompletionResult.candidates([])
    try:
        return _complete(kind, raw, cwd)
    except NutestCompletionError as e:
        log.warning("Completion of %s failed: %s", kind.value, e)
        return CompletionResult.candidates([])


def get_default_path(shell: str) -> str:
    """Get the default user-level completion path for a shell.

    Args:
        shell: Shell type ("nu")

    Returns:
        Expanded absolute path to the default completion file
    """
    return str(Path(DEFAULT_PATHS[shell]).expanduser())


def _parse_compgen_args(args: str) -> tuple[bool, str, str | None]:
    """Parse and validate compgen arguments.

    Args:
        args: Arguments after "compgen" (e.g., "nu" or "nu default")

    Returns:
        Tuple of (success, shell_or_error, path_arg):
        - On success: (True, shell, path_arg or None)
        - On failure: (False, error_message, None)
    """
    parts = args.split(None, 1)
    if not parts:
        shells = "|".join(SUPPORTED_SHELLS)
        return (False, f"Usage: compgen <{shells}> [default|path]", None)

    shell = parts[0]
    if shell not in SUPPORTED_SHELLS:
        return (False, f"Unsupported shell: {shell}. Supported: {', '.join(SUPPORTED_SHELLS)}", None)

    path_arg = parts[1].strip() if len(parts) > 1 else None
    if path_arg is not None and path_arg != "default" and not path_arg.startswith(("/", "~")):
        return (False, "Relative paths not supported. Use absolute path, ~/path, or 'default'.", None)

    return (True, shell, path_arg)


def handle_compgen(args: str) -> tuple[bool, str]:
    """Handle the compgen command.

    Args:
        args: Arguments after "compgen" (e.g., "nu" or "nu ~/nutest.nu")

    Returns:
        Tuple of (success, result):
        - No path arg: result is the script content
        - With path arg: result is success/error message
    """
    success, shell_or_error, path_arg = _parse_compgen_args(args)
    if not success:
        return (False, shell_or_error)

    shell = shell_or_error
    content = GENERATORS[shell]()

    if path_arg is None:
        return (True, content)

    output_path = get_default_path(shell) if path_arg == "default" else str(Path(path_arg).expanduser())
    log.debug("Writing completions to: %s", output_path)

    try:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        Path(output_path).write_text(content, encoding="utf-8")
    except OSError as e:
        return (False, f"Failed to write completion file: {e}")

    display_path = output_path.replace(str(Path.home()), "~")
    return (True, f"Completions written to {display_path}\nSource it from your config.nu: use {display_path} *")
