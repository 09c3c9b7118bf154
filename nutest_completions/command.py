"""The nutest-complete command.

Prints the completions of a partially typed `run-tests` command line as JSON,
or the shell code wiring them into nushell.
"""

from __future__ import annotations

import argparse
import json
import pathlib
import sys
from typing import NoReturn

import shtab

from .constants import SUPPORTED_SHELLS
from .handlers import complete, handle_compgen
from .logging_setup import get_logger, init_logger
from .models import CompletionKind, ExitCode

__all__ = ["get_parser", "main"]


class _Parser(argparse.ArgumentParser):
    """Argument parser exiting with `ExitCode.USAGE_ERROR` on bad usage."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(ExitCode.USAGE_ERROR, f"{self.prog}: error: {message}\n")


def get_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = _Parser(prog="nutest-complete", description="Completions for nutest run-tests", allow_abbrev=False)
    parser.add_argument(
        "--debug",
        help="Enable debug mode and log to a file",
        metavar="filename",
    ).complete = shtab.FILE
    parser.add_argument(
        "--cwd",
        help="Directory a relative --path is taken from (defaults to the current directory)",
        metavar="directory",
        type=pathlib.Path,
    ).complete = shtab.DIRECTORY
    shtab.add_argument_to(parser)

    subparsers = parser.add_subparsers(dest="command", required=True, parser_class=_Parser)
    helps = {
        CompletionKind.SUITES: "Complete suite names",
        CompletionKind.TESTS: "Complete test names",
        CompletionKind.DISPLAY: "Complete --display values",
        CompletionKind.RETURNS: "Complete --returns values",
    }
    for kind, help_text in helps.items():
        sub = subparsers.add_parser(kind.value, help=help_text)
        sub.add_argument("buffer", help="The command line typed so far", nargs="?", default="")

    compgen = subparsers.add_parser("compgen", help="Generate the shell integration code")
    compgen.add_argument("shell", help="Target shell", choices=SUPPORTED_SHELLS)
    compgen.add_argument("path", help="Write to this file ('default' for the usual location)", nargs="?")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command.

    Args:
        argv: Arguments (sys.argv[1:] if not set)

    Returns:
        The exit code
    """
    args = get_parser().parse_args(argv)
    init_logger(args.debug, force_debug=bool(args.debug))
    log = get_logger("nutest")

    if args.command == "compgen":
        success, result = handle_compgen(f"{args.shell} {args.path or ''}")
        if not success:
            log.error(result)
            return ExitCode.COMMAND_ERROR
        print(result)
        return ExitCode.SUCCESS

    result = complete(args.command, args.buffer, cwd=args.cwd)
    print(json.dumps(result.to_dict()))
    return ExitCode.SUCCESS
