"""Suite and test discovery.

Suites are the `test_*.nu` files of a directory; tests are the definitions
of those files annotated with a test marker on the line above them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .constants import HOOK_MARKERS, IGNORE_MARKER, SUITE_FILE_EXTENSION, SUITE_FILE_PREFIX, TEST_MARKER
from .filters import compile_filter, filter_names
from .logging_setup import get_logger
from .models import Marker
from .types import InvalidFilterError

__all__ = ["Declaration", "classify_marker", "find_declarations", "list_suites", "list_tests", "suite_files"]

log = get_logger("nutest.discovery")

_SUITE_FILE_PATTERN = re.compile(rf"^{re.escape(SUITE_FILE_PREFIX)}.+\.{re.escape(SUITE_FILE_EXTENSION)}$")

# def name [...] / def "some name" [...], optionally exported or with flags (--env, --wrapped)
_DECLARATION_PATTERN = re.compile(r"""^\s*(?:export\s+)?def\s+(?:--[\w-]+\s+)*(?:"([^"]+)"|'([^']+)'|([^\s\["']+))""")

_WHITESPACE = re.compile(r"\s")

# Markers whose declarations are offered as test names
_CANDIDATE_MARKERS = frozenset({Marker.TEST, Marker.IGNORE})


@dataclass(frozen=True)
class Declaration:
    """A definition found in a suite file."""

    name: str
    marker: Marker


def classify_marker(line: str) -> Marker:
    """Classify the line preceding a declaration."""
    text = line.strip()
    if text == TEST_MARKER:
        return Marker.TEST
    if text == IGNORE_MARKER:
        return Marker.IGNORE
    if text in HOOK_MARKERS:
        return Marker.HOOK
    return Marker.NONE


def find_declarations(source: str) -> list[Declaration]:
    """List the definitions of a suite file with their marker, in file order."""
    declarations: list[Declaration] = []
    previous = ""
    for line in source.splitlines():
        match = _DECLARATION_PATTERN.match(line)
        if match:
            name = next(group for group in match.groups() if group is not None)
            declarations.append(Declaration(name=name, marker=classify_marker(previous)))
        previous = line
    return declarations


def suite_files(path: str | Path) -> list[Path]:
    """Return the suite files directly inside `path`, sorted by name.

    A missing or unreadable directory has no suites.
    """
    try:
        entries = list(Path(path).iterdir())
    except (OSError, ValueError) as e:  # ValueError: path rejected by the OS (e.g. NUL byte)
        log.debug("Cannot list %s: %s", path, e)
        return []
    return sorted(
        (entry for entry in entries if _SUITE_FILE_PATTERN.match(entry.name) and _is_file(entry)),
        key=lambda entry: entry.name,
    )


def _is_file(entry: Path) -> bool:
    """Tell whether `entry` is a regular file, an entry that can't be inspected is not."""
    try:
        return entry.is_file()
    except OSError as e:
        log.debug("Cannot inspect %s: %s", entry, e)
        return False


def _selected_suites(path: str | Path, suite_filter: str) -> list[Path]:
    """Return the suite files whose name (without extension) matches `suite_filter`.

    Raises:
        InvalidFilterError: `suite_filter` is not a valid pattern
    """
    pattern = compile_filter(suite_filter)
    return [file for file in suite_files(path) if pattern.search(file.stem)]


def list_suites(path: str | Path, suite_filter: str) -> list[str]:
    """List the suites found in `path` matching `suite_filter`.

    Args:
        path: Directory to scan
        suite_filter: Regex searched in the suite names

    Returns:
        Suite names (file names without extension), in lexical order
    """
    try:
        return [file.stem for file in _selected_suites(path, suite_filter)]
    except InvalidFilterError as e:
        log.warning("No suite completion: %s", e)
        return []


def _read_suite(file: Path) -> str | None:
    # undecodable bytes only spoil the declarations they appear in
    try:
        return file.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        log.debug("Skipping %s: %s", file, e)
        return None


def _as_candidate(name: str) -> str:
    """Quote names containing whitespace so the shell keeps them whole."""
    return f'"{name}"' if _WHITESPACE.search(name) else name


def list_tests(path: str | Path, suite_filter: str, test_filter: str) -> list[str]:
    """List the tests of the suites in `path` matching both filters.

    Hooks and unmarked definitions are never listed.

    Args:
        path: Directory to scan
        suite_filter: Regex searched in the suite names
        test_filter: Regex searched in the test names

    Returns:
        Test names in suite then declaration order
    """
    try:
        files = _selected_suites(path, suite_filter)
        pattern = compile_filter(test_filter)
    except InvalidFilterError as e:
        log.warning("No test completion: %s", e)
        return []

    tests: list[str] = []
    for file in files:
        source = _read_suite(file)
        if source is None:
            continue
        names = [decl.name for decl in find_declarations(source) if decl.marker in _CANDIDATE_MARKERS]
        tests.extend(_as_candidate(name) for name in filter_names(names, pattern))
    return tests
