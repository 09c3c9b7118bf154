" generic fixtures "
import os
import stat
from pathlib import Path

import pytest

SUITE_1 = """\
use std/assert

#[test]
def some_foo1 [] {
    assert true
}
"""

SUITE_2 = """\
use std/assert

#[test]
def "some foo2" [] {
    assert true
}

#[ignore]
def some_foo3 [] {
    assert true
}

#[before-each]
def some_foo4 [] {
    { value: 1 }
}

#[test]
def some_foo5 [] {
    assert true
}
"""


def pytest_configure():
    "Runs once before all"
    from nutest_completions.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def suites_dir(tmp_path: Path) -> Path:
    "A directory holding two suites and unrelated files"
    (tmp_path / "test_1.nu").write_text(SUITE_1)
    (tmp_path / "test_2.nu").write_text(SUITE_2)
    (tmp_path / "helpers.nu").write_text("#[test]\ndef not_a_suite [] { }\n")
    (tmp_path / "test_notes.txt").write_text("#[test]\ndef not_a_suite_either [] { }\n")
    (tmp_path / "test_sub.nu").mkdir()
    return tmp_path


@pytest.fixture
def restrict():
    "Change path modes for the duration of a test (skipped as root, who ignores them)"
    if os.geteuid() == 0:
        pytest.skip("permissions are not enforced for root")
    changed: list[tuple[Path, int]] = []

    def _restrict(path: Path, mode: int) -> None:
        changed.append((path, stat.S_IMODE(path.stat().st_mode)))
        path.chmod(mode)

    yield _restrict
    for path, mode in reversed(changed):
        path.chmod(mode)
