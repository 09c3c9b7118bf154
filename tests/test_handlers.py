"""Tests for the completion entry points."""

from pathlib import Path

import pytest

from nutest_completions.generators import DEFAULT_PATHS
from nutest_completions.handlers import complete, get_default_path, handle_compgen
from nutest_completions.models import CompletionKind


class TestComplete:
    """Tests for complete function."""

    def test_suites(self, suites_dir):
        """Test suite completion with the path given on the command line."""
        result = complete(CompletionKind.SUITES, f"use nutest; nutest run-tests --path {suites_dir} --suite 2")
        assert result.completions == ["test_2"]

    def test_tests(self, suites_dir):
        """Test test completion."""
        result = complete("tests", f"run-tests --suite _2 --test foo[1234] --path {suites_dir}")
        assert result.completions == ['"some foo2"', "some_foo3"]

    def test_relative_path(self, suites_dir):
        """Test that a relative path is taken from cwd."""
        result = complete("suites", "run-tests --path .", cwd=suites_dir)
        assert result.completions == ["test_1", "test_2"]
        result = complete("suites", f"run-tests --path {suites_dir.name}", cwd=suites_dir.parent)
        assert result.completions == ["test_1", "test_2"]

    def test_default_path(self, suites_dir, monkeypatch):
        """Test that the current directory is scanned by default."""
        monkeypatch.chdir(suites_dir)
        assert complete("tests", "run-tests --test foo1").completions == ["some_foo1"]

    def test_quoted_path(self, tmp_path):
        """Test a quoted path containing spaces."""
        directory = tmp_path / "my suites"
        directory.mkdir()
        (directory / "test_x.nu").write_text("")
        assert complete("suites", f'run-tests --path "{directory}"').completions == ["test_x"]

    @pytest.mark.parametrize("kind", ["suites", "tests"])
    def test_dynamic_options(self, kind, suites_dir):
        """Test the display options of dynamic completions."""
        data = complete(kind, "", cwd=suites_dir).to_dict()
        assert data["options"] == {"sort": False, "positional": False, "completion_algorithm": "prefix"}

    def test_static_kinds_ignore_buffer(self):
        """Test that display & returns don't depend on the command line."""
        assert complete("display", "run-tests --suite [").values() == ["none", "terminal", "table"]
        assert complete("returns", "garbage").values() == ["nothing", "table", "summary"]
        assert complete("returns").options.sort is False

    def test_invalid_filter(self, suites_dir):
        """Test that an invalid pattern gives an empty result."""
        data = complete("suites", "run-tests --suite (", cwd=suites_dir).to_dict()
        assert data == {"completions": [], "options": {"sort": False, "positional": False, "completion_algorithm": "prefix"}}

    def test_missing_directory(self, tmp_path):
        """Test that a missing directory gives an empty result."""
        assert complete("tests", f"run-tests --path {tmp_path / 'nope'}").completions == []

    def test_rejected_path(self):
        """Test that a path the OS refuses gives an empty result."""
        assert complete("suites", "run-tests --path a\x00b").completions == []
        assert complete("tests", "run-tests --path a\x00b").completions == []

    @pytest.mark.parametrize("kind", ["suites", "tests"])
    def test_untraversable_directory(self, kind, suites_dir, restrict):
        """Test that a directory whose entries can't be inspected gives an empty result."""
        restrict(suites_dir, 0o400)
        assert complete(kind, f"run-tests --path {suites_dir}").completions == []

    def test_unknown_kind(self):
        """Test that an unknown kind gives an empty result."""
        assert complete("flavours", "").completions == []


class TestCompgen:
    """Tests for handle_compgen function."""

    def test_content(self):
        """Test generating the script to stdout."""
        success, content = handle_compgen("nu")
        assert success
        assert 'export def "nu-complete nutest suites"' in content

    def test_usage(self):
        """Test missing and unsupported shells."""
        assert handle_compgen("") == (False, "Usage: compgen <nu> [default|path]")
        success, message = handle_compgen("bash")
        assert not success
        assert "Unsupported shell" in message

    def test_relative_path_refused(self):
        """Test that relative paths are refused."""
        success, message = handle_compgen("nu completions.nu")
        assert not success
        assert "Relative paths not supported" in message

    def test_write_file(self, tmp_path):
        """Test writing to an explicit path, creating parents."""
        target = tmp_path / "a" / "b" / "nutest.nu"
        success, message = handle_compgen(f"nu {target}")
        assert success
        assert "Completions written to" in message
        assert "nu-complete nutest tests" in target.read_text()

    def test_write_default(self, tmp_path, monkeypatch):
        """Test writing to the default location."""
        monkeypatch.setenv("HOME", str(tmp_path))
        success, _ = handle_compgen("nu default")
        assert success
        assert Path(get_default_path("nu")).is_file()
        assert get_default_path("nu") == str(tmp_path / DEFAULT_PATHS["nu"].removeprefix("~/"))

    def test_write_failure(self, tmp_path):
        """Test reporting a file that can't be written."""
        blocker = tmp_path / "file"
        blocker.write_text("")
        success, message = handle_compgen(f"nu {blocker}/nutest.nu")
        assert not success
        assert message.startswith("Failed to write completion file")
