"""Shared constants for nutest completions.

File naming and marker spellings are shared with the way suites are written,
so they must not change without the test runner changing too.
"""

__all__ = [
    "DEFAULT_PATH",
    "DEFAULT_SUITE_FILTER",
    "DEFAULT_TEST_FILTER",
    "DISPLAY_OPTIONS",
    "HOOK_MARKERS",
    "IGNORE_MARKER",
    "PATH_FLAG",
    "RETURNS_OPTIONS",
    "RUNNER_COMMAND",
    "SUITE_FILE_EXTENSION",
    "SUITE_FILE_PREFIX",
    "SUITE_FLAG",
    "SUPPORTED_SHELLS",
    "TEST_FLAG",
    "TEST_MARKER",
]

# Sub-command whose arguments are completed
RUNNER_COMMAND = "run-tests"

# Flags read from the command line
SUITE_FLAG = "--suite"
TEST_FLAG = "--test"
PATH_FLAG = "--path"

# Values used when a flag is absent
DEFAULT_SUITE_FILTER = ".*"
DEFAULT_TEST_FILTER = ".*"
DEFAULT_PATH = "."

# Suite files are named test_<identifier>.nu
SUITE_FILE_PREFIX = "test_"
SUITE_FILE_EXTENSION = "nu"

# Markers found on the line right above a declaration
TEST_MARKER = "#[test]"
IGNORE_MARKER = "#[ignore]"
HOOK_MARKERS = ("#[before-all]", "#[before-each]", "#[after-each]", "#[after-all]")

# (value, description) pairs, in display order
DISPLAY_OPTIONS = (
    ("none", "Display no results; useful for 'returns' or CI"),
    ("terminal", "Output test results as they complete as text (default)"),
    ("table", "A table listing all test results on completion"),
)
RETURNS_OPTIONS = (
    ("nothing", "Returns no results (default)"),
    ("table", "Returns a table listing all test results"),
    ("summary", "Returns a summary of the test results"),
)

# Shells for which an integration snippet can be generated
SUPPORTED_SHELLS = ("nu",)
