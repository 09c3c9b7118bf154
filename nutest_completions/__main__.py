"""Run nutest-complete as `python -m nutest_completions`."""

import sys

from .command import main

sys.exit(main())
