"""Behave environment configuration for clausecheck features."""

import sys
from pathlib import Path

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from clausecheck.environment import (  # noqa: E402, F401
    after_scenario,
    before_all,
    before_scenario,
)
