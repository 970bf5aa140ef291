"""Core clausecheck functionality."""

from __future__ import annotations

from clausecheck.core.compare import assert_includes, includes
from clausecheck.core.fixture import Fixture
from clausecheck.core.interfaces import Clause, ClauseLoader, ContractEngine, Template
from clausecheck.core.runner import ScenarioRunner

__all__ = [
    "Clause",
    "ClauseLoader",
    "ContractEngine",
    "Fixture",
    "ScenarioRunner",
    "Template",
    "assert_includes",
    "includes",
]
