"""Test fake implementations for dependency injection testing."""

from tests.fakes.fake_engine import FakeClause, FakeClauseLoader, FakeEngine, FakeTemplate

__all__ = ["FakeClause", "FakeClauseLoader", "FakeEngine", "FakeTemplate"]
