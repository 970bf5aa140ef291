"""Pytest configuration and fixtures for clausecheck unit tests."""

import json
import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

tests_root = Path(__file__).parent.parent
if str(tests_root.parent) not in sys.path:
    sys.path.insert(0, str(tests_root.parent))

from clausecheck.core.runner import ScenarioRunner  # noqa: E402
from tests.fakes.fake_engine import (  # noqa: E402
    INCREMENT_CLASS,
    FakeClauseLoader,
    FakeEngine,
)


@pytest.fixture(autouse=True)
def cleanup_config_env() -> Generator[None, None, None]:
    """Ensure CLAUSECHECK_CONFIG does not leak into unit tests.

    Yields
    ------
    None
        Control back to test after ensuring clean environment
    """
    original = os.environ.pop("CLAUSECHECK_CONFIG", None)

    yield

    if original is not None:
        os.environ["CLAUSECHECK_CONFIG"] = original
    else:
        os.environ.pop("CLAUSECHECK_CONFIG", None)


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Write a counter template into a temporary directory.

    Returns
    -------
    Path
        Directory containing template.json
    """
    directory = tmp_path / "counter"
    directory.mkdir()
    (directory / "template.json").write_text(
        json.dumps(
            {
                "request": {"$class": INCREMENT_CLASS, "by": 2},
                "sample": "penalty: 5\nlimit: 10\n",
            }
        )
    )
    return directory


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def runner(engine: FakeEngine, template_dir: Path) -> ScenarioRunner:
    """Create a runner rooted at the counter template."""
    return ScenarioRunner(engine=engine, loader=FakeClauseLoader(), root_dir=template_dir)
