"""Per-scenario fixture state."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from clausecheck.constants import DEFAULT_CURRENT_TIME, DEFAULT_STATE, ERROR_FIELD
from clausecheck.core.interfaces import Answer, Clause
from clausecheck.errors import AssertionFailure


def _default_state() -> Any:
    return copy.deepcopy(DEFAULT_STATE)


@dataclass
class Fixture:
    """Mutable state of one scenario.

    A fixture is created when a scenario starts, mutated by its steps and
    dropped when it ends. It is never shared between scenarios.

    Attributes
    ----------
    current_time : str
        Logical "now" used to stamp requests without a timestamp
    state : Any
        Contract state sent with each request
    request : Any
        Request sent on execution
    clause : Clause | None
        Clause the scenario runs against
    answer : Answer | None
        Answer of the scenario's execution, once computed
    """

    current_time: str = DEFAULT_CURRENT_TIME
    state: Any = field(default_factory=_default_state)
    request: Any = None
    clause: Clause | None = None
    answer: Answer | None = None


def check_answer(answer: Any, field_name: str) -> Any:
    """Check that an answer carries field_name and no error.

    Parameters
    ----------
    answer : Any
        Answer returned by the engine
    field_name : str
        Field the answer must carry

    Returns
    -------
    Any
        Value of the field

    Raises
    ------
    AssertionFailure
        If the answer is not a mapping, lacks the field or carries an error
    """
    if not isinstance(answer, dict):
        raise AssertionFailure(
            f"Expected the engine answer to be an object, got {type(answer).__name__}",
            actual=answer,
        )

    if ERROR_FIELD in answer:
        raise AssertionFailure(
            f"Expected no error in the engine answer, got {answer[ERROR_FIELD]!r}",
            actual=answer,
        )

    if field_name not in answer:
        raise AssertionFailure(
            f"Expected the engine answer to have a {field_name!r} field, "
            f"got fields {sorted(answer)}",
            actual=answer,
        )

    return answer[field_name]
