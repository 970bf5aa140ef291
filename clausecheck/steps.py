"""Step vocabulary binding scenario text to ``ScenarioRunner`` operations.

Feature suites enable the vocabulary from one of their step modules::

    from clausecheck.steps import register_steps

    register_steps()

Steps expecting JSON or contract text read it from the step's docstring.
"""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from behave import step
from behave.runner import Context

from clausecheck.core.runner import ScenarioRunner

logger = logging.getLogger(__name__)


def get_runner(context: Context) -> ScenarioRunner:
    """Return the scenario runner installed by the environment hooks.

    Raises
    ------
    RuntimeError
        If no runner is installed on the context
    """
    runner = getattr(context, "runner", None)
    if runner is None:
        raise RuntimeError(
            "No scenario runner on the behave context; "
            "call clausecheck.environment hooks from features/environment.py"
        )
    return runner


def run_async(coro: Coroutine[Any, Any, Any]) -> Any:
    """Run a runner coroutine to completion from a synchronous step."""
    return asyncio.run(coro)


def step_template(context: Context, directory: str) -> None:
    get_runner(context).load_template(directory)


def step_current_time(context: Context, current_time: str) -> None:
    get_runner(context).set_current_time(current_time)


def step_contract_says(context: Context) -> None:
    get_runner(context).set_clause(context.text)


def step_default_contract(context: Context) -> None:
    get_runner(context).use_sample_clause()


def step_state(context: Context) -> None:
    get_runner(context).set_state(context.text)


def step_request(context: Context) -> None:
    get_runner(context).set_request(context.text)


def step_default_request(context: Context) -> None:
    get_runner(context).use_default_request()


def step_initial_state(context: Context) -> None:
    run_async(get_runner(context).expect_initial_state(context.text))


def step_default_initial_state(context: Context) -> None:
    run_async(get_runner(context).expect_default_initial_state())


def step_contract_data(context: Context) -> None:
    get_runner(context).expect_contract_data(context.text)


def step_response(context: Context) -> None:
    run_async(get_runner(context).expect_response(context.text))


def step_new_state(context: Context) -> None:
    run_async(get_runner(context).expect_state(context.text))


def step_emit(context: Context) -> None:
    run_async(get_runner(context).expect_emit(context.text))


def step_rejection(context: Context, message: str) -> None:
    run_async(get_runner(context).expect_rejection(message))


STEP_DEFINITIONS: list[tuple[str, Callable[..., None]]] = [
    ('the template in "{directory}"', step_template),
    ('the current time is "{current_time}"', step_current_time),
    ("that the contract says", step_contract_says),
    ("the default contract", step_default_contract),
    ("the default sample contract", step_default_contract),
    ("the state", step_state),
    ("it is in the state", step_state),
    ("it receives the request", step_request),
    ("it receives the default request", step_default_request),
    ("the initial state should be", step_initial_state),
    ("the initial state of the contract should be", step_initial_state),
    ("the initial state should be the default state", step_default_initial_state),
    (
        "the initial state of the contract should be the default state",
        step_default_initial_state,
    ),
    ("the contract data should be", step_contract_data),
    ("it should respond with", step_response),
    ("the new state should be", step_new_state),
    ("the new state of the contract should be", step_new_state),
    ("the following obligations should have been emitted", step_emit),
    ("the following obligations should have also been emitted", step_emit),
    ('it should reject the request with the error "{message}"', step_rejection),
]
"""Step patterns, in behave's parse syntax, and the handlers bound to them."""


def register_steps(decorator: Callable[[str], Callable] = step) -> None:
    """Register every step definition with behave.

    Must run once per behave process, from a module under ``features/steps``.

    Parameters
    ----------
    decorator : Callable[[str], Callable]
        Step decorator factory (default: behave's type-agnostic ``step``)
    """
    for pattern, handler in STEP_DEFINITIONS:
        decorator(pattern)(handler)
    logger.debug("Registered %d clausecheck steps", len(STEP_DEFINITIONS))
