"""Scenario runner sequencing contract engine calls."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

from clausecheck.constants import DEFAULT_STATE, INIT_REQUEST, TIMESTAMP_FIELD
from clausecheck.core.compare import assert_includes
from clausecheck.core.fixture import Fixture, check_answer
from clausecheck.core.interfaces import Answer, Clause, ClauseLoader, ContractEngine
from clausecheck.errors import AssertionFailure, EngineError, LoadError
from clausecheck.utils import format_json, parse_json, resolve_template_dir

logger = logging.getLogger(__name__)


def engine_message(error: Exception) -> str:
    """Return the message an engine failure was raised with.

    ``str()`` quotes the message of some exceptions, ``KeyError`` among
    them, so a single string argument is taken as is.
    """
    if len(error.args) == 1 and isinstance(error.args[0], str):
        return error.args[0]
    return str(error)


class ScenarioRunner:
    """Run one scenario against a contract engine.

    The runner owns a fresh ``Fixture`` and exposes one method per scenario
    step. The engine is executed at most once per scenario: the first
    expectation on the answer computes it and later expectations reuse it.

    Parameters
    ----------
    engine : ContractEngine
        Engine receiving init and execute calls
    loader : ClauseLoader
        Loader for templates and clauses
    root_dir : str | Path
        Directory that template paths are resolved against
    current_time : str | None
        Initial logical "now" (default: 1970-01-01T00:00:00Z)
    """

    def __init__(
        self,
        engine: ContractEngine,
        loader: ClauseLoader,
        root_dir: str | Path = ".",
        current_time: str | None = None,
    ) -> None:
        self.engine = engine
        self.loader = loader
        self.root_dir = Path(root_dir)
        self.fixture = Fixture()

        if current_time is not None:
            self.fixture.current_time = current_time

    def load_template(
        self, directory: str | Path = ".", reset_request: bool = True
    ) -> Clause:
        """Load the template in directory and make it the scenario clause.

        The fixture request is reset to the template's default request,
        unless reset_request is false and a request is already set.

        Parameters
        ----------
        directory : str | Path
            Template directory, relative to the root directory
        reset_request : bool
            Replace a request the scenario already set (default: True)

        Returns
        -------
        Clause
            Newly created clause

        Raises
        ------
        LoadError
            If the loader cannot load the template
        """
        template_dir = resolve_template_dir(self.root_dir, directory)
        logger.debug("Loading template from %s", template_dir)

        try:
            template = self.loader.load_from_directory(template_dir)
            clause = self.loader.create_clause(template)
        except LoadError:
            raise
        except Exception as e:
            raise LoadError(f"Failed to load template from {template_dir}: {e}") from e

        self.fixture.clause = clause
        if reset_request or self.fixture.request is None:
            self.fixture.request = copy.deepcopy(template.get_default_request())
        return clause

    def _require_clause(self) -> Clause:
        if self.fixture.clause is None:
            return self.load_template(reset_request=False)
        return self.fixture.clause

    def set_clause(self, text: str) -> None:
        """Parse contract text into the scenario clause.

        Loads the template in the root directory first if no template was
        loaded yet.

        Raises
        ------
        LoadError
            If the template cannot be loaded or the text cannot be parsed
        """
        clause = self._require_clause()

        try:
            clause.parse(text)
        except Exception as e:
            raise LoadError(f"Failed to parse contract text: {e}") from e

    def use_sample_clause(self) -> None:
        """Parse the template's sample text into the scenario clause."""
        clause = self._require_clause()
        self.set_clause(clause.get_template().get_sample_text())

    def set_current_time(self, current_time: str) -> None:
        self.fixture.current_time = current_time

    def set_state(self, state: Any) -> None:
        """Replace the contract state.

        Raises
        ------
        ParseError
            If state is text that is not valid JSON
        """
        self.fixture.state = parse_json(state, "state")

    def set_request(self, request: Any) -> None:
        """Replace the request sent on execution.

        Raises
        ------
        ParseError
            If request is text that is not valid JSON
        """
        self.fixture.request = parse_json(request, "request")

    def use_default_request(self) -> None:
        clause = self._require_clause()
        self.fixture.request = copy.deepcopy(
            clause.get_template().get_default_request()
        )

    def _stamp(self, request: Any) -> Any:
        if isinstance(request, dict) and not request.get(TIMESTAMP_FIELD):
            return {**request, TIMESTAMP_FIELD: self.fixture.current_time}
        return request

    async def initialize_contract(self) -> Answer:
        """Initialize the contract with the initialization request.

        Returns
        -------
        Answer
            Answer of the engine's init call

        Raises
        ------
        EngineError
            If the engine call fails
        AssertionFailure
            If the answer has no state or carries an error
        """
        clause = self._require_clause()
        request = self._stamp(copy.deepcopy(INIT_REQUEST))
        logger.debug(
            "Initializing contract with %s",
            format_json(request),
            extra={"operation": "init"},
        )

        try:
            answer = await self.engine.init(clause, request)
        except Exception as e:
            raise EngineError(engine_message(e)) from e

        check_answer(answer, "state")
        return answer

    async def _execute(self) -> Answer:
        clause = self._require_clause()
        request = self._stamp(self.fixture.request)
        logger.debug(
            "Executing request %s", format_json(request), extra={"operation": "execute"}
        )

        try:
            return await self.engine.execute(clause, request, self.fixture.state)
        except Exception as e:
            raise EngineError(engine_message(e)) from e

    async def send_request(self) -> Answer:
        """Execute the request, once per scenario.

        Returns
        -------
        Answer
            The answer of the first execution in this scenario

        Raises
        ------
        EngineError
            If the engine call fails
        """
        if self.fixture.answer is None:
            self.fixture.answer = await self._execute()
        else:
            logger.debug("Reusing cached answer", extra={"operation": "execute"})
        return self.fixture.answer

    async def _expect_field(self, field_name: str, fragment: Any) -> None:
        expected = parse_json(fragment, f"expected {field_name}")
        answer = await self.send_request()
        assert_includes(expected, check_answer(answer, field_name), label=field_name)

    async def expect_response(self, fragment: Any) -> None:
        await self._expect_field("response", fragment)

    async def expect_state(self, fragment: Any) -> None:
        await self._expect_field("state", fragment)

    async def expect_emit(self, fragment: Any) -> None:
        await self._expect_field("emit", fragment)

    async def expect_initial_state(self, fragment: Any) -> None:
        expected = parse_json(fragment, "expected state")
        answer = await self.initialize_contract()
        assert_includes(expected, answer["state"], label="state")

    async def expect_default_initial_state(self) -> None:
        await self.expect_initial_state(DEFAULT_STATE)

    def expect_contract_data(self, fragment: Any) -> None:
        expected = parse_json(fragment, "expected contract data")
        assert_includes(expected, self._require_clause().get_data(), label="data")

    async def expect_rejection(self, message: str) -> None:
        """Assert that executing the request fails with message.

        The request is always executed afresh; a cached answer is neither
        used nor replaced.

        Raises
        ------
        AssertionFailure
            If execution succeeds or fails with a different message
        """
        try:
            answer = await self._execute()
        except EngineError as e:
            if e.message != message:
                raise AssertionFailure(
                    f"Expected rejection with {message!r}, got {e.message!r}",
                    expected=message,
                    actual=e.message,
                ) from e
            logger.debug("Request rejected as expected: %s", e.message)
            return

        raise AssertionFailure(
            f"Expected rejection with {message!r}, but the request succeeded",
            expected=message,
            actual=answer,
        )
