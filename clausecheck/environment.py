"""Behave environment hooks installing a fresh scenario runner per scenario.

A suite's ``features/environment.py`` delegates to these hooks::

    from clausecheck.environment import after_scenario, before_all, before_scenario
"""

import logging
from typing import Any

from behave.model import Scenario
from behave.runner import Context

from clausecheck.core.config import ConfigLoader
from clausecheck.core.plugins import engine_factory, loader_factory
from clausecheck.core.runner import ScenarioRunner

logger = logging.getLogger(__name__)


def resolve_settings(userdata: Any) -> dict[str, Any]:
    """Merge the config file with behave userdata.

    Parameters
    ----------
    userdata : Any
        Mapping of behave ``-D`` userdata; ``config`` and ``suite`` select the
        config file and suite, remaining keys override settings

    Returns
    -------
    dict[str, Any]
        Validated settings

    Raises
    ------
    ConfigError
        If the merged settings are invalid
    """
    userdata = dict(userdata or {})
    loader = ConfigLoader()
    config = loader.load_config(userdata.pop("config", None))
    settings = loader.get_suite_config(config, userdata.pop("suite", None), userdata)
    loader.validate_config(settings)
    return settings


class ContractHarness:
    """Scenario-scoped lifecycle of a ``ScenarioRunner``.

    Parameters
    ----------
    context : Context
        Behave context object for the current scenario
    scenario : Scenario
        Behave scenario object
    settings : dict[str, Any]
        Settings resolved by ``resolve_settings``
    """

    def __init__(
        self, context: Context, scenario: Scenario, settings: dict[str, Any]
    ) -> None:
        self.context = context
        self.scenario = scenario
        self.settings = settings
        self.runner: ScenarioRunner | None = None

    def setup(self) -> None:
        """Create the engine, loader and runner and attach the runner to the context."""
        engine = engine_factory(self.settings["engine"])()
        loader = loader_factory(self.settings["loader"])()

        self.runner = ScenarioRunner(
            engine=engine,
            loader=loader,
            root_dir=self.settings["root_dir"],
            current_time=self.settings["current_time"],
        )
        self.context.runner = self.runner
        logger.debug("Runner ready for scenario '%s'", self.scenario.name)

    def cleanup(self) -> None:
        """Drop the runner so nothing leaks into the next scenario."""
        self.runner = None
        self.context.runner = None


def before_all(context: Context) -> None:
    context.clausecheck_settings = resolve_settings(context.config.userdata)
    logging.getLogger("clausecheck").setLevel(
        context.clausecheck_settings["log_level"].upper()
    )


def before_scenario(context: Context, scenario: Scenario) -> None:
    context.harness = ContractHarness(context, scenario, context.clausecheck_settings)
    context.harness.setup()


def after_scenario(context: Context, scenario: Scenario) -> None:
    harness = getattr(context, "harness", None)
    if harness is not None:
        harness.cleanup()
        context.harness = None
