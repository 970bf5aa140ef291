"""CLI entry point for clausecheck."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import fire

from clausecheck.constants import DEBUG_ENV_VAR
from clausecheck.core.config import ConfigLoader
from clausecheck.errors import ClausecheckError, ConfigError
from clausecheck.logging import StreamFormatter, StreamRoutingFilter
from clausecheck.steps import STEP_DEFINITIONS

logger = logging.getLogger(__name__)


def default_behave_main(args: list[str]) -> int:
    """Run behave in-process with args and return its exit status."""
    from behave.__main__ import main as behave_main

    return behave_main(args)


def build_behave_args(
    paths: tuple[str, ...] | list[str],
    userdata: dict[str, str],
    tags: str | None = None,
    verbose: bool = False,
) -> list[str]:
    """Build the behave command line for a run.

    Parameters
    ----------
    paths : tuple[str, ...] | list[str]
        Feature files or directories
    userdata : dict[str, str]
        Settings passed as ``-D key=value``
    tags : str | None
        Tag expression selecting scenarios
    verbose : bool
        Show behave's own logging and skip output capture

    Returns
    -------
    list[str]
        Arguments for behave
    """
    args: list[str] = []

    for key, value in userdata.items():
        args.extend(["-D", f"{key}={value}"])

    if tags:
        args.extend(["--tags", tags])

    if verbose:
        args.extend(["--no-capture", "--no-logcapture"])

    args.extend(paths)
    return args


class ClausecheckCLI:
    """Run contract scenario suites with behave.

    Parameters
    ----------
    behave_main : Callable[[list[str]], int] | None
        Function running behave with a command line (default: in-process
        behave)
    config_loader : ConfigLoader | None
        Configuration loader (default: ConfigLoader())
    """

    def __init__(
        self,
        behave_main: Callable[[list[str]], int] | None = None,
        config_loader: ConfigLoader | None = None,
    ) -> None:
        self._behave_main = behave_main or default_behave_main
        self._config_loader = config_loader or ConfigLoader()

    def _settings(
        self, config: str | None, suite: str | None, overrides: dict[str, Any]
    ) -> dict[str, Any]:
        loaded = self._config_loader.load_config(config)
        settings = self._config_loader.get_suite_config(loaded, suite, overrides)
        self._config_loader.validate_config(settings)
        return settings

    def run(
        self,
        *paths: str,
        suite: str | None = None,
        config: str | None = None,
        root_dir: str | None = None,
        current_time: str | None = None,
        engine: str | None = None,
        loader: str | None = None,
        tags: str | None = None,
        verbose: bool = False,
    ) -> None:
        """Run feature files against the configured contract engine.

        Parameters
        ----------
        *paths : str
            Feature files or directories (default: features)
        suite : str | None
            Named suite from the config file
        config : str | None
            Config file path (default: CLAUSECHECK_CONFIG or clausecheck.yaml)
        root_dir : str | None
            Template root directory override
        current_time : str | None
            Logical "now" override
        engine : str | None
            Engine factory import string override
        loader : str | None
            Loader factory import string override
        tags : str | None
            Behave tag expression
        verbose : bool
            Enable debug logging and disable output capture

        Raises
        ------
        SystemExit
            With behave's exit status when scenarios fail
        """
        settings = self._settings(
            config,
            suite,
            {
                "root_dir": root_dir,
                "current_time": current_time,
                "engine": engine,
                "loader": loader,
                "log_level": "DEBUG" if verbose else None,
            },
        )

        args = build_behave_args(
            paths or ("features",),
            self._config_loader.to_userdata(settings),
            tags=tags,
            verbose=verbose,
        )
        logger.debug("Running behave %s", " ".join(args))

        status = self._behave_main(args)

        if status != 0:
            sys.exit(status)

    def config(self, suite: str | None = None, config: str | None = None) -> dict[str, Any]:
        """Show merged settings for a suite.

        Parameters
        ----------
        suite : str | None
            Named suite from the config file
        config : str | None
            Config file path

        Returns
        -------
        dict[str, Any]
            Merged settings
        """
        loaded = self._config_loader.load_config(config)
        return self._config_loader.get_suite_config(loaded, suite)

    def steps(self) -> list[str]:
        """List the step patterns available to feature files."""
        return [pattern for pattern, _ in STEP_DEFINITIONS]


def handle_error(error: Exception, debug_mode: bool) -> None:
    """Print a clausecheck error and exit.

    Parameters
    ----------
    error : Exception
        The error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    Exception
        The error itself, if debug mode is enabled
    """
    if debug_mode:
        raise error

    if isinstance(error, ConfigError):
        print(f"Configuration error: {error}", file=sys.stderr)
        sys.exit(2)

    print(f"Error: {error}", file=sys.stderr)
    sys.exit(1)


def main() -> None:
    """Entry point for Fire CLI with graceful error handling.

    Fire maps the ClausecheckCLI methods to ``run``, ``config`` and
    ``steps`` commands.
    """
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(StreamFormatter("%(message)s"))
    stdout_handler.addFilter(StreamRoutingFilter("stdout"))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(StreamFormatter("%(message)s"))
    stderr_handler.addFilter(StreamRoutingFilter("stderr"))

    logging.basicConfig(
        level=logging.INFO,
        handlers=[stdout_handler, stderr_handler],
    )

    debug_mode = os.environ.get(DEBUG_ENV_VAR) == "1"

    try:
        fire.Fire(ClausecheckCLI())
    except ClausecheckError as e:
        handle_error(e, debug_mode)
