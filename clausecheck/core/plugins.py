"""Resolve engine and loader factories from import strings."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from typing import Any

from clausecheck.core.interfaces import ClauseLoader, ContractEngine
from clausecheck.errors import PluginError

logger = logging.getLogger(__name__)


def import_object(spec: str) -> Any:
    """Import the object named by a ``module:attribute`` string.

    Parameters
    ----------
    spec : str
        Import string, e.g. ``mypkg.engine:Engine``. The attribute part may
        be dotted.

    Returns
    -------
    Any
        Imported object

    Raises
    ------
    PluginError
        If the string is malformed, or the module or attribute is missing
    """
    module_name, sep, attr_path = spec.partition(":")
    if not sep or not module_name or not attr_path:
        raise PluginError(
            f"Invalid import string {spec!r}: expected 'module:attribute'"
        )

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise PluginError(f"Cannot import module {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise PluginError(f"Module {module_name!r} has no attribute {attr_path!r}") from e

    return obj


def _factory(spec: str, kind: str) -> Callable[[], Any]:
    factory = import_object(spec)
    if not callable(factory):
        raise PluginError(f"{kind.capitalize()} {spec!r} is not callable")
    logger.debug("Resolved %s factory %s", kind, spec)
    return factory


def engine_factory(spec: str) -> Callable[[], ContractEngine]:
    """Return the factory creating contract engines for spec."""
    return _factory(spec, "engine")


def loader_factory(spec: str) -> Callable[[], ClauseLoader]:
    """Return the factory creating clause loaders for spec."""
    return _factory(spec, "loader")
