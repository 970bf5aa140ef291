"""Utility functions for clausecheck."""

import copy
import json
import logging
from pathlib import Path
from typing import Any

from clausecheck.errors import ParseError

logger = logging.getLogger(__name__)


def parse_json(text: Any, what: str = "input") -> Any:
    """Decode scenario input as JSON.

    Already-decoded values are deep-copied so the caller never shares
    structure with the scenario that supplied them.

    Parameters
    ----------
    text : Any
        JSON document as text, or an already-decoded value
    what : str
        Name of the input, used in error messages

    Returns
    -------
    Any
        Decoded JSON value

    Raises
    ------
    ParseError
        If text is a string that is not valid JSON
    """
    if not isinstance(text, (str, bytes)):
        return copy.deepcopy(text)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Invalid JSON for %s: %s", what, e)
        raise ParseError(f"Invalid JSON in {what}: {e}") from e


def resolve_template_dir(root_dir: str | Path, directory: str | Path = ".") -> Path:
    """Resolve a template directory against the scenario root directory.

    Parameters
    ----------
    root_dir : str | Path
        Root directory of the template suite
    directory : str | Path
        Template directory, absolute or relative to root_dir

    Returns
    -------
    Path
        Absolute template directory
    """
    return (Path(root_dir).expanduser() / directory).resolve()


def format_json(value: Any) -> str:
    """Render a JSON value compactly for log and assertion messages."""
    try:
        return json.dumps(value, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)
