"""Deep-subset comparison of expected fragments against engine output.

An expected mapping is included in an actual mapping when every key of the
expected mapping is present in the actual one with a deeply equal value.
Keys present only in the actual mapping are ignored. An expected array is
compared index by index against the actual array, so trailing actual
elements are ignored as well.

The inclusion is shallow: values under a matching key must be equal, not
merely included.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from clausecheck.errors import AssertionFailure
from clausecheck.utils import format_json


def json_equal(left: Any, right: Any) -> bool:
    """Compare two JSON values for deep equality.

    Unlike ``==``, booleans never equal numbers. Integers and floats with the
    same value are equal, as JSON does not distinguish them.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right

    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right

    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(json_equal(left[key], right[key]) for key in left)

    if isinstance(left, (list, tuple)) and isinstance(right, (list, tuple)):
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    if type(left) is not type(right):
        return False

    return left == right


def _item_mismatch(expected: Any, actual: Any, path: str) -> str | None:
    if isinstance(expected, Mapping):
        if not isinstance(actual, Mapping):
            return f"{path}: expected an object, got {format_json(actual)}"

        for key, value in expected.items():
            if key not in actual:
                return f"{path}: missing key {key!r}"
            if not json_equal(value, actual[key]):
                return (
                    f"{path}.{key}: expected {format_json(value)}, "
                    f"got {format_json(actual[key])}"
                )
        return None

    if not json_equal(expected, actual):
        return f"{path}: expected {format_json(expected)}, got {format_json(actual)}"

    return None


def find_mismatch(expected: Any, actual: Any, path: str = "$") -> str | None:
    """Describe the first place where expected is not included in actual.

    Parameters
    ----------
    expected : Any
        Expected fragment
    actual : Any
        Actual value
    path : str
        Path prefix used in the description

    Returns
    -------
    str | None
        Description of the first mismatch, or None if expected is included
    """
    if isinstance(expected, list):
        if not isinstance(actual, list):
            return f"{path}: expected an array, got {format_json(actual)}"

        for index, item in enumerate(expected):
            if index >= len(actual):
                return f"{path}[{index}]: missing, actual has {len(actual)} element(s)"

            mismatch = _item_mismatch(item, actual[index], f"{path}[{index}]")
            if mismatch is not None:
                return mismatch
        return None

    return _item_mismatch(expected, actual, path)


def includes(expected: Any, actual: Any) -> bool:
    """Return whether expected is included in actual."""
    return find_mismatch(expected, actual) is None


def assert_includes(expected: Any, actual: Any, label: str = "value") -> None:
    """Assert that expected is included in actual.

    Parameters
    ----------
    expected : Any
        Expected fragment
    actual : Any
        Actual value
    label : str
        Name of the compared value, used in the failure message

    Raises
    ------
    AssertionFailure
        If expected is not included in actual
    """
    mismatch = find_mismatch(expected, actual, path=label)
    if mismatch is not None:
        raise AssertionFailure(
            f"Expected {label} to include {format_json(expected)}: {mismatch}",
            expected=expected,
            actual=actual,
        )
