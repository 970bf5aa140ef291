"""Exceptions raised by clausecheck."""

from typing import Any


class ClausecheckError(Exception):
    """Base class for clausecheck errors."""

    pass


class ParseError(ClausecheckError, ValueError):
    """Raised when scenario input is not valid JSON."""

    pass


class LoadError(ClausecheckError):
    """Raised when a template or clause text cannot be loaded."""

    pass


class PluginError(ClausecheckError):
    """Raised when an engine or loader import string cannot be resolved."""

    pass


class ConfigError(ClausecheckError, ValueError):
    """Raised when configuration is invalid."""

    pass


class EngineError(ClausecheckError):
    """Raised when the contract engine fails an init or execute call.

    Parameters
    ----------
    message : str
        Message reported by the engine
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AssertionFailure(AssertionError):
    """Raised when an engine answer does not match the expected outcome.

    Subclasses ``AssertionError`` so behave reports it as a failed step
    rather than an error.

    Parameters
    ----------
    message : str
        Description of the mismatch
    expected : Any
        Expected fragment
    actual : Any
        Actual value the fragment was compared against
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
