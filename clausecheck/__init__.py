"""clausecheck - scenario harness for contract engines."""

__version__ = "0.1.0"
