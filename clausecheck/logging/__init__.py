"""Logging formatters and filters for clausecheck output."""

from clausecheck.logging.filters import StreamRoutingFilter
from clausecheck.logging.formatters import StreamFormatter

__all__ = ["StreamFormatter", "StreamRoutingFilter"]
