"""Command line interface for clausecheck."""

from __future__ import annotations

from clausecheck.cli.main import ClausecheckCLI, build_behave_args, main

__all__ = ["ClausecheckCLI", "build_behave_args", "main"]
