#!/usr/bin/env python3
"""Allow running clausecheck as ``python -m clausecheck``."""

from clausecheck.cli.main import main

if __name__ == "__main__":
    main()
