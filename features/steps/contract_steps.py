"""Contract step vocabulary for the counter features."""

from clausecheck.steps import register_steps

register_steps()
