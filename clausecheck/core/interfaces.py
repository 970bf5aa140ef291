"""Protocols for the collaborators a scenario runner drives."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

Answer = dict[str, Any]


@runtime_checkable
class Template(Protocol):
    """Contract template loaded from a directory."""

    def get_default_request(self) -> Any:
        """Return the sample request shipped with the template."""
        ...

    def get_sample_text(self) -> str:
        """Return the sample contract text shipped with the template."""
        ...


@runtime_checkable
class Clause(Protocol):
    """Clause instantiated from a template."""

    def parse(self, text: str) -> None:
        """Parse contract text and bind its data to the clause."""
        ...

    def get_data(self) -> Any:
        """Return the data bound by the last parse."""
        ...

    def get_template(self) -> Template:
        """Return the template the clause was created from."""
        ...


@runtime_checkable
class ClauseLoader(Protocol):
    """Loads templates from disk and creates clauses from them."""

    def load_from_directory(self, path: Path) -> Template:
        """Load the template stored in path."""
        ...

    def create_clause(self, template: Template) -> Clause:
        """Create an unparsed clause from template."""
        ...


@runtime_checkable
class ContractEngine(Protocol):
    """Asynchronous contract execution engine."""

    async def init(self, clause: Clause, request: Any) -> Answer:
        """Initialize the contract and return its initial answer."""
        ...

    async def execute(self, clause: Clause, request: Any, state: Any) -> Answer:
        """Send request to the contract in state and return the answer."""
        ...
