"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Failures surface as ExternalServiceError subclasses (core/errors.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Async in Protocol: implementations do IO; the core functions that consume
      the results stay synchronous and the services layer awaits around them
"""

from typing import Any, Protocol, Sequence


class FormValueProvider(Protocol):
    """Current field values of the active work item — implemented by shell."""
    async def get_field_values(
        self, field_ids: Sequence[str], include_defaults: bool,
    ) -> dict[str, Any]: ...
    async def get_id(self) -> int: ...


class DocumentStore(Protocol):
    """Key/value document collections — implemented by shell."""
    async def read_document(
        self, collection_name: str, key: str, default_value: dict, cache: bool,
    ) -> dict: ...
    async def add_or_update_document(
        self, collection_name: str, document: dict, cache: bool,
    ) -> dict: ...
