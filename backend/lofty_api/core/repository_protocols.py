"""Boundary Protocols: contracts between services and storage.

Invariants:
    - Services NEVER import a concrete store: dependency arrows point inward only
    - Only storage assigns ids and timestamps
    - create() raises DuplicateRecordError on a unique-field collision;
      delete_by_id() reports absence as False, not as an exception

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: services await storage so a networked store can replace
      the in-memory one without touching service code
"""

from typing import Any, Protocol

from lofty_api.core.domain_types import RecordId, User, View


class ViewRepository(Protocol):
    """Contract for lofty view persistence."""
    async def list_all(self) -> list[View]: ...
    async def find_by_id(self, record_id: RecordId) -> View | None: ...
    async def create(self, fields: dict[str, Any]) -> View: ...
    async def delete_by_id(self, record_id: RecordId) -> bool: ...


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def list_all(self) -> list[User]: ...
    async def find_by_id(self, record_id: RecordId) -> User | None: ...
    async def create(self, fields: dict[str, Any]) -> User: ...
    async def delete_by_id(self, record_id: RecordId) -> bool: ...
