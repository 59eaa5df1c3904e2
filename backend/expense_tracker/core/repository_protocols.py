"""Boundary Protocols - contracts between services and the storage shell.

Invariants:
    - Services depend on these Protocols, never on pymongo types directly
    - All IO methods are async; filters and patches are plain dicts
    - find_one returns None on no match; services decide what "missing" means

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - One generic Repository[T] instead of one interface per entity
"""

from typing import Protocol, TypeVar

from bson import ObjectId

from expense_tracker.core.domain_types import DateWindow

T_co = TypeVar("T_co", covariant=True)


class Repository(Protocol[T_co]):
    """Contract for collection-scoped CRUD - implemented by repositories/base.py."""
    async def insert(self, document: dict) -> ObjectId: ...
    async def find_many(
        self, filter: dict, sort: list[tuple[str, int]] | None = None,
    ) -> list[T_co]: ...
    async def find_one(self, filter: dict) -> T_co | None: ...
    async def update_one(self, patch: dict, filter: dict) -> int: ...
    async def delete_one(self, filter: dict) -> int: ...


class ProjectDetailsReader(Protocol[T_co]):
    """Contract for the joined project details view."""
    async def lookup(
        self, project_id: ObjectId, window: DateWindow, active_only: bool,
    ) -> T_co: ...
