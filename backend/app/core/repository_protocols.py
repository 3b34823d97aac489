"""Boundary Protocols — the per-entity persistence contract handlers depend on.

Invariants:
    - Handlers only touch the datastore through EntityRepository
    - Mutations (save/update/delete) flush but never commit; the handler owns the unit of work
    - update/delete report the affected row count so "0 affected" is observable

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass fakes without inheritance
    - where= as a column->value mapping: every lookup here is an equality match
"""

from typing import Any, Mapping, Protocol, TypeVar
from uuid import UUID

ModelT = TypeVar("ModelT")


class EntityRepository(Protocol[ModelT]):
    """Contract for one entity's persistence — implemented by infrastructure."""
    async def find(self, where: Mapping[str, Any] | None = None) -> list[ModelT]: ...
    async def find_one(self, where: Mapping[str, Any]) -> ModelT | None: ...
    def create(self, **values: Any) -> ModelT: ...
    async def save(self, entity: ModelT) -> ModelT: ...
    async def update(
        self, where: Mapping[str, Any], values: Mapping[str, Any],
    ) -> int: ...
    async def delete(self, entity_id: UUID) -> int: ...
