"""Entity Repositories — SQLAlchemy implementation of EntityRepository.

Invariants:
    - One repository instance wraps one AsyncSession and one model
    - find_one always reloads from the database (populate_existing) so re-fetches
      after update() see the committed row, not a stale identity-map copy
    - Unknown entity names fail fast with ValueError

Design Decisions:
    - get_repository(db, "Name") keyed by entity name: handlers read like
      dataSource.getRepository('Course') without importing each model
    - flush() in save(): assigns defaults (id, timestamps) while leaving commit to the caller
"""

from typing import Any, Generic, Mapping, TypeVar
from uuid import UUID

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base
from app.models import CreditPackage, Skill, User, Coach, Course

ModelT = TypeVar("ModelT", bound=Base)

_ENTITIES: dict[str, type[Base]] = {
    "CreditPackage": CreditPackage,
    "Skill": Skill,
    "User": User,
    "Coach": Coach,
    "Course": Course,
}


class SqlAlchemyRepository(Generic[ModelT]):
    """find/create/save/update/delete over a single mapped model."""

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model

    def _filter(self, query, where: Mapping[str, Any] | None):
        for column, value in (where or {}).items():
            query = query.where(getattr(self.model, column) == value)
        return query

    async def find(self, where: Mapping[str, Any] | None = None) -> list[ModelT]:
        query = self._filter(select(self.model), where)
        if hasattr(self.model, "created_at"):
            query = query.order_by(self.model.created_at)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def find_one(self, where: Mapping[str, Any]) -> ModelT | None:
        query = self._filter(select(self.model), where).execution_options(
            populate_existing=True,
        )
        result = await self.db.execute(query)
        return result.scalars().first()

    def create(self, **values: Any) -> ModelT:
        return self.model(**values)

    async def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def update(
        self, where: Mapping[str, Any], values: Mapping[str, Any],
    ) -> int:
        stmt = self._filter(update(self.model), where).values(**values)
        result = await self.db.execute(stmt)
        return result.rowcount

    async def delete(self, entity_id: UUID) -> int:
        stmt = delete(self.model).where(self.model.id == entity_id)
        result = await self.db.execute(stmt)
        return result.rowcount


def get_repository(db: AsyncSession, entity_name: str) -> SqlAlchemyRepository:
    """Repository for a named entity, bound to the given session."""
    model = _ENTITIES.get(entity_name)
    if model is None:
        raise ValueError(f"Unknown entity: {entity_name}")
    return SqlAlchemyRepository(db, model)
