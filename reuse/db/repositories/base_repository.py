"""
Base repository - generic data access shared by users and items.
Repositories flush but never commit; the request-scoped session owns the transaction.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from reuse.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific queries."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> ModelType | None:
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity and load server-side defaults (id, created_at)."""
        self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def update(self, entity: ModelType, values: dict[str, Any]) -> ModelType:
        """Apply only the given attributes (partial update)."""
        for field, value in values.items():
            setattr(entity, field, value)
        await self.session.flush()
        return entity
