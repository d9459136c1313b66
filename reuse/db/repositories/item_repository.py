"""
Item repository - item data access.
Owner is eager-loaded for listings to avoid N+1 queries.
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from reuse.db.models.item import Item
from reuse.db.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Item queries. No delete, pagination or filtering at this layer."""

    def __init__(self, session):
        super().__init__(session, Item)

    async def list_with_owner(self) -> list[Item]:
        """All items, newest first, owner loaded in one extra query."""
        result = await self.session.execute(
            select(Item)
            .options(selectinload(Item.owner))
            .order_by(Item.created_at.desc(), Item.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, values: dict, owner_id: int) -> Item:
        return await self.add(Item(**values, owner_id=owner_id))
