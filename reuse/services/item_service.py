"""
Item service - listing, creation and owner-only updates.
Update order is fixed: existence (404), ownership (403), then payload (400).
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from reuse.core.errors import ForbiddenError, NotFoundError, ValidationError, field_errors
from reuse.db.repositories.item_repository import ItemRepository
from reuse.schemas.auth import Identity
from reuse.schemas.item import ItemCreate, ItemResponse, ItemUpdate, ItemWithOwnerResponse

logger = logging.getLogger(__name__)


class ItemService:
    """Handles item use cases on top of the repository."""

    def __init__(self, item_repo: ItemRepository):
        self.item_repo = item_repo

    async def list_items(self) -> list[ItemWithOwnerResponse]:
        items = await self.item_repo.list_with_owner()
        return [ItemWithOwnerResponse.model_validate(i) for i in items]

    async def create(self, data: ItemCreate, identity: Identity) -> ItemResponse:
        values = data.model_dump(include={"title", "type", "description", "image_url"})
        item = await self.item_repo.create(values, owner_id=identity.id)
        logger.info("User id=%s created item id=%s", identity.id, item.id)
        return ItemResponse.model_validate(item)

    async def update(self, item_id: int, payload: dict | None, identity: Identity) -> ItemResponse:
        item = await self.item_repo.get_by_id(item_id)
        if item is None:
            raise NotFoundError("Item não encontrado")
        if item.owner_id != identity.id:
            logger.info("User id=%s denied update of item id=%s", identity.id, item_id)
            raise ForbiddenError()
        if payload is None:
            payload = {}
        try:
            data = ItemUpdate.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(*field_errors(exc.errors())) from exc
        item = await self.item_repo.update(item, data.model_dump(exclude_unset=True))
        return ItemResponse.model_validate(item)
