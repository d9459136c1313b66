"""
Item endpoints - public listing, authenticated create, owner-only update.
Thin controllers; ItemService holds the rules.
"""

from typing import Any

from fastapi import APIRouter, Body, status

from reuse.core.dependencies import CurrentIdentity
from reuse.db.repositories.item_repository import ItemRepository
from reuse.db.session import DbSession
from reuse.schemas.item import ItemCreate, ItemResponse, ItemWithOwnerResponse
from reuse.services.item_service import ItemService

router = APIRouter()


def _get_item_service(session: DbSession) -> ItemService:
    return ItemService(ItemRepository(session))


@router.get("", response_model=list[ItemWithOwnerResponse])
async def list_items(session: DbSession):
    """All items, newest first, with owner id and name."""
    return await _get_item_service(session).list_items()


@router.post("", response_model=ItemResponse, status_code=status.HTTP_201_CREATED)
async def create_item(session: DbSession, identity: CurrentIdentity, data: ItemCreate):
    """Create item owned by the caller. Any owner field in the body is ignored."""
    return await _get_item_service(session).create(data, identity)


@router.put("/{item_id}", response_model=ItemResponse)
async def update_item(
    session: DbSession, identity: CurrentIdentity, item_id: int, payload: Any = Body(None)
):
    # Body is validated inside the service, after the ownership check
    return await _get_item_service(session).update(item_id, payload, identity)
