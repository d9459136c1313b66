"""
Profile endpoints - the caller's own user record (/me).
"""

from typing import Any

from fastapi import APIRouter, Body

from reuse.core.dependencies import CurrentIdentity
from reuse.db.repositories.user_repository import UserRepository
from reuse.db.session import DbSession
from reuse.schemas.user import UserProfile
from reuse.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=UserProfile)
async def get_me(session: DbSession, identity: CurrentIdentity):
    return await UserService(UserRepository(session)).get_profile(identity)


@router.patch("", response_model=UserProfile)
async def update_me(session: DbSession, identity: CurrentIdentity, payload: Any = Body(None)):
    """Partial profile update (name, city, age)."""
    return await UserService(UserRepository(session)).update_profile(payload, identity)
