"""
Auth endpoints - registration and login.
"""

from fastapi import APIRouter, status

from reuse.db.repositories.user_repository import UserRepository
from reuse.db.session import DbSession
from reuse.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from reuse.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(session: DbSession, data: RegisterRequest):
    """Create a user and return a token with the public projection."""
    return await AuthService(UserRepository(session)).register(data)


@router.post("/login", response_model=AuthResponse)
async def login(session: DbSession, data: LoginRequest):
    """Check credentials and return a fresh token."""
    return await AuthService(UserRepository(session)).login(data)
