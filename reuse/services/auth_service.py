"""
Auth service - registration and login.
Tokens are issued by core.security; this module owns the credential rules.
"""

import logging

from reuse.core.errors import ConflictError, InvalidCredentialsError
from reuse.core.security import create_access_token, dummy_verify, hash_password, verify_password
from reuse.db.repositories.user_repository import UserRepository
from reuse.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from reuse.schemas.user import UserPublic

logger = logging.getLogger(__name__)


class AuthService:
    """Register users, verify credentials, hand out bearer tokens."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def register(self, data: RegisterRequest) -> AuthResponse:
        # Fast path; the unique index catches the check-then-insert race
        if await self.user_repo.get_by_email(data.email):
            raise ConflictError()
        user = await self.user_repo.create(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            city=data.city,
            age=data.age,
        )
        logger.info("Registered user id=%s", user.id)
        return AuthResponse(
            token=create_access_token(user.id, user.email),
            user=UserPublic.model_validate(user),
        )

    async def login(self, data: LoginRequest) -> AuthResponse:
        """Same error for unknown email and wrong password."""
        user = await self.user_repo.get_by_email(data.email)
        if user is None:
            dummy_verify()
            logger.info("Failed login (unknown email)")
            raise InvalidCredentialsError()
        if not verify_password(data.password, user.password):
            logger.info("Failed login for user id=%s", user.id)
            raise InvalidCredentialsError()
        return AuthResponse(
            token=create_access_token(user.id, user.email),
            user=UserPublic.model_validate(user),
        )
