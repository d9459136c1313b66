"""
User service - the authenticated caller's own profile.
"""

from pydantic import ValidationError as PydanticValidationError

from reuse.core.errors import NotFoundError, ValidationError, field_errors
from reuse.db.models.user import User
from reuse.db.repositories.user_repository import UserRepository
from reuse.schemas.auth import Identity
from reuse.schemas.user import ProfileUpdate, UserProfile


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def _load(self, identity: Identity) -> User:
        # Token may outlive its user; identity itself is trusted as-is
        user = await self.user_repo.get_by_id(identity.id)
        if user is None:
            raise NotFoundError("Usuário não encontrado")
        return user

    async def get_profile(self, identity: Identity) -> UserProfile:
        return UserProfile.model_validate(await self._load(identity))

    async def update_profile(self, payload: dict | None, identity: Identity) -> UserProfile:
        """Partial update of name/city/age. avatarUrl is validated, then dropped."""
        if payload is None:
            payload = {}
        try:
            data = ProfileUpdate.model_validate(payload)
        except PydanticValidationError as exc:
            raise ValidationError(*field_errors(exc.errors())) from exc
        user = await self._load(identity)
        values = data.model_dump(exclude_unset=True, include={"name", "city", "age"})
        user = await self.user_repo.update(user, values)
        return UserProfile.model_validate(user)
