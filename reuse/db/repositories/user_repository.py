"""
User repository - credential store.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from reuse.core.errors import ConflictError
from reuse.db.models.user import User
from reuse.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """User queries. Email is the login key and is unique."""

    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        city: str | None = None,
        age: int | None = None,
    ) -> User:
        """Insert a user. A concurrent insert of the same email surfaces as ConflictError."""
        user = User(name=name, email=email, password=password_hash, city=city, age=age)
        try:
            return await self.add(user)
        except IntegrityError as exc:
            raise ConflictError() from exc
