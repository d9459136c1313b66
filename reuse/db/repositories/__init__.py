# Repository pattern: data access lives here, services never build queries

from reuse.db.repositories.item_repository import ItemRepository
from reuse.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "ItemRepository"]
