from reuse.db.models.item import Item
from reuse.db.models.user import User

__all__ = ["User", "Item"]
