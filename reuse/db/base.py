"""
SQLAlchemy declarative base and metadata.
Single place for table definitions; Alembic reads Base.metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass
