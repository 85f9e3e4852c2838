"""
SQLAlchemy declarative base and metadata.
Challenge: Single place for table definitions; tests build the schema from it.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass
