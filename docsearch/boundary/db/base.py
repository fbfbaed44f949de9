"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and a reusable creation timestamp.

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    pass


class CreatedAtMixin:
    """
    Mixin providing an insertion timestamp.

    Rows are append-only, so there is no updated_at. The default is applied
    by PostgreSQL.

    Attributes:
        created_at: Row creation timestamp (timezone-aware, immutable)
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
