"""
Base Model
==========

Provides common functionality for all database models.
"""

from datetime import datetime
from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class CreatedAtMixin:
    """
    Mixin that adds a backend-assigned ``time_created`` column.

    There is no ``onupdate``: creation time never changes after insert.
    """

    time_created: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False
    )

