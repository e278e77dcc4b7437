"""
Page table.

A page is a uniquely named content unit. ``page_name`` matches the name of
the content file that renders it and is never reassigned.
"""

from typing import List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cms.core.constants import NAME_LENGTH, PAGES_TABLE, TITLE_LENGTH, URL_LENGTH
from cms.models.base import Base, CreatedAtMixin


class PageEntity(CreatedAtMixin, Base):
    """
    Row of the ``pages`` table.

    Attributes:
        page_name: Primary key, matches the content file name
        page_url: Routing path the page is served on (not unique)
        page_title: Display title
        time_created: Set by the backend on insert (from CreatedAtMixin)
    """

    __tablename__ = PAGES_TABLE

    page_name: Mapped[str] = mapped_column(
        String(NAME_LENGTH),
        primary_key=True,
        comment="Matches the content file name"
    )

    page_url: Mapped[str] = mapped_column(
        String(URL_LENGTH),
        nullable=False,
        comment="Path the router matches on"
    )

    page_title: Mapped[str] = mapped_column(
        String(TITLE_LENGTH),
        nullable=False
    )

    modules: Mapped[List["ModuleEntity"]] = relationship(
        back_populates="page",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        {'comment': 'Content pages'},
    )

    def __repr__(self) -> str:
        return f"<PageEntity(page_name='{self.page_name}', page_url='{self.page_url}')>"
