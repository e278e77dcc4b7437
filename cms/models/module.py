"""
Module table.

A module is a content fragment that belongs to exactly one page through
``modules.page_name``.
"""

from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cms.core.constants import MODULES_TABLE, NAME_LENGTH, PAGES_TABLE, TITLE_LENGTH
from cms.models.base import Base


class ModuleEntity(Base):
    """
    Row of the ``modules`` table.

    Attributes:
        module_id: Auto-incrementing primary key
        page_name: Owning page (foreign key to pages.page_name)
        title: Name the module is addressed by inside its page
        content: Module body
    """

    __tablename__ = MODULES_TABLE

    module_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True
    )

    page_name: Mapped[str] = mapped_column(
        String(NAME_LENGTH),
        ForeignKey(f"{PAGES_TABLE}.page_name", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title: Mapped[str] = mapped_column(
        String(TITLE_LENGTH),
        nullable=False
    )

    content: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )

    page: Mapped["PageEntity"] = relationship(back_populates="modules")

    __table_args__ = (
        Index('ix_modules_page_title', 'page_name', 'title'),
        {'comment': 'Content fragments attached to pages'}
    )

    def __repr__(self) -> str:
        return (
            f"<ModuleEntity(module_id={self.module_id}, "
            f"page_name='{self.page_name}', title='{self.title}')>"
        )
