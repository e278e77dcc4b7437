"""
Page record model.

Implements ``Model[Page, MutPage, str]`` and ``Joinable[Page, Module, str]``
over the ``pages`` table. Each statement selects only the columns it
needs instead of whole rows.
"""

import logging
from typing import Any, List, Tuple

from sqlalchemy import delete, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.sql.elements import ColumnElement

from cms.models import PageEntity
from cms.repositories.base import (
    fetch_one_or_raise,
    insert_or_ignore,
    rows_affected,
    to_record,
)
from cms.repositories.modules import ModuleModel, modules
from cms.schemas import Module, MutPage, Page

logger = logging.getLogger(__name__)

pages = PageEntity.__table__


class PageModel:
    """
    CRUD and join operations for pages.

    Example:
        with connection_scope(pool) as db:
            PageModel().create(MutPage(page_name="home", page_url="/", page_title="Home"), db)
            page = PageModel().read_one("home", db)
    """

    entity = "Page"

    @staticmethod
    def columns() -> Tuple[ColumnElement[Any], ...]:
        return (
            pages.c.page_name,
            pages.c.page_url,
            pages.c.page_title,
            pages.c.time_created,
        )

    def create(self, new: MutPage, db: Connection) -> int:
        """
        Insert a page unless one with the same ``page_name`` exists.

        Returns:
            1 if inserted, 0 if the name was already taken
        """
        stmt = insert_or_ignore(pages, db).values(**new.model_dump())
        count = rows_affected(db.execute(stmt))
        logger.debug("Inserted %d page(s) named %r", count, new.page_name)
        return count

    def read_one(self, id: str, db: Connection) -> Page:
        """
        Fetch a page by name.

        Raises:
            RecordNotFoundError: No page has that name
        """
        stmt = select(*self.columns()).where(pages.c.page_name == id)
        row = fetch_one_or_raise(db.execute(stmt), self.entity, id)
        return to_record(Page, self.columns(), row)

    def read_all(self, db: Connection) -> List[Page]:
        rows = db.execute(select(*self.columns()))
        return [to_record(Page, self.columns(), row) for row in rows]

    def update(self, id: str, new: MutPage, db: Connection) -> int:
        """
        Overwrite ``page_name``, ``page_url`` and ``page_title``.

        Returns:
            Rows changed; 0 when no page has that name

        Raises:
            ValueError: ``new.page_name`` differs from ``id`` and that page
                exists (page names are never reassigned)
        """
        if new.page_name != id:
            existing = db.execute(
                select(pages.c.page_name).where(pages.c.page_name == id)
            ).first()
            if existing is None:
                return 0
            raise ValueError(f"Cannot rename page {id!r} to {new.page_name!r}")

        stmt = update(pages).where(pages.c.page_name == id).values(**new.model_dump())
        count = rows_affected(db.execute(stmt))
        logger.debug("Updated %d page(s) named %r", count, id)
        return count

    def delete(self, id: str, db: Connection) -> int:
        stmt = delete(pages).where(pages.c.page_name == id)
        count = rows_affected(db.execute(stmt))
        logger.debug("Deleted %d page(s) named %r", count, id)
        return count

    def read_one_join_on(self, id: str, db: Connection) -> List[Tuple[Page, Module]]:
        """
        Inner join a page with its modules.

        Returns one ``(page, module)`` tuple per module, ordered by
        ``module_id``. A page without modules, or a missing page, gives an
        empty list.
        """
        page_columns = self.columns()
        module_columns = ModuleModel.columns()
        split = len(page_columns)

        stmt = (
            select(*page_columns, *module_columns)
            .select_from(pages.join(modules, pages.c.page_name == modules.c.page_name))
            .where(pages.c.page_name == id)
            .order_by(modules.c.module_id)
        )

        joined = []
        for row in db.execute(stmt):
            values = tuple(row)
            joined.append((
                to_record(Page, page_columns, values[:split]),
                to_record(Module, module_columns, values[split:]),
            ))
        return joined
