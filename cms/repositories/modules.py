"""Module record model."""

import logging
from typing import Any, List, Tuple

from sqlalchemy import delete, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.sql.elements import ColumnElement

from cms.models import ModuleEntity
from cms.repositories.base import (
    fetch_one_or_raise,
    insert_or_ignore,
    rows_affected,
    to_record,
)
from cms.schemas import Module, MutModule

logger = logging.getLogger(__name__)

modules = ModuleEntity.__table__


class ModuleModel:
    """``Model[Module, MutModule, int]`` over the ``modules`` table."""

    entity = "Module"

    @staticmethod
    def columns() -> Tuple[ColumnElement[Any], ...]:
        return (
            modules.c.module_id,
            modules.c.page_name,
            modules.c.title,
            modules.c.content,
        )

    def create(self, new: MutModule, db: Connection) -> int:
        stmt = insert_or_ignore(modules, db).values(**new.model_dump())
        count = rows_affected(db.execute(stmt))
        logger.debug("Inserted %d module(s) titled %r on page %r", count, new.title, new.page_name)
        return count

    def read_one(self, id: int, db: Connection) -> Module:
        stmt = select(*self.columns()).where(modules.c.module_id == id)
        row = fetch_one_or_raise(db.execute(stmt), self.entity, id)
        return to_record(Module, self.columns(), row)

    def read_all(self, db: Connection) -> List[Module]:
        rows = db.execute(select(*self.columns()))
        return [to_record(Module, self.columns(), row) for row in rows]

    def read_all_for_page(self, page_name: str, db: Connection) -> List[Module]:
        """Modules attached to one page, oldest first."""
        stmt = (
            select(*self.columns())
            .where(modules.c.page_name == page_name)
            .order_by(modules.c.module_id)
        )
        return [to_record(Module, self.columns(), row) for row in db.execute(stmt)]

    def update(self, id: int, new: MutModule, db: Connection) -> int:
        stmt = update(modules).where(modules.c.module_id == id).values(**new.model_dump())
        count = rows_affected(db.execute(stmt))
        logger.debug("Updated %d module(s) with id %r", count, id)
        return count

    def delete(self, id: int, db: Connection) -> int:
        stmt = delete(modules).where(modules.c.module_id == id)
        count = rows_affected(db.execute(stmt))
        logger.debug("Deleted %d module(s) with id %r", count, id)
        return count
