"""
Record model contracts.

``Model`` is the uniform CRUD contract every record kind implements.
``Joinable`` adds a one-directional join to a related record kind. Both are
``typing.Protocol``s: a record model opts in by providing the methods, with
no shared base class.

Every method takes the checked-out connection as its last argument and
never commits; the caller owns the transaction (see
``cms.database.connection_scope``).

Not-found signaling differs between reads and writes:

* ``read_one`` raises ``RecordNotFoundError``
* ``update`` and ``delete`` return a row count of 0

Both conventions go through ``fetch_one_or_raise`` and ``rows_affected``
below so they can be changed in one place.
"""

from typing import Any, Iterable, List, Protocol, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import Insert, Table
from sqlalchemy.dialects import mysql, postgresql, sqlite
from sqlalchemy.engine import Connection, CursorResult, Result, Row
from sqlalchemy.sql.elements import ColumnElement

from cms.core.errors import RecordNotFoundError

TQueryable = TypeVar("TQueryable")
TMutable = TypeVar("TMutable")
TPrimary = TypeVar("TPrimary")
TDto = TypeVar("TDto")
TLeft = TypeVar("TLeft")
TRight = TypeVar("TRight")
TRecord = TypeVar("TRecord", bound=BaseModel)


# ========================================
# Contracts
# ========================================

class Model(Protocol[TQueryable, TMutable, TPrimary, TDto]):
    """
    CRUD over one table.

    Type parameters:
        TQueryable: Record shape stored in the table
        TMutable: Payload accepted by create and update
        TPrimary: Primary key type
        TDto: Record shape returned by reads (usually TQueryable)
    """

    def create(self, new: TMutable, db: Connection) -> int:
        """Insert one record; a primary-key collision is ignored and reports 0."""
        ...

    def read_one(self, id: TPrimary, db: Connection) -> TDto:
        """Fetch one record by key or raise RecordNotFoundError."""
        ...

    def read_all(self, db: Connection) -> List[TDto]:
        """Every record in the table, in backend order."""
        ...

    def update(self, id: TPrimary, new: TMutable, db: Connection) -> int:
        """Overwrite every writable field; 0 means no such key."""
        ...

    def delete(self, id: TPrimary, db: Connection) -> int:
        """Remove by key; 0 means no such key."""
        ...


class DTO(Protocol):
    """Record models name the exact columns their reads select."""

    @staticmethod
    def columns() -> Tuple[ColumnElement[Any], ...]:
        ...


class Joinable(Protocol[TLeft, TRight, TPrimary]):
    """Inner join from one record kind to a related one."""

    def read_one_join_on(self, id: TPrimary, db: Connection) -> List[Tuple[TLeft, TRight]]:
        """One tuple per related row; empty when there are none."""
        ...


# ========================================
# Helpers
# ========================================

def fetch_one_or_raise(result: Result[Any], entity: str, key: Any) -> Row[Any]:
    """
    Single row of ``result`` or ``RecordNotFoundError``.

    More than one row raises ``sqlalchemy.exc.MultipleResultsFound``.
    """
    row = result.one_or_none()
    if row is None:
        raise RecordNotFoundError(entity, key)
    return row


def rows_affected(result: CursorResult[Any]) -> int:
    return result.rowcount


def insert_or_ignore(table: Table, db: Connection) -> Insert:
    """INSERT that skips rows whose primary key already exists."""
    dialect = db.dialect.name
    if dialect in ("mysql", "mariadb"):
        return mysql.insert(table).prefix_with("IGNORE")
    if dialect == "sqlite":
        return sqlite.insert(table).on_conflict_do_nothing()
    if dialect == "postgresql":
        return postgresql.insert(table).on_conflict_do_nothing()
    raise NotImplementedError(f"insert-or-ignore is not supported on {dialect}")


def to_record(
    record_type: Type[TRecord],
    columns: Sequence[ColumnElement[Any]],
    values: Iterable[Any],
) -> TRecord:
    """Build a record from values laid out in ``columns`` order."""
    return record_type(**{column.key: value for column, value in zip(columns, values)})
