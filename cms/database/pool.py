"""
Connection Pool Management
==========================

Builds the bounded connection pool from the connection descriptor and
hands out one connection per operation.

The pool is a SQLAlchemy ``Engine`` over a ``QueuePool`` with no overflow,
so at most ``max_size`` connections are ever live. It is built once at
startup and passed explicitly to whoever needs a connection; nothing in
this module keeps a global engine.
"""

import logging
from contextlib import contextmanager
from typing import Generator
from urllib.parse import quote_plus

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.pool import QueuePool

from cms.config import Settings
from cms.core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT
from cms.core.errors import (
    BackendUnavailableError,
    CheckoutError,
    PoolError,
    PoolExhaustedError,
)

logger = logging.getLogger(__name__)


# ========================================
# Construction
# ========================================

def build_connection_string(config: Settings) -> str:
    """
    Format the connection descriptor into a database URI.

    Returns ``config.database_url`` verbatim when it is set.

    Example:
        >>> build_connection_string(Settings(mysql_username="cms", mysql_password="pw",
        ...     mysql_url="db", mysql_port=3306, mysql_database="site"))
        'mysql+pymysql://cms:pw@db:3306/site'
    """
    if config.database_url:
        return config.database_url

    return "{}://{}:{}@{}:{}/{}".format(
        config.db_scheme,
        quote_plus(config.mysql_username),
        quote_plus(config.mysql_password),
        config.mysql_url,
        config.mysql_port,
        config.mysql_database,
    )


def _safe_uri(uri: str) -> str:
    try:
        return make_url(uri).render_as_string(hide_password=True)
    except SQLAlchemyError:
        return "<unparseable uri>"


def init_pool(
    uri: str,
    max_size: int = DEFAULT_POOL_SIZE,
    timeout: float = DEFAULT_POOL_TIMEOUT,
    echo: bool = False,
) -> Engine:
    """
    Create the bounded pool and verify the backend is reachable.

    Args:
        uri: Database URI (see build_connection_string)
        max_size: Maximum number of live connections
        timeout: Seconds a checkout waits before giving up
        echo: Log every SQL statement

    Returns:
        Engine owning the pool

    Raises:
        PoolError: If the URI is malformed, the driver is missing or the
            backend cannot be reached
    """
    connect_args = {}
    if uri.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    try:
        engine = create_engine(
            uri,
            poolclass=QueuePool,
            pool_size=max_size,
            max_overflow=0,
            pool_timeout=timeout,
            pool_pre_ping=True,
            connect_args=connect_args,
            echo=echo,
        )
    except (SQLAlchemyError, ImportError) as exc:
        raise PoolError(f"Failed to create pool for {_safe_uri(uri)}: {exc}") from exc

    if engine.dialect.name == "sqlite":
        # Enforce foreign keys for SQLite
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    try:
        with engine.connect():
            pass
    except SQLAlchemyError as exc:
        engine.dispose()
        raise PoolError(f"Failed to create pool for {_safe_uri(uri)}: {exc}") from exc

    logger.info("Created connection pool for %s (max=%d)", _safe_uri(uri), max_size)
    return engine


def establish_database_connection(config: Settings) -> Engine:
    """
    Build the process-wide pool from settings.

    A failure here is fatal to startup; there is no retry.
    """
    return init_pool(
        build_connection_string(config),
        max_size=config.db_pool_size,
        timeout=config.db_pool_timeout,
        echo=config.app_debug,
    )


def dispose_pool(pool: Engine) -> None:
    """Close every pooled connection (process exit)."""
    pool.dispose()
    logger.info("Disposed connection pool for %s", pool.url.render_as_string(hide_password=True))


# ========================================
# Checkout
# ========================================

def checkout(pool: Engine) -> Connection:
    """
    Take one connection out of the pool.

    The caller owns the connection until it calls ``close()``, which
    returns it to the pool. Prefer ``connection_scope``.

    Raises:
        PoolExhaustedError: No connection freed up within the pool timeout
        BackendUnavailableError: The backend refused the connection
        CheckoutError: Any other pool failure
    """
    try:
        return pool.connect()
    except PoolTimeoutError as exc:
        logger.warning("Connection pool exhausted: %s", exc)
        raise PoolExhaustedError() from exc
    except DBAPIError as exc:
        logger.error("Backend unavailable during checkout: %s", exc)
        raise BackendUnavailableError() from exc
    except SQLAlchemyError as exc:
        logger.error("Checkout failed: %s", exc)
        raise CheckoutError() from exc


@contextmanager
def connection_scope(pool: Engine) -> Generator[Connection, None, None]:
    """
    Context manager for one pooled connection.

    Commits on success, rolls back on error, and always releases the
    connection.

    Usage:
        with connection_scope(pool) as db:
            PageModel().create(new_page, db)
    """
    db = checkout(pool)
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_connection(pool: Engine) -> Generator[Connection, None, None]:
    """
    Generator form for framework dependency injection.

    Usage:
        def pool_dependency():
            yield from get_connection(app_pool)
    """
    with connection_scope(pool) as db:
        yield db


# ========================================
# Schema
# ========================================

def create_all_tables(pool: Engine) -> None:
    """Create all tables in the database."""
    from cms.models.base import Base

    Base.metadata.create_all(bind=pool)


def drop_all_tables(pool: Engine) -> None:
    """Drop all tables in the database."""
    from cms.models.base import Base

    Base.metadata.drop_all(bind=pool)
