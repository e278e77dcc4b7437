"""Database package."""

from cms.database.pool import (
    build_connection_string,
    checkout,
    connection_scope,
    create_all_tables,
    dispose_pool,
    drop_all_tables,
    establish_database_connection,
    get_connection,
    init_pool,
)

__all__ = [
    "build_connection_string",
    "checkout",
    "connection_scope",
    "create_all_tables",
    "dispose_pool",
    "drop_all_tables",
    "establish_database_connection",
    "get_connection",
    "init_pool",
]
