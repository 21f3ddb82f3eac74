"""DuckDB connection management."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

import duckdb
from loguru import logger

from app.errors import DatabaseOperationError
from app.models import ALL_DDL
from settings import DB_PATH

_local = threading.local()


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    try:
        result = conn.execute(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'students'"
        ).fetchone()
        return result[0] > 0
    except duckdb.Error:
        return False


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def connect(path: str = DB_PATH) -> duckdb.DuckDBPyConnection:
    """Open a new connection with the schema in place."""
    conn = duckdb.connect(path)
    init_tables(conn)
    logger.debug("DB connected: {}", path)
    return conn


@contextmanager
def database(path: str = DB_PATH) -> Iterator[duckdb.DuckDBPyConnection]:
    """Scoped connection, closed on exit."""
    conn = connect(path)
    try:
        yield conn
    finally:
        conn.close()
        logger.debug("DB connection closed: {}", path)


@contextmanager
def transaction(conn: duckdb.DuckDBPyConnection) -> Iterator[duckdb.DuckDBPyConnection]:
    """Run the block in one transaction, rolled back on any error.

    A failed ROLLBACK is logged and the error that caused it is re-raised.
    """
    _control(conn, "BEGIN TRANSACTION", "starting transaction")
    try:
        yield conn
    except BaseException:
        try:
            conn.execute("ROLLBACK")
            logger.warning("Transaction rolled back")
        except duckdb.Error as e:
            logger.error("Error rolling back transaction: {}", e)
        raise
    _control(conn, "COMMIT", "committing transaction")


def _control(conn: duckdb.DuckDBPyConnection, statement: str, action: str) -> None:
    try:
        conn.execute(statement)
    except duckdb.Error as e:
        logger.error("Error {}: {}", action, e)
        raise DatabaseOperationError(f"Error {action}: {e}") from e


def get_db() -> duckdb.DuckDBPyConnection:
    """Get thread-local default connection, created on first use."""
    if not hasattr(_local, "conn") or _local.conn is None:
        _local.conn = connect(DB_PATH)
    return _local.conn


def close_db() -> None:
    """Close thread-local connection."""
    if hasattr(_local, "conn") and _local.conn:
        _local.conn.close()
        _local.conn = None
        logger.debug("DB connection closed")


def reconnect_db() -> duckdb.DuckDBPyConnection:
    """Force reconnect."""
    close_db()
    return get_db()
