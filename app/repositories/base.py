"""Base repository class."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger

from app.errors import DatabaseOperationError
from app.repositories.db import get_db


class BaseRepository:
    """Base repository with common functionality."""

    def __init__(self, conn: duckdb.DuckDBPyConnection | None = None):
        self._db = conn if conn is not None else get_db()
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def connection(self) -> duckdb.DuckDBPyConnection:
        return self._db

    @contextmanager
    def storage_errors(self, action: str) -> Iterator[None]:
        """Translate driver errors into DatabaseOperationError."""
        try:
            yield
        except duckdb.Error as e:
            logger.error("Error {}: {}", action, e)
            raise DatabaseOperationError(f"Error {action}: {e}") from e

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    def has_rows(self, query: str, params: list | None = None) -> bool:
        """Run a COUNT(*) query; any failure reads as no match."""
        try:
            row = self.fetchone(query, params)
        except duckdb.Error as e:
            logger.warning("Existence check failed, treating as missing: {}", e)
            return False
        return bool(row and row[0] > 0)
