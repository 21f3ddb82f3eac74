"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.candidate import CandidateRepository
from app.repositories.db import (
    close_db,
    connect,
    database,
    get_db,
    init_tables,
    reconnect_db,
    transaction,
)
from app.repositories.election import ElectionRepository
from app.repositories.student import StudentRepository

__all__ = [
    # DB
    "connect",
    "database",
    "transaction",
    "get_db",
    "close_db",
    "reconnect_db",
    "init_tables",
    # Base
    "BaseRepository",
    # Entities
    "ElectionRepository",
    "CandidateRepository",
    "StudentRepository",
]
