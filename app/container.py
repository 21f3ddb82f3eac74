"""Dependency Injection container - initialized at app startup."""

import duckdb

from app.repositories.candidate import CandidateRepository
from app.repositories.db import get_db
from app.repositories.election import ElectionRepository
from app.repositories.student import StudentRepository
from app.services.candidate import CandidateService
from app.services.election import ElectionService
from app.services.student import StudentService


class Container:
    """Application DI container - repositories and services over one connection."""

    def __init__(self):
        self._initialized = False

    def init(self, conn: duckdb.DuckDBPyConnection | None = None) -> "Container":
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return self

        self.conn = conn if conn is not None else get_db()

        # Repositories (share the connection so vote casting runs in one transaction)
        self._election_repo = ElectionRepository(self.conn)
        self._candidate_repo = CandidateRepository(self.conn)
        self._student_repo = StudentRepository(self.conn)

        # Services (with injected repos)
        self.elections = ElectionService(repo=self._election_repo)
        self.candidates = CandidateService(repo=self._candidate_repo)
        self.students = StudentService(
            student_repo=self._student_repo,
            candidate_repo=self._candidate_repo,
        )

        self._initialized = True
        return self
