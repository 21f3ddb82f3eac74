"""Election repository - CRUD and lookups for elections."""

from datetime import date

from loguru import logger

from app.errors import DatabaseOperationError, ResourceNotFoundError
from app.models.election import Election
from app.repositories.base import BaseRepository

_COLUMNS = "id, name, start_date, end_date, academic_year"


def _to_election(row: tuple) -> Election:
    return Election(
        id=row[0],
        name=row[1],
        start_date=row[2],
        end_date=row[3],
        academic_year=row[4],
    )


class ElectionRepository(BaseRepository):
    """Repository for election data access."""

    def create(self, election: Election) -> Election:
        """Insert and assign the generated id."""
        with self.storage_errors("creating election"):
            row = self.fetchone(
                """
                INSERT INTO elections (name, start_date, end_date, academic_year)
                VALUES (?, ?, ?, ?)
                RETURNING id
                """,
                [election.name, election.start_date, election.end_date, election.academic_year],
            )
        if row is None:
            raise DatabaseOperationError("Failed to create election")
        election.id = row[0]
        logger.debug("Election created: id={}", election.id)
        return election

    def find_by_id(self, election_id: int) -> Election:
        with self.storage_errors("finding election"):
            row = self.fetchone(f"SELECT {_COLUMNS} FROM elections WHERE id = ?", [election_id])
        if row is None:
            raise ResourceNotFoundError(f"Election not found with id: {election_id}")
        return _to_election(row)

    def find_all(self) -> list[Election]:
        """All elections, most recent start first."""
        with self.storage_errors("finding all elections"):
            rows = self.fetchall(f"SELECT {_COLUMNS} FROM elections ORDER BY start_date DESC")
        return [_to_election(r) for r in rows]

    def update(self, election: Election) -> Election:
        with self.storage_errors("updating election"):
            rows = self.fetchall(
                """
                UPDATE elections
                SET name = ?, start_date = ?, end_date = ?, academic_year = ?
                WHERE id = ?
                RETURNING id
                """,
                [
                    election.name,
                    election.start_date,
                    election.end_date,
                    election.academic_year,
                    election.id,
                ],
            )
        if not rows:
            raise ResourceNotFoundError(f"Election not found with id: {election.id}")
        logger.debug("Election updated: id={}", election.id)
        return election

    def delete(self, election_id: int) -> None:
        with self.storage_errors("deleting election"):
            rows = self.fetchall("DELETE FROM elections WHERE id = ? RETURNING id", [election_id])
        if not rows:
            raise ResourceNotFoundError(f"Election not found with id: {election_id}")
        logger.debug("Election deleted: id={}", election_id)

    def exists(self, election_id: int) -> bool:
        return self.has_rows("SELECT COUNT(*) FROM elections WHERE id = ?", [election_id])

    def find_active(self, today: date | None = None) -> list[Election]:
        """Elections whose window contains today."""
        with self.storage_errors("finding active elections"):
            rows = self.fetchall(
                f"SELECT {_COLUMNS} FROM elections WHERE ? BETWEEN start_date AND end_date",
                [today or date.today()],
            )
        return [_to_election(r) for r in rows]

    def find_by_academic_year(self, academic_year: str) -> list[Election]:
        with self.storage_errors("finding elections by academic year"):
            rows = self.fetchall(
                f"SELECT {_COLUMNS} FROM elections WHERE academic_year = ?",
                [academic_year],
            )
        return [_to_election(r) for r in rows]
