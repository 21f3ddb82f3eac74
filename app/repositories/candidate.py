"""Candidate repository - candidates joined with their election."""

from loguru import logger

from app.errors import DatabaseOperationError, InvalidInputError, ResourceNotFoundError
from app.models.candidate import Candidate
from app.models.election import Election
from app.repositories.base import BaseRepository

_SELECT = """
    SELECT c.id, c.name, c.major, c.year_of_study, c.campaign, c.vote_count,
           e.id, e.name, e.start_date, e.end_date, e.academic_year
    FROM candidates c
    JOIN elections e ON c.election_id = e.id
"""


def _to_candidate(row: tuple) -> Candidate:
    election = Election(
        id=row[6],
        name=row[7],
        start_date=row[8],
        end_date=row[9],
        academic_year=row[10],
    )
    return Candidate(
        id=row[0],
        name=row[1],
        major=row[2],
        year_of_study=row[3],
        campaign=row[4],
        vote_count=row[5],
        election=election,
    )


def _election_id(candidate: Candidate) -> int:
    if candidate.election is None or not candidate.election.is_stored:
        raise InvalidInputError("Candidate must be associated with a stored election")
    return candidate.election.id


class CandidateRepository(BaseRepository):
    """Repository for candidate data access."""

    def create(self, candidate: Candidate) -> Candidate:
        """Insert and assign the generated id."""
        election_id = _election_id(candidate)
        with self.storage_errors("creating candidate"):
            row = self.fetchone(
                """
                INSERT INTO candidates (name, major, year_of_study, campaign, election_id, vote_count)
                VALUES (?, ?, ?, ?, ?, ?)
                RETURNING id
                """,
                [
                    candidate.name,
                    candidate.major,
                    candidate.year_of_study,
                    candidate.campaign,
                    election_id,
                    candidate.vote_count,
                ],
            )
        if row is None:
            raise DatabaseOperationError("Failed to create candidate")
        candidate.id = row[0]
        logger.debug("Candidate created: id={}", candidate.id)
        return candidate

    def find_by_id(self, candidate_id: int) -> Candidate:
        with self.storage_errors("finding candidate"):
            row = self.fetchone(_SELECT + " WHERE c.id = ?", [candidate_id])
        if row is None:
            raise ResourceNotFoundError(f"Candidate not found with id: {candidate_id}")
        return _to_candidate(row)

    def find_all(self) -> list[Candidate]:
        """All candidates, name-ascending."""
        with self.storage_errors("finding all candidates"):
            rows = self.fetchall(_SELECT + " ORDER BY c.name")
        return [_to_candidate(r) for r in rows]

    def update(self, candidate: Candidate) -> Candidate:
        election_id = _election_id(candidate)
        with self.storage_errors("updating candidate"):
            rows = self.fetchall(
                """
                UPDATE candidates
                SET name = ?, major = ?, year_of_study = ?, campaign = ?,
                    election_id = ?, vote_count = ?
                WHERE id = ?
                RETURNING id
                """,
                [
                    candidate.name,
                    candidate.major,
                    candidate.year_of_study,
                    candidate.campaign,
                    election_id,
                    candidate.vote_count,
                    candidate.id,
                ],
            )
        if not rows:
            raise ResourceNotFoundError(f"Candidate not found with id: {candidate.id}")
        logger.debug("Candidate updated: id={}, votes={}", candidate.id, candidate.vote_count)
        return candidate

    def delete(self, candidate_id: int) -> None:
        with self.storage_errors("deleting candidate"):
            rows = self.fetchall("DELETE FROM candidates WHERE id = ? RETURNING id", [candidate_id])
        if not rows:
            raise ResourceNotFoundError(f"Candidate not found with id: {candidate_id}")
        logger.debug("Candidate deleted: id={}", candidate_id)

    def exists(self, candidate_id: int) -> bool:
        return self.has_rows("SELECT COUNT(*) FROM candidates WHERE id = ?", [candidate_id])

    def find_by_election_id(self, election_id: int) -> list[Candidate]:
        """Candidates of one election, most votes first."""
        with self.storage_errors("finding candidates by election"):
            rows = self.fetchall(
                _SELECT + " WHERE c.election_id = ? ORDER BY c.vote_count DESC",
                [election_id],
            )
        return [_to_candidate(r) for r in rows]

    def find_by_major(self, major: str) -> list[Candidate]:
        with self.storage_errors("finding candidates by major"):
            rows = self.fetchall(_SELECT + " WHERE c.major = ?", [major])
        return [_to_candidate(r) for r in rows]
