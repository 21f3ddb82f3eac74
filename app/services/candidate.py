"""Candidate service."""

from loguru import logger

from app.errors import InvalidInputError
from app.models.candidate import Candidate
from app.repositories.candidate import CandidateRepository
from app.utils import sorting


class CandidateService:
    """Candidate business logic."""

    def __init__(self, repo: CandidateRepository):
        self._repo = repo

    def create_candidate(self, candidate: Candidate) -> Candidate:
        if not candidate.validate():
            raise InvalidInputError(candidate.validation_message())
        created = self._repo.create(candidate)
        logger.info("Created {}", created.label())
        return created

    def get_candidate_by_id(self, candidate_id: int) -> Candidate:
        return self._repo.find_by_id(candidate_id)

    def get_all_candidates(self) -> list[Candidate]:
        return self._repo.find_all()

    def update_candidate(self, candidate: Candidate) -> Candidate:
        if not candidate.validate():
            raise InvalidInputError(candidate.validation_message())
        return self._repo.update(candidate)

    def delete_candidate(self, candidate_id: int) -> None:
        self._repo.delete(candidate_id)
        logger.info("Candidate deleted: id={}", candidate_id)

    def get_candidates_by_election(self, election_id: int) -> list[Candidate]:
        """Election standings, most votes first."""
        return self._repo.find_by_election_id(election_id)

    def get_candidates_by_major(self, major: str) -> list[Candidate]:
        return self._repo.find_by_major(major)

    def get_candidates_sorted_by_votes(self) -> list[Candidate]:
        """All candidates, most votes first, ties by name."""
        return sorting.sort_candidates_by_votes(self._repo.find_all())

    def get_top_candidates(self, n: int) -> list[Candidate]:
        return sorting.top_candidates(self._repo.find_all(), n)
