"""Election service."""

from datetime import date

from loguru import logger

from app.errors import InvalidInputError, ResourceNotFoundError
from app.models.common import is_valid_string
from app.models.election import Election
from app.repositories.election import ElectionRepository


def validate_election(election: Election | None) -> None:
    """Raise InvalidInputError for the first broken election rule."""
    if election is None:
        raise InvalidInputError("Election cannot be null")
    if not is_valid_string(election.name):
        raise InvalidInputError("Election name is required")
    if election.start_date is None or election.end_date is None:
        raise InvalidInputError("Start date and end date are required")
    if election.end_date < election.start_date:
        raise InvalidInputError("End date must be after start date")
    if not is_valid_string(election.academic_year):
        raise InvalidInputError("Academic year is required")


class ElectionService:
    """Election business logic."""

    def __init__(self, repo: ElectionRepository):
        self._repo = repo

    def create_election(self, election: Election) -> Election:
        validate_election(election)
        created = self._repo.create(election)
        logger.info("Created {}", created.label())
        return created

    def get_election_by_id(self, election_id: int) -> Election:
        if election_id <= 0:
            raise ResourceNotFoundError("Invalid election ID")
        return self._repo.find_by_id(election_id)

    def get_all_elections(self) -> list[Election]:
        return self._repo.find_all()

    def update_election(self, election: Election) -> Election:
        validate_election(election)
        if not self._repo.exists(election.id):
            raise ResourceNotFoundError(f"Election not found with id: {election.id}")
        updated = self._repo.update(election)
        logger.info("Election updated: id={}", updated.id)
        return updated

    def delete_election(self, election_id: int) -> None:
        if not self._repo.exists(election_id):
            raise ResourceNotFoundError(f"Election not found with id: {election_id}")
        self._repo.delete(election_id)
        logger.info("Election deleted: id={}", election_id)

    def get_active_elections(self, today: date | None = None) -> list[Election]:
        return self._repo.find_active(today)

    def get_elections_by_academic_year(self, academic_year: str) -> list[Election]:
        if not is_valid_string(academic_year):
            raise InvalidInputError("Invalid academic year")
        return self._repo.find_by_academic_year(academic_year)
