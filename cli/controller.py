"""Election controller - thin layer over services.

Every method catches domain errors and reports them in the returned
schema; nothing here raises ElectionError or retries.
"""

from loguru import logger

from app.errors import ElectionError
from app.models.candidate import Candidate
from app.models.election import Election
from app.models.student import Student
from app.services.candidate import CandidateService
from app.services.election import ElectionService
from app.services.student import StudentService

from .schemas import (
    ActionResult,
    CandidateStanding,
    CreatedResult,
    ElectionItem,
    ElectionsResponse,
    EntityInfoResponse,
    StandingsResponse,
    VoterItem,
    VotersResponse,
)

OK = "✅"
FAIL = "❌"


def _failure(action: str, error: ElectionError) -> str:
    logger.warning("{} failed: {}", action, error.message)
    return f"{FAIL} Error {action}: {error.message}"


class ElectionController:
    """Coordinates election, candidate and student services for the console."""

    def __init__(
        self,
        election_service: ElectionService,
        candidate_service: CandidateService,
        student_service: StudentService,
    ):
        self._elections = election_service
        self._candidates = candidate_service
        self._students = student_service

    # Elections

    def create_election(self, election: Election) -> CreatedResult:
        try:
            created = self._elections.create_election(election)
        except ElectionError as e:
            return CreatedResult(ok=False, message=_failure("creating election", e))
        return CreatedResult(ok=True, message=f"{OK} Election created successfully: {created.name}", id=created.id)

    def list_elections(self) -> ElectionsResponse:
        try:
            elections = self._elections.get_all_elections()
        except ElectionError as e:
            return ElectionsResponse(ok=False, message=_failure("fetching elections", e))

        items = [
            ElectionItem(
                id=e.id,
                name=e.name,
                start_date=e.start_date,
                end_date=e.end_date,
                academic_year=e.academic_year,
                active=e.is_active(),
            )
            for e in elections
        ]
        return ElectionsResponse(ok=True, message=f"{len(items)} election(s)", items=items)

    # Candidates

    def create_candidate(self, candidate: Candidate) -> CreatedResult:
        try:
            created = self._candidates.create_candidate(candidate)
        except ElectionError as e:
            return CreatedResult(ok=False, message=_failure("creating candidate", e))
        return CreatedResult(ok=True, message=f"{OK} Candidate created successfully: {created.name}", id=created.id)

    def candidates_sorted(self, top: int | None = None) -> StandingsResponse:
        """Candidates by votes, optionally only the top N."""
        try:
            if top is None:
                candidates = self._candidates.get_candidates_sorted_by_votes()
            else:
                candidates = self._candidates.get_top_candidates(top)
        except ElectionError as e:
            return StandingsResponse(ok=False, message=_failure("fetching candidates", e))

        items = [
            CandidateStanding(
                id=c.id,
                name=c.name,
                major=c.major,
                year_of_study=c.year_of_study,
                vote_count=c.vote_count,
            )
            for c in candidates
        ]
        return StandingsResponse(ok=True, message=f"{len(items)} candidate(s)", items=items)

    # Students

    def create_student(self, student: Student) -> CreatedResult:
        try:
            created = self._students.create_student(student)
        except ElectionError as e:
            return CreatedResult(ok=False, message=_failure("creating student", e))
        return CreatedResult(ok=True, message=f"{OK} Student created successfully: {created.name}", id=created.id)

    def cast_vote(self, student_id: int, candidate_id: int) -> ActionResult:
        try:
            self._students.cast_vote(student_id, candidate_id)
        except ElectionError as e:
            return ActionResult(ok=False, message=_failure("casting vote", e))
        return ActionResult(ok=True, message=f"{OK} Vote cast successfully")

    def eligible_voters(self) -> VotersResponse:
        try:
            voters = self._students.get_eligible_voters()
        except ElectionError as e:
            return VotersResponse(ok=False, message=_failure("fetching eligible voters", e))

        items = [VoterItem(id=s.id, name=s.name, student_id=s.student_id) for s in voters]
        return VotersResponse(ok=True, message=f"{len(items)} eligible voter(s)", total=len(items), items=items)

    # Display

    def display_entity(self, entity: Candidate | Student) -> EntityInfoResponse:
        """Summary of a candidate or student, no storage access."""
        return EntityInfoResponse(
            ok=True,
            message=entity.label(),
            id=entity.id,
            name=entity.name,
            description=entity.describe(),
            eligible=entity.is_eligible(),
        )
