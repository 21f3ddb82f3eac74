"""Controller response schemas."""

from datetime import date

from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """Outcome of a single controller call."""

    ok: bool
    message: str


class CreatedResult(ActionResult):
    """Outcome of a create call."""

    id: int | None = None


class ElectionItem(BaseModel):
    """Election info."""

    id: int
    name: str
    start_date: date
    end_date: date
    academic_year: str
    active: bool


class ElectionsResponse(ActionResult):
    """All elections response."""

    items: list[ElectionItem] = Field(default_factory=list)


class CandidateStanding(BaseModel):
    """Candidate with its current vote count."""

    id: int
    name: str
    major: str
    year_of_study: int
    vote_count: int


class StandingsResponse(ActionResult):
    """Candidates ordered by votes."""

    items: list[CandidateStanding] = Field(default_factory=list)


class VoterItem(BaseModel):
    """Student able to vote."""

    id: int
    name: str
    student_id: str


class VotersResponse(ActionResult):
    """Eligible voters response."""

    total: int = 0
    items: list[VoterItem] = Field(default_factory=list)


class EntityInfoResponse(ActionResult):
    """Printable summary of a candidate or student."""

    id: int | None = None
    name: str = ""
    description: str = ""
    eligible: bool = False
