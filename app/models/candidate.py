"""Candidate model."""

from dataclasses import dataclass

from app.models.common import BaseEntity, is_valid_string, is_valid_year
from app.models.common.capabilities import VALIDATION_PASSED
from app.models.election import Election

CANDIDATE_MIN_YEAR = 2
CANDIDATE_MAX_YEAR = 4

CANDIDATE_SEQUENCE = "CREATE SEQUENCE IF NOT EXISTS candidates_id_seq START 1"

# election_id is not declared as a foreign key: deleting an election leaves its candidates orphaned
CANDIDATE_DDL = """
CREATE TABLE IF NOT EXISTS candidates (
    id INTEGER PRIMARY KEY DEFAULT nextval('candidates_id_seq'),
    name VARCHAR NOT NULL,
    major VARCHAR NOT NULL,
    year_of_study INTEGER NOT NULL,
    campaign VARCHAR,
    election_id INTEGER NOT NULL,
    vote_count INTEGER NOT NULL DEFAULT 0
)
"""


@dataclass
class Candidate(BaseEntity):
    """A student running in an election."""

    name: str
    major: str
    year_of_study: int
    campaign: str | None = None
    election: Election | None = None
    vote_count: int = 0
    id: int | None = None

    def is_eligible(self) -> bool:
        return is_valid_year(self.year_of_study, CANDIDATE_MIN_YEAR, CANDIDATE_MAX_YEAR)

    def validate(self) -> bool:
        return (
            is_valid_string(self.name)
            and is_valid_string(self.major)
            and self.is_eligible()
            and self.election is not None
        )

    def validation_message(self) -> str:
        """First violated rule, checked in name, major, year, election order."""
        if not is_valid_string(self.name):
            return "Invalid name"
        if not is_valid_string(self.major):
            return "Invalid major"
        if not self.is_eligible():
            return f"Candidates must be in year {CANDIDATE_MIN_YEAR}-{CANDIDATE_MAX_YEAR}"
        if self.election is None:
            return "Candidate must be associated with an election"
        return VALIDATION_PASSED

    def increment_vote_count(self) -> None:
        self.vote_count += 1

    def describe(self) -> str:
        election = self.election.name if self.election else "No election"
        return (
            f"Candidate from {self.major}, Year {self.year_of_study}\n"
            f"Campaign: {self.campaign}\n"
            f"Election: {election}\n"
            f"Votes: {self.vote_count}"
        )
