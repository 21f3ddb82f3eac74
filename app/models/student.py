"""Student (voter) model."""

from dataclasses import dataclass

from loguru import logger

from app.models.common import (
    BaseEntity,
    is_valid_string,
    is_valid_year,
    meets_basic_voting_requirements,
    vote_status_description,
)
from app.models.common.capabilities import VALIDATION_PASSED

STUDENT_MIN_YEAR = 1
STUDENT_MAX_YEAR = 4

STUDENT_SEQUENCE = "CREATE SEQUENCE IF NOT EXISTS students_id_seq START 1"

# student_id uniqueness is checked by StudentService before insert, not by the table
STUDENT_DDL = """
CREATE TABLE IF NOT EXISTS students (
    id INTEGER PRIMARY KEY DEFAULT nextval('students_id_seq'),
    name VARCHAR NOT NULL,
    student_id VARCHAR NOT NULL,
    major VARCHAR NOT NULL,
    year_of_study INTEGER NOT NULL,
    has_voted BOOLEAN NOT NULL DEFAULT FALSE
)
"""


@dataclass
class Student(BaseEntity):
    """A student who may vote once."""

    name: str
    student_id: str
    major: str
    year_of_study: int
    has_voted: bool = False
    id: int | None = None

    def is_eligible(self) -> bool:
        return is_valid_year(self.year_of_study, STUDENT_MIN_YEAR, STUDENT_MAX_YEAR)

    def validate(self) -> bool:
        return (
            is_valid_string(self.name)
            and is_valid_string(self.student_id)
            and is_valid_string(self.major)
            and self.is_eligible()
        )

    def validation_message(self) -> str:
        """First violated rule, checked in name, student id, major, year order."""
        if not is_valid_string(self.name):
            return "Invalid name"
        if not is_valid_string(self.student_id):
            return "Invalid student ID"
        if not is_valid_string(self.major):
            return "Invalid major"
        if not self.is_eligible():
            return f"Students must be in year {STUDENT_MIN_YEAR}-{STUDENT_MAX_YEAR}"
        return VALIDATION_PASSED

    def can_vote(self) -> bool:
        return meets_basic_voting_requirements(self.has_voted, self.is_eligible())

    def vote_status_description(self) -> str:
        return vote_status_description(self.can_vote())

    def vote(self) -> None:
        """Mark as voted. Ineligible students are left untouched and only logged."""
        if not self.can_vote():
            logger.warning("{} cannot vote: {}", self.name, self.vote_status_description())
            return
        self.has_voted = True
        logger.info("{} has voted", self.name)

    def describe(self) -> str:
        status = "Has Voted" if self.has_voted else "Not Voted"
        return (
            f"Student ID: {self.student_id}\n"
            f"Major: {self.major}\n"
            f"Year: {self.year_of_study}\n"
            f"Voting Status: {status}"
        )
