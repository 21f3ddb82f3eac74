"""Models package - DDL and entities for elections, candidates and students."""

from app.models.candidate import CANDIDATE_DDL, CANDIDATE_SEQUENCE, Candidate
from app.models.common import BaseEntity, Validatable, Votable
from app.models.election import ELECTION_DDL, ELECTION_SEQUENCE, Election
from app.models.student import STUDENT_DDL, STUDENT_SEQUENCE, Student

# Sequences must exist before the tables whose ids default to them
ALL_DDL = [
    ELECTION_SEQUENCE,
    CANDIDATE_SEQUENCE,
    STUDENT_SEQUENCE,
    ELECTION_DDL,
    CANDIDATE_DDL,
    STUDENT_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "Validatable",
    "Votable",
    # Entities
    "Election",
    "Candidate",
    "Student",
    # DDL
    "ELECTION_DDL",
    "CANDIDATE_DDL",
    "STUDENT_DDL",
    "ALL_DDL",
]
