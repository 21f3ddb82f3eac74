"""Services package - service class exports."""

from app.services.candidate import CandidateService
from app.services.election import ElectionService
from app.services.student import StudentService

__all__ = [
    "CandidateService",
    "ElectionService",
    "StudentService",
]
