"""Common models - base class and shared capabilities."""

from app.models.common.base import BaseEntity
from app.models.common.capabilities import (
    Validatable,
    Votable,
    default_validation_message,
    is_valid_string,
    is_valid_year,
    meets_basic_voting_requirements,
    vote_status_description,
)

__all__ = [
    "BaseEntity",
    "Validatable",
    "Votable",
    "default_validation_message",
    "is_valid_string",
    "is_valid_year",
    "meets_basic_voting_requirements",
    "vote_status_description",
]
