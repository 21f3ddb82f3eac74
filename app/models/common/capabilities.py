"""Validatable and Votable contracts plus the predicates they are built from."""

from typing import Protocol, runtime_checkable

VALIDATION_PASSED = "Validation passed"
VALIDATION_FAILED = "Validation failed"


def is_valid_string(value: str | None) -> bool:
    """True for a non-None string that is not blank."""
    return value is not None and value.strip() != ""


def is_valid_year(year: int, min_year: int, max_year: int) -> bool:
    """Inclusive range check."""
    return min_year <= year <= max_year


def default_validation_message(valid: bool) -> str:
    return VALIDATION_PASSED if valid else VALIDATION_FAILED


def meets_basic_voting_requirements(has_voted: bool, eligible: bool) -> bool:
    return not has_voted and eligible


def vote_status_description(can_vote: bool) -> str:
    return "Eligible to vote" if can_vote else "Already voted or ineligible"


@runtime_checkable
class Validatable(Protocol):
    """Entity able to check its own fields."""

    def validate(self) -> bool: ...

    def validation_message(self) -> str: ...


@runtime_checkable
class Votable(Protocol):
    """Entity holding a one-shot vote."""

    def vote(self) -> None: ...

    def can_vote(self) -> bool: ...

    def vote_status_description(self) -> str: ...
