"""Tests for validation and voting predicates."""

import pytest

from app.models.candidate import Candidate
from app.models.common import (
    Validatable,
    Votable,
    default_validation_message,
    is_valid_string,
    is_valid_year,
    meets_basic_voting_requirements,
    vote_status_description,
)
from app.models.student import Student


class TestIsValidString:
    def test_text(self):
        assert is_valid_string("Alice")

    def test_none(self):
        assert not is_valid_string(None)

    def test_empty(self):
        assert not is_valid_string("")

    def test_whitespace_only(self):
        assert not is_valid_string("  \t\n")


class TestIsValidYear:
    @pytest.mark.parametrize(
        ("year", "lo", "hi"),
        [(1, 1, 4), (4, 1, 4), (0, 1, 4), (5, 1, 4), (2, 2, 4), (1, 2, 4), (3, 3, 3), (-1, -2, 0)],
    )
    def test_matches_inclusive_range(self, year, lo, hi):
        assert is_valid_year(year, lo, hi) == (lo <= year <= hi)

    def test_empty_range(self):
        assert not is_valid_year(3, 4, 2)


class TestMessages:
    def test_default_validation_message(self):
        assert default_validation_message(True) == "Validation passed"
        assert default_validation_message(False) == "Validation failed"

    def test_vote_status(self):
        assert vote_status_description(True) == "Eligible to vote"
        assert vote_status_description(False) == "Already voted or ineligible"


class TestVotingRequirements:
    def test_truth_table(self):
        assert meets_basic_voting_requirements(False, True)
        assert not meets_basic_voting_requirements(True, True)
        assert not meets_basic_voting_requirements(False, False)
        assert not meets_basic_voting_requirements(True, False)


class TestProtocols:
    def test_candidate_is_validatable_not_votable(self):
        candidate = Candidate("A", "CS", 2)
        assert isinstance(candidate, Validatable)
        assert not isinstance(candidate, Votable)

    def test_student_is_both(self):
        student = Student("A", "S1", "CS", 1)
        assert isinstance(student, Validatable)
        assert isinstance(student, Votable)
