"""Sorting and filtering helpers for entity lists.

All functions return new lists and leave their input untouched.
"""

from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

from app.models.candidate import Candidate
from app.models.student import Student

T = TypeVar("T")


class Named(Protocol):
    name: str


class Eligible(Protocol):
    def is_eligible(self) -> bool: ...


N = TypeVar("N", bound=Named)
E = TypeVar("E", bound=Eligible)


def sort_by_name(entities: Iterable[N]) -> list[N]:
    return sorted(entities, key=lambda e: e.name)


def sort_by_name_descending(entities: Iterable[N]) -> list[N]:
    return sorted(entities, key=lambda e: e.name, reverse=True)


def sort_candidates_by_votes(candidates: Iterable[Candidate]) -> list[Candidate]:
    """Most votes first; ties keep their incoming order."""
    return sorted(candidates, key=lambda c: c.vote_count, reverse=True)


def top_candidates(candidates: Iterable[Candidate], n: int) -> list[Candidate]:
    return sort_candidates_by_votes(candidates)[: max(n, 0)]


def filter_eligible(entities: Iterable[E]) -> list[E]:
    return [e for e in entities if e.is_eligible()]


def filter_students_by_major(students: Iterable[Student], major: str) -> list[Student]:
    """Case-insensitive major match."""
    wanted = major.casefold()
    return [s for s in students if s.major.casefold() == wanted]


def filter_eligible_voters(students: Iterable[Student]) -> list[Student]:
    return [s for s in students if s.can_vote()]


def count_matching(items: Iterable[T], condition: Callable[[T], bool]) -> int:
    return sum(1 for item in items if condition(item))
