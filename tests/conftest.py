"""Shared fixtures - an in-memory database per test."""

from datetime import date

import pytest

from app.container import Container
from app.models.candidate import Candidate
from app.models.election import Election
from app.models.student import Student
from app.repositories.db import connect


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def container(conn):
    return Container().init(conn)


@pytest.fixture
def election():
    return Election(
        name="University President Election 2026",
        start_date=date(2026, 1, 10),
        end_date=date(2026, 1, 19),
        academic_year="2026-2027",
    )


@pytest.fixture
def stored_election(container, election):
    return container.elections.create_election(election)


@pytest.fixture
def make_candidate(stored_election):
    def make(name="Zhubanazarova Ainaz", major="Computer Science", year=3, campaign="Student Welfare"):
        return Candidate(name, major, year, campaign, stored_election)

    return make


@pytest.fixture
def make_student():
    def make(name="Arguan Bakikair", student_id="S001", major="Software Engineering", year=1):
        return Student(name, student_id, major, year)

    return make
