#!/usr/bin/env python3
"""
Run the university election demonstration end to end.

Usage:
    python run.py                              # in-memory database
    ELECTION_DB_PATH=elections.duckdb python run.py
"""

import sys
from datetime import date

from loguru import logger

from app.container import Container
from app.models.candidate import Candidate
from app.models.election import Election
from app.models.student import Student
from app.repositories.db import database
from app.utils.inspection import describe_instance, describe_schema
from cli.controller import ElectionController
from cli.schemas import ActionResult, ElectionsResponse, EntityInfoResponse, StandingsResponse, VotersResponse
from settings import DB_PATH, LOG_LEVEL, LOG_TO_FILE
from settings.logging import setup_logging

RULE = "=" * 60


def section(title: str) -> None:
    print(f"\n{RULE}\n{title}\n{RULE}")


def report(result: ActionResult) -> None:
    print(result.message)


def print_entity(info: EntityInfoResponse) -> None:
    print(f"ID: {info.id}")
    print(f"Name: {info.name}")
    print(info.description)
    print(f"Eligible: {'Yes' if info.eligible else 'No'}")


def print_elections(response: ElectionsResponse) -> None:
    if not response.ok:
        report(response)
        return
    for e in response.items:
        status = "active" if e.active else "inactive"
        print(f"  [{e.id}] {e.name} ({e.academic_year}) {e.start_date} .. {e.end_date}, {status}")


def print_standings(response: StandingsResponse) -> None:
    if not response.ok:
        report(response)
        return
    for c in response.items:
        print(f"  {c.name} - Votes: {c.vote_count}")


def print_voters(response: VotersResponse) -> None:
    if not response.ok:
        report(response)
        return
    print(f"Total: {response.total}")
    for s in response.items:
        print(f"  - {s.name} ({s.student_id})")


def run_demo(controller: ElectionController) -> None:
    """Fixed demonstration script."""
    section("CREATING ELECTION")
    election = Election(
        name="University President Election 2026",
        start_date=date(2026, 1, 10),
        end_date=date(2026, 1, 19),
        academic_year="2026-2027",
    )
    report(controller.create_election(election))

    section("CREATING CANDIDATES")
    candidates = [
        Candidate("Zhubanazarova Ainaz", "Computer Science", 3, "Innovation and Student Welfare", election),
        Candidate("Bekbolat Aruzhan", "Software Engineering", 2, "New learning platforms", election),
        Candidate("Daurenuly Alisher", "Cybersecurity", 3, "Comfort in Campus", election),
    ]
    for candidate in candidates:
        report(controller.create_candidate(candidate))

    section("CREATING STUDENTS")
    students = [
        Student("Arguan Bakikair", "S001", "Software Engineering", 1),
        Student("Dastan Nursultanov", "S002", "CS", 3),
        Student("Ershat Diasov", "S003", "Data Science", 2),
    ]
    for student in students:
        report(controller.create_student(student))

    section("ENTITY INFO")
    print_entity(controller.display_entity(candidates[0]))
    print()
    print_entity(controller.display_entity(students[0]))
    print()
    print(describe_instance(students[0]))

    section("REJECTED INPUT")
    print("Candidate in year 1:")
    report(controller.create_candidate(Candidate("Invalid Student", "Computer Science", 1, "Should fail", election)))
    print("Duplicate student ID S001:")
    report(controller.create_student(Student("Duplicate", "S001", "CS", 2)))

    section("VOTING")
    ballots = [(students[0], candidates[0]), (students[1], candidates[0]), (students[2], candidates[1])]
    for student, candidate in ballots:
        print(f"{student.name} voting for {candidate.name}:")
        report(controller.cast_vote(student.id, candidate.id))
    print(f"{students[0].name} voting again:")
    report(controller.cast_vote(students[0].id, candidates[2].id))

    section("RESULTS")
    print("Candidates sorted by votes:")
    print_standings(controller.candidates_sorted())
    print("Top 2 candidates:")
    print_standings(controller.candidates_sorted(top=2))
    print("Eligible voters remaining:")
    print_voters(controller.eligible_voters())
    print("All elections:")
    print_elections(controller.list_elections())


def main() -> int:
    setup_logging(level=LOG_LEVEL, to_file=LOG_TO_FILE)

    for entity_cls in (Election, Candidate, Student):
        logger.debug("Schema:\n{}", describe_schema(entity_cls))

    try:
        with database(DB_PATH) as conn:
            container = Container().init(conn)
            controller = ElectionController(container.elections, container.candidates, container.students)
            try:
                run_demo(controller)
            except Exception:
                logger.exception("Demonstration stopped by an unexpected error")
                return 0
    except Exception:
        logger.exception("Failed to initialize database at {}", DB_PATH)
        return 1

    print("\nDemonstration completed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
