"""Controller tests - results and error reporting."""

from datetime import date

import pytest

from app.models.candidate import Candidate
from app.models.election import Election
from app.models.student import Student
from cli import demo
from cli.controller import ElectionController


@pytest.fixture
def controller(container):
    return ElectionController(container.elections, container.candidates, container.students)


class TestElectionScenario:
    def test_votes_and_standings(self, controller, election):
        assert controller.create_election(election).ok

        candidates = [
            Candidate("Zhubanazarova Ainaz", "Computer Science", 3, "Innovation", election),
            Candidate("Bekbolat Aruzhan", "Software Engineering", 2, "Platforms", election),
            Candidate("Daurenuly Alisher", "Cybersecurity", 3, "Comfort", election),
        ]
        candidate_ids = [controller.create_candidate(c).id for c in candidates]

        students = [
            Student("Arguan Bakikair", "S001", "Software Engineering", 1),
            Student("Dastan Nursultanov", "S002", "CS", 3),
            Student("Ershat Diasov", "S003", "Data Science", 2),
        ]
        student_ids = [controller.create_student(s).id for s in students]

        for s, c in ((0, 0), (1, 0), (2, 1)):
            assert controller.cast_vote(student_ids[s], candidate_ids[c]).ok

        standings = controller.candidates_sorted()
        assert standings.ok
        assert [(c.id, c.vote_count) for c in standings.items] == [
            (candidate_ids[0], 2),
            (candidate_ids[1], 1),
            (candidate_ids[2], 0),
        ]
        assert controller.eligible_voters().total == 0

    def test_top_candidates(self, controller, election):
        controller.create_election(election)
        for name in ("A", "B", "C"):
            controller.create_candidate(Candidate(name, "CS", 2, None, election))
        assert len(controller.candidates_sorted(top=2).items) == 2


class TestErrorReporting:
    def test_invalid_candidate(self, controller, election):
        controller.create_election(election)
        result = controller.create_candidate(Candidate("Invalid Student", "Computer Science", 1, "Should fail", election))
        assert not result.ok
        assert result.id is None
        assert "Candidates must be in year 2-4" in result.message

    def test_duplicate_student(self, controller):
        controller.create_student(Student("Arguan", "S001", "SE", 1))
        result = controller.create_student(Student("Duplicate", "S001", "CS", 2))
        assert not result.ok
        assert "already exists" in result.message

    def test_invalid_election(self, controller):
        result = controller.create_election(Election("E", date(2026, 2, 1), date(2026, 1, 1), "2026"))
        assert not result.ok
        assert result.message.startswith("❌ Error creating election")

    def test_vote_for_missing_candidate(self, controller):
        student_id = controller.create_student(Student("Arguan", "S001", "SE", 1)).id
        result = controller.cast_vote(student_id, 12)
        assert not result.ok
        assert "Candidate not found with id: 12" in result.message

    def test_vote_transaction_failure_reported(self, conn, controller, election):
        controller.create_election(election)
        candidate_id = controller.create_candidate(Candidate("A", "CS", 2, None, election)).id
        student_id = controller.create_student(Student("Arguan", "S001", "SE", 1)).id

        conn.execute("BEGIN TRANSACTION")
        result = controller.cast_vote(student_id, candidate_id)
        conn.execute("ROLLBACK")

        assert not result.ok
        assert "Error starting transaction" in result.message
        assert controller.eligible_voters().total == 1

    def test_storage_failure_reported(self, conn, controller):
        conn.close()
        result = controller.list_elections()
        assert not result.ok
        assert "Error fetching elections" in result.message


class TestDisplay:
    def test_student(self, controller):
        info = controller.display_entity(Student("Arguan", "S001", "SE", 1))
        assert info.eligible
        assert "Student ID: S001" in info.description
        assert info.message == "Student (unsaved) Arguan"

    def test_candidate(self, controller, election):
        info = controller.display_entity(Candidate("A", "CS", 1, None, election))
        assert not info.eligible


class TestDemo:
    def test_runs_end_to_end(self, capsys, monkeypatch):
        monkeypatch.setattr(demo, "DB_PATH", ":memory:")
        monkeypatch.setattr(demo, "setup_logging", lambda **_: None)
        assert demo.main() == 0

        out = capsys.readouterr().out
        assert "Zhubanazarova Ainaz - Votes: 2" in out
        assert "Bekbolat Aruzhan - Votes: 1" in out
        assert "Daurenuly Alisher - Votes: 0" in out
        assert "Candidates must be in year 2-4" in out
        assert "Student with ID S001 already exists" in out
        assert "Student instance:" in out
        assert "  student_id = 'S001'" in out
        assert "Demonstration completed." in out
