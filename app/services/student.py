"""Student service - registration and vote casting."""

from loguru import logger

from app.errors import DuplicateResourceError, InvalidInputError
from app.models.student import Student
from app.repositories.candidate import CandidateRepository
from app.repositories.db import transaction
from app.repositories.student import StudentRepository
from app.utils import sorting


class StudentService:
    """Student business logic."""

    def __init__(self, student_repo: StudentRepository, candidate_repo: CandidateRepository):
        self._students = student_repo
        self._candidates = candidate_repo

    def create_student(self, student: Student) -> Student:
        if not student.validate():
            raise InvalidInputError(student.validation_message())
        if self._students.exists_by_student_id(student.student_id):
            raise DuplicateResourceError(f"Student with ID {student.student_id} already exists")

        created = self._students.create(student)
        logger.info("Created {}", created.label())
        return created

    def get_student_by_id(self, student_id: int) -> Student:
        return self._students.find_by_id(student_id)

    def get_student_by_student_id(self, student_id: str) -> Student:
        return self._students.find_by_student_id(student_id)

    def get_all_students(self) -> list[Student]:
        return self._students.find_all()

    def update_student(self, student: Student) -> Student:
        if not student.validate():
            raise InvalidInputError(student.validation_message())
        return self._students.update(student)

    def delete_student(self, student_id: int) -> None:
        self._students.delete(student_id)
        logger.info("Student deleted: id={}", student_id)

    def get_students_by_major(self, major: str) -> list[Student]:
        return self._students.find_by_major(major)

    def get_voted_students(self) -> list[Student]:
        return self._students.find_voted()

    def get_non_voted_students(self) -> list[Student]:
        return self._students.find_not_voted()

    def get_eligible_voters(self) -> list[Student]:
        return sorting.filter_eligible_voters(self._students.find_all())

    def cast_vote(self, student_id: int, candidate_id: int) -> None:
        """Record one vote: flag the student and bump the candidate's counter.

        Both writes share one transaction, so a failure on the candidate
        update leaves the student unvoted.
        """
        student = self._students.find_by_id(student_id)
        if not student.can_vote():
            raise InvalidInputError(f"Student cannot vote: {student.vote_status_description()}")

        candidate = self._candidates.find_by_id(candidate_id)

        with transaction(self._students.connection):
            student.vote()
            self._students.update(student)

            candidate.increment_vote_count()
            self._candidates.update(candidate)

        logger.info("Vote cast: student={} -> candidate={} ({} votes)", student.id, candidate.id, candidate.vote_count)
