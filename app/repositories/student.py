"""Student repository - voters and their vote status."""

from loguru import logger

from app.errors import DatabaseOperationError, ResourceNotFoundError
from app.models.student import Student
from app.repositories.base import BaseRepository

_COLUMNS = "id, name, student_id, major, year_of_study, has_voted"


def _to_student(row: tuple) -> Student:
    return Student(
        id=row[0],
        name=row[1],
        student_id=row[2],
        major=row[3],
        year_of_study=row[4],
        has_voted=bool(row[5]),
    )


class StudentRepository(BaseRepository):
    """Repository for student data access."""

    def create(self, student: Student) -> Student:
        """Insert and assign the generated id."""
        with self.storage_errors("creating student"):
            row = self.fetchone(
                """
                INSERT INTO students (name, student_id, major, year_of_study, has_voted)
                VALUES (?, ?, ?, ?, ?)
                RETURNING id
                """,
                [student.name, student.student_id, student.major, student.year_of_study, student.has_voted],
            )
        if row is None:
            raise DatabaseOperationError("Failed to create student")
        student.id = row[0]
        logger.debug("Student created: id={}", student.id)
        return student

    def find_by_id(self, student_id: int) -> Student:
        with self.storage_errors("finding student"):
            row = self.fetchone(f"SELECT {_COLUMNS} FROM students WHERE id = ?", [student_id])
        if row is None:
            raise ResourceNotFoundError(f"Student not found with id: {student_id}")
        return _to_student(row)

    def find_all(self) -> list[Student]:
        """All students, name-ascending."""
        with self.storage_errors("finding all students"):
            rows = self.fetchall(f"SELECT {_COLUMNS} FROM students ORDER BY name")
        return [_to_student(r) for r in rows]

    def update(self, student: Student) -> Student:
        with self.storage_errors("updating student"):
            rows = self.fetchall(
                """
                UPDATE students
                SET name = ?, student_id = ?, major = ?, year_of_study = ?, has_voted = ?
                WHERE id = ?
                RETURNING id
                """,
                [
                    student.name,
                    student.student_id,
                    student.major,
                    student.year_of_study,
                    student.has_voted,
                    student.id,
                ],
            )
        if not rows:
            raise ResourceNotFoundError(f"Student not found with id: {student.id}")
        logger.debug("Student updated: id={}, has_voted={}", student.id, student.has_voted)
        return student

    def delete(self, student_id: int) -> None:
        with self.storage_errors("deleting student"):
            rows = self.fetchall("DELETE FROM students WHERE id = ? RETURNING id", [student_id])
        if not rows:
            raise ResourceNotFoundError(f"Student not found with id: {student_id}")
        logger.debug("Student deleted: id={}", student_id)

    def exists(self, student_id: int) -> bool:
        return self.has_rows("SELECT COUNT(*) FROM students WHERE id = ?", [student_id])

    def find_by_student_id(self, student_id: str) -> Student:
        """Lookup by the externally assigned student identifier."""
        with self.storage_errors("finding student by student_id"):
            row = self.fetchone(f"SELECT {_COLUMNS} FROM students WHERE student_id = ?", [student_id])
        if row is None:
            raise ResourceNotFoundError(f"Student not found with student_id: {student_id}")
        return _to_student(row)

    def exists_by_student_id(self, student_id: str) -> bool:
        return self.has_rows("SELECT COUNT(*) FROM students WHERE student_id = ?", [student_id])

    def find_by_major(self, major: str) -> list[Student]:
        with self.storage_errors("finding students by major"):
            rows = self.fetchall(f"SELECT {_COLUMNS} FROM students WHERE major = ?", [major])
        return [_to_student(r) for r in rows]

    def find_voted(self) -> list[Student]:
        with self.storage_errors("finding voted students"):
            rows = self.fetchall(f"SELECT {_COLUMNS} FROM students WHERE has_voted = TRUE")
        return [_to_student(r) for r in rows]

    def find_not_voted(self) -> list[Student]:
        with self.storage_errors("finding non-voted students"):
            rows = self.fetchall(f"SELECT {_COLUMNS} FROM students WHERE has_voted = FALSE")
        return [_to_student(r) for r in rows]
