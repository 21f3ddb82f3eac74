"""Election model."""

from dataclasses import dataclass
from datetime import date

from app.models.common import BaseEntity

ELECTION_SEQUENCE = "CREATE SEQUENCE IF NOT EXISTS elections_id_seq START 1"

ELECTION_DDL = """
CREATE TABLE IF NOT EXISTS elections (
    id INTEGER PRIMARY KEY DEFAULT nextval('elections_id_seq'),
    name VARCHAR NOT NULL,
    start_date DATE NOT NULL,
    end_date DATE NOT NULL,
    academic_year VARCHAR NOT NULL
)
"""


@dataclass
class Election(BaseEntity):
    """An election window for one academic year."""

    name: str
    start_date: date
    end_date: date
    academic_year: str
    id: int | None = None

    def is_active(self, today: date | None = None) -> bool:
        """Whether today falls inside [start_date, end_date]."""
        today = today or date.today()
        return self.start_date <= today <= self.end_date

    def describe(self, today: date | None = None) -> str:
        status = "Active" if self.is_active(today) else "Inactive"
        return (
            f"Election: {self.name}\n"
            f"Academic Year: {self.academic_year}\n"
            f"Window: {self.start_date} .. {self.end_date}\n"
            f"Status: {status}"
        )
