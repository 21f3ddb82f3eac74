"""Tests for logging setup."""

import gzip
import sys

import pytest
from loguru import logger

from app.models.student import Student
from settings.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.configure(patcher=None)
    logger.add(sys.stderr)


def read_log(log_dir):
    # closing the sink may gzip the file
    logger.remove()
    (path,) = log_dir.glob("elections_*.log*")
    if path.suffix == ".gz":
        return gzip.decompress(path.read_bytes()).decode()
    return path.read_text()


class TestFileSink:
    def test_project_records_tagged_with_layer(self, tmp_path):
        setup_logging(level="WARNING", to_file=True, log_dir=tmp_path / "logs")
        Student("Late", "S9", "CS", 5).vote()

        text = read_log(tmp_path / "logs")
        assert "| WARNING | models | app.models.student:" in text
        assert "Late cannot vote: Already voted or ineligible" in text

    def test_foreign_records_skipped(self, tmp_path):
        setup_logging(to_file=True, log_dir=tmp_path)
        logger.info("outside the project")

        assert "outside the project" not in read_log(tmp_path)

    def test_no_file_by_default(self, tmp_path):
        setup_logging(log_dir=tmp_path)
        Student("Late", "S9", "CS", 5).vote()
        assert list(tmp_path.iterdir()) == []
