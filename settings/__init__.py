"""Application settings."""

import os
from pathlib import Path

# Database (":memory:" keeps each run isolated; point at a file to persist)
DB_PATH = os.getenv("ELECTION_DB_PATH", ":memory:")

# Logging
LOG_DIR = Path("logs")
LOG_LEVEL = os.getenv("ELECTION_LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("ELECTION_LOG_TO_FILE", "0") == "1"
