"""Loguru sinks for the election demo."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR

PACKAGES = ("app", "cli")

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{extra[layer]}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[layer]} | {name}:{line} | {message}"


def _tag_layer(record) -> None:
    # app.services.student -> services, cli.demo -> cli
    parts = (record["name"] or "").split(".")
    record["extra"].setdefault("layer", parts[1] if parts[0] == "app" and len(parts) > 1 else parts[0])


def _from_project(record) -> bool:
    return (record["name"] or "").split(".")[0] in PACKAGES


def setup_logging(level: str = "INFO", to_file: bool = False, log_dir: Path = LOG_DIR):
    """Console sink at `level`; with `to_file`, a daily DEBUG file of project records only."""
    logger.remove()
    logger.configure(patcher=_tag_layer)

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "elections_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            filter=_from_project,
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", log_dir)

    return logger
