"""Process-wide logging setup for the API, scripts and tests."""
from __future__ import annotations

import logging
from logging.config import dictConfig
from pathlib import Path

from pydantic import ValidationError

from app.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Third-party loggers that are too chatty at DEBUG.
QUIET_LOGGERS = ("sqlalchemy.engine", "alembic.runtime.migration", "httpx")

_configured = False


def build_logging_config(log_file: Path, level: str) -> dict:
    """dictConfig payload: console plus one log file, both at ``level``."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"planner": {"format": LOG_FORMAT}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "planner",
                "level": level,
            },
            "file": {
                "class": "logging.FileHandler",
                "filename": str(log_file),
                "encoding": "utf-8",
                "formatter": "planner",
                "level": level,
            },
        },
        "loggers": {name: {"level": "WARNING"} for name in QUIET_LOGGERS},
        "root": {"level": level, "handlers": ["console", "file"]},
    }


def configure_logging() -> None:
    """Install handlers once; later calls are no-ops."""

    global _configured
    if _configured:
        return

    try:
        settings = get_settings()
        log_file = settings.log_file
        level = settings.log_level
    except ValidationError:
        # Bad environment (e.g. LOG_LEVEL=loud); log with defaults so the error itself is visible.
        log_file = Path("logs") / "planner.log"
        level = "INFO"
    log_file.parent.mkdir(parents=True, exist_ok=True)

    dictConfig(build_logging_config(log_file, level))
    logging.getLogger(__name__).debug("Logging configured | level=%s file=%s", level, log_file)
    _configured = True
