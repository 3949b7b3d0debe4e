"""Create the database and apply all migrations."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import get_settings
from app.database import run_migrations
from app.logging_config import configure_logging


logger = logging.getLogger("scripts.initial_setup")


def main() -> None:
    configure_logging()
    settings = get_settings()
    run_migrations()
    logger.info("Database initialised at %s", settings.database_url)


if __name__ == "__main__":
    main()
