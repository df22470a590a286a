#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the RepScale tables on the database named by DATABASE_URL
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from domain.models.database import init_database, engine

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")


def main() -> int:
    logger.info("=" * 60)
    logger.info("Initializing database at %s", engine.url.render_as_string(hide_password=True))
    logger.info("=" * 60)

    try:
        init_database()
    except SQLAlchemyError:
        logger.exception("Failed to initialize database")
        return 1

    tables = inspect(engine).get_table_names()
    logger.info("Created %d tables: %s", len(tables), ", ".join(sorted(tables)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
