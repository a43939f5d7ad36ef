#!/usr/bin/env python3
"""
Migration Runner Script
Applies the SQL files under migrations/ in filename order.
"""

import logging
import sys
from pathlib import Path

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from thingful.database.connection import engine

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def run_migrations(migrations_dir: Path = MIGRATIONS_DIR) -> int:
    """Run every migration file and return how many were applied."""
    if not migrations_dir.exists():
        logger.error(f"Migrations directory not found: {migrations_dir}")
        return 0

    migration_files = sorted(migrations_dir.glob("*.sql"))
    if not migration_files:
        logger.warning("No migration files found")
        return 0

    logger.info(f"Found {len(migration_files)} migration files")

    with engine.connect() as conn:
        for migration_file in migration_files:
            logger.info(f"Running migration: {migration_file.name}")
            try:
                conn.execute(text(migration_file.read_text()))
                conn.commit()
            except SQLAlchemyError:
                conn.rollback()
                logger.exception(f"Migration {migration_file.name} failed")
                raise

    logger.info("All migrations completed successfully")
    return len(migration_files)


if __name__ == "__main__":
    try:
        run_migrations()
    except SQLAlchemyError:
        sys.exit(1)
