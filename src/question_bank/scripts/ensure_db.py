"""Utility script to create or reset the configured database schema.

Production databases are managed through Alembic; this is for local
development and throwaway SQLite files.
"""
from __future__ import annotations

import argparse
import logging
import sys

from question_bank.core.logging_config import configure_logging
from question_bank.core.settings import settings
from question_bank.db.session import create_tables, drop_tables

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the Question Bank tables.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Drop every table before creating it again (destroys data).",
    )
    args = parser.parse_args(argv)

    configure_logging()
    if args.reset:
        logger.warning("Dropping all tables on %s", settings.effective_database_url)
        drop_tables()
    create_tables()
    logger.info("Schema ready on %s", settings.effective_database_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
