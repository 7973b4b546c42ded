"""
Initialize the Local Library database.

Creates the tables and optionally loads the sample catalog.

Usage:
    local-library-init-db [--drop-existing] [--sample-data] [--database-url URL]
"""

import argparse
import logging
import sys

from sqlalchemy import inspect

from .database.seed import seed_catalog
from .database.session import get_db_manager

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Initialize the Local Library database")
    parser.add_argument(
        "--drop-existing",
        action="store_true",
        help="Drop existing tables before creating new ones",
    )
    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Load the sample catalog after creating tables",
    )
    parser.add_argument(
        "--database-url",
        help="Override the configured database URL",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for database initialization."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    db_manager = get_db_manager(args.database_url)

    if not db_manager.verify_connection():
        logger.error("Failed to connect to database")
        return 1

    try:
        db_manager.init_database(drop_existing=args.drop_existing)

        if args.sample_data:
            logger.info("Loading sample data...")
            with db_manager.session_scope() as session:
                created = seed_catalog(session)
            logger.info("Loaded %d sample records", created)

        tables = sorted(inspect(db_manager.engine).get_table_names())
        logger.info("Tables: %s", ", ".join(tables))
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    finally:
        db_manager.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
