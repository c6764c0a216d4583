#!/usr/bin/env python3

"""
Command-line tool for preparing a calendar database.

This script handles:
- Creating the schema and reference rows (houses, admin user)
- Filling the calendar with demo events around a chosen day
- Clearing all events

For usage information, run:
    python seed_demo_data.py --help

Common use cases:
    # Create tables and load a month of demo events around today
    python seed_demo_data.py seed

    # Reproducible demo data around a fixed day
    python seed_demo_data.py seed --today 2026-10-19 --seed 42

    # Start over
    python seed_demo_data.py clear
"""

import argparse
import logging
import random
import sys
from datetime import date
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from orgcal.db import Database, DatabaseConfig, DatabaseError, db
from orgcal.models import Event
from orgcal.repositories import EventRepository
from orgcal.seed import create_demo_data
from orgcal.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def seed(database: Database, today: date, rng_seed=None) -> int:
    """Initialize the database and store the demo events."""
    database.init_db()
    rng = random.Random(rng_seed)
    return create_demo_data(EventRepository(database), today=today, rng=rng)


def clear(database: Database) -> int:
    """Delete every event, keeping houses and users."""
    database.ensure_tables_exist()
    with database.session() as session:
        count = session.query(Event).delete()
    logger.info(f"Cleared {count} events from database")
    return count


def main():
    """Main entry point for the script"""
    parser = argparse.ArgumentParser(
        description='Organization calendar database tool',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--db', dest='sqlite_path',
                        help='SQLite file to use instead of the configured database')
    parser.add_argument('--debug', action='store_true',
                        help='Show debug information')

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    seed_parser = subparsers.add_parser('seed', help='Create tables and load demo events')
    seed_parser.add_argument('--today', type=date.fromisoformat, default=None,
                             help='Day to build the demo month around (YYYY-MM-DD, default: today)')
    seed_parser.add_argument('--seed', type=int, default=None,
                             help='Random seed for reproducible demo data')

    subparsers.add_parser('clear', help='Delete all events')

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    if not args.command:
        parser.print_help()
        return

    database = Database(DatabaseConfig(sqlite_path=args.sqlite_path)) if args.sqlite_path else db

    try:
        if args.command == 'seed':
            count = seed(database, args.today or date.today(), args.seed)
            logger.info(f"Seeded {count} demo events")
        elif args.command == 'clear':
            clear(database)
    except DatabaseError as e:
        logger.error(f"Database operation failed: {e}")
        sys.exit(1)
    finally:
        database.dispose()

if __name__ == "__main__":
    main()
