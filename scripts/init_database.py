#!/usr/bin/env python3
"""Database initialization script for the queue monitor.

This script:
1. Creates a fresh database with the queue_monitor table
2. Adds sample job execution records (optional)
3. Validates the schema

Usage:
    python scripts/init_database.py [--force] [--sample-data]
"""

import argparse
import logging
import random
import sys
import uuid
from datetime import datetime, timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

from src.queue_monitor.config import settings
from src.queue_monitor.database.session import get_session_factory, init_engine
from src.queue_monitor.repositories.monitor import MonitorRepository

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SAMPLE_QUEUES = ["default", "emails", "reports"]
SAMPLE_JOBS = ["SendWelcomeEmail", "BuildMonthlyReport", "SyncInventory", "PruneSessions"]


class DatabaseInitializer:
    """Manages initialization of a fresh queue monitor database.

    Attributes:
        db_path: Path to database file
        force: If True, overwrite existing database
        sample_data: If True, add sample job records
    """

    def __init__(self, db_path: Path, force: bool = False, sample_data: bool = False):
        self.db_path = db_path
        self.force = force
        self.sample_data = sample_data

    def check_database_exists(self) -> bool:
        return self.db_path.exists()

    def remove_existing_database(self) -> None:
        """Remove existing database file."""
        if self.db_path.exists():
            logger.warning(f"Removing existing database: {self.db_path}")
            self.db_path.unlink()

    def create_schema(self) -> None:
        """Create the database schema by running Alembic migrations to head."""
        logger.info("Running database migrations...")
        alembic_ini = Path(__file__).parent.parent / "alembic.ini"
        command.upgrade(Config(str(alembic_ini)), "head")
        logger.info("Database schema created successfully")

    def create_sample_records(self, days: int = 7, per_day: int = 20) -> int:
        """Create finished and running job records spread over recent days.

        Args:
            days: Number of days of history to generate
            per_day: Records per day

        Returns:
            Number of records created
        """
        logger.info("Creating sample job records...")

        rng = random.Random(42)
        now = datetime.utcnow()
        db = get_session_factory()()
        repo = MonitorRepository(db)
        created = 0

        try:
            for day in range(days):
                for _ in range(per_day):
                    started_at = now - timedelta(days=day, seconds=rng.randint(60, 86_000))
                    record = repo.create_record(
                        queue=rng.choice(SAMPLE_QUEUES),
                        started_at=started_at,
                        job_id=str(uuid.uuid4()),
                        name=rng.choice(SAMPLE_JOBS),
                    )
                    created += 1
                    # Leave a few of today's jobs running
                    if day == 0 and rng.random() < 0.1:
                        continue
                    failed = rng.random() < 0.15
                    repo.finish_record(
                        record.id,
                        finished_at=started_at + timedelta(seconds=rng.uniform(0.5, 120.0)),
                        failed=failed,
                        exception_message="Simulated failure" if failed else None,
                    )
        finally:
            db.close()

        logger.info(f"Created {created} sample job records")
        return created

    def validate_schema(self) -> bool:
        """Validate that the queue_monitor table and its indexes exist.

        Returns:
            True if validation passes, False otherwise
        """
        logger.info("Validating database schema...")

        inspector = inspect(init_engine())

        if "queue_monitor" not in inspector.get_table_names():
            logger.error("✗ Table 'queue_monitor' missing")
            return False
        logger.info("✓ Table 'queue_monitor' exists")

        index_names = {idx["name"] for idx in inspector.get_indexes("queue_monitor")}
        missing = {"ix_queue_monitor_queue", "ix_queue_monitor_started_at"} - index_names
        for name in sorted(missing):
            logger.error(f"✗ Index '{name}' missing")

        return not missing

    def run(self) -> bool:
        """Run the complete initialization process.

        Returns:
            True if initialization succeeded, False otherwise
        """
        logger.info("=" * 60)
        logger.info("Queue Monitor Database Initialization")
        logger.info("=" * 60)

        if self.check_database_exists():
            if self.force:
                logger.warning("Database exists. Force mode enabled - will overwrite.")
                self.remove_existing_database()
            else:
                logger.error(
                    "Database already exists. Use --force to overwrite, "
                    "or remove the database manually."
                )
                return False

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Database location: {self.db_path}")

        try:
            self.create_schema()
        except Exception as e:
            logger.error(f"Schema creation failed: {e}")
            return False

        if self.sample_data:
            try:
                self.create_sample_records()
            except Exception as e:
                logger.error(f"Sample record creation failed: {e}")
                return False

        if not self.validate_schema():
            logger.error("Schema validation failed")
            return False

        logger.info("=" * 60)
        logger.info("DATABASE INITIALIZED SUCCESSFULLY")
        logger.info(f"Location: {self.db_path}")
        logger.info("=" * 60)
        return True


def main():
    """Main entry point for initialization script.

    Example:
        $ python scripts/init_database.py
        $ python scripts/init_database.py --force --sample-data
    """
    parser = argparse.ArgumentParser(
        description="Initialize a fresh queue monitor database"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing database if present"
    )
    parser.add_argument(
        "--sample-data",
        action="store_true",
        help="Add a week of sample job records"
    )

    args = parser.parse_args()

    initializer = DatabaseInitializer(
        db_path=settings.get_database_path(),
        force=args.force,
        sample_data=args.sample_data
    )

    success = initializer.run()
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
