#!/usr/bin/env python3
"""
Database setup script.
Creates and drops the LightBnB tables and seeds them with sample data.
"""

import asyncio
import sys
import argparse
import logging
from typing import Dict

from lightbnb.config import settings
from lightbnb.database import create_tables, drop_tables, get_session_factory, test_database_connection, close_db_connection
from lightbnb.data import load_sample_users, load_sample_properties
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
import lightbnb.models  # noqa: F401  registers every table on Base.metadata

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class MigrationManager:
    """Manages schema creation and sample data for local databases."""

    async def create(self) -> None:
        """Create all tables that do not exist yet."""
        await create_tables()

    async def drop(self) -> None:
        """Drop all tables (development and testing only)."""
        await drop_tables()

    async def seed_database(self) -> None:
        """Insert the sample users and their properties."""
        logger.info("Seeding database with sample data")

        async with get_session_factory()() as session:
            user_repo = UserRepository(session)
            property_repo = PropertyRepository(session)

            # Fixture ids -> generated ids
            user_ids: Dict[int, int] = {}

            for fixture_id, user_data in load_sample_users().items():
                existing_user = await user_repo.get_user_with_email(user_data["email"])
                if existing_user:
                    logger.info(f"User {existing_user.email} already exists, skipping")
                    user_ids[fixture_id] = existing_user.id
                    continue

                created_user = await user_repo.add_user(user_data)
                user_ids[fixture_id] = created_user.id

            for fixture_id, property_data in load_sample_properties().items():
                owner_id = user_ids.get(property_data["owner_id"])
                if owner_id is None:
                    logger.warning(f"Skipping sample property {fixture_id}: unknown owner {property_data['owner_id']}")
                    continue

                await property_repo.add_property({**property_data, "owner_id": owner_id})

        logger.info("Database seeded successfully")

    async def reset_database(self) -> None:
        """Drop, recreate and reseed every table."""
        logger.warning("Resetting database - all data will be lost!")

        if not settings.is_development and not settings.is_testing:
            raise RuntimeError("Database reset is only allowed in development or test mode")

        await drop_tables()
        await create_tables()
        await self.seed_database()

        logger.info("Database reset completed")

    async def check(self) -> bool:
        """Report whether the database is reachable."""
        return await test_database_connection()


async def run(command: str, manager: MigrationManager) -> bool:
    """Run one command and release the engine afterwards."""
    try:
        if command == "create":
            await manager.create()
        elif command == "drop":
            await manager.drop()
        elif command == "seed":
            await manager.seed_database()
        elif command == "reset":
            await manager.reset_database()
        elif command == "check":
            return await manager.check()
        return True
    finally:
        await close_db_connection()


def main():
    """Main CLI interface for database setup."""
    parser = argparse.ArgumentParser(description="LightBnB database setup")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create", help="Create all tables")
    subparsers.add_parser("drop", help="Drop all tables (development only)")
    subparsers.add_parser("seed", help="Seed database with sample users and properties")

    reset_parser = subparsers.add_parser("reset", help="Drop, recreate and seed (development only)")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    subparsers.add_parser("check", help="Check database connectivity")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    if args.command == "reset" and not args.confirm:
        print("Database reset requires --confirm flag")
        return

    try:
        ok = asyncio.run(run(args.command, MigrationManager()))
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)

    if not ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
