#!/usr/bin/env python3
"""Setup script for the hotel listing API: migrate, then seed sample hotels."""

import asyncio
import logging
import sys
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from alembic import command
from alembic.config import Config
from sqlalchemy import func, select

from hotel_api.core.database import async_session_factory, close_db
from hotel_api.models import Hotel, Room

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SAMPLE_HOTELS = [
    {
        "name": "Driven Resort",
        "image": "https://images.unsplash.com/photo-1566073771259-6a8506099945",
        "rooms": [("101", 1), ("102", 2), ("103", 3), ("201", 2)],
    },
    {
        "name": "Driven Palace",
        "image": "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa",
        "rooms": [("1", 2), ("2", 2), ("3", 3)],
    },
    {
        "name": "Driven World",
        "image": "https://images.unsplash.com/photo-1542314831-068cd1dbfeeb",
        "rooms": [("A1", 1), ("A2", 1), ("B1", 3)],
    },
]


def run_migrations() -> None:
    """Apply Alembic migrations up to head."""
    logger.info("Running database migrations...")
    alembic_cfg = Config(str(server_dir / "db" / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(server_dir / "db" / "alembic"))
    command.upgrade(alembic_cfg, "head")
    logger.info("Database migrations completed")


async def create_sample_data() -> None:
    """Create sample hotels and rooms unless hotels already exist."""
    logger.info("Creating sample data...")

    async with async_session_factory() as db:
        try:
            existing = await db.execute(select(func.count()).select_from(Hotel))
            if existing.scalar_one() > 0:
                logger.info("Sample data already exists, skipping...")
                return

            for sample in SAMPLE_HOTELS:
                hotel = Hotel(
                    name=sample["name"],
                    image=sample["image"],
                    rooms=[Room(name=name, capacity=capacity) for name, capacity in sample["rooms"]],
                )
                db.add(hotel)

            await db.commit()
            logger.info("Sample data created successfully!")

        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to create sample data: {e}")
            raise
        finally:
            await close_db()


def main() -> None:
    """Main setup function."""
    logger.info("Starting hotel listing API setup...")

    # env.py drives its own event loop, so migrations run before ours starts
    run_migrations()
    asyncio.run(create_sample_data())

    logger.info("Setup completed successfully!")
    logger.info("You can now start the API server with: cd server && uvicorn hotel_api.main:app --reload")


if __name__ == "__main__":
    main()
