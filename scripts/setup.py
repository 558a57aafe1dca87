#!/usr/bin/env python3
"""Setup script for the tourism API: run migrations, then load sample catalog data."""

import asyncio
import logging
import sys
from pathlib import Path

# Add the server directory to the Python path
server_dir = Path(__file__).parent.parent / "server"
sys.path.insert(0, str(server_dir))

from alembic import command  # noqa: E402
from alembic.config import Config  # noqa: E402
from sqlalchemy import func, select  # noqa: E402

from tourism_api.core.database import async_session_factory, close_db  # noqa: E402
from tourism_api.models import Car, Tour, TourDay, TourDayItem  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def setup_database() -> None:
    """Bring the database schema up to the latest revision."""
    logger.info("Running database migrations...")

    alembic_cfg = Config(str(server_dir / "db" / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(server_dir / "db" / "alembic"))
    command.upgrade(alembic_cfg, "head")

    logger.info("Database migrations completed")


async def create_sample_data() -> None:
    """Create a sample tour with a two-day program and a car attached to it."""
    logger.info("Creating sample data...")

    async with async_session_factory() as db:
        try:
            # Check if sample data already exists
            existing_tours = await db.scalar(select(func.count()).select_from(Tour))
            if existing_tours:
                logger.info("Sample data already exists, skipping...")
                return

            tour = Tour(
                name="Issyk-Kul Discovery",
                price=420,
                description="Four days along the north and south shores of Issyk-Kul",
                city="Karakol",
                category="nature",
                date="2025-08-10",
                duration=4,
                max_people=16,
                images=["https://img.example.com/issyk-kul.jpg"],
            )
            db.add(tour)
            await db.flush()  # Get the tour ID

            db.add(Car(
                tour_id=tour.id,
                category="minivan",
                brand="Mercedes-Benz",
                model="Sprinter",
                price=150,
                capacity=16,
                drive="rwd",
                year=2019,
                places=17,
                transmission="manual",
                fuel_type="diesel",
                images=[],
            ))

            first_day = TourDay(tour_id=tour.id, day_number=1, title="Bishkek to Cholpon-Ata")
            second_day = TourDay(tour_id=tour.id, day_number=2, title="Jeti-Oguz gorge")
            db.add_all([first_day, second_day])
            await db.flush()

            db.add_all([
                TourDayItem(
                    day_id=first_day.id,
                    title="Transfer",
                    description="Drive along the Boom gorge to the northern shore",
                    images=[],
                    point_start="Bishkek",
                    point_end="Cholpon-Ata",
                    duration="4h",
                ),
                TourDayItem(
                    day_id=first_day.id,
                    title="Petroglyphs",
                    description="Open-air museum of Bronze Age rock carvings",
                    images=[],
                    location="Cholpon-Ata",
                    price=5,
                    complexity="easy",
                ),
                TourDayItem(
                    day_id=second_day.id,
                    title="Seven Bulls hike",
                    description="Walk to the red sandstone cliffs of Jeti-Oguz",
                    images=[],
                    location="Jeti-Oguz",
                    duration="3h",
                    complexity="medium",
                ),
            ])

            await db.commit()
            logger.info("Sample data created successfully!")

        except Exception as e:
            await db.rollback()
            logger.error(f"Failed to create sample data: {e}")
            raise
        finally:
            await close_db()


def main():
    """Main setup function."""
    logger.info("Starting tourism API setup...")

    # Migrations run their own event loop
    setup_database()

    asyncio.run(create_sample_data())

    logger.info("Setup completed successfully!")
    logger.info("You can now start the API server with: cd server && uvicorn tourism_api.main:app --reload")


if __name__ == "__main__":
    main()
