"""Database seeding package.

Provides idempotent seeders that run automatically after Alembic migrations.
Every seeder checks for existing rows first, so repeated runs are safe.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from seeds.event_seeder import seed_demo_events

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run all database seeders. Called after Alembic migrations.

    Args:
        session: Async database session.
    """
    logger.info("seeding_started")

    await seed_demo_events(session)

    logger.info("seeding_completed")


__all__ = ["run_all_seeders", "seed_demo_events"]
