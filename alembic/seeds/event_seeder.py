"""Demo data seeder.

Creates a verified demo admin and the sample campus events it organises.
Idempotent: the admin is looked up by email and events by title, so only
missing rows are inserted.

Demo admin login: admin@college.edu / admin123
"""

from datetime import date
from uuid import UUID

import bcrypt
import structlog
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

logger = structlog.get_logger(__name__)

DEMO_ADMIN = {
    "name": "Dr. Sarah Johnson",
    "email": "admin@college.edu",
    "password": "admin123",
}

DEMO_EVENTS = [
    {
        "title": "Tech Innovation Summit 2025",
        "description": "Join us for an exciting summit featuring the latest "
        "innovations in technology. Industry leaders will share insights on AI, "
        "blockchain, and emerging technologies. Network with peers, attend "
        "hands-on workshops, and explore cutting-edge projects.",
        "event_date": date(2025, 1, 15),
        "event_time": "9:00 AM - 5:00 PM",
        "venue": "Main Auditorium, Building A",
        "image_url": "https://images.unsplash.com/photo-1540575467063-178a50c2df87?w=800",
        "max_capacity": 300,
    },
    {
        "title": "AI & Machine Learning Workshop",
        "description": "Dive deep into the world of Artificial Intelligence and "
        "Machine Learning. This hands-on workshop covers neural networks, deep "
        "learning frameworks, and real-world applications. Prerequisites: basic "
        "Python knowledge. Certificate of completion provided.",
        "event_date": date(2025, 1, 20),
        "event_time": "10:00 AM - 4:00 PM",
        "venue": "Computer Lab 203",
        "image_url": "https://images.unsplash.com/photo-1555255707-c07966088b7b?w=800",
        "max_capacity": 50,
    },
    {
        "title": "Annual Hackathon 2025",
        "description": "Build innovative solutions in 24 hours! Form teams, solve "
        "real-world problems, and compete for prizes. Mentors from top tech "
        "companies will guide you. Categories include Web Development, Mobile "
        "Apps, AI/ML, and IoT.",
        "event_date": date(2025, 2, 1),
        "event_time": "8:00 AM (Day 1) - 8:00 AM (Day 2)",
        "venue": "Innovation Hub, Campus Center",
        "image_url": "https://images.unsplash.com/photo-1504384308090-c894fdcc538d?w=800",
        "max_capacity": 200,
    },
    {
        "title": "Career Fair: Meet Top Employers",
        "description": "Connect with recruiters from established companies and "
        "exciting startups. Bring your resumes and dress professionally. Attend "
        "resume review sessions, mock interviews, and networking mixers.",
        "event_date": date(2025, 2, 10),
        "event_time": "11:00 AM - 6:00 PM",
        "venue": "Sports Complex & Gymnasium",
        "image_url": "https://images.unsplash.com/photo-1511632765486-a01980e01a18?w=800",
        "max_capacity": 500,
    },
    {
        "title": "Cultural Fest: Unity in Diversity",
        "description": "Celebrate the cultural diversity of our campus! Enjoy "
        "traditional performances, music, dance, food stalls from around the "
        "world, art exhibitions, and fashion shows. Free entry for all students.",
        "event_date": date(2025, 2, 25),
        "event_time": "2:00 PM - 10:00 PM",
        "venue": "Open Air Theatre & Food Court",
        "image_url": "https://images.unsplash.com/photo-1492684223066-81342ee5ff30?w=800",
        "max_capacity": 1000,
    },
]


async def _ensure_admin(session: AsyncSession) -> UUID:
    """Return the demo admin's id, inserting the account if missing."""
    result = await session.execute(
        text("SELECT id FROM accounts WHERE email = :email LIMIT 1"),
        {"email": DEMO_ADMIN["email"]},
    )
    existing = result.scalar_one_or_none()
    if existing is not None:
        logger.debug("demo_admin_exists", email=DEMO_ADMIN["email"])
        return existing

    admin_id = uuid7()
    password_hash = bcrypt.hashpw(
        DEMO_ADMIN["password"].encode("utf-8"), bcrypt.gensalt()
    ).decode("utf-8")

    await session.execute(
        text("""
            INSERT INTO accounts (
                id, name, email, password_hash, role, is_verified,
                created_at, updated_at
            )
            VALUES (
                :id, :name, :email, :password_hash, 'admin', TRUE,
                NOW(), NOW()
            )
        """),
        {
            "id": admin_id,
            "name": DEMO_ADMIN["name"],
            "email": DEMO_ADMIN["email"],
            "password_hash": password_hash,
        },
    )
    logger.info("demo_admin_seeded", email=DEMO_ADMIN["email"], id=str(admin_id))
    return admin_id


async def seed_demo_events(session: AsyncSession) -> None:
    """Seed the demo admin and sample events.

    Args:
        session: Async database session.
    """
    admin_id = await _ensure_admin(session)

    seeded_count = 0
    skipped_count = 0

    for event_data in DEMO_EVENTS:
        result = await session.execute(
            text("SELECT 1 FROM events WHERE title = :title LIMIT 1"),
            {"title": event_data["title"]},
        )
        if result.fetchone() is not None:
            skipped_count += 1
            logger.debug("demo_event_exists", title=event_data["title"])
            continue

        event_id = uuid7()
        await session.execute(
            text("""
                INSERT INTO events (
                    id, title, description, event_date, event_time, venue,
                    image_url, organiser_id, max_capacity,
                    created_at, updated_at
                )
                VALUES (
                    :id, :title, :description, :event_date, :event_time, :venue,
                    :image_url, :organiser_id, :max_capacity,
                    NOW(), NOW()
                )
            """),
            {"id": event_id, "organiser_id": admin_id, **event_data},
        )
        seeded_count += 1
        logger.info("demo_event_seeded", title=event_data["title"], id=str(event_id))

    logger.info(
        "demo_event_seeding_complete",
        seeded=seeded_count,
        skipped=skipped_count,
        total=len(DEMO_EVENTS),
    )
