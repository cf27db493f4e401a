"""Event database model."""

from datetime import date
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class EventModel(BaseMutableModel):
    """Event catalog entry.

    Fields:
        title, description, venue, image_url: Display data
        event_date: Calendar date
        event_time: Free-form display time
        organiser_id: Admin account that created the event
        max_capacity: Registration limit

    The roster lives in the ``event_attendees`` table.
    """

    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    event_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    event_time: Mapped[str] = mapped_column(String(100), nullable=False)
    venue: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)

    organiser_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=200)
