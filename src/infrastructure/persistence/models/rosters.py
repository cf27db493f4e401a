"""Roster association tables.

Both sides of a registration keep a denormalised cross-reference:
``event_attendees`` backs Event.registered_account_ids and
``account_event_roster`` backs Account.registered_event_ids. Composite
primary keys make each entry unique per pair.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Table, Uuid, func

from src.infrastructure.persistence.base import BaseModel

event_attendees = Table(
    "event_attendees",
    BaseModel.metadata,
    Column(
        "event_id",
        Uuid,
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "account_id",
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("added_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

account_event_roster = Table(
    "account_event_roster",
    BaseModel.metadata,
    Column(
        "account_id",
        Uuid,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "event_id",
        Uuid,
        ForeignKey("events.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("added_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)
