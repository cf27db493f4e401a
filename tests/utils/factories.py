"""Entity factories for tests.

Every factory fills in sensible defaults and accepts keyword overrides, so
tests only spell out the fields they care about.

Usage:
    admin = make_account(role=AccountRole.ADMIN)
    event = make_event(organiser_id=admin.id, max_capacity=1)
    auth = make_auth(admin)
"""

from datetime import UTC, date, datetime, timedelta
from typing import Any

from uuid_extensions import uuid7

from src.domain.entities import Account, Event, Registration
from src.domain.enums import AccountRole
from src.domain.value_objects import (
    AuthContext,
    OneTimePassword,
    RegistrationTokenPayload,
)

# Placeholder; tests that check passwords hash one with BcryptPasswordService.
PLACEHOLDER_HASH = "$2b$04$placeholder"


def make_account(**overrides: Any) -> Account:
    now = datetime.now(UTC)
    data: dict[str, Any] = {
        "id": uuid7(),
        "name": "Asha Rao",
        "email": f"student-{uuid7().hex[-8:]}@college.edu",
        "password_hash": PLACEHOLDER_HASH,
        "role": AccountRole.STUDENT,
        "is_verified": True,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return Account(**data)


def make_unverified_account(code: str = "042917", **overrides: Any) -> Account:
    """Account awaiting verification with a pending OTP valid for 10 minutes."""
    otp = OneTimePassword(code=code, expires_at=datetime.now(UTC) + timedelta(minutes=10))
    return make_account(is_verified=False, pending_otp=otp, **overrides)


def make_admin(**overrides: Any) -> Account:
    overrides.setdefault("name", "Dr. Sarah Johnson")
    return make_account(role=AccountRole.ADMIN, **overrides)


def make_event(**overrides: Any) -> Event:
    now = datetime.now(UTC)
    data: dict[str, Any] = {
        "id": uuid7(),
        "title": "Tech Innovation Summit",
        "description": "Talks and workshops on emerging technology.",
        "date": date(2026, 11, 15),
        "time": "9:00 AM - 5:00 PM",
        "venue": "Main Auditorium, Building A",
        "image_url": "https://images.unsplash.com/photo-1540575467063",
        "organiser_id": uuid7(),
        "max_capacity": 200,
        "created_at": now,
        "updated_at": now,
    }
    data.update(overrides)
    return Event(**data)


def make_registration(**overrides: Any) -> Registration:
    data: dict[str, Any] = {
        "id": uuid7(),
        "account_id": uuid7(),
        "event_id": uuid7(),
        "qr_code": "data:image/png;base64,iVBORw0KGgo=",
        "registered_at": datetime.now(UTC),
    }
    data.update(overrides)
    return Registration(**data)


def make_auth(account: Account) -> AuthContext:
    return AuthContext(
        account_id=account.id,
        name=account.name,
        email=account.email,
        role=account.role,
    )


def make_payload(
    registration: Registration,
    account: Account,
    event: Event,
) -> RegistrationTokenPayload:
    """Token payload matching ``registration`` (what its QR code encodes)."""
    return RegistrationTokenPayload(
        registration_id=registration.id,
        account_id=account.id,
        account_name=account.name,
        account_email=account.email,
        event_id=event.id,
        event_title=event.title,
        event_date=event.date,
        event_time=event.time,
        event_venue=event.venue,
        issued_at=registration.registered_at,
    )
