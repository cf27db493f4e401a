"""Unit tests for Account, Event and Registration entities.

Tests cover:
- Account verification lifecycle (replace OTP, mark verified)
- Event capacity gate and seat arithmetic
- Event partial updates
- Registration ownership and check-in
"""

from datetime import UTC, date, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.enums import AccountRole
from src.domain.value_objects import OneTimePassword
from tests.utils.factories import (
    make_account,
    make_admin,
    make_event,
    make_registration,
    make_unverified_account,
)


@pytest.mark.unit
class TestAccount:
    def test_student_is_not_admin(self):
        assert make_account().is_admin is False
        assert make_admin().is_admin is True
        assert make_admin().role is AccountRole.ADMIN

    def test_replace_otp_discards_previous_code(self):
        account = make_unverified_account(code="111111")
        new_otp = OneTimePassword(
            code="222222", expires_at=datetime.now(UTC) + timedelta(minutes=10)
        )

        account.replace_otp(new_otp)

        assert account.pending_otp == new_otp
        assert not account.pending_otp.matches("111111")

    def test_mark_verified_clears_pending_otp(self):
        account = make_unverified_account()
        before = account.updated_at

        account.mark_verified()

        assert account.is_verified is True
        assert account.pending_otp is None
        assert account.updated_at >= before


@pytest.mark.unit
class TestEventCapacity:
    def test_empty_event_is_not_full(self):
        event = make_event(max_capacity=2)

        assert event.registered_count == 0
        assert event.seats_remaining == 2
        assert event.is_full() is False

    def test_event_is_full_at_capacity(self):
        event = make_event(max_capacity=2, registered_account_ids=[uuid7(), uuid7()])

        assert event.is_full() is True
        assert event.seats_remaining == 0

    def test_overshoot_reports_zero_seats_remaining(self):
        """Roster above capacity (lowered capacity or a race) clamps to zero."""
        event = make_event(
            max_capacity=1, registered_account_ids=[uuid7(), uuid7(), uuid7()]
        )

        assert event.is_full() is True
        assert event.seats_remaining == 0

    def test_is_organised_by(self):
        organiser_id = uuid7()
        event = make_event(organiser_id=organiser_id)

        assert event.is_organised_by(organiser_id)
        assert not event.is_organised_by(uuid7())


@pytest.mark.unit
class TestEventApplyChanges:
    def test_none_leaves_fields_unchanged(self):
        event = make_event(title="Original", venue="Hall A")

        event.apply_changes(title=None, venue="Hall B")

        assert event.title == "Original"
        assert event.venue == "Hall B"

    def test_updates_every_given_field(self):
        event = make_event()

        event.apply_changes(
            title="Career Fair",
            description="Meet employers",
            date=date(2027, 2, 10),
            time="11:00 AM - 6:00 PM",
            venue="Sports Complex",
            image_url="/media/fair.png",
            max_capacity=500,
        )

        assert (event.title, event.venue, event.max_capacity) == (
            "Career Fair",
            "Sports Complex",
            500,
        )
        assert event.date == date(2027, 2, 10)
        assert event.image_url == "/media/fair.png"

    def test_update_keeps_roster(self):
        attendee = uuid7()
        event = make_event(registered_account_ids=[attendee])

        event.apply_changes(max_capacity=1)

        assert event.registered_account_ids == [attendee]


@pytest.mark.unit
class TestRegistration:
    def test_is_owned_by(self):
        account_id = uuid7()
        registration = make_registration(account_id=account_id)

        assert registration.is_owned_by(account_id)
        assert not registration.is_owned_by(uuid7())

    def test_new_registration_is_not_attended(self):
        registration = make_registration()

        assert registration.attended is False
        assert registration.attended_at is None

    def test_mark_attended_with_explicit_time(self):
        registration = make_registration()
        at = datetime(2026, 11, 15, 9, 5, tzinfo=UTC)

        registration.mark_attended(at=at)

        assert registration.attended is True
        assert registration.attended_at == at

    def test_mark_attended_defaults_to_now(self):
        registration = make_registration()
        before = datetime.now(UTC)

        registration.mark_attended()

        assert registration.attended_at is not None
        assert registration.attended_at >= before
