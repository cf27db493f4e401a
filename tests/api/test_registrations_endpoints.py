"""API tests for the registration ledger endpoints.

Tests cover:
- Register, list, check, get and cancel for the signed-in account
- Duplicate and full-event rejections (400)
- Ownership checks on single registrations (403)
- QR check-in by the event organiser
"""

import pytest
from uuid_extensions import uuid7

from src.core.config import settings
from tests.utils.factories import make_account, make_admin, make_event
from tests.utils.fakes import FAKE_QR_CODE

REGISTRATIONS = f"{settings.api_v1_prefix}/registrations"


@pytest.fixture
def event(store, admin):
    event = make_event(organiser_id=admin.id, max_capacity=2)
    store.events[event.id] = event
    return event


@pytest.fixture
def register(client, sign_in, event):
    """Sign ``account`` in and register it for the event."""

    def _register(account):
        sign_in(account)
        return client.post(REGISTRATIONS, json={"event_id": str(event.id)})

    return _register


@pytest.mark.api
class TestRegisterForEvent:
    def test_register(self, register, student, event, store, notifications):
        """Register for an event.

        Verifies that:
        - The response embeds the QR code and event summary
        - Both rosters gain the pair
        - The confirmation email is handed to the background dispatcher
        """
        response = register(student)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Successfully registered for event"
        registration = body["registration"]
        assert registration["qr_code"] == FAKE_QR_CODE
        assert registration["attended"] is False
        assert registration["event"]["seats_remaining"] == 1
        assert store.events[event.id].registered_account_ids == [student.id]
        assert store.accounts[student.id].registered_event_ids == [event.id]
        notifications.dispatch_confirmation.assert_called_once()

    def test_duplicate_is_400(self, register, student, store):
        register(student)

        response = register(student)

        assert response.status_code == 400
        assert response.json()["code"] == "registration_already_exists"
        assert len(store.registrations) == 1

    def test_full_event_is_400(self, register, store, event, student):
        for _ in range(2):
            other = make_account()
            store.accounts[other.id] = other
            register(other)

        response = register(student)

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "event_full"
        assert len(store.events[event.id].registered_account_ids) == 2

    def test_unknown_event_is_404(self, client, sign_in, student):
        sign_in(student)

        response = client.post(REGISTRATIONS, json={"event_id": str(uuid7())})

        assert response.status_code == 404
        assert response.json()["code"] == "event_not_found"

    def test_anonymous_is_401(self, client, event):
        response = client.post(REGISTRATIONS, json={"event_id": str(event.id)})

        assert response.status_code == 401


@pytest.mark.api
class TestReadRegistrations:
    def test_my_registrations_and_check(self, client, register, student, event):
        registered = register(student).json()["registration"]

        mine = client.get(f"{REGISTRATIONS}/my-registrations")
        status = client.get(f"{REGISTRATIONS}/check/{event.id}")

        assert [r["id"] for r in mine.json()] == [registered["id"]]
        assert mine.json()[0]["event"]["title"] == event.title
        assert status.json()["is_registered"] is True
        assert status.json()["registration"]["id"] == registered["id"]

    def test_check_when_not_registered(self, client, sign_in, student, event):
        sign_in(student)

        response = client.get(f"{REGISTRATIONS}/check/{event.id}")

        assert response.json() == {"is_registered": False, "registration": None}

    def test_get_own_registration(self, client, register, student):
        registration_id = register(student).json()["registration"]["id"]

        response = client.get(f"{REGISTRATIONS}/{registration_id}")

        assert response.status_code == 200
        assert response.json()["account_id"] == str(student.id)

    def test_get_someone_elses_is_403(self, client, register, sign_in, student, store):
        registration_id = register(student).json()["registration"]["id"]
        other = make_account()
        store.accounts[other.id] = other
        sign_in(other)

        response = client.get(f"{REGISTRATIONS}/{registration_id}")

        assert response.status_code == 403
        assert response.json()["code"] == "resource_not_owned"

    def test_get_unknown_is_404(self, client, sign_in, student):
        sign_in(student)

        response = client.get(f"{REGISTRATIONS}/{uuid7()}")

        assert response.status_code == 404


@pytest.mark.api
class TestCancelRegistration:
    def test_cancel(self, client, register, student, event, store):
        registration_id = register(student).json()["registration"]["id"]

        response = client.delete(f"{REGISTRATIONS}/{registration_id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Registration cancelled successfully"
        assert store.registrations == {}
        assert store.events[event.id].registered_account_ids == []
        assert store.accounts[student.id].registered_event_ids == []

    def test_cancel_someone_elses_is_403(
        self, client, register, sign_in, student, store
    ):
        registration_id = register(student).json()["registration"]["id"]
        other = make_account()
        store.accounts[other.id] = other
        sign_in(other)

        response = client.delete(f"{REGISTRATIONS}/{registration_id}")

        assert response.status_code == 403
        assert len(store.registrations) == 1


@pytest.mark.api
class TestCheckIn:
    def test_organiser_checks_in_attendee(
        self, client, register, sign_in, student, admin, event, token_generator
    ):
        """Scan a QR code at the door.

        Verifies that:
        - The organiser can check in with the scanned payload
        - The response names the attendee and event
        - A second scan of the same code is rejected
        """
        registration_id = register(student).json()["registration"]["id"]
        payload = token_generator.payloads[0].to_json()
        sign_in(admin)

        response = client.post(
            f"{REGISTRATIONS}/check-ins",
            json={"payload": payload, "event_id": str(event.id)},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["registration_id"] == registration_id
        assert body["attendee_name"] == student.name
        assert body["event_title"] == event.title
        assert body["attended_at"] is not None

        again = client.post(f"{REGISTRATIONS}/check-ins", json={"payload": payload})
        assert again.status_code == 400
        assert again.json()["code"] == "already_checked_in"

    def test_student_cannot_check_in(
        self, client, register, student, token_generator
    ):
        register(student)

        response = client.post(
            f"{REGISTRATIONS}/check-ins",
            json={"payload": token_generator.payloads[0].to_json()},
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Admin access required"

    def test_other_admin_cannot_check_in(
        self, client, register, sign_in, student, store, token_generator
    ):
        register(student)
        other = make_admin(email="other@college.edu")
        store.accounts[other.id] = other
        sign_in(other)

        response = client.post(
            f"{REGISTRATIONS}/check-ins",
            json={"payload": token_generator.payloads[0].to_json()},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "resource_not_owned"

    def test_garbage_payload_is_400(self, client, sign_in, admin):
        sign_in(admin)

        response = client.post(
            f"{REGISTRATIONS}/check-ins", json={"payload": "not a registration"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "token_invalid"
