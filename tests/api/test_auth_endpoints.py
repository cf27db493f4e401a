"""API tests for the auth endpoints.

Tests cover:
- Register -> verify OTP -> session cookie -> /me -> logout
- Duplicate email, wrong OTP, resend
- Login for verified and unverified accounts
- 401 on protected routes without a session
- Request validation in Problem Details format
"""

import pytest
from fastapi.testclient import TestClient

from src.core.config import settings
from tests.utils.factories import make_account, make_unverified_account

AUTH = f"{settings.api_v1_prefix}/auth"


def _register(client: TestClient, **overrides):
    body = {
        "name": "Asha Rao",
        "email": "Asha@College.edu",
        "password": "campus123",
    }
    body.update(overrides)
    return client.post(f"{AUTH}/register", json=body)


@pytest.mark.api
class TestSignUpFlow:
    def test_register_verify_me_logout(self, client, email_service, store, session_store):
        """Full sign-up flow through the session cookie.

        Verifies that:
        - Register returns 201 and emails a 6-digit OTP
        - Verifying the OTP sets an httponly session cookie
        - /me resolves the cookie to the new account
        - Logout clears the cookie and closes the session
        """
        registered = _register(client)
        assert registered.status_code == 201
        assert registered.json()["email"] == "asha@college.edu"
        kind, recipient, fields = email_service.sent[-1]
        assert (kind, recipient) == ("otp", "asha@college.edu")

        verified = client.post(
            f"{AUTH}/verify-otp",
            json={"email": "asha@college.edu", "otp": fields["otp_code"]},
        )
        assert verified.status_code == 200
        assert verified.json()["user"]["role"] == "student"
        cookie = verified.headers["set-cookie"]
        assert f"{settings.session_cookie_name}=" in cookie
        assert "HttpOnly" in cookie

        me = client.get(f"{AUTH}/me")
        assert me.status_code == 200
        assert me.json()["user"]["email"] == "asha@college.edu"

        logged_out = client.post(f"{AUTH}/logout")
        assert logged_out.status_code == 200
        assert session_store.sessions == {}
        client.cookies.clear()
        assert client.get(f"{AUTH}/me").status_code == 401

    def test_register_admin_role(self, client, store):
        response = _register(client, email="dean@college.edu", role="admin")

        assert response.status_code == 201
        account = next(iter(store.accounts.values()))
        assert account.role.value == "admin"
        assert account.is_verified is False

    def test_duplicate_email_is_400(self, client):
        _register(client)

        response = _register(client, email="asha@college.edu")

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "email_already_exists"
        assert body["detail"] == "An account with this email already exists"

    def test_wrong_otp(self, client, store):
        account = make_unverified_account(code="042917", email="sam@college.edu")
        store.accounts[account.id] = account

        response = client.post(
            f"{AUTH}/verify-otp", json={"email": "sam@college.edu", "otp": "111111"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "otp_invalid"
        assert "set-cookie" not in response.headers

    def test_verify_unknown_email_is_404(self, client):
        response = client.post(
            f"{AUTH}/verify-otp", json={"email": "ghost@college.edu", "otp": "123456"}
        )

        assert response.status_code == 404
        assert response.json()["code"] == "account_not_found"

    def test_resend_replaces_code(self, client, store, email_service):
        account = make_unverified_account(code="042917", email="sam@college.edu")
        store.accounts[account.id] = account

        response = client.post(f"{AUTH}/resend-otp", json={"email": "sam@college.edu"})

        assert response.status_code == 200
        new_code = email_service.sent[-1][2]["otp_code"]
        assert store.accounts[account.id].pending_otp.code == new_code


@pytest.mark.api
class TestLogin:
    @pytest.fixture
    def verified(self, store, password_service):
        account = make_account(
            email="asha@college.edu",
            password_hash=password_service.hash_password("campus123"),
        )
        store.accounts[account.id] = account
        return account

    def test_login_sets_session(self, client, verified, session_store):
        response = client.post(
            f"{AUTH}/login", json={"email": "ASHA@college.edu", "password": "campus123"}
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Login successful"
        assert response.json()["user"]["id"] == str(verified.id)
        assert len(session_store.sessions) == 1

    def test_wrong_password_is_401(self, client, verified):
        response = client.post(
            f"{AUTH}/login", json={"email": "asha@college.edu", "password": "nope123"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "invalid_credentials"

    def test_unverified_account_is_401(self, client, store, password_service):
        account = make_unverified_account(
            email="new@college.edu",
            password_hash=password_service.hash_password("campus123"),
        )
        store.accounts[account.id] = account

        response = client.post(
            f"{AUTH}/login", json={"email": "new@college.edu", "password": "campus123"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "email_not_verified"

    def test_logout_without_session_succeeds(self, client):
        assert client.post(f"{AUTH}/logout").status_code == 200


@pytest.mark.api
class TestAuthErrors:
    def test_me_without_cookie_is_401(self, client):
        response = client.get(f"{AUTH}/me")

        assert response.status_code == 401
        body = response.json()
        assert body["detail"] == "Authentication required"
        assert body["code"] == "authentication_required"
        assert response.headers["X-Trace-Id"] == body["trace_id"]

    def test_unknown_session_is_401(self, client):
        client.cookies.set(settings.session_cookie_name, "forged")

        assert client.get(f"{AUTH}/me").status_code == 401

    def test_validation_errors_use_problem_details(self, client):
        response = _register(client, email="not-an-email", password="123")

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "validation_failed"
        assert {e["field"] for e in body["errors"]} == {"email", "password"}
