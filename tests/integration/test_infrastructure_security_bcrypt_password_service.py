"""Integration tests for the bcrypt password hashing service.

Architecture:
- Tests against the real bcrypt library (no mocking)
- Cost factor 4 keeps the suite fast; the format check uses the configured cost
"""

import pytest

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService


@pytest.mark.integration
class TestBcryptPasswordServiceIntegration:
    """Uses the real bcrypt library. The service is stateless."""

    def test_hash_password_creates_bcrypt_hash(self):
        service = BcryptPasswordService(cost_factor=4)

        password_hash = service.hash_password("campus123")

        assert password_hash.startswith("$2b$04$")
        assert len(password_hash) == 60

    def test_hash_password_creates_unique_salts(self):
        service = BcryptPasswordService(cost_factor=4)

        assert service.hash_password("campus123") != service.hash_password("campus123")

    def test_verify_password_round_trip(self):
        service = BcryptPasswordService(cost_factor=4)
        password_hash = service.hash_password("Passw0rd with spaces & üñíçødé")

        assert service.verify_password("Passw0rd with spaces & üñíçødé", password_hash)
        assert not service.verify_password("passw0rd with spaces & üñíçødé", password_hash)

    @pytest.mark.parametrize("bad_hash", ["", "not-a-hash", "$2b$04$placeholder"])
    def test_verify_password_with_malformed_hash_returns_false(self, bad_hash):
        service = BcryptPasswordService(cost_factor=4)

        assert service.verify_password("campus123", bad_hash) is False

    @pytest.mark.parametrize("cost", [3, 21])
    def test_cost_factor_bounds(self, cost):
        with pytest.raises(ValueError, match="Cost factor"):
            BcryptPasswordService(cost_factor=cost)
