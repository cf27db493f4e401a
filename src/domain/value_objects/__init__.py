"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.auth_context import AuthContext
from src.domain.value_objects.one_time_password import OneTimePassword
from src.domain.value_objects.registration_token_payload import (
    RegistrationTokenPayload,
)

__all__ = [
    "AuthContext",
    "OneTimePassword",
    "RegistrationTokenPayload",
]
