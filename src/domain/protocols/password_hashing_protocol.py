"""Password hashing protocol for domain layer.

Infrastructure provides the concrete implementation (bcrypt).
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: src/infrastructure/security/bcrypt_password_service.py
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password (random salt per call)."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes).
        """
        ...
