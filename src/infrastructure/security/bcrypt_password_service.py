"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Cost factor from settings (12 in production, ~250ms per hash)
    - Random salt per hash
    - Constant-time verification

Hashing is CPU-bound; handlers call it through ``asyncio.to_thread`` so the
event loop stays responsive.
"""

import bcrypt


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        password_service = get_password_service()
        password_hash = password_service.hash_password("campus-pass-1")
        password_service.verify_password("campus-pass-1", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor. Each +1 doubles computation time.
                Values below 10 are only meant for test suites.

        Raises:
            ValueError: If cost_factor is outside 4-20.
        """
        if cost_factor < 4:
            msg = "Cost factor must be at least 4"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...), 60 characters.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise. Malformed hashes
            return False instead of raising.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
