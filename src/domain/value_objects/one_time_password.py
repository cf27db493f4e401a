"""One-time password value object.

Immutable pair of a 6-digit code and its expiry instant. Codes are drawn
from ``secrets`` so every value in 000000-999999 is equally likely.
"""

import hmac
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

OTP_DIGITS = 6


@dataclass(frozen=True, slots=True)
class OneTimePassword:
    """Email verification code with an expiry.

    Attributes:
        code: Zero-padded 6-digit string.
        expires_at: Instant after which the code is no longer accepted.

    Example:
        >>> otp = OneTimePassword.generate(ttl=timedelta(minutes=10))
        >>> len(otp.code)
        6
        >>> otp.matches(otp.code)
        True
    """

    code: str
    expires_at: datetime

    @classmethod
    def generate(
        cls,
        ttl: timedelta,
        now: datetime | None = None,
    ) -> "OneTimePassword":
        """Draw a fresh code valid for ``ttl`` from ``now``."""
        issued_at = now or datetime.now(UTC)
        code = f"{secrets.randbelow(10**OTP_DIGITS):0{OTP_DIGITS}d}"
        return cls(code=code, expires_at=issued_at + ttl)

    def matches(self, candidate: str) -> bool:
        """Constant-time comparison against a submitted code."""
        return hmac.compare_digest(self.code.encode(), candidate.strip().encode())

    def is_expired(self, now: datetime | None = None) -> bool:
        """True once ``now`` is strictly past ``expires_at``."""
        current = now or datetime.now(UTC)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return current > expires_at
