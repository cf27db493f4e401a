"""Authenticated caller identity.

Resolved from the session cookie by the presentation layer and passed
explicitly into every command and query that needs to know who is calling.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import AccountRole


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthContext:
    """Who is making the request.

    Attributes:
        account_id: Caller's account id.
        name: Caller's display name.
        email: Caller's email.
        role: Caller's role.
    """

    account_id: UUID
    name: str
    email: str
    role: AccountRole

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.ADMIN
