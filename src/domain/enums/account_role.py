"""Account roles.

Only two roles exist: students browse and register, admins additionally
create events and check attendees in.

Usage:
    from src.domain.enums import AccountRole

    if auth.role == AccountRole.ADMIN:
        # Admin-only logic
"""

from enum import Enum


class AccountRole(str, Enum):
    """Account roles (string enum for easy serialization)."""

    STUDENT = "student"
    ADMIN = "admin"
