"""Common error classes used across all layers.

Error Types:
- ValidationError: Invalid input or a violated business rule
- NotFoundError: Resource not found
- ConflictError: Uniqueness conflicts (duplicate email, duplicate registration)
- ExpiredError: Time-limited credential used after its deadline
- AuthenticationError: Caller identity could not be established
- AuthorizationError: Caller is known but not allowed

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(NotFoundError(
        code=ErrorCode.EVENT_NOT_FOUND,
        message="Event not found",
        resource_type="Event",
        resource_id=str(event_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation or business rule failure.

    Attributes:
        field: Field name that failed validation, if any.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Account, Event, Registration).
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Uniqueness conflict.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that carries the unique constraint.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExpiredError(DomainError):
    """Time-limited credential presented after expiry."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (bad credentials, missing session)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (wrong role, not the owner).

    Attributes:
        required_permission: Permission that was required.
    """

    required_permission: str | None = None
